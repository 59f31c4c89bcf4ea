"""Message bus that executes script steps in order."""

import logging
from collections.abc import Callable, Sequence

from utopia_gateway.domain.value_objects import StepResult

from .script import validate_script
from .steps import Step

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForStep(LookupError):
    """Exception raised when no handler is found for a step."""

    def __init__(self, step: Step) -> None:
        super().__init__(f"No handler found for step {type(step).__name__}")


class MessageBus:
    """A simple message bus for executing steps.

    The message bus routes each step to the handler registered for its type and
    runs whole scripts strictly in order. A failing step aborts the script:
    the exception is logged and re-raised, and no later step runs.

    Args:
        step_handlers: A mapping of step types to their handlers.
            Handlers are callables that accept a single step argument and
            return a `StepResult`. Dependencies (contract, presenter) are
            injected by the bootstrap.
    """

    def __init__(
        self,
        step_handlers: dict[type[Step], Callable[..., StepResult]],
    ) -> None:
        self._step_handlers = step_handlers

    def handle(self, step: Step) -> StepResult:
        """Handle a step by dispatching it to the appropriate handler.

        Args:
            step: The step to handle.

        Returns:
            StepResult: What the handler returned.

        Raises:
            NoHandlerForStep: If no handler is found for the step type.
            Exception: If the handler raises an exception.
        """

        if handler := self._step_handlers.get(type(step)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling step %s with handler %s", step.label, handler_name)
            try:
                return handler(step)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling step %s with handler %s",
                    step.label,
                    handler_name,
                )
                raise
        logger.error("No handler found for step %s", type(step).__name__)
        raise NoHandlerForStep(step)

    def run(self, script: Sequence[Step]) -> list[StepResult]:
        """Validate a script, then handle its steps one after another.

        Raises:
            ScriptError: If the script is inconsistent; nothing runs.
        """
        validate_script(script)
        results: list[StepResult] = []
        for step in script:
            results.append(self.handle(step))
        logger.info("Script finished: %d steps", len(results))
        return results

    @staticmethod
    def _get_handler_name(fn: Callable[..., StepResult]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
