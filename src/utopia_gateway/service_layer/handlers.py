"""Service layer handlers: one per step kind."""

import logging
from collections.abc import Callable

from utopia_gateway.domain.value_objects import StepResult
from utopia_gateway.interfaces.gateway import Contract
from utopia_gateway.interfaces.presenter import Presenter

from . import steps

logger = logging.getLogger(__name__)


def evaluate_transaction(
    step: steps.Evaluate, contract: Contract, presenter: Presenter
) -> StepResult:
    """Evaluate a read-only transaction and present its decoded result."""

    presenter.step_started("evaluate", step.transaction, step.description)
    payload = contract.evaluate_transaction(step.transaction, *step.args)
    result = StepResult(step.label, step.transaction, step.kind, payload)
    logger.debug("%s returned %d bytes", step.label, len(payload))
    presenter.step_finished(result)
    return result


def submit_transaction(
    step: steps.Submit, contract: Contract, presenter: Presenter
) -> StepResult:
    """Submit a transaction, wait for commit, and present the response."""

    presenter.step_started("submit", step.transaction, step.description)
    payload = contract.submit_transaction(step.transaction, *step.args)
    result = StepResult(step.label, step.transaction, step.kind, payload)
    logger.info("%s committed (%s)", step.label, step.transaction)
    presenter.step_finished(result)
    return result


STEP_HANDLERS: dict[type[steps.Step], Callable[..., StepResult]] = {
    steps.Evaluate: evaluate_transaction,
    steps.Submit: submit_transaction,
}
