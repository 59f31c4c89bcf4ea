"""Bootstrap the gateway session and the message bus."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from functools import partial
from types import TracebackType
from typing import TYPE_CHECKING, Any

from utopia_gateway.adapters.console_presenter import RichPresenter
from utopia_gateway.adapters.gateway import GrpcGateway
from utopia_gateway.adapters.identity import load_identity, load_signer
from utopia_gateway.adapters.transport import new_grpc_connection
from utopia_gateway.domain.value_objects import Deadlines, StepResult
from utopia_gateway.service_layer.handlers import STEP_HANDLERS
from utopia_gateway.service_layer.messagebus import MessageBus
from utopia_gateway.service_layer.script import (
    ScriptFixtures,
    demo_script,
    validate_script,
)

if TYPE_CHECKING:
    from rich.console import Console

    from utopia_gateway.config import GatewaySettings
    from utopia_gateway.interfaces.gateway import Contract, Gateway
    from utopia_gateway.interfaces.presenter import Presenter
    from utopia_gateway.service_layer.steps import Step

logger = logging.getLogger(__name__)


class Session:
    """A gateway session together with the channel it runs over.

    Closing releases the gateway first, then the channel, and happens once no
    matter how many times `close` is called.
    """

    def __init__(self, gateway: Gateway, channel: Any) -> None:
        self.gateway = gateway
        self.channel = channel
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the session has been released."""
        return self._closed

    def contract(self, channel_name: str, chaincode_name: str) -> Contract:
        """Bind a contract on a ledger channel (no network call)."""
        return self.gateway.get_network(channel_name).get_contract(chaincode_name)

    def close(self) -> None:
        """Release the gateway and the channel."""
        if self._closed:
            return
        self._closed = True
        try:
            self.gateway.close()
        finally:
            self.channel.close()
            logger.info("Session closed")

    def __enter__(self) -> Session:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def open_session(
    settings: GatewaySettings,
    deadlines: Deadlines = Deadlines(),
    channel_factory: Callable[[GatewaySettings], Any] = new_grpc_connection,
) -> Session:
    """Load credentials, open the channel and start a gateway session.

    Credentials are loaded before the channel is opened, so a credential
    failure never leaves a channel behind.

    Args:
        settings: Connection parameters.
        deadlines: Per-call-kind deadlines.
        channel_factory: Builds the channel. Defaults to the TLS gRPC channel.

    Raises:
        ConfigError: If credential files are missing or ambiguous.
        CryptoError: If credential material is malformed.
    """
    identity = load_identity(settings)
    signer = load_signer(settings)
    channel = channel_factory(settings)
    gateway = GrpcGateway(channel, identity, signer, deadlines)
    logger.info("Connected to %s as %s", settings.peer_endpoint, settings.msp_id)
    return Session(gateway, channel)


def build_presenter(console: Console | None = None) -> Presenter:
    """Build the console presenter (stdout unless a console is given)."""
    return RichPresenter(console)


def build_message_bus(
    contract: Contract,
    presenter: Presenter,
    step_handlers: dict[type[Step], Callable[..., StepResult]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"contract": contract, "presenter": presenter}
    injected_step_handlers = {
        step_type: inject_dependencies(handler, dependencies)
        for step_type, handler in step_handlers.items()
    }
    return MessageBus(step_handlers=injected_step_handlers)


def run_demo(
    settings: GatewaySettings,
    presenter: Presenter,
    fixtures: ScriptFixtures | None = None,
    session_factory: Callable[[GatewaySettings], Session] | None = None,
) -> list[StepResult]:
    """Run the demo script against the configured contract.

    The script is validated before connecting. The session is closed whether
    the script completes or a step fails; a failure aborts the remaining steps
    and propagates.

    Args:
        settings: Connection parameters.
        presenter: Receives progress and results.
        fixtures: Literal arguments for the script.
        session_factory: Opens the session. Defaults to `open_session`.

    Returns:
        The results of every step, in order.
    """
    script = demo_script(fixtures)
    validate_script(script)

    factory = session_factory or open_session
    with factory(settings) as session:
        contract = session.contract(settings.channel_name, settings.chaincode_name)
        bus = build_message_bus(contract, presenter, STEP_HANDLERS)
        return bus.run(script)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
