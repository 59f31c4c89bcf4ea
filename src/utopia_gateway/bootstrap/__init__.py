"""Bootstrap (composition root) for UTOPIA GATEWAY.

Assembles the application at runtime: loads the identity and signer, opens
the gRPC channel, wraps them in a gateway session, binds the contract, and
wires the step handlers into the message bus with their dependencies.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `utopia_gateway.adapters`,
  `utopia_gateway.service_layer`, `utopia_gateway.interfaces`,
  `utopia_gateway.domain`, and `utopia_gateway.config`.
- Inner layers must not import `utopia_gateway.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import (
    Session,
    build_message_bus,
    build_presenter,
    open_session,
    run_demo,
)

__all__ = [
    "Session",
    "build_message_bus",
    "build_presenter",
    "open_session",
    "run_demo",
]
