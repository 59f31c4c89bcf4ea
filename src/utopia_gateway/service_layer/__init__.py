"""Service layer for UTOPIA GATEWAY.

Implements the demo run: step descriptors, the demo script, the step handlers
and the message bus that executes a script in order. Talks to the ledger only
through the `Contract` port and reports through the `Presenter` port.

Dependency rule: may import `utopia_gateway.domain` and
`utopia_gateway.interfaces`, but not `utopia_gateway.adapters` or
`utopia_gateway.entrypoints`.
"""
