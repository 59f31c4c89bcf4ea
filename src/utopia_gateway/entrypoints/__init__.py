"""Entry points for UTOPIA GATEWAY.

Entry points translate the outside world (command line, environment) into an
explicit `GatewaySettings` record and hand it to `utopia_gateway.bootstrap`.
"""
