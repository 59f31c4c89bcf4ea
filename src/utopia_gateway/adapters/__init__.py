"""Adapters (infrastructure) for UTOPIA GATEWAY.

Provide concrete implementations of the ports in `utopia_gateway.interfaces`:
credential loading and signers (cryptography), the TLS gRPC channel, the
Fabric gateway client (grpcio + protobuf), and the console presenter (rich).

Dependency rule: may import `utopia_gateway.domain` and
`utopia_gateway.interfaces`; inner layers must not import this package.
"""
