"""Interfaces (application boundary) for UTOPIA GATEWAY.

Defines framework-free application contracts: the gateway/network/contract
ports, the signer port, the result presenter port, and the error taxonomy
shared by the service layer and adapters. Business rules stay out of this
package.

Dependency rule: this package may only import `utopia_gateway.domain`. It may
be imported by `utopia_gateway.service_layer`, `utopia_gateway.adapters`, and
`utopia_gateway.bootstrap`.
"""
