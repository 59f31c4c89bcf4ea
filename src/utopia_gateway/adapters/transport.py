"""Transport builder: the TLS gRPC channel shared by every gateway call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import grpc

from .credentials import read_certificate

if TYPE_CHECKING:
    from utopia_gateway.config import GatewaySettings

logger = logging.getLogger(__name__)

SSL_TARGET_NAME_OVERRIDE = "grpc.ssl_target_name_override"


def new_grpc_connection(settings: GatewaySettings) -> grpc.Channel:
    """Open the secure channel to the gateway peer.

    The channel connects lazily; reachability problems surface on the first
    call as `TransportError`.

    Args:
        settings: Supplies the TLS root certificate path, the peer endpoint and
            the TLS host-name override.

    Returns:
        grpc.Channel: A channel to share for the whole run. The caller closes it.

    Raises:
        ConfigError: If the TLS root certificate cannot be read.
        CryptoError: If the TLS root certificate is malformed.
    """
    root_certificate = read_certificate(settings.tls_cert_path, "TLS root certificate")
    credentials = grpc.ssl_channel_credentials(root_certificates=root_certificate)
    logger.info(
        "Opening gRPC channel to %s (TLS host %s)",
        settings.peer_endpoint,
        settings.peer_host_alias,
    )
    return grpc.secure_channel(
        settings.peer_endpoint,
        credentials,
        options=[(SSL_TARGET_NAME_OVERRIDE, settings.peer_host_alias)],
    )
