"""Unit tests for the gRPC channel builder."""

import grpc
import pytest

from utopia_gateway.adapters import transport
from utopia_gateway.interfaces.errors import ConfigError, CryptoError

# pylint: disable=magic-value-comparison


def test_opens_secure_channel_with_host_override(crypto_material, monkeypatch):
    """The channel targets the endpoint and overrides the TLS host name."""
    seen = {}

    def fake_secure_channel(target, credentials, options=None):
        seen.update(target=target, credentials=credentials, options=options)
        return "channel"

    monkeypatch.setattr(grpc, "secure_channel", fake_secure_channel)
    settings = crypto_material.settings(
        PEER_ENDPOINT="localhost:9051", PEER_HOST_ALIAS="peer0.org2.example.com"
    )

    channel = transport.new_grpc_connection(settings)

    assert channel == "channel"
    assert seen["target"] == "localhost:9051"
    assert isinstance(seen["credentials"], grpc.ChannelCredentials)
    assert seen["options"] == [
        ("grpc.ssl_target_name_override", "peer0.org2.example.com")
    ]


def test_missing_tls_certificate_opens_nothing(make_crypto_material, monkeypatch):
    """Without a TLS root certificate no channel is created."""
    opened = []
    monkeypatch.setattr(grpc, "secure_channel", lambda *a, **k: opened.append(a))
    material = make_crypto_material(with_tls=False)

    with pytest.raises(ConfigError, match="TLS root certificate"):
        transport.new_grpc_connection(material.settings())
    assert not opened


def test_invalid_tls_certificate_opens_nothing(crypto_material, monkeypatch):
    """A corrupted TLS root certificate is rejected before dialing."""
    opened = []
    monkeypatch.setattr(grpc, "secure_channel", lambda *a, **k: opened.append(a))
    crypto_material.tls_cert_path.write_text("not a certificate")

    with pytest.raises(CryptoError):
        transport.new_grpc_connection(crypto_material.settings())
    assert not opened
