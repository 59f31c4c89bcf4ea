"""Unit tests for `utopia_gateway.config`."""

from pathlib import Path

import pytest

from utopia_gateway import config
from utopia_gateway.config import GatewaySettings, default_crypto_path

# pylint: disable=magic-value-comparison

ALL_KEYS = (
    config.CHANNEL_NAME_ENV,
    config.CHAINCODE_NAME_ENV,
    config.MSP_ID_ENV,
    config.CRYPTO_PATH_ENV,
    config.KEY_DIRECTORY_PATH_ENV,
    config.KEY_PATH_ENV,
    config.CERT_PATH_ENV,
    config.TLS_CERT_PATH_ENV,
    config.PEER_ENDPOINT_ENV,
    config.PEER_HOST_ALIAS_ENV,
)


def test_default_crypto_path_is_two_levels_up(tmp_path):
    """The default crypto path sits in test-network two directories above cwd."""
    cwd = tmp_path / "fabric-samples" / "utopia" / "application"
    cwd.mkdir(parents=True)

    path = default_crypto_path(cwd)

    assert path == (
        (tmp_path / "fabric-samples").resolve()
        / "test-network"
        / "organizations"
        / "peerOrganizations"
        / "org1.example.com"
    )


class TestFromEnviron:
    """Tests for `GatewaySettings.from_environ`."""

    @staticmethod
    def test_every_key_has_a_default(tmp_path):
        """An empty environment resolves every parameter to its default."""
        settings = GatewaySettings.from_environ({}, cwd=tmp_path)
        crypto = default_crypto_path(tmp_path)
        user_msp = crypto / "users" / "User1@org1.example.com" / "msp"

        assert settings.channel_name == "mychannel"
        assert settings.chaincode_name == "utopiamaker"
        assert settings.msp_id == "Org1MSP"
        assert settings.crypto_path == crypto
        assert settings.key_directory_path == user_msp / "keystore"
        assert settings.key_path is None
        assert settings.cert_path == user_msp / "signcerts" / "cert.pem"
        assert settings.tls_cert_path == (
            crypto / "peers" / "peer0.org1.example.com" / "tls" / "ca.crt"
        )
        assert settings.peer_endpoint == "localhost:7051"
        assert settings.peer_host_alias == "peer0.org1.example.com"

    @staticmethod
    def test_empty_values_fall_back_to_defaults(tmp_path):
        """A variable set to the empty string behaves like an unset one."""
        empty = GatewaySettings.from_environ(dict.fromkeys(ALL_KEYS, ""), cwd=tmp_path)
        unset = GatewaySettings.from_environ({}, cwd=tmp_path)
        assert empty == unset

    @staticmethod
    def test_crypto_path_drives_derived_paths():
        """Credential paths are derived from CRYPTO_PATH unless set explicitly."""
        settings = GatewaySettings.from_environ({"CRYPTO_PATH": "/crypto"})

        assert settings.crypto_path == Path("/crypto")
        assert settings.key_directory_path == Path(
            "/crypto/users/User1@org1.example.com/msp/keystore"
        )
        assert settings.cert_path == Path(
            "/crypto/users/User1@org1.example.com/msp/signcerts/cert.pem"
        )
        assert settings.tls_cert_path == Path(
            "/crypto/peers/peer0.org1.example.com/tls/ca.crt"
        )

    @staticmethod
    def test_explicit_values_win():
        """Every variable overrides its default."""
        environ = {
            "CHANNEL_NAME": "otherchannel",
            "CHAINCODE_NAME": "othercc",
            "MSP_ID": "Org2MSP",
            "CRYPTO_PATH": "/crypto",
            "KEY_DIRECTORY_PATH": "/keys",
            "KEY_PATH": "/keys/mine_sk",
            "CERT_PATH": "/certs/me.pem",
            "TLS_CERT_PATH": "/tls/ca.pem",
            "PEER_ENDPOINT": "peer.example.org:9051",
            "PEER_HOST_ALIAS": "peer0.org2.example.com",
        }

        settings = GatewaySettings.from_environ(environ)

        assert settings == GatewaySettings(
            channel_name="otherchannel",
            chaincode_name="othercc",
            msp_id="Org2MSP",
            crypto_path=Path("/crypto"),
            key_directory_path=Path("/keys"),
            key_path=Path("/keys/mine_sk"),
            cert_path=Path("/certs/me.pem"),
            tls_cert_path=Path("/tls/ca.pem"),
            peer_endpoint="peer.example.org:9051",
            peer_host_alias="peer0.org2.example.com",
        )

    @staticmethod
    def test_reads_process_environment_by_default(monkeypatch):
        """Without an explicit mapping, os.environ is read."""
        monkeypatch.setenv("CHANNEL_NAME", "fromenv")
        monkeypatch.delenv("PEER_ENDPOINT", raising=False)

        settings = GatewaySettings.from_environ()

        assert settings.channel_name == "fromenv"
        assert settings.peer_endpoint == "localhost:7051"

    @staticmethod
    def test_settings_are_immutable():
        """Settings records cannot be changed after resolution."""
        settings = GatewaySettings.from_environ({})
        with pytest.raises(AttributeError):
            settings.channel_name = "other"  # type: ignore[misc]


def test_describe_lists_parameters_in_display_order():
    """`describe` returns every parameter in a fixed order."""
    settings = GatewaySettings.from_environ({"CRYPTO_PATH": "/crypto"})

    described = settings.describe()

    assert [name for name, _ in described] == [
        "channelName",
        "chaincodeName",
        "mspId",
        "cryptoPath",
        "keyDirectoryPath",
        "keyPath",
        "certPath",
        "tlsCertPath",
        "peerEndpoint",
        "peerHostAlias",
    ]
    assert dict(described)["keyPath"] == "<auto>"
    assert dict(described)["cryptoPath"] == str(Path("/crypto"))
