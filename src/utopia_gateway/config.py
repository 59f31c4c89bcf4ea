"""Configuration for UTOPIA GATEWAY.

Connection parameters are gathered into an explicit, immutable
`GatewaySettings` record. Only entrypoints read the process environment; the
bootstrap receives the record as an argument.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CHANNEL_NAME = "mychannel"
DEFAULT_CHAINCODE_NAME = "utopiamaker"
DEFAULT_MSP_ID = "Org1MSP"
DEFAULT_PEER_ENDPOINT = "localhost:7051"
DEFAULT_PEER_HOST_ALIAS = "peer0.org1.example.com"

ORG_DOMAIN = "org1.example.com"
USER_NAME = f"User1@{ORG_DOMAIN}"

CHANNEL_NAME_ENV = "CHANNEL_NAME"
CHAINCODE_NAME_ENV = "CHAINCODE_NAME"
MSP_ID_ENV = "MSP_ID"
CRYPTO_PATH_ENV = "CRYPTO_PATH"
KEY_DIRECTORY_PATH_ENV = "KEY_DIRECTORY_PATH"
KEY_PATH_ENV = "KEY_PATH"
CERT_PATH_ENV = "CERT_PATH"
TLS_CERT_PATH_ENV = "TLS_CERT_PATH"
PEER_ENDPOINT_ENV = "PEER_ENDPOINT"
PEER_HOST_ALIAS_ENV = "PEER_HOST_ALIAS"


def default_crypto_path(cwd: Path | None = None) -> Path:
    """Return the test-network crypto material directory for Org1.

    The layout mirrors the Fabric samples checkout, where applications live two
    levels below the repository root next to `test-network/`.

    Args:
        cwd: Directory to resolve from. Defaults to the current working directory.
    """
    base = cwd if cwd is not None else Path.cwd()
    return (
        base / ".." / ".." / "test-network" / "organizations" / "peerOrganizations"
    ).resolve() / ORG_DOMAIN


@dataclass(frozen=True)
class GatewaySettings:  # pylint: disable=too-many-instance-attributes
    """Everything needed to reach one contract on one channel as one identity."""

    channel_name: str
    chaincode_name: str
    msp_id: str
    crypto_path: Path
    key_directory_path: Path
    cert_path: Path
    tls_cert_path: Path
    peer_endpoint: str
    peer_host_alias: str
    key_path: Path | None = None

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None, cwd: Path | None = None
    ) -> GatewaySettings:
        """Resolve settings from environment variables.

        A variable that is unset or empty falls back to its default. Paths
        derived from `CRYPTO_PATH` follow the MSP directory layout of the Fabric
        test network.

        Args:
            environ: Mapping to read from. Defaults to `os.environ`.
            cwd: Base directory for the default crypto path.

        Returns:
            A fully resolved `GatewaySettings`.
        """
        env = os.environ if environ is None else environ

        def lookup(key: str, default: str) -> str:
            return env.get(key) or default

        crypto_path = Path(lookup(CRYPTO_PATH_ENV, str(default_crypto_path(cwd))))
        user_msp = crypto_path / "users" / USER_NAME / "msp"
        key_path = env.get(KEY_PATH_ENV)

        return cls(
            channel_name=lookup(CHANNEL_NAME_ENV, DEFAULT_CHANNEL_NAME),
            chaincode_name=lookup(CHAINCODE_NAME_ENV, DEFAULT_CHAINCODE_NAME),
            msp_id=lookup(MSP_ID_ENV, DEFAULT_MSP_ID),
            crypto_path=crypto_path,
            key_directory_path=Path(
                lookup(KEY_DIRECTORY_PATH_ENV, str(user_msp / "keystore"))
            ),
            key_path=Path(key_path) if key_path else None,
            cert_path=Path(
                lookup(CERT_PATH_ENV, str(user_msp / "signcerts" / "cert.pem"))
            ),
            tls_cert_path=Path(
                lookup(
                    TLS_CERT_PATH_ENV,
                    str(
                        crypto_path
                        / "peers"
                        / DEFAULT_PEER_HOST_ALIAS
                        / "tls"
                        / "ca.crt"
                    ),
                )
            ),
            peer_endpoint=lookup(PEER_ENDPOINT_ENV, DEFAULT_PEER_ENDPOINT),
            peer_host_alias=lookup(PEER_HOST_ALIAS_ENV, DEFAULT_PEER_HOST_ALIAS),
        )

    def describe(self) -> list[tuple[str, str]]:
        """Return the input parameters in display order."""
        return [
            ("channelName", self.channel_name),
            ("chaincodeName", self.chaincode_name),
            ("mspId", self.msp_id),
            ("cryptoPath", str(self.crypto_path)),
            ("keyDirectoryPath", str(self.key_directory_path)),
            ("keyPath", str(self.key_path) if self.key_path else "<auto>"),
            ("certPath", str(self.cert_path)),
            ("tlsCertPath", str(self.tls_cert_path)),
            ("peerEndpoint", self.peer_endpoint),
            ("peerHostAlias", self.peer_host_alias),
        ]
