"""Identity provider: the client certificate and its signing key."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from utopia_gateway.domain.value_objects import Identity
from utopia_gateway.interfaces.errors import ConfigError

from .credentials import read_certificate, read_private_key
from .signers import new_private_key_signer

if TYPE_CHECKING:
    from utopia_gateway.config import GatewaySettings
    from utopia_gateway.interfaces.signer import Signer

logger = logging.getLogger(__name__)


def load_identity(settings: GatewaySettings) -> Identity:
    """Load the client certificate and pair it with the MSP id.

    Raises:
        ConfigError: If the certificate file cannot be read.
        CryptoError: If the certificate is malformed.
    """
    credentials = read_certificate(settings.cert_path, "client certificate")
    logger.info("Loaded identity for %s from %s", settings.msp_id, settings.cert_path)
    return Identity(msp_id=settings.msp_id, credentials=credentials)


def select_key_file(key_directory: Path) -> Path:
    """Return the single private key file held by an MSP keystore directory.

    Hidden entries and sub-directories are ignored.

    Raises:
        ConfigError: If the directory cannot be listed, holds no key file, or
            holds more than one candidate.
    """
    try:
        candidates = sorted(
            entry
            for entry in key_directory.iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        )
    except OSError as e:
        raise ConfigError("Cannot list key directory", key_directory) from e

    if not candidates:
        raise ConfigError("Key directory is empty", key_directory)
    if len(candidates) > 1:
        raise ConfigError(
            f"Key directory holds {len(candidates)} candidate keys; "
            "set KEY_PATH to choose one",
            key_directory,
        )
    return candidates[0]


def load_signer(settings: GatewaySettings) -> Signer:
    """Load the client private key and wrap it in a signer.

    The explicit `key_path` wins over scanning `key_directory_path`.

    Raises:
        ConfigError: If no single readable key file can be located.
        CryptoError: If the key material is malformed or unsupported.
    """
    key_path = settings.key_path or select_key_file(settings.key_directory_path)
    signer = new_private_key_signer(read_private_key(key_path))
    logger.info("Loaded %s from %s", type(signer).__name__, key_path)
    return signer
