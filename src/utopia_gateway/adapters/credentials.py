"""Reading PEM certificate and private key material from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from utopia_gateway.interfaces.errors import ConfigError, CryptoError

logger = logging.getLogger(__name__)


def read_file(path: Path, what: str) -> bytes:
    """Read a credential file.

    Raises:
        ConfigError: If the file does not exist or cannot be read.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"Cannot read {what}", path) from e
    logger.debug("Read %s from %s (%d bytes)", what, path, len(data))
    return data


def read_certificate(path: Path, what: str = "certificate") -> bytes:
    """Read a PEM X.509 certificate and check that it parses.

    Args:
        path: Location of the PEM file.
        what: Human description used in log and error messages.

    Returns:
        bytes: The PEM bytes as read from disk.

    Raises:
        ConfigError: If the file cannot be read.
        CryptoError: If the content is not a PEM X.509 certificate.
    """
    pem = read_file(path, what)
    try:
        x509.load_pem_x509_certificate(pem)
    except ValueError as e:
        raise CryptoError(f"Malformed {what}", path) from e
    return pem


def read_private_key(path: Path) -> PrivateKeyTypes:
    """Read an unencrypted PEM private key.

    Raises:
        ConfigError: If the file cannot be read.
        CryptoError: If the content is not a usable private key.
    """
    pem = read_file(path, "private key")
    try:
        return serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise CryptoError("Malformed private key", path) from e
