"""Private-key backed signers.

ECDSA signatures are normalized to low-S form, which Fabric peers require.
Ed25519 keys sign the message itself rather than a SHA-256 digest.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    decode_dss_signature,
    encode_dss_signature,
)

from utopia_gateway.interfaces.errors import CryptoError
from utopia_gateway.interfaces.signer import Signer

# pylint: disable=too-few-public-methods

CURVE_ORDERS = {
    "secp256r1": int(
        "FFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551", 16
    ),
    "secp384r1": int(
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFC7634D81F4372DDF"
        "581A0DB248B0A77AECEC196ACCC52973",
        16,
    ),
}


class ECDSASigner(Signer):
    """Signs SHA-256 digests with an ECDSA P-256 or P-384 key (RFC 6979 nonces)."""

    def __init__(self, key: ec.EllipticCurvePrivateKey) -> None:
        if (order := CURVE_ORDERS.get(key.curve.name)) is None:
            raise CryptoError(f"Unsupported elliptic curve {key.curve.name}")
        self._key = key
        self._order = order

    def sign(self, digest: bytes) -> bytes:
        der = self._key.sign(
            digest, ec.ECDSA(Prehashed(hashes.SHA256()), deterministic_signing=True)
        )
        r, s = decode_dss_signature(der)
        if s > self._order // 2:
            s = self._order - s
        return encode_dss_signature(r, s)


class Ed25519Signer(Signer):
    """Signs whole messages with an Ed25519 key."""

    def __init__(self, key: ed25519.Ed25519PrivateKey) -> None:
        self._key = key

    def digest(self, message: bytes) -> bytes:
        return message

    def sign(self, digest: bytes) -> bytes:
        return self._key.sign(digest)


def new_private_key_signer(key: PrivateKeyTypes) -> Signer:
    """Wrap a private key in the matching signer.

    Raises:
        CryptoError: If the key type is not supported for Fabric signing.
    """
    if isinstance(key, ec.EllipticCurvePrivateKey):
        return ECDSASigner(key)
    if isinstance(key, ed25519.Ed25519PrivateKey):
        return Ed25519Signer(key)
    raise CryptoError(f"Unsupported private key type {type(key).__name__}")
