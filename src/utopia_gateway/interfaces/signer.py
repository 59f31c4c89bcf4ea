"""Interface for request signers."""

import abc
import hashlib

# pylint: disable=too-few-public-methods


class Signer(abc.ABC):
    """Contract for a signing capability that never exposes its key."""

    def digest(self, message: bytes) -> bytes:
        """Return the digest that `sign` expects for a message (SHA-256)."""
        return hashlib.sha256(message).digest()

    @abc.abstractmethod
    def sign(self, digest: bytes) -> bytes:
        """Sign a message digest produced by `digest`."""

    def sign_message(self, message: bytes) -> bytes:
        """Digest and sign a message."""
        return self.sign(self.digest(message))
