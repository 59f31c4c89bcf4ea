"""Errors raised by the gateway client."""

from __future__ import annotations

import os

# ============================================================================
#                               Base error
# ============================================================================


class GatewayClientError(Exception):
    """Base class for all gateway client errors."""


# ============================================================================
#                        Credential loading errors
# ============================================================================


class CredentialError(GatewayClientError):
    """Base class for errors raised while loading identity or TLS material."""

    def __init__(
        self, reason: str, path: str | os.PathLike[str] | None = None
    ) -> None:
        message = reason if path is None else f"{reason}: {path}"
        super().__init__(message)
        self.reason = reason
        self.path = None if path is None else str(path)


class ConfigError(CredentialError):
    """Raised when a credential file or directory is missing, unreadable or ambiguous."""


class CryptoError(CredentialError):
    """Raised when key or certificate material is malformed or unsupported."""


# ============================================================================
#                           Remote call errors
# ============================================================================


class TransportError(GatewayClientError):
    """Raised when the channel to the peer cannot carry a call."""

    def __init__(self, transaction: str, details: str) -> None:
        super().__init__(f"{transaction}: transport failure: {details}")
        self.transaction = transaction
        self.details = details


class CallTimeoutError(GatewayClientError, TimeoutError):
    """Raised when a call exceeds the deadline configured for its kind."""

    def __init__(self, kind: str, transaction: str, timeout: float) -> None:
        super().__init__(f"{transaction}: {kind} deadline of {timeout:g}s exceeded")
        self.kind = kind
        self.transaction = transaction
        self.timeout = timeout


class ContractError(GatewayClientError):
    """Raised when the remote contract or gateway rejects a call."""

    def __init__(
        self, transaction: str, details: str, status: str | None = None
    ) -> None:
        qualifier = "" if status is None else f" ({status})"
        super().__init__(f"{transaction} rejected{qualifier}: {details}")
        self.transaction = transaction
        self.details = details
        self.status = status

    @property
    def not_found(self) -> bool:
        """True when the rejection reports a missing ledger entry."""
        details = self.details.lower()
        return (
            self.status == "NOT_FOUND"
            or "does not exist" in details
            or "not found" in details
        )


class CommitError(ContractError):
    """Raised when a submitted transaction is committed as invalid."""

    def __init__(self, transaction: str, transaction_id: str, code: int) -> None:
        super().__init__(
            transaction,
            f"transaction {transaction_id} failed to commit with validation code "
            f"{validation_code_name(code)} ({code})",
            status="COMMIT_FAILED",
        )
        self.transaction_id = transaction_id
        self.code = code


# ============================================================================
#                              Script errors
# ============================================================================


class ScriptError(GatewayClientError):
    """Raised when a step script declares labels or dependencies inconsistently."""

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f"Step {label!r}: {reason}")
        self.label = label
        self.reason = reason


# Names of the ledger's transaction validation codes (peer TxValidationCode).
VALIDATION_CODES = {
    0: "VALID",
    1: "NIL_ENVELOPE",
    2: "BAD_PAYLOAD",
    3: "BAD_COMMON_HEADER",
    4: "BAD_CREATOR_SIGNATURE",
    5: "INVALID_ENDORSER_TRANSACTION",
    6: "INVALID_CONFIG_TRANSACTION",
    7: "UNSUPPORTED_TX_PAYLOAD",
    8: "BAD_PROPOSAL_TXID",
    9: "DUPLICATE_TXID",
    10: "ENDORSEMENT_POLICY_FAILURE",
    11: "MVCC_READ_CONFLICT",
    12: "PHANTOM_READ_CONFLICT",
    13: "UNKNOWN_TX_TYPE",
    14: "TARGET_CHAIN_NOT_FOUND",
    15: "MARSHAL_TX_ERROR",
    16: "NIL_TXACTION",
    17: "EXPIRED_CHAINCODE",
    18: "CHAINCODE_VERSION_CONFLICT",
    19: "BAD_HEADER_EXTENSION",
    20: "BAD_CHANNEL_HEADER",
    21: "BAD_RESPONSE_PAYLOAD",
    22: "BAD_RWSET",
    23: "ILLEGAL_WRITESET",
    24: "INVALID_WRITESET",
    25: "INVALID_CHAINCODE",
    254: "NOT_VALIDATED",
    255: "INVALID_OTHER_REASON",
}


def validation_code_name(code: int) -> str:
    """Return the symbolic name of a validation code, or ``UNKNOWN``."""
    return VALIDATION_CODES.get(code, "UNKNOWN")
