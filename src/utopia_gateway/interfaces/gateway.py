"""Gateway interface definitions.

A `Gateway` is one logical session with a peer. It resolves a ledger channel to
a `Network`, and a network resolves a deployed chaincode to a `Contract`.
Resolution is lazy; only contract calls touch the network.
"""

from __future__ import annotations

import abc
from types import TracebackType


class Contract(abc.ABC):
    """A smart contract deployed on a ledger channel."""

    chaincode_name: str

    @abc.abstractmethod
    def evaluate_transaction(self, name: str, *args: str) -> bytes:
        """Evaluate a transaction function against current ledger state.

        The call is read-only: it is answered by one endorsing peer and never
        ordered or committed, so it is safe to repeat.

        Args:
            name: Transaction function name.
            *args: Positional string arguments passed through unchanged.

        Returns:
            bytes: The payload returned by the transaction function.

        Raises:
            ContractError: If the contract rejects the call.
            CallTimeoutError: If the evaluate deadline expires.
            TransportError: If the peer cannot be reached.
        """

    @abc.abstractmethod
    def submit_transaction(self, name: str, *args: str) -> bytes:
        """Submit a transaction and wait for it to be committed.

        The proposal is endorsed, ordered and committed before this returns.
        Submissions are not idempotent and are never retried.

        Args:
            name: Transaction function name.
            *args: Positional string arguments passed through unchanged.

        Returns:
            bytes: The payload returned by the transaction function.

        Raises:
            ContractError: If endorsement is rejected.
            CommitError: If the transaction commits with a non-valid status.
            CallTimeoutError: If any stage exceeds its deadline.
            TransportError: If the peer cannot be reached.
        """


class Network(abc.ABC):
    """A ledger channel reachable through a gateway."""

    channel_name: str

    @abc.abstractmethod
    def get_contract(self, chaincode_name: str) -> Contract:
        """Return the contract with the given chaincode name on this channel."""


class Gateway(abc.ABC):
    """A session with a gateway peer, bound to one client identity."""

    @abc.abstractmethod
    def get_network(self, channel_name: str) -> Network:
        """Return the network for a ledger channel."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release the session. Further calls are not allowed."""

    def __enter__(self) -> Gateway:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
