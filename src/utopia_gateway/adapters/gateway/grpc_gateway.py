"""Fabric gateway client over a gRPC channel.

Implements the gateway ports against the peer's ``gateway.Gateway`` service:

- evaluate: ``Evaluate`` with a signed proposal;
- submit: ``Endorse`` → sign the prepared envelope → ``Submit`` →
  ``CommitStatus``, returning the contract response once the transaction is
  committed as valid.

Every RPC carries the deadline configured for its call kind. gRPC failures are
translated into the client error taxonomy; nothing is retried here.
"""

from __future__ import annotations

import hashlib
import logging
import os
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import grpc

from utopia_gateway.domain.value_objects import CallKind, Deadlines
from utopia_gateway.interfaces import gateway
from utopia_gateway.interfaces.errors import (
    CallTimeoutError,
    CommitError,
    ContractError,
    GatewayClientError,
    TransportError,
)

from . import protos

if TYPE_CHECKING:
    from utopia_gateway.domain.value_objects import Identity
    from utopia_gateway.interfaces.signer import Signer

logger = logging.getLogger(__name__)

SERVICE = "/gateway.Gateway"
METHODS = {
    CallKind.EVALUATE: (
        f"{SERVICE}/Evaluate",
        protos.EvaluateRequest,
        protos.EvaluateResponse,
    ),
    CallKind.ENDORSE: (
        f"{SERVICE}/Endorse",
        protos.EndorseRequest,
        protos.EndorseResponse,
    ),
    CallKind.SUBMIT: (
        f"{SERVICE}/Submit",
        protos.SubmitRequest,
        protos.SubmitResponse,
    ),
    CallKind.COMMIT_STATUS: (
        f"{SERVICE}/CommitStatus",
        protos.SignedCommitStatusRequest,
        protos.CommitStatusResponse,
    ),
}

NONCE_LENGTH = 24

TRANSPORT_STATUS_CODES = frozenset(
    {
        grpc.StatusCode.UNAVAILABLE,
        grpc.StatusCode.UNAUTHENTICATED,
        grpc.StatusCode.CANCELLED,
        grpc.StatusCode.UNIMPLEMENTED,
    }
)


class ClosedGatewayError(GatewayClientError):
    """Raised when a call is issued through a gateway that was closed."""

    def __init__(self) -> None:
        super().__init__("Gateway is closed")


@dataclass(frozen=True)
class PreparedProposal:
    """A serialized, not yet signed, chaincode proposal."""

    transaction_id: str
    proposal_bytes: bytes


def new_proposal(
    creator: bytes,
    channel_name: str,
    chaincode_name: str,
    transaction: str,
    args: tuple[str, ...],
    nonce: bytes | None = None,
) -> PreparedProposal:
    """Build an endorser-transaction proposal invoking one contract function.

    The transaction id is the hex SHA-256 of nonce followed by creator, as the
    peer recomputes it.

    Args:
        creator: Serialized client identity.
        channel_name: Ledger channel the contract is deployed to.
        chaincode_name: Name of the contract.
        transaction: Transaction function name.
        args: String arguments, encoded as UTF-8 after the function name.
        nonce: Random nonce. Generated when omitted.

    Returns:
        PreparedProposal: Transaction id and proposal bytes.
    """
    nonce = os.urandom(NONCE_LENGTH) if nonce is None else nonce
    transaction_id = hashlib.sha256(nonce + creator).hexdigest()
    chaincode_id = protos.ChaincodeID(name=chaincode_name)

    now = time.time_ns()
    channel_header = protos.ChannelHeader(
        type=protos.ENDORSER_TRANSACTION,
        channel_id=channel_name,
        tx_id=transaction_id,
        extension=protos.ChaincodeHeaderExtension(
            chaincode_id=chaincode_id
        ).SerializeToString(),
    )
    channel_header.timestamp.seconds = now // 1_000_000_000
    channel_header.timestamp.nanos = now % 1_000_000_000

    header = protos.Header(
        channel_header=channel_header.SerializeToString(),
        signature_header=protos.SignatureHeader(
            creator=creator, nonce=nonce
        ).SerializeToString(),
    )
    invocation = protos.ChaincodeInvocationSpec(
        chaincode_spec=protos.ChaincodeSpec(
            type=protos.CHAINCODE_TYPE_UNDEFINED,
            chaincode_id=chaincode_id,
            input=protos.ChaincodeInput(
                args=[transaction.encode("utf-8")] + [a.encode("utf-8") for a in args]
            ),
        )
    )
    proposal = protos.Proposal(
        header=header.SerializeToString(),
        payload=protos.ChaincodeProposalPayload(
            input=invocation.SerializeToString()
        ).SerializeToString(),
    )
    return PreparedProposal(transaction_id, proposal.SerializeToString())


def transaction_result(envelope: Any) -> bytes:
    """Extract the contract response payload from a prepared transaction envelope."""
    payload = protos.Payload.FromString(envelope.payload)
    transaction = protos.Transaction.FromString(payload.data)
    if not transaction.actions:
        return b""
    action_payload = protos.ChaincodeActionPayload.FromString(
        transaction.actions[0].payload
    )
    response_payload = protos.ProposalResponsePayload.FromString(
        action_payload.action.proposal_response_payload
    )
    chaincode_action = protos.ChaincodeAction.FromString(response_payload.extension)
    return chaincode_action.response.payload


def translate_rpc_error(
    error: grpc.RpcError, kind: CallKind, transaction: str, timeout: float
) -> GatewayClientError:
    """Map a failed RPC onto the client error taxonomy."""
    code = error.code() if callable(getattr(error, "code", None)) else None
    details = error.details() if callable(getattr(error, "details", None)) else None
    details = details or str(error)

    if code is grpc.StatusCode.DEADLINE_EXCEEDED:
        return CallTimeoutError(kind.value, transaction, timeout)
    if code in TRANSPORT_STATUS_CODES:
        return TransportError(transaction, details)
    return ContractError(transaction, details, status=code.name if code else None)


class GrpcGateway(gateway.Gateway):
    """Gateway session that signs requests as one identity.

    The gateway does not own the channel; whoever opened the channel closes it.

    Args:
        channel: Open gRPC channel to the gateway peer.
        identity: Client identity used as proposal creator.
        signer: Signing capability matching the identity's certificate.
        deadlines: Per-call-kind deadlines.
    """

    def __init__(
        self,
        channel: grpc.Channel,
        identity: Identity,
        signer: Signer,
        deadlines: Deadlines = Deadlines(),
    ) -> None:
        self.identity = identity
        self.deadlines = deadlines
        self._signer = signer
        self._creator = protos.SerializedIdentity(
            mspid=identity.msp_id, id_bytes=identity.credentials
        ).SerializeToString()
        self._stubs = {
            kind: channel.unary_unary(
                method,
                request_serializer=request_type.SerializeToString,
                response_deserializer=response_type.FromString,
            )
            for kind, (method, request_type, response_type) in METHODS.items()
        }
        self._closed = False

    @property
    def creator(self) -> bytes:
        """The serialized client identity."""
        return self._creator

    @property
    def closed(self) -> bool:
        """Whether `close` has been called."""
        return self._closed

    def get_network(self, channel_name: str) -> GrpcNetwork:
        return GrpcNetwork(self, channel_name)

    def close(self) -> None:
        if not self._closed:
            logger.debug("Closing gateway session for %s", self.identity.msp_id)
        self._closed = True

    def sign(self, message: bytes) -> bytes:
        """Sign a message with the client signer."""
        return self._signer.sign_message(message)

    def sign_proposal(self, proposal: PreparedProposal) -> Any:
        """Return the signed form of a proposal."""
        return protos.SignedProposal(
            proposal_bytes=proposal.proposal_bytes,
            signature=self.sign(proposal.proposal_bytes),
        )

    def call(self, kind: CallKind, transaction: str, request: Any) -> Any:
        """Issue one RPC with the deadline for its kind.

        Raises:
            ClosedGatewayError: If the gateway was closed.
            CallTimeoutError: If the deadline expires.
            TransportError: If the channel cannot carry the call.
            ContractError: If the peer rejects the call.
        """
        if self._closed:
            raise ClosedGatewayError()
        timeout = self.deadlines.for_kind(kind)
        logger.debug("%s %s (deadline %ss)", kind.value, transaction, timeout)
        try:
            return self._stubs[kind](request, timeout=timeout)
        except grpc.RpcError as e:
            raise translate_rpc_error(e, kind, transaction, timeout) from e


class GrpcNetwork(gateway.Network):
    """A ledger channel reached through a `GrpcGateway`."""

    def __init__(self, gw: GrpcGateway, channel_name: str) -> None:
        self.gateway = gw
        self.channel_name = channel_name

    def get_contract(self, chaincode_name: str) -> GrpcContract:
        return GrpcContract(self, chaincode_name)


class GrpcContract(gateway.Contract):
    """A contract invoked through the gateway service."""

    def __init__(self, network: GrpcNetwork, chaincode_name: str) -> None:
        self.network = network
        self.chaincode_name = chaincode_name

    def _new_proposal(self, name: str, args: tuple[str, ...]) -> PreparedProposal:
        return new_proposal(
            self.network.gateway.creator,
            self.network.channel_name,
            self.chaincode_name,
            name,
            args,
        )

    def evaluate_transaction(self, name: str, *args: str) -> bytes:
        gw = self.network.gateway
        proposal = self._new_proposal(name, args)
        response = gw.call(
            CallKind.EVALUATE,
            name,
            protos.EvaluateRequest(
                transaction_id=proposal.transaction_id,
                channel_id=self.network.channel_name,
                proposed_transaction=gw.sign_proposal(proposal),
            ),
        )
        if response.result.status >= 400:
            raise ContractError(
                name, response.result.message, status=str(response.result.status)
            )
        return response.result.payload

    def submit_transaction(self, name: str, *args: str) -> bytes:
        gw = self.network.gateway
        channel_id = self.network.channel_name
        proposal = self._new_proposal(name, args)
        transaction_id = proposal.transaction_id

        endorsed = gw.call(
            CallKind.ENDORSE,
            name,
            protos.EndorseRequest(
                transaction_id=transaction_id,
                channel_id=channel_id,
                proposed_transaction=gw.sign_proposal(proposal),
            ),
        )
        envelope = endorsed.prepared_transaction
        envelope.signature = gw.sign(envelope.payload)
        result = transaction_result(envelope)

        gw.call(
            CallKind.SUBMIT,
            name,
            protos.SubmitRequest(
                transaction_id=transaction_id,
                channel_id=channel_id,
                prepared_transaction=envelope,
            ),
        )
        logger.debug("Submitted %s as %s; waiting for commit", name, transaction_id)

        status_request = protos.CommitStatusRequest(
            transaction_id=transaction_id,
            channel_id=channel_id,
            identity=gw.creator,
        ).SerializeToString()
        status = gw.call(
            CallKind.COMMIT_STATUS,
            name,
            protos.SignedCommitStatusRequest(
                request=status_request, signature=gw.sign(status_request)
            ),
        )
        if status.result != protos.TX_VALID:
            raise CommitError(name, transaction_id, status.result)
        logger.info(
            "%s committed as %s in block %s", name, transaction_id, status.block_number
        )
        return result
