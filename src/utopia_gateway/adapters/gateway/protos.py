"""Fabric gateway wire messages.

Message classes are built at import time from descriptors that mirror the
subset of fabric-protos a gateway client exchanges with a peer. Field numbers
and types follow the upstream ``.proto`` files. Fields the client never reads
or writes (maps, decorations, extensions) are left out; protobuf keeps them as
unknown fields. Enumerations are declared as ``int32``, which shares the wire
encoding.
"""

from __future__ import annotations

from google.protobuf import (
    descriptor_pb2,
    descriptor_pool,
    message_factory,
    timestamp_pb2,
)

_Field = descriptor_pb2.FieldDescriptorProto

_SCALAR_TYPES = {
    "string": _Field.TYPE_STRING,
    "bytes": _Field.TYPE_BYTES,
    "bool": _Field.TYPE_BOOL,
    "int32": _Field.TYPE_INT32,
    "uint64": _Field.TYPE_UINT64,
}

REPEATED = "repeated"

# (file name, package, dependencies, {message: ((number, field, type[, REPEATED]), ...)})
SCHEMA = (
    (
        "msp/identities.proto",
        "msp",
        (),
        {
            "SerializedIdentity": ((1, "mspid", "string"), (2, "id_bytes", "bytes")),
        },
    ),
    (
        "common/common.proto",
        "common",
        ("google/protobuf/timestamp.proto",),
        {
            "Header": (
                (1, "channel_header", "bytes"),
                (2, "signature_header", "bytes"),
            ),
            "ChannelHeader": (
                (1, "type", "int32"),
                (2, "version", "int32"),
                (3, "timestamp", ".google.protobuf.Timestamp"),
                (4, "channel_id", "string"),
                (5, "tx_id", "string"),
                (6, "epoch", "uint64"),
                (7, "extension", "bytes"),
                (8, "tls_cert_hash", "bytes"),
            ),
            "SignatureHeader": ((1, "creator", "bytes"), (2, "nonce", "bytes")),
            "Payload": ((1, "header", ".common.Header"), (2, "data", "bytes")),
            "Envelope": ((1, "payload", "bytes"), (2, "signature", "bytes")),
        },
    ),
    (
        "peer/peer.proto",
        "protos",
        (),
        {
            "ChaincodeID": (
                (1, "path", "string"),
                (2, "name", "string"),
                (3, "version", "string"),
            ),
            "ChaincodeInput": ((1, "args", "bytes", REPEATED), (3, "is_init", "bool")),
            "ChaincodeSpec": (
                (1, "type", "int32"),
                (2, "chaincode_id", ".protos.ChaincodeID"),
                (3, "input", ".protos.ChaincodeInput"),
                (4, "timeout", "int32"),
            ),
            "ChaincodeInvocationSpec": (
                (1, "chaincode_spec", ".protos.ChaincodeSpec"),
            ),
            "ChaincodeHeaderExtension": (
                (2, "chaincode_id", ".protos.ChaincodeID"),
            ),
            "ChaincodeProposalPayload": ((1, "input", "bytes"),),
            "Proposal": (
                (1, "header", "bytes"),
                (2, "payload", "bytes"),
                (3, "extension", "bytes"),
            ),
            "SignedProposal": (
                (1, "proposal_bytes", "bytes"),
                (2, "signature", "bytes"),
            ),
            "Response": (
                (1, "status", "int32"),
                (2, "message", "string"),
                (3, "payload", "bytes"),
            ),
            "ProposalResponsePayload": (
                (1, "proposal_hash", "bytes"),
                (2, "extension", "bytes"),
            ),
            "ChaincodeAction": (
                (1, "results", "bytes"),
                (2, "events", "bytes"),
                (3, "response", ".protos.Response"),
                (4, "chaincode_id", ".protos.ChaincodeID"),
            ),
            "Endorsement": ((1, "endorser", "bytes"), (2, "signature", "bytes")),
            "ChaincodeEndorsedAction": (
                (1, "proposal_response_payload", "bytes"),
                (2, "endorsements", ".protos.Endorsement", REPEATED),
            ),
            "ChaincodeActionPayload": (
                (1, "chaincode_proposal_payload", "bytes"),
                (2, "action", ".protos.ChaincodeEndorsedAction"),
            ),
            "TransactionAction": ((1, "header", "bytes"), (2, "payload", "bytes")),
            "Transaction": ((1, "actions", ".protos.TransactionAction", REPEATED),),
        },
    ),
    (
        "gateway/gateway.proto",
        "gateway",
        ("common/common.proto", "peer/peer.proto"),
        {
            "EvaluateRequest": (
                (1, "transaction_id", "string"),
                (2, "channel_id", "string"),
                (3, "proposed_transaction", ".protos.SignedProposal"),
                (4, "target_organizations", "string", REPEATED),
            ),
            "EvaluateResponse": ((1, "result", ".protos.Response"),),
            "EndorseRequest": (
                (1, "transaction_id", "string"),
                (2, "channel_id", "string"),
                (3, "proposed_transaction", ".protos.SignedProposal"),
                (4, "endorsing_organizations", "string", REPEATED),
            ),
            "EndorseResponse": ((1, "prepared_transaction", ".common.Envelope"),),
            "SubmitRequest": (
                (1, "transaction_id", "string"),
                (2, "channel_id", "string"),
                (3, "prepared_transaction", ".common.Envelope"),
            ),
            "SubmitResponse": (),
            "CommitStatusRequest": (
                (1, "transaction_id", "string"),
                (2, "channel_id", "string"),
                (3, "identity", "bytes"),
            ),
            "SignedCommitStatusRequest": (
                (1, "request", "bytes"),
                (2, "signature", "bytes"),
            ),
            "CommitStatusResponse": (
                (1, "result", "int32"),
                (2, "block_number", "uint64"),
            ),
        },
    ),
)

# common.HeaderType
ENDORSER_TRANSACTION = 3
# protos.TxValidationCode
TX_VALID = 0
# protos.ChaincodeSpec.Type
CHAINCODE_TYPE_UNDEFINED = 0


def _file_descriptor(
    name: str, package: str, dependencies: tuple[str, ...], messages: dict
) -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=name, package=package, syntax="proto3"
    )
    file_proto.dependency.extend(dependencies)
    for message_name, fields in messages.items():
        message = file_proto.message_type.add(name=message_name)
        for number, field_name, field_type, *label in fields:
            field = message.field.add(name=field_name, number=number)
            field.label = _Field.LABEL_REPEATED if label else _Field.LABEL_OPTIONAL
            if field_type in _SCALAR_TYPES:
                field.type = _SCALAR_TYPES[field_type]
            else:
                field.type = _Field.TYPE_MESSAGE
                field.type_name = field_type
    return file_proto


def build_pool() -> descriptor_pool.DescriptorPool:
    """Return a private descriptor pool holding the gateway schema."""
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(timestamp_pb2.DESCRIPTOR.serialized_pb)
    for name, package, dependencies, messages in SCHEMA:
        pool.AddSerializedFile(
            _file_descriptor(name, package, dependencies, messages).SerializeToString()
        )
    return pool


POOL = build_pool()


def _message_class(full_name: str):
    return message_factory.GetMessageClass(POOL.FindMessageTypeByName(full_name))


SerializedIdentity = _message_class("msp.SerializedIdentity")

Header = _message_class("common.Header")
ChannelHeader = _message_class("common.ChannelHeader")
SignatureHeader = _message_class("common.SignatureHeader")
Payload = _message_class("common.Payload")
Envelope = _message_class("common.Envelope")

ChaincodeID = _message_class("protos.ChaincodeID")
ChaincodeInput = _message_class("protos.ChaincodeInput")
ChaincodeSpec = _message_class("protos.ChaincodeSpec")
ChaincodeInvocationSpec = _message_class("protos.ChaincodeInvocationSpec")
ChaincodeHeaderExtension = _message_class("protos.ChaincodeHeaderExtension")
ChaincodeProposalPayload = _message_class("protos.ChaincodeProposalPayload")
Proposal = _message_class("protos.Proposal")
SignedProposal = _message_class("protos.SignedProposal")
Response = _message_class("protos.Response")
ProposalResponsePayload = _message_class("protos.ProposalResponsePayload")
ChaincodeAction = _message_class("protos.ChaincodeAction")
Endorsement = _message_class("protos.Endorsement")
ChaincodeEndorsedAction = _message_class("protos.ChaincodeEndorsedAction")
ChaincodeActionPayload = _message_class("protos.ChaincodeActionPayload")
TransactionAction = _message_class("protos.TransactionAction")
Transaction = _message_class("protos.Transaction")

EvaluateRequest = _message_class("gateway.EvaluateRequest")
EvaluateResponse = _message_class("gateway.EvaluateResponse")
EndorseRequest = _message_class("gateway.EndorseRequest")
EndorseResponse = _message_class("gateway.EndorseResponse")
SubmitRequest = _message_class("gateway.SubmitRequest")
SubmitResponse = _message_class("gateway.SubmitResponse")
CommitStatusRequest = _message_class("gateway.CommitStatusRequest")
SignedCommitStatusRequest = _message_class("gateway.SignedCommitStatusRequest")
CommitStatusResponse = _message_class("gateway.CommitStatusResponse")
