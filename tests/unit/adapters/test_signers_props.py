"""Hypothesis property tests for signers and result decoding.

- **Verification**: every ECDSA signature verifies against the public key for
  any message, and every Ed25519 signature verifies over the message itself.
- **Low-S**: ECDSA signatures never carry an S above half the curve order.
- **Determinism**: one key and one message always give the same signature.
- **Total decoding**: any payload a peer returns can be shown, including
  arrays nested past the parser recursion limit; decoding never raises.
"""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature
from hypothesis import given, settings
from hypothesis import strategies as st

from utopia_gateway.adapters.signers import CURVE_ORDERS, new_private_key_signer
from utopia_gateway.domain.value_objects import CallKind, StepResult

pytestmark = [pytest.mark.property]

EC_KEY = ec.generate_private_key(ec.SECP256R1())
ED_KEY = ed25519.Ed25519PrivateKey.generate()


@settings(max_examples=50, deadline=None)
@given(message=st.binary(max_size=4096))
def test_ecdsa_signatures_verify_and_are_low_s(message: bytes):
    """Any message signs to one verifiable, low-S signature."""
    signer = new_private_key_signer(EC_KEY)
    signature = signer.sign_message(message)

    assert signer.sign_message(message) == signature

    EC_KEY.public_key().verify(signature, message, ec.ECDSA(hashes.SHA256()))
    _, s = decode_dss_signature(signature)
    assert s <= CURVE_ORDERS["secp256r1"] // 2


@settings(max_examples=50, deadline=None)
@given(message=st.binary(max_size=4096))
def test_ed25519_signatures_verify(message: bytes):
    """Ed25519 signs the message itself."""
    signature = new_private_key_signer(ED_KEY).sign_message(message)
    ED_KEY.public_key().verify(signature, message)


NESTED_PAYLOADS = st.builds(
    lambda depth, closed: b"[" * depth + (b"]" * depth if closed else b""),
    st.integers(min_value=1, max_value=200_000),
    st.booleans(),
)


@settings(deadline=None)
@given(
    payload=st.one_of(st.binary(max_size=512), NESTED_PAYLOADS),
    kind=st.sampled_from(CallKind),
)
def test_any_payload_can_be_displayed(payload: bytes, kind: CallKind):
    """Text and value never raise, whatever the peer returned."""
    result = StepResult("step", "GetUser", kind, payload)

    value = result.value
    assert isinstance(result.text, str)
    if not payload:
        assert value is None
