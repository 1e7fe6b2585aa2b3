"""
Unit tests for registry call encoding in me.uport.resolver.ethereum.abi

The registry only answers correctly when the call data matches its ABI byte
for byte, so these tests pin known-good encodings.
"""

import pytest

from me.uport.resolver.ethereum.abi import (
    DEFAULT_REGISTRATION_IDENTIFIER,
    REGISTRY_GET_SELECTOR,
    CallPayload,
    build_call_payload,
    encode_call,
)
from me.uport.resolver.model.account import Account

from conftest import ADDRESS, OTHER_ADDRESS

EXPECTED_CALL = bytes.fromhex(
    "447885f0"
    "75506f727450726f66696c654950465331323230000000000000000000000000"
    "000000000000000000000000f3beac30c498d9e26865f34fcaa57dbb935b0d74"
    "00000000000000000000000000521965e7bd230323c423d96c657db5b79d099f"
)


@pytest.fixture
def issuer() -> Account:
    return Account(network="0x1", address=OTHER_ADDRESS)


@pytest.fixture
def subject() -> Account:
    return Account(network="0x1", address=ADDRESS)


class TestEncodeCall:
    """Test suite for encode_call."""

    def test_selector(self):
        """Test the selector is keccak256("get(bytes32,address,address)")[:4]."""
        assert REGISTRY_GET_SELECTOR == bytes.fromhex("447885f0")

    def test_default_registration_identifier(self):
        assert DEFAULT_REGISTRATION_IDENTIFIER == "uPortProfileIPFS1220"

    def test_encode_pinned_vector(self, issuer, subject):
        """Test the full call data matches the pinned encoding."""
        data = encode_call("uPortProfileIPFS1220", issuer, subject)
        assert data == EXPECTED_CALL
        assert len(data) == 100

    def test_argument_order(self, issuer, subject):
        """Test issuer precedes subject in the encoded words."""
        data = encode_call("uPortProfileIPFS1220", issuer, subject)
        assert data[36 + 12 : 68] == OTHER_ADDRESS
        assert data[68 + 12 : 100] == ADDRESS

    def test_identifier_exactly_32_bytes(self, issuer, subject):
        data = encode_call("x" * 32, issuer, subject)
        assert data[4:36] == b"x" * 32

    def test_identifier_too_long(self, issuer, subject):
        with pytest.raises(ValueError, match="32"):
            encode_call("x" * 33, issuer, subject)

    def test_identifier_multibyte_utf8(self, issuer, subject):
        """Test the length limit applies to UTF-8 bytes, not characters."""
        with pytest.raises(ValueError):
            encode_call("é" * 17, issuer, subject)


class TestCallPayload:
    """Test suite for CallPayload construction."""

    def test_build_call_payload(self, issuer, subject):
        registry = bytes.fromhex("ab5c8051b9a1df1aab0149f8b0630848b7ecabf6")
        payload = build_call_payload(
            registry, "uPortProfileIPFS1220", issuer, subject
        )
        assert payload.to == registry
        assert payload.data == EXPECTED_CALL

    def test_to_params(self, issuer, subject):
        payload = CallPayload(
            to="0xab5c8051b9a1df1aab0149f8b0630848b7ecabf6", data=EXPECTED_CALL
        )
        assert payload.to_params() == {
            "to": "0xab5c8051b9a1df1aab0149f8b0630848b7ecabf6",
            "data": "0x" + EXPECTED_CALL.hex(),
        }
