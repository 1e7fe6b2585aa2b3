"""ABI encoding for uPort registry read calls.

The registry exposes `get(bytes32 registrationIdentifier, address issuer,
address subject) returns (bytes32)`. A call is the 4 byte selector followed
by the three arguments, each as one 32 byte word.
"""

from eth_abi import encode as abi_encode
from eth_utils import function_signature_to_4byte_selector
from pydantic import BaseModel, ConfigDict, field_validator

from me.uport.resolver.model.account import Account, address_bytes

REGISTRY_GET_SIGNATURE = "get(bytes32,address,address)"
REGISTRY_GET_SELECTOR = function_signature_to_4byte_selector(REGISTRY_GET_SIGNATURE)
REGISTRY_GET_ARGUMENT_TYPES = ("bytes32", "address", "address")

DEFAULT_REGISTRATION_IDENTIFIER = "uPortProfileIPFS1220"


class CallPayload(BaseModel):
    """Target contract and call data for a single eth_call."""

    model_config = ConfigDict(frozen=True)

    to: bytes
    data: bytes

    @field_validator("to", mode="before")
    @classmethod
    def validate_to(cls, v) -> bytes:
        return address_bytes(v)

    def to_params(self) -> dict:
        return {"to": "0x" + self.to.hex(), "data": "0x" + self.data.hex()}


def encode_call(
    registration_identifier: str, issuer: Account, subject: Account
) -> bytes:
    """Encode a registry `get` call.

    Args:
        registration_identifier: Registry key, at most 32 UTF-8 bytes
        issuer: Account that registered the value
        subject: Account the value was registered for

    Returns:
        100 bytes of call data

    Raises:
        ValueError: If the identifier does not fit in a bytes32 word
    """
    identifier = registration_identifier.encode("utf-8")
    if len(identifier) > 32:
        raise ValueError(
            f"registration identifier is {len(identifier)} bytes, the limit is 32"
        )
    arguments = abi_encode(
        REGISTRY_GET_ARGUMENT_TYPES,
        (identifier, issuer.address, subject.address),
    )
    return REGISTRY_GET_SELECTOR + arguments


def build_call_payload(
    registry_address: bytes,
    registration_identifier: str,
    issuer: Account,
    subject: Account,
) -> CallPayload:
    return CallPayload(
        to=registry_address,
        data=encode_call(registration_identifier, issuer, subject),
    )
