"""Ethereum account model shared by the MNID codec and the registry resolver."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

HEX_DIGITS = re.compile(r"[0-9a-f]+")


def canonical_network_id(value: Any) -> str:
    """Normalize a network id to minimal lowercase hex with a 0x prefix.

    "0x01", "0x1" and "1" all become "0x1".

    Raises:
        ValueError: If the value is not a hex string
    """
    if not isinstance(value, str):
        raise ValueError("network id must be a hex string")
    digits = value.strip().lower().removeprefix("0x")
    if len(digits) == 0:
        raise ValueError("network id is empty")
    if HEX_DIGITS.fullmatch(digits) is None:
        raise ValueError(f"network id {value!r} is not hex")
    return hex(int(digits, 16))


def address_bytes(value: Any) -> bytes:
    """Coerce 20 raw bytes or a 40 digit hex string into an address."""
    if isinstance(value, str):
        digits = value.strip().lower().removeprefix("0x")
        if HEX_DIGITS.fullmatch(digits) is None or len(digits) % 2:
            raise ValueError(f"address {value!r} is not hex")
        value = bytes.fromhex(digits)
    if not isinstance(value, (bytes, bytearray)):
        raise ValueError("address must be bytes or a hex string")
    if len(value) != 20:
        raise ValueError(f"address must be 20 bytes, got {len(value)}")
    return bytes(value)


class Account(BaseModel):
    """An address on a specific Ethereum network.

    Produced by decoding an MNID. Immutable once constructed.
    """

    model_config = ConfigDict(frozen=True)

    network: str
    address: bytes

    @field_validator("network", mode="before")
    @classmethod
    def validate_network(cls, v) -> str:
        return canonical_network_id(v)

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v) -> bytes:
        return address_bytes(v)

    @property
    def address_hex(self) -> str:
        return "0x" + self.address.hex()
