"""MNID encoding and decoding.

An MNID packs an Ethereum address and its network id into one Base58 string:

    base58(version || network || address || checksum)

version is the single byte 0x01, network is the network id as big-endian
bytes, address is 20 bytes and checksum is the first 4 bytes of
SHA3-256(version || network || address).
"""

import hashlib

import base58

from me.uport.resolver.model.account import Account

VERSION = b"\x01"
ADDRESS_LENGTH = 20
CHECKSUM_LENGTH = 4
MINIMUM_LENGTH = len(VERSION) + 1 + ADDRESS_LENGTH + CHECKSUM_LENGTH


class MNIDDecodeError(ValueError):
    """Raised when a string is not a well formed MNID."""


def checksum(payload: bytes) -> bytes:
    return hashlib.sha3_256(payload).digest()[:CHECKSUM_LENGTH]


def network_bytes(network: str) -> bytes:
    digits = network.removeprefix("0x")
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def encode(account: Account) -> str:
    """Encode an account as an MNID."""
    payload = VERSION + network_bytes(account.network) + account.address
    return base58.b58encode(payload + checksum(payload)).decode("ascii")


def decode(mnid: str) -> Account:
    """Decode an MNID into its account.

    Args:
        mnid: Base58 MNID string

    Returns:
        Account with canonical network id and raw address bytes

    Raises:
        MNIDDecodeError: If the string is empty, not Base58, too short, has an
            unknown version or a bad checksum
    """
    if mnid is None or len(mnid) == 0:
        raise MNIDDecodeError("MNID is empty")

    try:
        data = base58.b58decode(mnid)
    except ValueError as e:
        raise MNIDDecodeError(f"MNID {mnid!r} is not valid base58") from e

    if len(data) < MINIMUM_LENGTH:
        raise MNIDDecodeError(f"MNID {mnid!r} is too short ({len(data)} bytes)")

    address_start = len(data) - CHECKSUM_LENGTH - ADDRESS_LENGTH
    version = data[:1]
    network = data[1:address_start]
    address = data[address_start:-CHECKSUM_LENGTH]
    check = data[-CHECKSUM_LENGTH:]

    if version != VERSION:
        raise MNIDDecodeError(f"MNID {mnid!r} has unsupported version {version.hex()}")

    if check != checksum(version + network + address):
        raise MNIDDecodeError(f"MNID {mnid!r} has an invalid checksum")

    return Account(network="0x" + network.hex(), address=address)


def is_mnid(value: str) -> bool:
    try:
        decode(value)
    except MNIDDecodeError:
        return False
    return True
