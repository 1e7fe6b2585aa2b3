"""Registry digest to IPFS content address translation.

The registry stores only the 32 byte SHA2-256 digest of a document. The IPFS
content address is the Base58 form of the full multihash: 0x12 (sha2-256),
0x20 (32 bytes), then the digest.
"""

import base58

from me.uport.resolver.errors import TranslateError

SHA2_256_MULTIHASH_PREFIX = "1220"
MULTIHASH_LENGTH = 34


def strip_hex_prefix(value: str) -> str:
    return value[2:] if value[:2].lower() == "0x" else value


def is_empty_digest(hex_digest: str) -> bool:
    """True when the registry returned nothing or an all-zero word."""
    digits = strip_hex_prefix(hex_digest or "")
    return len(digits.strip("0")) == 0


def to_content_address(hex_digest: str) -> str:
    """Translate a registry digest into an IPFS content address.

    Args:
        hex_digest: 32 byte digest as hex, with or without 0x

    Returns:
        Base58 multihash, e.g. Qm...

    Raises:
        TranslateError: If the digest is not hex or not 32 bytes long
    """
    multihash_hex = SHA2_256_MULTIHASH_PREFIX + strip_hex_prefix(hex_digest)
    try:
        multihash = bytes.fromhex(multihash_hex)
    except ValueError as e:
        raise TranslateError(f"digest {hex_digest!r} is not valid hex") from e

    if len(multihash) != MULTIHASH_LENGTH:
        raise TranslateError(
            f"multihash is {len(multihash)} bytes, expected {MULTIHASH_LENGTH}"
        )

    return base58.b58encode(multihash).decode("ascii")
