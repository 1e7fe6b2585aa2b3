"""uPort registry lookups.

Reads the digest registered for a (registration identifier, issuer, subject)
triple from the uPort registry contract on the subject's network.
"""

import logging
from typing import Optional

from aiohttp import ClientSession

from me.uport.resolver.errors import (
    InvalidAccount,
    NetworkMismatch,
    ResolutionError,
)
from me.uport.resolver.ethereum import mnid
from me.uport.resolver.ethereum.abi import (
    DEFAULT_REGISTRATION_IDENTIFIER,
    build_call_payload,
)
from me.uport.resolver.ethereum.rpc import eth_call
from me.uport.resolver.model.account import Account
from me.uport.resolver.model.network import DEFAULT_DIRECTORY, NetworkDirectory

logger = logging.getLogger(__name__)


def decode_account(value: str, role: str) -> Account:
    """Decode an MNID, raising InvalidAccount naming the failing role."""
    try:
        return mnid.decode(value)
    except mnid.MNIDDecodeError as e:
        raise InvalidAccount(f"could not decode {role} MNID: {e}", mnid=value) from e


async def resolve(
    session: ClientSession,
    subject_id: str,
    issuer_id: Optional[str] = None,
    registration_identifier: str = DEFAULT_REGISTRATION_IDENTIFIER,
    directory: NetworkDirectory = DEFAULT_DIRECTORY,
) -> str:
    """Call the uPort registry and return the raw digest it holds.

    The issuer defaults to the subject. Issuer and subject must be on the same
    network; the registry and RPC endpoint come from the subject's network.

    Args:
        session: HTTP client session
        subject_id: Subject MNID
        issuer_id: Issuer MNID, defaults to subject_id
        registration_identifier: Registry key to read
        directory: Network table to resolve network ids against

    Returns:
        Hex string returned by eth_call

    Raises:
        InvalidAccount: If either MNID does not decode
        NetworkMismatch: If issuer and subject are on different networks
        UnknownNetwork: If the subject's network is not in the directory
        TransportError: If the JSON-RPC request fails
        MalformedResponse: If the JSON-RPC response has no string result
    """
    if issuer_id is None:
        issuer_id = subject_id

    issuer = decode_account(issuer_id, "issuer")
    subject = decode_account(subject_id, "subject")

    if issuer.network != subject.network:
        raise NetworkMismatch(
            f"issuer is on network {issuer.network}, subject is on network {subject.network}",
            mnid=subject_id,
            network=subject.network,
        )

    try:
        network = directory.lookup(subject.network)
        payload = build_call_payload(
            network.registry_address, registration_identifier, issuer, subject
        )
        logger.debug(
            f"calling registry {network.registry_address_hex} on {network.name} for {subject_id}"
        )
        return await eth_call(session, network.rpc_url, payload)
    except ResolutionError as e:
        raise e.with_context(mnid=subject_id, network=subject.network)
