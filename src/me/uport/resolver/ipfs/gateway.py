"""IPFS gateway document fetching."""

import logging

from aiohttp import ClientError, ClientSession
from pydantic import ValidationError

from me.uport.resolver.errors import DecodeError, TransportError
from me.uport.resolver.model.document import IdentityDocument

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY = "ipfs.infura.io"


def gateway_url(content_address: str, gateway: str = DEFAULT_GATEWAY) -> str:
    return f"https://{gateway}/ipfs/{content_address}"


async def fetch_document(
    session: ClientSession, content_address: str, gateway: str = DEFAULT_GATEWAY
) -> IdentityDocument:
    """Fetch an identity document from an IPFS gateway.

    Args:
        session: HTTP client session
        content_address: Base58 IPFS content address
        gateway: Gateway hostname

    Returns:
        Decoded IdentityDocument

    Raises:
        TransportError: If the request fails or the gateway answers with a non 2xx status
        DecodeError: If the body is not a JSON object matching the document schema
    """
    url = gateway_url(content_address, gateway)
    logger.debug(f"fetching identity document {url}")
    try:
        async with session.get(url) as resp:
            if resp.status < 200 or resp.status >= 300:
                raise TransportError(f"gateway {url} responded with status {resp.status}")
            body = await resp.read()
    except ClientError as e:
        raise TransportError(f"request to {url} failed: {e}") from e

    try:
        return IdentityDocument.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"document at {url} is not a valid identity document") from e
