"""MNID to identity document resolution.

Chains the registry lookup, digest translation and gateway fetch, and offers
a callback based entry point for callers that do not await the result.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from aiohttp import ClientSession
import sentry_sdk

from me.uport.resolver.errors import NotRegistered, ResolutionError
from me.uport.resolver.ethereum.abi import DEFAULT_REGISTRATION_IDENTIFIER
from me.uport.resolver.ipfs.content import is_empty_digest, to_content_address
from me.uport.resolver.ipfs.gateway import DEFAULT_GATEWAY, fetch_document
from me.uport.resolver.model.document import DIDDocument, IdentityDocument
from me.uport.resolver.model.network import DEFAULT_DIRECTORY, NetworkDirectory
from me.uport.resolver.resolve.registry import resolve

logger = logging.getLogger(__name__)

DID_METHOD_PREFIX = "did:uport:"

ProfileCallback = Callable[
    [Optional[IdentityDocument], Optional[ResolutionError]], Any
]


def parse_did(value: str) -> str:
    """Return the MNID from a bare MNID or a did:uport DID."""
    value = value.strip()
    return value.removeprefix(DID_METHOD_PREFIX)


async def resolve_content_address(
    session: ClientSession,
    mnid: str,
    directory: NetworkDirectory = DEFAULT_DIRECTORY,
    registration_identifier: str = DEFAULT_REGISTRATION_IDENTIFIER,
) -> str:
    """Resolve an MNID to the IPFS content address registered for it.

    Raises:
        NotRegistered: If the registry holds no value for the identity
        ResolutionError: The subclass names the failing stage
    """
    mnid = parse_did(mnid)

    digest = await resolve(
        session,
        mnid,
        registration_identifier=registration_identifier,
        directory=directory,
    )

    if is_empty_digest(digest):
        raise NotRegistered(
            f"no document registered under {registration_identifier}", mnid=mnid
        )

    try:
        content_address = to_content_address(digest)
    except ResolutionError as e:
        raise e.with_context(mnid=mnid)

    logger.debug(f"{mnid} is registered as {content_address}")
    return content_address


async def resolve_identity(
    session: ClientSession,
    mnid: str,
    directory: NetworkDirectory = DEFAULT_DIRECTORY,
    gateway: str = DEFAULT_GATEWAY,
    registration_identifier: str = DEFAULT_REGISTRATION_IDENTIFIER,
) -> IdentityDocument:
    """Resolve an MNID to its registered identity document.

    Args:
        session: HTTP client session
        mnid: Subject MNID or did:uport DID
        directory: Network table
        gateway: IPFS gateway hostname
        registration_identifier: Registry key to read

    Returns:
        IdentityDocument fetched from IPFS

    Raises:
        ResolutionError: The subclass names the failing stage
    """
    mnid = parse_did(mnid)

    content_address = await resolve_content_address(
        session,
        mnid,
        directory=directory,
        registration_identifier=registration_identifier,
    )

    try:
        return await fetch_document(session, content_address, gateway)
    except ResolutionError as e:
        raise e.with_context(mnid=mnid)


async def resolve_did_document(
    session: ClientSession, did: str, **kwargs: Any
) -> DIDDocument:
    """Resolve a did:uport DID (or bare MNID) to a DID document."""
    mnid = parse_did(did)
    document = await resolve_identity(session, mnid, **kwargs)
    return document.to_did_document(f"{DID_METHOD_PREFIX}{mnid}")


def profile_document(
    session: ClientSession,
    mnid: str,
    callback: ProfileCallback,
    **kwargs: Any,
) -> asyncio.Task:
    """Resolve an MNID in the background and report the outcome to `callback`.

    The callback runs exactly once, on the event loop, after resolution has
    finished: either `callback(document, None)` or `callback(None, error)`.
    Must be called from within a running event loop.

    Returns:
        The task running the resolution
    """
    loop = asyncio.get_running_loop()
    task = loop.create_task(resolve_identity(session, mnid, **kwargs))

    def on_done(finished: asyncio.Task) -> None:
        if finished.cancelled():
            loop.call_soon(
                callback, None, ResolutionError("resolution was cancelled", mnid=mnid)
            )
            return

        error = finished.exception()
        if error is None:
            loop.call_soon(callback, finished.result(), None)
            return

        if not isinstance(error, ResolutionError):
            sentry_sdk.capture_exception(error)
            wrapped = ResolutionError(
                f"internal error resolving identity document: {error!r}", mnid=mnid
            )
            wrapped.__cause__ = error
            error = wrapped

        logger.warning(f"resolution failed ({error.kind}): {error}")
        loop.call_soon(callback, None, error)

    task.add_done_callback(on_done)
    return task
