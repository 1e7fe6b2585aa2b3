from typing import List
import argparse
import aiohttp
import asyncio
import logging

logger = logging.getLogger(__name__)

from me.uport.resolver.app.cli import bootstrap
from me.uport.resolver.errors import ResolutionError
from me.uport.resolver.resolve.identity import resolve_did_document, resolve_identity


async def realMain() -> None:
    parser = argparse.ArgumentParser(
        prog="mnid-resolve", description="Resolve uPort MNIDs to identity documents"
    )
    parser.add_argument("subject", nargs="+", help="The MNID(s) or did:uport DID(s) to resolve.")
    parser.add_argument(
        "--gateway",
        default=None,
        help="The IPFS gateway hostname to fetch documents from.",
    )
    parser.add_argument(
        "--registration-identifier",
        default=None,
        help="The registry key to read.",
    )
    parser.add_argument(
        "--did-document",
        action="store_true",
        help="Print a DID document instead of the raw uPort profile.",
    )

    args = vars(parser.parse_args())

    settings = bootstrap()
    subjects: List[str] = args.get("subject", [])
    resolve_kwargs = {
        "directory": settings.networks,
        "gateway": args.get("gateway") or settings.ipfs_gateway,
        "registration_identifier": args.get("registration_identifier")
        or settings.registration_identifier,
    }

    async with aiohttp.ClientSession(timeout=settings.client_timeout()) as session:
        for subject in subjects:
            try:
                if args.get("did_document"):
                    document = await resolve_did_document(session, subject, **resolve_kwargs)
                else:
                    document = await resolve_identity(session, subject, **resolve_kwargs)
                print(document.model_dump_json(by_alias=True, exclude_none=True, indent=2))
            except ResolutionError as e:
                logger.error(f"could not resolve {subject} ({e.kind}): {e}")
            except Exception:
                logging.exception("Exception resolving subject %s", subject)


def main() -> None:
    asyncio.run(realMain())


if __name__ == "__main__":
    main()
