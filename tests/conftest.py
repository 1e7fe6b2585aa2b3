"""
Shared test configuration and fixtures for resolver tests.

Provides known-good MNIDs, digests and aiohttp session stubs used across the
test modules.
"""

import json
from typing import Any, Optional
from unittest.mock import AsyncMock

import pytest
from aiohttp import ClientResponse, ClientSession

# Address 0x00521965e7bd230323c423d96c657db5b79d099f
MAINNET_MNID = "2nQtiQG6Cgm1GYTBaaKAgr76uY7iSexUkqX"
ROPSTEN_MNID = "2oDZvNUgn77w2BKTkd9qKpMeUo8EL94QL5V"
KOVAN_MNID = "34ukSmiK1oA1C5Du8aWpkjFGALoH7nsHeDX"
PRIVATE_CHAIN_MNID = "9Xy8yQpdeCNSPGQ9jwTha9MRSb2QJ8HYzf1u"
ADDRESS = bytes.fromhex("00521965e7bd230323c423d96c657db5b79d099f")

# Address 0xf3beac30c498d9e26865f34fcaa57dbb935b0d74
OTHER_MAINNET_MNID = "2no5pfgt4viX4ZFoNvXU3LmPZEpmaEXYzA8"
OTHER_RINKEBY_MNID = "2p16dd1mw4Fuh1ZDdznTzo9Cv8LYQNqATDq"
OTHER_ADDRESS = bytes.fromhex("f3beac30c498d9e26865f34fcaa57dbb935b0d74")

# sha256("uport profile") and its IPFS content address
DIGEST = "0x7ed82732543e3031b4e47c3af56b648655a89d6149c10a852c41ef902fba8c17"
CONTENT_ADDRESS = "QmWsoFF288mSyLGrphYj41huKksjVp4MsKrnrMPn9ygR9G"
ZERO_CONTENT_ADDRESS = "QmNLei78zWmzUdbeRB3CiUfAizWUrbeeZh5K1rhAQKCh51"

PROFILE = {
    "@context": "http://schema.org",
    "@type": "Person",
    "publicKey": "0x04613bb3a4874d27032618f020614c21cbe4c4e4781687525f6674089f9bd3d6c7f6eb13569053d31715a3ba32e0b791b97922af6387f087d6b5548c06944ab062",
    "publicEncKey": "QCFPBLm5pwmuTOu+haxv0+Vpmr6Rrz/DEEvbcjktQnQ=",
    "name": "Alice",
    "description": "Test identity",
    "image": {
        "@type": "ImageObject",
        "name": "avatar",
        "contentUrl": "/ipfs/QmSCnmXC91Arz2gj934Ce4DeR7d9fULWRepjzGMX6SSazB",
    },
}


def create_mock_response(
    status: int = 200,
    json_body: Any = None,
    text_body: Optional[str] = None,
    raw_body: Optional[bytes] = None,
) -> ClientResponse:
    """Create a mock aiohttp ClientResponse."""
    mock_response = AsyncMock(spec=ClientResponse)
    mock_response.status = status
    mock_response.json.return_value = json_body
    if text_body is None and json_body is not None:
        text_body = json.dumps(json_body)
    if raw_body is None and text_body is not None:
        raw_body = text_body.encode("utf-8")
    mock_response.text.return_value = text_body
    mock_response.read.return_value = raw_body
    return mock_response


def create_mock_session(
    rpc_response: Optional[ClientResponse] = None,
    gateway_response: Optional[ClientResponse] = None,
) -> ClientSession:
    """Create a mock ClientSession answering POSTs and GETs with fixed responses."""
    mock_session = AsyncMock(spec=ClientSession)
    if rpc_response is not None:
        mock_session.post.return_value.__aenter__.return_value = rpc_response
    if gateway_response is not None:
        mock_session.get.return_value.__aenter__.return_value = gateway_response
    return mock_session


def rpc_body(result: Any) -> dict:
    return {"jsonrpc": "2.0", "id": 1, "result": result}


@pytest.fixture
def profile() -> dict:
    return json.loads(json.dumps(PROFILE))


@pytest.fixture
def unreachable_session() -> ClientSession:
    """A session that fails the test if any request is made."""
    mock_session = AsyncMock(spec=ClientSession)
    mock_session.post.side_effect = AssertionError("unexpected POST")
    mock_session.get.side_effect = AssertionError("unexpected GET")
    return mock_session
