"""Ethereum JSON-RPC client for read-only contract calls."""

import logging
from typing import Any, Dict

from aiohttp import ClientError, ClientSession

from me.uport.resolver.errors import MalformedResponse, TransportError
from me.uport.resolver.ethereum.abi import CallPayload

logger = logging.getLogger(__name__)


def eth_call_request(payload: CallPayload, request_id: int = 1) -> Dict[str, Any]:
    """Build the JSON-RPC envelope for an eth_call against the latest block."""
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "method": "eth_call",
        "params": [payload.to_params(), "latest"],
    }


def extract_result(body: Any) -> str:
    """Pull the string `result` out of a JSON-RPC response body.

    Raises:
        MalformedResponse: If the body is not an object or has no string result
    """
    if not isinstance(body, dict):
        raise MalformedResponse("JSON-RPC response is not an object")
    if "result" not in body:
        error = body.get("error")
        if error is not None:
            raise MalformedResponse(f"JSON-RPC error response: {error}")
        raise MalformedResponse("JSON-RPC response has no result")
    result = body["result"]
    if not isinstance(result, str):
        raise MalformedResponse(
            f"JSON-RPC result is {type(result).__name__}, expected a string"
        )
    return result


async def eth_call(session: ClientSession, rpc_url: str, payload: CallPayload) -> str:
    """Execute an eth_call and return the raw hex result.

    Args:
        session: HTTP client session
        rpc_url: Network JSON-RPC endpoint
        payload: Contract address and call data

    Returns:
        Hex string returned by the node

    Raises:
        TransportError: If the request fails or the node answers with a non 2xx status
        MalformedResponse: If the response is not a JSON-RPC result
    """
    request = eth_call_request(payload)
    logger.debug(f"eth_call {rpc_url} {request['params'][0]}")
    try:
        async with session.post(rpc_url, json=request) as resp:
            if resp.status < 200 or resp.status >= 300:
                raise TransportError(
                    f"JSON-RPC endpoint {rpc_url} responded with status {resp.status}"
                )
            try:
                body = await resp.json(content_type=None)
            except ValueError as e:
                raise MalformedResponse(
                    f"JSON-RPC endpoint {rpc_url} returned invalid JSON"
                ) from e
    except ClientError as e:
        raise TransportError(f"request to {rpc_url} failed: {e}") from e

    return extract_result(body)
