"""
Ethereum Integration

This package handles everything that talks to, or encodes data for, Ethereum.

Key Components:
- mnid.py: MNID codec (network-qualified Base58 addresses)
- abi.py: ABI encoding of the uPort registry `get(bytes32,address,address)` call
- rpc.py: JSON-RPC eth_call over aiohttp

The registry is only ever read; no transactions are built or signed here.
"""
