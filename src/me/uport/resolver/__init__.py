"""
MNID Resolver - uPort identity document resolution

This package resolves uPort identities, addressed by MNID (a Base58 encoding
of an Ethereum address together with its network id), to the identity
documents registered for them.

Key Components:
- ethereum: MNID codec, registry call ABI encoding and JSON-RPC eth_call
- ipfs: Digest to content address translation and gateway fetching
- model: Pydantic models for accounts, networks and identity documents
- resolve: The resolution pipeline and its CLI
- app: Configuration, logging and error reporting bootstrap
- errors: The ResolutionError taxonomy raised by every stage

Resolution Overview:
1. The subject MNID (and issuer MNID, defaulting to the subject) are decoded
2. The subject's network selects an RPC endpoint and registry contract
3. The registry returns the SHA2-256 digest of the registered document
4. The digest is turned into an IPFS content address and fetched from a gateway

All I/O goes through a caller supplied aiohttp ClientSession.
"""
