"""
Identity Resolution

This package resolves uPort identities (MNIDs and did:uport DIDs) to their
registered identity documents.

Key Components:
- registry.py: Reads the document digest from the uPort registry contract
- identity.py: Full pipeline and callback based entry point
- __main__.py: CLI interface for resolution

The resolution flow follows these steps:
1. Decode the issuer and subject MNIDs and check they share a network
2. Look up the network's RPC endpoint and registry contract
3. eth_call the registry's get(bytes32,address,address) for the digest
4. Translate the digest into an IPFS content address
5. Fetch the document from the IPFS gateway and decode it

Each step fails fast with a specific ResolutionError subclass; there are no
retries and nothing is cached.
"""
