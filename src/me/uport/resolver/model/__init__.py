"""
Data Models

This package defines the pydantic models used throughout MNID resolution.

Key Models:
- account.py: Ethereum account (network id + 20 byte address) decoded from an MNID
- network.py: Per-network RPC endpoint and registry contract, and the immutable
  NetworkDirectory that looks them up
- document.py: uPort identity profile as stored on IPFS and its DID document form

Account and NetworkConfig are frozen; network ids are canonicalised to minimal
0x-prefixed hex so that equality does not depend on how an id was spelled.
"""
