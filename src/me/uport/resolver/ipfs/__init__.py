"""
IPFS Integration

Key Components:
- content.py: Translates the 32 byte digest held by the registry into an IPFS
  content address (Base58 sha2-256 multihash)
- gateway.py: Fetches and decodes identity documents from an HTTP gateway
"""
