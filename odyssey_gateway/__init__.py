"""
Odyssey Gateway — HTTP gateway for Aptos odyssey NFT collections.

Exposes collection and stage state, allowlist/public-list balances, mint
payload construction and revealed-metadata updates as JSON endpoints. The
chain interaction itself is delegated to an injected SDK client.
"""

__version__ = "0.1.0"
