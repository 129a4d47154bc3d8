"""
API server package — HTTP/JSON interface.

Exposes odyssey state, list balances, mint payloads and metadata updates.
Delegates every chain operation to the injected OdysseyClient.
"""
