"""
SDK boundary — the odyssey client the API server delegates to.

OdysseyClient is the capability interface the routes depend on;
AptosOdysseyClient is the default implementation over aptos-sdk and Arweave.
"""

from odyssey_gateway.sdk.client import OdysseyClient

__all__ = ["OdysseyClient"]
