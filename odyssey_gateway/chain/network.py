"""
Aptos network resolution and signer loading.

resolve_network() maps a configured network name to one of four fixed
targets and never fails: anything unrecognised falls back to devnet.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from enum import Enum
from typing import AsyncIterator

from aptos_sdk.account import Account
from aptos_sdk.async_client import RestClient

from odyssey_gateway.logging import get_logger

logger = get_logger(__name__)


class AptosNetwork(str, Enum):
    DEVNET = "devnet"
    TESTNET = "testnet"
    MAINNET = "mainnet"
    RANDOMNET = "randomnet"


NODE_URLS: dict[AptosNetwork, str] = {
    AptosNetwork.DEVNET: "https://api.devnet.aptoslabs.com/v1",
    AptosNetwork.TESTNET: "https://api.testnet.aptoslabs.com/v1",
    AptosNetwork.MAINNET: "https://api.mainnet.aptoslabs.com/v1",
    AptosNetwork.RANDOMNET: "https://fullnode.random.aptoslabs.com/v1",
}

# Config names are not the enum values: "random" selects randomnet.
_NAME_TO_NETWORK: dict[str, AptosNetwork] = {
    "testnet": AptosNetwork.TESTNET,
    "mainnet": AptosNetwork.MAINNET,
    "random": AptosNetwork.RANDOMNET,
}


def resolve_network(name: str | None) -> AptosNetwork:
    """Case-insensitive lookup; unknown, empty or missing names resolve to devnet."""
    if not isinstance(name, str):
        return AptosNetwork.DEVNET
    return _NAME_TO_NETWORK.get(name.lower(), AptosNetwork.DEVNET)


def get_network(name: str | None) -> RestClient:
    """Return a REST client for the fullnode of the resolved network."""
    network = resolve_network(name)
    logger.debug("network_resolved", requested=name, network=network.value)
    return RestClient(NODE_URLS[network])


@asynccontextmanager
async def network_client(name: str | None) -> AsyncIterator[RestClient]:
    """Per-request network handle; the underlying HTTP client is closed on exit."""
    client = get_network(name)
    try:
        yield client
    finally:
        await client.close()


AIP80_ED25519_PREFIX = "ed25519-priv-"


def normalize_private_key(private_key: str) -> str:
    """
    Return the key in AIP-80 form (ed25519-priv-0x<64 hex>).

    Accepted inputs: AIP-80 strings, 0x-prefixed hex, bare hex. Surrounding
    whitespace is ignored.
    """
    key = private_key.strip()
    if key.lower().startswith(AIP80_ED25519_PREFIX):
        key = key[len(AIP80_ED25519_PREFIX):]
    if not key.lower().startswith("0x"):
        key = "0x" + key
    return AIP80_ED25519_PREFIX + "0x" + key[2:].lower()


def get_account(private_key: str) -> Account:
    """Load the creator signer from an Ed25519 private key (see normalize_private_key)."""
    return Account.load_key(normalize_private_key(private_key))
