"""
Pytest fixtures for Odyssey Gateway tests.

Builds configs in memory and injects a fake OdysseyClient through create_app,
so no Aptos node or Arweave gateway is contacted.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

RESOURCE_ACCOUNT = "0x" + "ab" * 32


def build_config(**overrides: Any):
    from odyssey_gateway.config.settings import GatewayConfig

    data: dict[str, Any] = {
        "network": "devnet",
        "collection": {
            "collection_name": "Odyssey Genesis",
            "description": "Genesis drop",
            "asset_dir": "./assets",
        },
        "resource_account": RESOURCE_ACCOUNT,
        "storage": {"arweave": {"key_file_path": "./arweave-key.json"}},
        "private_key": "0x" + "11" * 32,
        "random_trait": False,
        "reveal_required": False,
        "base_token_uri": None,
    }
    data.update(overrides)
    return GatewayConfig.model_validate(data)


@pytest.fixture
def config_factory():
    return build_config


@pytest.fixture
def fake_client():
    """OdysseyClient double: every SDK method is an AsyncMock."""
    client = MagicMock()
    client.get_odyssey = AsyncMock(return_value={"collection_name": "Odyssey Genesis"})
    client.get_stage = AsyncMock(return_value={"name": "public", "start_time": 1700000000})
    client.get_allowlist_balance = AsyncMock(return_value=2)
    client.get_publiclist_balance = AsyncMock(return_value=5)
    client.get_mint_to_payloads = AsyncMock(return_value=[{"function": "mint_to"}])
    client.update_metadata_image = AsyncMock(return_value={"hash": "0xfeed", "success": True})
    client.upload_nft = AsyncMock(return_value="https://arweave.net/placeholder")
    return client


@pytest.fixture
def fake_network(monkeypatch):
    """
    Replace per-request network resolution in the routes. The returned mock
    records the network names requested; handlers receive "aptos-handle".
    """
    import odyssey_gateway.api_server.routes as routes

    calls = MagicMock()

    @asynccontextmanager
    async def _network_client(name):
        calls(name)
        yield "aptos-handle"

    monkeypatch.setattr(routes, "network_client", _network_client)
    return calls


@pytest.fixture
def fake_account(monkeypatch):
    import odyssey_gateway.api_server.routes as routes

    account = MagicMock(return_value="creator-account")
    monkeypatch.setattr(routes, "get_account", account)
    return account


@pytest.fixture
def make_client(fake_client, fake_network, fake_account):
    """Factory: TestClient over create_app(config, fake_client)."""
    from fastapi.testclient import TestClient

    from odyssey_gateway.api_server.server import create_app

    def _make(config=None):
        return TestClient(create_app(config or build_config(), fake_client))

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
