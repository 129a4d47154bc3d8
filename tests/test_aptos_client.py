"""
Tests for the aptos-sdk backed OdysseyClient (odyssey_gateway.sdk.aptos_client).

The REST client is a mock; uploads go through a fake uploader.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from odyssey_gateway.sdk.aptos_client import AptosOdysseyClient, _decode_view

RESOURCE_ACCOUNT = "0x" + "ab" * 32
TOKEN_ADDRESS = "0x" + "cd" * 32
MINTER = "0x" + "ef" * 32


def _aptos(view_result=None):
    aptos = MagicMock()
    aptos.view = AsyncMock(return_value=view_result)
    aptos.create_bcs_signed_transaction = AsyncMock(return_value="signed")
    aptos.submit_bcs_transaction = AsyncMock(return_value="0xhash")
    aptos.wait_for_transaction = AsyncMock(return_value=None)
    aptos.transaction_by_hash = AsyncMock(return_value={"hash": "0xhash", "success": True})
    return aptos


def test_decode_view():
    assert _decode_view(b'["7"]') == "7"
    assert _decode_view('[{"stage": "public"}]') == {"stage": "public"}
    assert _decode_view(b'["a", "b"]') == ["a", "b"]
    assert _decode_view(["x"]) == "x"


def test_get_odyssey_calls_view():
    aptos = _aptos(b'[{"collection_name": "Odyssey Genesis"}]')
    result = asyncio.run(AptosOdysseyClient(uploader=MagicMock()).get_odyssey(aptos, RESOURCE_ACCOUNT))
    assert result == {"collection_name": "Odyssey Genesis"}
    aptos.view.assert_awaited_once_with(f"{RESOURCE_ACCOUNT}::odyssey::get_odyssey", [], [RESOURCE_ACCOUNT])


def test_module_address_override():
    aptos = _aptos(b'[{"name": "presale"}]')
    client = AptosOdysseyClient(uploader=MagicMock(), module_address="0x1")
    asyncio.run(client.get_stage(aptos, RESOURCE_ACCOUNT))
    aptos.view.assert_awaited_once_with("0x1::odyssey::get_stage", [], [RESOURCE_ACCOUNT])


@pytest.mark.parametrize("method, view", [
    ("get_allowlist_balance", "get_allowlist_balance"),
    ("get_publiclist_balance", "get_publiclist_balance"),
])
def test_balances_are_ints(method, view):
    aptos = _aptos(b'["3"]')
    client = AptosOdysseyClient(uploader=MagicMock())
    assert asyncio.run(getattr(client, method)(aptos, RESOURCE_ACCOUNT, MINTER)) == 3
    aptos.view.assert_awaited_once_with(f"{RESOURCE_ACCOUNT}::odyssey::{view}", [], [RESOURCE_ACCOUNT, MINTER])


def test_mint_payloads_one_per_token():
    client = AptosOdysseyClient(uploader=MagicMock())
    payloads = asyncio.run(client.get_mint_to_payloads(MINTER, RESOURCE_ACCOUNT, "3", "Testnet", "ar://xyz"))
    assert len(payloads) == 3
    assert payloads[0] == {
        "type": "entry_function_payload",
        "function": f"{RESOURCE_ACCOUNT}::odyssey::mint_to",
        "type_arguments": [],
        "arguments": [RESOURCE_ACCOUNT, MINTER, "ar://xyz"],
    }


@pytest.mark.parametrize("qty", ["0", "-1", "abc", ""])
def test_mint_payloads_bad_quantity(qty):
    client = AptosOdysseyClient(uploader=MagicMock())
    with pytest.raises(ValueError):
        asyncio.run(client.get_mint_to_payloads(MINTER, RESOURCE_ACCOUNT, qty, "devnet", "ar://xyz"))


def test_upload_nft_delegates_to_uploader():
    uploader = MagicMock()
    uploader.upload_token.return_value = "https://arweave.net/tx2"
    client = AptosOdysseyClient(uploader=uploader)
    assert asyncio.run(client.upload_nft(0, "./assets", "key.json")) == "https://arweave.net/tx2"
    uploader.upload_token.assert_called_once_with(0, "./assets", "key.json")


def test_update_metadata_image_signs_and_submits():
    uploader = MagicMock()
    uploader.upload_token.return_value = "https://arweave.net/meta"
    aptos = _aptos()
    creator = MagicMock()
    client = AptosOdysseyClient(uploader=uploader)
    txn = asyncio.run(
        client.update_metadata_image(
            aptos,
            RESOURCE_ACCOUNT,
            creator,
            "5",
            TOKEN_ADDRESS,
            "./assets",
            "key.json",
            True,
            "Odyssey Genesis",
            "Genesis drop",
        )
    )
    assert txn == {"hash": "0xhash", "success": True}
    uploader.upload_token.assert_called_once_with(
        "5", "./assets", "key.json", random_trait=True, name="Odyssey Genesis #5", description="Genesis drop"
    )
    args = aptos.create_bcs_signed_transaction.await_args.args
    assert args[0] is creator
    aptos.submit_bcs_transaction.assert_awaited_once_with("signed")
    aptos.wait_for_transaction.assert_awaited_once_with("0xhash")
    aptos.transaction_by_hash.assert_awaited_once_with("0xhash")
