"""
Default OdysseyClient over aptos-sdk.

- Reads (odyssey, stage, list balances) are view functions on the odyssey
  module published at the resource account.
- Mint payloads are wallet-adapter entry-function payloads, one per token,
  left unsigned for the minter's wallet.
- Metadata updates upload new artwork to Arweave, then sign and submit
  update_metadata_image as the creator and return the committed transaction.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

from aptos_sdk.account import Account
from aptos_sdk.account_address import AccountAddress
from aptos_sdk.async_client import RestClient
from aptos_sdk.bcs import Serializer
from aptos_sdk.transactions import EntryFunction, TransactionArgument, TransactionPayload

from odyssey_gateway.chain.network import resolve_network
from odyssey_gateway.logging import get_logger
from odyssey_gateway.sdk.arweave import ArweaveUploader

logger = get_logger(__name__)

ODYSSEY_MODULE = "odyssey"
VIEW_GET_ODYSSEY = "get_odyssey"
VIEW_GET_STAGE = "get_stage"
VIEW_ALLOWLIST_BALANCE = "get_allowlist_balance"
VIEW_PUBLICLIST_BALANCE = "get_publiclist_balance"
ENTRY_MINT_TO = "mint_to"
ENTRY_UPDATE_METADATA_IMAGE = "update_metadata_image"


def _decode_view(raw: Any) -> Any:
    """View responses are a JSON array of return values; unwrap a single value."""
    if isinstance(raw, (bytes, bytearray, str)):
        raw = json.loads(raw)
    if isinstance(raw, list) and len(raw) == 1:
        return raw[0]
    return raw


def _to_int(value: Any) -> int:
    """u64 values come back as decimal strings."""
    if value is None:
        return 0
    return int(value)


class AptosOdysseyClient:
    """OdysseyClient backed by an odyssey Move module. module_address defaults to the resource account."""

    def __init__(self, uploader: ArweaveUploader | None = None, module_address: str | None = None) -> None:
        self.uploader = uploader or ArweaveUploader()
        self.module_address = module_address

    def _function(self, resource_account: str, name: str) -> str:
        return f"{self.module_address or resource_account}::{ODYSSEY_MODULE}::{name}"

    async def _view(self, aptos: RestClient, function: str, arguments: list[str]) -> Any:
        raw = await aptos.view(function, [], arguments)
        return _decode_view(raw)

    async def get_odyssey(self, aptos: RestClient, resource_account: str) -> Any:
        return await self._view(aptos, self._function(resource_account, VIEW_GET_ODYSSEY), [resource_account])

    async def get_stage(self, aptos: RestClient, resource_account: str) -> Any:
        return await self._view(aptos, self._function(resource_account, VIEW_GET_STAGE), [resource_account])

    async def get_allowlist_balance(self, aptos: RestClient, resource_account: str, address: str) -> int:
        value = await self._view(
            aptos, self._function(resource_account, VIEW_ALLOWLIST_BALANCE), [resource_account, address]
        )
        return _to_int(value)

    async def get_publiclist_balance(self, aptos: RestClient, resource_account: str, address: str) -> int:
        value = await self._view(
            aptos, self._function(resource_account, VIEW_PUBLICLIST_BALANCE), [resource_account, address]
        )
        return _to_int(value)

    async def get_mint_to_payloads(
        self,
        address: str,
        resource_account: str,
        mint_qty: str,
        network: str,
        token_uri: str | None,
    ) -> list[dict[str, Any]]:
        qty = int(mint_qty)
        if qty < 1:
            raise ValueError(f"mint quantity must be positive, got {mint_qty!r}")
        function = self._function(resource_account, ENTRY_MINT_TO)
        payloads = [
            {
                "type": "entry_function_payload",
                "function": function,
                "type_arguments": [],
                "arguments": [resource_account, address, token_uri or ""],
            }
            for _ in range(qty)
        ]
        logger.info(
            "mint_payloads_built",
            address=address,
            mint_qty=qty,
            network=resolve_network(network).value,
        )
        return payloads

    async def upload_nft(self, token_no: int | str, asset_dir: str, key_file_path: str) -> str:
        return await asyncio.to_thread(self.uploader.upload_token, token_no, asset_dir, key_file_path)

    async def update_metadata_image(
        self,
        aptos: RestClient,
        resource_account: str,
        creator: Account,
        token_no: str,
        token_address: str,
        asset_dir: str,
        key_file_path: str,
        random_trait: bool,
        collection_name: str,
        description: str,
    ) -> dict[str, Any]:
        uri = await asyncio.to_thread(
            self.uploader.upload_token,
            token_no,
            asset_dir,
            key_file_path,
            random_trait=random_trait,
            name=f"{collection_name} #{token_no}",
            description=description,
        )
        entry = EntryFunction.natural(
            f"{self.module_address or resource_account}::{ODYSSEY_MODULE}",
            ENTRY_UPDATE_METADATA_IMAGE,
            [],
            [
                TransactionArgument(AccountAddress.from_str(resource_account), Serializer.struct),
                TransactionArgument(AccountAddress.from_str(token_address), Serializer.struct),
                TransactionArgument(uri, Serializer.str),
            ],
        )
        signed = await aptos.create_bcs_signed_transaction(creator, TransactionPayload(entry))
        txn_hash = await aptos.submit_bcs_transaction(signed)
        await aptos.wait_for_transaction(txn_hash)
        logger.info("metadata_image_updated", token_no=token_no, token_address=token_address, txn_hash=txn_hash)
        return await aptos.transaction_by_hash(txn_hash)
