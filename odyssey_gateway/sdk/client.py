"""
Capability interface for the odyssey SDK.

Routes only ever talk to this protocol. Return values are opaque JSON-able
objects passed straight through to the HTTP response.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from aptos_sdk.account import Account
from aptos_sdk.async_client import RestClient


@runtime_checkable
class OdysseyClient(Protocol):
    # Network-state reader
    async def get_odyssey(self, aptos: RestClient, resource_account: str) -> Any: ...

    async def get_stage(self, aptos: RestClient, resource_account: str) -> Any: ...

    # Balance reader
    async def get_allowlist_balance(self, aptos: RestClient, resource_account: str, address: str) -> Any: ...

    async def get_publiclist_balance(self, aptos: RestClient, resource_account: str, address: str) -> Any: ...

    # Payload builder
    async def get_mint_to_payloads(
        self,
        address: str,
        resource_account: str,
        mint_qty: str,
        network: str,
        token_uri: str | None,
    ) -> Any: ...

    # Metadata updater
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
    ) -> Any: ...

    # Asset uploader
    async def upload_nft(self, token_no: int | str, asset_dir: str, key_file_path: str) -> str: ...
