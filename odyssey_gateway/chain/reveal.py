"""
Delayed-reveal decision shared by the mint and metadata-update endpoints.

A collection uses delayed reveal when reveal_required is set and no
base_token_uri is configured. Minting then uploads placeholder art and
uses the uploaded URI; metadata updates are skipped. Otherwise the preset
base_token_uri is used and updates go through the full signer path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from odyssey_gateway.config.settings import GatewayConfig
from odyssey_gateway.logging import get_logger

if TYPE_CHECKING:
    from odyssey_gateway.sdk.client import OdysseyClient

logger = get_logger(__name__)

PLACEHOLDER_TOKEN_NO = 0


def requires_delayed_reveal(config: GatewayConfig) -> bool:
    return bool(config.reveal_required) and not config.base_token_uri


async def resolve_token_uri(config: GatewayConfig, client: OdysseyClient) -> str | None:
    """Token URI for new mints: uploaded placeholder art, or the preset base_token_uri."""
    if requires_delayed_reveal(config):
        uri = await client.upload_nft(PLACEHOLDER_TOKEN_NO, config.asset_dir, config.key_file_path)
        logger.info("placeholder_uploaded", token_uri=uri)
        return uri
    return config.base_token_uri
