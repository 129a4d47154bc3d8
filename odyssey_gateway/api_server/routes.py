"""
API route definitions — /api endpoints.

Every handler resolves a network handle, optionally a signer, makes one
OdysseyClient call and wraps the result in a single-key JSON body. A missing
result (None, False, 0, NaN or "") maps to a zero value (null, 0 or "") with
status 200; empty dicts and lists are results and pass through.

Failure policy per endpoint:
- soft (allowlist-balance, publiclist-balance): any failure -> 200 {"balance": 0}
- hard (everything else): any failure -> UpstreamCallError -> 500 {"error": "Internal Server Error"}
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from fastapi import APIRouter, Depends, Request

from odyssey_gateway.chain.network import get_account, network_client
from odyssey_gateway.chain.reveal import requires_delayed_reveal, resolve_token_uri
from odyssey_gateway.config.settings import GatewayConfig
from odyssey_gateway.core.exceptions import UpstreamCallError
from odyssey_gateway.logging import get_logger
from odyssey_gateway.sdk.client import OdysseyClient

logger = get_logger(__name__)

router = APIRouter()

ERR_READING_ODYSSEY = "Error reading odyssey:"
ERR_READING_STAGE = "Error reading stage:"
ERR_READING_MINT = "Error reading mint txn:"
ERR_UPDATING_TOKEN = "Error updating TOKEN:"


def _has_result(value: Any) -> bool:
    """False only for None, False, 0, NaN and the empty string."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value == value and value != 0
    return True


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------

def get_config(request: Request) -> GatewayConfig:
    """Dependency: immutable config attached to the app at creation."""
    return request.app.state.config


def get_odyssey_client(request: Request) -> OdysseyClient:
    return request.app.state.odyssey_client


# -----------------------------------------------------------------------------
# Hard endpoints
# -----------------------------------------------------------------------------

@router.get("/get-odyssey")
async def get_odyssey(
    config: GatewayConfig = Depends(get_config),
    client: OdysseyClient = Depends(get_odyssey_client),
) -> dict[str, Any]:
    try:
        async with network_client(config.network) as aptos:
            odyssey = await client.get_odyssey(aptos, config.resource_account)
    except Exception as e:
        raise UpstreamCallError(ERR_READING_ODYSSEY, e) from e
    return {"odyssey": odyssey if _has_result(odyssey) else None}


@router.get("/get-stage")
async def get_stage(
    config: GatewayConfig = Depends(get_config),
    client: OdysseyClient = Depends(get_odyssey_client),
) -> dict[str, Any]:
    try:
        async with network_client(config.network) as aptos:
            stage = await client.get_stage(aptos, config.resource_account)
    except Exception as e:
        raise UpstreamCallError(ERR_READING_STAGE, e) from e
    return {"stage": stage if _has_result(stage) else None}


@router.get("/get-mint-txn/{address}/{mint_qty}")
async def get_mint_txn(
    address: str,
    mint_qty: str,
    config: GatewayConfig = Depends(get_config),
    client: OdysseyClient = Depends(get_odyssey_client),
) -> dict[str, Any]:
    """
    Unsigned mint payloads for address. Under delayed reveal the placeholder
    art is uploaded first and its URI used; otherwise base_token_uri is used.
    """
    try:
        token_uri = await resolve_token_uri(config, client)
        payloads = await client.get_mint_to_payloads(
            address,
            config.resource_account,
            mint_qty,
            config.network,
            token_uri,
        )
    except Exception as e:
        raise UpstreamCallError(ERR_READING_MINT, e) from e
    return {"payloads": payloads if _has_result(payloads) else ""}


@router.get("/update-metadata-image/{token_no}/{token_address}")
async def update_metadata_image(
    token_no: str,
    token_address: str,
    config: GatewayConfig = Depends(get_config),
    client: OdysseyClient = Depends(get_odyssey_client),
) -> dict[str, Any]:
    """
    Reveal token_no's artwork. Skipped (empty simpleTxn) while the collection
    is still waiting on a delayed reveal.
    """
    if requires_delayed_reveal(config):
        logger.info("metadata_update_skipped", token_no=token_no, reason="delayed_reveal")
        return {"simpleTxn": ""}
    try:
        async with network_client(config.network) as aptos:
            creator = get_account(config.private_key)
            txn = await client.update_metadata_image(
                aptos,
                config.resource_account,
                creator,
                token_no,
                token_address,
                config.collection.asset_dir,
                config.key_file_path,
                config.random_trait,
                config.collection.collection_name,
                config.collection.description,
            )
    except Exception as e:
        raise UpstreamCallError(ERR_UPDATING_TOKEN, e) from e
    return {"simpleTxn": txn if _has_result(txn) else ""}


@router.get("/get-network")
async def get_network_name(config: GatewayConfig = Depends(get_config)) -> dict[str, Any]:
    """Configured network name exactly as written in config.json."""
    return {"network": config.network}


# -----------------------------------------------------------------------------
# Soft endpoints
# -----------------------------------------------------------------------------

BalanceReader = Callable[[Any, str, str], Awaitable[Any]]


async def _read_balance(endpoint: str, reader: BalanceReader, config: GatewayConfig, address: str) -> dict[str, Any]:
    """Balance lookups never fail the request: errors read as a zero balance."""
    try:
        async with network_client(config.network) as aptos:
            balance = await reader(aptos, config.resource_account, address)
    except Exception as e:
        logger.debug("balance_lookup_failed", endpoint=endpoint, address=address, error=str(e))
        return {"balance": 0}
    return {"balance": balance if _has_result(balance) else 0}


@router.get("/allowlist-balance/{address}")
async def allowlist_balance(
    address: str,
    config: GatewayConfig = Depends(get_config),
    client: OdysseyClient = Depends(get_odyssey_client),
) -> dict[str, Any]:
    return await _read_balance("allowlist_balance", client.get_allowlist_balance, config, address)


@router.get("/publiclist-balance/{address}")
async def publiclist_balance(
    address: str,
    config: GatewayConfig = Depends(get_config),
    client: OdysseyClient = Depends(get_odyssey_client),
) -> dict[str, Any]:
    return await _read_balance("publiclist_balance", client.get_publiclist_balance, config, address)
