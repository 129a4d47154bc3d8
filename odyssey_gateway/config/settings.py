"""
Collection configuration: the config.json document, validated at startup.

The document is read once and never mutated. Models are frozen so the
same instance can be handed to every request handler.

Example:
    {
      "network": "testnet",
      "collection": {"collection_name": "Odyssey", "description": "...", "asset_dir": "./assets"},
      "resource_account": "0x...",
      "storage": {"arweave": {"key_file_path": "./arweave-key.json"}},
      "private_key": "ed25519-priv-0x...",
      "random_trait": false,
      "reveal_required": true,
      "base_token_uri": ""
    }
"""

from __future__ import annotations

import functools
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from odyssey_gateway.config.env import get_config_path
from odyssey_gateway.core.exceptions import ConfigError
from odyssey_gateway.logging import get_logger

logger = get_logger(__name__)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class CollectionConfig(_Frozen):
    """collection{} block: name and description shown on-chain, local asset directory."""

    collection_name: str = Field(..., min_length=1, description="On-chain collection name")
    description: str = Field("", description="Collection description")
    asset_dir: str = Field(..., min_length=1, description="Directory holding images/ and metadata/")


class ArweaveStorage(_Frozen):
    key_file_path: str = Field(..., min_length=1, description="Arweave JWK wallet file")


class StorageConfig(_Frozen):
    arweave: ArweaveStorage


class GatewayConfig(_Frozen):
    """Top-level config.json document."""

    network: str = Field(..., description="devnet | testnet | mainnet | random (case-insensitive)")
    collection: CollectionConfig
    resource_account: str = Field(..., min_length=1, description="Account holding odyssey state")
    storage: StorageConfig
    private_key: str = Field(..., min_length=1, description="Creator Ed25519 private key: ed25519-priv-0x<hex>, 0x<hex> or bare hex")
    random_trait: bool = False
    reveal_required: bool = False
    base_token_uri: str | None = None

    @field_validator("base_token_uri")
    @classmethod
    def _blank_uri_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @property
    def key_file_path(self) -> str:
        return self.storage.arweave.key_file_path

    @property
    def asset_dir(self) -> str:
        return self.collection.asset_dir


def load_config(path: Path | str) -> GatewayConfig:
    """
    Read and validate the collection config at path.

    Raises ConfigError with a descriptive message when the file is missing,
    is not JSON, or does not match the schema.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    try:
        config = GatewayConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config file {path} is invalid:\n{e}") from e
    logger.info(
        "config_loaded",
        path=str(path),
        network=config.network,
        resource_account=config.resource_account,
        reveal_required=config.reveal_required,
        has_base_token_uri=config.base_token_uri is not None,
    )
    return config


@functools.lru_cache(maxsize=1)
def get_settings() -> GatewayConfig:
    """Return the process-wide config loaded from CONFIG_PATH (read once)."""
    return load_config(get_config_path())
