"""
Tests for collection config loading and validation (odyssey_gateway.config).
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from odyssey_gateway.config.settings import GatewayConfig, load_config
from odyssey_gateway.core.exceptions import ConfigError

VALID_CONFIG = {
    "network": "Testnet",
    "collection": {"collection_name": "Odyssey Genesis", "description": "Genesis drop", "asset_dir": "./assets"},
    "resource_account": "0x" + "ab" * 32,
    "storage": {"arweave": {"key_file_path": "./arweave-key.json"}},
    "private_key": "0x" + "11" * 32,
    "random_trait": True,
    "reveal_required": True,
}


def _write(tmp_path, data) -> str:
    path = tmp_path / "config.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_config(tmp_path):
    config = load_config(_write(tmp_path, VALID_CONFIG))
    assert config.network == "Testnet"
    assert config.collection.collection_name == "Odyssey Genesis"
    assert config.key_file_path == "./arweave-key.json"
    assert config.asset_dir == "./assets"
    assert config.random_trait is True
    assert config.reveal_required is True
    assert config.base_token_uri is None


def test_optional_fields_default(tmp_path):
    data = {k: v for k, v in VALID_CONFIG.items() if k not in ("random_trait", "reveal_required")}
    config = load_config(_write(tmp_path, data))
    assert config.random_trait is False
    assert config.reveal_required is False


@pytest.mark.parametrize("uri", ["", "   "])
def test_blank_base_token_uri_is_unset(tmp_path, uri):
    config = load_config(_write(tmp_path, {**VALID_CONFIG, "base_token_uri": uri}))
    assert config.base_token_uri is None


def test_base_token_uri_kept(tmp_path):
    config = load_config(_write(tmp_path, {**VALID_CONFIG, "base_token_uri": "ar://xyz"}))
    assert config.base_token_uri == "ar://xyz"


def test_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path / "nope.json")


def test_invalid_json_raises_config_error(tmp_path):
    with pytest.raises(ConfigError, match="not valid JSON"):
        load_config(_write(tmp_path, "{network: devnet"))


@pytest.mark.parametrize("missing", ["network", "collection", "resource_account", "storage", "private_key"])
def test_missing_required_field_fails_at_load(tmp_path, missing):
    data = {k: v for k, v in VALID_CONFIG.items() if k != missing}
    with pytest.raises(ConfigError, match=missing):
        load_config(_write(tmp_path, data))


def test_missing_key_file_path_fails_at_load(tmp_path):
    data = {**VALID_CONFIG, "storage": {"arweave": {}}}
    with pytest.raises(ConfigError, match="key_file_path"):
        load_config(_write(tmp_path, data))


def test_config_is_immutable():
    config = GatewayConfig.model_validate(VALID_CONFIG)
    with pytest.raises(ValidationError):
        config.network = "mainnet"
