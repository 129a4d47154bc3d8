"""
Environment variable loading for Odyssey Gateway.

- CONFIG_PATH: collection config JSON (default: ./config.json)
- API_HOST: bind address (default: 0.0.0.0)
- API_PORT: listen port (default: 3001)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is odyssey_gateway/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_CONFIG_PATH = "config.json"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3001


def load_gateway_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    load_dotenv(_ENV_PATH, override=False)


def get_config_path() -> Path:
    """Return CONFIG_PATH from env, or ./config.json."""
    load_gateway_env()
    return Path((os.getenv("CONFIG_PATH") or DEFAULT_CONFIG_PATH).strip() or DEFAULT_CONFIG_PATH)


def get_api_host() -> str:
    load_gateway_env()
    return (os.getenv("API_HOST") or DEFAULT_API_HOST).strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """Return API_PORT from env; falls back to 3001 when unset or not an integer."""
    load_gateway_env()
    raw = (os.getenv("API_PORT") or "").strip()
    try:
        return int(raw) if raw else DEFAULT_API_PORT
    except ValueError:
        return DEFAULT_API_PORT
