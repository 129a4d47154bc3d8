"""
Configuration management for Odyssey Gateway.

Collection config comes from a JSON document read once at startup and
validated eagerly; process settings (host, port, config path) come from
environment variables and an optional .env file.
"""

from odyssey_gateway.config.settings import (  # noqa: F401
    ArweaveStorage,
    CollectionConfig,
    GatewayConfig,
    StorageConfig,
    get_settings,
    load_config,
)

__all__ = [
    "ArweaveStorage",
    "CollectionConfig",
    "GatewayConfig",
    "StorageConfig",
    "get_settings",
    "load_config",
]
