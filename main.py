"""
Main entrypoint: load and validate config.json, then run the FastAPI server.

Env: CONFIG_PATH, API_HOST, API_PORT (default 3001), LOG_LEVEL, LOG_FORMAT.

Without this script: uvicorn odyssey_gateway.api_server.app:app --host 0.0.0.0 --port 3001
"""

import os
import sys

# Configure structured JSON logging before other imports that may log
from odyssey_gateway.logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Fail fast on a bad config, then serve the API in the main thread."""
    from odyssey_gateway.config.env import get_api_host, get_api_port, get_config_path
    from odyssey_gateway.config.settings import load_config
    from odyssey_gateway.core.exceptions import ConfigError

    config_path = get_config_path()
    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.error("main_config_error", path=str(config_path), error=str(e))
        sys.exit(1)

    from odyssey_gateway.api_server.server import create_app
    import uvicorn

    app = create_app(config)
    api_host = get_api_host()
    api_port = get_api_port()
    logger.info("main_server_starting", host=api_host, port=api_port)
    uvicorn.run(app, host=api_host, port=api_port, log_level=os.getenv("LOG_LEVEL", "info").lower())


if __name__ == "__main__":
    main()
