"""
FastAPI/ASGI application entrypoint.

Loads the collection config (CONFIG_PATH) at import and fails fast when it is invalid.
Run with: uvicorn odyssey_gateway.api_server.app:app --host 0.0.0.0 --port 3001
"""

from odyssey_gateway.api_server.server import create_app

app = create_app()

__all__ = ["app"]
