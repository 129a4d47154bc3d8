"""
FastAPI server — odyssey gateway.

create_app() wires the immutable collection config and the OdysseyClient
into app.state, mounts the /api router, enables CORS for all origins and
installs request logging plus the UpstreamCallError handler.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from odyssey_gateway import __version__
from odyssey_gateway.api_server.middleware import request_logging_middleware
from odyssey_gateway.api_server.routes import router as odyssey_router
from odyssey_gateway.chain.network import resolve_network
from odyssey_gateway.config.settings import GatewayConfig, get_settings
from odyssey_gateway.core.exceptions import INTERNAL_SERVER_ERROR, UpstreamCallError
from odyssey_gateway.logging import get_logger
from odyssey_gateway.sdk.client import OdysseyClient

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: GatewayConfig = app.state.config
    logger.info(
        "gateway_started",
        network=config.network,
        resolved_network=resolve_network(config.network).value,
        resource_account=config.resource_account,
    )
    yield
    logger.info("gateway_stopped")


def upstream_error_handler(request: Request, exc: UpstreamCallError) -> JSONResponse:
    """Generic 500 for failed SDK calls; the cause is only logged."""
    logger.error(
        "upstream_call_failed",
        message=f"{exc.prefix} {exc.detail}",
        prefix=exc.prefix,
        error=exc.detail,
        error_class=type(exc.cause).__name__,
    )
    return JSONResponse(status_code=500, content={"error": INTERNAL_SERVER_ERROR})


def create_app(config: GatewayConfig | None = None, client: OdysseyClient | None = None) -> FastAPI:
    """
    Build the ASGI app.

    config defaults to get_settings() (CONFIG_PATH, validated eagerly);
    client defaults to AptosOdysseyClient.
    """
    if config is None:
        config = get_settings()
    if client is None:
        from odyssey_gateway.sdk.aptos_client import AptosOdysseyClient

        client = AptosOdysseyClient()

    app = FastAPI(
        title="Odyssey Gateway API",
        description="JSON gateway for Aptos odyssey collections: state, balances, mint payloads, reveals.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.odyssey_client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)
    app.add_exception_handler(UpstreamCallError, upstream_error_handler)
    app.include_router(odyssey_router, prefix="/api", tags=["Odyssey"])

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe: API is up."""
        return {"status": "ok"}

    return app
