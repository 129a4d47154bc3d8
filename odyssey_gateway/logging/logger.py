"""
Gateway log output: one JSON object per line, keyed by event_type.

Request-scoped fields (request_id, method, path) are bound by the HTTP
middleware through bind_request() and merged into every line emitted while
that request is handled, including lines from the SDK client and uploader.
Outside a request only logger and module fields appear.

LOG_LEVEL filters by level; LOG_FORMAT=console switches to the coloured dev
renderer for local runs.

Imports nothing from odyssey_gateway, so any module can import it first.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


def _stamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """UTC ISO 8601 timestamp unless the caller supplied one."""
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_type(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    The first positional argument (e.g. "upstream_call_failed") becomes
    event_type. message defaults to it so plain-text log viewers still show
    something; handlers that log a human-readable message keep theirs.
    """
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "event_type" in event_dict:
        event_dict.setdefault("message", str(event_dict["event_type"]))
    return event_dict


def _renderer() -> Any:
    if LOG_FORMAT == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_structlog() -> None:
    """Install the gateway processor chain; called once on first import."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _stamp,
            _event_type,
            _renderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Module logger with logger=<name> bound.

        logger = get_logger(__name__)
        logger.info("mint_payloads_built", address=addr, mint_qty=3)

    Inside a request this renders as {"event_type": "mint_payloads_built",
    "address": "...", "mint_qty": 3, "request_id": "...", "method": "GET",
    "path": "/api/get-mint-txn/...", "level": "info", "timestamp": "...", ...}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_request(request_id: str, **fields: Any) -> None:
    """Start a fresh request context: drop any previous binding, then bind request_id and fields."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **fields)
