"""
Application-level exceptions.

- ConfigError: collection config missing or invalid at startup (fatal).
- UpstreamCallError: an SDK call behind a hard endpoint failed; rendered as
  a generic 500 by the API server.
"""

from __future__ import annotations

INTERNAL_SERVER_ERROR = "Internal Server Error"


class GatewayError(Exception):
    """Base class for Odyssey Gateway errors."""


class ConfigError(GatewayError):
    """Collection config could not be read or failed validation."""


class UpstreamCallError(GatewayError):
    """
    SDK call failed behind an endpoint that reports failures as HTTP 500.

    prefix is the fixed, endpoint-specific log prefix (e.g. "Error reading stage:").
    The client only ever sees INTERNAL_SERVER_ERROR.
    """

    def __init__(self, prefix: str, cause: BaseException) -> None:
        super().__init__(f"{prefix} {cause}")
        self.prefix = prefix
        self.cause = cause

    @property
    def detail(self) -> str:
        return str(self.cause)
