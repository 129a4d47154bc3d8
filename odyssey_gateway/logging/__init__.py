"""
Structured logging for Odyssey Gateway.

JSON logs with timestamp, event_type and request context.
Use get_logger() in all gateway modules.
"""

from odyssey_gateway.logging.logger import bind_request, get_logger

__all__ = ["bind_request", "get_logger"]
