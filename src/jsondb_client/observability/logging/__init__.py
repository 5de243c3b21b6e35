"""Observability – structured logging helpers."""
from jsondb_client.observability.logging.factory import JsonLoggerFactory, configure_logging
from jsondb_client.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
