"""Observability – structured logging helpers."""
from livetable.observability.logging.factory import JsonLoggerFactory
from livetable.observability.logging.processors import TableContextProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "TableContextProcessor",
    "get_logger",
]
