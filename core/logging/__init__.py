"""Structured logging: levels, bound context, formatters and bootstrap."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context, get_context, unbind
from .levels import LogLevel
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "context",
    "get_context",
    "unbind",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
