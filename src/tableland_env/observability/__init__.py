"""Observability module for tableland-env."""

from .logging import clear_active_network, configure_logging, get_logger, set_active_network

__all__ = [
    "clear_active_network",
    "configure_logging",
    "get_logger",
    "set_active_network",
]
