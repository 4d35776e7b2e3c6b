"""Network definitions for tableland-env."""

from .endpoints import NetworkConnection, connection_for
from .networks import BASE_URIS, PROXIES, NetworkAttributeTable, NetworkGroup, NetworkName

__all__ = [
    "BASE_URIS",
    "PROXIES",
    "NetworkAttributeTable",
    "NetworkConnection",
    "NetworkGroup",
    "NetworkName",
    "connection_for",
]
