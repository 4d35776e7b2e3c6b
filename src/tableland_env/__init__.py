"""tableland-env: per-network deployment configuration for Tableland tooling."""

from importlib.metadata import PackageNotFoundError, version

from .blockchain import BASE_URIS, PROXIES, NetworkAttributeTable, NetworkName
from .config import EnvSettings
from .core import ResolvedContext, RuntimeEnvironment, extend_environment, resolve
from .errors import (
    IncompleteTableError,
    MalformedAttributeError,
    NetworkConfigError,
    UnknownNetworkError,
)

try:
    __version__ = version("tableland-env")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "BASE_URIS",
    "PROXIES",
    "EnvSettings",
    "IncompleteTableError",
    "MalformedAttributeError",
    "NetworkAttributeTable",
    "NetworkConfigError",
    "NetworkName",
    "ResolvedContext",
    "RuntimeEnvironment",
    "UnknownNetworkError",
    "extend_environment",
    "resolve",
]
