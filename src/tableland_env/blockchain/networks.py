"""Network identifiers and per-network attribute tables.

Every network the host may select is a member of ``NetworkName``. Each
deployment attribute lives in its own ``NetworkAttributeTable``, which
must carry an entry for every member; empty strings mean the attribute
does not apply on that network (e.g. nothing deployed there).
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from urllib.parse import urlparse

from eth_utils import is_checksum_address, is_hex_address

from tableland_env.errors import (
    IncompleteTableError,
    MalformedAttributeError,
    UnknownNetworkError,
)

logger = logging.getLogger(__name__)


class NetworkGroup(str, Enum):
    """Deployment tier a network belongs to."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"


class NetworkName(str, Enum):
    """Networks that can be selected for an invocation."""

    # mainnets
    ETHEREUM = "ethereum"
    OPTIMISM = "optimism"
    POLYGON = "polygon"

    # testnets
    ETHEREUM_RINKEBY = "ethereum-rinkeby"
    ETHEREUM_GOERLI = "ethereum-goerli"
    OPTIMISM_KOVAN = "optimism-kovan"
    POLYGON_MUMBAI = "polygon-mumbai"

    # devnets
    ETHEREUM_RINKEBY_STAGING = "ethereum-rinkeby-staging"
    OPTIMISM_KOVAN_STAGING = "optimism-kovan-staging"
    LOCALHOST = "localhost"
    HARDHAT = "hardhat"

    @classmethod
    def parse(cls, value: "str | NetworkName") -> "NetworkName":
        """Convert a host-supplied identifier to a ``NetworkName``.

        Raises
        ------
        UnknownNetworkError
            If ``value`` does not name a known network.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownNetworkError(str(value)) from None

    @property
    def group(self) -> NetworkGroup:
        return _GROUPS[self]

    @property
    def deprecated(self) -> bool:
        """Whether the network is being retired (do not upgrade)."""
        return self in _DEPRECATED

    @property
    def env_prefix(self) -> str:
        """Environment variable prefix for this network's credentials."""
        return self.value.upper().replace("-", "_")


_GROUPS = {
    NetworkName.ETHEREUM: NetworkGroup.MAINNET,
    NetworkName.OPTIMISM: NetworkGroup.MAINNET,
    NetworkName.POLYGON: NetworkGroup.MAINNET,
    NetworkName.ETHEREUM_RINKEBY: NetworkGroup.TESTNET,
    NetworkName.ETHEREUM_GOERLI: NetworkGroup.TESTNET,
    NetworkName.OPTIMISM_KOVAN: NetworkGroup.TESTNET,
    NetworkName.POLYGON_MUMBAI: NetworkGroup.TESTNET,
    NetworkName.ETHEREUM_RINKEBY_STAGING: NetworkGroup.DEVNET,
    NetworkName.OPTIMISM_KOVAN_STAGING: NetworkGroup.DEVNET,
    NetworkName.LOCALHOST: NetworkGroup.DEVNET,
    NetworkName.HARDHAT: NetworkGroup.DEVNET,
}

_DEPRECATED = frozenset({NetworkName.ETHEREUM_RINKEBY, NetworkName.ETHEREUM_RINKEBY_STAGING})


def check_base_uri(network: str, value: str) -> None:
    """Reject a non-empty base URI that is not an absolute http(s) directory URL."""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise MalformedAttributeError(network, "base_uri", value, "not an absolute http(s) URL")
    if not value.endswith("/"):
        raise MalformedAttributeError(network, "base_uri", value, "must end with '/'")


def check_proxy_address(network: str, value: str) -> None:
    """Reject a non-empty proxy address that is not a 0x-prefixed 20-byte hex address."""
    if not value.startswith("0x") or not is_hex_address(value):
        raise MalformedAttributeError(network, "proxy_address", value, "not a hex address")
    # Mixed case implies an EIP-55 checksum
    if value[2:] not in (value[2:].lower(), value[2:].upper()) and not is_checksum_address(value):
        logger.warning(
            "Proxy address checksum mismatch",
            extra={"network": network, "proxy_address": value},
        )


class NetworkAttributeTable(Mapping[NetworkName, str]):
    """Read-only mapping from every ``NetworkName`` to one attribute value.

    Parameters
    ----------
    attribute : str
        Attribute name, used in error messages (e.g. ``"base_uri"``).
    values : Mapping
        Literal configuration keyed by ``NetworkName`` or its string value.
    check : Callable, optional
        Format check applied to non-empty values by ``validate``.

    Raises
    ------
    UnknownNetworkError
        If a key does not name a known network.
    IncompleteTableError
        If any ``NetworkName`` has no entry.
    MalformedAttributeError
        If a value is not a string.
    """

    def __init__(
        self,
        attribute: str,
        values: Mapping[str, str],
        check: Callable[[str, str], None] | None = None,
    ):
        entries: dict[NetworkName, str] = {}
        for key, value in values.items():
            try:
                network = NetworkName.parse(key)
            except UnknownNetworkError:
                raise UnknownNetworkError(str(key), attribute) from None
            if not isinstance(value, str):
                raise MalformedAttributeError(network.value, attribute, value, "not a string")
            entries[network] = value

        missing = [network.value for network in NetworkName if network not in entries]
        if missing:
            raise IncompleteTableError(attribute, missing)

        self.attribute = attribute
        self._check = check
        self._entries = MappingProxyType(entries)

    def __getitem__(self, key: NetworkName) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[NetworkName]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NetworkAttributeTable({self.attribute!r}, {dict(self._entries)!r})"

    def lookup(self, network: "str | NetworkName") -> str:
        """Get the stored value for ``network``, verbatim.

        Raises
        ------
        UnknownNetworkError
            If ``network`` has no entry in this table.
        """
        try:
            network = NetworkName.parse(network)
        except UnknownNetworkError as e:
            raise UnknownNetworkError(e.network, self.attribute) from None
        return self._entries[network]

    def check(self, network: "str | NetworkName") -> str:
        """Look up ``network`` and run the format check on a non-empty value."""
        value = self.lookup(network)
        if value and self._check is not None:
            self._check(NetworkName.parse(network).value, value)
        return value

    def validate(self) -> None:
        """Run the format check over every entry.

        Raises
        ------
        MalformedAttributeError
            On the first value that fails its check.
        """
        for network in self._entries:
            self.check(network)


BASE_URIS = NetworkAttributeTable(
    "base_uri",
    {
        # mainnets
        NetworkName.ETHEREUM: "https://tableland.network/chain/1/tables/",
        NetworkName.OPTIMISM: "https://tableland.network/chain/10/tables/",
        NetworkName.POLYGON: "https://tableland.network/chain/137/tables/",
        # testnets
        NetworkName.ETHEREUM_RINKEBY: "",
        NetworkName.ETHEREUM_GOERLI: "https://testnet.tableland.network/chain/5/tables/",
        NetworkName.OPTIMISM_KOVAN: "https://testnet.tableland.network/chain/69/tables/",
        NetworkName.POLYGON_MUMBAI: "https://testnet.tableland.network/chain/80001/tables/",
        # devnets
        NetworkName.ETHEREUM_RINKEBY_STAGING: "",
        NetworkName.OPTIMISM_KOVAN_STAGING: "https://staging.tableland.network/chain/69/tables/",
        NetworkName.LOCALHOST: "http://localhost:8080/chain/31337/tables/",
        NetworkName.HARDHAT: "http://localhost:8080/chain/31337/tables/",
    },
    check=check_base_uri,
)

PROXIES = NetworkAttributeTable(
    "proxy_address",
    {
        # mainnets
        NetworkName.ETHEREUM: "",
        NetworkName.OPTIMISM: "",
        NetworkName.POLYGON: "",
        # testnets
        NetworkName.ETHEREUM_RINKEBY: "0x30867AD98A520287CCc28Cde70fCF63E3Cdb9c3C",
        NetworkName.ETHEREUM_GOERLI: "",
        NetworkName.OPTIMISM_KOVAN: "",
        NetworkName.POLYGON_MUMBAI: "",
        # devnets
        NetworkName.ETHEREUM_RINKEBY_STAGING: "0x847645b7dAA32eFda757d3c10f1c82BFbB7b41D0",
        NetworkName.OPTIMISM_KOVAN_STAGING: "",
        NetworkName.LOCALHOST: "",
        NetworkName.HARDHAT: "",
    },
    check=check_proxy_address,
)
