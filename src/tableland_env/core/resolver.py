"""Resolution of deployment attributes for the active network."""

from dataclasses import dataclass

from tableland_env.blockchain.networks import NetworkAttributeTable, NetworkName


@dataclass(frozen=True)
class ResolvedContext:
    """Deployment attributes of the network selected for this run.

    Attributes
    ----------
    network : NetworkName
        The active network.
    base_uri : str
        Root URI for table resources; empty if not deployed on the network.
    proxy_address : str
        Upgradeable proxy address; empty if no proxy is deployed.
    """

    network: NetworkName
    base_uri: str
    proxy_address: str

    @property
    def deployed(self) -> bool:
        return bool(self.base_uri)

    @property
    def has_proxy(self) -> bool:
        return bool(self.proxy_address)


def resolve(
    base_uris: NetworkAttributeTable,
    proxies: NetworkAttributeTable,
    active: "str | NetworkName",
    *,
    strict: bool = True,
) -> ResolvedContext:
    """Look up the active network in both attribute tables.

    Parameters
    ----------
    base_uris : NetworkAttributeTable
        Base URI per network.
    proxies : NetworkAttributeTable
        Proxy address per network.
    active : str | NetworkName
        The network selected by the host.
    strict : bool
        Run format checks on the resolved values.

    Returns
    -------
    ResolvedContext
        The resolved values, verbatim from the tables.

    Raises
    ------
    UnknownNetworkError
        If ``active`` has no entry in either table.
    MalformedAttributeError
        If ``strict`` and a resolved value fails its format check.
    """
    network = NetworkName.parse(active)
    if strict:
        base_uri = base_uris.check(network)
        proxy_address = proxies.check(network)
    else:
        base_uri = base_uris.lookup(network)
        proxy_address = proxies.lookup(network)
    return ResolvedContext(network=network, base_uri=base_uri, proxy_address=proxy_address)
