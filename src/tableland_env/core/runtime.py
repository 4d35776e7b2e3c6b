"""Runtime environment for deployment and verification tooling.

``extend_environment`` runs once at start-up: it reads the active
network from the settings, resolves that network's deployment attributes
and connection parameters, and returns a single frozen
``RuntimeEnvironment``. Consumers receive that object as an argument and
only read from it.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from tableland_env.blockchain.endpoints import NetworkConnection, connection_for
from tableland_env.blockchain.networks import (
    BASE_URIS,
    PROXIES,
    NetworkAttributeTable,
    NetworkName,
)
from tableland_env.config import EnvSettings, ToolchainSettings
from tableland_env.core.resolver import ResolvedContext, resolve
from tableland_env.observability.logging import get_logger, set_active_network


@dataclass(frozen=True)
class RuntimeEnvironment:
    """Everything resolved for the network selected for this run."""

    network: NetworkName
    context: ResolvedContext
    connection: NetworkConnection
    toolchain: ToolchainSettings

    @property
    def base_uri(self) -> str:
        return self.context.base_uri

    @property
    def proxy_address(self) -> str:
        return self.context.proxy_address


def extend_environment(
    settings: EnvSettings,
    *,
    base_uris: NetworkAttributeTable = BASE_URIS,
    proxies: NetworkAttributeTable = PROXIES,
    environ: Mapping[str, str] | None = None,
) -> RuntimeEnvironment:
    """Build the runtime environment for the active network.

    Parameters
    ----------
    settings : EnvSettings
        Loaded settings; ``settings.network`` selects the network.
    base_uris : NetworkAttributeTable
        Base URI per network.
    proxies : NetworkAttributeTable
        Proxy address per network.
    environ : Mapping[str, str], optional
        Credential source for connection parameters. Defaults to ``os.environ``.

    Returns
    -------
    RuntimeEnvironment
        The fully resolved environment.

    Raises
    ------
    UnknownNetworkError
        If the active network has no entry in an attribute table.
    MalformedAttributeError
        If ``settings.strict`` and a resolved attribute fails its format check.
    """
    network = settings.network
    context = resolve(base_uris, proxies, network, strict=settings.strict)
    environment = RuntimeEnvironment(
        network=context.network,
        context=context,
        connection=connection_for(context.network, environ),
        toolchain=settings.toolchain(),
    )

    logger = get_logger(__name__)
    set_active_network(context.network.value)
    if context.network.deprecated:
        logger.warning("network_deprecated", network=context.network.value)
    logger.info(
        "environment_extended",
        network=context.network.value,
        base_uri=context.base_uri,
        proxy_address=context.proxy_address,
    )
    return environment
