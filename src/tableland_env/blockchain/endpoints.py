"""Connection parameters and signing credentials per network.

RPC URLs are built from provider templates; the provider API key and the
signing key for each network are read from the environment
(``<PREFIX>_API_KEY`` and ``<PREFIX>_PRIVATE_KEY``).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import SecretStr

from tableland_env.blockchain.networks import NetworkName

LOCALHOST_RPC_URL = "http://127.0.0.1:8545"
MASKED_SECRET = "**********"

# Hardhat interval mining bounds in milliseconds
HARDHAT_MINING_INTERVAL = (100, 3000)

RPC_URL_TEMPLATES: dict[NetworkName, str] = {
    # mainnets
    NetworkName.ETHEREUM: "https://eth-mainnet.alchemyapi.io/v2/{api_key}",
    NetworkName.OPTIMISM: "https://opt-mainnet.g.alchemy.com/v2/{api_key}",
    NetworkName.POLYGON: "https://polygon-mainnet.g.alchemy.com/v2/{api_key}",
    # testnets
    NetworkName.ETHEREUM_GOERLI: "https://eth-goerli.alchemyapi.io/v2/{api_key}",
    NetworkName.OPTIMISM_KOVAN: "https://opt-kovan.g.alchemy.com/v2/{api_key}",
    NetworkName.POLYGON_MUMBAI: "https://polygon-mumbai.g.alchemy.com/v2/{api_key}",
    # devnets
    NetworkName.OPTIMISM_KOVAN_STAGING: "https://opt-kovan.g.alchemy.com/v2/{api_key}",
}


@dataclass(frozen=True)
class NetworkConnection:
    """How tooling connects to and signs for one network.

    Attributes
    ----------
    network : NetworkName
        The network these parameters belong to.
    url : str | None
        JSON-RPC endpoint, or None for the in-process hardhat network and
        networks without a provider template.
    accounts : tuple[SecretStr, ...]
        Private keys used for signing.
    api_key : SecretStr | None
        Provider API key embedded in ``url``.
    url_template : str | None
        Provider template ``url`` was built from.
    auto_mining : bool | None
        Hardhat automining flag (hardhat network only).
    mining_interval : tuple[int, int] | None
        Hardhat interval mining bounds in ms (hardhat network only).
    """

    network: NetworkName
    url: str | None = None
    accounts: tuple[SecretStr, ...] = ()
    api_key: SecretStr | None = None
    url_template: str | None = None
    auto_mining: bool | None = None
    mining_interval: tuple[int, int] | None = None

    @property
    def masked_url(self) -> str | None:
        """The RPC URL with the provider API key hidden."""
        if self.url_template is None or self.api_key is None:
            return self.url
        if not self.api_key.get_secret_value():
            return self.url
        return self.url_template.format(api_key=MASKED_SECRET)


def connection_for(
    network: "str | NetworkName",
    environ: Mapping[str, str] | None = None,
) -> NetworkConnection:
    """Build the connection parameters for ``network``.

    Parameters
    ----------
    network : str | NetworkName
        The network to connect to.
    environ : Mapping[str, str], optional
        Source of credentials. Defaults to ``os.environ``.

    Returns
    -------
    NetworkConnection
        Connection parameters with credentials filled in.
    """
    network = NetworkName.parse(network)
    if environ is None:
        environ = os.environ

    if network is NetworkName.HARDHAT:
        return NetworkConnection(
            network=network,
            auto_mining=environ.get("HARDHAT_DISABLE_AUTO_MINING") != "true",
            mining_interval=HARDHAT_MINING_INTERVAL,
        )

    if network is NetworkName.LOCALHOST:
        return NetworkConnection(network=network, url=LOCALHOST_RPC_URL)

    template = RPC_URL_TEMPLATES.get(network)
    if template is None:
        return NetworkConnection(network=network)

    api_key = environ.get(f"{network.env_prefix}_API_KEY", "")
    private_key = environ.get(f"{network.env_prefix}_PRIVATE_KEY")
    accounts = (SecretStr(private_key),) if private_key is not None else ()

    return NetworkConnection(
        network=network,
        url=template.format(api_key=api_key),
        accounts=accounts,
        api_key=SecretStr(api_key),
        url_template=template,
    )
