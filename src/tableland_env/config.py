"""Configuration management for tableland-env using Pydantic Settings."""

from dataclasses import dataclass, field

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tableland_env.blockchain.networks import NetworkName


@dataclass(frozen=True)
class OptimizerSettings:
    """Solidity optimizer options."""

    enabled: bool = True
    runs: int = 200


@dataclass(frozen=True)
class SoliditySettings:
    """Compiler version and settings."""

    version: str = "0.8.4"
    optimizer: OptimizerSettings = field(default_factory=OptimizerSettings)


@dataclass(frozen=True)
class ContractSizerSettings:
    """Contract size report options."""

    alpha_sort: bool = True
    disambiguate_paths: bool = False
    run_on_compile: bool = False
    strict: bool = True
    only: tuple[str, ...] = ()


@dataclass(frozen=True)
class GasReporterSettings:
    """Gas report options."""

    enabled: bool = False
    currency: str = "USD"


@dataclass(frozen=True)
class ToolchainSettings:
    """Declarative settings handed to the build toolchain.

    Nothing here is executed by tableland-env; the values are carried on
    the runtime environment for tooling that compiles, sizes, reports
    gas for, or verifies contracts.
    """

    solidity: SoliditySettings = field(default_factory=SoliditySettings)
    contract_sizer: ContractSizerSettings = field(default_factory=ContractSizerSettings)
    gas_reporter: GasReporterSettings = field(default_factory=GasReporterSettings)
    etherscan_api_key: SecretStr = field(default_factory=lambda: SecretStr(""))


class EnvSettings(BaseSettings):
    """tableland-env configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Network selection; checked against NetworkName when the environment is extended
    network: str = Field(default=NetworkName.HARDHAT.value, alias="TABLELAND_NETWORK")
    strict: bool = Field(default=True, alias="TABLELAND_STRICT")

    # Toolchain
    etherscan_api_key: SecretStr = Field(default=SecretStr(""), alias="ETHERSCAN_API_KEY")
    report_gas: str | None = Field(default=None, alias="REPORT_GAS")

    # Observability
    log_level: str = Field(default="INFO", alias="TABLELAND_LOG_LEVEL")
    log_format: str = Field(default="text", alias="TABLELAND_LOG_FORMAT")

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value.lower() not in ("json", "text"):
            raise ValueError("log format must be 'json' or 'text'")
        return value.lower()

    def toolchain(self) -> ToolchainSettings:
        """Build the toolchain settings for this configuration.

        The gas reporter is enabled whenever ``REPORT_GAS`` is set, to any value.
        """
        return ToolchainSettings(
            gas_reporter=GasReporterSettings(enabled=self.report_gas is not None),
            etherscan_api_key=self.etherscan_api_key,
        )
