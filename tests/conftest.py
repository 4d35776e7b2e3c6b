"""Pytest configuration and fixtures for tableland-env tests."""

import os

import pytest
import structlog

from tableland_env.blockchain.networks import NetworkAttributeTable, NetworkName
from tableland_env.observability.logging import clear_active_network


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear tableland-env related environment variables before each test."""
    env_prefixes = ("TABLELAND_", "REPORT_GAS", "ETHERSCAN_", "HARDHAT_") + tuple(
        f"{network.env_prefix}_" for network in NetworkName
    )
    for key in list(os.environ.keys()):
        if key.startswith(env_prefixes):
            monkeypatch.delenv(key, raising=False)
    yield
    clear_active_network()


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog output so unconfigured default logging stays off stdout."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture
def make_table():
    """Build an exhaustive table with empty values except for the given entries."""

    def _make(attribute: str, entries: dict, check=None) -> NetworkAttributeTable:
        values = {network: "" for network in NetworkName}
        values.update({NetworkName.parse(key): value for key, value in entries.items()})
        return NetworkAttributeTable(attribute, values, check=check)

    return _make
