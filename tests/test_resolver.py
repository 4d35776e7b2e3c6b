"""Tests for resolving the active network's deployment attributes."""

import dataclasses

import pytest

from tableland_env.blockchain.networks import (
    BASE_URIS,
    PROXIES,
    NetworkName,
    check_base_uri,
    check_proxy_address,
)
from tableland_env.core.resolver import ResolvedContext, resolve
from tableland_env.errors import MalformedAttributeError, UnknownNetworkError

PROXY = "0x30867AD98A520287CCc28Cde70fCF63E3Cdb9c3C"


class TestResolve:
    """Tests for resolve."""

    def test_local_network(self, make_table):
        """Resolves a local network with an empty proxy."""
        base_uris = make_table("base_uri", {"localhost": "http://localhost:8080/tables/"})
        proxies = make_table("proxy_address", {"localhost": ""})

        context = resolve(base_uris, proxies, "localhost")

        assert context == ResolvedContext(
            network=NetworkName.LOCALHOST,
            base_uri="http://localhost:8080/tables/",
            proxy_address="",
        )

    def test_unknown_network_raises(self, make_table):
        """An identifier absent from the tables fails without a context."""
        base_uris = make_table("base_uri", {"ethereum": "https://example/chain/1/"})
        proxies = make_table("proxy_address", {"ethereum": PROXY})

        with pytest.raises(UnknownNetworkError) as exc_info:
            resolve(base_uris, proxies, "net-B")

        assert exc_info.value.network == "net-B"

    @pytest.mark.parametrize("network", list(NetworkName))
    def test_round_trip_default_tables(self, network):
        """Resolved values equal the stored values for every network."""
        context = resolve(BASE_URIS, PROXIES, network.value)

        assert context.network is network
        assert context.base_uri == BASE_URIS[network]
        assert context.proxy_address == PROXIES[network]

    def test_independent_resolutions(self, make_table):
        """Each resolution reflects only its own network."""
        base_uris = make_table(
            "base_uri",
            {"ethereum": "https://example/chain/1/", "polygon": "https://example/chain/137/"},
        )
        proxies = make_table("proxy_address", {"ethereum": PROXY})

        first = resolve(base_uris, proxies, "ethereum")
        second = resolve(base_uris, proxies, "polygon")

        assert first.base_uri == "https://example/chain/1/"
        assert first.proxy_address == PROXY
        assert second.base_uri == "https://example/chain/137/"
        assert second.proxy_address == ""

    def test_idempotent(self):
        """Resolving twice yields equal contexts."""
        assert resolve(BASE_URIS, PROXIES, "ethereum-rinkeby") == resolve(
            BASE_URIS, PROXIES, "ethereum-rinkeby"
        )

    def test_empty_strings_preserved(self):
        """Empty attributes are returned verbatim."""
        context = resolve(BASE_URIS, PROXIES, NetworkName.ETHEREUM_RINKEBY)

        assert context.base_uri == ""
        assert context.proxy_address == PROXY
        assert context.deployed is False
        assert context.has_proxy is True

    def test_context_is_frozen(self):
        """Resolved contexts cannot be modified."""
        context = resolve(BASE_URIS, PROXIES, "ethereum")

        with pytest.raises(dataclasses.FrozenInstanceError):
            context.base_uri = "https://other/"


class TestResolveStrict:
    """Tests for format checks during resolution."""

    def test_malformed_value_raises(self, make_table):
        """Strict resolution rejects a malformed resolved value."""
        base_uris = make_table("base_uri", {}, check=check_base_uri)
        proxies = make_table("proxy_address", {"polygon": "0xABC"}, check=check_proxy_address)

        with pytest.raises(MalformedAttributeError) as exc_info:
            resolve(base_uris, proxies, "polygon")

        assert exc_info.value.attribute == "proxy_address"

    def test_only_resolved_row_is_checked(self, make_table):
        """Malformed values on other networks do not block resolution."""
        base_uris = make_table("base_uri", {"ethereum": "bad"}, check=check_base_uri)
        proxies = make_table("proxy_address", {}, check=check_proxy_address)

        context = resolve(base_uris, proxies, "polygon")

        assert context.base_uri == ""

    def test_non_strict_passes_value_through(self, make_table):
        """Without strict, values are returned unchecked."""
        base_uris = make_table("base_uri", {}, check=check_base_uri)
        proxies = make_table("proxy_address", {"polygon": "0xABC"}, check=check_proxy_address)

        context = resolve(base_uris, proxies, "polygon", strict=False)

        assert context.proxy_address == "0xABC"
