"""Tests for structured logging."""

import logging

import pytest
import structlog

from tableland_env.observability.logging import (
    _add_network,
    _redact_sensitive,
    clear_active_network,
    configure_logging,
    get_logger,
    network_var,
    set_active_network,
)


class TestActiveNetworkContext:
    """Tests for active network context variable."""

    def test_network_default_none(self):
        """Active network is None by default."""
        clear_active_network()
        assert network_var.get() is None

    def test_set_active_network(self):
        set_active_network("optimism")
        assert network_var.get() == "optimism"
        clear_active_network()

    def test_clear_active_network(self):
        set_active_network("optimism")
        clear_active_network()
        assert network_var.get() is None


class TestAddNetworkProcessor:
    """Tests for _add_network processor."""

    def test_adds_network_when_set(self):
        set_active_network("polygon")
        try:
            result = _add_network(None, None, {"event": "test"})
            assert result["network"] == "polygon"
        finally:
            clear_active_network()

    def test_no_network_when_not_set(self):
        clear_active_network()
        result = _add_network(None, None, {"event": "test"})
        assert "network" not in result

    def test_explicit_network_wins(self):
        """An explicit network field is not overwritten."""
        set_active_network("polygon")
        try:
            result = _add_network(None, None, {"event": "test", "network": "ethereum"})
            assert result["network"] == "ethereum"
        finally:
            clear_active_network()


class TestRedactSensitiveProcessor:
    """Tests for _redact_sensitive processor."""

    @pytest.mark.parametrize(
        "field",
        ["private_key", "api_key", "etherscan_api_key", "accounts"],
    )
    def test_redacts_field(self, field):
        result = _redact_sensitive(None, None, {"event": "test", field: "0x1234567890"})
        assert result[field] == "[REDACTED]"

    def test_preserves_unrelated_fields(self):
        """Only credential fields are redacted."""
        event_dict = {"event": "test", "password": "x", "network": "ethereum"}
        result = _redact_sensitive(None, None, dict(event_dict))
        assert result == event_dict

    def test_redacts_case_insensitive(self):
        result = _redact_sensitive(None, None, {"event": "test", "Private_Key": "0x123"})
        assert result["Private_Key"] == "[REDACTED]"

    def test_preserves_deployment_fields(self):
        """Base URI and proxy address are not secrets."""
        event_dict = {
            "event": "environment_extended",
            "base_uri": "https://tableland.network/chain/1/tables/",
            "proxy_address": "0x30867AD98A520287CCc28Cde70fCF63E3Cdb9c3C",
        }
        result = _redact_sensitive(None, None, dict(event_dict))
        assert result == event_dict


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self):
        """Reset structlog before each test."""
        structlog.reset_defaults()

    def test_configure_json_format(self):
        configure_logging(level="INFO", log_format="json")

        assert get_logger("test") is not None

    def test_configure_text_format(self):
        configure_logging(level="DEBUG", log_format="text")

        assert get_logger("test") is not None

    def test_configure_invalid_log_level_raises(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="INVALID", log_format="json")


def test_logging_integration(capfd):
    """Integration test for structured logging."""
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()

    configure_logging(level="INFO", log_format="json")
    set_active_network("ethereum-goerli")

    logger = get_logger("integration")
    logger.info("test event", private_key="0xdeadbeef", base_uri="https://example/")

    clear_active_network()

    captured = capfd.readouterr()
    output = captured.out + captured.err
    assert "ethereum-goerli" in output
    assert "test event" in output
    assert "https://example/" in output
    assert "0xdeadbeef" not in output
