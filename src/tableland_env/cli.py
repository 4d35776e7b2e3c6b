"""CLI subcommands for tableland-env.

Provides command-line interface for:
- Resolving the active network's deployment attributes
- Listing and checking the network attribute tables
- Showing connection parameters and toolchain settings
"""

import argparse
import json
import sys
from dataclasses import asdict

from pydantic import SecretStr

from tableland_env.blockchain.networks import BASE_URIS, PROXIES, NetworkName
from tableland_env.config import EnvSettings
from tableland_env.core.accounts import signer_addresses
from tableland_env.core.runtime import RuntimeEnvironment, extend_environment
from tableland_env.errors import NetworkConfigError
from tableland_env.observability.logging import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tableland-env",
        description="Per-network deployment configuration for Tableland tooling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global flags
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    parser.add_argument(
        "--network",
        metavar="NAME",
        help="Network to use (overrides TABLELAND_NETWORK)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("resolve", help="Show base URI and proxy for the active network")
    subparsers.add_parser("networks", help="List all networks and their attributes")
    subparsers.add_parser("check", help="Validate the network attribute tables")
    subparsers.add_parser("connection", help="Show RPC URL and signer addresses")
    subparsers.add_parser("toolchain", help="Show compiler and reporter settings")

    return parser


class CLIContext:
    """Shared context for CLI commands."""

    def __init__(self, settings: EnvSettings, json_output: bool = False):
        self.settings = settings
        self.json_output = json_output
        self._environment: RuntimeEnvironment | None = None

    @property
    def environment(self) -> RuntimeEnvironment:
        """Get runtime environment (lazy loaded)."""
        if self._environment is None:
            self._environment = extend_environment(self.settings)
        return self._environment

    def output(self, data: dict) -> None:
        """Output data in the appropriate format."""
        if self.json_output:

            def secret_default(obj):
                if isinstance(obj, SecretStr):
                    return str(obj)
                raise TypeError(f"Object of type {type(obj)} is not JSON serializable")

            print(json.dumps(data, default=secret_default, indent=2))
        else:
            self._print_formatted(data)

    def _print_formatted(self, data: dict, indent: int = 0) -> None:
        """Print data in human-readable format."""
        prefix = "  " * indent
        for key, value in data.items():
            if isinstance(value, dict):
                print(f"{prefix}{key}:")
                self._print_formatted(value, indent + 1)
            elif isinstance(value, list):
                print(f"{prefix}{key}: {', '.join(str(v) for v in value) or '-'}")
            else:
                print(f"{prefix}{key}: {value}")


def cmd_resolve(ctx: CLIContext) -> int:
    """Show the active network's deployment attributes."""
    try:
        env = ctx.environment
        ctx.output(
            {
                "network": env.network.value,
                "base_uri": env.base_uri,
                "proxy_address": env.proxy_address,
            }
        )
        return 0
    except NetworkConfigError as e:
        ctx.output({"error": str(e)})
        return 1


def cmd_networks(ctx: CLIContext) -> int:
    """List every network with its attributes."""
    ctx.output(
        {
            network.value: {
                "group": network.group.value,
                "deprecated": network.deprecated,
                "base_uri": BASE_URIS.lookup(network),
                "proxy_address": PROXIES.lookup(network),
            }
            for network in NetworkName
        }
    )
    return 0


def cmd_check(ctx: CLIContext) -> int:
    """Validate both attribute tables."""
    try:
        BASE_URIS.validate()
        PROXIES.validate()
    except NetworkConfigError as e:
        ctx.output({"valid": False, "error": str(e)})
        return 1
    ctx.output({"valid": True, "networks": len(NetworkName)})
    return 0


def cmd_connection(ctx: CLIContext) -> int:
    """Show connection parameters without exposing secrets."""
    try:
        connection = ctx.environment.connection
        data = {
            "network": connection.network.value,
            "url": connection.masked_url,
            "signers": signer_addresses(connection),
        }
        if connection.auto_mining is not None:
            data["mining"] = {
                "auto": connection.auto_mining,
                "interval_ms": list(connection.mining_interval or ()),
            }
        ctx.output(data)
        return 0
    except (NetworkConfigError, ValueError) as e:
        ctx.output({"error": str(e)})
        return 1


def cmd_toolchain(ctx: CLIContext) -> int:
    """Show toolchain settings."""
    toolchain = ctx.settings.toolchain()
    data = asdict(toolchain)
    data["contract_sizer"]["only"] = list(toolchain.contract_sizer.only)
    ctx.output(data)
    return 0


def run_cli(args: argparse.Namespace) -> int:
    """Execute CLI command based on parsed arguments.

    Returns
    -------
    int
        Exit code: 0 for success, positive for error, -1 signals caller
        to show help (no command specified).
    """
    overrides = {}
    if args.network:
        overrides["TABLELAND_NETWORK"] = args.network

    try:
        settings = EnvSettings(**overrides)
        configure_logging(level=settings.log_level, log_format=settings.log_format)
    except Exception as e:
        if args.json:
            print(json.dumps({"error": f"Configuration error: {e}"}))
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    ctx = CLIContext(settings, json_output=args.json)

    if args.command == "resolve":
        return cmd_resolve(ctx)
    elif args.command == "networks":
        return cmd_networks(ctx)
    elif args.command == "check":
        return cmd_check(ctx)
    elif args.command == "connection":
        return cmd_connection(ctx)
    elif args.command == "toolchain":
        return cmd_toolchain(ctx)
    else:
        return -1
