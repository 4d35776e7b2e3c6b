#!/usr/bin/env python3
"""tableland-env - per-network deployment configuration for Tableland tooling.

Entry point for the ``tableland-env`` command.
"""

import sys

from tableland_env.cli import create_parser, run_cli


def parse_args(argv: list[str] | None = None):
    """Parse command line arguments."""
    return create_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for tableland-env."""
    args = parse_args(argv)

    exit_code = run_cli(args)
    if exit_code < 0:
        # No command given
        create_parser().print_help()
        return 0
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
