"""CLI entrypoint for vouch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from vouch import __version__
from vouch.cli.handlers import handle_check, handle_run
from vouch.constants.branding import BRAND_NAME, CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate documents against one validator")
    check.add_argument("validator", help="Validator reference in `module:attribute` form")
    check.add_argument("documents", type=Path, nargs="+", help="YAML or JSON documents to validate")
    _add_output_flags(check)

    run = subparsers.add_parser("run", help="Run every check from the configuration file")
    run.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root (default: current directory)")
    run.add_argument("-c", "--config", type=Path, help="Explicit config file")
    _add_output_flags(run)

    return parser


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report invalid documents")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "check":
        return handle_check(args)
    if args.command == "run":
        return handle_run(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
