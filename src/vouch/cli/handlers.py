"""CLI subcommand handlers and result reporting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from vouch.checking import check_documents, run_checks
from vouch.config.loader import load_config
from vouch.config.resolve import resolve_validator
from vouch.constants.branding import FAIL_LABEL, OK_LABEL
from vouch.exceptions import ConfigError, DocumentParseError
from vouch.model.results import CheckResult


def report_results(results: Sequence[CheckResult], *, quiet: bool = False) -> int:
    """Print one line per document and return 1 if any document is invalid."""
    failed = 0
    for result in results:
        if result.error is None:
            if not quiet:
                print(f"{OK_LABEL} {result.path}")
            continue
        failed += 1
        print(f"{FAIL_LABEL} {result.path}: {result.error.format()}", file=sys.stderr)
    return 1 if failed else 0


def handle_check(args: argparse.Namespace) -> int:
    """Validate the given documents against a single validator reference."""
    try:
        validator = resolve_validator(args.validator)
        results = check_documents(validator, args.documents)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except DocumentParseError as exc:
        print(f"Document error: {exc}", file=sys.stderr)
        return 2
    return report_results(results, quiet=args.quiet)


def handle_run(args: argparse.Namespace) -> int:
    """Run every check from ``vouch.yaml``."""
    try:
        config = load_config(args.root, args.config)
        results = run_checks(args.root, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except DocumentParseError as exc:
        print(f"Document error: {exc}", file=sys.stderr)
        return 2

    if not results:
        print("No checks configured.")
        return 0
    return report_results(results, quiet=args.quiet)
