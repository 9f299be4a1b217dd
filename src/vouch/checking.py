"""Check orchestrator shared by ``vouch check`` and ``vouch run``."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from vouch.config.model import VouchConfig
from vouch.config.resolve import resolve_validator
from vouch.core import validate
from vouch.exceptions import ConfigError
from vouch.io.documents import expand_documents, load_document
from vouch.model.outcome import Invalid
from vouch.model.results import CheckResult
from vouch.types.common import Validator

logger = logging.getLogger(__name__)


def check_documents(validator: Validator, paths: Iterable[Path]) -> list[CheckResult]:
    """Validate every document in *paths* and return one result per document.

    Raises :class:`~vouch.exceptions.DocumentParseError` on the first
    document that cannot be loaded.
    """
    results: list[CheckResult] = []
    for path in paths:
        outcome = validate(validator, load_document(path))
        if isinstance(outcome, Invalid):
            logger.debug("Invalid document %s: %r", path, outcome.error)
            results.append(CheckResult(path=path, error=outcome.error))  # type: ignore[arg-type]
        else:
            results.append(CheckResult(path=path))
    return results


def run_checks(root: Path, config: VouchConfig) -> list[CheckResult]:
    """Run every configured check against documents under *root*."""
    results: list[CheckResult] = []
    for check in config.checks:
        validator = resolve_validator(check.validator)
        paths = expand_documents(root, check.documents)
        if not paths:
            if not check.skip_missing:
                raise ConfigError(f"check `{check.name}` matched no documents")
            logger.warning("Check %s matched no documents, skipping", check.name)
            continue
        logger.debug("Running check %s on %d document(s)", check.name, len(paths))
        results.extend(check_documents(validator, paths))
    return results
