"""Load YAML and JSON documents for validation."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from vouch.constants.config import JSON_SUFFIXES, YAML_SUFFIXES
from vouch.exceptions import DocumentParseError

logger = logging.getLogger(__name__)


def load_document(path: Path) -> object:
    """Read and parse a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises :class:`DocumentParseError` for unknown suffixes, unreadable
    files and malformed content.
    """
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise DocumentParseError(f"Unsupported document type {path.suffix or '(none)'!r}: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentParseError(f"Cannot read document {path}: {exc}") from exc

    if suffix in JSON_SUFFIXES:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(f"Invalid JSON document at {path}: {exc}") from exc
    else:
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentParseError(f"Invalid YAML document at {path}: {exc}") from exc

    logger.debug("Loaded document: %s", path)
    return document


def _glob_base(root: Path, pattern: str) -> tuple[Path, str]:
    """Split an absolute *pattern* into its anchor and the relative remainder."""
    pattern_path = Path(pattern)
    if not pattern_path.is_absolute():
        return root, pattern
    anchor = Path(pattern_path.anchor)
    return anchor, str(pattern_path.relative_to(anchor))


def expand_documents(root: Path, patterns: Iterable[str]) -> tuple[Path, ...]:
    """Resolve glob *patterns*, de-duplicated and sorted.

    Relative patterns are matched under *root*; absolute patterns are
    matched from their own anchor.
    """
    root = root.resolve()
    matched: set[Path] = set()
    for pattern in patterns:
        base, relative = _glob_base(root, pattern)
        hits = [path.resolve() for path in base.glob(relative) if path.is_file()]
        if not hits:
            logger.debug("Pattern matched no documents: %s", pattern)
        matched.update(hits)
    return tuple(sorted(matched))
