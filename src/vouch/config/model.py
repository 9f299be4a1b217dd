"""Typed configuration structures for batch document checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckConfig:
    """One named check: a validator reference and the documents it applies to."""

    name: str
    validator: str
    documents: tuple[str, ...]
    skip_missing: bool = False


@dataclass(frozen=True)
class VouchConfig:
    """Top-level ``vouch.yaml`` settings."""

    checks: tuple[CheckConfig, ...] = ()
