"""Outcome records produced when checking documents."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vouch.exceptions.validation import ValidationError


@dataclass(frozen=True)
class CheckResult:
    """Validation outcome for one document."""

    path: Path
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
