"""Shared exception hierarchy for vouch."""

from __future__ import annotations

from .base import VouchError
from .config import ConfigError
from .definition import InterpolationError, ValidatorDefinitionError
from .parsing import DocumentParseError
from .validation import InvalidDataError, ValidationError

__all__ = [
    "ConfigError",
    "DocumentParseError",
    "InterpolationError",
    "InvalidDataError",
    "ValidationError",
    "ValidatorDefinitionError",
    "VouchError",
]
