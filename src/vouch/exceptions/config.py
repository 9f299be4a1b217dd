"""Configuration-related exceptions."""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class ConfigError(VouchError, ValueError):
    """Raised when check configuration is invalid."""
