"""Configuration loading and validation for batch document checks."""

from __future__ import annotations

from vouch.config.loader import load_config
from vouch.config.model import CheckConfig, VouchConfig
from vouch.config.resolve import resolve_validator
from vouch.config.schema import CHECK_VALIDATOR, CONFIG_VALIDATOR, known_keys

__all__ = [
    "CHECK_VALIDATOR",
    "CONFIG_VALIDATOR",
    "CheckConfig",
    "VouchConfig",
    "known_keys",
    "load_config",
    "resolve_validator",
]
