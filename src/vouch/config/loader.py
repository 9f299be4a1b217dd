"""Config loading for batch document checks."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from vouch.config.model import VouchConfig
from vouch.config.schema import CONFIG_VALIDATOR
from vouch.constants.config import CONFIG_FILENAME
from vouch.core import validate
from vouch.exceptions import ConfigError
from vouch.model.outcome import Invalid

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> VouchConfig:
    """Load and validate ``vouch.yaml`` from *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}

    outcome = validate(CONFIG_VALIDATOR, raw)
    if isinstance(outcome, Invalid):
        raise ConfigError(f"{path.name}: {outcome.error}")

    config: VouchConfig = outcome.value
    logger.debug("Loaded %d check(s) from %s", len(config.checks), path)
    return config
