"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "vouch.yaml"
VALIDATOR_REFERENCE_SEPARATOR: str = ":"

JSON_SUFFIXES: frozenset[str] = frozenset({".json"})
YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})

UNKNOWN_KEY: str = "unknown_key"
VALIDATOR_REFERENCE_PATTERN: str = r"\A[A-Za-z_][\w.]*:[A-Za-z_][\w.]*\Z"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"checks"})
ALLOWED_CHECK_KEYS: frozenset[str] = frozenset({"name", "validator", "documents", "skip_missing"})
