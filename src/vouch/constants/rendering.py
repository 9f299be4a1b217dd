"""Patterns and separators used when rendering error messages."""

from __future__ import annotations

import re

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"%\{([^}]*)\}")
BARE_KEY_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

KEY_JOINER: str = "."
INDEX_JOINER: str = ""
PATH_SEPARATOR: str = " "
