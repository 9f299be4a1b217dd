"""Strict textual formats accepted by the parsing validators."""

from __future__ import annotations

import re

INTEGER_STRING_PATTERN: re.Pattern[str] = re.compile(r"\A[+-]?\d+\Z")
FLOAT_STRING_PATTERN: re.Pattern[str] = re.compile(r"\A[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\Z")
