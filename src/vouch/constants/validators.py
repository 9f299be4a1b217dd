"""Identity tags attached to errors produced by built-in validators."""

from __future__ import annotations

REQUIRED: str = "required"
NUMBER: str = "number"
STRING_LENGTH: str = "string_length"
FORMAT: str = "format"
INCLUSION: str = "inclusion"
EXCLUSION: str = "exclusion"

PREDICATE_KIND: str = "predicate"

ALL_IDENTITIES: tuple[str, ...] = (
    REQUIRED,
    NUMBER,
    STRING_LENGTH,
    FORMAT,
    INCLUSION,
    EXCLUSION,
)
