"""String byte-length validator."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from vouch.constants.messages import LENGTH_MESSAGES
from vouch.constants.validators import STRING_LENGTH
from vouch.core import combine
from vouch.exceptions.definition import ValidatorDefinitionError
from vouch.exceptions.validation import new_error
from vouch.model.outcome import Invalid, Valid
from vouch.predicates import IS_STRING
from vouch.types.common import Validator

LENGTH_COMPARATORS: dict[str, Callable[[int, int], bool]] = {
    "exact": operator.eq,
    "min": operator.ge,
    "max": operator.le,
}


def byte_size(value: str | bytes | bytearray) -> int:
    """Return the encoded size of *value*; text is measured as UTF-8."""
    if isinstance(value, str):
        return len(value.encode("utf-8"))
    return len(value)


def validate_string_length(
    *,
    base: Validator = IS_STRING,
    message: str | None = None,
    **bounds: int,
) -> Validator:
    """Combine *base* with byte-length bounds ``exact``, ``min`` and ``max``.

    Bounds are checked in keyword order and the first failing one is
    reported, so ``validate_string_length(max=1, min=3)`` fails on ``"ab"``
    with "must be at most 1 byte(s)". Lengths count bytes, not
    characters: ``"é"`` is two bytes long.
    """
    unknown = sorted(set(bounds) - LENGTH_COMPARATORS.keys())
    if unknown:
        raise ValidatorDefinitionError(
            f"unknown length bound(s): {', '.join(unknown)}; expected one of: {', '.join(LENGTH_COMPARATORS)}"
        )
    checks = tuple(bounds.items())

    def measure(value: Any) -> Valid | Invalid:
        size = byte_size(value)
        for kind, target in checks:
            if not LENGTH_COMPARATORS[kind](size, target):
                template = LENGTH_MESSAGES[kind] if message is None else message
                return Invalid(new_error(STRING_LENGTH, template, {"kind": kind, "length": target}))
        return Valid(value)

    return combine(base, measure)
