"""Numeric comparison validator."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from vouch.constants.messages import NUMBER_MESSAGES
from vouch.constants.validators import NUMBER
from vouch.core import combine
from vouch.exceptions.definition import ValidatorDefinitionError
from vouch.exceptions.validation import new_error
from vouch.model.outcome import Invalid, Valid
from vouch.predicates import IS_NUMBER
from vouch.types.common import Validator

COMPARATORS: dict[str, Callable[[Any, Any], bool]] = {
    "less_than": operator.lt,
    "greater_than": operator.gt,
    "less_than_or_equal_to": operator.le,
    "greater_than_or_equal_to": operator.ge,
    "equal_to": operator.eq,
    "not_equal_to": operator.ne,
}


def validate_number(
    *,
    base: Validator = IS_NUMBER,
    message: str | None = None,
    **comparisons: Any,
) -> Validator:
    """Combine *base* with comparisons against target numbers.

    Comparisons are checked in keyword order and the first failing one is
    reported, e.g. ``validate_number(greater_than=1, less_than=20)`` fails
    on ``20`` with "must be less than 20". *message* replaces the default
    template of whichever comparison fails.
    """
    unknown = sorted(set(comparisons) - COMPARATORS.keys())
    if unknown:
        raise ValidatorDefinitionError(
            f"unknown number comparison(s): {', '.join(unknown)}; expected one of: {', '.join(COMPARATORS)}"
        )
    checks = tuple(comparisons.items())

    def compare(value: Any) -> Valid | Invalid:
        for kind, target in checks:
            if not COMPARATORS[kind](value, target):
                template = NUMBER_MESSAGES[kind] if message is None else message
                return Invalid(new_error(NUMBER, template, {"kind": kind, "number": target}))
        return Valid(value)

    return combine(base, compare)
