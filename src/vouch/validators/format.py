"""Regular-expression format validator."""

from __future__ import annotations

import re
from typing import Any

from vouch.constants.messages import FORMAT_MESSAGE
from vouch.constants.validators import FORMAT
from vouch.core import combine
from vouch.exceptions.validation import new_error
from vouch.model.outcome import Invalid, Valid
from vouch.predicates import IS_STRING
from vouch.types.common import Validator


def validate_format(
    pattern: str | re.Pattern[str],
    *,
    base: Validator = IS_STRING,
    message: str | None = None,
) -> Validator:
    """Combine *base* with a check that *pattern* matches somewhere in the value.

    Anchor the pattern to require a full match. The compiled pattern is
    attached to the error metadata under ``format``.
    """
    compiled = re.compile(pattern)

    def match(value: Any) -> Valid | Invalid:
        if compiled.search(value):
            return Valid(value)
        return Invalid(new_error(FORMAT, FORMAT_MESSAGE if message is None else message, {"format": compiled}))

    return combine(base, match)
