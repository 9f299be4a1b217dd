"""Conversions built from a format check followed by a transform."""

from __future__ import annotations

from vouch.constants.conversions import FLOAT_STRING_PATTERN, INTEGER_STRING_PATTERN
from vouch.constants.messages import FLOAT_STRING_MESSAGE, INTEGER_STRING_MESSAGE
from vouch.core import transform
from vouch.predicates import IS_STRING
from vouch.types.common import Validator
from vouch.validators.format import validate_format


def parse_integer(*, base: Validator = IS_STRING, message: str | None = None) -> Validator:
    """Accept strings such as ``"-42"`` and conform them to ``int``."""
    checked = validate_format(
        INTEGER_STRING_PATTERN,
        base=base,
        message=INTEGER_STRING_MESSAGE if message is None else message,
    )
    return transform(int, base=checked)


def parse_float(*, base: Validator = IS_STRING, message: str | None = None) -> Validator:
    """Accept strings such as ``"1.5e3"`` and conform them to ``float``."""
    checked = validate_format(
        FLOAT_STRING_PATTERN,
        base=base,
        message=FLOAT_STRING_MESSAGE if message is None else message,
    )
    return transform(float, base=checked)


def strip(*, base: Validator = IS_STRING) -> Validator:
    """Conform strings by removing surrounding whitespace."""
    return transform(str.strip, base=base)


def to_string(*, base: Validator | None = None) -> Validator:
    """Conform any value to its ``str`` form."""
    return transform(str, base=base)
