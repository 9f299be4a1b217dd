"""Built-in and structural validators."""

from .conversions import parse_float, parse_integer, strip, to_string
from .each import validate_each
from .format import validate_format
from .keys import validate_key
from .length import validate_string_length
from .membership import validate_exclusion, validate_inclusion
from .number import validate_number

__all__ = [
    "parse_float",
    "parse_integer",
    "strip",
    "to_string",
    "validate_each",
    "validate_exclusion",
    "validate_format",
    "validate_inclusion",
    "validate_key",
    "validate_number",
    "validate_string_length",
]
