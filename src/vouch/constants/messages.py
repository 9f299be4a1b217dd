"""Default message templates for built-in validators.

Placeholders use the ``%{name}`` syntax and are resolved against the
error metadata at render time.
"""

from __future__ import annotations

REQUIRED_MESSAGE: str = "is required"
PREDICATE_MESSAGE: str = "is invalid"
FORMAT_MESSAGE: str = "has invalid format"
INCLUSION_MESSAGE: str = "is invalid"
EXCLUSION_MESSAGE: str = "is reserved"
INTEGER_STRING_MESSAGE: str = "must be an integer string"
FLOAT_STRING_MESSAGE: str = "must be a float string"

NUMBER_MESSAGES: dict[str, str] = {
    "less_than": "must be less than %{number}",
    "greater_than": "must be greater than %{number}",
    "less_than_or_equal_to": "must be less than or equal to %{number}",
    "greater_than_or_equal_to": "must be greater than or equal to %{number}",
    "equal_to": "must be equal to %{number}",
    "not_equal_to": "must be not equal to %{number}",
}

LENGTH_MESSAGES: dict[str, str] = {
    "exact": "must be %{length} byte(s)",
    "min": "must be at least %{length} byte(s)",
    "max": "must be at most %{length} byte(s)",
}
