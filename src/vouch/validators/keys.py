"""Key-based validation of mapping records."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from vouch.constants.messages import REQUIRED_MESSAGE
from vouch.constants.validators import REQUIRED
from vouch.core import combine, validate
from vouch.exceptions.definition import ValidatorDefinitionError
from vouch.exceptions.validation import new_error
from vouch.model.conditions import Default, KeyCondition, Presence
from vouch.model.outcome import Invalid, Valid
from vouch.model.positions import KeyPosition
from vouch.predicates import IS_MAP
from vouch.types.common import Validator


def _normalize_condition(condition: KeyCondition | str) -> KeyCondition:
    if isinstance(condition, Default):
        return condition
    try:
        return Presence(condition)
    except ValueError:
        raise ValidatorDefinitionError(
            f"unknown key condition {condition!r}; expected 'required', 'optional' or with_default(...)"
        ) from None


def validate_key(
    key: Hashable,
    condition: KeyCondition | str,
    value_validator: Validator,
    *,
    base: Validator = IS_MAP,
    message: str | None = None,
) -> Validator:
    """Combine *base* with validation of the value stored under *key*.

    On success the record is returned with the conformed value in place.
    A failing value error gets *message* (when given) and the key
    position. A missing key fails with "is required", passes unchanged
    when optional, or is filled in with the default of ``with_default``.

    Validators for several keys chain through *base*::

        user = validate_key("name", REQUIRED, validate_string_length(min=1))
        user = validate_key("age", OPTIONAL, IS_INTEGER, base=user)
    """
    presence = _normalize_condition(condition)
    position = KeyPosition(key)

    def lookup(record: Mapping[Hashable, Any]) -> Valid | Invalid:
        if key in record:
            outcome = validate(value_validator, record[key])
            if isinstance(outcome, Invalid):
                return Invalid(outcome.error.with_message(message).with_position(position))  # type: ignore[union-attr]
            return Valid({**record, key: outcome.value})

        if isinstance(presence, Default):
            return Valid({**record, key: presence.value})
        if presence is Presence.REQUIRED:
            template = REQUIRED_MESSAGE if message is None else message
            return Invalid(new_error(REQUIRED, template, positions=(position,)))
        return Valid(record)

    return combine(base, lookup)
