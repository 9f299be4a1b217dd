"""Inclusion and exclusion validators."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from vouch.constants.messages import EXCLUSION_MESSAGE, INCLUSION_MESSAGE
from vouch.constants.validators import EXCLUSION, INCLUSION
from vouch.core import combine, noop
from vouch.exceptions.validation import new_error
from vouch.model.outcome import Invalid, Valid
from vouch.types.common import Validator


def validate_inclusion(
    permitted: Collection[Any],
    *,
    base: Validator | None = None,
    message: str | None = None,
) -> Validator:
    """Combine *base* with a check that the value is one of *permitted*."""

    def included(value: Any) -> Valid | Invalid:
        if value in permitted:
            return Valid(value)
        return Invalid(new_error(INCLUSION, INCLUSION_MESSAGE if message is None else message, {"enum": permitted}))

    return combine(base if base is not None else noop(), included)


def validate_exclusion(
    reserved: Collection[Any],
    *,
    base: Validator | None = None,
    message: str | None = None,
) -> Validator:
    """Combine *base* with a check that the value is not one of *reserved*."""

    def excluded(value: Any) -> Valid | Invalid:
        if value not in reserved:
            return Valid(value)
        return Invalid(new_error(EXCLUSION, EXCLUSION_MESSAGE if message is None else message, {"enum": reserved}))

    return combine(base if base is not None else noop(), excluded)
