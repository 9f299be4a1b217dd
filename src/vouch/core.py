"""Validator contract and combinators.

A validator is any one-argument callable returning one of:

* ``Valid(value)`` - the input is valid and ``value`` is its conformed form;
* ``True`` - the input is valid and conforms to itself;
* ``False`` - the input is invalid; the error is derived from the predicate;
* ``Invalid(message)`` or ``Invalid(error)`` - the input is invalid, with a
  plain message or an already structured :class:`ValidationError`.

Accepting booleans lets existing predicates (``str.isidentifier``,
``callable``, the standard predicates) act as validators unchanged.
Every invocation goes through :func:`validate`, which normalizes the
outcome to ``Valid`` or ``Invalid`` carrying a structured error.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import Any

from vouch.exceptions.definition import ValidatorDefinitionError
from vouch.exceptions.validation import InvalidDataError, ValidationError, error_from_predicate, new_error
from vouch.model.outcome import Invalid, Valid
from vouch.types.common import Mapper, Validator


def validate(validator: Validator, value: Any) -> Valid | Invalid:
    """Run *validator* on *value* and normalize its outcome.

    Examples::

        >>> validate(IS_INTEGER, 1)
        Valid(value=1)
        >>> validate(IS_INTEGER, "1").error.format()
        'must be an integer'
    """
    outcome = validator(value)
    if isinstance(outcome, bool):
        return Valid(value) if outcome else Invalid(error_from_predicate(validator))
    if isinstance(outcome, Valid):
        return outcome
    if isinstance(outcome, Invalid):
        if isinstance(outcome.error, ValidationError):
            return outcome
        if isinstance(outcome.error, str):
            return Invalid(new_error(validator, outcome.error))
    raise ValidatorDefinitionError(f"validator {validator!r} returned unsupported outcome {outcome!r}")


def conform(validator: Validator, value: Any) -> Any:
    """Return the conformed value or raise :class:`InvalidDataError`."""
    outcome = validate(validator, value)
    if isinstance(outcome, Invalid):
        assert isinstance(outcome.error, ValidationError)
        raise InvalidDataError(outcome.error)
    return outcome.value


def combine(first: Validator, second: Validator) -> Validator:
    """Run *first*, then feed its conformed value to *second*.

    *second* only runs when *first* succeeds; a failure of *first* is
    returned untouched.
    """

    def combined(value: Any) -> Valid | Invalid:
        outcome = validate(first, value)
        if isinstance(outcome, Invalid):
            return outcome
        return validate(second, outcome.value)

    return combined


def all_of(validators: Iterable[Validator]) -> Validator:
    """Return a validator that passes when every validator passes, left to right.

    Raises :class:`ValidatorDefinitionError` for an empty sequence; use
    :func:`noop` when a chain needs a starting point.
    """
    chain = list(validators)
    if not chain:
        raise ValidatorDefinitionError("all_of requires at least one validator")
    return reduce(combine, chain)


def _identity(value: Any) -> Valid:
    return Valid(value)


def noop() -> Validator:
    """Return a validator that always passes with its input unchanged."""
    return _identity


def transform(mapper: Mapper, *, base: Validator | None = None) -> Validator:
    """Run *base*, then apply *mapper* to the conformed value.

    *mapper* must not fail; check the input with *base* first, e.g.
    ``transform(int, base=validate_format(r"^\\d+$"))``.
    """
    return combine(base if base is not None else noop(), lambda value: Valid(mapper(value)))
