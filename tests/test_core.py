"""Tests for the validator contract and combinators."""

from __future__ import annotations

from typing import Any

import pytest

from vouch import (
    IS_INTEGER,
    IS_STRING,
    Invalid,
    InvalidDataError,
    Valid,
    ValidationError,
    ValidatorDefinitionError,
    all_of,
    combine,
    conform,
    noop,
    transform,
    validate,
    validate_number,
)


def _positive(value: int) -> bool:
    return value > 0


def _shout(value: str) -> Valid | Invalid:
    if not value:
        return Invalid("must not be blank")
    return Valid(value.upper())


def test_validate_true_returns_input() -> None:
    assert validate(lambda value: True, "x") == Valid("x")


def test_validate_false_uses_predicate_error() -> None:
    outcome = validate(_positive, 0)

    assert outcome == Invalid(ValidationError(validator=_positive, message="is invalid", metadata={"kind": "predicate"}))


def test_validate_passes_conformed_value_through() -> None:
    assert validate(_shout, "hi") == Valid("HI")


def test_validate_wraps_plain_message() -> None:
    outcome = validate(_shout, "")

    assert outcome == Invalid(ValidationError(validator=_shout, message="must not be blank"))


def test_validate_passes_structured_error_through() -> None:
    error = ValidationError(validator="custom", message="is odd", metadata={"kind": "parity"})

    assert validate(lambda value: Invalid(error), 3) == Invalid(error)


@pytest.mark.parametrize("outcome", [None, 1, "ok", ("ok", 1)])
def test_validate_rejects_unsupported_outcome(outcome: Any) -> None:
    with pytest.raises(ValidatorDefinitionError):
        validate(lambda value: outcome, 1)


def test_outcomes_are_truthy_by_validity() -> None:
    assert Valid(None)
    assert not Invalid("bad")


def test_combine_runs_second_on_conformed_value() -> None:
    validator = combine(_shout, lambda value: Valid(value + "!"))

    assert validate(validator, "hi") == Valid("HI!")


def test_combine_short_circuits_on_first_failure() -> None:
    calls: list[Any] = []

    def record(value: Any) -> bool:
        calls.append(value)
        return True

    outcome = validate(combine(IS_INTEGER, record), "1")

    assert isinstance(outcome, Invalid)
    assert outcome.error.validator is IS_INTEGER
    assert calls == []


def test_combine_reports_second_failure() -> None:
    outcome = validate(combine(IS_INTEGER, _positive), 0)

    assert isinstance(outcome, Invalid)
    assert outcome.error.validator is _positive
    assert outcome.error.message == "is invalid"


@pytest.mark.parametrize("value", [5, -1, "5", None])
def test_noop_is_identity_for_combine(value: Any) -> None:
    validator = validate_number(greater_than=0)

    expected = validate(validator, value)

    assert validate(combine(noop(), validator), value) == expected
    assert validate(combine(validator, noop()), value) == expected


def test_noop_always_passes() -> None:
    assert validate(noop(), object) == Valid(object)


def test_all_of_combines_left_to_right() -> None:
    validator = all_of([IS_INTEGER, _positive])

    assert validate(validator, 2) == Valid(2)

    outcome = validate(validator, 0)
    assert outcome == Invalid(ValidationError(validator=_positive, message="is invalid", metadata={"kind": "predicate"}))
    assert callable(validator)


@pytest.mark.parametrize("value", [3, 0, "x"])
def test_all_of_single_validator_matches_validator(value: Any) -> None:
    validator = validate_number(less_than=2)

    assert validate(all_of([validator]), value) == validate(validator, value)


def test_all_of_accepts_generators() -> None:
    validator = all_of(v for v in (IS_STRING, _shout))

    assert validate(validator, "a") == Valid("A")


def test_all_of_empty_raises() -> None:
    with pytest.raises(ValidatorDefinitionError):
        all_of([])


def test_transform_applies_mapper_after_base() -> None:
    validator = transform(int, base=IS_STRING)

    assert validate(validator, "1") == Valid(1)

    outcome = validate(validator, 1)
    assert isinstance(outcome, Invalid)
    assert outcome.error.format() == "must be a string"


def test_transform_defaults_to_noop_base() -> None:
    assert validate(transform(str.upper), "abc") == Valid("ABC")


def test_conform_returns_value() -> None:
    assert conform(transform(int, base=IS_STRING), "7") == 7


def test_conform_raises_with_structured_error() -> None:
    with pytest.raises(InvalidDataError) as exc_info:
        conform(validate_number(greater_than=1), 1)

    assert str(exc_info.value) == "must be greater than 1"
    assert exc_info.value.error.validator == "number"
    assert isinstance(exc_info.value, ValueError)


def test_validation_is_repeatable() -> None:
    validator = all_of([IS_INTEGER, validate_number(less_than=10)])

    assert validate(validator, 12) == validate(validator, 12)
    assert validate(validator, 3) == validate(validator, 3)
