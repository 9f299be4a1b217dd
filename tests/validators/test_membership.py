"""Tests for inclusion and exclusion validators."""

from __future__ import annotations

from vouch import IS_INTEGER, Invalid, Valid, ValidationError, noop, validate
from vouch.validators import validate_exclusion, validate_inclusion


def test_inclusion_with_list() -> None:
    validator = validate_inclusion([1, 2])

    assert validate(validator, 1) == Valid(1)
    assert validate(validator, 2) == Valid(2)
    assert validate(validator, 3) == Invalid(
        ValidationError(validator="inclusion", message="is invalid", metadata={"enum": [1, 2]})
    )


def test_inclusion_with_set() -> None:
    permitted = frozenset({1, 2})
    validator = validate_inclusion(permitted)

    assert validate(validator, 1) == Valid(1)
    assert validate(validator, 3) == Invalid(
        ValidationError(validator="inclusion", message="is invalid", metadata={"enum": permitted})
    )


def test_inclusion_message_option() -> None:
    validator = validate_inclusion([1, 2], base=IS_INTEGER, message="should be either 1 or 2")

    outcome = validate(validator, 3)
    assert isinstance(outcome, Invalid)
    assert outcome.error.format() == "should be either 1 or 2"

    outcome = validate(validator, "1")
    assert isinstance(outcome, Invalid)
    assert outcome.error.format() == "must be an integer"


def test_inclusion_after_noop_accepts_mixed_types() -> None:
    validator = validate_inclusion(["foo", b"foo"], base=noop())

    assert validate(validator, "foo") == Valid("foo")
    assert validate(validator, b"foo") == Valid(b"foo")


def test_exclusion_with_list() -> None:
    validator = validate_exclusion([1, 2])

    assert validate(validator, 3) == Valid(3)
    assert validate(validator, 1) == Invalid(
        ValidationError(validator="exclusion", message="is reserved", metadata={"enum": [1, 2]})
    )


def test_exclusion_with_set() -> None:
    reserved = {"admin", "root"}

    outcome = validate(validate_exclusion(reserved), "root")

    assert isinstance(outcome, Invalid)
    assert outcome.error.metadata == {"enum": reserved}
    assert outcome.error.format() == "is reserved"


def test_exclusion_message_option() -> None:
    validator = validate_exclusion([1, 2], base=IS_INTEGER, message="should be neither 1 nor 2")

    outcome = validate(validator, 1)
    assert isinstance(outcome, Invalid)
    assert outcome.error.format() == "should be neither 1 nor 2"
