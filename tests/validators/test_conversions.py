"""Tests for transform-based conversion validators."""

from __future__ import annotations

import pytest

from vouch import Invalid, Valid, validate, validate_number
from vouch.validators import parse_float, parse_integer, strip, to_string


@pytest.mark.parametrize(("raw", "parsed"), [("1", 1), ("-42", -42), ("+7", 7), ("007", 7)])
def test_parse_integer_accepts_integer_strings(raw: str, parsed: int) -> None:
    assert validate(parse_integer(), raw) == Valid(parsed)


@pytest.mark.parametrize("raw", ["", "1.0", " 1", "1_000", "one", "1\n"])
def test_parse_integer_rejects_other_strings(raw: str) -> None:
    outcome = validate(parse_integer(), raw)

    assert isinstance(outcome, Invalid)
    assert outcome.error.validator == "format"
    assert outcome.error.format() == "must be an integer string"


def test_parse_integer_rejects_non_strings() -> None:
    outcome = validate(parse_integer(), 1)

    assert isinstance(outcome, Invalid)
    assert outcome.error.format() == "must be a string"


def test_parse_integer_feeds_number_validator() -> None:
    validator = validate_number(base=parse_integer(), greater_than=0)

    assert validate(validator, "5") == Valid(5)

    outcome = validate(validator, "0")
    assert isinstance(outcome, Invalid)
    assert outcome.error.format() == "must be greater than 0"


@pytest.mark.parametrize(("raw", "parsed"), [("1.5", 1.5), ("-.5", -0.5), ("3", 3.0), ("1e3", 1000.0), ("2.", 2.0)])
def test_parse_float_accepts_float_strings(raw: str, parsed: float) -> None:
    assert validate(parse_float(), raw) == Valid(parsed)


@pytest.mark.parametrize("raw", ["", ".", "nan", "inf", "1.2.3", "e5"])
def test_parse_float_rejects_other_strings(raw: str) -> None:
    outcome = validate(parse_float(message="is not a decimal"), raw)

    assert isinstance(outcome, Invalid)
    assert outcome.error.format() == "is not a decimal"


def test_strip() -> None:
    assert validate(strip(), "  padded \n") == Valid("padded")


def test_to_string() -> None:
    assert validate(to_string(), 12) == Valid("12")
