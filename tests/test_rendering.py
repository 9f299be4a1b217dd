"""Tests for message interpolation and breadcrumb rendering."""

from __future__ import annotations

import pytest

from vouch import IndexPosition, InterpolationError, KeyPosition, ValidationError
from vouch.rendering import format_path, interpolate, render_message


def test_render_nested_positions() -> None:
    error = ValidationError(
        validator="number",
        message="is invalid",
        metadata={"kind": "less_than", "number": 1},
        positions=(KeyPosition("data"), IndexPosition(3), KeyPosition("foo")),
    )

    assert render_message(error) == "data[3].foo is invalid"


def test_render_without_positions_returns_message() -> None:
    error = ValidationError(validator="number", message="must be less than %{number}", metadata={"number": 5})

    assert render_message(error) == "must be less than 5"


def test_interpolation_ignores_unused_bindings() -> None:
    assert interpolate("should be greater than %{value}", {"value": 1, "foo": "bar"}) == "should be greater than 1"


def test_interpolation_supports_multiple_placeholders() -> None:
    assert interpolate("between %{low} and %{high}", {"low": 1, "high": 9.5}) == "between 1 and 9.5"


def test_interpolation_missing_key_raises() -> None:
    with pytest.raises(InterpolationError) as exc_info:
        interpolate("must be %{size}", {"length": 1})

    assert exc_info.value.name == "size"
    assert "size" in str(exc_info.value)
    assert isinstance(exc_info.value, KeyError)


def test_unterminated_placeholder_is_literal() -> None:
    assert interpolate("100%{ done", {}) == "100%{ done"


def test_index_then_key_path() -> None:
    assert format_path((IndexPosition(3), KeyPosition("foo"))) == "[3].foo"


def test_consecutive_keys_join_with_dot() -> None:
    assert format_path((KeyPosition("foo"), KeyPosition("bar"))) == "foo.bar"


def test_consecutive_indexes_join_without_separator() -> None:
    assert format_path((IndexPosition(0), IndexPosition(2))) == "[0][2]"


@pytest.mark.parametrize(
    ("key", "rendered"),
    [
        ("id", "id"),
        ("_private2", "_private2"),
        ("first name", '"first name"'),
        ("2fa", '"2fa"'),
        ("e-mail", '"e-mail"'),
        ("", '""'),
        (7, '"7"'),
    ],
)
def test_key_position_rendering(key: object, rendered: str) -> None:
    assert KeyPosition(key).render() == rendered


def test_str_of_error_is_rendered_message() -> None:
    error = ValidationError(validator="required", message="is required", positions=(KeyPosition("id"),))

    assert str(error) == "id is required"
    assert error.format() == "id is required"
