"""Turn structured validation errors into human-readable messages."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from vouch.constants.rendering import PATH_SEPARATOR, PLACEHOLDER_PATTERN
from vouch.exceptions.definition import InterpolationError
from vouch.model.positions import Position

if TYPE_CHECKING:
    from vouch.exceptions.validation import ValidationError


def interpolate(template: str, bindings: Mapping[str, Any]) -> str:
    """Replace every ``%{name}`` in *template* with ``str(bindings[name])``.

    Raises :class:`InterpolationError` when a placeholder has no binding.
    """

    def _substitute(match: Any) -> str:
        name = match.group(1)
        if name not in bindings:
            raise InterpolationError(name, template)
        return str(bindings[name])

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def format_path(positions: Iterable[Position]) -> str:
    """Join positions left to right, e.g. ``data[3].foo``."""
    parts: list[str] = []
    for position in positions:
        if parts:
            parts.append(position.joiner)
        parts.append(position.render())
    return "".join(parts)


def render_message(error: ValidationError) -> str:
    """Render *error* as ``"<path> <message>"``, or just the message at the root."""
    message = interpolate(error.message, error.metadata)
    if not error.positions:
        return message
    return f"{format_path(error.positions)}{PATH_SEPARATOR}{message}"
