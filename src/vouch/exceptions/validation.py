"""Structured validation error model.

A :class:`ValidationError` is created where a validator fails and is
enriched on its way out: structural validators prepend the key or index
they were looking at, and ``message`` options replace the template.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from vouch.constants.messages import PREDICATE_MESSAGE
from vouch.constants.validators import PREDICATE_KIND
from vouch.exceptions.base import VouchError
from vouch.model.positions import Position
from vouch.predicates import StandardPredicate
from vouch.rendering import render_message


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure with its path into the input."""

    validator: str | Callable[..., Any]
    message: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    positions: tuple[Position, ...] = ()

    def with_position(self, position: Position) -> ValidationError:
        """Return a copy with *position* as the new outermost position."""
        return replace(self, positions=(position, *self.positions))

    def with_message(self, message: str | None) -> ValidationError:
        """Return a copy using *message*, or ``self`` when it is ``None``."""
        if message is None:
            return self
        return replace(self, message=message)

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        return render_message(self)

    def __str__(self) -> str:
        return self.format()


class InvalidDataError(VouchError, ValueError):
    """Raised by ``conform`` when the value does not pass its validator."""

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.format())
        self.error = error


def new_error(
    validator: str | Callable[..., Any],
    message: str,
    metadata: Mapping[str, Any] | None = None,
    positions: tuple[Position, ...] = (),
) -> ValidationError:
    """Build a :class:`ValidationError` with optional metadata and positions."""
    return ValidationError(
        validator=validator,
        message=message,
        metadata=dict(metadata) if metadata else {},
        positions=positions,
    )


def error_from_predicate(predicate: Callable[[Any], Any]) -> ValidationError:
    """Build the error for a predicate that returned ``False``.

    Standard predicates supply their own message and kind; any other
    callable reports "is invalid" with kind ``predicate``.
    """
    if isinstance(predicate, StandardPredicate):
        return new_error(predicate, predicate.message, {"kind": predicate.kind})
    return new_error(predicate, PREDICATE_MESSAGE, {"kind": PREDICATE_KIND})


def add_position(error: ValidationError, position: Position) -> ValidationError:
    return error.with_position(position)


def maybe_override_message(error: ValidationError, message: str | None) -> ValidationError:
    return error.with_message(message)
