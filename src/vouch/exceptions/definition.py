"""Programmer errors raised while building or rendering validators.

These are distinct from data failures: a data failure is returned as a
:class:`~vouch.exceptions.validation.ValidationError` value, while the
exceptions below signal that the validator itself is wrong.
"""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class ValidatorDefinitionError(VouchError, ValueError):
    """Raised when a validator is built or behaves outside the contract."""


class InterpolationError(VouchError, KeyError):
    """Raised when a message template references a missing metadata key."""

    def __init__(self, name: str, template: str) -> None:
        super().__init__(name)
        self.name = name
        self.template = template

    def __str__(self) -> str:
        return f"message template {self.template!r} references unknown key `{self.name}`"
