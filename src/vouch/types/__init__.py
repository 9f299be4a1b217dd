"""Shared type aliases for vouch."""

from .common import JsonScalar, JsonValue, Mapper, Outcome, Validator

__all__ = [
    "JsonScalar",
    "JsonValue",
    "Mapper",
    "Outcome",
    "Validator",
]
