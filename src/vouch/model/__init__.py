"""Core data models for vouch."""

from .conditions import OPTIONAL, REQUIRED, Default, KeyCondition, Presence, with_default
from .outcome import Invalid, Valid
from .positions import IndexPosition, KeyPosition, Position

__all__ = [
    "OPTIONAL",
    "REQUIRED",
    "Default",
    "IndexPosition",
    "Invalid",
    "KeyCondition",
    "KeyPosition",
    "Position",
    "Presence",
    "Valid",
    "with_default",
]
