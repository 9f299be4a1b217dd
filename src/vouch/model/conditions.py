"""Presence conditions understood by ``validate_key``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Presence(StrEnum):
    """Whether a mapping key must be present."""

    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class Default:
    """Optional key that is filled with ``value`` when missing."""

    value: Any


REQUIRED: Presence = Presence.REQUIRED
OPTIONAL: Presence = Presence.OPTIONAL

type KeyCondition = Presence | Default


def with_default(value: Any) -> Default:
    """Return an optional condition that inserts ``value`` for a missing key."""
    return Default(value)
