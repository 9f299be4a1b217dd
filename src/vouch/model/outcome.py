"""Tagged outcomes returned by validators and by ``validate``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vouch.exceptions.validation import ValidationError


@dataclass(frozen=True)
class Valid:
    """Successful outcome carrying the conformed value."""

    value: Any

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed outcome.

    A validator may carry either a plain message or a structured
    :class:`ValidationError`; after ``validate`` the error is always
    structured.
    """

    error: str | ValidationError

    def __bool__(self) -> bool:
        return False
