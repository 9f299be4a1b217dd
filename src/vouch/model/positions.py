"""Breadcrumb positions recorded while an error leaves nested data."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from vouch.constants.rendering import BARE_KEY_PATTERN, INDEX_JOINER, KEY_JOINER


@dataclass(frozen=True)
class KeyPosition:
    """Position of a value under a mapping key."""

    key: Hashable

    joiner = KEY_JOINER

    def render(self) -> str:
        """Render as a bare identifier when possible, otherwise double-quoted."""
        text = str(self.key)
        if BARE_KEY_PATTERN.fullmatch(text):
            return text
        return f'"{text}"'


@dataclass(frozen=True)
class IndexPosition:
    """Position of an element inside an ordered collection."""

    index: int

    joiner = INDEX_JOINER

    def render(self) -> str:
        return f"[{self.index}]"


type Position = KeyPosition | IndexPosition
