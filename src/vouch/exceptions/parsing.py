"""Parsing-related exceptions."""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class DocumentParseError(VouchError, ValueError):
    """Raised when an input document cannot be read or parsed."""
