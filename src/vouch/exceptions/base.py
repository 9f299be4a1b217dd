"""Root of the vouch exception hierarchy."""

from __future__ import annotations


class VouchError(Exception):
    """Base class for every exception raised by vouch."""
