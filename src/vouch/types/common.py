"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from vouch.model.outcome import Invalid, Valid

type Outcome = Valid | Invalid | bool
type Validator = Callable[[Any], Outcome]
type Mapper = Callable[[Any], Any]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
