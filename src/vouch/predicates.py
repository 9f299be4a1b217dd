"""Standard predicates with their default failure messages.

Plain boolean callables can be used as validators directly; when one of
them returns ``False`` the error only says "is invalid". The predicates
defined here carry a ``kind`` and a message of their own, so
``validate(IS_INTEGER, "1")`` reports "must be an integer".
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class StandardPredicate:
    """A named type check paired with its default error message."""

    kind: str
    message: str
    check: Callable[[Any], bool] = field(repr=False, compare=False)

    def __call__(self, value: Any) -> bool:
        return self.check(value)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


IS_STRING = StandardPredicate("is_string", "must be a string", lambda value: isinstance(value, str))
IS_BYTES = StandardPredicate("is_bytes", "must be bytes", lambda value: isinstance(value, (bytes, bytearray)))
IS_INTEGER = StandardPredicate("is_integer", "must be an integer", _is_integer)
IS_BOOLEAN = StandardPredicate("is_boolean", "must be a boolean", lambda value: isinstance(value, bool))
IS_FLOAT = StandardPredicate("is_float", "must be a float", lambda value: isinstance(value, float))
IS_NUMBER = StandardPredicate("is_number", "must be a number", _is_number)
IS_MAP = StandardPredicate("is_map", "must be a map", lambda value: isinstance(value, Mapping))
IS_LIST = StandardPredicate("is_list", "must be a list", lambda value: isinstance(value, (list, tuple)))
IS_ENUM = StandardPredicate("is_enum", "must be an enum member", lambda value: isinstance(value, Enum))

STANDARD_PREDICATES: tuple[StandardPredicate, ...] = (
    IS_STRING,
    IS_BYTES,
    IS_INTEGER,
    IS_BOOLEAN,
    IS_FLOAT,
    IS_NUMBER,
    IS_MAP,
    IS_LIST,
    IS_ENUM,
)
