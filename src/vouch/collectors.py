"""Target containers for element-wise validation.

``validate_each`` gathers conformed elements through a :class:`Collector`:
``empty()`` starts a container, ``insert()`` adds one element in
validation order and ``finalize()`` produces the result.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Protocol

from vouch.exceptions.definition import ValidatorDefinitionError


class Collector(Protocol):
    """Strategy for building the result container of ``validate_each``."""

    def empty(self) -> Any: ...

    def insert(self, container: Any, element: Any) -> Any: ...

    def finalize(self, container: Any) -> Any: ...


class ListCollector:
    def empty(self) -> list[Any]:
        return []

    def insert(self, container: list[Any], element: Any) -> list[Any]:
        container.append(element)
        return container

    def finalize(self, container: list[Any]) -> list[Any]:
        return container


class TupleCollector(ListCollector):
    def finalize(self, container: list[Any]) -> tuple[Any, ...]:  # type: ignore[override]
        return tuple(container)


class SetCollector:
    def empty(self) -> set[Any]:
        return set()

    def insert(self, container: set[Any], element: Any) -> set[Any]:
        container.add(element)
        return container

    def finalize(self, container: set[Any]) -> set[Any]:
        return container


class FrozenSetCollector(SetCollector):
    def finalize(self, container: set[Any]) -> frozenset[Any]:  # type: ignore[override]
        return frozenset(container)


class DictCollector:
    """Collect ``(key, value)`` pairs into a dict; later keys win."""

    def empty(self) -> dict[Any, Any]:
        return {}

    def insert(self, container: dict[Any, Any], element: Any) -> dict[Any, Any]:
        key, value = element
        container[key] = value
        return container

    def finalize(self, container: dict[Any, Any]) -> dict[Any, Any]:
        return container


@dataclass(frozen=True)
class KeyedCollector(DictCollector):
    """Collect elements into a dict keyed by ``key_func(element)``."""

    key_func: Callable[[Any], Hashable]

    def insert(self, container: dict[Any, Any], element: Any) -> dict[Any, Any]:
        container[self.key_func(element)] = element
        return container


INTO_LIST: Collector = ListCollector()
INTO_TUPLE: Collector = TupleCollector()
INTO_SET: Collector = SetCollector()
INTO_FROZENSET: Collector = FrozenSetCollector()
INTO_DICT: Collector = DictCollector()

COLLECTORS_BY_TYPE: dict[type, Collector] = {
    list: INTO_LIST,
    tuple: INTO_TUPLE,
    set: INTO_SET,
    frozenset: INTO_FROZENSET,
    dict: INTO_DICT,
}


def keyed_by(key_func: Callable[[Any], Hashable]) -> Collector:
    """Return a collector building a dict of elements keyed by *key_func*."""
    return KeyedCollector(key_func)


def resolve_collector(into: Collector | type) -> Collector:
    """Accept a collector or one of the container types ``list``, ``tuple``, ``set``, ``frozenset``, ``dict``."""
    if isinstance(into, type):
        if into in COLLECTORS_BY_TYPE:
            return COLLECTORS_BY_TYPE[into]
        raise ValidatorDefinitionError(f"unsupported target container type: {into.__name__}")
    if all(callable(getattr(into, name, None)) for name in ("empty", "insert", "finalize")):
        return into
    raise ValidatorDefinitionError(f"unsupported target container: {into!r}")
