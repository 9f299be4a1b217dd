"""Element-wise validation of ordered collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from vouch.collectors import INTO_LIST, Collector, resolve_collector
from vouch.core import combine, noop, validate
from vouch.model.outcome import Invalid, Valid
from vouch.model.positions import IndexPosition
from vouch.types.common import Validator


def validate_each(
    each_validator: Validator,
    *,
    base: Validator | None = None,
    skip_invalid: bool = False,
    into: Collector | type = INTO_LIST,
    message: str | None = None,
) -> Validator:
    """Combine *base* with validation of every element of a collection.

    Conformed elements are gathered, in order, into the *into* container.
    The first invalid element fails the whole collection with its index
    prepended to the error, unless *skip_invalid* is set, in which case
    invalid elements are dropped. Mappings are enumerated as
    ``(key, value)`` pairs.

    The default base accepts anything, and a non-iterable input raises
    ``TypeError``. Pass ``base=IS_LIST`` (or another type check) for
    untrusted input so it fails with "must be a list" instead.
    """
    collector = resolve_collector(into)

    def each(collection: Iterable[Any]) -> Valid | Invalid:
        items = collection.items() if isinstance(collection, Mapping) else collection
        container = collector.empty()
        for index, element in enumerate(items):
            outcome = validate(each_validator, element)
            if isinstance(outcome, Valid):
                container = collector.insert(container, outcome.value)
            elif not skip_invalid:
                error = outcome.error.with_position(IndexPosition(index))  # type: ignore[union-attr]
                return Invalid(error.with_message(message))
        return Valid(collector.finalize(container))

    return combine(base if base is not None else noop(), each)
