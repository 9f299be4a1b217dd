"""Validator for ``vouch.yaml``, built from vouch's own combinators.

The validator conforms the raw YAML mapping straight into
:class:`VouchConfig`, so a successful ``validate`` needs no further
normalization.
"""

from __future__ import annotations

import difflib
from collections.abc import Mapping
from typing import Any

from vouch.config.model import CheckConfig, VouchConfig
from vouch.constants.config import (
    ALLOWED_CHECK_KEYS,
    ALLOWED_CONFIG_KEYS,
    UNKNOWN_KEY,
    VALIDATOR_REFERENCE_PATTERN,
)
from vouch.core import combine, transform
from vouch.exceptions.validation import new_error
from vouch.model.conditions import OPTIONAL, REQUIRED, with_default
from vouch.model.outcome import Invalid, Valid
from vouch.model.positions import KeyPosition
from vouch.predicates import IS_BOOLEAN, IS_LIST, IS_MAP, IS_STRING
from vouch.types.common import Validator
from vouch.validators import validate_each, validate_format, validate_key, validate_string_length


def _suggest_key(key: str, allowed: frozenset[str]) -> str | None:
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return matches[0] if matches else None


def known_keys(allowed: frozenset[str]) -> Validator:
    """Return a mapping validator that rejects keys outside *allowed*."""

    def check(record: Mapping[Any, Any]) -> Valid | Invalid:
        for key in sorted(record, key=str):
            if key in allowed:
                continue
            suggestion = _suggest_key(str(key), allowed)
            if suggestion is None:
                return Invalid(new_error(UNKNOWN_KEY, "is not a known key", positions=(KeyPosition(key),)))
            return Invalid(
                new_error(
                    UNKNOWN_KEY,
                    "is not a known key (did you mean `%{suggestion}`?)",
                    {"suggestion": suggestion},
                    positions=(KeyPosition(key),),
                )
            )
        return Valid(record)

    return combine(IS_MAP, check)


def _non_empty(value: Any) -> Valid | Invalid:
    if value:
        return Valid(value)
    return Invalid("must not be empty")


def _to_check_config(entry: Mapping[str, Any]) -> CheckConfig:
    return CheckConfig(
        name=entry.get("name") or entry["validator"],
        validator=entry["validator"],
        documents=entry["documents"],
        skip_missing=entry["skip_missing"],
    )


_reference = validate_format(VALIDATOR_REFERENCE_PATTERN, message="must be a `module:attribute` reference")
_documents = validate_each(
    validate_string_length(min=1),
    base=combine(IS_LIST, _non_empty),
    into=tuple,
)

_check = validate_key("name", OPTIONAL, IS_STRING, base=known_keys(ALLOWED_CHECK_KEYS))
_check = validate_key("validator", REQUIRED, _reference, base=_check)
_check = validate_key("documents", REQUIRED, _documents, base=_check)
_check = validate_key("skip_missing", with_default(False), IS_BOOLEAN, base=_check)

CHECK_VALIDATOR: Validator = transform(_to_check_config, base=_check)

CONFIG_VALIDATOR: Validator = transform(
    lambda raw: VouchConfig(checks=raw["checks"]),
    base=validate_key(
        "checks",
        with_default(()),
        validate_each(CHECK_VALIDATOR, base=IS_LIST, into=tuple),
        base=known_keys(ALLOWED_CONFIG_KEYS),
    ),
)
