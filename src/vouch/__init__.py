"""Composable validators for nested data.

Example::

    from vouch import IS_INTEGER, REQUIRED, validate, validate_each, validate_key

    point = validate_key("x", REQUIRED, IS_INTEGER)
    point = validate_key("y", REQUIRED, IS_INTEGER, base=point)
    outcome = validate(validate_each(point), [{"x": 1, "y": "2"}])
    outcome.error.format()  # '[0].y must be an integer'
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from vouch.exceptions import (
    ConfigError,
    DocumentParseError,
    InterpolationError,
    InvalidDataError,
    ValidationError,
    ValidatorDefinitionError,
    VouchError,
)
from vouch.collectors import (
    INTO_DICT,
    INTO_FROZENSET,
    INTO_LIST,
    INTO_SET,
    INTO_TUPLE,
    Collector,
    keyed_by,
)
from vouch.core import all_of, combine, conform, noop, transform, validate
from vouch.exceptions.validation import add_position, error_from_predicate, maybe_override_message, new_error
from vouch.model import (
    OPTIONAL,
    REQUIRED,
    Default,
    IndexPosition,
    Invalid,
    KeyPosition,
    Presence,
    Valid,
    with_default,
)
from vouch.predicates import (
    IS_BOOLEAN,
    IS_BYTES,
    IS_ENUM,
    IS_FLOAT,
    IS_INTEGER,
    IS_LIST,
    IS_MAP,
    IS_NUMBER,
    IS_STRING,
    STANDARD_PREDICATES,
    StandardPredicate,
)
from vouch.rendering import format_path, interpolate, render_message
from vouch.types import Validator
from vouch.validators import (
    parse_float,
    parse_integer,
    strip,
    to_string,
    validate_each,
    validate_exclusion,
    validate_format,
    validate_inclusion,
    validate_key,
    validate_number,
    validate_string_length,
)

__all__ = [
    "INTO_DICT",
    "INTO_FROZENSET",
    "INTO_LIST",
    "INTO_SET",
    "INTO_TUPLE",
    "IS_BOOLEAN",
    "IS_BYTES",
    "IS_ENUM",
    "IS_FLOAT",
    "IS_INTEGER",
    "IS_LIST",
    "IS_MAP",
    "IS_NUMBER",
    "IS_STRING",
    "OPTIONAL",
    "REQUIRED",
    "STANDARD_PREDICATES",
    "Collector",
    "ConfigError",
    "Default",
    "DocumentParseError",
    "IndexPosition",
    "InterpolationError",
    "Invalid",
    "InvalidDataError",
    "KeyPosition",
    "Presence",
    "StandardPredicate",
    "Valid",
    "ValidationError",
    "Validator",
    "ValidatorDefinitionError",
    "VouchError",
    "__version__",
    "add_position",
    "all_of",
    "combine",
    "conform",
    "error_from_predicate",
    "format_path",
    "interpolate",
    "keyed_by",
    "maybe_override_message",
    "new_error",
    "noop",
    "parse_float",
    "parse_integer",
    "render_message",
    "strip",
    "to_string",
    "transform",
    "validate",
    "validate_each",
    "validate_exclusion",
    "validate_format",
    "validate_inclusion",
    "validate_key",
    "validate_number",
    "validate_string_length",
    "with_default",
]

try:
    __version__ = version("vouch")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
