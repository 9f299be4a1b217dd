"""Resolve ``module:attribute`` references to validator callables."""

from __future__ import annotations

import importlib
import logging
import re

from vouch.constants.config import VALIDATOR_REFERENCE_PATTERN, VALIDATOR_REFERENCE_SEPARATOR
from vouch.exceptions import ConfigError
from vouch.types.common import Validator

logger = logging.getLogger(__name__)


def resolve_validator(reference: str) -> Validator:
    """Import the module named before ``:`` and return the attribute after it.

    Dotted attributes are followed, so ``pkg.schemas:User.validator`` works.
    Raises :class:`ConfigError` when the reference cannot be resolved to a
    callable.
    """
    if not re.fullmatch(VALIDATOR_REFERENCE_PATTERN, reference):
        raise ConfigError(f"Invalid validator reference {reference!r}: expected `module:attribute`")

    module_name, _, attribute_path = reference.partition(VALIDATOR_REFERENCE_SEPARATOR)
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import module {module_name!r} for validator {reference!r}: {exc}") from exc

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError:
            raise ConfigError(f"Validator {reference!r} not found: no attribute {attribute!r}") from None

    if not callable(target):
        raise ConfigError(f"Validator {reference!r} is not callable")

    logger.debug("Resolved validator: %s", reference)
    return target  # type: ignore[return-value]
