# engine.py
#
# Default content validators for ESH-INF descriptor files.
# Validators report problems as `returns` Result values instead of raising,
# so the dispatcher can hand them back to its caller untouched.
#
# These only check that a descriptor is well-formed XML with the expected
# root element. Schema (XSD) validation is left to external validators that
# satisfy the same callable interface.

import xml.etree.ElementTree as ET
from typing import Callable, TypeAlias

from returns.result import Failure, Result, Success

from eshinf.constants import DirectoryCategory


class ValidationError(Exception):
    """Base exception for all descriptor validation errors."""

    pass


class ParsingError(ValidationError):
    """Raised when a descriptor is not well-formed XML."""

    pass


class ContentError(ValidationError):
    """Raised when a well-formed descriptor is not the expected document."""

    pass


ValidatorResult: TypeAlias = Result[None, ValidationError]
Validator: TypeAlias = Callable[[str], ValidatorResult]


# Root element local names, namespace prefixes stripped
THING_ROOT_ELEMENT = "thing-descriptions"
BINDING_ROOT_ELEMENT = "binding"
CONFIGURATION_ROOT_ELEMENT = "config-descriptions"


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _check_root_element(text: str, expected: str) -> ValidatorResult:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        return Failure(ParsingError(f"Failed to parse XML: {e}"))

    actual = _local_name(root.tag)
    if actual != expected:
        return Failure(
            ContentError(
                f"Unexpected root element '{actual}', expected '{expected}'."
            )
        )
    return Success(None)


def validate_thing_type(text: str) -> ValidatorResult:
    """Validate a descriptor from the ESH-INF/thing directory."""
    return _check_root_element(text, THING_ROOT_ELEMENT)


def validate_binding(text: str) -> ValidatorResult:
    """Validate a descriptor from the ESH-INF/binding directory."""
    return _check_root_element(text, BINDING_ROOT_ELEMENT)


def validate_config(text: str) -> ValidatorResult:
    """Validate a descriptor from the ESH-INF/config directory."""
    return _check_root_element(text, CONFIGURATION_ROOT_ELEMENT)


VALIDATOR_REGISTRY: dict[DirectoryCategory, Validator] = {
    DirectoryCategory.Thing: validate_thing_type,
    DirectoryCategory.Binding: validate_binding,
    DirectoryCategory.Configuration: validate_config,
}
