"""Content validation for ESH-INF descriptor files.

The dispatcher in :mod:`eshinf.checks` routes every non-empty descriptor to
one validator per directory category:

    ESH-INF/thing/*.xml    -> validate_thing_type
    ESH-INF/binding/*.xml  -> validate_binding
    ESH-INF/config/*.xml   -> validate_config

Validators are plain callables taking the file text and returning a
``returns.result.Result``: ``Success(None)`` when the file passes, or a
``Failure`` holding one of the errors below.

Error hierarchy:
----------------
    - ValidationError: base class
    - ParsingError: the file is not well-formed XML
    - ContentError: the document is well-formed but not the expected one
"""

from eshinf.validators.engine import (
    # Validators
    validate_thing_type,
    validate_binding,
    validate_config,
    # Exception hierarchy
    ValidationError,
    ParsingError,
    ContentError,
    # Type definitions
    Validator,
    ValidatorResult,
    # Registry
    VALIDATOR_REGISTRY,
)

__all__ = [
    # Validators
    "validate_thing_type",
    "validate_binding",
    "validate_config",
    # Exceptions
    "ValidationError",
    "ParsingError",
    "ContentError",
    # Types
    "Validator",
    "ValidatorResult",
    # Registry
    "VALIDATOR_REGISTRY",
]
