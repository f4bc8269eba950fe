"""Protocol interfaces for the ESH-INF check.

Protocols that decouple the dispatcher from concrete validators and sinks.
"""

from typing import Protocol

from returns.result import Result

from eshinf.validators.engine import ValidationError


class XmlValidator(Protocol):
    """Content validator for one descriptor category."""

    def __call__(self, text: str) -> Result[None, ValidationError]:
        """Validate the full text of a descriptor file."""
        ...


class DiagnosticSink(Protocol):
    """Receiver of the findings produced while checking files."""

    def report(self, line: int, message: str, path: str) -> None:
        """Record a finding anchored at ``line`` of the file at ``path``."""
        ...
