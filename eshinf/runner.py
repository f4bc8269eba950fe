"""Run the ESH-INF check over a directory tree."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from returns.result import Failure

from eshinf.checks.dispatcher import EshInfXmlCheck
from eshinf.constants import DirectoryCategory
from eshinf.core.interfaces import DiagnosticSink
from eshinf.diagnostics import SOURCE_CONTENT, Diagnostic, DiagnosticCollector
from eshinf.files import CandidateFile, iter_candidate_files
from eshinf.validators.engine import VALIDATOR_REGISTRY, ParsingError, ValidationError

logger = logging.getLogger(__name__)


class CheckAbortedError(Exception):
    """Raised in strict mode when a file fails validation."""

    def __init__(self, path: Path, error: ValidationError):
        super().__init__(f"{path}: {error}")
        self.path = path
        self.error = error


@dataclass(slots=True)
class CheckRunResult:
    """Outcome of a run over one directory tree."""

    root: Path
    files_checked: int = 0
    files_dispatched: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def build_default_check(
    sink: DiagnosticSink, logger: Optional[logging.Logger] = None
) -> EshInfXmlCheck:
    """Assemble a check wired to the validators of :mod:`eshinf.validators`."""
    return EshInfXmlCheck(
        sink,
        thing_validator=VALIDATOR_REGISTRY[DirectoryCategory.Thing],
        binding_validator=VALIDATOR_REGISTRY[DirectoryCategory.Binding],
        config_validator=VALIDATOR_REGISTRY[DirectoryCategory.Configuration],
        logger=logger,
    )


def run_check(
    root: Path,
    check: Optional[EshInfXmlCheck] = None,
    charset: str = "utf-8",
    strict: bool = False,
) -> CheckRunResult:
    """Check every .xml file below ``root``.

    Validator failures become content diagnostics, or, when ``strict`` is
    set, stop the run with :class:`CheckAbortedError`. Empty files and
    validator failures are recorded in the check's sink in file order; the
    result holds only the diagnostics added during this run.

    Args:
        root: Directory to scan, or a single file
        check: Check to run; defaults to one wired to the built-in validators
            and reporting into a fresh collector. A supplied check must report
            into a DiagnosticCollector.
        charset: Encoding used to read the files
        strict: Abort on the first validator failure

    Returns:
        CheckRunResult with every diagnostic the run produced

    Raises:
        TypeError: If the supplied check's sink is not a DiagnosticCollector
    """
    root = Path(root)
    if check is None:
        check = build_default_check(DiagnosticCollector())

    collector = check.sink
    if not isinstance(collector, DiagnosticCollector):
        raise TypeError(
            f"run_check needs a check reporting into a DiagnosticCollector, "
            f"got {type(collector).__name__}"
        )
    first_diagnostic = len(collector)

    result = CheckRunResult(root=root)
    check.begin_processing(charset)

    for path in iter_candidate_files(root, check.file_extensions):
        try:
            file = CandidateFile.from_path(path, charset)
        except UnicodeDecodeError as e:
            _handle_failure(
                collector, path, ParsingError(f"Cannot decode as {charset}: {e}"), strict
            )
            continue

        result.files_checked += 1
        if not file.is_empty and (
            check.dispatch_category(file) is not DirectoryCategory.Unrecognized
        ):
            result.files_dispatched += 1

        outcome = check.process_filtered(file)
        if isinstance(outcome, Failure):
            _handle_failure(collector, path, outcome.failure(), strict)

    result.diagnostics.extend(collector.diagnostics[first_diagnostic:])

    logger.debug(
        f"Checked {result.files_checked} files, "
        f"{result.files_dispatched} dispatched, "
        f"{len(result.diagnostics)} diagnostics"
    )
    return result


def _handle_failure(
    collector: DiagnosticCollector, path: Path, error: ValidationError, strict: bool
) -> None:
    if strict:
        raise CheckAbortedError(path, error)
    logger.debug(f"Validation failed for {path}: {error}")
    collector.report(0, str(error), str(path), source=SOURCE_CONTENT)
