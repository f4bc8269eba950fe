"""Dispatch of ESH-INF descriptor files to their content validators.

Files are routed by the shape of their path only. For a file
``<root>/ESH-INF/<directory>/<name>.xml`` the parent ``<directory>`` selects
the validator; files outside ``ESH-INF`` and files in other directories such
as ``i18n`` are skipped without a finding. Empty files are reported here and
never reach a validator.
"""

import logging
from typing import Optional

from returns.result import Success

from eshinf.constants import (
    DIRECTORY_CATEGORIES,
    ESH_INF_DIRECTORY,
    MESSAGE_EMPTY_FILE,
    XML_EXTENSION,
    DirectoryCategory,
)
from eshinf.core.interfaces import DiagnosticSink, XmlValidator
from eshinf.files import CandidateFile
from eshinf.validators.engine import ValidatorResult


def classify_directory(name: str) -> DirectoryCategory:
    """Map a parent directory name to its descriptor category."""
    return DIRECTORY_CATEGORIES.get(name, DirectoryCategory.Unrecognized)


class EshInfXmlCheck:
    """Routes .xml files located in the ESH-INF directory to one of three validators.

    The check owns no per-file state: each call to :meth:`process` depends
    only on the file it is given, so files may be processed in any order.
    """

    file_extensions = (XML_EXTENSION,)

    def __init__(
        self,
        sink: DiagnosticSink,
        thing_validator: XmlValidator,
        binding_validator: XmlValidator,
        config_validator: XmlValidator,
        logger: Optional[logging.Logger] = None,
    ):
        self.sink = sink
        self.logger = logger or logging.getLogger("eshinf")
        self._validators = {
            DirectoryCategory.Thing: thing_validator,
            DirectoryCategory.Binding: binding_validator,
            DirectoryCategory.Configuration: config_validator,
        }

    def begin_processing(self, charset: str) -> None:
        self.logger.debug(
            f"Executing the {self.__class__.__name__} (charset: {charset})"
        )

    def process_filtered(self, file: CandidateFile) -> ValidatorResult:
        """Entry point for files of any type; only .xml files are processed."""
        if file.extension != XML_EXTENSION:
            return Success(None)
        return self.process(file)

    def process(self, file: CandidateFile) -> ValidatorResult:
        """Check a single .xml file.

        Returns the validator's result for dispatched files. Failures are
        passed back as they are; deciding what to do with them is up to the
        caller. Empty, out-of-scope and unrecognized files yield
        ``Success(None)``.
        """
        if file.is_empty:
            self.sink.report(
                0, MESSAGE_EMPTY_FILE.format(name=file.name), str(file.path)
            )
            return Success(None)

        category = self.dispatch_category(file)
        # Files outside ESH-INF and other directories like i18n are skipped
        if category is DirectoryCategory.Unrecognized:
            return Success(None)

        return self._validators[category](file.text)

    def dispatch_category(self, file: CandidateFile) -> DirectoryCategory:
        """Category ``process`` would route a non-empty ``file`` to."""
        if file.grandparent_directory_name != ESH_INF_DIRECTORY:
            return DirectoryCategory.Unrecognized
        return classify_directory(file.parent_directory_name)
