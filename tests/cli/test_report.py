"""Tests for rendering check results."""

from pathlib import Path

import pytest

from eshinf.cli.report import format_result, format_summary
from eshinf.diagnostics import Diagnostic
from eshinf.runner import CheckRunResult

pytestmark = pytest.mark.short


def _result(*diagnostics):
    return CheckRunResult(
        root=Path("src"), files_checked=3, files_dispatched=2, diagnostics=list(diagnostics)
    )


def test_summary_without_problems():
    assert format_summary(_result()) == "Checked 3 files (2 dispatched): no problems found."


def test_summary_lists_diagnostics():
    report = format_summary(
        _result(
            Diagnostic(0, "The file a.xml should not be empty.", "ESH-INF/thing/a.xml"),
            Diagnostic(0, "Failed to parse XML", "ESH-INF/config/b.xml", "content"),
        )
    )

    lines = report.splitlines()
    assert lines[0] == "ESH-INF/thing/a.xml:0: The file a.xml should not be empty."
    assert lines[1] == "ESH-INF/config/b.xml:0: Failed to parse XML"
    assert lines[-1].endswith("2 problems found.")


def test_unknown_format():
    with pytest.raises(ValueError, match="Unknown report format"):
        format_result(_result(), "xml")
