"""Rendering of check results for CLI output."""

import json

import yaml

from eshinf.runner import CheckRunResult

REPORT_FORMATS = ("summary", "json", "yaml")


def _as_dict(result: CheckRunResult) -> dict:
    return {
        "root": str(result.root),
        "files_checked": result.files_checked,
        "files_dispatched": result.files_dispatched,
        "ok": result.ok,
        "diagnostics": [d.to_dict() for d in result.diagnostics],
    }


def format_summary(result: CheckRunResult) -> str:
    """Human readable report, one line per diagnostic.

    Example output:
        ESH-INF/binding/empty.xml:0: The file empty.xml should not be empty.

        Checked 3 files (2 dispatched): 1 problem found.
    """
    lines = [f"{d.path}:{d.line}: {d.message}" for d in result.diagnostics]
    if lines:
        lines.append("")

    count = len(result.diagnostics)
    if count == 0:
        outcome = "no problems found"
    elif count == 1:
        outcome = "1 problem found"
    else:
        outcome = f"{count} problems found"
    lines.append(
        f"Checked {result.files_checked} files "
        f"({result.files_dispatched} dispatched): {outcome}."
    )
    return "\n".join(lines)


def format_result(result: CheckRunResult, format: str = "summary") -> str:
    if format == "json":
        return json.dumps(_as_dict(result), indent=2)
    if format == "yaml":
        return yaml.safe_dump(_as_dict(result), sort_keys=False)
    if format == "summary":
        return format_summary(result)
    raise ValueError(f"Unknown report format: '{format}'")
