"""Writes the usage report to disk."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from gradle_usage.exceptions import ReportError

REPORT_FILENAME = "usage.txt"


def write_report(
    lines: Iterable[str],
    output_dir: str | os.PathLike[str],
    filename: str = REPORT_FILENAME,
) -> Path:
    """Write report lines to ``output_dir/filename``.

    Creates the output directory if needed and overwrites any previous
    report. Each line is newline-terminated; the file is UTF-8.

    Args:
        lines: Report lines without terminators.
        output_dir: Directory to write the report into.
        filename: Report file name.

    Returns:
        Path of the written report.

    Raises:
        ReportError: If the directory or file cannot be written.
    """
    path = Path(output_dir) / filename
    content = "".join(f"{line}\n" for line in lines)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Error creating report {path}: {exc}") from exc
    return path
