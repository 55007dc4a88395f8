"""Report rendering and output for Gradle usage inventories."""

from __future__ import annotations

from gradle_usage.report.builder import ReportBuilder
from gradle_usage.report.writer import REPORT_FILENAME, write_report

__all__ = [
    "REPORT_FILENAME",
    "ReportBuilder",
    "write_report",
]
