"""Rich output formatting helpers for the gradle-usage CLI.

Version Color Mapping:
    FAILED = bold red, UNKNOWN = yellow, resolved versions = cyan
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gradle_usage.discovery.models import GradleProject
from gradle_usage.report.builder import HEADER_TEMPLATE, ReportBuilder
from gradle_usage.versions.resolver import FAILED, UNKNOWN

_VERSION_STYLES: dict[str, str] = {
    FAILED: "bold red",
    UNKNOWN: "yellow",
}

console = Console()


def version_style(version: str) -> str:
    """Return the Rich style string for a version or sentinel."""
    return _VERSION_STYLES.get(version, "cyan")


def print_usage_report(projects: Sequence[GradleProject]) -> None:
    """Print the project table followed by the version summary.

    Args:
        projects: Resolved projects in discovery order.
    """
    if not projects:
        console.print("[dim]No Gradle projects found.[/dim]")
        return

    table = Table(
        title=HEADER_TEMPLATE.format(count=len(projects)),
        show_header=True, header_style="bold",
    )
    table.add_column("Version", justify="right")
    table.add_column("Project", overflow="fold")
    for project in projects:
        table.add_row(
            Text(project.version, style=version_style(project.version)),
            str(project.path),
        )
    console.print(table)
    print_summary(projects)


def print_summary(projects: Sequence[GradleProject]) -> None:
    """Print the per-version usage counts, most used first."""
    table = Table(title="Summary", show_header=True, header_style="bold")
    table.add_column("Version", justify="right")
    table.add_column("Projects", justify="right")
    for version, count in ReportBuilder.summary(projects):
        table.add_row(Text(version, style=version_style(version)), str(count))
    console.print(table)
