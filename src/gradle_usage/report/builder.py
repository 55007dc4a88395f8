"""Text rendering of the Gradle usage report.

Report layout::

    Found 3 Gradle projects
        7.4.2  /srv/repos/service-a
      UNKNOWN  /srv/repos/library-b
        7.4.2  /srv/repos/service-c
    Summary
        7.4.2 used by 2 projects
      UNKNOWN used by 1 projects

The version column is right-aligned to the longest version string across
all projects, and the same width is used for the summary. Projects keep
their discovery order. Summary lines are sorted by descending count, with
ties broken by the version string so the report is reproducible.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any

from gradle_usage.discovery.models import GradleProject

HEADER_TEMPLATE = "Found {count} Gradle projects"
SUMMARY_HEADER = "Summary"


class ReportBuilder:
    """Aggregates ``GradleProject`` records into report lines.

    Usage::

        lines = ReportBuilder().build(projects)
        print("\\n".join(lines))
    """

    @staticmethod
    def column_width(projects: Sequence[GradleProject]) -> int:
        """Width of the version column: the longest version string."""
        return max((len(project.version) for project in projects), default=0)

    @staticmethod
    def summary(projects: Sequence[GradleProject]) -> list[tuple[str, int]]:
        """Count projects per version.

        Returns:
            ``(version, count)`` pairs, most used first, ties in version order.
        """
        counts = Counter(project.version for project in projects)
        return sorted(counts.items(), key=lambda item: (-item[1], item[0]))

    def build(self, projects: Sequence[GradleProject]) -> list[str]:
        """Render the full report as a list of lines (no line terminators)."""
        width = self.column_width(projects)
        lines = [HEADER_TEMPLATE.format(count=len(projects))]
        for project in projects:
            lines.append(f"  {project.version:>{width}}  {project.path}")
        lines.append(SUMMARY_HEADER)
        for version, count in self.summary(projects):
            lines.append(f"  {version:>{width}} used by {count} projects")
        return lines

    def to_dict(self, projects: Sequence[GradleProject]) -> dict[str, Any]:
        """JSON-serialisable form of the report, in the same order as ``build``."""
        return {
            "total": len(projects),
            "projects": [
                {"path": str(project.path), "version": project.version}
                for project in projects
            ],
            "summary": [
                {"version": version, "count": count}
                for version, count in self.summary(projects)
            ],
        }
