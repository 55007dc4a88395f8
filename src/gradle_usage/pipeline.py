"""End-to-end usage scan: discover, resolve, report.

Pipeline:
    1. ``ProjectScanner`` walks the configured roots and returns project
       roots in discovery order.
    2. ``VersionResolver`` resolves each root's Gradle version on a bounded
       worker pool, keeping discovery order.
    3. ``ReportBuilder`` renders the report lines.
    4. ``write_report`` stores them as ``usage.txt`` in the output dir.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from gradle_usage.config import UsageConfig
from gradle_usage.discovery.models import GradleProject, ScanStats
from gradle_usage.discovery.scanner import ProjectScanner
from gradle_usage.exceptions import ConfigError
from gradle_usage.report.builder import ReportBuilder
from gradle_usage.report.writer import write_report
from gradle_usage.versions.probe import VersionProbe
from gradle_usage.versions.resolver import VersionResolver
from gradle_usage.versions.tooling import GradleToolingProbe
from gradle_usage.versions.wrapper import WrapperPropertiesProbe

logger = logging.getLogger(__name__)


@dataclass
class UsageResult:
    """Outcome of a usage scan.

    Attributes:
        projects: One record per discovered project root, in discovery order.
        lines: The rendered report lines.
        report_path: Where the report was written, or None if not written.
        stats: Traversal counters from the scanner.
    """

    projects: list[GradleProject]
    lines: list[str]
    report_path: Path | None = None
    stats: ScanStats = field(default_factory=ScanStats)


def make_probe(config: UsageConfig) -> VersionProbe:
    """Build the version probe selected by the configuration."""
    if config.use_wrapper_version:
        return WrapperPropertiesProbe()
    return GradleToolingProbe(timeout=config.timeout)


def find_projects(
    config: UsageConfig,
    scanner: ProjectScanner | None = None,
) -> list[Path]:
    """Discover the project roots under the configured paths.

    Raises:
        ConfigError: If no root path is configured.
        ScanError: If a root cannot be scanned.
    """
    if not config.paths:
        raise ConfigError("No paths to scan; give at least one directory")
    scanner = scanner or ProjectScanner()
    return scanner.scan(config.paths, config.excludes, config.follow_links)


def run_usage(
    config: UsageConfig,
    probe: VersionProbe | None = None,
    write: bool = True,
) -> UsageResult:
    """Run the full scan and, unless ``write`` is False, write the report.

    Args:
        config: Scan configuration.
        probe: Version probe override; defaults to ``make_probe(config)``.
        write: Write ``usage.txt`` into ``config.output_dir``.

    Raises:
        ConfigError: If the configuration is invalid.
        ScanError: If a root cannot be scanned.
        ReportError: If the report cannot be written.
    """
    config.validate()
    scanner = ProjectScanner()
    roots = find_projects(config, scanner)
    logger.info("Found %d Gradle project root(s)", len(roots))

    resolver = VersionResolver(probe or make_probe(config), workers=config.workers)
    projects = resolver.resolve_all(roots)
    lines = ReportBuilder().build(projects)

    report_path = write_report(lines, config.output_dir) if write else None
    return UsageResult(
        projects=projects, lines=lines,
        report_path=report_path, stats=scanner.stats,
    )
