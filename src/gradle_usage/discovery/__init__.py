"""Discovery of Gradle project roots on disk.

Provides the directory-tree scanner, the project-root marker checks and
the exclude-path matching it relies on.

Public API::

    from gradle_usage.discovery import ProjectScanner

    scanner = ProjectScanner()
    for root in scanner.scan(["/srv/repos"], excludes=["/srv/repos/old"]):
        print(root)
"""

from __future__ import annotations

from gradle_usage.discovery.detector import (
    SETTINGS_GRADLE,
    SETTINGS_GRADLE_KTS,
    WRAPPER_PROPERTIES_FILE,
    has_wrapper,
    is_gradle_project,
)
from gradle_usage.discovery.models import GradleProject, ScanStats
from gradle_usage.discovery.paths import PathMatcher, normalize_path, validate_excludes
from gradle_usage.discovery.scanner import ProjectScanner

__all__ = [
    "GradleProject",
    "PathMatcher",
    "ProjectScanner",
    "SETTINGS_GRADLE",
    "SETTINGS_GRADLE_KTS",
    "ScanStats",
    "WRAPPER_PROPERTIES_FILE",
    "has_wrapper",
    "is_gradle_project",
    "normalize_path",
    "validate_excludes",
]
