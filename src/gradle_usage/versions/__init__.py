"""Gradle version resolution for discovered project roots.

Public API::

    from gradle_usage.versions import GradleToolingProbe, VersionResolver

    resolver = VersionResolver(GradleToolingProbe(timeout=60), workers=4)
    projects = resolver.resolve_all(project_roots)
"""

from __future__ import annotations

from gradle_usage.versions.probe import BuildEnvironment, VersionProbe
from gradle_usage.versions.resolver import FAILED, UNKNOWN, VersionResolver
from gradle_usage.versions.tooling import (
    GradleConnection,
    GradleToolingProbe,
    parse_version_output,
)
from gradle_usage.versions.wrapper import (
    WrapperPropertiesProbe,
    parse_distribution_version,
    parse_properties,
)

__all__ = [
    "BuildEnvironment",
    "FAILED",
    "GradleConnection",
    "GradleToolingProbe",
    "UNKNOWN",
    "VersionProbe",
    "VersionResolver",
    "WrapperPropertiesProbe",
    "parse_distribution_version",
    "parse_properties",
    "parse_version_output",
]
