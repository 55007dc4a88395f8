"""Version probe interface.

A ``VersionProbe`` asks a single project which Gradle version it uses. The
probe either returns a version string or raises ``ProbeError``; deciding
what to record on failure is the resolver's job, not the probe's.

Concrete probes:
    GradleToolingProbe      runs the project's Gradle (wrapper) and reads
                            the version it announces.
    WrapperPropertiesProbe  reads the version pinned in the wrapper's
                            ``distributionUrl`` without starting Gradle.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BuildEnvironment:
    """The build environment a Gradle installation reports for a project.

    Attributes:
        gradle_version: The Gradle version, e.g. ``"7.4.2"``.
        jvm_version: The JVM line Gradle reports, if any.
    """

    gradle_version: str
    jvm_version: str | None = None


class VersionProbe(ABC):
    """Abstract base class for Gradle version probes.

    Implementations must be safe to call from several threads at once,
    one project per call.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in log messages (e.g. 'tooling')."""

    @abstractmethod
    def probe(self, project_dir: Path) -> str:
        """Return the Gradle version used by ``project_dir``.

        Args:
            project_dir: A project root holding a wrapper properties file.

        Returns:
            The version string.

        Raises:
            ProbeError: If the version cannot be determined.
        """

    def cancel(self) -> None:
        """Abort in-flight probes and refuse new ones.

        The default implementation does nothing, which suits probes that
        hold no external resources.
        """
