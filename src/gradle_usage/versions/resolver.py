"""Resolve the Gradle version used by each discovered project root.

Policy for one project root:
    - No ``gradle/wrapper/gradle-wrapper.properties``: ``UNKNOWN``. The
      project is not wrapper-managed and no probe is attempted.
    - Otherwise ask the configured ``VersionProbe``. Any probe failure
      becomes ``FAILED``; it never aborts the batch.

``resolve_all`` runs the probes on a bounded thread pool and returns the
records in the order the roots were given, whatever order the probes
finish in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from gradle_usage.discovery.detector import has_wrapper
from gradle_usage.discovery.models import GradleProject
from gradle_usage.exceptions import ProbeError
from gradle_usage.versions.probe import VersionProbe

logger = logging.getLogger(__name__)

UNKNOWN = "UNKNOWN"
FAILED = "FAILED"

DEFAULT_WORKERS: int = 4


class VersionResolver:
    """Turns project roots into ``GradleProject`` records.

    Args:
        probe: The probe used for wrapper-managed projects.
        workers: Maximum number of probes running at once.
    """

    def __init__(self, probe: VersionProbe, workers: int = DEFAULT_WORKERS) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.probe = probe
        self.workers = workers

    def resolve(self, project_root: Path) -> str:
        """Return the version string for a single project root."""
        if not has_wrapper(project_root):
            return UNKNOWN
        try:
            return self.probe.probe(project_root)
        except ProbeError as exc:
            logger.warning("Version probe failed for %s: %s", project_root, exc)
        except Exception:
            logger.warning(
                "Unexpected %s probe error for %s", self.probe.name, project_root,
                exc_info=True,
            )
        return FAILED

    def resolve_project(self, project_root: Path) -> GradleProject:
        return GradleProject(path=project_root, version=self.resolve(project_root))

    def resolve_all(self, project_roots: Sequence[Path]) -> list[GradleProject]:
        """Resolve every root, preserving the input order.

        On interruption the pending probes are cancelled and the probe is
        told to close its in-flight connections before the exception
        propagates.
        """
        if not project_roots:
            return []
        if self.workers == 1 or len(project_roots) == 1:
            return self._resolve_serially(project_roots)

        executor = ThreadPoolExecutor(
            max_workers=min(self.workers, len(project_roots)),
            thread_name_prefix="gradle-usage-probe",
        )
        futures: list[Future[GradleProject]] = []
        try:
            for root in project_roots:
                futures.append(executor.submit(self.resolve_project, root))
            return [future.result() for future in futures]
        except BaseException:
            for future in futures:
                future.cancel()
            self.probe.cancel()
            raise
        finally:
            executor.shutdown(wait=True)

    def _resolve_serially(self, project_roots: Sequence[Path]) -> list[GradleProject]:
        projects: list[GradleProject] = []
        try:
            for root in project_roots:
                projects.append(self.resolve_project(root))
        except BaseException:
            self.probe.cancel()
            raise
        return projects
