"""Directory-tree scanner that finds Gradle project roots.

Walks each root depth-first, pre-order, visiting sibling directories in
name order. Before descending into a directory (each root included):

    1. If the directory is in the exclude set, prune its whole subtree.
    2. Otherwise, if it holds a project marker, record it.
    3. Descend into its subdirectories either way, so nested project
       roots (composite builds, included builds) are reported too.

Symlinked directories are entered only when ``follow_links`` is set; the
scanner then tracks the ``(st_dev, st_ino)`` of every directory entered so
that a link cycle, or two links to the same directory, cannot cause a
second visit.

Failure policy:
    A missing, non-directory or unlistable root raises ``ScanError``.
    A directory below a root that cannot be listed is logged and skipped.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from gradle_usage.discovery.detector import is_gradle_project
from gradle_usage.discovery.models import ScanStats
from gradle_usage.discovery.paths import PathMatcher, normalize_path, validate_excludes
from gradle_usage.exceptions import ScanError

logger = logging.getLogger(__name__)


class ProjectScanner:
    """Finds Gradle project roots under one or more directory trees.

    Usage::

        scanner = ProjectScanner()
        roots = scanner.scan(["~/src"], excludes=["~/src/archive"])
        print(f"{len(roots)} projects, {scanner.stats.unreadable} unreadable dirs")
    """

    def __init__(self) -> None:
        self.stats = ScanStats()

    def scan(
        self,
        roots: Iterable[str | os.PathLike[str]],
        excludes: Iterable[str | os.PathLike[str]] = (),
        follow_links: bool = False,
    ) -> list[Path]:
        """Scan the given roots and return project roots in discovery order.

        Args:
            roots: Directories to scan, in order. Duplicates are ignored.
            excludes: Directories whose subtrees are skipped entirely.
            follow_links: Descend into symlinked directories.

        Returns:
            Absolute project root paths, each reported once.

        Raises:
            ScanError: If a root does not exist, is not a directory, or
                cannot be listed.
        """
        self.stats = ScanStats()
        excludes = list(excludes)
        validate_excludes(excludes)
        matcher = PathMatcher(excludes, follow_links=follow_links)

        start_paths = self._unique_roots(roots)
        for root in start_paths:
            self._check_root(root)

        found: list[Path] = []
        seen: set[Path] = set()
        visited: set[tuple[int, int]] = set()
        for root in start_paths:
            for project in self._walk(root, matcher, follow_links, visited):
                if project not in seen:
                    seen.add(project)
                    found.append(project)
        return found

    @staticmethod
    def _unique_roots(roots: Iterable[str | os.PathLike[str]]) -> list[Path]:
        """Normalise the roots, keeping the first occurrence of each."""
        unique: list[Path] = []
        for root in roots:
            path = normalize_path(root)
            if path not in unique:
                unique.append(path)
        return unique

    @staticmethod
    def _check_root(root: Path) -> None:
        try:
            if not root.exists():
                raise ScanError(f"Root path does not exist: {root}")
            if not root.is_dir():
                raise ScanError(f"Root path is not a directory: {root}")
        except OSError as exc:
            raise ScanError(f"Cannot access root path {root}: {exc}") from exc

    def _walk(
        self,
        root: Path,
        matcher: PathMatcher,
        follow_links: bool,
        visited: set[tuple[int, int]],
    ) -> Iterator[Path]:
        """Yield project roots under ``root`` in depth-first pre-order."""
        stack: list[Path] = [root]
        while stack:
            directory = stack.pop()

            if matcher.is_excluded(directory):
                logger.debug("Excluded directory: %s", directory)
                self.stats.excluded += 1
                continue

            if follow_links:
                try:
                    stat = directory.stat()
                except OSError as exc:
                    self._skip_unreadable(root, directory, exc)
                    continue
                identity = (stat.st_dev, stat.st_ino)
                if identity in visited:
                    logger.debug("Already visited, skipping: %s", directory)
                    self.stats.cycles_skipped += 1
                    continue
                visited.add(identity)

            self.stats.directories_visited += 1
            if is_gradle_project(directory):
                yield directory

            try:
                children = self._subdirectories(directory, follow_links)
            except OSError as exc:
                self._skip_unreadable(root, directory, exc)
                continue
            stack.extend(reversed(children))

    def _skip_unreadable(self, root: Path, directory: Path, exc: OSError) -> None:
        if directory == root:
            raise ScanError(f"Cannot read root path {root}: {exc}") from exc
        logger.warning("Skipping unreadable directory %s: %s", directory, exc)
        self.stats.unreadable += 1

    def _subdirectories(self, directory: Path, follow_links: bool) -> list[Path]:
        """List the subdirectories of ``directory`` sorted by name."""
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        subdirs: list[Path] = []
        for entry in entries:
            try:
                if not entry.is_dir():
                    continue
                if entry.is_symlink() and not follow_links:
                    logger.debug("Not following symlink: %s", entry.path)
                    self.stats.links_skipped += 1
                    continue
            except OSError:
                continue
            subdirs.append(directory / entry.name)
        return subdirs
