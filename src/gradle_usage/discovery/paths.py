"""Path normalisation and exclude-set membership.

Exclusion is an exact match on normalised paths, never a prefix or glob
match. A directory below an excluded directory is skipped only because the
scanner never descends into the excluded directory.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_path(path: str | os.PathLike[str], follow_links: bool = False) -> Path:
    """Return the canonical form of ``path``.

    A leading ``~`` is expanded. Relative paths are made absolute against
    the current directory and ``.``/``..`` segments are collapsed lexically,
    so symlinks are preserved. With ``follow_links`` the path is fully
    resolved instead.
    """
    expanded = os.path.expanduser(path)
    if follow_links:
        return Path(os.path.realpath(expanded))
    return Path(os.path.normpath(os.path.abspath(expanded)))


class PathMatcher:
    """Exclude-set membership test for directories met during a walk.

    The exclude paths are normalised once, on construction. When links are
    followed, both the lexical and the resolved form of each exclude are
    kept, and a candidate matches on either of its own two forms.

    Usage::

        matcher = PathMatcher(["build", "/src/vendor"])
        matcher.is_excluded(Path("/src/vendor"))  # True
    """

    def __init__(
        self,
        excludes: Iterable[str | os.PathLike[str]] = (),
        follow_links: bool = False,
    ) -> None:
        self._follow_links = follow_links
        self._excludes: set[Path] = set()
        for exclude in excludes:
            self._excludes.add(normalize_path(exclude))
            if follow_links:
                self._excludes.add(normalize_path(exclude, follow_links=True))

    @property
    def excludes(self) -> frozenset[Path]:
        """The normalised exclude set."""
        return frozenset(self._excludes)

    def __len__(self) -> int:
        return len(self._excludes)

    def is_excluded(self, candidate: str | os.PathLike[str]) -> bool:
        """Return True if ``candidate`` normalises to a member of the exclude set."""
        if not self._excludes:
            return False
        if normalize_path(candidate) in self._excludes:
            return True
        if self._follow_links:
            return normalize_path(candidate, follow_links=True) in self._excludes
        return False


def validate_excludes(excludes: Iterable[str | os.PathLike[str]]) -> list[Path]:
    """Warn about exclude paths that do not exist on disk.

    A missing exclude is not an error: it simply never matches.

    Args:
        excludes: Exclude paths as supplied by the caller.

    Returns:
        The exclude paths that do not exist.
    """
    missing: list[Path] = []
    for exclude in excludes:
        path = Path(os.path.expanduser(exclude))
        if not os.path.lexists(path):
            logger.warning("Invalid exclude path: %s", path)
            missing.append(path)
    return missing
