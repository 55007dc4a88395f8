"""Data models for the discovery module.

Contains the record produced for each discovered project root and the
counters collected while walking the directory trees.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GradleProject:
    """A discovered Gradle project root and the Gradle version it uses.

    Attributes:
        path: Absolute path to the project root directory.
        version: Resolved version string, or one of the ``UNKNOWN`` /
            ``FAILED`` sentinels.
    """

    path: Path
    version: str


@dataclass
class ScanStats:
    """Counters collected by a ``ProjectScanner`` run.

    Attributes:
        directories_visited: Directories whose markers were checked.
        excluded: Directories pruned because they are in the exclude set.
        unreadable: Directories skipped because they could not be listed.
        links_skipped: Symlinked directories not followed.
        cycles_skipped: Directories reached a second time through a link.
    """

    directories_visited: int = 0
    excluded: int = 0
    unreadable: int = 0
    links_skipped: int = 0
    cycles_skipped: int = 0
