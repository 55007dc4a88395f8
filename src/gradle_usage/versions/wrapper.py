"""Gradle version probe that reads the wrapper properties file.

The wrapper pins a distribution through its ``distributionUrl`` property::

    distributionUrl=https\\://services.gradle.org/distributions/gradle-7.4.2-bin.zip

The version is taken from the distribution file name, so no Gradle process
is started. This is much faster than the tooling probe but reports the
pinned version, not the version Gradle itself announces.
"""

from __future__ import annotations

import re
from pathlib import Path

from gradle_usage.discovery.detector import wrapper_properties_path
from gradle_usage.exceptions import ProbeError
from gradle_usage.versions.probe import VersionProbe

DISTRIBUTION_URL_KEY = "distributionUrl"

_DISTRIBUTION_RE = re.compile(r"gradle-([^/]+?)-(?:bin|all)\.zip$")
_PROPERTY_RE = re.compile(r"^((?:\\.|[^=:\s\\])+)\s*[=:\s]?\s*(.*)$")
_ESCAPE_RE = re.compile(r"\\(.)")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _unescape(text: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), text)


def _add_property(properties: dict[str, str], line: str) -> None:
    match = _PROPERTY_RE.match(line)
    if match:
        properties[_unescape(match.group(1))] = _unescape(match.group(2))


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java ``.properties`` content into a dictionary.

    Handles ``#``/``!`` comments, ``=``, ``:`` or whitespace separators,
    backslash escapes and backslash line continuations.
    """
    properties: dict[str, str] = {}
    logical = ""
    for raw in text.splitlines():
        line = raw.lstrip()
        if not logical and (not line or line[0] in "#!"):
            continue
        # An odd number of trailing backslashes continues the line.
        if (len(line) - len(line.rstrip("\\"))) % 2 == 1:
            logical += line[:-1]
            continue
        _add_property(properties, logical + line)
        logical = ""
    if logical:
        _add_property(properties, logical)
    return properties


def parse_distribution_version(url: str) -> str | None:
    """Extract the Gradle version from a wrapper distribution URL.

    Returns:
        The version, or None if the URL does not name a Gradle distribution.
    """
    match = _DISTRIBUTION_RE.search(url.strip())
    return match.group(1) if match else None


class WrapperPropertiesProbe(VersionProbe):
    """Resolve versions from ``gradle/wrapper/gradle-wrapper.properties``."""

    @property
    def name(self) -> str:
        return "wrapper"

    def probe(self, project_dir: Path) -> str:
        path = wrapper_properties_path(project_dir)
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ProbeError(f"Cannot read {path}: {exc}") from exc

        url = parse_properties(text).get(DISTRIBUTION_URL_KEY)
        if not url:
            raise ProbeError(f"No {DISTRIBUTION_URL_KEY} in {path}")
        version = parse_distribution_version(url)
        if version is None:
            raise ProbeError(f"Unrecognised distribution URL in {path}: {url}")
        return version
