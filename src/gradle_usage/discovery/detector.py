"""Marker files that identify a Gradle project root.

A directory is a project root when, directly inside it, any of these
exists:

- ``settings.gradle`` (Groovy DSL settings)
- ``settings.gradle.kts`` (Kotlin DSL settings)
- ``gradle/wrapper/gradle-wrapper.properties`` (wrapper-only setups,
  e.g. a single-module project without a settings file)

Detection is a pure existence check. Nothing is parsed here.
"""

from __future__ import annotations

from pathlib import Path, PurePath

SETTINGS_GRADLE = "settings.gradle"
SETTINGS_GRADLE_KTS = "settings.gradle.kts"
WRAPPER_PROPERTIES_FILE = PurePath("gradle", "wrapper", "gradle-wrapper.properties")

PROJECT_MARKERS: tuple[PurePath, ...] = (
    PurePath(SETTINGS_GRADLE),
    PurePath(SETTINGS_GRADLE_KTS),
    WRAPPER_PROPERTIES_FILE,
)


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def is_gradle_project(directory: Path) -> bool:
    """Return True if ``directory`` directly contains a Gradle project marker."""
    return any(_exists(directory / marker) for marker in PROJECT_MARKERS)


def has_wrapper(directory: Path) -> bool:
    """Return True if ``directory`` holds a wrapper properties file."""
    return _exists(directory / WRAPPER_PROPERTIES_FILE)


def wrapper_properties_path(directory: Path) -> Path:
    """Location of the wrapper properties file for a project root."""
    return directory / WRAPPER_PROPERTIES_FILE
