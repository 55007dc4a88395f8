"""Shared test helpers for creating fake Gradle project trees.

Each helper creates a minimal directory structure that looks like a
Gradle project to the scanner. These are used by the discovery, version,
pipeline and CLI tests.
"""

from __future__ import annotations

from pathlib import Path

WRAPPER_TEMPLATE = (
    "distributionBase=GRADLE_USER_HOME\n"
    "distributionPath=wrapper/dists\n"
    "distributionUrl=https\\://services.gradle.org/distributions/gradle-{version}-bin.zip\n"
    "zipStoreBase=GRADLE_USER_HOME\n"
    "zipStorePath=wrapper/dists\n"
)


def create_settings_project(directory: Path, kotlin: bool = False) -> Path:
    """Create a project root marked by a settings file."""
    directory.mkdir(parents=True, exist_ok=True)
    name = "settings.gradle.kts" if kotlin else "settings.gradle"
    (directory / name).write_text('rootProject.name = "demo"\n')
    return directory


def create_wrapper_project(directory: Path, version: str = "7.6") -> Path:
    """Create a wrapper-only project root pinned to ``version``."""
    wrapper_dir = directory / "gradle" / "wrapper"
    wrapper_dir.mkdir(parents=True, exist_ok=True)
    (wrapper_dir / "gradle-wrapper.properties").write_text(
        WRAPPER_TEMPLATE.format(version=version)
    )
    return directory


def create_plain_dir(directory: Path) -> Path:
    """Create a directory that is not a Gradle project."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "README.md").write_text("# Not a Gradle project\n")
    return directory


def create_sample_tree(root: Path) -> Path:
    """Create ``root/{a,b,c}``: settings project, wrapper project, plain dir."""
    create_settings_project(root / "a")
    create_wrapper_project(root / "b", version="7.6")
    create_plain_dir(root / "c")
    return root
