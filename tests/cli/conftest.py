"""Shared fixtures for CLI tests.

Provides a Click runner and temporary Gradle project trees. Versions are
read from wrapper properties (``--use-wrapper-version``) or from a fake
probe, so no CLI test starts a Gradle process.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.discovery.helpers import create_settings_project, create_wrapper_project


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def fleet_dir(tmp_path: Path) -> Path:
    """Create a directory with four projects on three Gradle versions."""
    fleet = tmp_path / "fleet"
    create_wrapper_project(fleet / "service-a", version="7.4.2")
    create_wrapper_project(fleet / "service-b", version="7.4.2")
    create_wrapper_project(fleet / "library-c", version="8.0")
    create_settings_project(fleet / "legacy-d")
    return fleet


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Report output directory (not created in advance)."""
    return tmp_path / "reports"
