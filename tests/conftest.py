"""Shared fixtures for gradle-usage tests."""

import pathlib

import pytest

from tests.discovery.helpers import create_sample_tree


@pytest.fixture
def sample_tree(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create ``root/{a,b,c}`` where a and b are Gradle projects."""
    return create_sample_tree(tmp_path / "root")


@pytest.fixture
def empty_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty directory with no Gradle projects."""
    empty = tmp_path / "empty"
    empty.mkdir()
    return empty
