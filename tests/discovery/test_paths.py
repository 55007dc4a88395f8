"""Tests for path normalisation and exclude-set matching."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from gradle_usage.discovery.paths import PathMatcher, normalize_path, validate_excludes


class TestNormalizePath:
    """Lexical normalisation without link resolution."""

    def test_relative_path_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert normalize_path("sub") == Path.cwd() / "sub"

    def test_dot_segments_collapsed(self, tmp_path: Path) -> None:
        assert normalize_path(f"{tmp_path}/a/./b/../c") == tmp_path / "a" / "c"

    def test_trailing_separator_removed(self, tmp_path: Path) -> None:
        assert normalize_path(f"{tmp_path}/a{os.sep}") == tmp_path / "a"

    @pytest.mark.skipif(os.name == "nt", reason="HOME is not consulted on Windows")
    def test_home_expanded(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        assert normalize_path("~/src") == tmp_path / "src"

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlink_preserved_by_default(self, tmp_path: Path) -> None:
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)
        assert normalize_path(link) == link

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlink_resolved_when_following(self, tmp_path: Path) -> None:
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)
        assert normalize_path(link, follow_links=True) == target.resolve()


class TestPathMatcher:
    """Exact-match membership after normalisation."""

    def test_empty_matcher_excludes_nothing(self, tmp_path: Path) -> None:
        matcher = PathMatcher()
        assert not matcher.is_excluded(tmp_path)
        assert len(matcher) == 0

    def test_exact_match(self, tmp_path: Path) -> None:
        matcher = PathMatcher([tmp_path / "vendor"])
        assert matcher.is_excluded(tmp_path / "vendor")

    def test_match_after_normalisation(self, tmp_path: Path) -> None:
        matcher = PathMatcher([f"{tmp_path}/x/../vendor/"])
        assert matcher.is_excluded(f"{tmp_path}/./vendor")

    def test_no_prefix_matching(self, tmp_path: Path) -> None:
        """A child of an excluded path is not itself a member."""
        matcher = PathMatcher([tmp_path / "vendor"])
        assert not matcher.is_excluded(tmp_path / "vendor" / "lib")
        assert not matcher.is_excluded(tmp_path / "vendor-extra")

    def test_parent_not_excluded(self, tmp_path: Path) -> None:
        matcher = PathMatcher([tmp_path / "vendor"])
        assert not matcher.is_excluded(tmp_path)

    def test_relative_exclude(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        matcher = PathMatcher(["build"])
        assert matcher.is_excluded(Path.cwd() / "build")

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_link_path_matches_resolved_exclude_when_following(self, tmp_path: Path) -> None:
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)
        assert PathMatcher([target], follow_links=True).is_excluded(link)
        assert not PathMatcher([target]).is_excluded(link)


class TestValidateExcludes:
    """Missing exclude paths produce warnings, never errors."""

    def test_existing_excludes_pass(self, tmp_path: Path) -> None:
        (tmp_path / "old").mkdir()
        assert validate_excludes([tmp_path / "old"]) == []

    def test_missing_exclude_warns(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        missing = tmp_path / "nope"
        with caplog.at_level(logging.WARNING, logger="gradle_usage.discovery.paths"):
            result = validate_excludes([str(missing)])
        assert result == [missing]
        assert f"Invalid exclude path: {missing}" in caplog.text
