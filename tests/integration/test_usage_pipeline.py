"""End-to-end tests of discover -> resolve -> report -> write.

Versions are resolved with a fake probe so no Gradle process is started,
except in the wrapper-probe test, which reads real properties files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gradle_usage.config import UsageConfig
from gradle_usage.exceptions import ConfigError, ReportError, ScanError
from gradle_usage.pipeline import find_projects, make_probe, run_usage
from gradle_usage.report.writer import REPORT_FILENAME
from gradle_usage.versions.resolver import FAILED, UNKNOWN
from gradle_usage.versions.tooling import GradleToolingProbe
from gradle_usage.versions.wrapper import WrapperPropertiesProbe

from tests.discovery.helpers import create_wrapper_project
from tests.fakes import FakeProbe


def _config(tmp_path: Path, root: Path, **kwargs: object) -> UsageConfig:
    return UsageConfig(paths=[str(root)], output_dir=str(tmp_path / "out"), **kwargs)


class TestSampleTreeScenarios:
    """root/{a,b,c}: a has settings.gradle, b a 7.6 wrapper, c nothing."""

    def test_two_projects_found(self, tmp_path: Path, sample_tree: Path) -> None:
        result = run_usage(_config(tmp_path, sample_tree), probe=FakeProbe({"b": "7.6"}))
        assert [(p.path.name, p.version) for p in result.projects] == [
            ("a", UNKNOWN),
            ("b", "7.6"),
        ]
        assert result.lines[0] == "Found 2 Gradle projects"
        summary = result.lines[result.lines.index("Summary") + 1:]
        assert sorted(summary) == sorted([
            "      7.6 used by 1 projects",
            "  UNKNOWN used by 1 projects",
        ])

    def test_report_file_written(self, tmp_path: Path, sample_tree: Path) -> None:
        result = run_usage(_config(tmp_path, sample_tree), probe=FakeProbe({"b": "7.6"}))
        assert result.report_path == tmp_path / "out" / REPORT_FILENAME
        content = result.report_path.read_text(encoding="utf-8")
        assert content == "\n".join(result.lines) + "\n"

    def test_excluded_b(self, tmp_path: Path, sample_tree: Path) -> None:
        probe = FakeProbe({"b": "7.6"})
        config = _config(tmp_path, sample_tree, excludes=[str(sample_tree / "b")])
        result = run_usage(config, probe=probe)
        assert [(p.path.name, p.version) for p in result.projects] == [("a", UNKNOWN)]
        assert probe.calls == []
        assert result.lines[0] == "Found 1 Gradle projects"

    def test_probe_failure_recorded(self, tmp_path: Path, sample_tree: Path) -> None:
        probe = FakeProbe({"b": RuntimeError("connector exploded")})
        result = run_usage(_config(tmp_path, sample_tree), probe=probe)
        assert [(p.path.name, p.version) for p in result.projects] == [
            ("a", UNKNOWN),
            ("b", FAILED),
        ]

    def test_wrapper_probe_reads_version(self, tmp_path: Path, sample_tree: Path) -> None:
        config = _config(tmp_path, sample_tree, use_wrapper_version=True)
        result = run_usage(config)
        assert [p.version for p in result.projects] == [UNKNOWN, "7.6"]

    def test_write_disabled(self, tmp_path: Path, sample_tree: Path) -> None:
        result = run_usage(_config(tmp_path, sample_tree), probe=FakeProbe(), write=False)
        assert result.report_path is None
        assert not (tmp_path / "out").exists()

    def test_stats_exposed(self, tmp_path: Path, sample_tree: Path) -> None:
        config = _config(tmp_path, sample_tree, excludes=[str(sample_tree / "c")])
        result = run_usage(config, probe=FakeProbe())
        assert result.stats.excluded == 1


class TestManyProjects:
    """Ordering and summary across a larger fleet."""

    def test_summary_counts(self, tmp_path: Path) -> None:
        root = tmp_path / "fleet"
        for name, version in [("s1", "7.4"), ("s2", "7.4"), ("s3", "6.9"), ("s4", "8.0")]:
            create_wrapper_project(root / name, version=version)
        config = _config(tmp_path, root, use_wrapper_version=True, workers=3)
        result = run_usage(config)
        summary = result.lines[result.lines.index("Summary") + 1:]
        assert summary[0] == "  7.4 used by 2 projects"
        assert summary[1:] == ["  6.9 used by 1 projects", "  8.0 used by 1 projects"]
        assert [p.path.name for p in result.projects] == ["s1", "s2", "s3", "s4"]


class TestFailures:
    """Whole-pipeline failures escalate."""

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(ScanError):
            run_usage(_config(tmp_path, tmp_path / "missing"), probe=FakeProbe())

    def test_no_paths(self) -> None:
        with pytest.raises(ConfigError):
            find_projects(UsageConfig())

    def test_unwritable_output(self, tmp_path: Path, sample_tree: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        config = UsageConfig(paths=[str(sample_tree)], output_dir=str(blocker))
        with pytest.raises(ReportError):
            run_usage(config, probe=FakeProbe())


class TestMakeProbe:
    """Probe selection from configuration."""

    def test_tooling_by_default(self) -> None:
        probe = make_probe(UsageConfig(timeout=12.0))
        assert isinstance(probe, GradleToolingProbe)
        assert probe.timeout == 12.0

    def test_wrapper_when_requested(self) -> None:
        assert isinstance(make_probe(UsageConfig(use_wrapper_version=True)), WrapperPropertiesProbe)
