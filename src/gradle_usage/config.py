"""Scan configuration.

``UsageConfig`` holds everything a usage scan needs: the roots to scan, the
directories to exclude, the link-following flag, where to write the report
and how to resolve versions. It can be loaded from a YAML file::

    paths:
      - ~/src
      - /srv/repos
    excludes:
      - ~/src/archive
    follow_links: false
    output_dir: build/reports/usage
    use_wrapper_version: false
    workers: 4
    timeout: 120

Command-line options are layered on top with ``UsageConfig.merged``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from gradle_usage.exceptions import ConfigError
from gradle_usage.versions.resolver import DEFAULT_WORKERS
from gradle_usage.versions.tooling import DEFAULT_TIMEOUT

DEFAULT_OUTPUT_DIR = os.path.join("build", "reports", "usage")


@dataclass
class UsageConfig:
    """Inputs for one usage scan.

    Attributes:
        paths: Root directories to scan, in order.
        excludes: Directories whose subtrees are skipped.
        follow_links: Descend into symlinked directories.
        output_dir: Directory the ``usage.txt`` report is written to.
        use_wrapper_version: Read versions from the wrapper properties
            instead of asking Gradle.
        workers: Maximum concurrent version probes.
        timeout: Seconds allowed per version probe.
    """

    paths: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)
    follow_links: bool = False
    output_dir: str = DEFAULT_OUTPUT_DIR
    use_wrapper_version: bool = False
    workers: int = DEFAULT_WORKERS
    timeout: float = DEFAULT_TIMEOUT

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ConfigError: If ``workers`` or ``timeout`` is out of range.
        """
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

    def merged(
        self,
        *,
        paths: tuple[str, ...] | list[str] = (),
        excludes: tuple[str, ...] | list[str] = (),
        follow_links: bool | None = None,
        output_dir: str | None = None,
        use_wrapper_version: bool | None = None,
        workers: int | None = None,
        timeout: float | None = None,
    ) -> UsageConfig:
        """Return a copy with command-line values applied.

        Paths and excludes are appended; scalar values replace the
        configured ones when not None.
        """
        overrides: dict[str, Any] = {
            "paths": [*self.paths, *paths],
            "excludes": [*self.excludes, *excludes],
        }
        scalars = {
            "follow_links": follow_links,
            "output_dir": output_dir,
            "use_wrapper_version": use_wrapper_version,
            "workers": workers,
            "timeout": timeout,
        }
        overrides.update({k: v for k, v in scalars.items() if v is not None})
        return replace(self, **overrides)


def _as_str_list(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"'{key}' must be a string or a list of strings")


def _coerce(key: str, value: Any) -> Any:
    if key in ("paths", "excludes"):
        return _as_str_list(key, value)
    if key in ("follow_links", "use_wrapper_version"):
        if not isinstance(value, bool):
            raise ConfigError(f"'{key}' must be true or false")
        return value
    if key == "workers":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"'{key}' must be an integer")
        return value
    if key == "timeout":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"'{key}' must be a number")
        return float(value)
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string")
    return value


def config_from_dict(data: dict[str, Any]) -> UsageConfig:
    """Build a validated ``UsageConfig`` from a mapping.

    Raises:
        ConfigError: On unknown keys or wrongly typed values.
    """
    known = {f.name for f in fields(UsageConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")
    values = {key: _coerce(key, value) for key, value in data.items() if value is not None}
    config = UsageConfig(**values)
    config.validate()
    return config


def load_config(path: str | os.PathLike[str]) -> UsageConfig:
    """Load a ``UsageConfig`` from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or
            does not hold a mapping of known keys.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        return UsageConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return config_from_dict(data)
