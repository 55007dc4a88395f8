"""Options shared by the ``find`` and ``report`` commands.

Every option defaults to None so that values from a ``--config`` file are
only overridden when given on the command line.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from gradle_usage.config import UsageConfig, load_config
from gradle_usage.exceptions import GradleUsageError

_SCAN_OPTIONS = (
    click.option(
        "--dir", "paths",
        multiple=True,
        type=click.Path(file_okay=False),
        help="A directory to scan for Gradle projects (repeatable).",
    ),
    click.option(
        "--exclude-dir", "excludes",
        multiple=True,
        type=click.Path(file_okay=False),
        help="A directory to exclude from the scan (repeatable).",
    ),
    click.option(
        "--follow-links/--no-follow-links",
        default=None,
        help="Follow symbolic links to directories (default: no).",
    ),
    click.option(
        "--config", "config_file",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="YAML file with scan settings; command-line values win.",
    ),
)


def scan_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared scan options to a Click command."""
    for option in reversed(_SCAN_OPTIONS):
        func = option(func)
    return func


def build_config(config_file: str | None, **overrides: Any) -> UsageConfig:
    """Load the optional config file and apply command-line overrides.

    Raises:
        click.ClickException: If the config file is invalid or no root
            directory is given at all.
    """
    try:
        base = load_config(config_file) if config_file else UsageConfig()
        config = base.merged(**overrides)
        config.validate()
    except GradleUsageError as exc:
        raise click.ClickException(str(exc)) from exc
    if not config.paths:
        raise click.UsageError("No directory to scan; pass --dir or set 'paths' in --config.")
    return config
