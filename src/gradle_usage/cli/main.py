"""gradle-usage CLI -- Inventory of Gradle versions across many projects.

Entry point for the ``gradle-usage`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    find    -- List Gradle project roots under the given directories.
    report  -- Resolve each project's Gradle version and write usage.txt.

Usage::

    gradle-usage find --dir ~/src
    gradle-usage report --dir ~/src --exclude-dir ~/src/archive
    gradle-usage report --dir ~/src --use-wrapper-version --format json
    gradle-usage -v report --config usage.yaml
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from gradle_usage import __version__
from gradle_usage.cli.find_cmd import find_command
from gradle_usage.cli.report_cmd import report_command


def _configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr so stdout carries only the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def cli(verbose: bool) -> None:
    """gradle-usage: Find Gradle projects and report the versions they use.

    Scans directory trees for Gradle project roots (settings.gradle,
    settings.gradle.kts or a wrapper properties file), resolves the Gradle
    version of each, and summarises how many projects use each version.
    """
    _configure_logging(verbose)


# Register all subcommands
cli.add_command(find_command)
cli.add_command(report_command)
