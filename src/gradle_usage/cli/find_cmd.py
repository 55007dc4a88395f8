"""``gradle-usage find`` -- List Gradle project roots.

Walks the given directories and prints every Gradle project root found,
one per line, in discovery order. No Gradle process is started.

Exit Codes:
    0 -- One or more project roots found.
    1 -- A root directory could not be scanned.
    2 -- No Gradle projects found.
"""

from __future__ import annotations

import sys

import click

from gradle_usage.cli.options import build_config, scan_options
from gradle_usage.exceptions import GradleUsageError
from gradle_usage.pipeline import find_projects


@click.command("find")
@scan_options
def find_command(
    paths: tuple[str, ...],
    excludes: tuple[str, ...],
    follow_links: bool | None,
    config_file: str | None,
) -> None:
    """List Gradle project roots under the given directories.

    Exit code 0 if projects were found, 2 if none were.
    """
    config = build_config(
        config_file, paths=paths, excludes=excludes, follow_links=follow_links,
    )
    try:
        roots = find_projects(config)
    except GradleUsageError as exc:
        raise click.ClickException(str(exc)) from exc

    for root in roots:
        click.echo(str(root))
    if not roots:
        click.echo("No Gradle projects found.", err=True)
        sys.exit(2)
