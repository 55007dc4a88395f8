"""``gradle-usage report`` -- Report the Gradle version of every project.

Discovers Gradle project roots, resolves the version each one uses, writes
``usage.txt`` to the output directory and prints the report.

Output formats:
    text  -- project and summary tables (default).
    plain -- the exact lines written to usage.txt.
    json  -- projects and summary as a JSON document.

Exit Codes:
    0 -- Report written with one or more projects.
    1 -- A root could not be scanned or the report could not be written.
    2 -- No Gradle projects found (an empty report is still written).
"""

from __future__ import annotations

import json
import sys

import click

from gradle_usage.cli.options import build_config, scan_options
from gradle_usage.exceptions import GradleUsageError
from gradle_usage.pipeline import run_usage
from gradle_usage.report.builder import ReportBuilder


@click.command("report")
@scan_options
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for usage.txt (default: build/reports/usage).",
)
@click.option(
    "--use-wrapper-version/--use-gradle",
    default=None,
    help="Read versions from gradle-wrapper.properties instead of running Gradle.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum concurrent version probes (default: 4).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds allowed per version probe (default: 120).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "plain", "json"]),
    default="text",
    help="Output format: text (default), plain, or json.",
)
def report_command(
    paths: tuple[str, ...],
    excludes: tuple[str, ...],
    follow_links: bool | None,
    config_file: str | None,
    output_dir: str | None,
    use_wrapper_version: bool | None,
    workers: int | None,
    timeout: float | None,
    output_format: str,
) -> None:
    """Scan directories and report the Gradle version used by each project.

    Writes usage.txt to the output directory. Exit code 0 on success,
    2 if no Gradle projects were found.
    """
    config = build_config(
        config_file,
        paths=paths,
        excludes=excludes,
        follow_links=follow_links,
        output_dir=output_dir,
        use_wrapper_version=use_wrapper_version,
        workers=workers,
        timeout=timeout,
    )
    try:
        result = run_usage(config)
    except GradleUsageError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(json.dumps(ReportBuilder().to_dict(result.projects), indent=2))
    elif output_format == "plain":
        for line in result.lines:
            click.echo(line)
    else:
        from gradle_usage.cli.output import print_usage_report
        print_usage_report(result.projects)

    if output_format != "json":
        click.echo(f"\nReport written to: {result.report_path}")
    sys.exit(0 if result.projects else 2)
