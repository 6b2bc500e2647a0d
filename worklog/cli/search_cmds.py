"""CLI commands: search, sources."""

from __future__ import annotations

import sys

import click
from rich.table import Table

from worklog import config
from worklog.cli import _run_async, cli, console
from worklog.exceptions import InvalidDateError, WorklogError
from worklog.models import SOURCE_INFO, SourceType
from worklog.search import OutputFormat, SearchOptions, format_results, search as run_search
from worklog.storage.history import SqliteHistoryStore
from worklog.temporal import parse_date_bound, resolve_timezone


def _date_option(value, tz, end_of_day, hint):
    if value is None:
        return None
    try:
        return parse_date_bound(value, tz, end_of_day=end_of_day)
    except InvalidDateError as e:
        raise click.BadParameter(str(e), param_hint=hint) from e


@cli.command()
@click.argument("query")
@click.option("--regex", is_flag=True, help="Treat QUERY as a case-insensitive regular expression")
@click.option("--fuzzy", is_flag=True, help="Allow approximate (edit-distance) word matches")
@click.option(
    "--source", "-s", "sources", multiple=True,
    type=click.Choice([s.value for s in SourceType], case_sensitive=False),
    help="Only items from this source (repeatable)",
)
@click.option("--project", "-p", "projects", multiple=True, help="Project name substring (repeatable)")
@click.option("--since", default=None, help="Start date, inclusive (YYYY-MM-DD or ISO 8601)")
@click.option("--until", default=None, help="End date, inclusive (YYYY-MM-DD or ISO 8601)")
@click.option("--limit", "-n", type=int, default=None, help="Max results")
@click.option(
    "--format", "-f", "output_format", default=None,
    type=click.Choice([f.value for f in OutputFormat]),
    help="Output format (default: timeline)",
)
@click.option("--tz", default=None, help="IANA time zone for dates (default: local)")
@click.option("--db", default=None, help="History database path")
def search(query, regex, fuzzy, sources, projects, since, until, limit, output_format, tz, db) -> None:
    """Search recorded work history."""
    if not query.strip():
        raise click.BadParameter("query must not be empty", param_hint="QUERY")

    mode = output_format or config.DEFAULT_FORMAT
    if mode not in {f.value for f in OutputFormat}:
        raise click.BadParameter(
            f"unknown output format {mode!r} (from WORKLOG_FORMAT)", param_hint="--format"
        )

    zone_name = tz if tz is not None else config.TIMEZONE
    try:
        zone = resolve_timezone(zone_name)
    except InvalidDateError as e:
        raise click.BadParameter(str(e), param_hint="--tz") from e

    options = SearchOptions(
        query=query,
        regex=regex,
        fuzzy=fuzzy,
        sources=list(sources),
        projects=list(projects),
        start_date=_date_option(since, zone, False, "--since"),
        end_date=_date_option(until, zone, True, "--until"),
        limit=limit,
    )

    async def _search_async():
        async with SqliteHistoryStore(db or config.DB_PATH) as store:
            return await run_search(options, store)

    try:
        results = _run_async(_search_async())
    except WorklogError as e:
        console.print(f"[red]Error: {e}[/]")
        sys.exit(1)

    click.echo(format_results(results, mode, time_zone=zone_name or None))


@cli.command()
def sources() -> None:
    """List known work-item sources."""
    table = Table(title="📚 WORKLOG Sources")
    table.add_column("Tag", style="bold cyan")
    table.add_column("", width=3)
    table.add_column("Name")
    for source, info in SOURCE_INFO.items():
        table.add_row(source.value, info.emoji, info.name)
    console.print(table)
