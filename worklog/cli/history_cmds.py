"""CLI commands: history list, history import."""

from __future__ import annotations

import json
import sys

import click
from rich.table import Table

from worklog import config
from worklog.cli import _run_async, console
from worklog.exceptions import WorklogError
from worklog.models import HistoryEntry
from worklog.storage.history import SqliteHistoryStore


@click.group()
def history():
    """Inspect and import recorded history entries."""
    pass


@history.command("list")
@click.option("--limit", "-n", type=int, default=20, help="Number of entries")
@click.option("--db", default=None, help="History database path")
def history_list(limit, db):
    """Show stored history entries, newest first."""
    async def _history_list_async():
        async with SqliteHistoryStore(db or config.DB_PATH) as store:
            return await store.list_entries(limit=limit)

    try:
        rows = _run_async(_history_list_async())
    except WorklogError as e:
        console.print(f"[red]Error: {e}[/]")
        sys.exit(1)

    if not rows:
        console.print("[yellow]No history entries found.[/]")
        return
    table = Table(title="📜 WORKLOG History")
    table.add_column("ID", style="bold")
    table.add_column("Recorded")
    table.add_column("Range", style="cyan")
    table.add_column("Sources", style="magenta")
    for entry_id, recorded_at, start, end, srcs in rows:
        table.add_row(
            entry_id,
            recorded_at[:19].replace("T", " "),
            f"{start[:10]} → {end[:10]}",
            ", ".join(srcs),
        )
    console.print(table)


@history.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--db", default=None, help="History database path")
def history_import(path, db):
    """Import history entries from a JSON file (one entry or a list)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        docs = data if isinstance(data, list) else [data]
        entries = [HistoryEntry.from_dict(d) for d in docs]
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        console.print(f"[red]Invalid history file {path}: {e}[/]")
        sys.exit(1)

    async def _history_import_async():
        async with SqliteHistoryStore(db or config.DB_PATH) as store:
            for entry in entries:
                await store.save_entry(entry)

    try:
        _run_async(_history_import_async())
    except WorklogError as e:
        console.print(f"[red]Error: {e}[/]")
        sys.exit(1)

    items = sum(e.item_count() for e in entries)
    console.print(f"[green]✓[/] Imported [bold]{len(entries)}[/] entries ({items} items)")
