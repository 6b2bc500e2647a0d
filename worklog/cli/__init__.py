"""
WORKLOG CLI — Package init.

Re-exports the main CLI group and shared utilities.
"""

from __future__ import annotations

import asyncio
import logging

import click
from rich.console import Console

from worklog import __version__, config

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_async(coro):
    """Helper to run async coroutines from sync CLI."""
    return asyncio.run(coro)


# ─── Main Group ──────────────────────────────────────────────────

@click.group()
@click.version_option(__version__, prog_name="worklog")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """WORKLOG — search your local work-activity history."""
    setup_logging(verbose)


# ─── Register all sub-modules ───────────────────────────────────
from worklog.cli import search_cmds  # noqa: E402, F401
from worklog.cli import history_cmds  # noqa: E402, F401

# ─── Registration ────────────────────────────────────────────────
from worklog.cli.history_cmds import history  # noqa: E402

cli.add_command(history)


if __name__ == "__main__":
    cli()
