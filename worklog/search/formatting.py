# This file is part of WORKLOG.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Render ranked results as timeline text, project groups or JSON."""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from worklog.search.models import SearchResult
from worklog.temporal import localize, resolve_timezone

NO_RESULTS = "No results found."
DESCRIPTION_PREVIEW_CHARS = 100
UNKNOWN_PROJECT = "Unknown"


class OutputFormat(str, Enum):
    TIMELINE = "timeline"
    GROUPED = "grouped"
    JSON = "json"

    def __str__(self) -> str:
        return self.value


def _format_json(results: list[SearchResult]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)


def _format_grouped(results: list[SearchResult], tz) -> str:
    by_project: dict[str, list[SearchResult]] = {}
    for r in results:
        by_project.setdefault(r.item.project or UNKNOWN_PROJECT, []).append(r)

    lines: list[str] = []
    for project, project_results in by_project.items():
        lines.append(f"\n## {project}")
        for r in project_results:
            date = localize(r.item.timestamp, tz).strftime("%m/%d/%Y")
            lines.append(f"  [{date}] ({r.item.source}) {r.item.title}")
    return "\n".join(lines)


def _format_timeline(results: list[SearchResult], tz) -> str:
    count = len(results)
    lines = [f"Found {count} result{'' if count == 1 else 's'}:", ""]

    for r in results:
        local = localize(r.item.timestamp, tz)
        header = [local.strftime("%m/%d/%Y"), local.strftime("%H:%M")]
        if r.item.project:
            header.append(f"[{r.item.project}]")
        header.append(f"({r.item.source})")

        lines.append(" ".join(header))
        lines.append(f"  {r.item.title}")

        desc = r.item.description
        if desc:
            if len(desc) > DESCRIPTION_PREVIEW_CHARS:
                desc = desc[:DESCRIPTION_PREVIEW_CHARS] + "..."
            lines.append(f"  {desc}")

        lines.append("")

    return "\n".join(lines)


def format_results(
    results: list[SearchResult],
    mode: OutputFormat | str = OutputFormat.TIMELINE,
    time_zone: Optional[str] = None,
) -> str:
    """Render results for display.

    An empty result list renders as ``"No results found."`` in every mode,
    JSON included.

    Args:
        results: Ranked search results.
        mode: ``timeline``, ``grouped`` or ``json``.
        time_zone: IANA zone for dates and times (None = local time).
    """
    mode = OutputFormat(mode)
    if not results:
        return NO_RESULTS

    if mode is OutputFormat.JSON:
        return _format_json(results)

    tz = resolve_timezone(time_zone)
    if mode is OutputFormat.GROUPED:
        return _format_grouped(results, tz)
    return _format_timeline(results, tz)
