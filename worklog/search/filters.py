# This file is part of WORKLOG.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Source, project and date-range filters."""

from worklog.models import WorkItem
from worklog.search.models import SearchOptions


def _project_matches(project: str | None, wanted: list[str]) -> bool:
    if not project:
        return False
    lowered = project.lower()
    return any(p.lower() in lowered for p in wanted)


def passes_filters(item: WorkItem, options: SearchOptions) -> bool:
    """Return True if the item satisfies every active filter.

    Date bounds are inclusive on both ends.
    """
    if options.sources and item.source not in options.sources:
        return False

    if options.projects and not _project_matches(item.project, options.projects):
        return False

    if options.start_date is not None and item.timestamp < options.start_date:
        return False

    if options.end_date is not None and item.timestamp > options.end_date:
        return False

    return True
