# This file is part of WORKLOG.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Composite scoring, ranking and the search entry point."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from worklog.models import HistoryEntry, WorkItem
from worklog.noise import is_noise_work_item
from worklog.search.filters import passes_filters
from worklog.search.models import NO_MATCH, MatchType, SearchOptions, SearchResult
from worklog.search.text import match_text
from worklog.storage.history import HistoryStore

logger = logging.getLogger("worklog.search")

DESCRIPTION_DISCOUNT = 0.8

NoiseClassifier = Callable[[WorkItem], bool]


def score_item(item: WorkItem, options: SearchOptions) -> Optional[tuple[float, MatchType]]:
    """Composite score for one item, or None when neither field matches.

    The match type is picked from the raw title/description scores, while
    the composite uses the discounted description score.
    """
    title_match = match_text(item.title, options.query, options)
    desc_match = (
        match_text(item.description, options.query, options) if item.description else NO_MATCH
    )

    if not (title_match.matched or desc_match.matched):
        return None

    score = max(title_match.score, desc_match.score * DESCRIPTION_DISCOUNT)
    kind = title_match.kind if title_match.score >= desc_match.score else desc_match.kind
    return score, kind


def rank_results(results: list[SearchResult], limit: Optional[int] = None) -> list[SearchResult]:
    """Sort by score, then timestamp, both descending; truncate to a positive limit."""
    ranked = sorted(results, key=lambda r: (r.score, r.item.timestamp), reverse=True)
    if limit is not None and limit > 0:
        return ranked[:limit]
    return ranked


def collect_results(
    entries: list[HistoryEntry],
    options: SearchOptions,
    is_noise: NoiseClassifier = is_noise_work_item,
) -> list[SearchResult]:
    """Scan every item of every project of every entry, unsorted."""
    results: list[SearchResult] = []
    scanned = 0

    for entry in entries:
        for project in entry.projects:
            for item in project.items:
                scanned += 1
                if is_noise(item):
                    continue
                if not passes_filters(item, options):
                    continue

                scored = score_item(item, options)
                if scored is None:
                    continue
                score, kind = scored
                results.append(SearchResult(item=item, entry=entry, score=score, match_type=kind))

    logger.debug(
        "Scanned %d items in %d entries, %d matched %r", scanned, len(entries), len(results), options.query
    )
    return results


async def search(
    options: SearchOptions,
    store: HistoryStore,
    is_noise: NoiseClassifier = is_noise_work_item,
) -> list[SearchResult]:
    """Search recorded history.

    Args:
        options: Query, mode flags and filters.
        store: History source; any error raised while loading propagates.
        is_noise: Predicate excluding uninteresting items.

    Returns:
        Results ordered by score then recency, truncated to ``options.limit``.
    """
    entries = await store.load_history()
    results = collect_results(entries, options, is_noise=is_noise)
    return rank_results(results, options.limit)
