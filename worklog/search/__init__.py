"""
WORKLOG — Search package.

Full scan over recorded history: filter, match, score, rank, render.
"""

from worklog.search.filters import passes_filters
from worklog.search.formatting import NO_RESULTS, OutputFormat, format_results
from worklog.search.models import MatchType, SearchOptions, SearchResult, TextMatch
from worklog.search.ranker import collect_results, rank_results, score_item, search
from worklog.search.text import fuzzy_match, levenshtein_distance, match_text

__all__ = [
    "MatchType",
    "NO_RESULTS",
    "OutputFormat",
    "SearchOptions",
    "SearchResult",
    "TextMatch",
    "collect_results",
    "format_results",
    "fuzzy_match",
    "levenshtein_distance",
    "match_text",
    "passes_filters",
    "rank_results",
    "score_item",
    "search",
]
