"""
WORKLOG — Personal work-activity log search.

Local-first history of commits, PR events, editor and AI-assistant
sessions, searchable by text, regex or fuzzy match.
"""

__version__ = "1.0.0"

from worklog.models import HistoryEntry, SourceType, WorkItem  # noqa: E402
from worklog.search import SearchOptions, SearchResult, format_results, search  # noqa: E402

__all__ = [
    "HistoryEntry",
    "SearchOptions",
    "SearchResult",
    "SourceType",
    "WorkItem",
    "__version__",
    "format_results",
    "search",
]
