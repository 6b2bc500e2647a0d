# This file is part of WORKLOG.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Search option and result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from worklog.models import HistoryEntry, SourceType, WorkItem
from worklog.temporal import ensure_aware, to_iso_z


class MatchType(str, Enum):
    """How a text match was found."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    REGEX = "regex"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TextMatch:
    """Outcome of matching one text field against the query."""

    matched: bool
    score: float
    kind: MatchType = MatchType.EXACT


NO_MATCH = TextMatch(matched=False, score=0.0, kind=MatchType.EXACT)


@dataclass
class SearchOptions:
    """Query text plus mode flags and filters."""

    query: str
    regex: bool = False
    fuzzy: bool = False
    sources: list[SourceType] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.sources, (str, SourceType)):
            self.sources = [self.sources]
        if isinstance(self.projects, str):
            self.projects = [self.projects]
        self.sources = [SourceType.parse(s) for s in (self.sources or [])]
        self.projects = list(self.projects or [])
        if self.start_date is not None:
            self.start_date = ensure_aware(self.start_date)
        if self.end_date is not None:
            self.end_date = ensure_aware(self.end_date)


@dataclass
class SearchResult:
    """A scored hit. ``item`` and ``entry`` reference the loaded history."""

    item: WorkItem
    entry: HistoryEntry
    score: float
    match_type: MatchType

    def to_dict(self) -> dict:
        d: dict = {"title": self.item.title}
        if self.item.description is not None:
            d["description"] = self.item.description
        d["source"] = self.item.source.value
        if self.item.project is not None:
            d["project"] = self.item.project
        d["timestamp"] = to_iso_z(self.item.timestamp)
        d["score"] = self.score
        d["matchType"] = self.match_type.value
        return d
