"""
WORKLOG — History data model.

Work items as collected from git, GitHub, editors, AI-assistant sessions
and terminal/filesystem summaries, grouped into projects inside recorded
history entries. Entries are read-only snapshots once loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from worklog.exceptions import UnknownSourceError
from worklog.temporal import ensure_aware, parse_iso, to_iso_z


class SourceType(str, Enum):
    """Closed set of origin tags for a work item."""

    OPENCODE = "opencode"
    CLAUDE = "claude"
    CODEX = "codex"
    FACTORY = "factory"
    GIT = "git"
    GITHUB = "github"
    VSCODE = "vscode"
    CURSOR = "cursor"
    TERMINAL = "terminal"
    FILESYSTEM = "filesystem"
    CALENDAR = "calendar"
    SLACK = "slack"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, tag: str | SourceType) -> SourceType:
        """Look up a tag, raising UnknownSourceError for anything unrecognized."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise UnknownSourceError(f"Unknown source: {tag!r}. Valid sources: {valid}") from None

    @property
    def emoji(self) -> str:
        return SOURCE_INFO[self].emoji

    @property
    def display_name(self) -> str:
        return SOURCE_INFO[self].name


@dataclass(frozen=True)
class SourceInfo:
    emoji: str
    name: str


SOURCE_INFO: dict[SourceType, SourceInfo] = {
    SourceType.OPENCODE: SourceInfo("🔧", "OpenCode Sessions"),
    SourceType.CLAUDE: SourceInfo("🤖", "Claude Code"),
    SourceType.CODEX: SourceInfo("💻", "Codex"),
    SourceType.FACTORY: SourceInfo("🏭", "Factory"),
    SourceType.GIT: SourceInfo("📝", "Git Commits"),
    SourceType.GITHUB: SourceInfo("🐙", "GitHub Activity"),
    SourceType.VSCODE: SourceInfo("💙", "VS Code"),
    SourceType.CURSOR: SourceInfo("✨", "Cursor"),
    SourceType.TERMINAL: SourceInfo("🖥️", "Terminal"),
    SourceType.FILESYSTEM: SourceInfo("📁", "File System"),
    SourceType.CALENDAR: SourceInfo("📅", "Calendar"),
    SourceType.SLACK: SourceInfo("💬", "Slack"),
}


@dataclass(frozen=True)
class DateRange:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_aware(self.start))
        object.__setattr__(self, "end", ensure_aware(self.end))


@dataclass
class WorkItem:
    """A single unit of recorded activity."""

    source: SourceType
    timestamp: datetime
    title: str
    description: Optional[str] = None
    project: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.source = SourceType.parse(self.source)
        self.timestamp = ensure_aware(self.timestamp)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "source": self.source.value,
            "timestamp": to_iso_z(self.timestamp),
            "title": self.title,
        }
        if self.description is not None:
            d["description"] = self.description
        if self.project is not None:
            d["project"] = self.project
        if self.metadata is not None:
            d["metadata"] = self.metadata
        return d

    @classmethod
    def from_dict(cls, data: dict) -> WorkItem:
        return cls(
            source=SourceType.parse(data["source"]),
            timestamp=parse_iso(data["timestamp"]),
            title=data["title"],
            description=data.get("description"),
            project=data.get("project"),
            metadata=data.get("metadata"),
        )


@dataclass
class Project:
    name: str
    path: str
    items: list[WorkItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "items": [i.to_dict() for i in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Project:
        return cls(
            name=data["name"],
            path=data.get("path", ""),
            items=[WorkItem.from_dict(i) for i in data.get("items", [])],
        )


@dataclass
class HistoryEntry:
    """One recorded snapshot covering a date range, grouped by project."""

    id: str
    timestamp: datetime
    date_range: DateRange
    sources: list[SourceType]
    projects: list[Project] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.timestamp = ensure_aware(self.timestamp)
        self.sources = [SourceType.parse(s) for s in self.sources]

    def iter_items(self):
        """Yield every work item in project order."""
        for project in self.projects:
            yield from project.items

    def item_count(self) -> int:
        return sum(len(p.items) for p in self.projects)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": to_iso_z(self.timestamp),
            "dateRange": {
                "start": to_iso_z(self.date_range.start),
                "end": to_iso_z(self.date_range.end),
            },
            "sources": [s.value for s in self.sources],
            "projects": [p.to_dict() for p in self.projects],
        }

    @classmethod
    def from_dict(cls, data: dict) -> HistoryEntry:
        rng = data["dateRange"]
        return cls(
            id=str(data["id"]),
            timestamp=parse_iso(data["timestamp"]),
            date_range=DateRange(start=parse_iso(rng["start"]), end=parse_iso(rng["end"])),
            sources=list(data.get("sources", [])),
            projects=[Project.from_dict(p) for p in data.get("projects", [])],
        )
