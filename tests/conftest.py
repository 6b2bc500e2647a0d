from datetime import datetime, timezone

import pytest

from worklog import config
from worklog.models import DateRange, HistoryEntry, Project, WorkItem


@pytest.fixture(autouse=True)
def reset_worklog_config(monkeypatch, tmp_path):
    """Point config at a temp dir and reset it between every test."""
    monkeypatch.setenv("WORKLOG_DIR", str(tmp_path / "worklog"))
    monkeypatch.delenv("WORKLOG_DB", raising=False)
    monkeypatch.delenv("WORKLOG_TZ", raising=False)
    monkeypatch.delenv("WORKLOG_FORMAT", raising=False)
    config.reload()
    yield
    monkeypatch.undo()
    config.reload()


class FakeHistoryStore:
    """In-memory history store injected into search()."""

    def __init__(self, entries=None):
        self.entries = list(entries or [])
        self.calls = 0

    async def load_history(self):
        self.calls += 1
        return self.entries


class FailingHistoryStore:
    def __init__(self, exc: Exception):
        self.exc = exc

    async def load_history(self):
        raise self.exc


def ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


@pytest.fixture
def make_item():
    def _make(**kwargs) -> WorkItem:
        return WorkItem(
            source=kwargs.get("source", "git"),
            timestamp=kwargs.get("timestamp", ts("2025-01-15T12:00:00")),
            title=kwargs.get("title", "Test item"),
            description=kwargs.get("description"),
            project=kwargs.get("project", "test-project"),
            metadata=kwargs.get("metadata"),
        )

    return _make


@pytest.fixture
def make_entry(make_item):
    def _make(items: list[dict], entry_id: str = "test-entry") -> HistoryEntry:
        return HistoryEntry(
            id=entry_id,
            timestamp=ts("2025-01-15T10:00:00"),
            date_range=DateRange(start=ts("2025-01-15T00:00:00"), end=ts("2025-01-15T23:59:59")),
            sources=["git"],
            projects=[
                Project(
                    name="test-project",
                    path="/path/to/project",
                    items=[make_item(**i) for i in items],
                )
            ],
        )

    return _make


@pytest.fixture
def fake_store():
    return FakeHistoryStore


@pytest.fixture
def failing_store():
    return FailingHistoryStore
