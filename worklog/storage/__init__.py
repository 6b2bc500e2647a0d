"""WORKLOG storage — history persistence."""

from worklog.storage.history import HistoryStore, SqliteHistoryStore

__all__ = ["HistoryStore", "SqliteHistoryStore"]
