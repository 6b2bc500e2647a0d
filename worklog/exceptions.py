"""
WORKLOG — Custom Exceptions.

Typed error hierarchy so storage and parsing failures reach the CLI
as domain errors instead of raw SQLite or datetime errors.
"""


class WorklogError(Exception):
    """Base exception for all WORKLOG errors."""


class HistoryLoadError(WorklogError):
    """Raised when stored history cannot be read.

    The underlying sqlite/OS/JSON error is chained as ``__cause__``.
    """


class UnknownSourceError(WorklogError, ValueError):
    """Raised when a source tag is not one of the known SourceType values."""


class InvalidDateError(WorklogError, ValueError):
    """Raised when a date bound cannot be parsed."""


class HistoryWriteError(WorklogError):
    """Raised when a history entry cannot be persisted.

    The underlying sqlite/OS error is chained as ``__cause__``.
    """
