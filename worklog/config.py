"""
WORKLOG — Configuration.
Shared settings and paths, read from the environment.
"""

import os
from pathlib import Path

# Base Paths
DEFAULT_WORKLOG_DIR = Path.home() / ".local" / "share" / "worklog"
WORKLOG_DIR = Path(os.environ.get("WORKLOG_DIR", str(DEFAULT_WORKLOG_DIR))).expanduser()

# History Store
DEFAULT_DB_PATH = WORKLOG_DIR / "history.db"
DB_PATH = os.environ.get("WORKLOG_DB", str(DEFAULT_DB_PATH))

# Rendering
TIMEZONE = os.environ.get("WORKLOG_TZ", "")  # "" = local time
DEFAULT_FORMAT = os.environ.get("WORKLOG_FORMAT", "timeline")

# Logging
LOG_LEVEL = os.environ.get("WORKLOG_LOG_LEVEL", "WARNING").upper()


def reload() -> None:
    """Re-read every setting from the current environment."""
    global WORKLOG_DIR, DEFAULT_DB_PATH, DB_PATH, TIMEZONE, DEFAULT_FORMAT, LOG_LEVEL

    WORKLOG_DIR = Path(os.environ.get("WORKLOG_DIR", str(DEFAULT_WORKLOG_DIR))).expanduser()
    DEFAULT_DB_PATH = WORKLOG_DIR / "history.db"
    DB_PATH = os.environ.get("WORKLOG_DB", str(DEFAULT_DB_PATH))
    TIMEZONE = os.environ.get("WORKLOG_TZ", "")
    DEFAULT_FORMAT = os.environ.get("WORKLOG_FORMAT", "timeline")
    LOG_LEVEL = os.environ.get("WORKLOG_LOG_LEVEL", "WARNING").upper()
