"""
WORKLOG — SQLite Schema Definitions.

Tables and indexes for the local history store.
"""

SCHEMA_VERSION = "1"

# ─── History Entries ─────────────────────────────────────────────────
# payload holds the full entry document (projects and items) as JSON.
CREATE_HISTORY_ENTRIES = """
CREATE TABLE IF NOT EXISTS history_entries (
    id          TEXT PRIMARY KEY,
    recorded_at TEXT NOT NULL,
    range_start TEXT NOT NULL,
    range_end   TEXT NOT NULL,
    sources     TEXT NOT NULL DEFAULT '[]',
    payload     TEXT NOT NULL
);
"""

CREATE_HISTORY_INDEXES = """
CREATE INDEX IF NOT EXISTS idx_history_recorded ON history_entries(recorded_at);
CREATE INDEX IF NOT EXISTS idx_history_range ON history_entries(range_start, range_end);
"""

# ─── Metadata ────────────────────────────────────────────────────────
CREATE_META = """
CREATE TABLE IF NOT EXISTS worklog_meta (
    key     TEXT PRIMARY KEY,
    value   TEXT NOT NULL
);
"""

ALL_SCHEMA = [
    CREATE_HISTORY_ENTRIES,
    CREATE_HISTORY_INDEXES,
    CREATE_META,
]


def get_init_meta() -> list[tuple[str, str]]:
    """Return initial metadata key-value pairs."""
    return [
        ("schema_version", SCHEMA_VERSION),
        ("store", "worklog"),
    ]
