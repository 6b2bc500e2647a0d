"""
WORKLOG — Noise classification.

Flags work items that carry no useful signal (automated merges, trivial
shell commands, build-output churn) so they never surface in search.
"""

from __future__ import annotations

import re
from typing import Iterable

from worklog.models import SourceType, WorkItem

_MERGE_RE = re.compile(
    r"^merge (branch|pull request|remote-tracking branch)\b", re.IGNORECASE
)

_TRIVIAL_COMMANDS = frozenset({"ls", "cd", "pwd", "clear", "exit", "history"})

_NOISY_PATH_PARTS = frozenset(
    {"node_modules", ".git", "__pycache__", ".DS_Store", "dist", "build"}
)


def _is_trivial_command(title: str) -> bool:
    parts = title.split()
    if not parts:
        return True
    cmd = parts[0]
    if cmd not in _TRIVIAL_COMMANDS:
        return False
    # "cd <dir>" and "ls <args>" are still navigation
    return cmd in ("cd", "ls") or len(parts) == 1


def _has_noisy_path(text: str) -> bool:
    return any(part in _NOISY_PATH_PARTS for part in re.split(r"[\\/\s]+", text))


def is_noise_work_item(item: WorkItem) -> bool:
    """Return True if the item should be excluded from results."""
    title = item.title.strip()
    if not title:
        return True

    if item.source in (SourceType.GIT, SourceType.GITHUB):
        return bool(_MERGE_RE.match(title))

    if item.source == SourceType.TERMINAL:
        return _is_trivial_command(title)

    if item.source == SourceType.FILESYSTEM:
        return _has_noisy_path(title)

    return False


def filter_noise_work_items(items: Iterable[WorkItem]) -> list[WorkItem]:
    """Return the non-noise items, preserving order."""
    return [i for i in items if not is_noise_work_item(i)]
