"""Core records shared by search, statistics and display."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


class FilterMode(enum.Enum):
    """Which part of the history a search is restricted to."""

    GLOBAL = "global"
    HOST = "host"
    SESSION = "session"
    DIRECTORY = "directory"
    WORKSPACE = "workspace"


@dataclass(frozen=True)
class Context:
    """Where the current search is run from."""

    session: str
    cwd: str
    hostname: str
    host_id: str = ""
    git_root: Path | None = None


@dataclass(frozen=True)
class History:
    """One recorded shell command."""

    command: str
    timestamp: datetime
    duration: int = 0
    exit: int = 0
    cwd: str = ""
    session: str = ""
    hostname: str = ""
    id: str = ""
    deleted_at: datetime | None = None

    def success(self) -> bool:
        """True if the command exited cleanly or is still running."""
        return self.exit == 0 or self.duration == -1


@dataclass
class HistoryStats:
    """Aggregated figures about one command, for the inspector."""

    previous: History | None = None
    next: History | None = None
    total: int = 0
    average_duration: int = 0
    exits: list[tuple[int, int]] = field(default_factory=list)
    day_of_week: list[tuple[str, int]] = field(default_factory=list)
    duration_over_time: list[tuple[str, int]] = field(default_factory=list)