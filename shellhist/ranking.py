"""Filtering and ranking of history entries for fuzzy search."""

from __future__ import annotations

from pathlib import PurePath

from .history import Context, FilterMode, History

_SESSION_WIDTH = 32


def path_dist(a: str | PurePath, b: str | PurePath) -> int:
    """Steps between two paths through their closest common ancestor."""
    left = list(PurePath(a).parts)
    right = list(PurePath(b).parts)
    dist = 0
    while right[: len(left)] != left:
        dist += 1
        left.pop()
    return len(right) - len(left) + dist


def _session_chunks(session: str) -> list[bytes]:
    raw = session.encode("utf-8")
    return [raw[i : i + _SESSION_WIDTH] for i in range(0, len(raw), _SESSION_WIDTH)]


def matches_filter(history: History, filter_mode: FilterMode, context: Context) -> bool:
    """Whether an entry belongs to the part of history that ``filter_mode`` selects.

    Aggregated entries join hosts with ``,``, directories with ``:`` and
    concatenate fixed-width session ids.
    """
    if filter_mode is FilterMode.GLOBAL:
        return True
    if filter_mode is FilterMode.HOST:
        return context.hostname in history.hostname.split(",")
    if filter_mode is FilterMode.SESSION:
        return context.session.encode("utf-8") in _session_chunks(history.session)
    if filter_mode is FilterMode.DIRECTORY:
        return context.cwd in history.cwd.split(":")
    if filter_mode is FilterMode.WORKSPACE:
        root = str(context.git_root) if context.git_root is not None else context.cwd
        return root in history.cwd.split(":")
    return False


class RankedResults:
    """Best-scored distinct commands, lowest score first."""

    def __init__(self, limit: int = 200) -> None:
        self.limit = limit
        self._entries: list[History] = []
        self._scores: list[float] = []

    def __len__(self) -> int:
        return len(self._entries)

    def insert(self, history: History, score: float) -> None:
        """Add an entry unless the same command already ranks at least as well.

        A worse-ranked entry with the same command is dropped.
        """
        for i, (entry, rank) in enumerate(zip(self._entries, self._scores)):
            if rank > score:
                self._scores.insert(i, score)
                self._entries.insert(i, history)
                for j in range(i + 1, len(self._entries)):
                    if self._entries[j].command == history.command:
                        del self._entries[j]
                        del self._scores[j]
                        break
                if len(self._entries) > self.limit:
                    self._entries.pop()
                    self._scores.pop()
                return
            if entry.command == history.command:
                return

        if len(self._entries) < self.limit:
            self._entries.append(history)
            self._scores.append(score)

    def results(self) -> list[History]:
        """The ranked entries, best first."""
        return list(self._entries)