"""Figures shown when inspecting a single history entry."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .duration import format_duration
from .history import History, HistoryStats

_DAYS = {
    "0": "Sunday",
    "1": "Monday",
    "2": "Tuesday",
    "3": "Wednesday",
    "4": "Thursday",
    "5": "Friday",
    "6": "Saturday",
}


def u64_or_zero(num: int) -> int:
    """Clamp a negative number to zero."""
    return max(num, 0)


def num_to_day(num: str) -> str:
    """Name of a weekday numbered from Sunday as ``"0"``."""
    return _DAYS.get(num, "Invalid day")


def sort_duration_over_time(durations: Iterable[tuple[str, int]]) -> list[tuple[str, int]]:
    """Order ``(dd-mm-yyyy, duration)`` pairs by date, relabelled as ``mm/yy``.

    Raises ValueError for a date that does not parse.
    """
    parsed = [
        (datetime.strptime(day, "%d-%m-%Y").date(), duration)
        for day, duration in durations
    ]
    parsed.sort(key=lambda pair: pair[0])
    return [(day.strftime("%m/%y"), duration) for day, duration in parsed]


def stats_table_rows(history: History, stats: HistoryStats) -> list[tuple[str, str]]:
    """Label and value pairs describing one command and its statistics."""
    return [
        ("Time", str(history.timestamp)),
        ("Duration", format_duration(u64_or_zero(history.duration))),
        ("Avg duration", format_duration(stats.average_duration)),
        ("Exit", str(history.exit)),
        ("Directory", history.cwd),
        ("Session", history.session),
        ("Total runs", str(stats.total)),
    ]