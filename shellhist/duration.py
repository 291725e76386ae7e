"""Compact, human-friendly rendering of durations."""

from __future__ import annotations

from datetime import timedelta

_NANOS_PER_SECOND = 1_000_000_000
_SECONDS_PER_YEAR = 31_557_600  # 365.25 days
_SECONDS_PER_MONTH = 2_630_016  # 30.44 days
_SECONDS_PER_DAY = 86_400


def _segments(nanos: int):
    """Yield (unit, value) pairs from the most to the least significant."""
    secs, subsec = divmod(nanos, _NANOS_PER_SECOND)

    years, year_rest = divmod(secs, _SECONDS_PER_YEAR)
    months, month_rest = divmod(year_rest, _SECONDS_PER_MONTH)
    days, day_secs = divmod(month_rest, _SECONDS_PER_DAY)

    yield "y", years
    yield "mo", months
    yield "d", days
    yield "h", day_secs // 3600
    yield "m", day_secs % 3600 // 60
    yield "s", day_secs % 60
    yield "ms", subsec // 1_000_000
    yield "us", subsec // 1_000
    yield "ns", subsec


def format_duration(nanos: int | timedelta) -> str:
    """Render only the most significant non-zero unit of a duration.

    ``nanos`` is a number of nanoseconds or a :class:`datetime.timedelta`.
    A zero duration renders as ``"0s"``.
    """
    if isinstance(nanos, timedelta):
        nanos = (
            (nanos.days * _SECONDS_PER_DAY + nanos.seconds) * _NANOS_PER_SECOND
            + nanos.microseconds * 1_000
        )
    if nanos < 0:
        raise ValueError("duration must not be negative")
    for unit, value in _segments(int(nanos)):
        if value > 0:
            return f"{value}{unit}"
    return "0s"