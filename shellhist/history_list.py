"""Layout of the scrolling list of history entries in the search view."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta

from .duration import format_duration
from .history import History

# Width of the longest row prefix, as in " > 123ms 59s ago".
PREFIX_LENGTH = len(" > 123ms 59s ago")

# Compact encoding of the three-character index column: " > ", " n " or "   ".
_SLICES = " > 1 2 3 4 5 6 7 8 9   "

_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")


@dataclass
class ListState:
    """Scroll position and selection of the history list."""

    offset: int = 0
    selected: int = 0
    max_entries: int = 0

    def select(self, index: int) -> None:
        self.selected = index


def items_bounds(history_len: int, selected: int, offset: int, height: int) -> tuple[int, int]:
    """The (start, end) slice of entries shown for a list of ``height`` rows.

    Keeps up to ten entries of context visible past the selected one.
    """
    if selected > history_len:
        raise ValueError("selected entry is past the end of the history")
    offset = min(offset, max(history_len - 1, 0))
    max_scroll_space = min(height, 10, history_len - selected)
    if offset + height < selected + max_scroll_space:
        end = selected + max_scroll_space
        return end - height, end
    if selected < offset:
        return selected, selected + height
    return offset, offset + height


class _RowWriter:
    """Accumulates text for one row, clipped to a fixed width."""

    def __init__(self, width: int) -> None:
        self.width = width
        self.x = 0
        self._parts: list[str] = []

    def draw(self, text: str) -> None:
        piece = text[: max(self.width - self.x, 0)]
        self._parts.append(piece)
        self.x += len(piece)

    def text(self) -> str:
        return "".join(self._parts)


def _render_row(
    entry: History, y: int, state: ListState, width: int, now: datetime
) -> str:
    row = _RowWriter(width)

    position = y + state.offset - state.selected
    slot = 10 if position < 0 else min(position, 10)
    row.draw(_SLICES[slot * 2 : slot * 2 + 3])

    row.draw(format_duration(max(entry.duration, 0)))

    # A timestamp in the future shows as zero time ago.
    since = max(now - entry.timestamp, timedelta(0))
    ago = format_duration(since)
    padding = max(PREFIX_LENGTH - (row.x + 4 + len(ago)), 0)
    row.draw(" " * padding)
    row.draw(ago)
    row.draw(" ago")

    for section in _ASCII_WHITESPACE.split(entry.command):
        if not section:
            continue
        row.draw(" ")
        if row.x >= width:
            break
        row.draw(section)

    return row.text()


def render_rows(
    history: Sequence[History],
    state: ListState,
    height: int,
    width: int,
    now: datetime,
    inverted: bool = False,
) -> list[str]:
    """Render the visible part of the list as ``height`` lines, top to bottom.

    The selected entry sits at the bottom unless ``inverted``. ``state`` is
    updated with the new scroll offset and the number of visible entries.
    Nothing is rendered for an empty history or an empty area.
    """
    if width < 1 or height < 1 or not history:
        return []

    start, end = items_bounds(len(history), state.selected, state.offset, height)
    state.offset = start
    state.max_entries = end - start

    lines = [""] * height
    visible = history[state.offset : state.offset + (end - start)]
    for y, entry in enumerate(visible):
        row = y if inverted else height - y - 1
        lines[row] = _render_row(entry, y, state, width, now)
    return lines