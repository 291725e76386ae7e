"""An editable line of text with a cursor and word-wise movement."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class WordJumpMode(enum.Enum):
    """How word boundaries are found when jumping by words."""

    EMACS = "emacs"
    SUBL = "subl"


@dataclass(frozen=True)
class WordJumper:
    """Finds the next or previous word position in a string."""

    word_chars: str
    mode: WordJumpMode

    def _is_word_boundary(self, c: str, next_c: str) -> bool:
        return (
            c.isspace() != next_c.isspace()
            or (c in self.word_chars) != (next_c in self.word_chars)
        )

    def _emacs_next(self, source: str, index: int) -> int:
        stop = max(len(source) - 1, 0)
        start = next(
            (i for i in range(index + 1, stop) if source[i] in self.word_chars),
            len(source),
        )
        return next(
            (i for i in range(start + 1, stop) if source[i] not in self.word_chars),
            len(source),
        )

    def _emacs_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if source[i] in self.word_chars),
            0,
        )
        return next(
            (i + 1 for i in reversed(range(1, start)) if source[i] not in self.word_chars),
            0,
        )

    def _subl_next(self, source: str, index: int) -> int:
        boundary = next(
            (
                i
                for i in range(index, len(source) - 1)
                if self._is_word_boundary(source[i], source[i + 1])
            ),
            None,
        )
        if boundary is None:
            return len(source)
        return next(
            (i for i in range(boundary + 1, len(source)) if not source[i].isspace()),
            len(source),
        )

    def _subl_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if not source[i].isspace()),
            None,
        )
        if start is None:
            return 0
        return next(
            (
                i
                for i in reversed(range(1, start))
                if self._is_word_boundary(source[i - 1], source[i])
            ),
            0,
        )

    def next_word_pos(self, source: str, index: int) -> int:
        """Character index of the next word position after ``index``."""
        if self.mode is WordJumpMode.EMACS:
            return self._emacs_next(source, index)
        return self._subl_next(source, index)

    def prev_word_pos(self, source: str, index: int) -> int:
        """Character index of the previous word position before ``index``."""
        if self.mode is WordJumpMode.EMACS:
            return self._emacs_prev(source, index)
        return self._subl_prev(source, index)


class Cursor:
    """A string being edited, with a cursor positioned between characters."""

    def __init__(self, source: str = "") -> None:
        self.source = source
        self.index = 0

    def __str__(self) -> str:
        return self.source

    def byte_index(self) -> int:
        """Cursor position as a UTF-8 byte offset."""
        return len(self.source[: self.index].encode("utf-8"))

    def substring(self) -> str:
        """The text before the cursor."""
        return self.source[: self.index]

    def char(self) -> str | None:
        """The character under the cursor, or None at the end."""
        return self.source[self.index] if self.index < len(self.source) else None

    def right(self) -> None:
        if self.index < len(self.source):
            self.index += 1

    def left(self) -> bool:
        """Move left one character; False if already at the start."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def next_word(self, word_chars: str, mode: WordJumpMode) -> None:
        self.index = WordJumper(word_chars, mode).next_word_pos(self.source, self.index)

    def prev_word(self, word_chars: str, mode: WordJumpMode) -> None:
        self.index = WordJumper(word_chars, mode).prev_word_pos(self.source, self.index)

    def insert(self, c: str) -> None:
        self.source = self.source[: self.index] + c + self.source[self.index :]
        self.index += len(c)

    def remove(self) -> str | None:
        """Delete and return the character under the cursor."""
        if self.index < len(self.source):
            removed = self.source[self.index]
            self.source = self.source[: self.index] + self.source[self.index + 1 :]
            return removed
        return None

    def remove_next_word(self, word_chars: str, mode: WordJumpMode) -> None:
        end = WordJumper(word_chars, mode).next_word_pos(self.source, self.index)
        self.source = self.source[: self.index] + self.source[max(end, self.index) :]

    def remove_prev_word(self, word_chars: str, mode: WordJumpMode) -> None:
        start = WordJumper(word_chars, mode).prev_word_pos(self.source, self.index)
        start = min(start, self.index)
        self.source = self.source[:start] + self.source[self.index :]
        self.index = start

    def back(self) -> str | None:
        """Delete and return the character before the cursor."""
        return self.remove() if self.left() else None

    def clear(self) -> None:
        self.source = ""
        self.index = 0

    def end(self) -> None:
        self.index = len(self.source)

    def start(self) -> None:
        self.index = 0