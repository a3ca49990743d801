"""Editable text buffers with positions that follow edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NEWLINE = "\n"


def _fold(char: str) -> str:
    """Lower-case an ASCII capital letter, leaving everything else alone."""
    return char.lower() if "A" <= char <= "Z" else char


def _upper(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


@dataclass(eq=False)
class Mark:
    """A position in a buffer that moves as text is inserted or deleted."""

    position: int = 0


class Buffer:
    """A named sequence of characters addressed from position 1.

    Views attached to a buffer are objects with ``dot``, ``bow`` and
    ``modified`` attributes; their positions are kept in step with edits,
    as are the positions of the marks linked into the buffer.
    """

    def __init__(self, name: str = "", text: str = "") -> None:
        self.name = name
        self._text: list[str] = list(text)
        self.modified = False
        self.upper_case = False
        self.indent = 1
        self.language: Any = None
        self.mappings: Any = None
        self.mark1 = Mark()
        self.mark2 = Mark()
        self.save_dot = Mark()
        self.save_bow = Mark()
        self.markers: list[Mark] = []
        self.views: list[Any] = []

    def __repr__(self) -> str:
        return f"Buffer(name={self.name!r}, size={self.size})"

    def __len__(self) -> int:
        return len(self._text)

    @property
    def size(self) -> int:
        return len(self._text)

    @property
    def text(self) -> str:
        return "".join(self._text)

    def char_at(self, position: int) -> str:
        """Return the character at ``position``; outside the text, a newline."""
        if 1 <= position <= len(self._text):
            return self._text[position - 1]
        return NEWLINE

    def _check_insert_position(self, position: int) -> None:
        if not 1 <= position <= len(self._text) + 1:
            raise IndexError(f"insert position {position} out of range")

    def _after_insert(self, position: int, length: int) -> None:
        for view in self.views:
            if view.dot > position:
                view.dot += length
            if view.bow > position:
                view.bow += length
            else:
                view.modified = True
        for mark in self.markers:
            if mark.position > position:
                mark.position += length

    def insert_character(self, char: str, position: int) -> None:
        """Insert one character so that it lands at ``position``."""
        self.insert_text(position, char)

    def insert_text(self, position: int, text: str) -> None:
        """Insert ``text`` so that its first character lands at ``position``."""
        if not text:
            return
        self._check_insert_position(position)
        self._text[position - 1:position - 1] = list(text)
        self.modified = True
        self._after_insert(position, len(text))

    def delete(self, start: int, end: int) -> None:
        """Delete the characters from ``start`` to ``end`` inclusive."""
        length = end - start + 1
        if length <= 0:
            return
        if start < 1 or end > len(self._text):
            raise IndexError(f"delete range {start}..{end} out of range")
        del self._text[start - 1:end]
        self.modified = True
        for view in self.views:
            if view.dot > end:
                view.dot -= length
            elif view.dot > start:
                view.dot = start
            if view.bow > end:
                if view.bow == end + 1:
                    view.bow = self.find_bol(view.bow - length)
                else:
                    view.bow -= length
                    continue
            elif view.bow > start:
                view.bow = self.find_bol(start)
            view.modified = True
        for mark in self.markers:
            if mark.position > end:
                mark.position -= length
            elif mark.position > start:
                mark.position = start

    def copy_text_to(self, start: int, target: Buffer, position: int, length: int) -> None:
        """Copy ``length`` characters from ``start`` into ``target`` at ``position``."""
        if length > 0:
            target.insert_text(position, self.text_between(start, start + length - 1))

    def text_between(self, start: int, end: int) -> str:
        """Return the characters from ``start`` to ``end`` inclusive."""
        if end < start:
            return ""
        if start < 1 or end > len(self._text):
            raise IndexError(f"range {start}..{end} out of range")
        return "".join(self._text[start - 1:end])

    def clear(self) -> None:
        """Remove all text."""
        if self._text:
            self.delete(1, len(self._text))

    def _folded(self) -> str:
        return "".join(map(_fold, self._text))

    def search_forward(self, start: int, end: int, pattern: str) -> int | None:
        """Find the first match lying within ``start``..``end``, ignoring letter case."""
        index = self._folded().find("".join(map(_fold, pattern)), max(start - 1, 0), end)
        return None if index < 0 else index + 1

    def search_reverse(self, start: int, end: int, pattern: str) -> int | None:
        """Find the last match lying within ``start``..``end``, ignoring letter case."""
        if end <= 0:
            return None
        index = self._folded().rfind("".join(map(_fold, pattern)), max(start - 1, 0), end)
        return None if index < 0 else index + 1

    def case_change(self, start: int, end: int, upper: bool) -> None:
        """Convert the letters from ``start`` to ``end`` to upper or lower case."""
        if end < start:
            return
        if start < 1 or end > len(self._text):
            raise IndexError(f"range {start}..{end} out of range")
        convert = _upper if upper else _fold
        self._text[start - 1:end] = [convert(c) for c in self._text[start - 1:end]]
        self.modified = True
        for view in self.views:
            if view.bow <= end:
                view.modified = True

    def find_bol(self, position: int) -> int:
        """Return the start of the line holding ``position``."""
        position = min(max(position, 1), len(self._text) + 1)
        while position > 1 and self._text[position - 2] != NEWLINE:
            position -= 1
        return position

    def find_eol(self, position: int) -> int:
        """Return the position of the newline ending the line, or size + 1."""
        position = max(position, 1)
        while position <= len(self._text) and self._text[position - 1] != NEWLINE:
            position += 1
        return position

    def link_mark(self, mark: Mark) -> Mark:
        """Make ``mark`` follow edits to this buffer."""
        if not any(m is mark for m in self.markers):
            self.markers.insert(0, mark)
        return mark

    def unlink_mark(self, mark: Mark) -> Mark:
        """Stop ``mark`` following edits to this buffer."""
        self.markers = [m for m in self.markers if m is not mark]
        return mark

    def set_mark(self, mark: Mark, position: int) -> int:
        """Move ``mark`` to ``position`` and return where it was.

        Marks at 0 or 1 can never move, so they are not tracked.
        """
        previous = mark.position
        mark.position = position
        if position > 1:
            self.link_mark(mark)
        else:
            self.unlink_mark(mark)
        return previous

    def attach_view(self, view: Any) -> None:
        """Keep ``view``'s dot and beginning of window in step with edits."""
        if not any(v is view for v in self.views):
            self.views.insert(0, view)

    def detach_view(self, view: Any) -> None:
        """Stop tracking ``view``."""
        self.views = [v for v in self.views if v is not view]