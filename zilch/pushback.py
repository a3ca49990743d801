"""A stack of characters read back before fresh input."""

from __future__ import annotations

from collections import deque
from typing import Union

from .text import Buffer

Item = Union[str, int]


class PushbackStack:
    """Characters pushed onto the front of a queue and read off in order.

    Items are single characters or integer markers. Characters pushed
    back with :meth:`push_back_character` or :meth:`push_back_text` are
    flagged, and ``last_pushed_back`` tells whether the last item read
    carried that flag.
    """

    def __init__(self) -> None:
        self._items: deque[tuple[Item, bool]] = deque()
        self.last_pushed_back = False

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push_string(self, text: str) -> None:
        """Push ``text`` so that its first character is read next."""
        self._items.extendleft((c, False) for c in reversed(text))

    def push_character(self, char: Item) -> None:
        """Push one character or marker to be read next."""
        self._items.appendleft((char, False))

    def push_region(self, buffer: Buffer, start: int, end: int) -> None:
        """Push the text of ``buffer`` from ``start`` up to, not including, ``end``."""
        self.push_string(buffer.text_between(start, end - 1))

    def push_back_character(self, char: str) -> None:
        """Return a character to the input, flagged as pushed back."""
        self._items.appendleft((char, True))

    def push_back_text(self, text: str) -> None:
        """Return ``text`` to the input, flagged as pushed back."""
        self._items.extendleft((c, True) for c in reversed(text))

    def next_character(self) -> Item | None:
        """Remove and return the next item, or None when the stack is empty."""
        if not self._items:
            return None
        item, self.last_pushed_back = self._items.popleft()
        return item

    def clear(self) -> None:
        """Discard everything on the stack."""
        self._items.clear()