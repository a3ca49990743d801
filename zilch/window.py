"""Windows onto buffers and their arrangement on the screen."""

from __future__ import annotations

import time
from dataclasses import dataclass
from weakref import WeakKeyDictionary

from .text import Buffer

# Where each buffer was last shown, so that a window switched back to it
# returns to the same place.
_remembered: WeakKeyDictionary[Buffer, tuple[int, int]] = WeakKeyDictionary()


@dataclass(eq=False)
class Window:
    """A view of a buffer: its cursor (``dot``), first shown line (``bow``) and height."""

    size: int = 22
    buffer: Buffer | None = None
    dot: int = 1
    bow: int = 1
    min_size: int = 1
    modified: bool = True
    mode_line: str | None = None

    def __post_init__(self) -> None:
        if self.buffer is not None:
            self.buffer.attach_view(self)
            if self.mode_line is None:
                self.mode_line = self.buffer.name

    def _save_position(self) -> None:
        if self.buffer is not None:
            _remembered[self.buffer] = (self.dot, self.bow)

    def copy(self) -> Window:
        """Return another window showing the same place in the same buffer."""
        return Window(size=self.size, buffer=self.buffer, dot=self.dot, bow=self.bow,
                      min_size=self.min_size, modified=self.modified,
                      mode_line=self.mode_line)

    def ready(self) -> None:
        """Bring dot and the beginning of window back inside the buffer."""
        if self.buffer is None:
            return
        self.dot = min(self.dot, self.buffer.size + 1)
        self.bow = self.buffer.find_bol(self.bow)
        self.modified = True

    def switch_to_buffer(self, buffer: Buffer | None) -> None:
        """Show ``buffer`` in this window, remembering where the old one was."""
        if self.buffer is not None:
            self._save_position()
            self.buffer.detach_view(self)
        self.buffer = buffer
        if buffer is None:
            self.mode_line = None
            return
        self.dot, self.bow = _remembered.get(buffer, (1, 1))
        buffer.attach_view(self)
        self.modified = True
        self.mode_line = buffer.name

    def status(self, page_number: int, column: int) -> str:
        """Return a one-line summary of the window's buffer and position."""
        buffer = self.buffer
        if buffer is None:
            raise ValueError("window shows no buffer")
        percent = 0 if buffer.size == 0 else (100 * (self.dot - 1)) // buffer.size
        flag = "Y" if buffer.modified else "N"
        return (f"Mod: {flag}  Size: {buffer.size}  Pos: {self.dot} ({percent}%)  "
                f"Col: {column}  Page: {page_number}  {time.ctime()[:24]}")


class WindowLayout:
    """The windows of one page, top to bottom, and the current one.

    Each window uses ``size`` lines plus one for its mode line; the last
    screen line holds messages. The screen may grow up to
    ``max_screen_size`` lines while only one page exists.
    """

    def __init__(self, screen_size: int = 24, max_screen_size: int | None = None) -> None:
        self.screen_size = screen_size
        self.max_screen_size = screen_size if max_screen_size is None else max_screen_size
        self.single_page = True
        self.redraw_needed = False
        self.windows: list[Window] = []
        self.current: Window | None = None

    @property
    def current_buffer(self) -> Buffer | None:
        return None if self.current is None else self.current.buffer

    def _index(self) -> int:
        return next(i for i, w in enumerate(self.windows) if w is self.current)

    def split_current(self) -> bool:
        """Split the current window in two; False if it is too small."""
        if self.current is None:
            self.current = Window(size=self.screen_size - 2)
            self.windows = [self.current]
            return True
        current = self.current
        if current.size < 3:
            return False
        current.modified = True
        lower = current.copy()
        lower.size = (current.size - 1) // 2
        current.size //= 2
        lower.min_size = 1
        self.windows.insert(self._index() + 1, lower)
        self.current = lower
        return True

    def enlarge(self) -> bool:
        """Give the current window one more line, taken from a neighbour or the screen."""
        if self.current is None:
            return False
        index = self._index()
        below = self.windows[index:]
        for offset, window in enumerate(below[1:], 1):
            if window.size > window.min_size:
                for touched in below[:offset + 1]:
                    touched.modified = True
                return self._take_line(window)
        above = self.windows[index::-1]
        for offset, window in enumerate(above[1:], 1):
            if window.size > window.min_size:
                for touched in above[:offset + 1]:
                    touched.modified = True
                return self._take_line(window)
        if self.screen_size < self.max_screen_size and self.single_page:
            self.screen_size += 1
            self.current.size += 1
            for window in below:
                window.modified = True
            self.redraw_needed = True
            return True
        return False

    def _take_line(self, donor: Window) -> bool:
        assert self.current is not None
        self.current.size += 1
        donor.size -= 1
        return True

    def shrink(self) -> bool:
        """Take a line from the current window; False if that cannot be done."""
        window = self.current
        if window is None or window.size <= 1:
            return False
        index = self._index()
        if index + 1 < len(self.windows):
            neighbour = self.windows[index + 1]
            neighbour.size += 1
            neighbour.modified = True
        elif index > 0:
            neighbour = self.windows[index - 1]
            neighbour.size += 1
            neighbour.modified = True
        elif not self.single_page:
            return False
        else:
            self.screen_size -= 1
            self.redraw_needed = True
        window.size -= 1
        window.modified = True
        return True

    def pop_up(self) -> bool:
        """Split the current window, enlarging it first if need be."""
        while not self.split_current():
            if not self.enlarge():
                return False
        return True

    def next_window(self) -> None:
        """Make the window below current, wrapping to the top."""
        if self.windows:
            self.current = self.windows[(self._index() + 1) % len(self.windows)]

    def previous_window(self) -> None:
        """Make the window above current, wrapping to the bottom."""
        if self.windows:
            self.current = self.windows[self._index() - 1]

    def delete_current(self) -> bool:
        """Remove the current window, giving its lines to a neighbour."""
        if len(self.windows) <= 1:
            return False
        window = self.current
        assert window is not None
        index = self._index()
        last = len(self.windows) - 1
        if index == 0:
            successor = self.windows[1]
        elif index == last:
            successor = self.windows[index - 1]
        else:
            before, after = self.windows[index - 1], self.windows[index + 1]
            if before.buffer is not window.buffer and after.buffer is window.buffer:
                successor = after
            else:
                successor = before
        del self.windows[index]
        self.current = successor
        successor.size += window.size + 1
        successor.modified = True
        window.switch_to_buffer(None)
        return True

    def delete_others(self) -> None:
        """Remove every window but the current one."""
        keep = self.current
        for window in list(self.windows):
            if window is not keep:
                self.current = window
                self.delete_current()
        self.current = keep

    def equalize(self) -> None:
        """Share the screen's lines out evenly between the windows."""
        remaining_windows = len(self.windows)
        lines = self.screen_size - 1
        for window in self.windows:
            window.size = lines // remaining_windows + min(1, lines % remaining_windows) - 1
            window.modified = True
            lines -= window.size + 1
            remaining_windows -= 1

    def copy(self) -> WindowLayout:
        """Return a layout with a copy of each window, current in the same place."""
        clone = WindowLayout(self.screen_size, self.max_screen_size)
        clone.single_page = self.single_page
        for window in self.windows:
            duplicate = window.copy()
            clone.windows.append(duplicate)
            if window is self.current:
                clone.current = duplicate
        return clone