"""Output to character terminals: cursor motion, scrolling and erasing."""

from __future__ import annotations

from enum import Enum
from typing import TextIO

SCREEN_SIZE = 25
ESC = "\33"

_VT100_INIT = "\33<\33[?6h\33[;r\33>\33[?7l\33[?1l\33[m"
_VT100_FINISH = "\33[?6l\33[;r\33>"
_VT100_SET_80 = "\33[?3l"
_VT100_SET_132 = "\33[?3h"
_KEYPAD_NUMERIC = "\33>"
_KEYPAD_APPLICATION = "\33="


class TerminalType(Enum):
    """The kinds of terminal the editor can drive."""

    VT100 = "vt100"
    ADM3A = "adm3a"
    ADM5 = "adm5"
    VT52 = "vt52"


class Terminal:
    """A terminal of a known type with its output held until flushed.

    ``pos_x`` and ``pos_y`` record where the cursor is believed to be;
    a ``pos_x`` beyond the width means the position is unknown.
    """

    def __init__(self, kind: TerminalType = TerminalType.VT100, stream: TextIO | None = None,
                 tty_width: int = 80, tty_length: int = 24, lf_fill: int = 0) -> None:
        self.kind = kind
        self.stream = stream
        self.tty_width = tty_width
        self.tty_length = tty_length
        self.lf_fill = lf_fill
        self.application_keypad = False
        self.reverse_capable = False
        self.insert_capable = False
        self.size_x = 80
        self.size_y = 24
        self.pos_x = self.size_x + 1
        self.pos_y = 1
        self._pending: list[str] = []
        self._initialize()

    @property
    def output(self) -> str:
        """Text written since the last flush."""
        return "".join(self._pending)

    def _initialize(self) -> None:
        self._pending.clear()
        self.size_x = 80
        self.size_y = 24
        capable = self.kind is TerminalType.VT100
        self.reverse_capable = capable
        self.insert_capable = capable
        self.application_keypad = False
        self._invalidate()

    def _invalidate(self) -> None:
        self.pos_x = self.size_x + 1

    def _linefeed(self) -> str:
        return "\n" + "\0" * self.lf_fill

    def write(self, text: str) -> None:
        """Queue ``text`` for output."""
        if text:
            self._pending.append(text)

    def flush(self) -> str:
        """Send queued output to the stream and return it."""
        data = "".join(self._pending)
        self._pending.clear()
        if self.stream is not None and data:
            self.stream.write(data)
            self.stream.flush()
        return data

    def set_type(self, name: str) -> None:
        """Switch to the terminal type called ``name``; ValueError if unknown."""
        try:
            self.kind = TerminalType(name.lower())
        except ValueError:
            raise ValueError(f"unknown terminal type: {name}") from None
        self._initialize()

    def set_width(self, width: int) -> None:
        """Set the screen width; ValueError if the terminal cannot show it."""
        ok = False
        if self.kind is TerminalType.VT100:
            if 1 <= width <= 80:
                self.size_x, ok = 80, True
            elif 80 < width <= 132:
                self.size_x, ok = 132, True
        elif 1 <= width <= 80:
            self.size_x, ok = 80, True
        self._invalidate()
        if not ok:
            raise ValueError(f"width {width} not supported by {self.kind.value}")

    def set_length(self, length: int) -> None:
        """Set the screen length; ValueError if the terminal cannot show it."""
        if self.kind is TerminalType.VT100:
            if 1 <= length <= SCREEN_SIZE:
                self.size_y = max(self.tty_length, length)
                return
        elif 1 <= length <= 24:
            self.size_y = 24
            return
        raise ValueError(f"length {length} not supported by {self.kind.value}")

    def position(self, row: int, column: int) -> None:
        """Move the cursor to ``row``, ``column`` unless it is already there."""
        if self.pos_x < self.size_x and self.pos_x == column and self.pos_y == row:
            return
        difference = self.pos_x - column
        if self.pos_x < self.size_x and self.pos_y == row and 0 < difference < 4:
            self.write("\b" * difference)
        elif self.kind in (TerminalType.ADM3A, TerminalType.ADM5):
            self.write(f"{ESC}={chr(row + 31)}{chr(column + 31)}")
        elif self.kind is TerminalType.VT52:
            self.write(f"{ESC}Y{chr(row + 31)}{chr(column + 31)}")
        else:
            self.write(f"{ESC}[{row};{column}H")
        self.pos_x = column
        self.pos_y = row

    def clear(self) -> None:
        """Clear the screen and home the cursor."""
        if self.kind in (TerminalType.ADM3A, TerminalType.ADM5):
            self.write("\33;\32")
        elif self.kind is TerminalType.VT100:
            self.write("\33[2J\33[H")
        else:
            self.write("\33H\33J")
        self.pos_x = 1
        self.pos_y = 1

    def init_sequence(self, screen_width: int) -> None:
        """Put the terminal into the modes the editor needs."""
        if self.kind is TerminalType.VT100:
            self.write(_VT100_INIT)
            if self.application_keypad:
                self.write(_KEYPAD_APPLICATION)
            if screen_width <= 80 < self.tty_width:
                self.write(_VT100_SET_80)
            elif screen_width > 80 >= self.tty_width:
                self.write(_VT100_SET_132)
        elif self.kind is TerminalType.VT52:
            self.write(_KEYPAD_NUMERIC)
            if self.application_keypad:
                self.write(_KEYPAD_APPLICATION)
        self._invalidate()

    def finish(self, screen_width: int) -> None:
        """Return the terminal to its ordinary modes."""
        if self.kind is TerminalType.VT100:
            self.write(_VT100_FINISH)
            if self.tty_width <= 80 < screen_width:
                self.write(_VT100_SET_80)
            elif self.tty_width > 80 >= screen_width:
                self.write(_VT100_SET_132)
        elif self.kind is TerminalType.VT52:
            self.write(_KEYPAD_NUMERIC)
        self._invalidate()

    def _set_window(self, top: int, bottom: int) -> None:
        top_text = str(top) if top > 1 else ""
        bottom_text = str(bottom) if bottom != 0 else ""
        self.write(f"{ESC}[{top_text};{bottom_text}r")
        self.pos_x = 1
        self.pos_y = top

    def scroll_up_lines(self, top: int, bottom: int, count: int) -> None:
        """Scroll lines ``top``..``bottom`` up by ``count`` lines."""
        if self.kind is TerminalType.VT100:
            self._set_window(top, bottom)
            self.write(f"{ESC}[{bottom - top}B")
            self.write("\n" * max(count, 0))
            self._set_window(1, 0)
        else:
            # Only the whole screen can scroll.
            self.position(self.size_y, 1)
            self.write(self._linefeed() * max(count, 0))

    def scroll_down_lines(self, top: int, bottom: int, count: int) -> None:
        """Scroll lines ``top``..``bottom`` down by ``count`` lines."""
        self._set_window(top, bottom)
        self.write("\33M" * max(count, 0))
        self._set_window(1, 0)

    def erase_to_end_of_line(self, old: int, new: int) -> None:
        """Erase what remains of an ``old``-long line now ``new`` long."""
        blanks = min(old, self.size_x) - min(new, self.size_x)
        erase = {
            TerminalType.VT100: "\33[K",
            TerminalType.VT52: "\33K",
            TerminalType.ADM5: "\33T",
        }.get(self.kind)
        if erase is not None and blanks >= len(erase):
            self.write(erase)
        elif blanks > 0:
            self.write(" " * blanks)
            self.pos_x += blanks

    def reverse_video(self) -> None:
        """Start reverse video, where the terminal has it."""
        if self.kind is TerminalType.VT100:
            self.write("\33[7m")

    def reverse_video_off(self) -> None:
        """End reverse video, where the terminal has it."""
        if self.kind is TerminalType.VT100:
            self.write("\33[m")

    def printer_on(self) -> None:
        """Route output to the attached printer, where the terminal has one."""
        if self.kind is TerminalType.VT100:
            self.write("\33[5i")

    def printer_off(self) -> None:
        """Stop routing output to the printer."""
        if self.kind is TerminalType.VT100:
            self.write("\33[4i")

    def _send(self, text: str) -> None:
        self.write(text.replace("\n", self._linefeed()))
        self._invalidate()

    def send_string(self, text: str) -> None:
        """Send ``text`` at once, padding line feeds."""
        self._send(text)
        self.flush()

    def send_message(self, text: str) -> None:
        """Send ``text`` on a fresh line."""
        self._send("\r\n")
        self._send(text)
        self.flush()