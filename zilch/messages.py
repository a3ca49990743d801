"""The message line at the foot of the screen."""

from __future__ import annotations

from collections.abc import Iterator

MAX_PROMPT = 129


def _render_chars(text: str, column: int) -> Iterator[str]:
    """Yield the display form of each character, starting at ``column`` cells."""
    for char in text:
        code = ord(char)
        if " " <= char <= "~":
            piece = char
        elif char == "\t":
            piece = " " * (8 - column % 8)
        elif code <= 0o37:
            piece = "^" + chr(code | 0o100)
        else:
            piece = f"\\{code & 0o377:03o}"
        column += len(piece)
        yield piece


def render_control_text(text: str) -> str:
    """Show ``text`` with tabs expanded and control characters made visible."""
    return "".join(_render_chars(text, 0))


class MessageLine:
    """The text of the message line and where the cursor sits on it.

    Once an error has been shown, further messages are ignored until
    :meth:`reset_error` is called; ``bell`` asks for the bell to ring.
    """

    def __init__(self, width: int = 80) -> None:
        self.width = width
        self.text = ""
        self.cursor = 1
        self.error_occurred = False
        self.bell = False

    def _place_cursor(self) -> None:
        self.cursor = min(self.width, len(self.text) + 1)

    def message(self, text: str, extra: str | None = None) -> None:
        """Show ``text``, followed by ``extra`` if given."""
        if self.error_occurred:
            return
        self.text = text + (extra or "")
        self._place_cursor()

    def prompt_message(self, prefix: str, text: str, cursor: int) -> None:
        """Show ``prefix`` and a visible form of ``text``, the cursor after its ``cursor``-th character."""
        if self.error_occurred:
            return
        line = prefix
        column = len(prefix)
        position = column + 1
        for count, piece in enumerate(_render_chars(text, column), 1):
            line += piece
            column += len(piece)
            if count == cursor:
                position = column + 1
        self.text = line
        self.cursor = min(self.width, position)

    def add(self, text: str) -> None:
        """Append ``text`` to the message."""
        if self.error_occurred:
            return
        self.text += text
        self._place_cursor()

    def error(self, text: str = "") -> None:
        """Show ``text`` as an error and hold it until the error is reset."""
        if not self.error_occurred and text:
            self.text = text
            self._place_cursor()
        self.error_occurred = True
        self.bell = True

    def report_number(self, prefix: str, number: int, suffix: str) -> None:
        """Show ``number`` between ``prefix`` and ``suffix``."""
        if self.error_occurred:
            return
        self.message(prefix)
        self.add(str(number))
        self.add(suffix)

    def report_count(self, prefix: str, number: int, singular: str, plural: str) -> None:
        """Show ``number`` followed by the singular or plural ending."""
        self.report_number(prefix, number, singular if number == 1 else plural)

    def user_message(self, text: str, percent: int) -> None:
        """Show a user's message; the first ``%`` becomes ``percent``, a leading ``!`` an error."""
        index = text.find("%")
        if index >= 0 and index + 4 < MAX_PROMPT:
            text = f"{text[:index]}{percent:>3}%{text[index + 4:]}"
        if text.startswith("!"):
            self.error(text[1:])
        else:
            self.message(text)

    def reset_error(self) -> bool:
        """Allow messages again; return whether an error had been shown."""
        was = self.error_occurred
        self.error_occurred = False
        return was