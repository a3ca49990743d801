"""Word classes and movement over words."""

from __future__ import annotations

from .text import NEWLINE, Buffer

MAX_WORD_CLASS = 10
DEFAULT_WORD_CLASSES = "A-Za-z~0-9,0-9~.A-Za-z,)"


class WordClasses:
    """Definitions of what counts as a word.

    A specification is a comma-separated list of classes. Within a class,
    characters before ``~`` are primary members, which may start a word;
    characters after it are secondary members, which may only continue one.
    Ranges are written ``A-Z``; ``^X`` is a control character; ``\\n``,
    ``\\t`` and ``\\ddd`` (octal) are escapes; ``""`` is a double quote.
    """

    def __init__(self, spec: str = DEFAULT_WORD_CLASSES, max_class: int = MAX_WORD_CLASS) -> None:
        self.max_class = max_class
        self._primary: dict[int, int] = {}
        self._classes: dict[int, set[int]] = {}
        self.define(spec, 1)

    def define(self, spec: str, start_class: int = 1) -> None:
        """Define classes from ``spec``, numbering them from ``start_class``.

        Raises ValueError when the specification holds more classes than fit.
        """
        self._primary.clear()
        length = len(spec)
        i = 0
        char: int | None = None
        last = 0
        word_class = start_class
        while word_class <= self.max_class:
            members: set[int] = set()
            self._classes[word_class] = members
            range_state = -1
            secondary = False

            def add(code: int) -> None:
                members.add(code)
                if not secondary:
                    self._primary[code] = word_class

            while True:
                if i >= length:
                    return
                ch = spec[i]
                if ch == ",":
                    i += 1
                    break
                if ch == '"':
                    if i + 1 < length and spec[i + 1] == '"':
                        i += 1
                        char = ord('"')
                    else:
                        i += 1
                        continue
                elif ch == "-":
                    if range_state != 0:
                        char = ord("-")
                    else:
                        range_state = 1
                elif ch == "~":
                    secondary = True
                elif ch == "^":
                    i += 1
                    if i >= length:
                        return
                    nxt = spec[i]
                    char = ord(nxt.upper() if "a" <= nxt <= "z" else nxt) - 0o100
                elif ch == "\\":
                    i += 1
                    if i >= length:
                        return
                    nxt = spec[i]
                    if "0" <= nxt <= "9":
                        value = 0
                        while i < length and "0" <= spec[i] <= "9":
                            value = value * 8 + int(spec[i])
                            i += 1
                        i -= 1
                        char = value
                    elif nxt in "nN":
                        char = ord(NEWLINE)
                    elif nxt in "tT":
                        char = ord("\t")
                    else:
                        char = ord(nxt)
                else:
                    char = ord(ch)
                i += 1
                if range_state in (-1, 0):
                    if char is None:
                        continue
                    range_state = 0
                    last = char
                    add(char)
                elif range_state == 1:
                    range_state = 2
                else:
                    range_state = 0
                    for code in range(last, char + 1):
                        add(code)
                    last = char
            word_class += 1
        raise ValueError(f"too many word classes (at most {self.max_class})")

    def primary_class(self, char: str) -> int:
        """Return the class a word starting with ``char`` belongs to, or 0."""
        return self._primary.get(ord(char), 0)

    def in_class(self, char: str, word_class: int) -> bool:
        """Tell whether ``char`` belongs to ``word_class``; class 0 means any primary."""
        if word_class == 0:
            return self.primary_class(char) != 0
        return ord(char) in self._classes.get(word_class, ())


def skip_non_word(buffer: Buffer, position: int, end: int, step: int,
                  cross_lines: bool, classes: WordClasses, word_class: int) -> int:
    """Move from ``position`` towards ``end`` until a character of ``word_class``."""
    while position != end:
        char = buffer.char_at(position)
        if classes.in_class(char, word_class):
            break
        if char == NEWLINE and not cross_lines:
            break
        position += step
    return position


def skip_word(buffer: Buffer, position: int, end: int, step: int,
              classes: WordClasses, word_class: int) -> int:
    """Move from ``position`` towards ``end`` over characters of ``word_class``."""
    while position != end and classes.in_class(buffer.char_at(position), word_class):
        position += step
    return position


def next_word(buffer: Buffer, position: int, classes: WordClasses, cross_lines: bool = False) -> int:
    """Return the position just past the next word."""
    end = buffer.size + 1
    position = skip_non_word(buffer, position, end, 1, cross_lines, classes, 0)
    word_class = classes.primary_class(buffer.char_at(position))
    return skip_word(buffer, position, end, 1, classes, word_class)


def previous_word(buffer: Buffer, position: int, classes: WordClasses, cross_lines: bool = False) -> int:
    """Return the position of the start of the previous word."""
    if position <= 1:
        return position
    position = skip_non_word(buffer, position - 1, 0, -1, cross_lines, classes, 0)
    word_class = classes.primary_class(buffer.char_at(position))
    return skip_word(buffer, position, 0, -1, classes, word_class) + 1