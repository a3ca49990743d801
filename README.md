# zilch

Building blocks of a small screen editor, as a Python library. It has no
command-line program. You use the pieces from Python to build an editor or to
try out editing behaviour.

## Modules

- `zilch.text`: `Buffer` holds a named sequence of characters, addressed
  from position 1.
  - It has `insert_text`, `insert_character`, `delete`, `text_between`,
    `copy_text_to` and `clear`.
  - `search_forward` and `search_reverse` find text without regard to letter
    case and return a position or `None`.
  - `case_change` converts a range to upper or lower case.
  - `find_bol` and `find_eol` find the start and end of a line.
  - A `Mark` linked into a buffer, with `link_mark` or `set_mark`, moves as
    text is inserted and deleted. So do the `dot` and `bow` positions of views
    registered with `attach_view`.
  - `set_mark` does not track marks set to 0 or 1.
- `zilch.words`: `WordClasses` defines what a "word" is from a compact
  specification. The default is `"A-Za-z~0-9,0-9~.A-Za-z,)"`.
  - Commas separate classes.
  - Characters before `~` may start a word; characters after it may only
    continue one.
  - The specification also accepts ranges, `^X` control characters, and the
    escapes `\n`, `\t` and `\ddd` (octal).
  - `next_word`, `previous_word`, `skip_word` and `skip_non_word` move
    positions through a buffer by word.
- `zilch.pushback`: `PushbackStack` is a stack of characters (or integer
  markers) that are read again before fresh input. `last_pushed_back` tells
  whether the item last read was pushed back with `push_back_character` or
  `push_back_text`.
- `zilch.terminal`: `Terminal` queues control sequences for VT100, VT52,
  ADM3A and ADM5 terminals (`TerminalType`).
  - It covers cursor positioning, clearing, init and finish sequences, scroll
    regions, erase to end of line, reverse video and printer on/off.
  - `set_type`, `set_width` and `set_length` raise `ValueError` for values
    the terminal cannot handle.
  - `flush` writes the queued output to the stream, if one was given, and
    returns it.
- `zilch.messages`: `MessageLine` is the line of text at the foot of the
  screen, with a cursor position.
  - After `error` it ignores further messages until `reset_error` is called.
  - `report_count` picks a singular or plural ending.
  - `render_control_text` expands tabs and shows control characters as `^X`
    and other characters as octal escapes.
- `zilch.window`: `Window` is a view of a buffer with `dot`, `bow` and a
  height. `WindowLayout` splits, enlarges, shrinks, pops up, deletes and
  equalises windows, and moves between them.
- `zilch.page`: `PageSet` keeps numbered pages in order, each with its own
  `WindowLayout`.
  - `switch` copies the current page's layout when it goes to a page that
    does not exist yet.
  - `next_page` and `previous_page` raise `LookupError` at either end.

## Example

```python
from zilch.text import Buffer
from zilch.words import WordClasses, next_word
from zilch.terminal import Terminal, TerminalType
from zilch.messages import MessageLine

buffer = Buffer("notes", "hello world\n")
classes = WordClasses()

print(next_word(buffer, 1, classes, False))           # 6, just past "hello"
print(buffer.search_forward(1, buffer.size, "WORLD"))  # 7

terminal = Terminal(TerminalType.VT100)
terminal.position(5, 10)
print(repr(terminal.flush()))                          # '\x1b[5;10H'

line = MessageLine()
line.report_count("Deleted ", 3, " character.", " characters.")
print(line.text)                                       # Deleted 3 characters.
```

## What it does not do

These are parts, not a working editor. The library has none of the following:

- a keyboard reading loop;
- a session object that ties buffers, windows and pages to editing commands;
- reading or writing files;
- language-aware templates or procedure navigation;
- work out how to redraw a changed screen.

`Terminal` only produces the control sequences. Deciding which lines to send
is left to the caller.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```