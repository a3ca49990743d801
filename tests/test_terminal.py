import io

import pytest

from zilch.terminal import SCREEN_SIZE, Terminal, TerminalType


def test_unknown_type_raises():
    term = Terminal()
    with pytest.raises(ValueError):
        term.set_type("teletype")
    assert term.kind is TerminalType.VT100


def test_set_type_vt52_clear():
    term = Terminal()
    term.set_type("VT52")
    assert term.kind is TerminalType.VT52
    term.clear()
    assert term.output == "\33H\33J"
    assert (term.pos_x, term.pos_y) == (1, 1)


@pytest.mark.parametrize("kind, expected", [
    (TerminalType.VT100, "\33[2J\33[H"),
    (TerminalType.ADM3A, "\33;\32"),
    (TerminalType.ADM5, "\33;\32"),
])
def test_clear_sequences(kind, expected):
    term = Terminal(kind)
    term.clear()
    assert term.output == expected


def test_vt100_position():
    term = Terminal()
    term.position(5, 10)
    assert term.output == "\33[5;10H"
    assert (term.pos_x, term.pos_y) == (10, 5)


def test_position_backspaces_for_short_moves():
    term = Terminal()
    term.position(3, 10)
    term.flush()
    term.position(3, 8)
    assert term.output == "\b" * 2


def test_position_unchanged_writes_nothing():
    term = Terminal()
    term.position(3, 10)
    term.flush()
    term.position(3, 10)
    assert term.output == ""


def test_vt52_position_shape():
    term = Terminal(TerminalType.VT52)
    term.position(2, 4)
    out = term.output
    assert out.startswith("\33Y")
    assert len(out) == 4


def test_init_sequence_vt100():
    term = Terminal()
    term.init_sequence(80)
    assert term.output == "\33<\33[?6h\33[;r\33>\33[?7l\33[?1l\33[m"
    assert term.pos_x > term.size_x


def test_init_sequence_wide_screen_on_narrow_tty():
    term = Terminal(tty_width=80)
    term.init_sequence(132)
    assert term.output.endswith("\33[?3h")


def test_finish_vt100_and_vt52():
    term = Terminal(tty_width=132)
    term.finish(80)
    assert term.output == "\33[?6l\33[;r\33>" + "\33[?3h"
    term52 = Terminal(TerminalType.VT52)
    term52.finish(80)
    assert term52.output == "\33>"


def test_erase_short_and_long():
    term = Terminal()
    term.position(1, 1)
    term.flush()
    term.erase_to_end_of_line(10, 8)
    assert term.output == " " * 2
    assert term.pos_x == 3
    term.flush()
    term.erase_to_end_of_line(40, 8)
    assert term.output == "\33[K"


def test_adm3a_erase_always_blanks():
    term = Terminal(TerminalType.ADM3A)
    term.erase_to_end_of_line(30, 10)
    assert term.output == " " * 20


def test_vt100_scroll_up():
    term = Terminal()
    term.scroll_up_lines(2, 10, 3)
    out = term.output
    assert out.startswith("\33[2;10r")
    assert out.endswith("\33[;r")
    assert out.count("\n") == 3


def test_adm_scroll_up_pads_linefeeds():
    term = Terminal(TerminalType.ADM3A, lf_fill=2)
    term.scroll_up_lines(1, 24, 2)
    out = term.output
    assert out.count("\n") == 2
    assert out.count("\0") == 2 * term.lf_fill


def test_scroll_down():
    term = Terminal()
    term.scroll_down_lines(3, 12, 4)
    assert term.output.count("\33M") == 4
    assert term.pos_y == 1


def test_width_and_length():
    term = Terminal(tty_length=24)
    term.set_width(100)
    assert term.size_x == 132
    term.set_length(20)
    assert term.size_y == 24
    with pytest.raises(ValueError):
        term.set_length(SCREEN_SIZE + 1)
    adm = Terminal(TerminalType.ADM5)
    with pytest.raises(ValueError):
        adm.set_width(132)


def test_reverse_video_only_vt100():
    term = Terminal()
    term.reverse_video()
    term.reverse_video_off()
    assert term.output == "\33[7m\33[m"
    other = Terminal(TerminalType.VT52)
    other.reverse_video()
    other.printer_on()
    assert other.output == ""


def test_printer_sequences():
    term = Terminal()
    term.printer_on()
    term.printer_off()
    assert term.output == "\33[5i\33[4i"


def test_send_string_flushes_to_stream():
    stream = io.StringIO()
    term = Terminal(stream=stream, lf_fill=3)
    term.send_string("ab\ncd")
    assert term.output == ""
    assert stream.getvalue().count("\0") == term.lf_fill
    assert stream.getvalue().replace("\0", "") == "ab\ncd"


def test_send_message_starts_new_line():
    stream = io.StringIO()
    term = Terminal(stream=stream)
    term.send_message("hello")
    assert stream.getvalue() == "\r\nhello"


def test_set_type_discards_pending_output():
    term = Terminal()
    term.write("junk")
    term.set_type("adm5")
    assert term.output == ""
    assert term.flush() == ""