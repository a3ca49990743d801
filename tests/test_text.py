from dataclasses import dataclass

import pytest

from zilch.text import Buffer, Mark


@dataclass(eq=False)
class View:
    dot: int = 1
    bow: int = 1
    modified: bool = False


def test_char_at_and_hidden_newline():
    buf = Buffer(text="ab")
    assert buf.char_at(1) == "a"
    assert buf.char_at(2) == "b"
    assert buf.char_at(3) == "\n"


def test_insert_text_shifts_later_positions():
    original = "abcdef"
    buf = Buffer(text=original)
    view = View(dot=3, bow=1)
    buf.attach_view(view)
    mark = Mark()
    buf.set_mark(mark, 3)
    buf.insert_text(2, "XY")
    assert buf.text == original[:1] + "XY" + original[1:]
    assert view.dot == 5
    assert mark.position == 5
    assert view.modified is True
    assert buf.modified is True


def test_insert_at_dot_leaves_dot():
    buf = Buffer(text="abc")
    view = View(dot=2, bow=1)
    buf.attach_view(view)
    buf.insert_character("z", 2)
    assert view.dot == 2
    assert buf.char_at(2) == "z"


def test_insert_out_of_range_raises():
    buf = Buffer(text="abc")
    with pytest.raises(IndexError):
        buf.insert_text(10, "x")


def test_delete_range_and_positions():
    original = "abcdef"
    buf = Buffer(text=original)
    after = View(dot=6, bow=1)
    inside = View(dot=3, bow=1)
    buf.attach_view(after)
    buf.attach_view(inside)
    buf.delete(2, 3)
    assert buf.text == original[:1] + original[3:]
    assert after.dot == 6 - 2
    assert inside.dot == 2


def test_delete_then_insert_round_trip():
    original = "hello world"
    buf = Buffer(text=original)
    removed = buf.text_between(3, 7)
    buf.delete(3, 7)
    buf.insert_text(3, removed)
    assert buf.text == original


def test_delete_out_of_range_raises():
    buf = Buffer(text="abc")
    with pytest.raises(IndexError):
        buf.delete(2, 9)


def test_delete_moves_marks_inside_to_start():
    buf = Buffer(text="abcdef")
    mark = Mark()
    buf.set_mark(mark, 4)
    buf.delete(2, 5)
    assert mark.position == 2


def test_set_mark_returns_previous_and_links():
    buf = Buffer(text="abcdef")
    mark = Mark()
    assert buf.set_mark(mark, 4) == 0
    assert any(m is mark for m in buf.markers)
    assert buf.set_mark(mark, 1) == 4
    assert not any(m is mark for m in buf.markers)


def test_link_mark_twice_keeps_one_entry():
    buf = Buffer(text="abc")
    mark = Mark(3)
    buf.link_mark(mark)
    buf.link_mark(mark)
    assert len(buf.markers) == 1
    buf.unlink_mark(mark)
    assert buf.markers == []


def test_search_forward_ignores_case():
    buf = Buffer(text="Hello World")
    pos = buf.search_forward(1, buf.size, "world")
    assert buf.text_between(pos, pos + 4) == "World"


def test_search_forward_respects_end():
    buf = Buffer(text="Hello World")
    assert buf.search_forward(1, 8, "world") is None


def test_search_reverse_finds_last():
    buf = Buffer(text="abc abc")
    assert buf.search_reverse(1, buf.size, "ABC") == buf.text.rindex("abc") + 1
    assert buf.search_forward(1, buf.size, "ABC") == buf.text.index("abc") + 1


def test_search_reverse_nonpositive_end():
    buf = Buffer(text="abc")
    assert buf.search_reverse(1, 0, "a") is None


def test_case_change_round_trip_and_views():
    original = "Mixed Case 123"
    buf = Buffer(text=original)
    early = View(dot=1, bow=1)
    late = View(dot=14, bow=14)
    buf.attach_view(early)
    buf.attach_view(late)
    buf.case_change(1, 5, True)
    assert buf.text == original[:5].upper() + original[5:]
    assert early.modified is True
    assert late.modified is False
    buf.case_change(1, buf.size, False)
    assert buf.text == original.lower()


def test_find_bol_and_eol():
    buf = Buffer(text="ab\ncd")
    c_pos = buf.text.index("c") + 1
    assert buf.find_bol(c_pos + 1) == c_pos
    assert buf.find_eol(1) == buf.text.index("\n") + 1
    assert buf.find_eol(c_pos) == buf.size + 1


def test_copy_text_to_other_buffer():
    source = Buffer(text="hello world")
    target = Buffer(text="[]")
    source.copy_text_to(1, target, 2, 5)
    assert target.text == "[" + "hello" + "]"
    assert source.text == "hello world"


def test_clear_and_detach():
    buf = Buffer(text="abc")
    view = View(dot=3, bow=1)
    buf.attach_view(view)
    buf.detach_view(view)
    buf.clear()
    assert buf.size == 0
    assert view.dot == 3