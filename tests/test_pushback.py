from zilch.pushback import PushbackStack
from zilch.text import Buffer


def _drain(stack):
    items = []
    while True:
        item = stack.next_character()
        if item is None:
            return items
        items.append(item)


def test_push_string_reads_in_order():
    stack = PushbackStack()
    stack.push_string("abc")
    assert "".join(_drain(stack)) == "abc"
    assert stack.next_character() is None


def test_push_character_goes_ahead_of_string():
    stack = PushbackStack()
    stack.push_string("xyz")
    stack.push_character("q")
    assert "".join(_drain(stack)) == "q" + "xyz"


def test_push_region_copies_from_buffer():
    buf = Buffer(text="hello world")
    stack = PushbackStack()
    stack.push_region(buf, 1, 6)
    assert "".join(_drain(stack)) == "hello"
    assert buf.text == "hello world"


def test_push_back_flag():
    stack = PushbackStack()
    stack.push_character("a")
    stack.push_back_character("b")
    assert stack.next_character() == "b"
    assert stack.last_pushed_back is True
    assert stack.next_character() == "a"
    assert stack.last_pushed_back is False


def test_push_back_text_order():
    stack = PushbackStack()
    stack.push_back_text("12")
    assert "".join(_drain(stack)) == "12"


def test_integer_markers_pass_through():
    stack = PushbackStack()
    stack.push_character(-1)
    stack.push_string("ab")
    assert _drain(stack) == ["a", "b", -1]


def test_clear_empties():
    stack = PushbackStack()
    stack.push_string("abc")
    assert len(stack) == 3
    stack.clear()
    assert len(stack) == 0
    assert stack.next_character() is None