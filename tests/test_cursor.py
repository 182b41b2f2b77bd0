# Cursor buffer tests: codepoint indexing, boundary behaviour and the
# caret split used for rendering.

import pytest

from termprompt.cursor import StringCursor


def _filled(text, position=None):
    cursor = StringCursor()
    cursor.extend(text)
    if position is not None:
        cursor.position = position
    return cursor


def test_inserts_concatenate_in_order():
    cursor = StringCursor()
    for char in "héllo 日本 🙂":
        cursor.insert(char)
    assert cursor.to_text() == "héllo 日本 🙂"
    assert cursor.position == len("héllo 日本 🙂")


def test_position_counts_codepoints_not_bytes():
    cursor = StringCursor()
    cursor.insert("日")
    cursor.insert("🙂")
    assert cursor.position == 2
    assert len(cursor) == 2


def test_delete_left_at_start_is_noop():
    cursor = _filled("abc", position=0)
    cursor.delete_left()
    assert cursor.to_text() == "abc"
    assert cursor.position == 0


def test_delete_left_on_empty_is_noop():
    cursor = StringCursor()
    cursor.delete_left()
    assert cursor.to_text() == ""
    assert cursor.position == 0


@pytest.mark.parametrize("text,position", [("", 0), ("abc", 0), ("abc", 1), ("abc", 3), ("日本語", 2)])
def test_insert_then_delete_left_is_identity(text, position):
    cursor = _filled(text, position)
    cursor.insert("x")
    cursor.delete_left()
    assert cursor.to_text() == text
    assert cursor.position == position


def test_insert_in_the_middle():
    cursor = _filled("ac", position=1)
    cursor.insert("b")
    assert cursor.to_text() == "abc"
    assert cursor.position == 2


def test_split_marks_caret():
    assert _filled("abc", position=1).split() == ("a", "b", "c")
    assert _filled("abc", position=0).split() == ("", "a", "bc")


def test_split_caret_empty_at_end():
    assert _filled("abc").split() == ("abc", "", "")
    assert StringCursor().split() == ("", "", "")


def test_to_text_ignores_position():
    assert _filled("abc", position=1).to_text() == "abc"
    assert str(_filled("abc", position=0)) == "abc"


def test_movement_stays_in_bounds():
    cursor = _filled("ab")
    cursor.move_right()
    assert cursor.position == 2
    cursor.move_home()
    cursor.move_left()
    assert cursor.position == 0
    cursor.move_end()
    assert cursor.position == 2


def test_delete_right():
    cursor = _filled("abc", position=1)
    cursor.delete_right()
    assert cursor.to_text() == "ac"
    assert cursor.position == 1
    cursor.move_end()
    cursor.delete_right()
    assert cursor.to_text() == "ac"


def test_word_movement_and_deletion():
    cursor = _filled("hello big world")
    cursor.move_left_by_word()
    assert cursor.position == len("hello big ")
    cursor.move_left_by_word()
    assert cursor.position == len("hello ")
    cursor.move_right_by_word()
    assert cursor.position == len("hello big ")

    cursor.move_end()
    cursor.delete_word_left()
    assert cursor.to_text() == "hello big "
    assert cursor.position == len("hello big ")


def test_initial_text_puts_cursor_at_end():
    cursor = StringCursor("abc")
    assert cursor.position == 3
    cursor.clear()
    assert cursor.is_empty()
    assert cursor.position == 0
