import pytest

from gameframe.textedit_layout import (
    MonospaceBuffer,
    clamp,
    click,
    cut,
    delete,
    delete_selection,
    drag,
    find_charpos,
    is_word_boundary,
    locate_coord,
    move_to_first,
    move_to_last,
    move_to_word_next,
    move_to_word_previous,
    paste,
    prep_selection_at_cursor,
    sort_selection,
)
from gameframe.textedit_state import TextEditState, redo, undo


def make(text, single_line=False):
    return MonospaceBuffer(text, char_width=10.0, line_height=20.0), TextEditState(single_line=single_line)


def test_buffer_insert_delete_round_trip():
    buf = MonospaceBuffer("hello")
    assert buf.insert_chars(2, "XY") is True
    assert str(buf) == "heXYllo"
    buf.delete_chars(2, 2)
    assert str(buf) == "hello"
    assert len(buf) == len("hello")


def test_buffer_rejects_bad_sizes():
    with pytest.raises(ValueError):
        MonospaceBuffer("a", char_width=0.0)
    with pytest.raises(ValueError):
        MonospaceBuffer("a", line_height=-1.0)


def test_layout_row_includes_newline():
    text = "ab\ncd"
    buf = MonospaceBuffer(text, char_width=10.0, line_height=20.0)
    row = buf.layout_row(0)
    assert row.num_chars == text.index("\n") + 1
    assert row.ymax - row.ymin == buf.line_height
    last = buf.layout_row(row.num_chars)
    assert row.num_chars + last.num_chars == len(text)


def test_layout_row_empty():
    buf = MonospaceBuffer("")
    assert buf.layout_row(0).num_chars == 0


def test_char_at_out_of_range():
    buf = MonospaceBuffer("ab")
    with pytest.raises(IndexError):
        buf.char_at(5)


def test_locate_coord_limits():
    buf, _ = make("hello\nworld")
    assert locate_coord(buf, 0.0, -5.0) == 0
    assert locate_coord(buf, 0.0, 1000.0) == len(buf)
    assert locate_coord(buf, -5.0, 5.0) == 0


def test_locate_coord_end_of_line_stops_before_newline():
    text = "hello\nworld"
    buf, _ = make(text)
    assert locate_coord(buf, 1000.0, 5.0) == text.index("\n")


def test_locate_coord_rounds_to_nearest_boundary():
    buf, _ = make("hello")
    left = locate_coord(buf, 21.0, 5.0)
    right = locate_coord(buf, 29.0, 5.0)
    assert right == left + 1


def test_click_collapses_selection():
    buf, state = make("hello world")
    state.select_start, state.select_end = 1, 4
    click(buf, state, 35.0, 5.0)
    assert state.cursor == state.select_start == state.select_end
    assert not state.has_selection()


def test_click_single_line_ignores_y():
    buf, state = make("hello", single_line=True)
    click(buf, state, 1000.0, 9999.0)
    assert state.cursor == len(buf)


def test_drag_makes_selection():
    buf, state = make("hello world")
    click(buf, state, 0.0, 5.0)
    drag(buf, state, 1000.0, 5.0)
    assert state.has_selection()
    assert state.select_start == 0
    assert state.select_end == state.cursor == len(buf)


def test_find_charpos_second_line():
    text = "ab\ncd"
    buf, _ = make(text)
    second = text.index("\n") + 1
    find = find_charpos(buf, second, False)
    assert find.first_char == second
    assert find.y == buf.line_height
    assert find.prev_first == 0
    assert find.x == 0.0


def test_find_charpos_single_line_end():
    buf, _ = make("abc", single_line=True)
    find = find_charpos(buf, len(buf), True)
    assert find.length == len(buf)
    assert find.x == buf.layout_row(0).x1


def test_clamp_after_shrinking_text():
    buf, state = make("hello")
    state.cursor = 5
    state.select_start, state.select_end = 3, 5
    buf.delete_chars(0, 4)
    clamp(buf, state)
    assert state.cursor <= len(buf)
    assert state.select_start <= len(buf)
    assert state.select_end <= len(buf)


def test_delete_then_undo_restores():
    buf, state = make("hello")
    delete(buf, state, 1, 3)
    assert str(buf) == "ho"
    undo(buf, state)
    assert str(buf) == "hello"
    redo(buf, state)
    assert str(buf) == "ho"


def test_delete_selection_reversed():
    buf, state = make("hello world")
    state.select_start, state.select_end = 5, 0
    delete_selection(buf, state)
    assert str(buf) == " world"
    assert state.cursor == state.select_start == state.select_end == 0


def test_sort_selection_orders():
    state = TextEditState()
    state.select_start, state.select_end = 7, 2
    sort_selection(state)
    assert (state.select_start, state.select_end) == (2, 7)


def test_move_to_first_and_last():
    buf, state = make("hello world")
    state.select_start, state.select_end = 6, 2
    move_to_first(state)
    assert state.cursor == 2 and not state.has_selection()
    state.select_start, state.select_end = 6, 2
    move_to_last(buf, state)
    assert state.cursor == 6 and not state.has_selection()


def test_word_movement():
    text = "foo bar"
    buf, _ = make(text)
    start_of_bar = text.index("bar")
    assert move_to_word_next(buf, 0) == start_of_bar
    assert move_to_word_next(buf, start_of_bar) == len(text)
    assert move_to_word_previous(buf, len(text)) == start_of_bar
    assert move_to_word_previous(buf, start_of_bar) == 0
    assert is_word_boundary(buf, 0) is True
    assert is_word_boundary(buf, start_of_bar) is True
    assert is_word_boundary(buf, 1) is False


def test_prep_selection_at_cursor():
    state = TextEditState()
    state.cursor = 3
    prep_selection_at_cursor(state)
    assert state.select_start == state.select_end == 3
    state.select_start, state.select_end = 1, 4
    prep_selection_at_cursor(state)
    assert state.cursor == 4


def test_cut_without_selection():
    buf, state = make("hello")
    assert cut(buf, state) is False
    assert str(buf) == "hello"


def test_cut_with_selection():
    buf, state = make("hello")
    state.select_start, state.select_end = 0, 2
    assert cut(buf, state) is True
    assert str(buf) == "llo"


def test_paste_and_undo():
    buf, state = make("hello")
    state.cursor = 5
    assert paste(buf, state, " world") is True
    assert str(buf) == "hello world"
    assert state.cursor == len("hello world")
    undo(buf, state)
    assert str(buf) == "hello"


def test_paste_replaces_selection_and_undoes_fully():
    buf, state = make("hello")
    state.select_start, state.select_end = 0, 5
    paste(buf, state, "bye")
    assert str(buf) == "bye"
    undo(buf, state)
    undo(buf, state)
    assert str(buf) == "hello"