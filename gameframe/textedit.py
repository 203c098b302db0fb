"""Keyboard handling for a text field, and an editor object tying it together."""

from __future__ import annotations

import enum

from .textedit_layout import (
    NEWLINE,
    NEWLINE_WIDTH,
    MonospaceBuffer,
    clamp,
    delete,
    delete_selection,
    find_charpos,
    move_to_first,
    move_to_last,
    move_to_word_next,
    move_to_word_previous,
    prep_selection_at_cursor,
)
from .textedit_layout import click as _click
from .textedit_layout import cut as _cut
from .textedit_layout import drag as _drag
from .textedit_layout import paste as _paste
from .textedit_state import (
    TextBuffer,
    TextEditState,
    make_undo_insert,
    make_undo_replace,
)
from .textedit_state import redo as _redo
from .textedit_state import undo as _undo

_CONTROL = 0x200000


class Key(enum.IntEnum):
    """Control key codes; SHIFT is a bit or'd into another key.

    Any code below the control range is a character code point.
    """

    LEFT = _CONTROL | 1
    RIGHT = _CONTROL | 2
    UP = _CONTROL | 3
    DOWN = _CONTROL | 4
    PGUP = _CONTROL | 5
    PGDOWN = _CONTROL | 6
    LINESTART = _CONTROL | 7
    LINEEND = _CONTROL | 8
    TEXTSTART = _CONTROL | 9
    TEXTEND = _CONTROL | 10
    DELETE = _CONTROL | 11
    BACKSPACE = _CONTROL | 12
    UNDO = _CONTROL | 13
    REDO = _CONTROL | 14
    INSERT = _CONTROL | 15
    WORDLEFT = _CONTROL | 16
    WORDRIGHT = _CONTROL | 17
    SHIFT = 0x400000


def _key_to_text(code: int) -> int:
    return code if 0 <= code < _CONTROL else -1


def _normalise(key_code: int | str) -> int:
    if isinstance(key_code, str):
        if len(key_code) != 1:
            raise ValueError(f"a key must be a single character, got {key_code!r}")
        return ord(key_code)
    return int(key_code)


def _insert_char(buffer: TextBuffer, state: TextEditState, code: int) -> None:
    ch = chr(code)
    if ch == NEWLINE and state.single_line:
        return
    if state.insert_mode and not state.has_selection() and state.cursor < len(buffer):
        make_undo_replace(buffer, state, state.cursor, 1, 1)
        buffer.delete_chars(state.cursor, 1)
        if buffer.insert_chars(state.cursor, ch):
            state.cursor += 1
            state.has_preferred_x = False
    else:
        delete_selection(buffer, state)
        if buffer.insert_chars(state.cursor, ch):
            make_undo_insert(state, state.cursor, 1)
            state.cursor += 1
            state.has_preferred_x = False


def _scan_row(buffer: TextBuffer, state: TextEditState, start: int, goal_x: float) -> int:
    """Move the cursor along the row starting at start until it passes goal_x."""
    state.cursor = start
    row = buffer.layout_row(state.cursor)
    x = row.x0
    for i in range(row.num_chars):
        dx = buffer.width(start, i)
        if dx == NEWLINE_WIDTH:
            break
        x += dx
        if x > goal_x:
            break
        state.cursor += 1
    clamp(buffer, state)
    return row.num_chars


def _move_down(buffer: TextBuffer, state: TextEditState, sel: bool, row_count: int) -> None:
    if sel:
        prep_selection_at_cursor(state)
    elif state.has_selection():
        move_to_last(buffer, state)

    clamp(buffer, state)
    find = find_charpos(buffer, state.cursor, state.single_line)

    for _ in range(row_count):
        goal_x = state.preferred_x if state.has_preferred_x else find.x
        start = find.first_char + find.length
        if find.length == 0:
            break
        if buffer.char_at(find.first_char + find.length - 1) != NEWLINE:
            break
        num_chars = _scan_row(buffer, state, start, goal_x)
        state.has_preferred_x = True
        state.preferred_x = goal_x
        if sel:
            state.select_end = state.cursor
        find.first_char = find.first_char + find.length
        find.length = num_chars


def _move_up(buffer: TextBuffer, state: TextEditState, sel: bool, row_count: int) -> None:
    if sel:
        prep_selection_at_cursor(state)
    elif state.has_selection():
        move_to_first(state)

    clamp(buffer, state)
    find = find_charpos(buffer, state.cursor, state.single_line)

    for _ in range(row_count):
        goal_x = state.preferred_x if state.has_preferred_x else find.x
        if find.prev_first == find.first_char:
            break
        _scan_row(buffer, state, find.prev_first, goal_x)
        state.has_preferred_x = True
        state.preferred_x = goal_x
        if sel:
            state.select_end = state.cursor
        prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
        while prev_scan > 0 and buffer.char_at(prev_scan - 1) != NEWLINE:
            prev_scan -= 1
        find.first_char = find.prev_first
        find.prev_first = prev_scan


def _line_start(buffer: TextBuffer, state: TextEditState) -> None:
    if state.single_line:
        state.cursor = 0
    else:
        while state.cursor > 0 and buffer.char_at(state.cursor - 1) != NEWLINE:
            state.cursor -= 1


def _line_end(buffer: TextBuffer, state: TextEditState) -> None:
    n = len(buffer)
    if state.single_line:
        state.cursor = n
    else:
        while state.cursor < n and buffer.char_at(state.cursor) != NEWLINE:
            state.cursor += 1


def _dispatch(buffer: TextBuffer, state: TextEditState, code: int) -> None:
    shift = Key.SHIFT

    if code == Key.INSERT:
        state.insert_mode = not state.insert_mode
    elif code == Key.UNDO:
        _undo(buffer, state)
        state.has_preferred_x = False
    elif code == Key.REDO:
        _redo(buffer, state)
        state.has_preferred_x = False
    elif code == Key.LEFT:
        if state.has_selection():
            move_to_first(state)
        elif state.cursor > 0:
            state.cursor -= 1
        state.has_preferred_x = False
    elif code == Key.RIGHT:
        if state.has_selection():
            move_to_last(buffer, state)
        else:
            state.cursor += 1
        clamp(buffer, state)
        state.has_preferred_x = False
    elif code == Key.LEFT | shift:
        clamp(buffer, state)
        prep_selection_at_cursor(state)
        if state.select_end > 0:
            state.select_end -= 1
        state.cursor = state.select_end
        state.has_preferred_x = False
    elif code == Key.WORDLEFT:
        if state.has_selection():
            move_to_first(state)
        else:
            state.cursor = move_to_word_previous(buffer, state.cursor)
            clamp(buffer, state)
    elif code == Key.WORDLEFT | shift:
        if not state.has_selection():
            prep_selection_at_cursor(state)
        state.cursor = move_to_word_previous(buffer, state.cursor)
        state.select_end = state.cursor
        clamp(buffer, state)
    elif code == Key.WORDRIGHT:
        if state.has_selection():
            move_to_last(buffer, state)
        else:
            state.cursor = move_to_word_next(buffer, state.cursor)
            clamp(buffer, state)
    elif code == Key.WORDRIGHT | shift:
        if not state.has_selection():
            prep_selection_at_cursor(state)
        state.cursor = move_to_word_next(buffer, state.cursor)
        state.select_end = state.cursor
        clamp(buffer, state)
    elif code == Key.RIGHT | shift:
        prep_selection_at_cursor(state)
        state.select_end += 1
        clamp(buffer, state)
        state.cursor = state.select_end
        state.has_preferred_x = False
    elif code in (Key.DELETE, Key.DELETE | shift):
        if state.has_selection():
            delete_selection(buffer, state)
        elif state.cursor < len(buffer):
            delete(buffer, state, state.cursor, 1)
        state.has_preferred_x = False
    elif code in (Key.BACKSPACE, Key.BACKSPACE | shift):
        if state.has_selection():
            delete_selection(buffer, state)
        else:
            clamp(buffer, state)
            if state.cursor > 0:
                delete(buffer, state, state.cursor - 1, 1)
                state.cursor -= 1
        state.has_preferred_x = False
    elif code == Key.TEXTSTART:
        state.cursor = state.select_start = state.select_end = 0
        state.has_preferred_x = False
    elif code == Key.TEXTEND:
        state.cursor = len(buffer)
        state.select_start = state.select_end = 0
        state.has_preferred_x = False
    elif code == Key.TEXTSTART | shift:
        prep_selection_at_cursor(state)
        state.cursor = state.select_end = 0
        state.has_preferred_x = False
    elif code == Key.TEXTEND | shift:
        prep_selection_at_cursor(state)
        state.cursor = state.select_end = len(buffer)
        state.has_preferred_x = False
    elif code == Key.LINESTART:
        clamp(buffer, state)
        move_to_first(state)
        _line_start(buffer, state)
        state.has_preferred_x = False
    elif code == Key.LINEEND:
        clamp(buffer, state)
        move_to_first(state)
        _line_end(buffer, state)
        state.has_preferred_x = False
    elif code == Key.LINESTART | shift:
        clamp(buffer, state)
        prep_selection_at_cursor(state)
        _line_start(buffer, state)
        state.select_end = state.cursor
        state.has_preferred_x = False
    elif code == Key.LINEEND | shift:
        clamp(buffer, state)
        prep_selection_at_cursor(state)
        _line_end(buffer, state)
        state.select_end = state.cursor
        state.has_preferred_x = False
    else:
        c = _key_to_text(code)
        if c > 0:
            _insert_char(buffer, state, c)


def key(buffer: TextBuffer, state: TextEditState, key_code: int | str) -> None:
    """Apply one keyboard input: a Key (optionally with SHIFT) or a character."""
    code = _normalise(key_code)
    while True:
        shift_bits = code & Key.SHIFT
        base = code & ~Key.SHIFT
        if base in (Key.DOWN, Key.PGDOWN):
            is_page = base == Key.PGDOWN
            if not is_page and state.single_line:
                code = Key.RIGHT | shift_bits
                continue
            rows = state.row_count_per_page if is_page else 1
            _move_down(buffer, state, bool(shift_bits), rows)
        elif base in (Key.UP, Key.PGUP):
            is_page = base == Key.PGUP
            if not is_page and state.single_line:
                code = Key.LEFT | shift_bits
                continue
            rows = state.row_count_per_page if is_page else 1
            _move_up(buffer, state, bool(shift_bits), rows)
        else:
            _dispatch(buffer, state, code)
        return


class TextEditor:
    """A monospace text field with cursor, selection and undo history."""

    def __init__(self, text: str = "", single_line: bool = False) -> None:
        self.buffer = MonospaceBuffer(text)
        self.state = TextEditState(single_line=single_line)

    def text(self) -> str:
        return str(self.buffer)

    def selection(self) -> str:
        """The selected characters, in text order."""
        start, end = sorted((self.state.select_start, self.state.select_end))
        return self.text()[start:end]

    def press(self, key_code: int | str) -> None:
        key(self.buffer, self.state, key_code)

    def type(self, text: str) -> None:
        """Press the key of every character in text."""
        for ch in text:
            self.press(ch)

    def click(self, x: float, y: float) -> None:
        _click(self.buffer, self.state, x, y)

    def drag(self, x: float, y: float) -> None:
        _drag(self.buffer, self.state, x, y)

    def cut(self) -> bool:
        return _cut(self.buffer, self.state)

    def paste(self, text: str) -> bool:
        return _paste(self.buffer, self.state, text)

    def undo(self) -> None:
        _undo(self.buffer, self.state)
        self.state.has_preferred_x = False

    def redo(self) -> None:
        _redo(self.buffer, self.state)
        self.state.has_preferred_x = False