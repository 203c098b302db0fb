"""Text layout queries, mouse handling and selection editing for a text field."""

from __future__ import annotations

from dataclasses import dataclass

from .textedit_state import (
    Row,
    TextBuffer,
    TextEditState,
    make_undo_delete,
    make_undo_insert,
)

NEWLINE = "\n"
NEWLINE_WIDTH = -1.0


class MonospaceBuffer:
    """An editable string laid out in fixed-width characters, one row per line."""

    def __init__(self, text: str = "", char_width: float = 1.0, line_height: float = 1.0) -> None:
        if char_width <= 0.0:
            raise ValueError("char_width must be positive")
        if line_height <= 0.0:
            raise ValueError("line_height must be positive")
        self._text = text
        self.char_width = char_width
        self.line_height = line_height

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MonospaceBuffer({self._text!r})"

    def layout_row(self, start: int) -> Row:
        """Layout of the line starting at start; its newline counts as one of its chars."""
        end = self._text.find(NEWLINE, start)
        if end == -1:
            num_chars = max(0, len(self._text) - start)
            visible = num_chars
        else:
            num_chars = end + 1 - start
            visible = num_chars - 1
        return Row(
            x0=0.0,
            x1=visible * self.char_width,
            baseline_y_delta=self.line_height,
            ymin=0.0,
            ymax=self.line_height,
            num_chars=num_chars,
        )

    def width(self, line_start: int, index: int) -> float:
        """Width of the index-th char of the line starting at line_start."""
        if self._text[line_start + index] == NEWLINE:
            return NEWLINE_WIDTH
        return self.char_width

    def char_at(self, index: int) -> str:
        if index < 0:
            raise IndexError(index)
        return self._text[index]

    def delete_chars(self, index: int, count: int) -> None:
        self._text = self._text[:index] + self._text[index + count:]

    def insert_chars(self, index: int, chars: str) -> bool:
        self._text = self._text[:index] + chars + self._text[index:]
        return True


@dataclass
class FindState:
    """Position of a character and the row it sits on."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


def locate_coord(buffer: TextBuffer, x: float, y: float) -> int:
    """Index of the character nearest to the display position (x, y)."""
    n = len(buffer)
    row = Row()
    base_y = 0.0
    i = 0

    while i < n:
        row = buffer.layout_row(i)
        if row.num_chars <= 0:
            return n
        if i == 0 and y < base_y + row.ymin:
            return 0
        if y < base_y + row.ymax:
            break
        i += row.num_chars
        base_y += row.baseline_y_delta

    if i >= n:
        return n

    if x < row.x0:
        return i

    if x < row.x1:
        prev_x = row.x0
        for k in range(row.num_chars):
            w = buffer.width(i, k)
            if x < prev_x + w:
                return k + i if x < prev_x + w / 2 else k + i + 1
            prev_x += w

    if buffer.char_at(i + row.num_chars - 1) == NEWLINE:
        return i + row.num_chars - 1
    return i + row.num_chars


def _single_line_y(buffer: TextBuffer) -> float:
    return buffer.layout_row(0).ymin


def click(buffer: TextBuffer, state: TextEditState, x: float, y: float) -> None:
    """Move the cursor to the clicked position and drop the selection."""
    if state.single_line:
        y = _single_line_y(buffer)
    state.cursor = locate_coord(buffer, x, y)
    state.select_start = state.cursor
    state.select_end = state.cursor
    state.has_preferred_x = False


def drag(buffer: TextBuffer, state: TextEditState, x: float, y: float) -> None:
    """Move the cursor and the selection end to the dragged position."""
    if state.single_line:
        y = _single_line_y(buffer)
    if state.select_start == state.select_end:
        state.select_start = state.cursor
    p = locate_coord(buffer, x, y)
    state.cursor = state.select_end = p


def find_charpos(buffer: TextBuffer, n: int, single_line: bool) -> FindState:
    """Locate character n and describe its row and the row before it."""
    z = len(buffer)
    find = FindState()

    if n == z and single_line:
        row = buffer.layout_row(0)
        find.y = 0.0
        find.first_char = 0
        find.length = z
        find.height = row.ymax - row.ymin
        find.x = row.x1
        return find

    prev_start = 0
    i = 0
    while True:
        row = buffer.layout_row(i)
        if n < i + row.num_chars:
            break
        if i + row.num_chars == z and z > 0 and buffer.char_at(z - 1) != NEWLINE:
            break
        prev_start = i
        i += row.num_chars
        find.y += row.baseline_y_delta
        if i == z:
            row.num_chars = 0
            break

    first = i
    find.first_char = first
    find.length = row.num_chars
    find.height = row.ymax - row.ymin
    find.prev_first = prev_start

    find.x = row.x0
    k = 0
    while first + k < n:
        find.x += buffer.width(first, k)
        k += 1
    return find


def clamp(buffer: TextBuffer, state: TextEditState) -> None:
    """Keep cursor and selection inside the text after it has been changed."""
    n = len(buffer)
    if state.has_selection():
        state.select_start = min(state.select_start, n)
        state.select_end = min(state.select_end, n)
        if state.select_start == state.select_end:
            state.cursor = state.select_start
    if state.cursor > n:
        state.cursor = n


def delete(buffer: TextBuffer, state: TextEditState, where: int, length: int) -> None:
    """Delete length characters at where, recording the change for undo."""
    make_undo_delete(buffer, state, where, length)
    buffer.delete_chars(where, length)
    state.has_preferred_x = False


def delete_selection(buffer: TextBuffer, state: TextEditState) -> None:
    """Delete the selected characters, leaving the cursor where they were."""
    clamp(buffer, state)
    if not state.has_selection():
        return
    if state.select_start < state.select_end:
        delete(buffer, state, state.select_start, state.select_end - state.select_start)
        state.select_end = state.cursor = state.select_start
    else:
        delete(buffer, state, state.select_end, state.select_start - state.select_end)
        state.select_start = state.cursor = state.select_end
    state.has_preferred_x = False


def sort_selection(state: TextEditState) -> None:
    """Order the selection so that select_start <= select_end."""
    if state.select_end < state.select_start:
        state.select_start, state.select_end = state.select_end, state.select_start


def move_to_first(state: TextEditState) -> None:
    """Collapse the selection onto its first character."""
    if state.has_selection():
        sort_selection(state)
        state.cursor = state.select_start
        state.select_end = state.select_start
        state.has_preferred_x = False


def move_to_last(buffer: TextBuffer, state: TextEditState) -> None:
    """Collapse the selection onto its end."""
    if state.has_selection():
        sort_selection(state)
        clamp(buffer, state)
        state.cursor = state.select_end
        state.select_start = state.select_end
        state.has_preferred_x = False


def is_word_boundary(buffer: TextBuffer, index: int) -> bool:
    """True where a word starts: after whitespace and on a non-space, or at 0."""
    if index <= 0:
        return True
    return buffer.char_at(index - 1).isspace() and not buffer.char_at(index).isspace()


def move_to_word_previous(buffer: TextBuffer, cursor: int) -> int:
    """Start of the word before cursor, moving at least one character."""
    c = cursor - 1
    while c >= 0 and not is_word_boundary(buffer, c):
        c -= 1
    return max(c, 0)


def move_to_word_next(buffer: TextBuffer, cursor: int) -> int:
    """Start of the next word after cursor, moving at least one character."""
    length = len(buffer)
    c = cursor + 1
    while c < length and not is_word_boundary(buffer, c):
        c += 1
    return min(c, length)


def prep_selection_at_cursor(state: TextEditState) -> None:
    """Start a selection at the cursor, or move the cursor to the selection end."""
    if not state.has_selection():
        state.select_start = state.select_end = state.cursor
    else:
        state.cursor = state.select_end


def cut(buffer: TextBuffer, state: TextEditState) -> bool:
    """Delete the selection; False when nothing was selected."""
    if state.has_selection():
        delete_selection(buffer, state)
        state.has_preferred_x = False
        return True
    return False


def paste(buffer: TextBuffer, state: TextEditState, text: str) -> bool:
    """Replace the selection, or insert at the cursor, with text."""
    clamp(buffer, state)
    delete_selection(buffer, state)
    if buffer.insert_chars(state.cursor, text):
        make_undo_insert(state, state.cursor, len(text))
        state.cursor += len(text)
        state.has_preferred_x = False
        return True
    return False