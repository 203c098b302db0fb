"""Text-edit state: cursor, selection and a bounded undo/redo history."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Protocol

UNDO_STATE_COUNT = 99
UNDO_CHAR_COUNT = 999


@dataclass
class Row:
    """Layout of one displayed row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


class TextBuffer(Protocol):
    """The string being edited, as the editing functions see it."""

    def __len__(self) -> int: ...

    def char_at(self, index: int) -> str: ...

    def delete_chars(self, index: int, count: int) -> None: ...

    def insert_chars(self, index: int, chars: str) -> bool: ...

    def layout_row(self, start: int) -> Row: ...

    def width(self, line_start: int, index: int) -> float: ...


@dataclass
class UndoRecord:
    """One undoable edit: at where, insert_length stored chars replace delete_length chars."""

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    char_storage: int = -1


class UndoState:
    """Undo records grow from the front and redo records from the back of shared storage."""

    def __init__(self, state_count: int = UNDO_STATE_COUNT, char_count: int = UNDO_CHAR_COUNT) -> None:
        self.state_count = state_count
        self.char_count = char_count
        self.records = [UndoRecord() for _ in range(state_count)]
        self.chars = [""] * char_count
        self.undo_point = 0
        self.redo_point = state_count
        self.undo_char_point = 0
        self.redo_char_point = char_count

    def flush_redo(self) -> None:
        """Drop every redo record."""
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def discard_undo(self) -> None:
        """Drop the oldest undo record and the characters it stored."""
        if self.undo_point <= 0:
            return
        oldest = self.records[0]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.undo_char_point -= n
            self.chars[0:self.undo_char_point] = self.chars[n:n + self.undo_char_point]
            for record in self.records[:self.undo_point]:
                if record.char_storage >= 0:
                    record.char_storage -= n
        self.undo_point -= 1
        self.records[0:self.undo_point] = [replace(r) for r in self.records[1:1 + self.undo_point]]

    def discard_redo(self) -> None:
        """Drop the oldest redo record and the characters it stored."""
        k = self.state_count - 1
        if self.redo_point > k:
            return
        oldest = self.records[k]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.redo_char_point += n
            start = self.redo_char_point
            self.chars[start:self.char_count] = self.chars[start - n:self.char_count - n]
            for record in self.records[self.redo_point:k]:
                if record.char_storage >= 0:
                    record.char_storage += n
        count = self.state_count - self.redo_point - 1
        moved = [replace(r) for r in self.records[self.redo_point:self.redo_point + count]]
        self.records[self.redo_point + 1:self.redo_point + 1 + count] = moved
        self.redo_point += 1

    def _create_record(self, numchars: int) -> int | None:
        self.flush_redo()
        if self.undo_point == self.state_count:
            self.discard_undo()
        if numchars > self.char_count:
            self.undo_point = 0
            self.undo_char_point = 0
            return None
        while self.undo_char_point + numchars > self.char_count:
            self.discard_undo()
        index = self.undo_point
        self.undo_point += 1
        return index

    def create_undo(self, pos: int, insert_len: int, delete_len: int) -> int | None:
        """Add an undo record; return where its insert_len chars go in chars, if any."""
        index = self._create_record(insert_len)
        if index is None:
            return None
        if insert_len == 0:
            self.records[index] = UndoRecord(pos, insert_len, delete_len, -1)
            return None
        storage = self.undo_char_point
        self.records[index] = UndoRecord(pos, insert_len, delete_len, storage)
        self.undo_char_point += insert_len
        return storage


@dataclass
class TextEditState:
    """Cursor, selection and undo history of one text field."""

    single_line: bool = False
    cursor: int = 0
    select_start: int = 0
    select_end: int = 0
    insert_mode: bool = False
    row_count_per_page: int = 0
    cursor_at_end_of_line: bool = False
    initialized: bool = False
    has_preferred_x: bool = False
    preferred_x: float = 0.0
    undostate: UndoState = field(default_factory=UndoState)

    def __post_init__(self) -> None:
        self.clear(self.single_line)

    def clear(self, single_line: bool = False) -> None:
        """Reset to the default state, emptying the undo history."""
        u = self.undostate
        u.undo_point = 0
        u.undo_char_point = 0
        u.redo_point = u.state_count
        u.redo_char_point = u.char_count
        self.select_start = self.select_end = 0
        self.cursor = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.cursor_at_end_of_line = False
        self.initialized = True
        self.single_line = bool(single_line)
        self.insert_mode = False
        self.row_count_per_page = 0

    def has_selection(self) -> bool:
        return self.select_start != self.select_end


def _stored(s: UndoState, start: int, length: int) -> str:
    return "".join(s.chars[start:start + length])


def undo(buffer: TextBuffer, state: TextEditState) -> None:
    """Apply the latest undo record and turn it into a redo record."""
    s = state.undostate
    if s.undo_point == 0:
        return
    u = replace(s.records[s.undo_point - 1])
    r = UndoRecord(u.where, u.delete_length, u.insert_length, -1)
    s.records[s.redo_point - 1] = r

    if u.delete_length:
        if s.undo_char_point + u.delete_length >= s.char_count:
            r.insert_length = 0
        else:
            while s.undo_char_point + u.delete_length > s.redo_char_point:
                if s.redo_point == s.state_count:
                    return
                s.discard_redo()
            r = s.records[s.redo_point - 1]
            r.char_storage = s.redo_char_point - u.delete_length
            s.redo_char_point -= u.delete_length
            for i in range(u.delete_length):
                s.chars[r.char_storage + i] = buffer.char_at(u.where + i)
        buffer.delete_chars(u.where, u.delete_length)

    if u.insert_length:
        buffer.insert_chars(u.where, _stored(s, u.char_storage, u.insert_length))
        s.undo_char_point -= u.insert_length

    state.cursor = u.where + u.insert_length
    s.undo_point -= 1
    s.redo_point -= 1


def redo(buffer: TextBuffer, state: TextEditState) -> None:
    """Apply the latest redo record and turn it back into an undo record."""
    s = state.undostate
    if s.redo_point == s.state_count:
        return
    r = replace(s.records[s.redo_point])
    u = UndoRecord(r.where, r.delete_length, r.insert_length, -1)
    s.records[s.undo_point] = u

    if r.delete_length:
        if s.undo_char_point + u.insert_length > s.redo_char_point:
            u.insert_length = 0
            u.delete_length = 0
        else:
            u.char_storage = s.undo_char_point
            s.undo_char_point += u.insert_length
            for i in range(u.insert_length):
                s.chars[u.char_storage + i] = buffer.char_at(u.where + i)
        buffer.delete_chars(r.where, r.delete_length)

    if r.insert_length:
        buffer.insert_chars(r.where, _stored(s, r.char_storage, r.insert_length))
        s.redo_char_point += r.insert_length

    state.cursor = r.where + r.insert_length
    s.undo_point += 1
    s.redo_point += 1


def make_undo_insert(state: TextEditState, where: int, length: int) -> None:
    """Record that length characters are about to be inserted at where."""
    state.undostate.create_undo(where, 0, length)


def make_undo_delete(buffer: TextBuffer, state: TextEditState, where: int, length: int) -> None:
    """Record the length characters at where before they are deleted."""
    s = state.undostate
    storage = s.create_undo(where, length, 0)
    if storage is not None:
        for i in range(length):
            s.chars[storage + i] = buffer.char_at(where + i)


def make_undo_replace(
    buffer: TextBuffer, state: TextEditState, where: int, old_length: int, new_length: int
) -> None:
    """Record old_length characters at where before new_length characters replace them."""
    s = state.undostate
    storage = s.create_undo(where, old_length, new_length)
    if storage is not None:
        for i in range(old_length):
            s.chars[storage + i] = buffer.char_at(where + i)