"""A growable byte buffer with independent read and write offsets."""

from __future__ import annotations

_INITIAL_SIZE = 1024


class Serializer:
    """Append bytes at the write offset and read them back from the read offset."""

    def __init__(self) -> None:
        self._buffer = bytearray(_INITIAL_SIZE)
        self.write_offset = 0
        self.read_offset = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def write(self, data: bytes) -> None:
        """Append data, doubling the buffer until it fits."""
        size = len(data)
        while self.write_offset + size >= len(self._buffer):
            self._buffer.extend(bytes(len(self._buffer)))
        self._buffer[self.write_offset:self.write_offset + size] = data
        self.write_offset += size

    def read(self, size: int) -> bytes:
        """Return the next size bytes; EOFError if fewer have been written."""
        if size < 0:
            raise ValueError("size must not be negative")
        end = self.read_offset + size
        if end > self.write_offset:
            raise EOFError(f"cannot read {size} bytes, only {self.write_offset - self.read_offset} left")
        chunk = bytes(self._buffer[self.read_offset:end])
        self.read_offset = end
        return chunk

    def data(self) -> bytes:
        """Everything written so far."""
        return bytes(self._buffer[:self.write_offset])