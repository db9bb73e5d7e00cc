"""A growable byte buffer with a recorded alignment."""

from __future__ import annotations


class Buffer:
    """Owned block of bytes, as read from an asset or handed to a parser."""

    def __init__(self, size: int = 0, alignment: int = 4) -> None:
        if size < 0:
            raise ValueError("buffer size must not be negative")
        self._data = bytearray(size)
        self.alignment = alignment

    @property
    def data(self) -> bytearray:
        """The buffer's bytes, shared with the buffer."""
        return self._data

    def set_data(self, data: bytes) -> None:
        """Replace the contents with a copy of data."""
        self._data = bytearray(data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def copy(self) -> "Buffer":
        """Return an independent buffer with the same bytes and alignment."""
        duplicate = Buffer(0, self.alignment)
        duplicate._data = bytearray(self._data)
        return duplicate