"""Growable byte buffer with a read cursor."""

from __future__ import annotations

DEFAULT_CAPACITY = 1024


class BufferUnderflowError(ValueError):
    """Raised when reading more bytes than remain unread."""


class Buffer:
    """Append-only byte storage that is consumed through a read position."""

    def __init__(self, initial_capacity: int = 0):
        if initial_capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = initial_capacity or DEFAULT_CAPACITY
        self._data = bytearray()
        self._position = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def position(self) -> int:
        return self._position

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def append(self, data: bytes) -> None:
        """Add *data* to the end, doubling capacity as needed."""
        if not data:
            raise ValueError("cannot append empty data")
        needed = len(self._data) + len(data)
        if needed > self._capacity:
            new_capacity = self._capacity * 2
            while new_capacity < needed:
                new_capacity *= 2
            self.resize(new_capacity)
        self._data += data

    def read(self, size: int) -> bytes:
        """Return the next *size* unread bytes and advance the position."""
        if size <= 0:
            raise ValueError("read size must be positive")
        end = self._position + size
        if end > len(self._data):
            raise BufferUnderflowError(
                f"requested {size} bytes, {self.remaining()} remaining"
            )
        chunk = bytes(self._data[self._position:end])
        self._position = end
        return chunk

    def reset(self) -> None:
        """Discard all data and rewind the position."""
        self._data.clear()
        self._position = 0

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self._position

    def resize(self, new_capacity: int) -> None:
        """Grow the capacity; shrinking or keeping it is an error."""
        if new_capacity <= self._capacity:
            raise ValueError("new capacity must exceed current capacity")
        self._capacity = new_capacity