"""Thread-safe pool of fixed-size byte blocks."""

from __future__ import annotations

import threading

MIN_BLOCK_SIZE = 8


class MemoryPool:
    """Hands out reusable blocks of ``block_size`` bytes."""

    def __init__(self, block_size: int, initial_blocks: int = 0):
        self.block_size = max(block_size, MIN_BLOCK_SIZE)
        self._lock = threading.Lock()
        self._free = [bytearray(self.block_size) for _ in range(initial_blocks)]
        self._closed = False

    def alloc(self) -> bytearray:
        """Return a free block, creating a new one if none is pooled."""
        with self._lock:
            if self._closed:
                raise ValueError("memory pool is closed")
            if self._free:
                return self._free.pop()
        return bytearray(self.block_size)

    def free(self, block: bytearray | None) -> None:
        """Return *block* to the pool; ``None`` is ignored."""
        if block is None:
            return
        with self._lock:
            if self._closed:
                raise ValueError("memory pool is closed")
            self._free.append(block)

    def available(self) -> int:
        """Number of blocks waiting in the pool."""
        with self._lock:
            return len(self._free)

    def close(self) -> None:
        """Release all pooled blocks."""
        with self._lock:
            self._free.clear()
            self._closed = True

    def __enter__(self) -> "MemoryPool":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def allocate(size: int) -> bytearray:
    """Return a zeroed block of *size* bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size)