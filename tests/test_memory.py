import threading

import pytest

from ospfd.memory import MemoryPool, allocate


def test_pool_alloc_beyond_initial_and_free():
    with MemoryPool(64, 10) as pool:
        assert pool.available() == 10
        blocks = [pool.alloc() for _ in range(20)]
        assert all(len(block) == 64 for block in blocks)
        assert pool.available() == 0
        for block in blocks:
            pool.free(block)
        assert pool.available() == 20


def test_freed_block_is_reused():
    pool = MemoryPool(32, 0)
    block = pool.alloc()
    pool.free(block)
    assert pool.alloc() is block


def test_minimum_block_size():
    assert MemoryPool(1, 0).block_size == 8
    assert len(MemoryPool(1, 1).alloc()) == 8


def test_free_none_ignored():
    pool = MemoryPool(16, 2)
    pool.free(None)
    assert pool.available() == 2


def test_closed_pool_rejects_alloc():
    with MemoryPool(16, 3) as pool:
        pass
    assert pool.available() == 0
    with pytest.raises(ValueError):
        pool.alloc()


def test_concurrent_alloc_free():
    pool = MemoryPool(16, 0)

    def worker():
        for _ in range(100):
            pool.free(pool.alloc())

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert 1 <= pool.available() <= 4


def test_allocate():
    block = allocate(128)
    assert len(block) == 128
    assert block == bytearray(128)


def test_allocate_negative():
    with pytest.raises(ValueError):
        allocate(-1)