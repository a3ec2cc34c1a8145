#
# PROJECT: chargrid
# MODULE: chargrid/storage.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import functools

from .errors import StorageExhausted


class HeapStorage:
    """
    Growable byte storage backed by a bytearray.

    Cells are single bytes. The grid only talks to storage through the
    methods below, so any object providing them can be injected instead.
    """
    __slots__ = ('_cells',)

    def __init__(self, size: int = 0, fill: int = 0):
        self._cells = bytearray([fill]) * size

    def __len__(self):
        return len(self._cells)

    def get(self, idx: int) -> int:
        return self._cells[idx]

    def set(self, idx: int, value: int):
        self._cells[idx] = value

    def resize(self, size: int, fill: int = 0):
        cur = len(self._cells)
        if size > cur:
            self._cells.extend(bytes([fill]) * (size - cur))
        else:
            del self._cells[size:]

    def copy_within(self, src: int, dst: int, count: int):
        """Copy count cells from src to dst. Overlapping ranges are safe."""
        if count > 0:
            self._cells[dst:dst + count] = self._cells[src:src + count]

    def fill(self, start: int, count: int, value: int):
        if count > 0:
            self._cells[start:start + count] = bytes([value]) * count

    def replace(self, old: int, new: int):
        self._cells = bytearray(self._cells.replace(bytes([old]), bytes([new])))

    def tobytes(self) -> bytes:
        return bytes(self._cells)

    def load(self, data):
        self._cells = bytearray(data)

    def clear(self):
        self._cells = bytearray()


class BoundedStorage:
    """
    Fixed-capacity arena: every byte is allocated up front and the live
    region grows and shrinks inside it. Asking for more than the arena
    holds raises StorageExhausted and leaves the contents untouched.
    """
    __slots__ = ('_arena', '_size')

    def __init__(self, size: int = 0, fill: int = 0, capacity: int = 0):
        if size > capacity:
            raise StorageExhausted(size, capacity)
        self._arena = bytearray(capacity)
        self._size = size
        self._arena[:size] = bytes([fill]) * size

    @property
    def capacity(self) -> int:
        return len(self._arena)

    def __len__(self):
        return self._size

    def _check(self, idx: int) -> int:
        if idx < 0:
            idx += self._size
        if idx < 0 or idx >= self._size:
            raise IndexError("storage index out of range")
        return idx

    def get(self, idx: int) -> int:
        return self._arena[self._check(idx)]

    def set(self, idx: int, value: int):
        self._arena[self._check(idx)] = value

    def _reserve(self, size: int):
        if size > len(self._arena):
            raise StorageExhausted(size, len(self._arena))

    def resize(self, size: int, fill: int = 0):
        self._reserve(size)
        if size > self._size:
            self._arena[self._size:size] = bytes([fill]) * (size - self._size)
        self._size = size

    def copy_within(self, src: int, dst: int, count: int):
        if count <= 0:
            return
        if src + count > self._size or dst + count > self._size:
            raise IndexError("storage range out of range")
        self._arena[dst:dst + count] = self._arena[src:src + count]

    def fill(self, start: int, count: int, value: int):
        if count <= 0:
            return
        if start + count > self._size:
            raise IndexError("storage range out of range")
        self._arena[start:start + count] = bytes([value]) * count

    def replace(self, old: int, new: int):
        live = bytes(self._arena[:self._size])
        self._arena[:self._size] = live.replace(bytes([old]), bytes([new]))

    def tobytes(self) -> bytes:
        return bytes(self._arena[:self._size])

    def load(self, data):
        self._reserve(len(data))
        self._arena[:len(data)] = data
        self._size = len(data)

    def clear(self):
        self._size = 0


STRATEGIES = ('heap', 'bounded')


def make_storage(strategy: str = 'heap', capacity: int = 0):
    """
    Return a storage factory for a strategy name.

    The factory is called as factory(size, fill) by the grid.
    """
    if strategy == 'heap':
        return HeapStorage
    if strategy == 'bounded':
        return functools.partial(BoundedStorage, capacity=capacity)
    raise ValueError(f"Unknown storage strategy {strategy!r}; expected one of {STRATEGIES}")
