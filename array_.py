import numpy as np

from logger import print_

DEFAULT_DTYPE = np.int64
GROWTH_FACTOR = 2


class InvalidCapacityError(ValueError):
    """Raised when a buffer is requested with a non-positive or non-integer capacity."""


def check_capacity(size) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidCapacityError(f"capacity must be a positive integer, got {size!r}")
    if size <= 0:
        raise InvalidCapacityError(f"capacity must be a positive integer, got {size}")
    return int(size)


def check_dtype(dtype) -> np.dtype:
    dtype = np.dtype(dtype)
    if dtype.kind != "i":
        raise TypeError(f"storage dtype must be a signed integer type, got {dtype}")
    return dtype


class Array:
    """
    Contiguous integer buffer with explicit capacity doubling.

    `size` is the allocated length, `index` the number of slots in use.
    Slots past `index` keep whatever was last written there.
    """

    def __init__(self, size, dtype=DEFAULT_DTYPE):
        self.size = check_capacity(size)
        self.index = 0
        self.dtype = check_dtype(dtype)
        self.elements = np.zeros(self.size, dtype=self.dtype)

    def _resize(self):
        self.size *= GROWTH_FACTOR
        elements = np.zeros(self.size, dtype=self.dtype)
        elements[:self.index] = self.elements[:self.index]
        self.elements = elements

    def insert(self, data):
        data = self.to_storage(data)
        if self.index >= self.size:
            print_(f"array_.py: growing capacity {self.size} -> {self.size * GROWTH_FACTOR}")
            self._resize()
        self.elements[self.index] = data
        self.index += 1

    def to_storage(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, np.integer)):
            raise TypeError(f"only integers can be stored, got {type(data).__name__}")
        info = np.iinfo(self.dtype)
        if not info.min <= data <= info.max:
            raise OverflowError(f"{data} does not fit in {self.dtype}")
        return data

    def swap(self, i, j):
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def length(self):
        return self.index

    def remove_last(self):
        # The slot keeps its stale value
        if self.index > 0:
            self.index -= 1

    def copy(self, active_only=False):
        if active_only:
            return self.elements[:self.index].copy()
        return self.elements.copy()

    def delete_all(self):
        self.index = 0
