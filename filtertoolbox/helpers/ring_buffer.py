"""
Fixed-length sample histories used by the realtime filters. Both structures
allocate their memory once and never grow.
"""

import numpy as np
from numpy.typing import NDArray, DTypeLike


class CircularBuffer:
    """History of the last `length` samples stored with a moving write head.
    The newest sample is always at `head`, older samples are reached by
    walking backwards (modulo length).

    """

    def __init__(self, length: int, dtype: DTypeLike = np.float64):
        assert length > 0, "Circular buffer needs at least one element"
        self.__data = np.zeros(length, dtype=dtype)
        self.__head = 0
        # Precomputed offsets for reading the history newest-first
        self.__offsets = np.arange(length)

    @property
    def head(self) -> int:
        return self.__head

    @property
    def data(self) -> NDArray:
        """Copy of the raw storage (not ordered by age)."""
        return self.__data.copy()

    def __len__(self):
        return len(self.__data)

    def write(self, x: float):
        """Write a new sample at the head position. The head is not moved,
        use `advance()` after the sample has been consumed."""
        self.__data[self.__head] = x

    def advance(self):
        self.__head += 1
        if self.__head >= len(self.__data):
            self.__head = 0

    def newest_first(self) -> NDArray:
        """Return the history ordered from the newest to the oldest sample,
        i.e., `buffer[(head - i) % length]` for `i` in `[0, length)`."""
        return self.__data[(self.__head - self.__offsets) % len(self.__data)]

    def reset(self):
        self.__data.fill(0.0)
        self.__head = 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return self.__head == other.__head and np.array_equal(
            self.__data, other.__data
        )


class ShiftRegister:
    """History of the last `length` samples stored as an explicit shift
    register. The newest sample is always at index 0. A register of length 0
    is valid and ignores all inputs.

    """

    def __init__(self, length: int, dtype: DTypeLike = np.float64):
        assert length >= 0, "Length of shift register can not be negative"
        self.__data = np.zeros(length, dtype=dtype)

    @property
    def data(self) -> NDArray:
        """View of the register, newest sample first. It should not be
        modified."""
        return self.__data

    def __len__(self):
        return len(self.__data)

    def shift_in(self, x: float):
        """Drop the oldest sample and insert `x` at index 0."""
        if len(self.__data) == 0:
            return
        self.__data[1:] = self.__data[:-1].copy()
        self.__data[0] = x

    def reset(self):
        self.__data.fill(0.0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShiftRegister):
            return NotImplemented
        return np.array_equal(self.__data, other.__data)
