"""
Bounded visual buffer shared between analysis and rendering.

The analysis side appends whole FFT batches; the render side pulls a
snapshot once per frame. Both implementations expose the same two
operations so callers do not care which concurrency shape backs them.
"""

import abc
import threading
from collections import deque
from typing import Iterable

import numpy as np


class BufferHandle(abc.ABC):
    """Fixed-capacity FIFO of the most recent magnitude values."""

    def __init__(self, window_size: int):
        if window_size <= 0:
            raise ValueError(f"window_size must be positive, got {window_size}")
        self.window_size = window_size

    @abc.abstractmethod
    def push_batch(self, values: Iterable[float]):
        """Append values in order as one logical update."""

    @abc.abstractmethod
    def snapshot(self) -> np.ndarray:
        """Return an ordered float32 copy of the current contents."""

    @abc.abstractmethod
    def __len__(self) -> int:
        ...

    def push(self, value: float):
        """Append a single value, evicting the oldest past capacity."""
        self.push_batch((value,))

    def bars(self) -> list[tuple[int, float]]:
        """Current contents as (index, magnitude) pairs for drawing."""
        return [(i, float(v)) for i, v in enumerate(self.snapshot())]


class VisualBuffer(BufferHandle):
    """
    Single-threaded visual buffer.

    Suitable when the tick loop and drawing run interleaved on one
    thread; only capacity discipline is needed.
    """

    def __init__(self, window_size: int):
        super().__init__(window_size)
        self._values: deque[float] = deque(maxlen=window_size)

    def push_batch(self, values: Iterable[float]):
        # deque(maxlen) evicts from the front on overflow
        self._values.extend(float(v) for v in values)

    def snapshot(self) -> np.ndarray:
        return np.fromiter(self._values, dtype=np.float32, count=len(self._values))

    def __len__(self) -> int:
        return len(self._values)


class SharedVisualBuffer(VisualBuffer):
    """
    Lock-protected visual buffer for multi-threaded hosts.

    A whole batch is applied under one lock acquisition, so a reader
    never observes part of one tick mixed with part of another.
    """

    def __init__(self, window_size: int):
        super().__init__(window_size)
        self._lock = threading.Lock()

    def push_batch(self, values: Iterable[float]):
        # Materialize outside the lock to keep the critical section short
        batch = [float(v) for v in values]
        with self._lock:
            self._values.extend(batch)

    def snapshot(self) -> np.ndarray:
        with self._lock:
            return super().snapshot()

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


def make_buffer(window_size: int, threaded: bool = False) -> BufferHandle:
    """
    Create a visual buffer for the given concurrency shape.

    Args:
        window_size: Maximum number of magnitudes kept.
        threaded: True when writer and reader run on different threads.

    Returns:
        SharedVisualBuffer if threaded, otherwise VisualBuffer.
    """
    if threaded:
        return SharedVisualBuffer(window_size)
    return VisualBuffer(window_size)
