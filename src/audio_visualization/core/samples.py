"""
Decoded sample storage and analysis window selection.

Holds the whole track as an immutable int16 array and picks the
slice of samples that sits under the current playback position.
"""

import math

import numpy as np


class SampleStore:
    """
    Immutable, fully decoded mono sample sequence for one track.

    Index order is temporal order. The backing array is read-only so
    slices handed to the analyzer can never be mutated in place.
    """

    def __init__(self, samples: np.ndarray):
        """
        Initialize the store.

        Args:
            samples: Sample amplitudes in the signed 16-bit range.
        """
        data = np.array(samples, dtype=np.int16, copy=True).reshape(-1)
        data.flags.writeable = False
        self._samples = data

    def __len__(self) -> int:
        return len(self._samples)

    @property
    def sample_count(self) -> int:
        """Total number of decoded frames."""
        return len(self._samples)

    @property
    def samples(self) -> np.ndarray:
        """Read-only view of the full sample array."""
        return self._samples

    def window(self, start: int, width: int) -> np.ndarray:
        """
        Return the samples in [start, start + width).

        Args:
            start: First sample offset.
            width: Number of consecutive samples.

        Returns:
            Read-only view of exactly `width` samples.
        """
        if start < 0 or width <= 0 or start + width > len(self._samples):
            raise IndexError(
                f"window [{start}, {start + width}) outside 0..{len(self._samples)}"
            )
        return self._samples[start:start + width]


def select_window_start(progress: float, sample_count: int, width: int) -> int | None:
    """
    Map playback progress to the first sample of the analysis window.

    The window [start, start + width) is valid only when its end lies
    strictly before `sample_count`. Progress past the end of the track,
    or a clock anchored in the future, yields no window.

    Args:
        progress: Fraction of the track played so far (not clamped).
        sample_count: Number of decoded samples.
        width: Window width in samples.

    Returns:
        Start offset, or None when there is nothing to analyze this tick.
    """
    if progress < 0 or not math.isfinite(progress):
        return None

    start = math.floor(sample_count * progress)
    if start + width < sample_count:
        return start
    return None
