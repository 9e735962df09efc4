"""Wall-clock playback position tracking."""

import time
from typing import Callable


class PlaybackClock:
    """
    Tracks playback progress against a fixed start instant.

    The clock is created once when playback begins and never reset.
    Progress is not clamped: after the track ends it grows past 1.0
    and callers treat that as "nothing to analyze".
    """

    def __init__(
        self,
        total_duration: float,
        anchor: float | None = None,
        time_source: Callable[[], float] = time.perf_counter,
    ):
        """
        Initialize the clock.

        Args:
            total_duration: Track length in seconds. Must be positive.
            anchor: Start instant in `time_source` units. Defaults to now.
            time_source: Monotonic clock returning seconds.
        """
        if not total_duration > 0:
            raise ValueError(f"total_duration must be positive, got {total_duration}")

        self.total_duration = float(total_duration)
        self.time_source = time_source
        self.anchor = time_source() if anchor is None else anchor

    def elapsed(self) -> float:
        """Seconds since the anchor instant."""
        return self.time_source() - self.anchor

    def progress(self) -> float:
        """Fraction of the track played at this instant."""
        return self.elapsed() / self.total_duration
