"""
Tick-driven analysis pipeline.

Each tick reads the playback clock, selects the sample window under the
playback position, runs the spectral analyzer and publishes the result
into the visual buffer as one batch.
"""

import enum
import logging
import threading

from audio_visualization.core.analyzer import FFT_SIZE, SpectralAnalyzer
from audio_visualization.core.buffer import BufferHandle, make_buffer
from audio_visualization.core.clock import PlaybackClock
from audio_visualization.core.decoder import DecodedAudio
from audio_visualization.core.samples import SampleStore, select_window_start

logger = logging.getLogger(__name__)


class TickState(enum.Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"


class VisualizationPipeline:
    """
    Synchronized decode -> spectrum -> visual buffer pipeline.

    `tick()` is a bounded synchronous step that never blocks on I/O.
    Ticks falling outside the track are skipped silently.
    """

    def __init__(
        self,
        samples: SampleStore,
        clock: PlaybackClock,
        analyzer: SpectralAnalyzer,
        buffer: BufferHandle,
    ):
        """
        Initialize the pipeline.

        Args:
            samples: Decoded track samples.
            clock: Playback clock anchored at playback start.
            analyzer: Spectral analyzer; its fft_size sets the window width.
            buffer: Destination for magnitude batches.
        """
        self.samples = samples
        self.clock = clock
        self.analyzer = analyzer
        self.buffer = buffer

        self.state = TickState.IDLE
        self.ticks = 0
        self.published = 0

    @classmethod
    def from_decoded(
        cls,
        decoded: DecodedAudio,
        fft_size: int = FFT_SIZE,
        window: str = "boxcar",
        threaded: bool = False,
        anchor: float | None = None,
    ) -> "VisualizationPipeline":
        """
        Wire a pipeline around decoded audio.

        The visual buffer capacity equals fft_size so each batch replaces
        the previous tick's values entirely.

        Args:
            decoded: Output of AudioDecoder.load().
            fft_size: Transform width.
            window: Analyzer taper name.
            threaded: Use the lock-protected buffer.
            anchor: Playback start instant. Defaults to now.
        """
        return cls(
            samples=decoded.samples,
            clock=PlaybackClock(decoded.duration, anchor=anchor),
            analyzer=SpectralAnalyzer(fft_size=fft_size, window=window),
            buffer=make_buffer(fft_size, threaded=threaded),
        )

    @property
    def fft_size(self) -> int:
        return self.analyzer.fft_size

    @property
    def finished(self) -> bool:
        """True once the clock has run past the end of the track."""
        return self.clock.progress() >= 1.0

    def tick(self) -> bool:
        """
        Run one analysis step for the current instant.

        Returns:
            True if a new batch was published to the buffer.
        """
        self.ticks += 1

        start = select_window_start(
            self.clock.progress(),
            self.samples.sample_count,
            self.fft_size,
        )
        if start is None:
            return False

        self.state = TickState.ANALYZING
        try:
            magnitudes = self.analyzer.analyze(self.samples.window(start, self.fft_size))
            self.buffer.push_batch(magnitudes)
        finally:
            self.state = TickState.IDLE

        self.published += 1
        return True


class AnalysisWorker(threading.Thread):
    """
    Background thread ticking a pipeline at a fixed interval.

    Used when drawing and analysis run on different threads; the
    pipeline should then write to a SharedVisualBuffer.
    """

    def __init__(self, pipeline: VisualizationPipeline, interval: float = 1 / 120):
        super().__init__(name="analysis-worker", daemon=True)
        self.pipeline = pipeline
        self.interval = interval
        self._stop_event = threading.Event()

    def run(self):
        logger.debug("Analysis worker started (interval=%.4fs)", self.interval)
        while not self._stop_event.is_set():
            self.pipeline.tick()
            self._stop_event.wait(self.interval)
        logger.debug("Analysis worker stopped after %d ticks", self.pipeline.ticks)

    def stop(self, timeout: float | None = 1.0):
        """Signal the worker to exit and wait for it."""
        self._stop_event.set()
        if self.is_alive():
            self.join(timeout)
