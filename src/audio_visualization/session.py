"""
Playback and visualization session.

Decodes the track, opens the window, starts playback, anchors the clock
and then redraws the magnitude chart every frame until the window is
closed.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import pygame

from audio_visualization.core.analyzer import FFT_SIZE, SpectralAnalyzer
from audio_visualization.core.decoder import AudioDecoder, DecodedAudio
from audio_visualization.io.playback import AudioPlayer
from audio_visualization.pipeline import AnalysisWorker, VisualizationPipeline
from audio_visualization.visualizers.bars import BarChartConfig, BarChartRenderer

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for one playback session."""

    fft_size: int = FFT_SIZE
    window: str = "boxcar"  # Analyzer taper, "boxcar" = none
    threaded: bool = False  # Analyze on a worker thread
    worker_interval: float = 1 / 120  # Seconds between worker ticks
    max_fps: int = 0  # 0 = redraw as fast as possible
    exit_on_end: bool = False
    drift_tolerance: float = 0.05  # Seconds of metadata/decode mismatch before warning
    chart: BarChartConfig = field(default_factory=BarChartConfig)

    def __post_init__(self):
        if self.fft_size <= 0 or self.fft_size & (self.fft_size - 1):
            raise ValueError(f"fft_size must be a positive power of two, got {self.fft_size}")
        if self.worker_interval <= 0:
            raise ValueError(f"worker_interval must be positive, got {self.worker_interval}")
        if self.max_fps < 0:
            raise ValueError(f"max_fps must be >= 0, got {self.max_fps}")


class VisualizationSession:
    """
    Runs decode, playback and the render loop for one file.

    Startup failures (decode, device) raise before the loop begins;
    there is no degraded mode.
    """

    def __init__(
        self,
        audio_path: Union[str, Path],
        config: SessionConfig | None = None,
        decoder: AudioDecoder | None = None,
    ):
        self.audio_path = Path(audio_path)
        self.config = config or SessionConfig()
        self.decoder = decoder or AudioDecoder()
        self.renderer = BarChartRenderer(self.config.chart)

        self.decoded: DecodedAudio | None = None
        self.pipeline: VisualizationPipeline | None = None
        self.player: AudioPlayer | None = None
        self.worker: AnalysisWorker | None = None

    def prepare(self) -> DecodedAudio:
        """Decode the input file and check its duration."""
        # Reject a bad taper name before the window opens
        SpectralAnalyzer(fft_size=self.config.fft_size, window=self.config.window)

        decoded = self.decoder.load(self.audio_path)

        drift = decoded.duration_drift
        if abs(drift) > self.config.drift_tolerance:
            logger.warning(
                "Reported duration %.3fs differs from decoded %.3fs by %.3fs; "
                "visuals will drift against playback",
                decoded.duration,
                decoded.decoded_duration,
                drift,
            )

        self.decoded = decoded
        return decoded

    def start(self) -> VisualizationPipeline:
        """Start playback and build the pipeline anchored to it."""
        if self.decoded is None:
            self.prepare()

        cfg = self.config
        self.player = AudioPlayer(self.audio_path, sample_rate=self.decoded.sample_rate)
        anchor = self.player.start()

        self.pipeline = VisualizationPipeline.from_decoded(
            self.decoded,
            fft_size=cfg.fft_size,
            window=cfg.window,
            threaded=cfg.threaded,
            anchor=anchor,
        )

        if cfg.threaded:
            self.worker = AnalysisWorker(self.pipeline, interval=cfg.worker_interval)
            self.worker.start()

        return self.pipeline

    def _should_quit(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return True
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return True
        return False

    def frame(self, surface: pygame.Surface):
        """Advance one frame: analyze (cooperative mode) and redraw."""
        if self.worker is None:
            self.pipeline.tick()
        self.renderer.draw(surface, self.pipeline.buffer.bars())

    def run(self) -> int:
        """
        Run the session until the window closes.

        Returns:
            Number of frames drawn.
        """
        if self.decoded is None:
            self.prepare()

        cfg = self.config
        frames = 0

        pygame.init()
        try:
            screen = pygame.display.set_mode((cfg.chart.width, cfg.chart.height))
            pygame.display.set_caption(cfg.chart.title)
            clock = pygame.time.Clock()

            self.start()

            while not self._should_quit():
                self.frame(screen)
                pygame.display.flip()
                frames += 1

                if cfg.exit_on_end and self.pipeline.finished:
                    logger.info("Track finished")
                    break

                clock.tick(cfg.max_fps)
        finally:
            self.stop()
            pygame.quit()

        logger.info(
            "Session ended after %d frames, %d spectra published",
            frames,
            self.pipeline.published if self.pipeline else 0,
        )
        return frames

    def stop(self):
        """Stop the worker and playback."""
        if self.worker is not None:
            self.worker.stop()
            self.worker = None
        if self.player is not None:
            self.player.stop()
