"""
Audio output through the pygame mixer.

Streams the same file the analysis decoded, independently of the
sample store. There is no transport control beyond start and stop.
"""

import logging
import time
from pathlib import Path
from typing import Union

import pygame

logger = logging.getLogger(__name__)


class PlaybackError(RuntimeError):
    """Raised when the output device or stream cannot be started."""


class AudioPlayer:
    """Plays one audio file on the default output device."""

    def __init__(
        self,
        audio_path: Union[str, Path],
        sample_rate: int = 44100,
        buffer_size: int = 1024,
    ):
        """
        Initialize the player.

        Args:
            audio_path: File to play.
            sample_rate: Mixer frequency, normally the file's native rate.
            buffer_size: Mixer buffer size in samples.
        """
        self.audio_path = Path(audio_path)
        self.sample_rate = sample_rate
        self.buffer_size = buffer_size
        self._started = False

    def start(self) -> float:
        """
        Open the output device and begin playback.

        Returns:
            perf_counter() instant taken as playback starts.
        """
        # pygame.init() opens the mixer at its default rate; reopen at ours
        if pygame.mixer.get_init():
            pygame.mixer.quit()

        try:
            pygame.mixer.init(frequency=self.sample_rate, buffer=self.buffer_size)
        except pygame.error as exc:
            raise PlaybackError(f"Could not open audio device: {exc}") from exc

        try:
            pygame.mixer.music.load(str(self.audio_path))
            pygame.mixer.music.play()
        except pygame.error as exc:
            pygame.mixer.quit()
            raise PlaybackError(f"Could not start playback of {self.audio_path}: {exc}") from exc

        anchor = time.perf_counter()
        self._started = True
        logger.info("Playback started: %s at %d Hz", self.audio_path.name, self.sample_rate)
        return anchor

    @property
    def is_playing(self) -> bool:
        return self._started and bool(pygame.mixer.music.get_busy())

    def stop(self):
        """Stop playback and release the output device."""
        if not self._started:
            return
        self._started = False
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.quit()
        logger.info("Playback stopped")
