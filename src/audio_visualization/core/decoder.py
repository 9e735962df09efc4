"""
Audio decoding module.

Loads a whole audio file into memory as mono 16-bit samples and reads
the container's reported duration separately from the decoded data.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import librosa
import numpy as np

from audio_visualization.core.samples import SampleStore

logger = logging.getLogger(__name__)

INT16_SCALE = 32767


class DecodeError(RuntimeError):
    """Raised when an input file cannot be decoded into samples."""


@dataclass
class DecodedAudio:
    """Fully decoded track plus its reported duration."""

    samples: SampleStore
    sample_rate: int
    duration: float  # Seconds, as reported by the container
    path: Path | None = None

    @property
    def n_samples(self) -> int:
        """Total number of decoded samples."""
        return len(self.samples)

    @property
    def decoded_duration(self) -> float:
        """Duration implied by the decoded sample count."""
        return self.n_samples / self.sample_rate

    @property
    def duration_drift(self) -> float:
        """Reported minus decoded duration, in seconds."""
        return self.duration - self.decoded_duration


def to_int16(y: np.ndarray) -> np.ndarray:
    """Convert float samples in [-1, 1] to the signed 16-bit range."""
    return np.round(np.clip(y, -1.0, 1.0) * INT16_SCALE).astype(np.int16)


class AudioDecoder:
    """
    Decodes audio files for analysis.

    Decoding keeps the file's native sample rate and mixes down to mono,
    so sample offsets map directly onto playback time.
    """

    def __init__(self, sample_rate: int | None = None):
        """
        Initialize the decoder.

        Args:
            sample_rate: Target sample rate. None preserves the original.
        """
        self.sample_rate = sample_rate

    def load_audio(self, audio_path: Union[str, Path]) -> tuple[np.ndarray, int]:
        """
        Decode an audio file.

        Args:
            audio_path: Path to audio file (wav, mp3, flac, ogg).

        Returns:
            Tuple of (int16 mono samples, sample_rate).
        """
        try:
            y, sr = librosa.load(audio_path, sr=self.sample_rate, mono=True)
        except Exception as exc:
            raise DecodeError(f"Could not decode {audio_path}: {exc}") from exc

        if y.size == 0:
            raise DecodeError(f"No audio samples decoded from {audio_path}")

        return to_int16(y), int(sr)

    def read_duration(self, audio_path: Union[str, Path]) -> float | None:
        """
        Read the duration reported by the file's container.

        Returns:
            Duration in seconds, or None if the metadata is unreadable.
        """
        try:
            return float(librosa.get_duration(path=audio_path))
        except Exception as exc:
            logger.warning("Could not read duration metadata from %s: %s", audio_path, exc)
            return None

    def load(self, audio_path: Union[str, Path]) -> DecodedAudio:
        """
        Decode a file and collect everything the pipeline needs.

        Args:
            audio_path: Path to audio file.

        Returns:
            DecodedAudio with immutable samples and positive duration.
        """
        audio_path = Path(audio_path)
        if not audio_path.is_file():
            raise DecodeError(f"Input file not found: {audio_path}")

        samples, sr = self.load_audio(audio_path)

        duration = self.read_duration(audio_path)
        if duration is None:
            duration = len(samples) / sr
        if duration <= 0:
            raise DecodeError(f"Non-positive duration for {audio_path}: {duration}")

        logger.info(
            "Decoded %s: %d samples at %d Hz, %.2fs",
            audio_path.name,
            len(samples),
            sr,
            duration,
        )

        return DecodedAudio(
            samples=SampleStore(samples),
            sample_rate=sr,
            duration=duration,
            path=audio_path,
        )
