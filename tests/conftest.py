"""Pytest configuration and shared fixtures."""

import os

import numpy as np
import pytest

# Headless pygame for renderer and session tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Default sample rate for test audio
TEST_SR = 22050


class FakeTime:
    """Manually advanced monotonic time source."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def sample_rate() -> int:
    """Default sample rate for tests."""
    return TEST_SR


@pytest.fixture
def fake_time() -> FakeTime:
    """Controllable time source for PlaybackClock."""
    return FakeTime()


@pytest.fixture
def pure_sine(sample_rate: int) -> tuple[np.ndarray, int]:
    """
    Generate a 2 second 440Hz sine wave in the int16 range.

    Returns:
        Tuple of (samples, sample_rate).
    """
    duration = 2.0
    t = np.linspace(0, duration, int(sample_rate * duration), endpoint=False)
    y = 0.5 * np.sin(2 * np.pi * 440.0 * t)
    return (y * 32767).astype(np.int16), sample_rate


@pytest.fixture
def ramp_samples() -> np.ndarray:
    """10000 samples whose value encodes their own offset."""
    return (np.arange(10000) % 30000).astype(np.int16)


@pytest.fixture
def temp_audio_file(tmp_path, pure_sine):
    """Write the sine fixture to a 16-bit WAV file."""
    import soundfile as sf

    y, sr = pure_sine
    audio_path = tmp_path / "test_audio.wav"
    sf.write(audio_path, y, sr, subtype="PCM_16")
    return audio_path
