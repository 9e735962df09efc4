"""Core decode, timing, analysis and buffering modules."""

from audio_visualization.core.analyzer import SpectralAnalyzer
from audio_visualization.core.buffer import BufferHandle, SharedVisualBuffer, VisualBuffer
from audio_visualization.core.clock import PlaybackClock
from audio_visualization.core.decoder import AudioDecoder
from audio_visualization.core.samples import SampleStore

__all__ = [
    "SpectralAnalyzer",
    "BufferHandle",
    "SharedVisualBuffer",
    "VisualBuffer",
    "PlaybackClock",
    "AudioDecoder",
    "SampleStore",
]
