"""Real-time spectrum visualization synchronized with audio playback."""

from audio_visualization.core.analyzer import FFT_SIZE, SpectralAnalyzer
from audio_visualization.core.buffer import SharedVisualBuffer, VisualBuffer, make_buffer
from audio_visualization.core.clock import PlaybackClock
from audio_visualization.core.decoder import AudioDecoder, DecodedAudio, DecodeError
from audio_visualization.core.samples import SampleStore, select_window_start
from audio_visualization.pipeline import VisualizationPipeline

__version__ = "0.1.0"
__all__ = [
    "FFT_SIZE",
    "SpectralAnalyzer",
    "VisualBuffer",
    "SharedVisualBuffer",
    "make_buffer",
    "PlaybackClock",
    "AudioDecoder",
    "DecodedAudio",
    "DecodeError",
    "SampleStore",
    "select_window_start",
    "VisualizationPipeline",
]
