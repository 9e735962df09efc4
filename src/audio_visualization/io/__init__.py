"""Audio output modules."""

from audio_visualization.io.playback import AudioPlayer, PlaybackError

__all__ = ["AudioPlayer", "PlaybackError"]
