"""
Spectral analysis module.

Computes the magnitude spectrum of one fixed-size slice of samples
with a forward FFT in single precision.
"""

import numpy as np
import scipy.fft
from scipy import signal as scipy_signal

# Transform width used for every analysis step in a session
FFT_SIZE = 128


class SpectralAnalyzer:
    """
    Fixed-size forward FFT magnitude analyzer.

    Samples are treated as a real signal. One magnitude is produced per
    transform coefficient, so a real input yields a conjugate-symmetric
    spectrum of length `fft_size`. The analyzer keeps no state between
    calls apart from the taper computed at construction.
    """

    def __init__(self, fft_size: int = FFT_SIZE, window: str = "boxcar"):
        """
        Initialize the analyzer.

        Args:
            fft_size: Transform width. Must be a positive power of two.
            window: Taper name understood by scipy.signal.get_window.
                    "boxcar" applies no taper (raw rectangular window).
        """
        if fft_size <= 0 or fft_size & (fft_size - 1):
            raise ValueError(f"fft_size must be a positive power of two, got {fft_size}")

        self.fft_size = fft_size
        self.window = window
        self._taper = scipy_signal.get_window(window, fft_size, fftbins=True).astype(np.float32)
        self._is_rectangular = bool(np.all(self._taper == 1.0))

    def analyze(self, samples: np.ndarray) -> np.ndarray:
        """
        Compute the magnitude spectrum of one slice.

        Args:
            samples: Exactly `fft_size` samples in temporal order.

        Returns:
            float32 array of `fft_size` non-negative magnitudes.
        """
        if len(samples) != self.fft_size:
            raise ValueError(
                f"Expected {self.fft_size} samples, got {len(samples)}"
            )

        buffer = np.asarray(samples, dtype=np.float32)
        if not self._is_rectangular:
            buffer = buffer * self._taper

        # complex64 input keeps scipy in single precision
        spectrum = scipy.fft.fft(buffer.astype(np.complex64))

        return np.abs(spectrum).astype(np.float32)

    def __call__(self, samples: np.ndarray) -> np.ndarray:
        return self.analyze(samples)
