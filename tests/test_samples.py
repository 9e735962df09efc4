"""Tests for SampleStore and analysis window selection."""

import numpy as np
import pytest

from audio_visualization.core.samples import SampleStore, select_window_start


class TestSelectWindowStart:
    """Tests for mapping playback progress to a sample window."""

    def test_midpoint_of_long_track(self):
        """10000 samples at progress 0.5 should start at 5000."""
        assert select_window_start(0.5, 10000, 128) == 5000

    def test_window_past_end_is_skipped(self):
        """200 samples at progress 0.9 ends at 308 and is invalid."""
        assert select_window_start(0.9, 200, 128) is None

    def test_start_of_track(self):
        assert select_window_start(0.0, 10000, 128) == 0

    def test_start_is_floored(self):
        """Fractional offsets round down."""
        assert select_window_start(0.33333, 1000, 128) == 333

    def test_end_touching_sample_count_is_invalid(self):
        """A window ending exactly at sample_count is rejected."""
        # start = 896, end = 1024
        assert select_window_start(0.875, 1024, 128) is None
        assert select_window_start(0.875 - 1 / 1024, 1024, 128) == 895

    def test_progress_past_one(self):
        """Progress beyond the end of the track yields no window."""
        assert select_window_start(1.0, 10000, 128) is None
        assert select_window_start(1.7, 10000, 128) is None

    def test_negative_progress(self):
        """A clock anchored in the future yields no window."""
        assert select_window_start(-0.01, 10000, 128) is None

    def test_track_shorter_than_window(self):
        assert select_window_start(0.0, 100, 128) is None

    def test_no_window_near_end_for_all_progress(self):
        """Every progress at or past (n - width) / n yields None."""
        n, width = 1024, 128
        threshold = (n - width) / n
        for progress in np.linspace(threshold, 1.5, 200):
            assert select_window_start(float(progress), n, width) is None

    def test_valid_windows_stay_in_range(self):
        """Any returned window ends strictly before sample_count."""
        n, width = 4096, 128
        for progress in np.linspace(0.0, 1.0, 500):
            start = select_window_start(float(progress), n, width)
            if start is not None:
                assert 0 <= start
                assert start + width < n


class TestSampleStore:
    """Tests for the immutable sample container."""

    def test_length(self, ramp_samples):
        store = SampleStore(ramp_samples)
        assert len(store) == 10000
        assert store.sample_count == 10000

    def test_samples_are_int16(self):
        store = SampleStore([1, -2, 3])
        assert store.samples.dtype == np.int16

    def test_store_is_read_only(self, ramp_samples):
        """The backing array cannot be mutated."""
        store = SampleStore(ramp_samples)
        with pytest.raises(ValueError):
            store.samples[0] = 5

    def test_store_copies_input(self, ramp_samples):
        """Mutating the source array does not affect the store."""
        store = SampleStore(ramp_samples)
        ramp_samples[0] = 1234
        assert store.samples[0] == 0

    def test_window_contents(self, ramp_samples):
        """window() returns the exact consecutive samples."""
        store = SampleStore(ramp_samples)
        window = store.window(5000, 128)

        assert len(window) == 128
        np.testing.assert_array_equal(window, np.arange(5000, 5128))

    def test_window_out_of_range(self, ramp_samples):
        store = SampleStore(ramp_samples)
        with pytest.raises(IndexError):
            store.window(9950, 128)
        with pytest.raises(IndexError):
            store.window(-1, 128)
