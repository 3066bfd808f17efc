from __future__ import annotations

import unittest

import numpy as np

from cellplot.aggregation import aggregate_mean, aggregate_skip
from cellplot.downsample import (
    SeriesOverflow,
    clamp_distribution,
    log_overflow_ratio,
    resample_overflow,
    shrink_data,
    zoom_window,
)
from cellplot.errors import UnsupportedConfigurationError
from cellplot.scales import linear_distribution


class ShrinkDataTests(unittest.TestCase):
    def test_short_series_is_returned_unchanged(self) -> None:
        data = np.arange(5, dtype=np.float64)
        self.assertIs(shrink_data(data, 5, linear_distribution, aggregate_mean), data)
        self.assertIs(shrink_data(data, 8, linear_distribution, aggregate_mean), data)

    def test_output_length_is_min_of_target_and_input(self) -> None:
        for length in (3, 10, 57):
            data = np.arange(length, dtype=np.float64)
            for target in (2, 4, 10, 60):
                out = shrink_data(data, target, linear_distribution, aggregate_mean)
                self.assertEqual(out.size, min(target, length))

    def test_linear_buckets_partition_the_series(self) -> None:
        data = np.arange(10, dtype=np.float64)
        np.testing.assert_allclose(shrink_data(data, 4, linear_distribution, aggregate_skip), [0.0, 3.0, 6.0, 9.0])
        np.testing.assert_allclose(shrink_data(data, 4, linear_distribution, aggregate_mean), [0.0, 2.0, 5.0, 8.0])

    def test_boundaries_round_half_up(self) -> None:
        # linear(0, 5, 3) == [0, 2.5, 5]; 2.5 must land on index 3.
        data = np.arange(6, dtype=np.float64)
        np.testing.assert_allclose(shrink_data(data, 3, linear_distribution, aggregate_skip), [0.0, 3.0, 5.0])


class OverflowPolicyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.data = np.arange(1, 13, dtype=np.float64)

    def test_clamp_keeps_most_recent_window(self) -> None:
        np.testing.assert_allclose(clamp_distribution(0, 11, 3), [9.0, 10.0, 11.0])
        out = resample_overflow(self.data, SeriesOverflow.CLAMP, 3, aggregate_mean)
        np.testing.assert_allclose(out, [10.0, 11.0, 12.0])

    def test_clamp_window_anchored_one_sample_earlier_merges_buckets(self) -> None:
        def anchored_at_max_minus_count(vmin: float, vmax: float, count: int) -> np.ndarray:
            return linear_distribution(vmax - count, vmax, count)

        out = shrink_data(self.data, 3, anchored_at_max_minus_count, aggregate_skip)
        # Sample 10 is swallowed by the middle bucket, so this variant is not a plain window.
        np.testing.assert_allclose(out, [9.0, 11.0, 12.0])
        ours = resample_overflow(self.data, "clamp", 3, aggregate_skip)
        np.testing.assert_allclose(ours, self.data[-3:])

    def test_linear_scale_policy(self) -> None:
        out = resample_overflow(self.data, SeriesOverflow.LINEAR_SCALE, 4, aggregate_skip)
        self.assertEqual(out.size, 4)
        self.assertEqual(out[0], 1.0)
        self.assertEqual(out[-1], 12.0)

    def test_log_scale_policy_keeps_both_ends(self) -> None:
        data = np.arange(100, dtype=np.float64)
        out = resample_overflow(data, SeriesOverflow.LOG_SCALE, 10, aggregate_skip)
        self.assertEqual(out.size, 10)
        self.assertEqual(out[0], 0.0)
        self.assertEqual(out[-1], 99.0)
        self.assertTrue(np.all(np.diff(out) >= 0))

    def test_log_overflow_ratio_saturates(self) -> None:
        self.assertAlmostEqual(log_overflow_ratio(20, 10), 0.2)
        self.assertEqual(log_overflow_ratio(60, 10), 1.0)
        self.assertEqual(log_overflow_ratio(500, 10), 1.0)

    def test_unknown_policy_is_rejected(self) -> None:
        with self.assertRaises(UnsupportedConfigurationError):
            resample_overflow(self.data, "fancy", 3, aggregate_mean)
        with self.assertRaises(UnsupportedConfigurationError):
            resample_overflow(self.data[:2], "fancy", 3, aggregate_mean)

    def test_fitting_series_passes_through(self) -> None:
        self.assertIs(resample_overflow(self.data, SeriesOverflow.LOG_SCALE, 12, aggregate_mean), self.data)


class ZoomWindowTests(unittest.TestCase):
    def test_zoom_keeps_trailing_samples(self) -> None:
        data = np.arange(10, dtype=np.float64)
        np.testing.assert_allclose(zoom_window(data, 4), [6.0, 7.0, 8.0, 9.0])
        self.assertIs(zoom_window(data, 10), data)


if __name__ == "__main__":
    unittest.main()
