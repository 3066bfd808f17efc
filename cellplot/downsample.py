from __future__ import annotations

from enum import Enum
import logging
import math

import numpy as np

from cellplot.adapters.normalize import coerce_choice
from cellplot.aggregation import AggregationFn
from cellplot.errors import UnsupportedConfigurationError
from cellplot.scales import DistributionFn, inverted_log_distribution, linear_distribution


LOGGER = logging.getLogger(__name__)

# Overflow (in samples) at which log resampling reaches its full curve.
LOG_OVERFLOW_SATURATION = 50


class SeriesOverflow(str, Enum):
    LINEAR_SCALE = "linear_scale"
    LOG_SCALE = "log_scale"
    CLAMP = "clamp"


def shrink_data(
    data: np.ndarray,
    max_length: int,
    distribution: DistributionFn,
    aggregation: AggregationFn,
) -> np.ndarray:
    """Collapse ``data`` into ``max_length`` buckets laid out by ``distribution``.

    Bucket boundaries are the distribution's points over ``[0, len(data) - 1]``
    rounded half-up to indices; each bucket runs from the previous boundary
    plus one up to and including its own boundary and is reduced by
    ``aggregation``.
    """
    if data.size <= max_length:
        return data

    shrunk = np.empty(max_length, dtype=np.float64)
    prev_index: int | None = None
    for i, position in enumerate(distribution(0, data.size - 1, max_length)):
        index = math.floor(float(position) + 0.5)
        if prev_index is None:
            prev_index = index
        shrunk[i] = aggregation(data, prev_index, index)
        prev_index = index + 1
    return shrunk


def clamp_distribution(vmin: float, vmax: float, count: int) -> np.ndarray:
    # One index per slot over the trailing window [vmax - count + 1, vmax].
    return linear_distribution(vmax - count + 1, vmax, count)


def log_overflow_ratio(length: int, max_length: int) -> float:
    return min(1.0, (length - max_length) / LOG_OVERFLOW_SATURATION)


def resample_overflow(
    data: np.ndarray,
    overflow: SeriesOverflow | str,
    max_length: int,
    aggregation: AggregationFn,
) -> np.ndarray:
    policy = coerce_choice(SeriesOverflow, overflow, label="overflow policy")
    if data.size <= max_length:
        return data

    LOGGER.debug("resampling %d samples into %d columns (%s)", data.size, max_length, policy.value)
    match policy:
        case SeriesOverflow.LINEAR_SCALE:
            return shrink_data(data, max_length, linear_distribution, aggregation)
        case SeriesOverflow.LOG_SCALE:
            ratio = log_overflow_ratio(data.size, max_length)

            def distribution(vmin: float, vmax: float, count: int) -> np.ndarray:
                return inverted_log_distribution(vmin, vmax, count, ratio)

            return shrink_data(data, max_length, distribution, aggregation)
        case SeriesOverflow.CLAMP:
            return shrink_data(data, max_length, clamp_distribution, aggregation)
        case other:
            raise UnsupportedConfigurationError(f"unsupported overflow policy: {other!r}")


def zoom_window(data: np.ndarray, max_length: int) -> np.ndarray:
    if data.size <= max_length:
        return data
    return data[data.size - max_length :]
