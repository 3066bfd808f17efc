from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

import numpy as np

from cellplot.adapters.normalize import coerce_choice
from cellplot.errors import UnsupportedConfigurationError
from cellplot.scales import AxisScale


AggregationFn = Callable[[Sequence[float], int, int], float]


class Aggregation(str, Enum):
    MEAN = "mean"
    MAX = "max"
    MIN = "min"
    SKIP = "skip"


def aggregate_mean(data: Sequence[float], start: int, end: int) -> float:
    if start >= end:
        return float(data[end])

    length = end - start + 1
    value = 0.0
    for i in range(start, end + 1):
        value += float(data[i]) / length
    return value


def aggregate_max(data: Sequence[float], start: int, end: int) -> float:
    if start >= end:
        return float(data[end])
    return float(np.max(np.asarray(data[start : end + 1], dtype=np.float64)))


def aggregate_min(data: Sequence[float], start: int, end: int) -> float:
    if start >= end:
        return float(data[end])
    return float(np.min(np.asarray(data[start : end + 1], dtype=np.float64)))


def aggregate_skip(data: Sequence[float], start: int, end: int) -> float:
    return float(data[end])


def resolve_aggregation(kind: Aggregation | str | AggregationFn) -> AggregationFn:
    if callable(kind) and not isinstance(kind, Aggregation):
        return kind
    match coerce_choice(Aggregation, kind, label="aggregation"):
        case Aggregation.MEAN:
            return aggregate_mean
        case Aggregation.MAX:
            return aggregate_max
        case Aggregation.MIN:
            return aggregate_min
        case Aggregation.SKIP:
            return aggregate_skip
        case other:
            raise UnsupportedConfigurationError(f"unsupported aggregation: {other!r}")


def default_aggregation(scale: AxisScale | str) -> Aggregation:
    match coerce_choice(AxisScale, scale, label="axis scale"):
        case AxisScale.LINEAR:
            return Aggregation.MEAN
        case AxisScale.LOG:
            return Aggregation.MAX
        case AxisScale.LOG_INVERTED:
            return Aggregation.MIN
        case _:
            return Aggregation.SKIP
