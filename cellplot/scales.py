from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

import numpy as np

from cellplot.adapters.normalize import coerce_choice
from cellplot.errors import InvalidArgumentError, UnsupportedConfigurationError


DistributionFn = Callable[[float, float, int], np.ndarray]


class AxisScale(str, Enum):
    LINEAR = "linear"
    LOG = "log"
    LOG_INVERTED = "log_inverted"


def linear_distribution(vmin: float, vmax: float, count: int) -> np.ndarray:
    _check_count(count)
    if vmin > vmax:
        vmin, vmax = vmax, vmin

    step = (vmax - vmin) / (count - 1)
    return vmin + np.arange(count, dtype=np.float64) * step


def log_distribution(vmin: float, vmax: float, count: int, ratio: float = 1.0) -> np.ndarray:
    """Points packed towards ``vmin``, spreading out logarithmically to ``vmax``.

    ``ratio`` blends between a plain linear spacing (0) and the full
    logarithmic one (1). Ranges reaching below 1 are shifted up while the
    fractions are computed so the curve never sees a non-positive value.
    """
    _check_count(count)
    if vmin > vmax:
        vmin, vmax = vmax, vmin

    offset = 0.0
    if vmin < 1:
        offset = abs(vmin) + 1
        vmin += offset
        vmax += offset

    ratio = max(0.0, min(1.0, float(ratio)))
    linear = np.arange(count, dtype=np.float64) / (count - 1)
    logarithmic = np.power(10.0, linear) / 10.0
    # 10**0 / 10 would skip the lower bound, so the first point is pinned to it.
    logarithmic[0] = 0.0

    interpolated = (1.0 - ratio) * linear + ratio * logarithmic
    return (vmin + interpolated * (vmax - vmin)) - offset


def inverted_log_distribution(vmin: float, vmax: float, count: int, ratio: float = 1.0) -> np.ndarray:
    """Mirror image of :func:`log_distribution`: points packed towards ``vmax``."""
    values = log_distribution(vmin, vmax, count, ratio)[::-1]
    deltas = np.zeros_like(values)
    deltas[1:] = values[:-1] - values[1:]
    return min(vmin, vmax) + np.cumsum(deltas)


def distribution_for_scale(scale: AxisScale | str) -> DistributionFn:
    match coerce_choice(AxisScale, scale, label="axis scale"):
        case AxisScale.LINEAR:
            return linear_distribution
        case AxisScale.LOG:
            return log_distribution
        case AxisScale.LOG_INVERTED:
            return inverted_log_distribution
        case other:
            raise UnsupportedConfigurationError(f"unsupported axis scale: {other!r}")


def global_limits(series: Iterable[Any]) -> tuple[float, float]:
    vmin = np.inf
    vmax = -np.inf
    for values in series:
        arr = np.asarray(values, dtype=np.float64)
        finite = arr[np.isfinite(arr)]
        if finite.size == 0:
            continue
        vmin = min(vmin, float(np.min(finite)))
        vmax = max(vmax, float(np.max(finite)))

    if np.isfinite(vmin):
        return (vmin, vmax)
    return (0.0, 0.0)


def format_label(value: float, fraction_digits: int = 2) -> str:
    out = f"{value:.{fraction_digits}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _check_count(count: int) -> None:
    if count < 2:
        raise InvalidArgumentError("count should be greater or equal to 2")
