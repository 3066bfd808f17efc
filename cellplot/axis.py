from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from cellplot.errors import InvalidArgumentError
from cellplot.scales import AxisScale, distribution_for_scale


class Axis:
    """Discrete vertical axis: one label value per row, ascending."""

    def __init__(self, vmin: float, vmax: float, size: int, scale: AxisScale | str = AxisScale.LINEAR) -> None:
        if vmin > vmax:
            raise InvalidArgumentError("incorrect range: min should be less than or equal to max")
        if size <= 1:
            raise InvalidArgumentError("axis size should be >= 2")
        self.min = float(vmin)
        self.max = float(vmax)
        self.size = int(size)
        self.scale = scale
        self.labels: np.ndarray = distribution_for_scale(scale)(self.min, self.max, self.size)

    def get_position(self, value: float) -> int:
        """Row of the label closest to ``value``; row 0 holds the largest label."""
        return self.size - 1 - find_closest_index(self.labels, value)


def find_closest_index(values: Sequence[float], value: float) -> int:
    left = 0
    right = len(values) - 1
    while left <= right:
        index = left + (right - left) // 2
        current = values[index]
        if value < current:
            right = index - 1
        elif value > current:
            left = index + 1
        else:
            return index

    # Outside [values[0], values[-1]].
    if left == 0:
        return 0
    if left >= len(values):
        return len(values) - 1

    lower_diff = abs(values[left - 1] - value)
    upper_diff = abs(values[left] - value)
    return left - 1 if lower_diff <= upper_diff else left
