from __future__ import annotations

import argparse
import math
import time

from cellplot import Aggregation, AxisScale, Chart, Color, LabelPosition, SeriesOverflow


SERIES_FUNCTIONS = (
    (Color.RED, lambda x: math.sin(x) * math.exp(-0.1 * x)),
    (Color.GREEN, lambda x: 0.8 * math.sin(x) + 0.6 * math.sin(2 * x) + 0.4 * math.sin(3 * x)),
    (Color.CYAN, lambda x: math.sin(x) * math.cos(2 * x) + math.cos(x) * math.sin(2 * x)),
)


def build_chart(width: int = 80, height: int = 20) -> Chart:
    chart = Chart(
        width=width,
        height=height,
        title="Multi-Series Demo",
        title_position=LabelPosition.TOP,
        axis_scale=AxisScale.LINEAR,
        aggregation=Aggregation.MEAN,
    )
    for color, _ in SERIES_FUNCTIONS:
        chart.add_series(color=color, overflow=SeriesOverflow.LINEAR_SCALE)
    return chart


def push_frame(chart: Chart, x: float) -> None:
    for series_id, (_, fn) in enumerate(SERIES_FUNCTIONS):
        chart.add_series_entry(series_id, fn(x))


def main() -> None:
    parser = argparse.ArgumentParser(prog="multi_series")
    parser.add_argument("--frames", type=int, default=134)
    parser.add_argument("--delay", type=float, default=0.066, help="Seconds between frames.")
    args = parser.parse_args()

    chart = build_chart()
    for frame in range(args.frames):
        push_frame(chart, -2.0 + frame * 0.03)
        print("\x1b[2J\x1b[H" + chart.paint(), flush=True)
        time.sleep(args.delay)


if __name__ == "__main__":
    main()
