from __future__ import annotations

import argparse
import math
import time

from cellplot import Aggregation, AxisScale, BackgroundColor, Color, MultiChart, SeriesOverflow


def build_dashboard() -> MultiChart:
    dashboard = MultiChart(
        title="Dashboard chart",
        title_boundary=2,
        title_spacing=8,
        title_foreground=Color.BLUE,
        title_background=BackgroundColor.BLACK,
    )
    dashboard.add_chart(0, 0, 40, 31, title="overflow: clamp")
    dashboard.add_chart(42, 0, 60, 15, title="overflow: linear scale (agg: max)", axis_scale=AxisScale.LOG)
    dashboard.add_chart(
        42,
        16,
        60,
        15,
        title="overflow: log scale (agg: mean)",
        axis_scale=AxisScale.LOG_INVERTED,
        aggregation=Aggregation.MEAN,
    )

    dashboard.add_chart_series(0, color=Color.RED, overflow=SeriesOverflow.CLAMP)
    dashboard.add_chart_series(1, color=Color.BLUE, overflow=SeriesOverflow.LINEAR_SCALE)
    dashboard.add_chart_series(2, color=Color.YELLOW, overflow=SeriesOverflow.LOG_SCALE)
    return dashboard


def push_frame(dashboard: MultiChart, i: int) -> None:
    dashboard.add_series_entry(0, 0, math.cos(i * math.pi / 15))
    dashboard.add_series_entry(1, 0, math.sin(i * math.pi / 30) * 100 + 2)
    dashboard.add_series_entry(2, 0, math.cos(i * math.pi / 30) * 100 + 2)


def main() -> None:
    parser = argparse.ArgumentParser(prog="dashboard")
    parser.add_argument("--frames", type=int, default=2000)
    parser.add_argument("--delay", type=float, default=0.066, help="Seconds between frames.")
    args = parser.parse_args()

    dashboard = build_dashboard()
    for i in range(args.frames):
        push_frame(dashboard, i)
        print("\x1b[2J\x1b[H" + dashboard.paint(), flush=True)
        time.sleep(args.delay)


if __name__ == "__main__":
    main()
