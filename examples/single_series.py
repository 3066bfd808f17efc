from __future__ import annotations

import numpy as np

from cellplot import Chart


def build_chart(width: int = 80, height: int = 20) -> Chart:
    chart = Chart(width=width, height=height)
    series_id = chart.add_series()

    x = np.arange(-2.0, 2.0, 0.05)
    y = np.sin(x) ** 3 + np.cos(x) ** 3 - 1.5 * np.sin(x) * np.cos(x)
    chart.add_series_range(series_id, y)
    return chart


def main() -> None:
    print(build_chart().paint())


if __name__ == "__main__":
    main()
