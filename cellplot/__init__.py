from cellplot.aggregation import Aggregation
from cellplot.api import plot
from cellplot.axis import Axis
from cellplot.chart import Chart
from cellplot.downsample import SeriesOverflow
from cellplot.errors import ChartError, InvalidArgumentError, SeriesIndexError, UnsupportedConfigurationError
from cellplot.layout import MultiChart
from cellplot.scales import AxisScale
from cellplot.series import SeriesConfig
from cellplot.styles import BackgroundColor, Color, LabelPosition

__all__ = [
    "Aggregation",
    "Axis",
    "AxisScale",
    "BackgroundColor",
    "Chart",
    "ChartError",
    "Color",
    "InvalidArgumentError",
    "LabelPosition",
    "MultiChart",
    "SeriesConfig",
    "SeriesIndexError",
    "SeriesOverflow",
    "UnsupportedConfigurationError",
    "plot",
]
