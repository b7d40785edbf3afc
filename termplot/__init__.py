from termplot.api import plot
from termplot.config import PlotConfig, load_config
from termplot.errors import PlotDataError, PlotRangeError
from termplot.figure import AutoRange, ConsolePlot, FixedRange
from termplot.palette import Color
from termplot.present import AnsiPresenter
from termplot.raster import Cell, CellGrid, GlyphKind
from termplot.scales import ViewWindow, map_to_cell
from termplot.series import BLOCK, Point, Segment, StyleKey

__all__ = [
    "AnsiPresenter",
    "AutoRange",
    "BLOCK",
    "Cell",
    "CellGrid",
    "Color",
    "ConsolePlot",
    "FixedRange",
    "GlyphKind",
    "PlotConfig",
    "PlotDataError",
    "PlotRangeError",
    "Point",
    "Segment",
    "StyleKey",
    "ViewWindow",
    "load_config",
    "map_to_cell",
    "plot",
]
