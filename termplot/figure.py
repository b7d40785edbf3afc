from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any

from termplot.adapters import SeriesData, normalize_xy
from termplot.errors import PlotDataError, PlotRangeError
from termplot.palette import Color, coerce_color
from termplot.raster import CellGrid, draw_point, draw_points, draw_segment, draw_segments
from termplot.scales import Bounds, ViewWindow
from termplot.series import BLOCK, PlotData, Point, Segment, StyleKey, validate_glyph


LOGGER = logging.getLogger(__name__)

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10


@dataclass
class AutoRange:
    """Window derived from the data bounds; known only after a render pass."""

    window: ViewWindow | None = None


@dataclass(frozen=True)
class FixedRange:
    window: ViewWindow


RangeState = AutoRange | FixedRange


class ConsolePlot:
    """Collects styled points and segments and rasterizes them onto a cell grid.

    With a fixed draw range each submission is rasterized immediately and kept for
    later passes. Without one, submissions only widen the running bounds and
    appear once :meth:`render` derives the window from them.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        background: Color | int | str = Color.BLACK,
    ) -> None:
        self._grid = CellGrid(width, height, background=coerce_color(background))
        self._data = PlotData()
        self._bounds = Bounds()
        self._range: RangeState = AutoRange()

    @property
    def grid(self) -> CellGrid:
        return self._grid

    @property
    def data(self) -> PlotData:
        return self._data

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def background(self) -> Color:
        return Color(self._grid.background)

    @property
    def inverted_y(self) -> bool:
        return self._grid.inverted_y

    @property
    def range_state(self) -> RangeState:
        return self._range

    @property
    def view_window(self) -> ViewWindow | None:
        return self._range.window

    def set_size(self, width: int, height: int) -> None:
        self._grid.resize(width, height)

    def invert_y_axis(self, enabled: bool = True) -> None:
        self._grid.inverted_y = bool(enabled)

    def set_background_color(self, color: Color | int | str) -> None:
        self._grid.background = int(coerce_color(color))

    def set_draw_range(self, x1: float = 0, y1: float = 0, x2: float = 0, y2: float = 0) -> None:
        window = ViewWindow.from_corners(x1, y1, x2, y2)
        if not all(math.isfinite(v) for v in (window.x, window.y, window.dx, window.dy)):
            raise PlotRangeError("draw range must be finite")
        if not window.is_explicit:
            self.clear_draw_range()
            return
        if window.dy == 0:
            raise PlotRangeError("draw range must have non-zero height")
        self._range = FixedRange(window)
        LOGGER.debug("draw range fixed to %s", window)
        self._grid.reset()

    def clear_draw_range(self) -> None:
        self._range = AutoRange()
        LOGGER.debug("draw range cleared; using data bounds")
        self._grid.reset()

    def clear_data(self) -> None:
        self._grid.reset()
        self._bounds.reset()
        self._data.clear()
        if isinstance(self._range, AutoRange):
            self._range = AutoRange()

    def add_point(
        self,
        x: float,
        y: float,
        color: Color | int | str = Color.WHITE,
        glyph: str | None = BLOCK,
    ) -> None:
        point = _finite_point(x, y)
        style = StyleKey(glyph=validate_glyph(glyph), color=coerce_color(color))
        self._data.add_point(style, point)
        self._bounds.include(point)
        if isinstance(self._range, FixedRange):
            draw_point(self._grid, self._range.window, point, style.color, style.glyph)

    def add_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: Color | int | str = Color.WHITE,
        glyph: str | None = BLOCK,
    ) -> None:
        segment = Segment(_finite_point(x1, y1), _finite_point(x2, y2))
        style = StyleKey(glyph=validate_glyph(glyph), color=coerce_color(color))
        self._data.add_segment(style, segment)
        self._bounds.include(segment.a)
        self._bounds.include(segment.b)
        if isinstance(self._range, FixedRange):
            draw_segment(self._grid, self._range.window, segment, style.color, style.glyph)

    def add_points(
        self,
        xs: Any,
        ys: Any = None,
        color: Color | int | str = Color.WHITE,
        glyph: str | None = BLOCK,
    ) -> int:
        """Add every finite sample of a series as a point; returns how many were kept.

        A single positional series is treated as y values against their index.
        """
        series = _series(xs, ys)
        count = 0
        for x, y in zip(series.x[series.mask].tolist(), series.y[series.mask].tolist()):
            self.add_point(x, y, color=color, glyph=glyph)
            count += 1
        return count

    def add_polyline(
        self,
        xs: Any,
        ys: Any = None,
        color: Color | int | str = Color.WHITE,
        glyph: str | None = BLOCK,
    ) -> int:
        """Join consecutive finite samples with segments; non-finite samples break the line."""
        series = _series(xs, ys)
        count = 0
        for i in range(series.x.size - 1):
            if not (series.mask[i] and series.mask[i + 1]):
                continue
            self.add_line(
                float(series.x[i]),
                float(series.y[i]),
                float(series.x[i + 1]),
                float(series.y[i + 1]),
                color=color,
                glyph=glyph,
            )
            count += 1
        return count

    def render(self) -> CellGrid:
        """Rasterize the whole dataset from a clean grid and return the grid.

        All segments go down before any point so markers sit on top of curves.
        """
        window = self._resolve_window()
        self._grid.reset()
        for style, segments in self._data.lines.items():
            draw_segments(self._grid, window, segments, style.color, style.glyph)
        for style, points in self._data.points.items():
            draw_points(self._grid, window, points, style.color, style.glyph)
        LOGGER.debug(
            "rendered %d segments and %d points into %dx%d grid",
            self._data.segment_count,
            self._data.point_count,
            self._grid.width,
            self._grid.height,
        )
        return self._grid

    def _resolve_window(self) -> ViewWindow:
        if isinstance(self._range, FixedRange):
            return self._range.window
        if not self._bounds.observed:
            LOGGER.warning("render requested before any data was added")
            raise PlotRangeError("no data to derive a view window from")
        window = self._bounds.to_window()
        if not (math.isfinite(window.dx) and math.isfinite(window.dy)):
            LOGGER.warning("data bounds overflow: %s", window)
            raise PlotRangeError("data bounds span more than a float can represent; set an explicit draw range")
        if window.is_degenerate:
            LOGGER.warning("data bounds are degenerate: %s", window)
            raise PlotRangeError("data bounds have zero width or height; set an explicit draw range")
        self._range = AutoRange(window)
        return window


def _finite_point(x: float, y: float) -> Point:
    try:
        point = Point(float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"coordinates must be numeric, got ({x!r}, {y!r})") from exc
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise PlotDataError(f"coordinates must be finite, got ({point.x}, {point.y})")
    return point


def _series(xs: Any, ys: Any) -> SeriesData:
    if ys is None:
        return normalize_xy(xs)
    return normalize_xy(ys, x=xs)
