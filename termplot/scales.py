from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
import math

from termplot.series import Point


@dataclass(frozen=True)
class ViewWindow:
    """Data-space rectangle mapped onto the cell grid.

    ``(x, y)`` is the origin and ``(dx, dy)`` the extent. ``dx == 0`` marks the
    absence of an explicit window.
    """

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def from_corners(cls, x1: float, y1: float, x2: float, y2: float) -> ViewWindow:
        return cls(x=float(x1), y=float(y1), dx=float(x2) - float(x1), dy=float(y2) - float(y1))

    @property
    def is_explicit(self) -> bool:
        return self.dx != 0

    @property
    def is_degenerate(self) -> bool:
        return self.dx == 0 or self.dy == 0

    def x_label_value(self, col: int, width: int) -> float:
        return self.x + col * self.dx / width

    def y_label_value(self, row: int, height: int) -> float:
        return self.y + row * self.dy / height


def map_to_cell(point: Point, window: ViewWindow, width: int, height: int) -> tuple[int, int]:
    """Map a data-space point to ``(col, subrow)``.

    Sub-rows run over ``2 * height``. Results outside the grid are returned as-is;
    the caller drops them. ``window`` must have non-zero extent on both axes.
    """
    col = _floor_scaled(point.x, window.x, window.dx, width)
    subrow = _floor_scaled(point.y, window.y, window.dy, 2 * height)
    return col, subrow


def _floor_scaled(value: float, origin: float, extent: float, cells: int) -> int:
    scaled = (value - origin) * cells / extent
    if math.isfinite(scaled):
        return math.floor(scaled)
    # Float overflow far off the window; the exact index is still finite and gets clipped downstream.
    return math.floor((Fraction(value) - Fraction(origin)) * cells / Fraction(extent))


@dataclass
class Bounds:
    xmin: float = math.inf
    xmax: float = -math.inf
    ymin: float = math.inf
    ymax: float = -math.inf

    @property
    def observed(self) -> bool:
        return self.xmin <= self.xmax and self.ymin <= self.ymax

    def include(self, point: Point) -> None:
        if point.x < self.xmin:
            self.xmin = point.x
        if point.y < self.ymin:
            self.ymin = point.y
        if point.x > self.xmax:
            self.xmax = point.x
        if point.y > self.ymax:
            self.ymax = point.y

    def reset(self) -> None:
        self.xmin = math.inf
        self.xmax = -math.inf
        self.ymin = math.inf
        self.ymax = -math.inf

    def to_window(self) -> ViewWindow:
        if not self.observed:
            return ViewWindow()
        return ViewWindow(x=self.xmin, y=self.ymin, dx=self.xmax - self.xmin, dy=self.ymax - self.ymin)
