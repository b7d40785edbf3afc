from __future__ import annotations

from typing import Iterable

from termplot.palette import Color
from termplot.raster.grid import CellGrid
from termplot.scales import ViewWindow, map_to_cell
from termplot.series import Point


def draw_point(
    grid: CellGrid,
    window: ViewWindow,
    point: Point,
    color: Color | int,
    glyph: str | None = None,
) -> None:
    col, subrow = map_to_cell(point, window, grid.width, grid.height)
    grid.set_cell(col, subrow, color, glyph)


def draw_points(
    grid: CellGrid,
    window: ViewWindow,
    points: Iterable[Point],
    color: Color | int,
    glyph: str | None = None,
) -> None:
    for point in points:
        draw_point(grid, window, point, color, glyph)
