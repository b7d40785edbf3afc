from __future__ import annotations

from typing import Iterable, Iterator

from termplot.palette import Color
from termplot.raster.grid import CellGrid
from termplot.scales import ViewWindow, map_to_cell
from termplot.series import Segment


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the 8-connected cell path from ``(x0, y0)`` to ``(x1, y1)``, both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if err > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def clipped_path(x0: int, y0: int, x1: int, y1: int, width: int, height: int) -> Iterator[tuple[int, int]]:
    """Yield the cells of ``bresenham(x0, y0, x1, y1)`` that fall inside ``[0, width) x [0, height)``.

    Cells come out in path order, but the off-grid stretch is never walked: the
    entry of each column (steep) or row (shallow) of the path is computed in closed
    form from the error term, so the cost is bounded by the clip rectangle.
    """
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1

    if dy >= dx:
        for k in _clip_steps(0, dx, x0, sx, width):
            if dx == 0:
                lo, hi = 0, dy
            else:
                lo = 0 if k == 0 else _steep_entry(k, dx, dy)
                hi = dy if k == dx else (k * dy) // dx
            for m in _clip_steps(lo, hi, y0, sy, height):
                yield x0 + sx * k, y0 + sy * m
    else:
        for m in _clip_steps(0, dy, y0, sy, height):
            lo = 0 if m == 0 else _shallow_entry(m, dx, dy)
            hi = dx if m == dy else ((2 * m + 1) * dx) // (2 * dy)
            for k in _clip_steps(lo, hi, x0, sx, width):
                yield x0 + sx * k, y0 + sy * m


def _steep_entry(k: int, dx: int, dy: int) -> int:
    # Column k-1 ends on its last y step; the diagonal move into column k also steps y
    # when the pre-step error satisfies 2*err < dx.
    last = ((k - 1) * dy) // dx
    return last + 1 if (2 * last + 1) * dx < 2 * k * dy else last


def _shallow_entry(m: int, dx: int, dy: int) -> int:
    last = ((2 * m - 1) * dx) // (2 * dy)
    return last + 1 if m * dx > last * dy else last


def _clip_steps(lo: int, hi: int, origin: int, step: int, size: int) -> range:
    # Step counts n in [lo, hi] with origin + step * n inside [0, size).
    if step > 0:
        first = max(lo, -origin)
        last = min(hi, size - 1 - origin)
    else:
        first = max(lo, origin - (size - 1))
        last = min(hi, origin)
    return range(first, last + 1)


def draw_segment(
    grid: CellGrid,
    window: ViewWindow,
    segment: Segment,
    color: Color | int,
    glyph: str | None = None,
) -> None:
    x0, y0 = map_to_cell(segment.a, window, grid.width, grid.height)
    x1, y1 = map_to_cell(segment.b, window, grid.width, grid.height)
    for col, subrow in clipped_path(x0, y0, x1, y1, grid.width, grid.subrows):
        grid.set_cell(col, subrow, color, glyph)


def draw_segments(
    grid: CellGrid,
    window: ViewWindow,
    segments: Iterable[Segment],
    color: Color | int,
    glyph: str | None = None,
) -> None:
    for segment in segments:
        draw_segment(grid, window, segment, color, glyph)
