from .draw_lines import bresenham, clipped_path, draw_segment, draw_segments
from .draw_markers import draw_point, draw_points
from .grid import Cell, CellGrid, GlyphKind

__all__ = [
    "Cell",
    "CellGrid",
    "GlyphKind",
    "bresenham",
    "clipped_path",
    "draw_point",
    "draw_points",
    "draw_segment",
    "draw_segments",
]
