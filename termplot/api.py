from __future__ import annotations

from termplot.display import resolve_default_plot_size
from termplot.figure import ConsolePlot
from termplot.palette import Color


def plot(
    width: int | None = None,
    height: int | None = None,
    *,
    background: Color | int | str = Color.BLACK,
) -> ConsolePlot:
    if width is not None and width <= 0:
        raise ValueError("width must be > 0")
    if height is not None and height <= 0:
        raise ValueError("height must be > 0")
    if width is None or height is None:
        default_w, default_h = resolve_default_plot_size()
        width = default_w if width is None else width
        height = default_h if height is None else height
    return ConsolePlot(width=width, height=height, background=background)
