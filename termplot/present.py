from __future__ import annotations

from dataclasses import dataclass
import io
import logging
import sys
from typing import TextIO

from termplot.errors import PlotRangeError
from termplot.figure import ConsolePlot
from termplot.palette import RESET, sgr_for_attr
from termplot.scales import ViewWindow


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnsiPresenter:
    """Writes a rendered plot as ANSI-colored text.

    ``x_format``/``y_format`` are printf-style patterns (for example ``"%6.2f"``)
    for the axis labels; an empty pattern hides that axis.
    """

    x_format: str = ""
    y_format: str = ""

    def write(self, plot: ConsolePlot, stream: TextIO | None = None) -> None:
        out = sys.stdout if stream is None else stream
        grid = plot.grid
        window = self._label_window(plot)

        for row, cells in grid.rows():
            last_attr = -1
            parts: list[str] = []
            for col, cell in enumerate(cells):
                if col == 0 or cell.attr != last_attr:
                    parts.append(sgr_for_attr(cell.attr))
                    last_attr = cell.attr
                parts.append(cell.glyph)
            if self.y_format:
                assert window is not None
                parts.append(RESET)
                parts.append(self.y_format % window.y_label_value(row, grid.height))
            parts.append("\n")
            out.write("".join(parts))

        out.write(RESET)
        if self.x_format:
            assert window is not None
            out.write(self._x_axis_line(window, grid.width))
            out.write("\n")

    def to_string(self, plot: ConsolePlot) -> str:
        buf = io.StringIO()
        self.write(plot, buf)
        return buf.getvalue()

    def _label_window(self, plot: ConsolePlot) -> ViewWindow | None:
        if not (self.x_format or self.y_format):
            return None
        window = plot.view_window
        if window is None:
            LOGGER.warning("axis labels requested but the plot has no view window yet")
            raise PlotRangeError("render the plot before printing axis labels")
        return window

    def _x_axis_line(self, window: ViewWindow, width: int) -> str:
        parts: list[str] = []
        col = 0
        while col < width:
            label = self.x_format % window.x_label_value(col, width)
            parts.append("|")
            parts.append(label)
            col += len(label) + 1
        return "".join(parts)
