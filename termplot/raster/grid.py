from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import logging
from typing import Iterator

import numpy as np

from termplot.palette import Color


LOGGER = logging.getLogger(__name__)

EMPTY_CHAR = " "
UPPER_HALF_BLOCK = "▀"


class GlyphKind(IntEnum):
    EMPTY = 0
    BLOCK = 1
    LITERAL = 2


@dataclass(frozen=True)
class Cell:
    """Read-only view of one printed character cell.

    For BLOCK cells ``lower`` (bits 0-3 of ``attr``) colors the top half-pixel and
    ``upper`` (bits 4-7) the bottom one. For LITERAL cells ``lower`` is the shown
    color and ``upper`` keeps the color a collision displaced.
    """

    kind: GlyphKind
    char: str
    attr: int

    @property
    def lower(self) -> int:
        return self.attr & 0x0F

    @property
    def upper(self) -> int:
        return (self.attr >> 4) & 0x0F

    @property
    def glyph(self) -> str:
        if self.kind == GlyphKind.BLOCK:
            return UPPER_HALF_BLOCK
        return self.char


def pack_attr(lower: int, upper: int) -> int:
    return ((upper & 0x0F) << 4) | (lower & 0x0F)


class CellGrid:
    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: Color | int = Color.BLACK,
        inverted_y: bool = False,
    ) -> None:
        self.background = int(background)
        self.inverted_y = inverted_y
        self._width = 0
        self._height = 0
        self.resize(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def subrows(self) -> int:
        return 2 * self._height

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid width/height must be > 0")
        self._width = int(width)
        self._height = int(height)
        self._kinds = np.zeros((self._height, self._width), dtype=np.uint8)
        self._chars = np.full((self._height, self._width), EMPTY_CHAR, dtype="<U1")
        self._attrs = np.zeros((self._height, self._width), dtype=np.uint8)
        LOGGER.debug("grid resized to %dx%d", self._width, self._height)
        self.reset()

    def reset(self) -> None:
        self._kinds[:, :] = GlyphKind.EMPTY
        self._chars[:, :] = EMPTY_CHAR
        self._attrs[:, :] = pack_attr(self.background, self.background)

    def set_cell(self, col: int, subrow: int, color: int, glyph: str | None = None) -> None:
        if col < 0 or col >= self._width or subrow < 0 or subrow >= 2 * self._height:
            return

        row = subrow // 2
        color = int(color) & 0x0F
        kind = GlyphKind(int(self._kinds[row, col]))
        attr = int(self._attrs[row, col])

        if glyph is None:
            if kind == GlyphKind.EMPTY:
                self._kinds[row, col] = GlyphKind.BLOCK
            parity = subrow + 1 if self.inverted_y else subrow
            if parity % 2:
                attr = (attr & 0x0F) | (color << 4)
            else:
                attr = (attr & 0xF0) | color
            self._attrs[row, col] = attr
            return

        if kind == GlyphKind.EMPTY:
            attr = (attr & 0xF0) | color
        elif kind == GlyphKind.BLOCK:
            if (attr & 0x0F) != self.background:
                attr = ((attr << 4) & 0xF0) | color
            else:
                attr = (attr & 0xF0) | color
        elif str(self._chars[row, col]) != glyph:
            attr = ((attr << 4) & 0xF0) | color
        self._attrs[row, col] = attr
        # A space stamps the empty marker, so later half-block writes still shade the cell.
        self._kinds[row, col] = GlyphKind.EMPTY if glyph == EMPTY_CHAR else GlyphKind.LITERAL
        self._chars[row, col] = glyph

    def cell(self, col: int, row: int) -> Cell:
        if col < 0 or col >= self._width or row < 0 or row >= self._height:
            raise IndexError(f"cell ({col}, {row}) outside {self._width}x{self._height} grid")
        return Cell(
            kind=GlyphKind(int(self._kinds[row, col])),
            char=str(self._chars[row, col]),
            attr=int(self._attrs[row, col]),
        )

    def row_indices(self, inverted: bool | None = None) -> range:
        if inverted is None:
            inverted = self.inverted_y
        if inverted:
            return range(self._height - 1, -1, -1)
        return range(self._height)

    def rows(self, inverted: bool | None = None) -> Iterator[tuple[int, list[Cell]]]:
        """Yield ``(row, cells)`` top to bottom as printed.

        ``inverted`` defaults to the grid's own Y inversion, which walks storage rows
        from last to first so larger data-Y values print higher.
        """
        for row in self.row_indices(inverted):
            yield row, [self.cell(col, row) for col in range(self._width)]

    def attributes(self) -> np.ndarray:
        return self._attrs.copy()

    def kinds(self) -> np.ndarray:
        return self._kinds.copy()

    def snapshot(self) -> tuple[bytes, bytes, tuple[str, ...]]:
        return (
            self._kinds.tobytes(),
            self._attrs.tobytes(),
            tuple(self._chars.ravel().tolist()),
        )
