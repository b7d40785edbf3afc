from __future__ import annotations

from dataclasses import dataclass, field

from termplot.palette import Color


# Glyph value meaning "shade with half blocks" instead of stamping a character.
BLOCK: None = None


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    a: Point
    b: Point


@dataclass(frozen=True)
class StyleKey:
    glyph: str | None
    color: Color


def validate_glyph(glyph: str | None) -> str | None:
    if glyph is None:
        return None
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ValueError("glyph must be None or a single character")
    if not glyph.isprintable():
        raise ValueError(f"glyph must be printable, got {glyph!r}")
    return glyph


@dataclass
class PlotData:
    """Submitted geometry grouped by style, in first-seen style order."""

    points: dict[StyleKey, list[Point]] = field(default_factory=dict)
    lines: dict[StyleKey, list[Segment]] = field(default_factory=dict)

    def add_point(self, style: StyleKey, point: Point) -> None:
        self.points.setdefault(style, []).append(point)

    def add_segment(self, style: StyleKey, segment: Segment) -> None:
        self.lines.setdefault(style, []).append(segment)

    def clear(self) -> None:
        self.points.clear()
        self.lines.clear()

    @property
    def point_count(self) -> int:
        return sum(len(v) for v in self.points.values())

    @property
    def segment_count(self) -> int:
        return sum(len(v) for v in self.lines.values())

    def is_empty(self) -> bool:
        return not self.points and not self.lines
