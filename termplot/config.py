from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import tomllib
from typing import Any

from termplot.figure import ConsolePlot
from termplot.palette import Color, coerce_color
from termplot.present import AnsiPresenter


@dataclass(frozen=True)
class PlotConfig:
    width: int | None = None
    height: int | None = None
    background: Color = Color.BLACK
    invert_y: bool = False
    x_format: str = ""
    y_format: str = ""
    draw_range: tuple[float, float, float, float] | None = None

    def apply(self, plot: ConsolePlot) -> None:
        if self.width is not None or self.height is not None:
            plot.set_size(self.width or plot.width, self.height or plot.height)
        plot.set_background_color(self.background)
        plot.invert_y_axis(self.invert_y)
        if self.draw_range is None:
            plot.clear_draw_range()
        else:
            plot.set_draw_range(*self.draw_range)

    def presenter(self) -> AnsiPresenter:
        return AnsiPresenter(x_format=self.x_format, y_format=self.y_format)


def load_config(path: str | Path) -> PlotConfig:
    """Read a ``[plot]`` table (or top-level keys) from a TOML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("plot", raw)
    if not isinstance(table, dict):
        raise ValueError("[plot] must be a table")
    return parse_config(table)


def parse_config(raw: dict[str, Any]) -> PlotConfig:
    known = {"width", "height", "background", "invert_y", "x_format", "y_format", "draw_range"}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"unknown plot config field: {unknown[0]}")
    try:
        background = coerce_color(raw.get("background", Color.BLACK))
    except ValueError as exc:
        raise ValueError(f"background: {exc}") from exc
    return PlotConfig(
        width=_coerce_optional_positive_int(raw.get("width"), "width"),
        height=_coerce_optional_positive_int(raw.get("height"), "height"),
        background=background,
        invert_y=_coerce_bool(raw.get("invert_y", False), "invert_y"),
        x_format=_coerce_format(raw.get("x_format", ""), "x_format"),
        y_format=_coerce_format(raw.get("y_format", ""), "y_format"),
        draw_range=_coerce_draw_range(raw.get("draw_range")),
    )


def _coerce_optional_positive_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    if value <= 0:
        raise ValueError(f"{field_name} must be > 0")
    return value


def _coerce_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{field_name} must be a boolean")
    return value


def _coerce_format(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    if value:
        try:
            value % 0.0
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{field_name} is not a valid numeric format: {value!r}") from exc
    return value


def _coerce_draw_range(value: Any) -> tuple[float, float, float, float] | None:
    if value is None:
        return None
    if not isinstance(value, list) or len(value) != 4:
        raise ValueError("draw_range must be a list of four numbers [x1, y1, x2, y2]")
    out: list[float] = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ValueError("draw_range must be a list of four numbers [x1, y1, x2, y2]")
        out.append(float(item))
    return (out[0], out[1], out[2], out[3])
