from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
import sys
from typing import Sequence, TextIO

import numpy as np

from termplot.api import plot as new_plot
from termplot.config import PlotConfig, load_config
from termplot.errors import PlotDataError
from termplot.figure import ConsolePlot
from termplot.palette import Color, coerce_color


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termplot")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Plot a sine curve with markers.")
    _add_common_args(demo)
    demo.add_argument("--periods", type=float, default=2.0)

    plot = sub.add_parser("plot", help="Plot whitespace separated 'x y' pairs read from stdin.")
    _add_common_args(plot)
    plot.add_argument("--lines", action="store_true", help="Join consecutive pairs as a polyline.")
    plot.add_argument("--color", default="WHITE", help="Palette name or index (0-15).")
    plot.add_argument("--glyph", default=None, help="Single character to stamp instead of half blocks.")
    return parser


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=None, help="Plot width in characters. Default: terminal-relative.")
    parser.add_argument("--height", type=int, default=None, help="Plot height in lines. Default: terminal-relative.")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [plot] table.")
    parser.add_argument("--invert-y", action="store_true", help="Make Y increase upwards.")
    parser.add_argument("--x-format", default=None, help="printf-style x-axis label format, e.g. '%%6.2f'.")
    parser.add_argument("--y-format", default=None, help="printf-style y-axis label format, e.g. '%%6.2f'.")


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    src = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    config = load_config(args.config) if args.config is not None else PlotConfig()
    config = _merge_cli_overrides(config, args)
    plot = new_plot(width=config.width, height=config.height, background=config.background)
    config.apply(plot)

    if args.command == "demo":
        _plot_demo(plot, periods=args.periods)
    elif args.command == "plot":
        xs, ys = read_pairs(src)
        color = coerce_color(args.color)
        if args.lines:
            plot.add_polyline(xs, ys, color=color, glyph=args.glyph)
        else:
            plot.add_points(xs, ys, color=color, glyph=args.glyph)
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    plot.render()
    config.presenter().write(plot, out)
    return 0


def _merge_cli_overrides(config: PlotConfig, args: argparse.Namespace) -> PlotConfig:
    if args.width is not None and args.width <= 0:
        raise ValueError("width must be > 0")
    if args.height is not None and args.height <= 0:
        raise ValueError("height must be > 0")
    return PlotConfig(
        width=args.width if args.width is not None else config.width,
        height=args.height if args.height is not None else config.height,
        background=config.background,
        invert_y=args.invert_y or config.invert_y,
        x_format=args.x_format if args.x_format is not None else config.x_format,
        y_format=args.y_format if args.y_format is not None else config.y_format,
        draw_range=config.draw_range,
    )


def _plot_demo(plot: ConsolePlot, *, periods: float) -> None:
    xs = np.linspace(0.0, 2.0 * math.pi * periods, 200, dtype=np.float64)
    ys = np.sin(xs)
    plot.add_polyline(xs, ys, color=Color.BRIGHT_CYAN)
    step = max(1, xs.size // 12)
    plot.add_points(xs[::step], ys[::step], color=Color.BRIGHT_YELLOW, glyph="o")


def read_pairs(stream: TextIO) -> tuple[list[float], list[float]]:
    xs: list[float] = []
    ys: list[float] = []
    for lineno, line in enumerate(stream, start=1):
        text = line.split("#", 1)[0].strip()
        if not text:
            continue
        fields = text.replace(",", " ").split()
        if len(fields) != 2:
            raise PlotDataError(f"line {lineno}: expected 'x y', got {line.strip()!r}")
        try:
            xs.append(float(fields[0]))
            ys.append(float(fields[1]))
        except ValueError as exc:
            raise PlotDataError(f"line {lineno}: non-numeric value in {line.strip()!r}") from exc
    if not xs:
        raise PlotDataError("no data on stdin")
    LOGGER.info("read %d pairs", len(xs))
    return xs, ys
