from __future__ import annotations

import shutil


DEFAULT_FALLBACK_SIZE = (80, 24)
# Columns reserved for y-axis labels, rows for the x-axis line and the prompt.
DEFAULT_LABEL_COLUMNS = 8
DEFAULT_RESERVED_ROWS = 2
DEFAULT_MIN_WIDTH = 10
DEFAULT_MIN_HEIGHT = 4


def resolve_default_plot_size(
    *,
    label_columns: int = DEFAULT_LABEL_COLUMNS,
    reserved_rows: int = DEFAULT_RESERVED_ROWS,
    min_width: int = DEFAULT_MIN_WIDTH,
    min_height: int = DEFAULT_MIN_HEIGHT,
) -> tuple[int, int]:
    if label_columns < 0 or reserved_rows < 0:
        raise ValueError("label_columns/reserved_rows must be >= 0")
    if min_width <= 0 or min_height <= 0:
        raise ValueError("min_width/min_height must be > 0")

    columns, lines = _detect_terminal_size()
    width = max(min_width, columns - label_columns)
    height = max(min_height, lines - reserved_rows)
    return (width, height)


def _detect_terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size(fallback=DEFAULT_FALLBACK_SIZE)
    if size.columns <= 0 or size.lines <= 0:
        return DEFAULT_FALLBACK_SIZE
    return (int(size.columns), int(size.lines))
