from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from termplot.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


@dataclass(frozen=True)
class SeriesData:
    x: np.ndarray
    y: np.ndarray
    mask: np.ndarray


def normalize_xy(y: Any, *, x: Any = None) -> SeriesData:
    """Coerce paired x/y inputs into float64 arrays plus a finite-sample mask.

    When ``x`` is omitted the sample index is used.
    """
    if y is None:
        raise PlotDataError("y input is required")
    y_arr = _as_float_array(y, label="y")
    if y_arr.size == 0:
        raise PlotDataError("empty series")
    x_arr = np.arange(y_arr.size, dtype=np.float64) if x is None else _as_float_array(x, label="x")
    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not np.any(mask):
        raise PlotDataError("series contains no finite points")
    return SeriesData(x=x_arr, y=y_arr, mask=mask)


def _as_float_array(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        value = value.detach().cpu().numpy()
    elif pd is not None and isinstance(value, pd.Series):
        value = value.to_numpy()
    elif isinstance(value, (str, bytes, bytearray)) or not isinstance(value, (Sequence, np.ndarray)):
        raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")

    try:
        arr = np.asarray(value)
    except ValueError as exc:
        raise PlotDataError(f"{label} must be a flat numeric series") from exc
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)
    # None marks a gap; anything else must convert with float().
    try:
        return np.asarray([np.nan if v is None else float(v) for v in arr.tolist()], dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{label} contains non-numeric values") from exc
