from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when submitted plot data cannot be used."""


class PlotRangeError(PlotDataError):
    """Raised when no drawable view window can be established."""
