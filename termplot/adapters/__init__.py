from .normalize import SeriesData, normalize_xy

__all__ = ["SeriesData", "normalize_xy"]
