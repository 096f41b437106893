"""Character grid with bounds-checked access and flood fill."""

from .src.core import Grid, InvalidCellError, InvalidDimensionError

__all__ = ["Grid", "InvalidCellError", "InvalidDimensionError"]
