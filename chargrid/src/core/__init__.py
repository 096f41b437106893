"""Core grid data structure and helpers."""

from .grid import Grid, InvalidCellError, InvalidDimensionError
from .grid_utils import char_histogram, connected_regions, diff_cells

__all__ = [
    "Grid",
    "InvalidCellError",
    "InvalidDimensionError",
    "char_histogram",
    "connected_regions",
    "diff_cells",
]
