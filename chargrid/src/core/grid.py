"""Character grid stored as a flat row-major buffer."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import numpy as np

from chargrid.src.utils import config_loader
from chargrid.src.utils.logger import get_logger


logger = get_logger(__name__)

# (dx, dy) offsets in the order N, E, S, W, SE, NE, NW, SW
NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, -1),
    (-1, 1),
)
FILL_OFFSETS = NEIGHBOUR_OFFSETS[:4]


class InvalidDimensionError(ValueError):
    """Raised when a grid is created with a non-positive width or height."""


class InvalidCellError(ValueError):
    """Raised when a cell value is not a single character."""


def _check_cell(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidCellError(f"Cell value must be a single character, got {value!r}")
    return value


def _check_dimension(name: str, value: Any) -> int:
    if not isinstance(value, int) or value <= 0:
        logger.warning("Rejected grid %s %r", name, value)
        raise InvalidDimensionError(f"Grid {name} must be a positive integer, got {value!r}")
    return value


@dataclass(eq=False, frozen=True)
class Grid:
    """Fixed-size 2D grid holding one character per cell.

    Cells live in a one-dimensional numpy object buffer of length
    ``width * height`` where ``(x, y)`` maps to index ``y * width + x``.
    Attributes are read-only; only the cell contents change. Coordinates
    outside the grid are never an error: reads return ``None`` and writes are
    ignored.
    """

    width: int
    height: int
    fill_char: str = field(default_factory=lambda: config_loader.DEFAULT_FILL)
    cells: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _check_dimension("width", self.width)
        _check_dimension("height", self.height)
        _check_cell(self.fill_char)
        # object dtype keeps every character intact, "<U1" drops "\x00"
        cells = np.empty(self.width * self.height, dtype=object)
        cells.fill(self.fill_char)
        object.__setattr__(self, "cells", cells)

    # Construction --------------------------------------------------------

    @classmethod
    def filled_with(cls, width: int, height: int, fill: str) -> "Grid":
        """Return a ``width`` x ``height`` grid with every cell set to ``fill``."""
        return cls(width, height, fill)

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Build a grid from newline separated rows of equal length."""
        rows = text.splitlines()
        if not rows:
            raise InvalidDimensionError("Grid text must contain at least one row")
        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
        grid = cls(width, len(rows), rows[0][:1] or config_loader.DEFAULT_FILL)
        object.__setattr__(grid, "cells", np.array(list("".join(rows)), dtype=object))
        return grid

    def copy(self) -> "Grid":
        """Return an independent copy of the grid."""
        clone = Grid(self.width, self.height, self.fill_char)
        object.__setattr__(clone, "cells", self.cells.copy())
        return clone

    # Cell access ---------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` are integers addressing a cell of the grid."""
        if not isinstance(x, (int, np.integer)) or not isinstance(y, (int, np.integer)):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> Optional[int]:
        if not self.in_bounds(x, y):
            return None
        return y * self.width + x

    def get(self, x: int, y: int) -> Optional[str]:
        """Return the character at ``(x, y)`` or ``None`` if out of bounds."""
        pos = self._index(x, y)
        if pos is None:
            return None
        return str(self.cells[pos])

    def set(self, x: int, y: int, value: str) -> None:
        """Write ``value`` at ``(x, y)``; out of bounds writes are ignored."""
        _check_cell(value)
        pos = self._index(x, y)
        if pos is not None:
            self.cells[pos] = value

    def count(self, value: str) -> int:
        """Return the number of cells equal to ``value``."""
        if not isinstance(value, str):
            return 0
        return int(np.count_nonzero(self.cells == value))

    def fill(self, x: int, y: int, value: str) -> int:
        """Flood fill the 4-connected region containing ``(x, y)``.

        Every cell reachable from the start through cells sharing the start's
        original character is replaced by ``value``. Returns the number of
        cells changed, which is ``0`` when the start is out of bounds or
        already holds ``value``.
        """
        _check_cell(value)
        original = self.get(x, y)
        if original is None or original == value:
            return 0

        w, h = self.width, self.height
        cells = self.cells
        cells[y * w + x] = value
        changed = 1
        queue: deque[Tuple[int, int]] = deque([(x, y)])

        while queue:
            cx, cy = queue.popleft()
            for dx, dy in FILL_OFFSETS:
                nx, ny = cx + dx, cy + dy
                if 0 <= nx < w and 0 <= ny < h and cells[ny * w + nx] == original:
                    # mark on push so each cell is counted once
                    cells[ny * w + nx] = value
                    changed += 1
                    queue.append((nx, ny))

        logger.debug("Filled %d cells from (%d, %d): %r -> %r", changed, x, y, original, value)
        return changed

    def neighbours(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Return in-bounds coordinates of the 8 cells surrounding ``(x, y)``."""
        if not self.in_bounds(x, y):
            return []
        return [
            (x + dx, y + dy)
            for dx, dy in NEIGHBOUR_OFFSETS
            if self.in_bounds(x + dx, y + dy)
        ]

    # Views ---------------------------------------------------------------

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        return self.height, self.width

    def to_list(self) -> List[List[str]]:
        """Return the rows as lists of characters."""
        return self.cells.reshape(self.height, self.width).tolist()

    def visualize(self) -> None:
        """Print the grid one row per line."""
        print(self, end="")

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape() == other.shape() and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
