from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from .cells import Cell
from .geometry_utils import Point, Polygon, polygon_mask


class Grid:
    """Fixed-size 2D matrix of cells.

    Row index is y and column index is x, so `cells[y, x]` holds the cell whose
    unit square has lower-left corner (x, y).

    Parameters
    ----------
    rows : int
        Number of rows (map height).
    cols : int
        Number of columns (map width).
    fill : Cell
        Initial value of every cell.
    """

    def __init__(self, rows: int, cols: int, fill: Cell = Cell.VOID) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {rows}x{cols}")
        self.cells = np.full((rows, cols), int(fill), dtype=np.uint8)

    @classmethod
    def from_rows(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from one string per row, row 0 first."""
        rows = len(lines)
        cols = len(lines[0]) if lines else 0
        grid = cls(rows, cols)
        for y, line in enumerate(lines):
            if len(line) != cols:
                raise ValueError(f"row {y} has {len(line)} cells, expected {cols}")
            for x, ch in enumerate(line):
                grid.cells[y, x] = Cell(ord(ch))
        return grid

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self.cells.shape[1])

    def contains(self, point: Point) -> bool:
        return 0 <= point.x < self.cols and 0 <= point.y < self.rows

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)

    def get(self, point: Point) -> Cell:
        self._check(point)
        return Cell(int(self.cells[point.y, point.x]))

    def set(self, point: Point, value: Cell) -> None:
        self._check(point)
        self.cells[point.y, point.x] = int(value)

    def __getitem__(self, point: Point) -> Cell:
        return self.get(point)

    def __setitem__(self, point: Point, value: Cell) -> None:
        self.set(point, value)

    def _check(self, point: Point) -> None:
        # numpy would silently accept negative indices.
        if not self.contains(point):
            raise IndexError(f"{point} is outside a {self.rows}x{self.cols} grid")

    # ------------------------------------------------------------------
    # Rasterization
    # ------------------------------------------------------------------
    def project(self, polygons: Iterable[Polygon], value: Cell) -> None:
        """Overwrite every cell whose centre lies inside any of `polygons`.

        The polygon bbox is clipped to the grid, geometry outside is ignored.
        """
        for polygon in polygons:
            lo, hi = polygon.bbox
            x0, x1 = max(lo.x, 0), min(hi.x, self.cols)
            y0, y1 = max(lo.y, 0), min(hi.y, self.rows)
            if x0 >= x1 or y0 >= y1:
                continue
            xs = np.arange(x0, x1) + 0.5
            ys = np.arange(y0, y1) + 0.5
            mask = polygon_mask(polygon.as_pairs(), xs, ys)
            self.cells[y0:y1, x0:x1][mask] = int(value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def count(self, value: Cell) -> int:
        return int(np.count_nonzero(self.cells == int(value)))

    def count_wrapable(self) -> int:
        """Number of cells that a robot could still wrap."""
        blocked = np.isin(self.cells, [int(c) for c in Cell if not c.is_wrapable])
        return int(blocked.size - np.count_nonzero(blocked))

    def to_rows(self) -> List[str]:
        return ["".join(chr(v) for v in row) for row in self.cells.tolist()]

    def clone(self) -> "Grid":
        copy = Grid.__new__(Grid)
        copy.cells = self.cells.copy()
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"
