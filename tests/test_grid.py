from __future__ import annotations

import pytest

from wrap_sim.cells import Cell
from wrap_sim.geometry_utils import Point, Polygon
from wrap_sim.grid import Grid


def square(x0: int, y0: int, x1: int, y1: int) -> Polygon:
    return Polygon((Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)))


def test_grid_defaults_to_void() -> None:
    grid = Grid(2, 3)
    assert grid.rows == 2
    assert grid.cols == 3
    assert grid.count(Cell.VOID) == 6


def test_contains_and_bounds_checked_access() -> None:
    grid = Grid(2, 3, fill=Cell.FREE)
    assert grid.contains(Point(2, 1))
    assert not grid.contains(Point(3, 0))
    assert not grid.contains(Point(0, 2))
    assert not grid.contains(Point(-1, 0))
    with pytest.raises(IndexError):
        grid.get(Point(-1, 0))
    with pytest.raises(IndexError):
        grid.set(Point(0, 2), Cell.WRAPPED)


def test_project_obstacle_overrides_free() -> None:
    grid = Grid(4, 4)
    grid.project([square(0, 0, 4, 4)], Cell.FREE)
    grid.project([square(1, 1, 3, 3)], Cell.OBSTACLE)
    assert grid.to_rows() == [
        "    ",
        " OO ",
        " OO ",
        "    ",
    ]


def test_project_leaves_outside_void() -> None:
    grid = Grid(3, 3)
    # Triangle covering the lower-right half of the square.
    grid.project([Polygon((Point(0, 0), Point(3, 0), Point(3, 3)))], Cell.FREE)
    assert grid[Point(2, 0)] is Cell.FREE
    assert grid[Point(0, 2)] is Cell.VOID


def test_project_clips_to_grid() -> None:
    grid = Grid(2, 2, fill=Cell.FREE)
    grid.project([square(1, 1, 5, 5)], Cell.OBSTACLE)
    assert grid.to_rows() == ["  ", " O"]


def test_clone_is_independent() -> None:
    grid = Grid(2, 2, fill=Cell.FREE)
    copy = grid.clone()
    copy[Point(0, 0)] = Cell.WRAPPED
    assert grid[Point(0, 0)] is Cell.FREE
    assert copy != grid


def test_from_rows_and_counts() -> None:
    grid = Grid.from_rows(["W O", "VB "])
    assert grid[Point(1, 1)] is Cell.B_EXTENSION
    assert grid.count(Cell.WRAPPED) == 1
    # FREE x2 and the booster are still wrapable.
    assert grid.count_wrapable() == 3
    assert Grid.from_rows(grid.to_rows()) == grid
