from __future__ import annotations

import numpy as np
import pytest

from wrap_sim.geometry_utils import (
    Orientation,
    Point,
    Polygon,
    Rotation,
    bounding_box,
    polygon_mask,
    rotate,
)


def test_rotate_quarter_turns() -> None:
    p = Point(1, 2)
    assert rotate(p, Orientation.RIGHT) == Point(1, 2)
    assert rotate(p, Orientation.UP) == Point(-2, 1)
    assert rotate(p, Orientation.LEFT) == Point(-1, -2)
    assert rotate(p, Orientation.DOWN) == Point(2, -1)


def test_orientation_cycles_clockwise() -> None:
    o = Orientation.UP
    seen = []
    for _ in range(4):
        o = o.turn(Rotation.CLOCKWISE)
        seen.append(o)
    assert seen == [Orientation.RIGHT, Orientation.DOWN, Orientation.LEFT, Orientation.UP]
    assert Orientation.UP.counterclockwise() == Orientation.LEFT
    assert Orientation.LEFT.clockwise() == Orientation.UP


def test_point_arithmetic() -> None:
    assert Point(3, 4) - Point(1, 1) == Point(2, 3)
    assert Point(3, 4) + Point(-1, 1) == Point(2, 5)
    assert Point(0, 0).translate(0, -1) == Point(0, -1)


def test_bounding_box() -> None:
    lo, hi = bounding_box([Point(2, 5), Point(-1, 3), Point(4, 0)])
    assert lo == Point(-1, 0)
    assert hi == Point(4, 5)


def test_polygon_needs_three_vertices() -> None:
    with pytest.raises(ValueError):
        Polygon((Point(0, 0), Point(1, 1)))


def test_contains_cell_l_shape() -> None:
    # L-shape: 2x2 square with the top-right cell cut away.
    poly = Polygon(
        (Point(0, 0), Point(2, 0), Point(2, 1), Point(1, 1), Point(1, 2), Point(0, 2))
    )
    assert poly.contains_cell(Point(0, 0))
    assert poly.contains_cell(Point(1, 0))
    assert poly.contains_cell(Point(0, 1))
    assert not poly.contains_cell(Point(1, 1))
    assert not poly.contains_cell(Point(2, 0))


def test_polygon_mask_matches_scalar_test() -> None:
    poly = Polygon(
        (Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 2), Point(0, 4))
    )
    xs = np.arange(0, 5) + 0.5
    ys = np.arange(0, 5) + 0.5
    mask = polygon_mask(poly.as_pairs(), xs, ys)
    assert mask.shape == (5, 5)
    for y in range(5):
        for x in range(5):
            assert mask[y, x] == poly.contains_cell(Point(x, y))
