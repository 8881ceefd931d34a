"""
Geometry utilities for the wrapping simulation.

Provides integer points, the four robot orientations, quarter-turn rotation,
polygons with bounding boxes, and the cell-centre containment test used by
grid rasterization.

Coordinates are integer lattice points with y increasing upward. A grid cell
(x, y) is the unit square [x, x+1] x [y, y+1].
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np


# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Point:
    """Integer lattice point."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def translate(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def rotate(self, orientation: "Orientation") -> "Point":
        return rotate(self, orientation)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


# ---------------------------------------------------------------------------
# Orientation and rotation
# ---------------------------------------------------------------------------


class Rotation(Enum):
    CLOCKWISE = 1
    COUNTERCLOCKWISE = -1


class Orientation(Enum):
    """Robot heading. Members are declared in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turn(self, rotation: Rotation) -> "Orientation":
        return Orientation((self.value + rotation.value) % 4)

    def clockwise(self) -> "Orientation":
        return self.turn(Rotation.CLOCKWISE)

    def counterclockwise(self) -> "Orientation":
        return self.turn(Rotation.COUNTERCLOCKWISE)


def rotate(point: Point, orientation: Orientation) -> Point:
    """Rotate an offset given in the RIGHT-facing frame into `orientation`.

    RIGHT is the identity, UP is a quarter turn counterclockwise, LEFT a half
    turn and DOWN a quarter turn clockwise.
    """
    x, y = point.x, point.y
    if orientation is Orientation.RIGHT:
        return Point(x, y)
    if orientation is Orientation.UP:
        return Point(-y, x)
    if orientation is Orientation.LEFT:
        return Point(-x, -y)
    return Point(y, -x)


# ---------------------------------------------------------------------------
# Polygons
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Polygon:
    """Closed polygon; the last vertex connects back to the first."""

    vertices: Tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.vertices) < 3:
            raise ValueError(f"polygon needs at least 3 vertices, got {len(self.vertices)}")

    @property
    def bbox(self) -> Tuple[Point, Point]:
        return bounding_box(self.vertices)

    def contains_cell(self, cell: Point) -> bool:
        """True if the centre of grid cell `cell` lies inside the polygon."""
        return point_in_polygon(cell.x + 0.5, cell.y + 0.5, self.as_pairs())

    def as_pairs(self) -> List[Tuple[int, int]]:
        return [(p.x, p.y) for p in self.vertices]


def bounding_box(vertices: Sequence[Point]) -> Tuple[Point, Point]:
    """Return (min_corner, max_corner) over all vertices."""
    xs = [p.x for p in vertices]
    ys = [p.y for p in vertices]
    return Point(min(xs), min(ys)), Point(max(xs), max(ys))


def point_in_polygon(px: float, py: float, vertices: Sequence[Tuple[int, int]]) -> bool:
    """
    Ray-casting test: True if (px, py) is inside polygon (list of (x,y) in order).
    """
    n = len(vertices)
    if n < 3:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if (yi > py) != (yj > py):
            x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < x_cross:
                inside = not inside
        j = i
    return inside


def polygon_mask(
    vertices: Sequence[Tuple[int, int]],
    xs: np.ndarray,
    ys: np.ndarray,
) -> np.ndarray:
    """
    Vectorized even-odd test over a block of points.

    Parameters
    ----------
    vertices : sequence of (x, y)
        Polygon vertices in order.
    xs, ys : np.ndarray
        1-D arrays of sample coordinates along each axis.

    Returns
    -------
    np.ndarray
        Boolean array of shape (len(ys), len(xs)); element [r, c] tells whether
        (xs[c], ys[r]) is inside the polygon.
    """
    px, py = np.meshgrid(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
    inside = np.zeros(px.shape, dtype=bool)
    n = len(vertices)
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        j = i
        # Horizontal edges never cross a horizontal ray.
        if yi == yj:
            continue
        straddles = (yi > py) != (yj > py)
        x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
        inside ^= straddles & (px < x_cross)
    return inside
