"""Actions accepted by State.apply."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .geometry_utils import Point


@dataclass(frozen=True)
class Move:
    """Orthogonal unit step; exactly one of dx, dy is +-1."""

    dx: int
    dy: int


@dataclass(frozen=True)
class TurnClockwise:
    pass


@dataclass(frozen=True)
class TurnCounter:
    pass


@dataclass(frozen=True)
class Attach:
    """Add a tentacle at `location`, given in the RIGHT-facing robot frame."""

    location: Point


Action = Union[Move, TurnClockwise, TurnCounter, Attach]

MOVE_UP = Move(0, 1)
MOVE_DOWN = Move(0, -1)
MOVE_LEFT = Move(-1, 0)
MOVE_RIGHT = Move(1, 0)
