from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import FrozenSet, Tuple

from .errors import InvalidCellError
from .geometry_utils import Point


class Cell(IntEnum):
    """Content of a single grid cell, stored as one ASCII byte."""

    FREE = ord(" ")
    WRAPPED = ord("W")
    OBSTACLE = ord("O")
    VOID = ord("V")
    SPAWN_POINT = ord("X")

    B_EXTENSION = ord("B")
    B_FAST_WHEELS = ord("F")
    B_DRILL = ord("L")
    B_TELEPORT = ord("T")
    B_CLONE = ord("C")

    @property
    def char(self) -> str:
        return chr(self.value)

    @property
    def is_obstacle(self) -> bool:
        return self in _OBSTACLE_CELLS

    @property
    def is_wrapable(self) -> bool:
        return self not in _UNWRAPABLE_CELLS

    @property
    def is_booster(self) -> bool:
        return self in _BOOSTER_CELLS


# Every new Cell member must be classified in these three sets.
_OBSTACLE_CELLS: FrozenSet[Cell] = frozenset({Cell.OBSTACLE, Cell.VOID})
_UNWRAPABLE_CELLS: FrozenSet[Cell] = frozenset({Cell.OBSTACLE, Cell.VOID, Cell.WRAPPED})
_BOOSTER_CELLS: FrozenSet[Cell] = frozenset(
    {Cell.B_EXTENSION, Cell.B_FAST_WHEELS, Cell.B_DRILL, Cell.B_TELEPORT, Cell.B_CLONE}
)


class BoosterType(Enum):
    """Booster letters as they appear in map descriptions.

    X marks a spawn point rather than a collectible item.
    """

    B = "B"
    F = "F"
    L = "L"
    X = "X"
    R = "R"
    C = "C"

    def to_cell(self) -> Cell:
        return _TYPE_TO_CELL[self]

    @classmethod
    def from_cell(cls, cell: Cell) -> "BoosterType":
        try:
            return _CELL_TO_TYPE[cell]
        except KeyError:
            raise InvalidCellError(f"Invalid cell {cell!r}") from None

    @classmethod
    def collectible(cls) -> Tuple["BoosterType", ...]:
        return (cls.B, cls.F, cls.L, cls.R, cls.C)


_TYPE_TO_CELL = {
    BoosterType.B: Cell.B_EXTENSION,
    BoosterType.F: Cell.B_FAST_WHEELS,
    BoosterType.L: Cell.B_DRILL,
    BoosterType.X: Cell.SPAWN_POINT,
    BoosterType.R: Cell.B_TELEPORT,
    BoosterType.C: Cell.B_CLONE,
}
_CELL_TO_TYPE = {
    cell: booster_type
    for booster_type, cell in _TYPE_TO_CELL.items()
    if booster_type is not BoosterType.X
}


@dataclass(frozen=True)
class Booster:
    """Booster declaration from a map description."""

    type: BoosterType
    location: Point
