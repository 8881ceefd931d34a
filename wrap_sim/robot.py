from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .cells import BoosterType, Cell
from .errors import InvalidMoveError
from .geometry_utils import Orientation, Point, Rotation
from .grid import Grid


def empty_inventory() -> Dict[BoosterType, int]:
    return {booster_type: 0 for booster_type in BoosterType.collectible()}


@dataclass
class Robot:
    """Wrapping robot on the grid.

    Attributes
    ----------
    position : Point
        Cell the robot body occupies.
    tentacles : list[Point]
        Appendage offsets in the RIGHT-facing frame. Only ever appended to.
    orientation : Orientation
        Current heading; rotates the tentacle offsets.
    boosters : dict[BoosterType, int]
        Collected booster counts, one entry per collectible type.
    """

    position: Point
    tentacles: List[Point]
    orientation: Orientation = Orientation.RIGHT
    boosters: Dict[BoosterType, int] = field(default_factory=empty_inventory)

    @property
    def parts(self) -> List[Point]:
        """Cells covered by the body and every tentacle."""
        return [self.position] + [
            tentacle.rotate(self.orientation) + self.position for tentacle in self.tentacles
        ]

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def move(self, grid: Grid, destination: Point) -> None:
        """Step to an orthogonally adjacent, passable cell and pick up its booster."""
        if destination not in grid:
            raise InvalidMoveError(f"{destination} is outside the grid")
        cell = grid[destination]
        if cell.is_obstacle:
            raise InvalidMoveError(f"{destination} is blocked ({cell.name})")
        d = destination - self.position
        if abs(d.x) + abs(d.y) != 1:
            raise InvalidMoveError(
                f"{destination} is not adjacent to {self.position}"
            )
        self.position = destination

        if cell.is_booster:
            self.boosters[BoosterType.from_cell(cell)] += 1
            grid[destination] = Cell.FREE

    def wrap(self, grid: Grid) -> int:
        """Wrap every covered cell; returns how many cells changed."""
        wrapped = 0
        for part in self.parts:
            if part in grid and grid[part].is_wrapable:
                grid[part] = Cell.WRAPPED
                wrapped += 1
        return wrapped

    def rotate(self, rotation: Rotation) -> None:
        self.orientation = self.orientation.turn(rotation)

    def attach(self, location: Point) -> None:
        self.tentacles.append(location)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def clone(self) -> "Robot":
        return Robot(
            position=self.position,
            tentacles=list(self.tentacles),
            orientation=self.orientation,
            boosters=dict(self.boosters),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize robot state to a dict for logging/telemetry."""
        return {
            "x": self.position.x,
            "y": self.position.y,
            "orientation": self.orientation.name,
            "tentacles": [list(t.to_tuple()) for t in self.tentacles],
            "boosters": {t.value: n for t, n in self.boosters.items()},
        }
