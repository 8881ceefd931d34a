from __future__ import annotations

import math
from typing import Any, Dict, Optional, TYPE_CHECKING

from .actions import Action, Attach, Move, TurnClockwise, TurnCounter
from .cells import Cell
from .config import SimConfig
from .errors import MapParseError
from .geometry_utils import Rotation
from .grid import Grid
from .map_parser import MapDescription, parse_map
from .robot import Robot

if TYPE_CHECKING:
    from telemetry.logger import TelemetryLogger


def rasterize(description: MapDescription) -> Grid:
    """Build the grid for a parsed map.

    The outer polygon is filled with FREE, obstacles then overwrite it with
    OBSTACLE, and boosters are stamped last.
    """
    lo, hi = description.outer.bbox
    # TODO: shift all geometry by -lo to support maps not anchored at the origin.
    if lo.x != 0 or lo.y != 0:
        raise MapParseError(f"map bounding box must start at the origin, got {lo}")
    if hi.x <= 0 or hi.y <= 0:
        raise MapParseError(f"map has zero area, bounding box {lo}..{hi}")

    grid = Grid(rows=hi.y - lo.y, cols=hi.x - lo.x, fill=Cell.VOID)
    grid.project([description.outer], Cell.FREE)
    grid.project(description.obstacles, Cell.OBSTACLE)
    for booster in description.boosters:
        loc = booster.location
        if loc not in grid or grid[loc].is_obstacle:
            raise MapParseError(f"booster {booster.type.value} at {loc} is outside the map")
        grid[loc] = booster.type.to_cell()
    return grid


class State:
    """Grid plus robot, advanced one action at a time.

    Parameters
    ----------
    grid : Grid
        Rasterized map with at least one cell; mutated in place by wrapping
        and pickups.
    robot : Robot
        The robot standing on `grid`.
    config : SimConfig, optional
        Action rules; defaults to SimConfig().
    telemetry : TelemetryLogger, optional
        Receives one record per applied action.
    """

    def __init__(
        self,
        grid: Grid,
        robot: Robot,
        config: Optional[SimConfig] = None,
        telemetry: Optional["TelemetryLogger"] = None,
    ) -> None:
        if grid.rows * grid.cols == 0:
            raise ValueError(f"grid must have at least one cell, got {grid.rows}x{grid.cols}")
        self.grid = grid
        self.robot = robot
        self.config = config or SimConfig()
        self.telemetry = telemetry
        self.step_count = 0
        self._max_points = math.ceil(1000 * math.log2(grid.rows * grid.cols))

    @property
    def max_points(self) -> int:
        return self._max_points

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def parse(
        cls,
        s: str,
        config: Optional[SimConfig] = None,
        telemetry: Optional["TelemetryLogger"] = None,
    ) -> "State":
        """Parse a map description, place the robot and wrap its initial footprint."""
        config = config or SimConfig()
        description = parse_map(s)
        grid = rasterize(description)

        initial = description.initial
        if initial not in grid or grid[initial].is_obstacle:
            raise MapParseError(f"initial position {initial} is not on a free cell")

        robot = Robot(
            position=initial,
            tentacles=list(config.tentacles),
            orientation=config.orientation,
        )
        state = cls(grid, robot, config=config, telemetry=telemetry)
        state.wrap()
        return state

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def apply(self, action: Action) -> None:
        """Apply one action and wrap whatever the robot now covers."""
        wrapped = 0
        if isinstance(action, Move):
            self.robot.move(self.grid, self.robot.position.translate(action.dx, action.dy))
            wrapped = self.wrap()
        elif isinstance(action, TurnClockwise):
            self.robot.rotate(Rotation.CLOCKWISE)
            wrapped = self.wrap()
        elif isinstance(action, TurnCounter):
            self.robot.rotate(Rotation.COUNTERCLOCKWISE)
            wrapped = self.wrap()
        elif isinstance(action, Attach):
            self.robot.attach(action.location)
            if self.config.wrap_on_attach:
                wrapped = self.wrap()
        else:
            raise TypeError(f"unsupported action {action!r}")

        self.step_count += 1
        if self.telemetry is not None:
            self.telemetry.log_step(self._step_record(action, wrapped))

    def wrap(self) -> int:
        return self.robot.wrap(self.grid)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    @property
    def remaining(self) -> int:
        """Cells that still need wrapping."""
        return self.grid.count_wrapable()

    @property
    def is_complete(self) -> bool:
        return self.remaining == 0

    def clone(self) -> "State":
        """Independent copy for speculative simulation; telemetry is not carried over."""
        copy = State(self.grid.clone(), self.robot.clone(), config=self.config)
        copy.step_count = self.step_count
        return copy

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": self.grid.rows,
            "cols": self.grid.cols,
            "max_points": self.max_points,
            "step": self.step_count,
            "remaining": self.remaining,
            "robot": self.robot.to_dict(),
        }

    def _step_record(self, action: Action, wrapped: int) -> Dict[str, Any]:
        record: Dict[str, Any] = {"step": self.step_count, "action": type(action).__name__}
        if isinstance(action, Move):
            record["delta"] = [action.dx, action.dy]
        elif isinstance(action, Attach):
            record["location"] = list(action.location.to_tuple())
        record["robot"] = self.robot.to_dict()
        record["wrapped"] = wrapped
        record["remaining"] = self.remaining
        return record
