"""
Top-level package for the grid wrapping simulator.

Components:
- geometry_utils: points, orientations, quarter-turn rotation, polygons
- cells: cell vocabulary and booster types
- grid: cell matrix and polygon rasterization
- robot: robot footprint, movement, booster pickup and wrapping
- actions: Move / TurnClockwise / TurnCounter / Attach
- map_parser: text map description parser
- state: grid + robot action engine
- config: YAML-backed simulation configuration
"""

from .actions import Action, Attach, Move, TurnClockwise, TurnCounter
from .cells import Booster, BoosterType, Cell
from .config import DEFAULT_TENTACLES, SimConfig
from .errors import (
    ConfigError,
    InvalidCellError,
    InvalidMoveError,
    MapParseError,
    WrapSimError,
)
from .geometry_utils import Orientation, Point, Polygon, Rotation, rotate
from .grid import Grid
from .robot import Robot
from .state import State

__all__ = [
    "Action",
    "Attach",
    "Booster",
    "BoosterType",
    "Cell",
    "ConfigError",
    "DEFAULT_TENTACLES",
    "Grid",
    "InvalidCellError",
    "InvalidMoveError",
    "MapParseError",
    "Move",
    "Orientation",
    "Point",
    "Polygon",
    "Robot",
    "Rotation",
    "SimConfig",
    "State",
    "TurnClockwise",
    "TurnCounter",
    "WrapSimError",
    "rotate",
]
