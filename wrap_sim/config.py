from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import yaml

from .errors import ConfigError
from .geometry_utils import Orientation, Point

DEFAULT_TENTACLES: Tuple[Point, ...] = (Point(1, 0), Point(1, 1), Point(1, -1))


@dataclass(frozen=True)
class SimConfig:
    """Initial robot loadout and action rules.

    Attributes
    ----------
    tentacles : tuple[Point, ...]
        Tentacle offsets the robot starts with (RIGHT-facing frame).
    orientation : Orientation
        Initial heading.
    wrap_on_attach : bool
        Run a wrap pass after Attach. Off by default, so freshly attached
        tentacles paint nothing until the next move or turn.
    """

    tentacles: Tuple[Point, ...] = DEFAULT_TENTACLES
    orientation: Orientation = Orientation.RIGHT
    wrap_on_attach: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimConfig":
        """Create config from a dict; missing keys keep their defaults."""
        robot_cfg = data.get("robot", {}) or {}
        rules_cfg = data.get("rules", {}) or {}
        if not isinstance(robot_cfg, dict) or not isinstance(rules_cfg, dict):
            raise ConfigError("'robot' and 'rules' must be mappings")

        tentacles = DEFAULT_TENTACLES
        if "tentacles" in robot_cfg:
            try:
                tentacles = tuple(Point(int(x), int(y)) for x, y in robot_cfg["tentacles"])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"bad tentacle list {robot_cfg['tentacles']!r}") from e

        orientation_name = str(robot_cfg.get("orientation", Orientation.RIGHT.name))
        try:
            orientation = Orientation[orientation_name.upper()]
        except KeyError:
            raise ConfigError(f"unknown orientation {orientation_name!r}") from None

        wrap_on_attach = rules_cfg.get("wrap_on_attach", False)
        if not isinstance(wrap_on_attach, bool):
            raise ConfigError(f"wrap_on_attach must be true or false, got {wrap_on_attach!r}")

        return cls(
            tentacles=tentacles,
            orientation=orientation,
            wrap_on_attach=wrap_on_attach,
        )

    @classmethod
    def from_yaml(cls, path: str) -> "SimConfig":
        return cls.from_dict(load_yaml(path))


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data
