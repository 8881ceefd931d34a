"""
Parser for the text map description.

Format::

    <outer-polygon>#<initial-position>#<obstacle-polygons>#<boosters>

Points are written ``(x,y)``, polygons as comma-separated points, and
obstacles and boosters are separated by ``;``. A booster is a type letter
followed by a point, e.g. ``B(3,4)``.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import List, Tuple

from .cells import Booster, BoosterType
from .errors import MapParseError
from .geometry_utils import Point, Polygon

_POINT_RE = re.compile(r"\(\s*(-?\d+)\s*,\s*(-?\d+)\s*\)")
_POLYGON_RE = re.compile(rf"{_POINT_RE.pattern}(\s*,\s*{_POINT_RE.pattern})*")


@dataclass(frozen=True)
class MapDescription:
    """Parsed but not yet rasterized map."""

    outer: Polygon
    initial: Point
    obstacles: Tuple[Polygon, ...]
    boosters: Tuple[Booster, ...]


def parse_point(s: str) -> Point:
    m = _POINT_RE.fullmatch(s.strip())
    if m is None:
        raise MapParseError(f"invalid point {s!r}")
    return Point(int(m.group(1)), int(m.group(2)))


def parse_polygon(s: str) -> Polygon:
    s = s.strip()
    if _POLYGON_RE.fullmatch(s) is None:
        raise MapParseError(f"invalid polygon {s!r}")
    vertices = tuple(Point(int(x), int(y)) for x, y in _POINT_RE.findall(s))
    try:
        return Polygon(vertices)
    except ValueError as e:
        raise MapParseError(str(e)) from e


def parse_booster(s: str) -> Booster:
    s = s.strip()
    if not s:
        raise MapParseError("empty booster declaration")
    try:
        booster_type = BoosterType(s[0])
    except ValueError:
        raise MapParseError(f"unknown booster type {s[0]!r} in {s!r}") from None
    return Booster(type=booster_type, location=parse_point(s[1:]))


def _split_list(s: str) -> List[str]:
    return [item for item in s.split(";") if item.strip()]


def parse_map(s: str) -> MapDescription:
    """Split a map description into its four fields and parse each one."""
    fields = s.strip().split("#")
    if len(fields) != 4:
        raise MapParseError(f"expected 4 '#'-separated fields, got {len(fields)}")
    raw_map, raw_initial, raw_obstacles, raw_boosters = fields
    return MapDescription(
        outer=parse_polygon(raw_map),
        initial=parse_point(raw_initial),
        obstacles=tuple(parse_polygon(item) for item in _split_list(raw_obstacles)),
        boosters=tuple(parse_booster(item) for item in _split_list(raw_boosters)),
    )
