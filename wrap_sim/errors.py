from __future__ import annotations


class WrapSimError(Exception):
    """Base class for all simulation core errors."""


class MapParseError(WrapSimError, ValueError):
    """Raised when a map description cannot be turned into a State."""


class InvalidMoveError(WrapSimError, ValueError):
    """Raised when a robot is asked to move somewhere the rules forbid."""


class InvalidCellError(WrapSimError, ValueError):
    """Raised when a non-booster cell is converted to a booster type."""


class ConfigError(WrapSimError, ValueError):
    """Raised for malformed simulation configuration."""
