"""
Galaxy errors.
"""


class GalaxyError(Exception):
    """Base class for galaxy model errors."""


class CoordinateOutOfRangeError(GalaxyError, ValueError):
    """Raised when a quadrant or sector coordinate is outside the grid."""

    def __init__(self, name: str, value: int, upper: int):
        self.name = name
        self.value = value
        super().__init__(f"{name}={value} is out of range (0-{upper - 1})")


class NoFreeSectorError(GalaxyError):
    """Raised when no empty sector can be found for a placement or move."""


class SectorOccupiedError(GalaxyError):
    """Raised when placing an entity onto a sector that is already taken."""


class SnapshotError(GalaxyError, ValueError):
    """Raised when a snapshot cannot be restored."""
