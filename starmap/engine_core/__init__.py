"""
Engine Core - The galaxy model.

The core:
1. Builds a Galaxy of 64 quadrants of 64 sectors
2. Places the ship, stars, hostiles and resupply stations at random
3. Moves the ship
4. Answers quadrant queries for sensor scans
"""

from .entity import Entity, EntityKind
from .quadrant import Quadrant
from .config import GalaxyConfig, GALAXY_SIZE, QUADRANT_SIZE
from .errors import (
    GalaxyError,
    CoordinateOutOfRangeError,
    NoFreeSectorError,
    SectorOccupiedError,
    SnapshotError,
)
from .galaxy import Galaxy
from .scan import (
    Condition,
    GalaxyChart,
    LongRangeScan,
    ShortRangeScan,
    condition,
    galaxy_chart,
    long_range_scan,
    short_range_scan,
)

__all__ = [
    "Entity",
    "EntityKind",
    "Quadrant",
    "GalaxyConfig",
    "GALAXY_SIZE",
    "QUADRANT_SIZE",
    "GalaxyError",
    "CoordinateOutOfRangeError",
    "NoFreeSectorError",
    "SectorOccupiedError",
    "SnapshotError",
    "Galaxy",
    "Condition",
    "GalaxyChart",
    "LongRangeScan",
    "ShortRangeScan",
    "condition",
    "galaxy_chart",
    "long_range_scan",
    "short_range_scan",
]
