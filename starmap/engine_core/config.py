"""
Galaxy Configuration - Population sizes and placement limits.

Defaults produce the standard game: 256 stars, 30 hostiles and
3 resupply stations. Any field can be overridden from the environment
with GalaxyConfig.from_env():

    STARMAP_STAR_COUNT
    STARMAP_HOSTILE_COUNT
    STARMAP_STATION_COUNT
    STARMAP_PER_QUADRANT_CAP
    STARMAP_MAX_PLACEMENT_ATTEMPTS
"""

from __future__ import annotations
from dataclasses import dataclass
import os

GALAXY_SIZE = 8
QUADRANT_SIZE = 8
SECTORS_PER_QUADRANT = QUADRANT_SIZE * QUADRANT_SIZE
TOTAL_SECTORS = GALAXY_SIZE * GALAXY_SIZE * SECTORS_PER_QUADRANT

# Quadrant summaries print one digit per kind
MAX_PER_QUADRANT_CAP = 9


@dataclass(frozen=True)
class GalaxyConfig:
    """Settings for populating a galaxy."""
    star_count: int = 256
    hostile_count: int = 30
    station_count: int = 3

    # A kind may not be placed into a quadrant already holding this many
    per_quadrant_cap: int = 9

    # Upper bound on rejection-sampling draws for a single placement
    max_placement_attempts: int = 10_000

    def __post_init__(self):
        for name in ("star_count", "hostile_count", "station_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if not 1 <= self.per_quadrant_cap <= MAX_PER_QUADRANT_CAP:
            raise ValueError(
                f"per_quadrant_cap must be between 1 and {MAX_PER_QUADRANT_CAP}"
            )
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be >= 1")

        per_kind_capacity = GALAXY_SIZE * GALAXY_SIZE * self.per_quadrant_cap
        for name in ("star_count", "hostile_count", "station_count"):
            if getattr(self, name) > per_kind_capacity:
                raise ValueError(
                    f"{name} exceeds capacity of {per_kind_capacity} "
                    f"at {self.per_quadrant_cap} per quadrant"
                )
        # +1 for the ship
        if self.total_entities + 1 > TOTAL_SECTORS:
            raise ValueError("Population does not fit in the galaxy")

    @property
    def total_entities(self) -> int:
        return self.star_count + self.hostile_count + self.station_count

    @classmethod
    def from_env(cls) -> GalaxyConfig:
        """Build a config, taking overrides from STARMAP_* variables."""
        defaults = cls()
        return cls(
            star_count=_env_int("STARMAP_STAR_COUNT", defaults.star_count),
            hostile_count=_env_int("STARMAP_HOSTILE_COUNT", defaults.hostile_count),
            station_count=_env_int("STARMAP_STATION_COUNT", defaults.station_count),
            per_quadrant_cap=_env_int("STARMAP_PER_QUADRANT_CAP", defaults.per_quadrant_cap),
            max_placement_attempts=_env_int(
                "STARMAP_MAX_PLACEMENT_ATTEMPTS", defaults.max_placement_attempts
            ),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
