"""
Sensor Scans - What the ship's sensors report.

Scans are plain data built from Galaxy queries. Drawing them is left to
the caller (see cli.py for a text rendering).

- Short range: every sector of the ship's quadrant
- Long range: quadrant summaries for the 3x3 block around the ship
- Galaxy chart: summaries for all 64 quadrants
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .config import GALAXY_SIZE
from .entity import EntityKind
from .galaxy import Galaxy

# Summary shown for quadrants beyond the edge of the galaxy
OUT_OF_RANGE_SUMMARY = "000"

GLYPHS: dict[EntityKind, str] = {
    EntityKind.EMPTY: ".",
    EntityKind.SHIP: "E",
    EntityKind.HOSTILE: "K",
    EntityKind.STATION: "D",
    EntityKind.STAR: "*",
}


class Condition(Enum):
    """Alert condition of the ship."""
    GREEN = "green"
    RED = "red"  # Hostiles in the ship's quadrant


@dataclass
class LongRangeScan:
    """
    Quadrant summaries around the ship.

    cells[dx + 1][dy + 1] is the summary of quadrant
    (center_x + dx, center_y + dy).
    """
    center_x: int
    center_y: int
    cells: list[list[str]] = field(default_factory=list)

    def summary_at(self, dx: int, dy: int) -> str:
        return self.cells[dx + 1][dy + 1]


@dataclass
class ShortRangeScan:
    """
    Contents of the ship's quadrant.

    sectors[sector_x][sector_y] is the kind found in that sector.
    """
    quadrant_x: int
    quadrant_y: int
    ship_sector_x: int
    ship_sector_y: int
    condition: Condition
    sectors: list[list[EntityKind]] = field(default_factory=list)
    neighbourhood: LongRangeScan | None = None

    def glyph_at(self, sector_x: int, sector_y: int) -> str:
        return GLYPHS[self.sectors[sector_x][sector_y]]


@dataclass
class GalaxyChart:
    """Summaries for every quadrant; cells[quadrant_x][quadrant_y]."""
    ship_quadrant_x: int
    ship_quadrant_y: int
    condition: Condition
    cells: list[list[str]] = field(default_factory=list)


def condition(galaxy: Galaxy) -> Condition:
    """RED if any hostile shares the ship's quadrant."""
    ship = galaxy.ship
    if galaxy.count_of_kind_in_quadrant(
        EntityKind.HOSTILE, ship.quadrant_x, ship.quadrant_y
    ) > 0:
        return Condition.RED
    return Condition.GREEN


def long_range_scan(galaxy: Galaxy) -> LongRangeScan:
    """Summarize the 3x3 block of quadrants centred on the ship."""
    ship = galaxy.ship
    cells = []
    for dx in (-1, 0, 1):
        column = []
        for dy in (-1, 0, 1):
            quadrant_x = ship.quadrant_x + dx
            quadrant_y = ship.quadrant_y + dy
            if 0 <= quadrant_x < GALAXY_SIZE and 0 <= quadrant_y < GALAXY_SIZE:
                column.append(galaxy.quadrant_summary(quadrant_x, quadrant_y))
            else:
                column.append(OUT_OF_RANGE_SUMMARY)
        cells.append(column)

    return LongRangeScan(
        center_x=ship.quadrant_x,
        center_y=ship.quadrant_y,
        cells=cells,
    )


def short_range_scan(galaxy: Galaxy) -> ShortRangeScan:
    """Report every sector of the ship's current quadrant."""
    ship = galaxy.ship
    quadrant = galaxy.quadrant(ship.quadrant_x, ship.quadrant_y)

    return ShortRangeScan(
        quadrant_x=ship.quadrant_x,
        quadrant_y=ship.quadrant_y,
        ship_sector_x=ship.sector_x,
        ship_sector_y=ship.sector_y,
        condition=condition(galaxy),
        sectors=[[entity.kind for entity in column] for column in quadrant.sectors],
        neighbourhood=long_range_scan(galaxy),
    )


def galaxy_chart(galaxy: Galaxy) -> GalaxyChart:
    ship = galaxy.ship
    return GalaxyChart(
        ship_quadrant_x=ship.quadrant_x,
        ship_quadrant_y=ship.quadrant_y,
        condition=condition(galaxy),
        cells=[
            [galaxy.quadrant_summary(quadrant_x, quadrant_y) for quadrant_y in range(GALAXY_SIZE)]
            for quadrant_x in range(GALAXY_SIZE)
        ],
    )
