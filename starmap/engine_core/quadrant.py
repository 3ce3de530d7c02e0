"""
Quadrant - An 8x8 grid of sectors.
"""

from __future__ import annotations
from typing import Iterator

from .config import QUADRANT_SIZE
from .entity import Entity, EntityKind


class Quadrant:
    """
    One region of the galaxy.

    Sectors are indexed as sectors[sector_x][sector_y]. The Galaxy writes
    directly into this array when placing or moving entities.
    """

    def __init__(self, quadrant_x: int, quadrant_y: int):
        self.quadrant_x = quadrant_x
        self.quadrant_y = quadrant_y
        self.sectors: list[list[Entity]] = []
        self.initialize(quadrant_x, quadrant_y)

    def initialize(self, quadrant_x: int, quadrant_y: int):
        """Fill every sector with a fresh empty entity."""
        self.sectors = [
            [
                Entity(EntityKind.EMPTY, quadrant_x, quadrant_y, sector_x, sector_y)
                for sector_y in range(QUADRANT_SIZE)
            ]
            for sector_x in range(QUADRANT_SIZE)
        ]

    def sector(self, sector_x: int, sector_y: int) -> Entity:
        return self.sectors[sector_x][sector_y]

    def __iter__(self) -> Iterator[Entity]:
        for column in self.sectors:
            yield from column

    def count(self, kind: EntityKind) -> int:
        """Count entities of a kind in this quadrant."""
        return sum(1 for entity in self if entity.kind is kind)

    def empty_sectors(self) -> list[tuple[int, int]]:
        """Sector addresses currently holding an empty entity."""
        return [entity.sector for entity in self if entity.is_empty]
