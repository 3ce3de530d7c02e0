"""
Entity - A single object placed in a galaxy sector.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class EntityKind(Enum):
    """What occupies a sector."""
    EMPTY = "empty"
    SHIP = "ship"
    HOSTILE = "hostile"
    STATION = "station"  # Resupply station
    STAR = "star"


@dataclass(eq=False)
class Entity:
    """
    A placed object with identity.

    Coordinates and attributes are mutable so that moving an entity and
    placing it are the same operation. The kind is fixed at construction.
    No range checks happen here; the Galaxy validates coordinates.
    """
    kind: EntityKind
    quadrant_x: int
    quadrant_y: int
    sector_x: int
    sector_y: int

    energy: int = -1  # -1 = not applicable
    status: int = 1  # 1 = alive/active
    scanned: int = 1

    def __setattr__(self, name, value):
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError("Entity kind cannot be changed")
        super().__setattr__(name, value)

    @property
    def quadrant(self) -> tuple[int, int]:
        return (self.quadrant_x, self.quadrant_y)

    @property
    def sector(self) -> tuple[int, int]:
        return (self.sector_x, self.sector_y)

    @property
    def is_empty(self) -> bool:
        return self.kind is EntityKind.EMPTY
