"""
Pydantic Schemas for galaxy snapshots.

A snapshot is a flat list of every non-empty sector plus the index of the
ship in that list. Empty sectors are implied. The version field lets the
format change without breaking stored sessions.
"""

from pydantic import BaseModel, Field, model_validator

from ..engine_core.entity import EntityKind

SNAPSHOT_VERSION = 1


class EntityRecord(BaseModel):
    """One placed entity."""
    kind: EntityKind
    quadrant_x: int = Field(ge=0, le=7)
    quadrant_y: int = Field(ge=0, le=7)
    sector_x: int = Field(ge=0, le=7)
    sector_y: int = Field(ge=0, le=7)
    energy: int = -1
    status: int = 1
    scanned: int = 1

    model_config = {"from_attributes": True}

    @model_validator(mode="after")
    def _not_empty(self):
        if self.kind is EntityKind.EMPTY:
            raise ValueError("Empty sectors are not recorded")
        return self


class GalaxySnapshot(BaseModel):
    """Complete, restorable galaxy state."""
    version: int = SNAPSHOT_VERSION
    entities: list[EntityRecord] = Field(default_factory=list)
    ship_index: int = Field(ge=0, description="Index of the ship in entities")

    @model_validator(mode="after")
    def _one_ship(self):
        ships = [i for i, record in enumerate(self.entities) if record.kind is EntityKind.SHIP]
        if len(ships) != 1:
            raise ValueError(f"Snapshot must hold exactly one ship, found {len(ships)}")
        if ships[0] != self.ship_index:
            raise ValueError(
                f"ship_index {self.ship_index} does not point at the ship (index {ships[0]})"
            )
        return self
