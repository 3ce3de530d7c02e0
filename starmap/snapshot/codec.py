"""
Snapshot Codec - Convert galaxies to and from snapshots.

Usage:
    text = dumps(galaxy)      # JSON string, safe to store between turns
    galaxy = loads(text)      # Fully rebuilt galaxy
"""

from __future__ import annotations
import logging
import random

from ..engine_core.config import GalaxyConfig
from ..engine_core.entity import EntityKind
from ..engine_core.errors import SnapshotError
from ..engine_core.galaxy import Galaxy
from .schemas import EntityRecord, GalaxySnapshot, SNAPSHOT_VERSION

logger = logging.getLogger(__name__)


def to_snapshot(galaxy: Galaxy) -> GalaxySnapshot:
    """Capture every non-empty sector of the galaxy."""
    records = []
    ship_index = 0
    for entity in galaxy.entities():
        if entity.is_empty:
            continue
        if entity.kind is EntityKind.SHIP:
            ship_index = len(records)
        records.append(EntityRecord.model_validate(entity))

    return GalaxySnapshot(
        version=SNAPSHOT_VERSION,
        entities=records,
        ship_index=ship_index,
    )


def from_snapshot(
    snapshot: GalaxySnapshot,
    config: GalaxyConfig | None = None,
    rng: random.Random | None = None,
) -> Galaxy:
    """
    Rebuild a galaxy from a snapshot.

    Raises:
        SnapshotError: the snapshot version is not supported
        SectorOccupiedError: two records share a sector
    """
    if snapshot.version != SNAPSHOT_VERSION:
        raise SnapshotError(
            f"Unsupported snapshot version {snapshot.version} "
            f"(expected {SNAPSHOT_VERSION})"
        )

    galaxy = Galaxy(config=config, rng=rng, populate=False)
    for record in snapshot.entities:
        galaxy.place_entity(
            record.kind,
            record.quadrant_x,
            record.quadrant_y,
            record.sector_x,
            record.sector_y,
            energy=record.energy,
            status=record.status,
            scanned=record.scanned,
        )

    logger.info(f"Restored galaxy with {len(snapshot.entities)} entities")
    return galaxy


def dumps(galaxy: Galaxy) -> str:
    """Serialize a galaxy to JSON."""
    return to_snapshot(galaxy).model_dump_json()


def loads(
    text: str,
    config: GalaxyConfig | None = None,
    rng: random.Random | None = None,
) -> Galaxy:
    """
    Rebuild a galaxy from JSON produced by dumps().

    Raises pydantic.ValidationError for malformed payloads.
    """
    return from_snapshot(GalaxySnapshot.model_validate_json(text), config=config, rng=rng)
