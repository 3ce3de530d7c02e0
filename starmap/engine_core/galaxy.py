"""
Galaxy - The star map and everything placed in it.

The galaxy is an 8x8 grid of quadrants, each an 8x8 grid of sectors.
It owns:
- Random placement of the ship, stars, hostiles and resupply stations
- Ship movement
- Quadrant queries used by sensor scans

The grid is the single source of truth. The per-kind registries are an
index maintained by the one primitive that writes grid slots (_put), so
they can never drift from the grid.

Randomness comes from an injected random.Random; pass a seeded instance
for a reproducible layout.
"""

from __future__ import annotations
from typing import Iterator
import logging
import random

from .config import GalaxyConfig, GALAXY_SIZE, QUADRANT_SIZE
from .entity import Entity, EntityKind
from .errors import (
    CoordinateOutOfRangeError,
    GalaxyError,
    NoFreeSectorError,
    SectorOccupiedError,
)
from .quadrant import Quadrant

logger = logging.getLogger(__name__)


class Galaxy:
    """
    A populated star map.

    Usage:
        galaxy = Galaxy(rng=random.Random(42))

        ship = galaxy.ship
        galaxy.move_ship(3, 4, 0, 7)
        galaxy.quadrant_summary(3, 4)  # e.g. "210"
    """

    def __init__(
        self,
        config: GalaxyConfig | None = None,
        rng: random.Random | None = None,
        populate: bool = True,
    ):
        """
        Args:
            config: Population settings (defaults to the standard game)
            rng: Random source for placement and movement
            populate: If False, leave every sector empty and place no ship
        """
        self.config = config or GalaxyConfig()
        self.rng = rng or random.Random()

        self._quadrants: list[list[Quadrant]] = []
        self._registry: dict[EntityKind, list[Entity]] = {
            kind: [] for kind in EntityKind if kind is not EntityKind.EMPTY
        }
        self._ship: Entity | None = None

        self._init_map()
        if populate:
            self._populate()

    # =========================================================================
    # Construction
    # =========================================================================

    def _init_map(self):
        self._quadrants = [
            [Quadrant(quadrant_x, quadrant_y) for quadrant_y in range(GALAXY_SIZE)]
            for quadrant_x in range(GALAXY_SIZE)
        ]

    def _populate(self):
        self._ship = self._put(self._sample_entity(EntityKind.SHIP))

        self._add_entities(EntityKind.STAR, self.config.star_count)
        self._add_entities(EntityKind.HOSTILE, self.config.hostile_count)
        self._add_entities(EntityKind.STATION, self.config.station_count)

        logger.info(
            f"Galaxy populated: ship at {self._ship.quadrant} {self._ship.sector}, "
            f"{len(self.stars)} stars, {len(self.hostiles)} hostiles, "
            f"{len(self.stations)} stations"
        )

    def _add_entities(self, kind: EntityKind, count: int):
        for _ in range(count):
            self._put(self._sample_entity(kind))

    def _sample_entity(self, kind: EntityKind) -> Entity:
        """
        Rejection-sample a location for a new entity.

        A candidate is accepted when its sector is empty and its quadrant
        holds fewer than per_quadrant_cap entities of the same kind.
        """
        cap = self.config.per_quadrant_cap
        for _ in range(self.config.max_placement_attempts):
            quadrant_x = self.rng.randrange(GALAXY_SIZE)
            quadrant_y = self.rng.randrange(GALAXY_SIZE)
            sector_x = self.rng.randrange(QUADRANT_SIZE)
            sector_y = self.rng.randrange(QUADRANT_SIZE)

            quadrant = self._quadrants[quadrant_x][quadrant_y]
            if quadrant.sector(sector_x, sector_y).is_empty and quadrant.count(kind) < cap:
                return Entity(kind, quadrant_x, quadrant_y, sector_x, sector_y)

        raise NoFreeSectorError(
            f"No free sector for {kind.value} after "
            f"{self.config.max_placement_attempts} attempts"
        )

    def _put(self, entity: Entity) -> Entity:
        """Write an entity into the slot named by its own coordinates."""
        sectors = self._quadrants[entity.quadrant_x][entity.quadrant_y].sectors
        occupant = sectors[entity.sector_x][entity.sector_y]
        if not occupant.is_empty:
            self._registry[occupant.kind].remove(occupant)

        sectors[entity.sector_x][entity.sector_y] = entity
        if not entity.is_empty:
            self._registry[entity.kind].append(entity)

        logger.debug(
            f"PUT: {entity.kind.value} - {entity.quadrant_x}:{entity.quadrant_y} "
            f"{entity.sector_x}:{entity.sector_y}"
        )
        return entity

    def place_entity(
        self,
        kind: EntityKind,
        quadrant_x: int,
        quadrant_y: int,
        sector_x: int,
        sector_y: int,
        energy: int = -1,
        status: int = 1,
        scanned: int = 1,
    ) -> Entity:
        """
        Place a specific entity at a known location.

        Used to restore snapshots and to build fixed layouts. The
        per-quadrant cap is not applied here; it only shapes random
        population.

        Raises:
            CoordinateOutOfRangeError: a coordinate is off the grid
            SectorOccupiedError: the target sector is not empty
            GalaxyError: kind is EMPTY, or a second ship is placed
        """
        _check_quadrant(quadrant_x, quadrant_y)
        _check_sector(sector_x, sector_y)

        if kind is EntityKind.EMPTY:
            raise GalaxyError("Cannot place an empty entity")
        if kind is EntityKind.SHIP and self._ship is not None:
            raise GalaxyError("Galaxy already has a ship")

        occupant = self._quadrants[quadrant_x][quadrant_y].sector(sector_x, sector_y)
        if not occupant.is_empty:
            raise SectorOccupiedError(
                f"Sector {quadrant_x}:{quadrant_y} {sector_x}:{sector_y} "
                f"holds a {occupant.kind.value}"
            )

        entity = Entity(
            kind, quadrant_x, quadrant_y, sector_x, sector_y,
            energy=energy, status=status, scanned=scanned,
        )
        self._put(entity)
        if kind is EntityKind.SHIP:
            self._ship = entity
        return entity

    # =========================================================================
    # Movement
    # =========================================================================

    def move_ship(
        self,
        quadrant_x: int,
        quadrant_y: int,
        sector_x: int,
        sector_y: int,
    ) -> Entity:
        """
        Move the ship to a quadrant and sector.

        If the requested sector is occupied the ship lands on a random
        empty sector of the same quadrant instead. The quadrant is never
        changed. The vacated sector is left holding an empty entity.

        Returns:
            The ship, with its coordinates updated

        Raises:
            CoordinateOutOfRangeError: a coordinate is off the grid
            NoFreeSectorError: the target quadrant has no empty sector
        """
        _check_quadrant(quadrant_x, quadrant_y)
        _check_sector(sector_x, sector_y)
        ship = self.ship

        quadrant = self._quadrants[quadrant_x][quadrant_y]
        if not quadrant.sector(sector_x, sector_y).is_empty:
            free = quadrant.empty_sectors()
            if not free:
                raise NoFreeSectorError(
                    f"Quadrant {quadrant_x}:{quadrant_y} has no empty sector"
                )
            requested = (sector_x, sector_y)
            sector_x, sector_y = self.rng.choice(free)
            logger.debug(
                f"Sector {requested} in {quadrant_x}:{quadrant_y} occupied, "
                f"diverting to {sector_x}:{sector_y}"
            )

        self._put(Entity(
            EntityKind.EMPTY,
            ship.quadrant_x, ship.quadrant_y, ship.sector_x, ship.sector_y,
        ))

        ship.quadrant_x = quadrant_x
        ship.quadrant_y = quadrant_y
        ship.sector_x = sector_x
        ship.sector_y = sector_y
        self._put(ship)

        logger.info(f"Ship moved to {quadrant_x}:{quadrant_y} {sector_x}:{sector_y}")
        return ship

    # =========================================================================
    # Queries
    # =========================================================================

    def count_of_kind_in_quadrant(
        self,
        kind: EntityKind,
        quadrant_x: int,
        quadrant_y: int,
    ) -> int:
        """Count the entities of one kind in a quadrant."""
        return self.quadrant(quadrant_x, quadrant_y).count(kind)

    def quadrant_summary(self, quadrant_x: int, quadrant_y: int) -> str:
        """
        Summarize a quadrant as three digits: stars, hostiles, stations.

        Two stars, one hostile and no station gives "210". Each count fits
        in one digit because GalaxyConfig caps a kind at 9 per quadrant.
        """
        stars = hostiles = stations = 0
        for entity in self.quadrant(quadrant_x, quadrant_y):
            if entity.kind is EntityKind.STAR:
                stars += 1
            elif entity.kind is EntityKind.HOSTILE:
                hostiles += 1
            elif entity.kind is EntityKind.STATION:
                stations += 1
        return f"{stars}{hostiles}{stations}"

    def is_sector_empty(self, entity: Entity) -> bool:
        """Whether the slot at the entity's recorded coordinates is empty."""
        return self.sector(
            entity.quadrant_x, entity.quadrant_y, entity.sector_x, entity.sector_y
        ).is_empty

    # =========================================================================
    # Grid access
    # =========================================================================

    @property
    def ship(self) -> Entity:
        if self._ship is None:
            raise GalaxyError("No ship has been placed")
        return self._ship

    @property
    def has_ship(self) -> bool:
        return self._ship is not None

    @property
    def quadrants(self) -> list[list[Quadrant]]:
        """Quadrants indexed as quadrants[quadrant_x][quadrant_y]."""
        return self._quadrants

    def quadrant(self, quadrant_x: int, quadrant_y: int) -> Quadrant:
        _check_quadrant(quadrant_x, quadrant_y)
        return self._quadrants[quadrant_x][quadrant_y]

    def sector(
        self,
        quadrant_x: int,
        quadrant_y: int,
        sector_x: int,
        sector_y: int,
    ) -> Entity:
        _check_sector(sector_x, sector_y)
        return self.quadrant(quadrant_x, quadrant_y).sector(sector_x, sector_y)

    def entities(self) -> Iterator[Entity]:
        """Every slot in the galaxy, empty ones included."""
        for column in self._quadrants:
            for quadrant in column:
                yield from quadrant

    def entities_of_kind(self, kind: EntityKind) -> list[Entity]:
        if kind is EntityKind.EMPTY:
            return [entity for entity in self.entities() if entity.is_empty]
        return list(self._registry[kind])

    @property
    def stars(self) -> list[Entity]:
        return self.entities_of_kind(EntityKind.STAR)

    @property
    def hostiles(self) -> list[Entity]:
        return self.entities_of_kind(EntityKind.HOSTILE)

    @property
    def stations(self) -> list[Entity]:
        return self.entities_of_kind(EntityKind.STATION)


def _check_quadrant(quadrant_x: int, quadrant_y: int):
    _check_range("quadrant_x", quadrant_x, GALAXY_SIZE)
    _check_range("quadrant_y", quadrant_y, GALAXY_SIZE)


def _check_sector(sector_x: int, sector_y: int):
    _check_range("sector_x", sector_x, QUADRANT_SIZE)
    _check_range("sector_y", sector_y, QUADRANT_SIZE)


def _check_range(name: str, value: int, upper: int):
    if not isinstance(value, int) or not 0 <= value < upper:
        raise CoordinateOutOfRangeError(name, value, upper)
