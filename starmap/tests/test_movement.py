"""
Tests for ship movement.

Tests:
- Moving to an empty sector
- Occupied targets divert within the requested quadrant
- Vacated sectors are cleared
- Bad coordinates leave the galaxy untouched
"""

import random

import pytest

from ..engine_core.config import QUADRANT_SIZE
from ..engine_core.entity import EntityKind
from ..engine_core.errors import CoordinateOutOfRangeError, NoFreeSectorError
from ..engine_core.galaxy import Galaxy


class TestMoveToEmptySector:
    """Tests for plain moves."""

    def test_ship_lands_on_requested_sector(self, ship_galaxy):
        ship = ship_galaxy.move_ship(6, 1, 2, 7)

        assert ship is ship_galaxy.ship
        assert ship.quadrant == (6, 1)
        assert ship.sector == (2, 7)
        assert ship_galaxy.sector(6, 1, 2, 7) is ship

    def test_move_clears_origin(self, ship_galaxy):
        """The old sector holds an empty entity tagged with the old address."""
        ship_galaxy.move_ship(6, 1, 2, 7)

        origin = ship_galaxy.sector(3, 3, 4, 4)
        assert origin.kind is EntityKind.EMPTY
        assert origin.quadrant == (3, 3)
        assert origin.sector == (4, 4)

    def test_move_within_quadrant(self, ship_galaxy):
        ship_galaxy.move_ship(3, 3, 0, 0)

        assert ship_galaxy.ship.sector == (0, 0)
        assert ship_galaxy.sector(3, 3, 4, 4).is_empty
        assert ship_galaxy.count_of_kind_in_quadrant(EntityKind.SHIP, 3, 3) == 1

    def test_single_ship_after_many_moves(self, galaxy):
        for quadrant in range(8):
            galaxy.move_ship(quadrant, 7 - quadrant, 3, 3)

        ships = [e for e in galaxy.entities() if e.kind is EntityKind.SHIP]
        assert ships == [galaxy.ship]
        assert len(galaxy.entities_of_kind(EntityKind.SHIP)) == 1

    def test_move_leaves_other_registries_alone(self, galaxy):
        stars_before = len(galaxy.stars)
        hostiles_before = len(galaxy.hostiles)

        galaxy.move_ship(0, 0, 0, 0)

        assert len(galaxy.stars) == stars_before
        assert len(galaxy.hostiles) == hostiles_before


class TestMoveToOccupiedSector:
    """Tests for the occupied-target fallback."""

    def test_diverts_within_requested_quadrant(self, galaxy):
        star = galaxy.stars[0]

        ship = galaxy.move_ship(star.quadrant_x, star.quadrant_y, star.sector_x, star.sector_y)

        assert ship.quadrant == star.quadrant
        assert ship.sector != star.sector
        assert galaxy.sector(star.quadrant_x, star.quadrant_y, star.sector_x, star.sector_y) is star
        assert galaxy.sector(*ship.quadrant, *ship.sector) is ship

    def test_diverted_ship_lands_on_previously_empty_sector(self, ship_galaxy):
        ship_galaxy.place_entity(EntityKind.HOSTILE, 5, 5, 1, 1)
        empty_before = set(ship_galaxy.quadrant(5, 5).empty_sectors())

        ship = ship_galaxy.move_ship(5, 5, 1, 1)

        assert ship.quadrant == (5, 5)
        assert ship.sector in empty_before
        assert ship_galaxy.sector(5, 5, 1, 1).kind is EntityKind.HOSTILE

    def test_only_free_sector_is_chosen(self, ship_galaxy):
        """With one hole left in the quadrant the ship must take it."""
        for sector_x in range(QUADRANT_SIZE):
            for sector_y in range(QUADRANT_SIZE):
                if (sector_x, sector_y) != (6, 2):
                    ship_galaxy.place_entity(EntityKind.STAR, 0, 7, sector_x, sector_y)

        ship = ship_galaxy.move_ship(0, 7, 0, 0)

        assert ship.quadrant == (0, 7)
        assert ship.sector == (6, 2)

    def test_full_quadrant_fails_without_mutation(self, ship_galaxy):
        for sector_x in range(QUADRANT_SIZE):
            for sector_y in range(QUADRANT_SIZE):
                ship_galaxy.place_entity(EntityKind.STAR, 0, 7, sector_x, sector_y)

        with pytest.raises(NoFreeSectorError):
            ship_galaxy.move_ship(0, 7, 0, 0)

        assert ship_galaxy.ship.quadrant == (3, 3)
        assert ship_galaxy.sector(3, 3, 4, 4) is ship_galaxy.ship

    def test_move_onto_own_sector_relocates_in_quadrant(self, ship_galaxy):
        ship = ship_galaxy.move_ship(3, 3, 4, 4)

        assert ship.quadrant == (3, 3)
        assert ship.sector != (4, 4)
        assert ship_galaxy.sector(3, 3, 4, 4).is_empty

    def test_diversion_is_reproducible_with_seed(self):
        """Same seed, same occupied target, same landing sector."""
        landings = []
        for _ in range(2):
            galaxy = Galaxy(rng=random.Random(314), populate=False)
            galaxy.place_entity(EntityKind.SHIP, 3, 3, 4, 4)
            galaxy.place_entity(EntityKind.STAR, 5, 2, 6, 6)

            ship = galaxy.move_ship(5, 2, 6, 6)
            landings.append(ship.sector)

        assert landings[0] == landings[1]
        assert landings[0] != (6, 6)


class TestMoveValidation:
    """Out-of-range coordinates are rejected before anything changes."""

    @pytest.mark.parametrize("coordinates", [
        (8, 0, 0, 0),
        (0, -1, 0, 0),
        (0, 0, 8, 0),
        (0, 0, 0, 99),
    ])
    def test_out_of_range(self, ship_galaxy, coordinates):
        with pytest.raises(CoordinateOutOfRangeError):
            ship_galaxy.move_ship(*coordinates)

        assert ship_galaxy.ship.quadrant == (3, 3)
        assert ship_galaxy.ship.sector == (4, 4)

    def test_error_is_value_error(self, ship_galaxy):
        with pytest.raises(ValueError, match="quadrant_x=9"):
            ship_galaxy.move_ship(9, 0, 0, 0)
