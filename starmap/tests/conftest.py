"""
Pytest fixtures for Starmap tests.
"""

import random

import pytest

from ..engine_core.config import GalaxyConfig
from ..engine_core.entity import EntityKind
from ..engine_core.galaxy import Galaxy
from ..session import SessionManager, GameLoop


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1701)


@pytest.fixture
def galaxy(rng) -> Galaxy:
    """Fully populated galaxy with a fixed layout."""
    return Galaxy(rng=rng)


@pytest.fixture
def empty_galaxy(rng) -> Galaxy:
    """Galaxy with every sector empty and no ship."""
    return Galaxy(rng=rng, populate=False)


@pytest.fixture
def ship_galaxy(empty_galaxy) -> Galaxy:
    """Empty galaxy with only the ship, at quadrant 3,3 sector 4,4."""
    empty_galaxy.place_entity(EntityKind.SHIP, 3, 3, 4, 4)
    return empty_galaxy


@pytest.fixture
def small_config() -> GalaxyConfig:
    """Sparse population for quick layouts."""
    return GalaxyConfig(star_count=10, hostile_count=2, station_count=1)


@pytest.fixture
def session_manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def session(session_manager):
    return session_manager.create_session(random_seed=42)


@pytest.fixture
def game_loop(session) -> GameLoop:
    return GameLoop(session)
