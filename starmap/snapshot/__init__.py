"""
Snapshot Module - Versioned persistence format for galaxies.

The core keeps no state between turns. Callers that persist a session
store a snapshot and rebuild the galaxy from it on the next turn.
"""

from .schemas import EntityRecord, GalaxySnapshot, SNAPSHOT_VERSION
from .codec import to_snapshot, from_snapshot, dumps, loads

__all__ = [
    "EntityRecord",
    "GalaxySnapshot",
    "SNAPSHOT_VERSION",
    "to_snapshot",
    "from_snapshot",
    "dumps",
    "loads",
]
