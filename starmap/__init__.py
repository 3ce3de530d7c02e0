"""
Starmap - Turn-based space exploration engine

A galaxy of 8x8 quadrants, each an 8x8 grid of sectors, populated with a
player ship, hostiles, stars and resupply stations. The package provides:
- Galaxy/entity model with random placement
- Ship movement
- Sensor scans (short range, long range, galaxy chart)
- Versioned snapshots for session persistence
- In-memory game sessions
"""

__version__ = "0.1.0"
