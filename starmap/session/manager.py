"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Player starts a game -> session created with its own Galaxy
2. During the game:
   - Player issues commands through a GameLoop
   - Each command counts as one turn
   - Caller may snapshot the session between turns
3. Game ends (ship destroyed, player quits) -> session removed

ISOLATION:
- Every session owns its Galaxy and its random source
- Nothing is shared between sessions
- Sessions are in-memory only; persistence is the caller's job
  (Session.snapshot() / SessionManager.restore_session())
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import logging
import random
import time
import uuid

from ..engine_core.config import GalaxyConfig
from ..engine_core.galaxy import Galaxy
from ..snapshot import dumps, loads

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Ship destroyed
    ABANDONED = "abandoned"  # Player quit or session went stale


@dataclass
class Session:
    """
    One play-through of the game.

    Contains:
    - The galaxy being explored (with its own random source)
    - Turn counter
    """
    session_id: str
    galaxy: Galaxy
    created_at: float

    state: SessionState = SessionState.ACTIVE
    turn_number: int = 0

    # Session metadata
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def rng(self) -> random.Random:
        """The session's random source, shared with its galaxy."""
        return self.galaxy.rng

    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def snapshot(self) -> str:
        """Serialize the galaxy for storage between turns."""
        return dumps(self.galaxy)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions, each with an independent galaxy
    - Track active sessions
    - Clean up finished sessions
    """

    def __init__(self, config: GalaxyConfig | None = None):
        self.config = config or GalaxyConfig()
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        random_seed: int | None = None,
        config: GalaxyConfig | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            random_seed: Seed for a reproducible galaxy
            config: Population settings (defaults to the manager's)

        Returns:
            New active Session
        """
        rng = random.Random(random_seed)
        galaxy = Galaxy(config=config or self.config, rng=rng)
        session = self._register(galaxy)
        session.metadata["random_seed"] = random_seed
        return session

    def restore_session(
        self,
        snapshot_json: str,
        turn_number: int = 0,
        random_seed: int | None = None,
    ) -> Session:
        """
        Start a session from a stored galaxy snapshot.

        Raises whatever snapshot loading raises (SnapshotError,
        pydantic.ValidationError, SectorOccupiedError).
        """
        galaxy = loads(snapshot_json, config=self.config, rng=random.Random(random_seed))
        session = self._register(galaxy)
        session.turn_number = turn_number
        return session

    def _register(self, galaxy: Galaxy) -> Session:
        session = Session(
            session_id=str(uuid.uuid4()),
            galaxy=galaxy,
            created_at=time.time(),
        )
        self._sessions[session.session_id] = session
        logger.info(f"Session {session.session_id} created")
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed"):
        """
        End a session and remove it.

        reason "completed" marks an active session GAME_OVER, anything
        else marks it ABANDONED. A session that already ended keeps its
        state.
        """
        session = self._sessions.pop(session_id, None)
        if session:
            if session.is_active():
                if reason == "completed":
                    session.state = SessionState.GAME_OVER
                else:
                    session.state = SessionState.ABANDONED
            logger.info(f"Session {session_id} ended ({reason}) after {session.turn_number} turns")

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        Remove finished sessions older than max_age_seconds.

        Games still in progress are kept however old they are.
        Returns the IDs removed.
        """
        current_time = time.time()
        to_remove = []

        for session_id, session in self._sessions.items():
            age = current_time - session.created_at
            if age > max_age_seconds and not session.is_active():
                to_remove.append(session_id)

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return to_remove
