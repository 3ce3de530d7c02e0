"""
Session Module - Manages in-memory game sessions.

A session represents one play-through of the game:
- Created when the player starts a game
- Holds its own Galaxy
- Processes commands through a GameLoop
- Destroyed when the game ends
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnResult, Command

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnResult",
    "Command",
]
