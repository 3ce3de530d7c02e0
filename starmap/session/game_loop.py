"""
Game Loop - Turns player commands into galaxy operations.

Commands (first word, case-insensitive):
    1 | move QX QY SX SY    Move the ship
    2 | sr                  Short range scan
    3 | lr                  Long range scan
    4 | chart               Galaxy chart
    9 | destruct            Self destruct (ends the game)

Every command processed while the game is running counts as one turn.
Bad input never raises; it comes back as errors on the TurnResult.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any
import logging

from ..engine_core.errors import GalaxyError
from ..engine_core.scan import galaxy_chart, long_range_scan, short_range_scan

if TYPE_CHECKING:
    from .manager import Session

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    WAITING_COMMAND = "waiting_command"
    GAME_OVER = "game_over"


class Command(Enum):
    MOVE = "move"
    SHORT_RANGE = "short_range"
    LONG_RANGE = "long_range"
    CHART = "chart"
    SELF_DESTRUCT = "self_destruct"


_COMMAND_WORDS: dict[str, Command] = {
    "1": Command.MOVE,
    "move": Command.MOVE,
    "2": Command.SHORT_RANGE,
    "sr": Command.SHORT_RANGE,
    "3": Command.LONG_RANGE,
    "lr": Command.LONG_RANGE,
    "4": Command.CHART,
    "chart": Command.CHART,
    "9": Command.SELF_DESTRUCT,
    "destruct": Command.SELF_DESTRUCT,
}

MOVE_USAGE = "Usage: move QUADRANT_X QUADRANT_Y SECTOR_X SECTOR_Y (each 0-7)"


@dataclass
class TurnResult:
    """
    Result of processing one command.

    scan holds a ShortRangeScan, LongRangeScan or GalaxyChart when the
    command asked for one.
    """
    success: bool
    loop_state: LoopState
    command: Command | None = None

    messages: list[str] = field(default_factory=list)
    scan: Any | None = None

    errors: list[str] = field(default_factory=list)


class GameLoop:
    """
    The command loop driver for one session.

    Usage:
        loop = GameLoop(session)

        result = loop.process_command("move 3 4 0 7")
        result = loop.process_command("sr")
        render(result.scan)
    """

    def __init__(self, session: Session):
        self.session = session
        self.state = (
            LoopState.WAITING_COMMAND if session.is_active() else LoopState.GAME_OVER
        )

    def process_command(self, text: str) -> TurnResult:
        """Parse and execute one command."""
        from .manager import SessionState

        # The session may have been ended by its manager since the last turn
        if not self.session.is_active():
            self.state = LoopState.GAME_OVER

        if self.state is LoopState.GAME_OVER:
            return TurnResult(
                success=False,
                loop_state=self.state,
                errors=["Game is over"],
            )

        words = text.strip().lower().split()
        command = _COMMAND_WORDS.get(words[0]) if words else None
        if command is None:
            return TurnResult(
                success=False,
                loop_state=self.state,
                errors=[f"Unknown command: {text.strip()!r}"],
            )

        self.session.turn_number += 1
        logger.debug(f"Turn {self.session.turn_number}: {command.value}")
        galaxy = self.session.galaxy

        if command is Command.MOVE:
            return self._move(words[1:])

        if command is Command.SHORT_RANGE:
            return TurnResult(True, self.state, command, scan=short_range_scan(galaxy))

        if command is Command.LONG_RANGE:
            return TurnResult(True, self.state, command, scan=long_range_scan(galaxy))

        if command is Command.CHART:
            return TurnResult(True, self.state, command, scan=galaxy_chart(galaxy))

        # Self destruct
        self.state = LoopState.GAME_OVER
        self.session.state = SessionState.GAME_OVER
        return TurnResult(
            success=True,
            loop_state=self.state,
            command=command,
            messages=["SHIP EXPLODED - GAME OVER"],
        )

    def _move(self, args: list[str]) -> TurnResult:
        if len(args) != 4:
            return TurnResult(False, self.state, Command.MOVE, errors=[MOVE_USAGE])
        try:
            quadrant_x, quadrant_y, sector_x, sector_y = (int(a) for a in args)
        except ValueError:
            return TurnResult(False, self.state, Command.MOVE, errors=[MOVE_USAGE])

        try:
            ship = self.session.galaxy.move_ship(quadrant_x, quadrant_y, sector_x, sector_y)
        except GalaxyError as e:
            return TurnResult(False, self.state, Command.MOVE, errors=[str(e)])

        messages = [
            f"Moving To: {ship.quadrant_x}:{ship.quadrant_y}, {ship.sector_x}:{ship.sector_y}"
        ]
        if ship.sector != (sector_x, sector_y):
            messages.append(
                f"Sector {sector_x}:{sector_y} was occupied; "
                f"arrived at {ship.sector_x}:{ship.sector_y}"
            )
        return TurnResult(True, self.state, Command.MOVE, messages=messages)
