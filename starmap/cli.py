"""
Starmap CLI - Play from a terminal.

Usage:
    starmap play [--seed N]                 Interactive game
    starmap chart [--seed N]                Print the galaxy chart
    starmap snapshot [--seed N] [-o FILE]   Write a galaxy snapshot as JSON
"""

import argparse
import logging
import os
import sys

from .engine_core.config import GalaxyConfig, GALAXY_SIZE, QUADRANT_SIZE
from .engine_core.scan import GalaxyChart, LongRangeScan, ShortRangeScan

STARMAP_LOG_LEVEL = os.getenv("STARMAP_LOG_LEVEL", "WARNING")

HELP_TEXT = """Commands:
  1 | move QX QY SX SY   Move the ship
  2 | sr                 Short range scan
  3 | lr                 Long range scan
  4 | chart              Galaxy chart
  9 | destruct           Self destruct
  q | quit               Leave the game"""


def log_level(name: str) -> int:
    """Numeric level for a level name; unknown names fall back to WARNING."""
    level = getattr(logging, name.strip().upper(), None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Starmap - Turn-based space exploration",
        prog="starmap",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="Start an interactive game")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    chart_parser = subparsers.add_parser("chart", help="Print the galaxy chart")
    chart_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    snapshot_parser = subparsers.add_parser("snapshot", help="Write a galaxy snapshot")
    snapshot_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    snapshot_parser.add_argument("--output", "-o", help="Output file (default: stdout)")

    args = parser.parse_args(argv)

    logging.basicConfig(level=log_level(STARMAP_LOG_LEVEL))

    if args.command == "play":
        cmd_play(args)
    elif args.command == "chart":
        cmd_chart(args)
    elif args.command == "snapshot":
        cmd_snapshot(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Run an interactive game on stdin/stdout."""
    from .session import SessionManager, GameLoop, LoopState

    manager = SessionManager(config=GalaxyConfig.from_env())
    session = manager.create_session(random_seed=args.seed)
    loop = GameLoop(session)

    ship = session.galaxy.ship
    print(f"Ship in quadrant {ship.quadrant_x},{ship.quadrant_y} sector {ship.sector_x},{ship.sector_y}")
    print(HELP_TEXT)

    while loop.state is not LoopState.GAME_OVER:
        try:
            text = input("COMMAND> ")
        except EOFError:
            break
        if text.strip().lower() in ("q", "quit"):
            break
        if not text.strip():
            continue

        result = loop.process_command(text)
        for message in result.messages:
            print(message)
        for error in result.errors:
            print(f"Error: {error}")
        if result.scan is not None:
            print(render_scan(result.scan))

    reason = "completed" if loop.state is LoopState.GAME_OVER else "quit"
    manager.end_session(session.session_id, reason=reason)
    print(f"Turns played: {session.turn_number}")


def cmd_chart(args):
    """Print the galaxy chart for a new galaxy."""
    from .session import SessionManager
    from .engine_core.scan import galaxy_chart

    session = SessionManager(config=GalaxyConfig.from_env()).create_session(random_seed=args.seed)
    print(render_galaxy_chart(galaxy_chart(session.galaxy)))


def cmd_snapshot(args):
    """Write a JSON snapshot of a new galaxy."""
    from .session import SessionManager

    session = SessionManager(config=GalaxyConfig.from_env()).create_session(random_seed=args.seed)
    text = session.snapshot()

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Snapshot written to {args.output}")
    else:
        print(text)


# =============================================================================
# Text rendering
# =============================================================================

def render_scan(scan) -> str:
    if isinstance(scan, ShortRangeScan):
        return render_short_range(scan)
    if isinstance(scan, LongRangeScan):
        return render_long_range(scan)
    if isinstance(scan, GalaxyChart):
        return render_galaxy_chart(scan)
    raise TypeError(f"Cannot render {type(scan).__name__}")


def render_short_range(scan: ShortRangeScan) -> str:
    """Sector grid with x across and y down, then condition and neighbours."""
    lines = [f"Quadrant: {scan.quadrant_x},{scan.quadrant_y} Sector: {scan.ship_sector_x},{scan.ship_sector_y}"]
    lines.append("   " + " ".join(str(x) for x in range(QUADRANT_SIZE)))
    for sector_y in range(QUADRANT_SIZE):
        row = " ".join(scan.glyph_at(sector_x, sector_y) for sector_x in range(QUADRANT_SIZE))
        lines.append(f"{sector_y}  {row}")
    lines.append(f"Condition: {scan.condition.value.capitalize()}")
    if scan.neighbourhood is not None:
        lines.append(render_long_range(scan.neighbourhood))
    return "\n".join(lines)


def render_long_range(scan: LongRangeScan) -> str:
    lines = []
    for dy in (-1, 0, 1):
        lines.append(" ".join(scan.summary_at(dx, dy) for dx in (-1, 0, 1)))
    return "\n".join(lines)


def render_galaxy_chart(chart: GalaxyChart) -> str:
    """All quadrant summaries; the ship's quadrant is marked with '*'."""
    lines = []
    for quadrant_y in range(GALAXY_SIZE):
        cells = []
        for quadrant_x in range(GALAXY_SIZE):
            summary = chart.cells[quadrant_x][quadrant_y]
            if (quadrant_x, quadrant_y) == (chart.ship_quadrant_x, chart.ship_quadrant_y):
                summary += "*"
            cells.append(f"{summary:<4}")
        lines.append(" ".join(cells).rstrip())
    lines.append("* - Current Position")
    lines.append(f"Condition: {chart.condition.value.capitalize()}")
    return "\n".join(lines)


if __name__ == "__main__":
    main()
