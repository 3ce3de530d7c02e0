"""
Tests for the command-line interface and text rendering.
"""

import json
import logging

import pytest

from .. import cli
from ..cli import log_level, main, render_galaxy_chart, render_long_range, render_short_range
from ..engine_core.entity import EntityKind
from ..engine_core.scan import galaxy_chart, long_range_scan, short_range_scan


class TestRendering:

    def test_short_range(self, ship_galaxy):
        ship_galaxy.place_entity(EntityKind.STAR, 3, 3, 0, 0)
        ship_galaxy.place_entity(EntityKind.HOSTILE, 3, 3, 7, 0)

        text = render_short_range(short_range_scan(ship_galaxy))
        lines = text.splitlines()

        assert lines[0] == "Quadrant: 3,3 Sector: 4,4"
        assert lines[2] == "0  * . . . . . . K"
        assert lines[6] == "4  . . . . E . . ."
        assert "Condition: Red" in lines

    def test_long_range(self, ship_galaxy):
        ship_galaxy.move_ship(0, 0, 0, 0)
        ship_galaxy.place_entity(EntityKind.STAR, 1, 0, 0, 0)

        text = render_long_range(long_range_scan(ship_galaxy))

        assert text.splitlines() == [
            "000 000 000",
            "000 000 100",
            "000 000 000",
        ]

    def test_galaxy_chart_marks_ship(self, ship_galaxy):
        text = render_galaxy_chart(galaxy_chart(ship_galaxy))
        lines = text.splitlines()

        assert "000*" in lines[3]
        assert lines[-2] == "* - Current Position"
        assert lines[-1] == "Condition: Green"


class TestMain:

    def test_no_command_exits(self, capsys):
        with pytest.raises(SystemExit):
            main([])

    def test_chart(self, capsys):
        main(["chart", "--seed", "4"])
        out = capsys.readouterr().out
        assert "* - Current Position" in out

    def test_snapshot_to_file(self, tmp_path, capsys):
        path = tmp_path / "galaxy.json"

        main(["snapshot", "--seed", "4", "-o", str(path)])

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert len(data["entities"]) == 290

    def test_play_until_destruct(self, monkeypatch, capsys):
        commands = iter(["sr", "move 0 0 0 0", "9"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

        main(["play", "--seed", "11"])

        out = capsys.readouterr().out
        assert "Condition:" in out
        assert "Moving To: 0:0" in out
        assert "SHIP EXPLODED - GAME OVER" in out
        assert "Turns played: 3" in out

    def test_play_quit(self, monkeypatch, capsys):
        commands = iter(["lr", "bogus", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

        main(["play", "--seed", "11"])

        out = capsys.readouterr().out
        assert "Error: Unknown command" in out
        assert "Turns played: 1" in out

    def test_unknown_log_level_still_runs(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "STARMAP_LOG_LEVEL", "chatty")

        main(["chart", "--seed", "4"])

        assert "* - Current Position" in capsys.readouterr().out


class TestLogLevel:

    @pytest.mark.parametrize("name, level", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" Error ", logging.ERROR),
        ("chatty", logging.WARNING),
        ("basic_format", logging.WARNING),
        ("", logging.WARNING),
    ])
    def test_names(self, name, level):
        assert log_level(name) == level
