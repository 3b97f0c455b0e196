"""
Tests for Settings validation and the command line front end.
"""

import dataclasses

import pytest

from wrapsnake import cli
from wrapsnake.config import Settings


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self):
        """Defaults describe a 32x24 board at 150ms per move."""
        settings = Settings().validate()
        assert (settings.grid_width, settings.grid_height) == (32, 24)
        assert settings.view_size == (320, 240)
        assert settings.window_size == (640, 480)
        assert settings.initial_move_ms == 150
        assert settings.min_move_ms == 10

    @pytest.mark.parametrize(
        "overrides",
        [
            {"grid_width": 0},
            {"grid_width": 1, "grid_height": 1},
            {"scale": 0},
            {"min_move_ms": 200},
            {"min_move_ms": 0},
            {"food_speedup_ms": -1},
            {"escalation_ms": 100},
        ],
    )
    def test_rejects_unplayable_values(self, overrides):
        """Values the game cannot run with raise ValueError."""
        with pytest.raises(ValueError):
            dataclasses.replace(Settings(), **overrides).validate()


class TestCli:
    """Tests for argument parsing."""

    def test_args_become_settings(self):
        """Command line options land in Settings."""
        ns = cli.build_parser().parse_args(["--width", "20", "--height", "10", "--seed", "3"])
        settings = cli.settings_from_args(ns)
        assert (settings.grid_width, settings.grid_height, settings.seed) == (20, 10, 3)
        assert settings.initial_move_ms == 150

    def test_bad_grid_exits_with_error(self, capsys):
        """An invalid board size is reported without opening a window."""
        assert cli.main(["--width", "0"]) == 2
        assert "error:" in capsys.readouterr().err
