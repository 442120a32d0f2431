"""Tests for the interactive REPL commands."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from grid_sim.repl import GridREPL


def test_turn_with_bad_count_keeps_session(capsys):
    repl = GridREPL()
    assert not repl.onecmd("turn abc")
    assert "Usage: turn [count]" in capsys.readouterr().out
    assert repl.game.turn == 0

    repl.onecmd("turn 2")
    assert repl.game.turn == 2


def test_build_negative_slot_reports_error(capsys):
    repl = GridREPL()
    money = repl.game.money.money
    repl.onecmd("build -1 gas")
    assert "Error:" in capsys.readouterr().out
    assert repl.game.money.money == money


def test_quit_stops_loop():
    assert GridREPL().onecmd("quit")
