"""Tests for the command-line interface."""

import sys

import pytest
from minmax_ai.cli.main import main, parse_board
from minmax_ai.core import Location, Player


def run_cli(monkeypatch, *argv) -> int:
    monkeypatch.setattr(sys, "argv", ["minmax-ai", *argv])
    with pytest.raises(SystemExit) as excinfo:
        main()
    return excinfo.value.code


def test_parse_board():
    board = parse_board("XX./OO./...", win_length=3)

    assert board.num_cols == 3
    assert board.num_rows == 3
    assert board.get(Location(1, 1)) is Player.O


def test_analyze(monkeypatch, capsys):
    code = run_cli(
        monkeypatch,
        "analyze",
        "--board", "XX./OO./...",
        "--player", "x",
        "--depth", "1",
        "--moves", "all",
        "--evaluator", "zero",
    )

    assert code == 0
    out = capsys.readouterr().out
    assert "Best move (2,0)" in out


def test_analyze_finished_game(monkeypatch, capsys):
    code = run_cli(monkeypatch, "analyze", "--board", "XXX/OO./...", "--player", "O")

    assert code == 0
    assert "Game is over" in capsys.readouterr().out


def test_no_command(monkeypatch):
    assert run_cli(monkeypatch) == 1
