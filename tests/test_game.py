import io

import pytest

from tilequest.game import (
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_S,
    KEY_W,
    Direction,
    Game,
    Outcome,
    direction_for_key,
)
from tilequest.mapfile import MapError

SIMPLE = ["11111", "1PCE1", "11111"]
EXIT_FIRST = ["111111", "1PEC01", "111111"]


def _game(rows):
    game = Game.from_rows(rows)
    game.output = io.StringIO()
    return game


def test_direction_for_key():
    assert direction_for_key(KEY_W) is Direction.UP
    assert direction_for_key(KEY_A) is Direction.LEFT
    assert direction_for_key(KEY_S) is Direction.DOWN
    assert direction_for_key(KEY_D) is Direction.RIGHT
    assert direction_for_key(KEY_ESC) is None


def test_from_rows_finds_player_and_collectibles():
    game = _game(SIMPLE)
    assert game.tile_at(*game.player) == "P"
    assert game.collectibles == "".join(SIMPLE).count("C")
    assert (game.width, game.height) == (len(SIMPLE[0]), len(SIMPLE))
    assert game.moves == 0


def test_from_rows_without_player():
    with pytest.raises(MapError):
        Game.from_rows(["111", "1C1", "111"])


def test_tile_at_out_of_range():
    game = _game(SIMPLE)
    with pytest.raises(IndexError):
        game.tile_at(len(SIMPLE[0]), 0)
    with pytest.raises(IndexError):
        game.tile_at(-1, 0)


def test_blocked_move_changes_nothing():
    game = _game(SIMPLE)
    start = game.player
    assert game.move(Direction.UP) is Outcome.BLOCKED
    assert game.player == start
    assert game.moves == 0
    assert game.output.getvalue() == ""


def test_collect_then_win():
    game = _game(SIMPLE)
    x, y = game.player
    assert game.move(Direction.RIGHT) is Outcome.MOVED
    assert game.player == (x + 1, y)
    assert game.collectibles == 0
    assert game.tile_at(x + 1, y) == "0"
    assert game.output.getvalue() == "\rMover: 0"
    assert game.press(KEY_D) is Outcome.WON
    assert game.finished is True
    assert Outcome.WON.message == "Win"
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_exit_needs_all_collectibles():
    game = _game(EXIT_FIRST)
    assert game.move(Direction.RIGHT) is Outcome.MOVED
    assert game.tile_at(*game.player) == "E"
    assert game.finished is False
    assert game.move(Direction.RIGHT) is Outcome.MOVED
    assert game.collectibles == 0
    assert game.move(Direction.LEFT) is Outcome.WON
    assert game.moves == 3


def test_escape_quits():
    game = _game(SIMPLE)
    outcome = game.press(KEY_ESC)
    assert outcome is Outcome.QUIT
    assert outcome.message == "Exit_Game"
    assert game.finished is True


def test_unknown_key_ignored():
    game = _game(SIMPLE)
    start = game.player
    assert game.press(0) is Outcome.IGNORED
    assert game.player == start


def test_rows_reflect_collection():
    game = _game(SIMPLE)
    game.move(Direction.RIGHT)
    assert "C" not in "".join(game.rows)
    assert SIMPLE[1].count("C") == 1


def test_outcome_ends_game():
    game = _game(SIMPLE)
    moved = game.move(Direction.RIGHT)
    assert moved is Outcome.MOVED
    assert moved.ends_game is False
    assert game.finished is False
    won = game.press(KEY_D)
    assert won is Outcome.WON
    assert won.ends_game is True
    assert game.finished is True
    assert Outcome.CLOSED.message == "Exit"