"""Game session commands and the status messages they return."""

from __future__ import annotations

from conftest import DATA_DIR, make_board
from tiltpuzzle.backend.engine.gameplay import ILLEGAL_MOVE, TiltGame
from tiltpuzzle.backend.engine.gamesolver import Solver
from tiltpuzzle.backend.models.board import Direction


def test_tilt_to_goal() -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-1.txt")
    assert game.tilt(Direction.WEST) == "Congratulations!"
    assert game.is_won
    assert game.moves == 1


def test_ordinary_tilt_has_empty_status() -> None:
    game = TiltGame(make_board("O G .", ". . .", ". . ."))
    assert game.tilt(Direction.EAST) == ""
    assert game.board == make_board("O . G", ". . .", ". . .")
    assert not game.is_won


def test_illegal_tilt_leaves_board_unchanged() -> None:
    start = make_board("O B .", ". . .", ". . G")
    game = TiltGame(start)
    assert game.tilt(Direction.WEST) == ILLEGAL_MOVE
    assert game.board == start
    assert game.moves == 0


def test_hint_walks_to_solution() -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-2.txt")
    assert game.hint() == "Next step!"
    assert game.hint() == "Next step!"
    assert game.is_won
    assert game.hint() == "Already solved!"
    assert game.moves == 2


def test_hint_on_unsolvable_board() -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-3.txt")
    before = game.board
    assert game.hint() == "No solution!"
    assert game.board == before


def test_reset_restores_loaded_board() -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-1.txt")
    start = game.board
    game.tilt(Direction.SOUTH)
    assert game.reset() == "Puzzle reset!"
    assert game.board == start
    assert game.moves == 0


def test_load_replaces_puzzle(write_board) -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-1.txt")
    path = write_board("small.txt", "G O", ". .")
    assert game.load(path) == "Loaded: small.txt"
    assert game.board == make_board("G O", ". .")
    assert game.source == path


def test_failed_load_keeps_current_puzzle(tmp_path, write_board) -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-1.txt")
    start = game.board
    assert game.load(tmp_path / "nope.txt") == "Failed to load: nope.txt"
    bad = write_board("bad.txt", "G X", ". .")
    assert game.load(bad) == "Failed to load: bad.txt"
    assert game.board == start


def test_load_of_non_utf8_file_keeps_current_puzzle(tmp_path) -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-1.txt")
    start = game.board
    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"2\n\xff\xfe .\n. .\n")
    assert game.load(binary) == "Failed to load: binary.txt"
    assert game.board == start
    assert game.source == DATA_DIR / "tilt-1.txt"


def test_hint_follows_solver_hint() -> None:
    game = TiltGame.from_file(DATA_DIR / "tilt-2.txt")
    expected = Solver.hint(game.board)
    assert game.hint() == "Next step!"
    assert game.board == expected
    assert game.moves == 1
