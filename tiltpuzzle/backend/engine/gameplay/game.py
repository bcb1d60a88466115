"""Core gameplay logic: applies tilts, hints and resets to a loaded board."""

from __future__ import annotations

from pathlib import Path

from tiltpuzzle.backend.engine.gameloader import BoardFormatError, load_board
from tiltpuzzle.backend.engine.gamesolver import Solver
from tiltpuzzle.backend.models.board import Board, Direction
from tiltpuzzle.log import get_logger

logger = get_logger(__name__)

ILLEGAL_MOVE = "Illegal move. A blue slider will fall through the hole!"


class TiltGame:
    """Orchestrates a single game session.

    Every command returns the status message a view should show; the
    session never calls back into its views.
    """

    def __init__(self, board: Board, source: Path | None = None) -> None:
        self.source = source
        self.initial = board
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_file(cls, path: Path) -> TiltGame:
        """Create a game session from a board file."""
        return cls(load_board(path), source=Path(path))

    # -- commands -------------------------------------------------------------

    def tilt(self, direction: Direction) -> str:
        """Tilt the board, refusing tilts that drop a blue slider."""
        candidate = self.board.tilt(direction)
        if not candidate.is_valid():
            logger.info("illegal tilt refused", direction=direction.value)
            return ILLEGAL_MOVE
        self.board = candidate
        self.moves += 1
        return "Congratulations!" if self.board.is_goal() else ""

    def hint(self) -> str:
        """Advance one step along a shortest solution."""
        if self.board.is_goal():
            return "Already solved!"
        step = Solver.hint(self.board)
        if step is None:
            return "No solution!"
        self.board = step  # type: ignore[assignment]
        self.moves += 1
        return "Next step!"

    def reset(self) -> str:
        self.board = self.initial
        self.moves = 0
        return "Puzzle reset!"

    def load(self, path: Path) -> str:
        """Replace the puzzle with the board in *path*, keeping the old one on failure."""
        path = Path(path)
        try:
            board = load_board(path)
        except (OSError, BoardFormatError) as exc:
            logger.info("board load failed", path=str(path), error=str(exc))
            return f"Failed to load: {path.name}"
        self.source = path
        self.initial = board
        self.board = board
        self.moves = 0
        return f"Loaded: {path.name}"

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_goal()
