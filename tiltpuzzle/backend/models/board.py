"""Board model for the tilt puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import assert_never

from tiltpuzzle.backend.models.configuration import Configuration


class Piece(StrEnum):
    """Cell contents.  The value is the character used in board files."""

    SLIDER_GREEN = "G"
    SLIDER_BLUE = "B"
    BLOCKER = "*"
    HOLE = "O"
    EMPTY = "."

    @property
    def is_slider(self) -> bool:
        return self in (Piece.SLIDER_GREEN, Piece.SLIDER_BLUE)


class Direction(StrEnum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @classmethod
    def from_string(cls, text: str) -> Direction:
        """Parse ``n``/``north``, ``e``/``east`` ... in any case."""
        key = text.strip().lower()
        for direction in cls:
            if key in (direction.value, direction.value[0]):
                return direction
        raise ValueError(f"Unknown direction {text!r}; expected N, E, S or W.")

    @property
    def offset(self) -> tuple[int, int]:
        """Row/column step of one cell of travel."""
        match self:
            case Direction.NORTH:
                return (-1, 0)
            case Direction.EAST:
                return (0, 1)
            case Direction.SOUTH:
                return (1, 0)
            case Direction.WEST:
                return (0, -1)
            case _:
                assert_never(self)

    def visit_key(self, coord: tuple[int, int]) -> int:
        """Sort key placing the cell nearest the destination edge first."""
        r, c = coord
        match self:
            case Direction.NORTH:
                return r
            case Direction.EAST:
                return -c
            case Direction.SOUTH:
                return -r
            case Direction.WEST:
                return c
            case _:
                assert_never(self)


@dataclass(frozen=True)
class Board(Configuration):
    """An immutable tilt board.

    ``cells`` is a square grid of pieces stored as nested tuples so the
    board can be hashed structurally.  ``total_blue`` is the number of
    blue sliders the puzzle started with; it is carried unchanged into
    every derived board and takes no part in equality.
    """

    cells: tuple[tuple[Piece, ...], ...]
    total_blue: int = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[Piece]]) -> Board:
        """Create a starting board, counting its blue sliders.

        Example::

            Board.from_rows([[Piece.HOLE, Piece.SLIDER_GREEN], [Piece.EMPTY] * 2])
        """
        size = len(rows)
        if size == 0:
            raise ValueError("A board needs at least one row.")
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Expected {size} cells in row {r} of a {size}×{size} board, "
                    f"got {len(row)}."
                )
        cells = tuple(tuple(row) for row in rows)
        total_blue = sum(row.count(Piece.SLIDER_BLUE) for row in cells)
        return cls(cells=cells, total_blue=total_blue)

    # -- queries --------------------------------------------------------------

    @property
    def dimensions(self) -> int:
        return len(self.cells)

    def get_piece(self, row: int, col: int) -> Piece:
        return self.cells[row][col]

    def count(self, piece: Piece) -> int:
        return sum(row.count(piece) for row in self.cells)

    def count_blue(self) -> int:
        return self.count(Piece.SLIDER_BLUE)

    def is_goal(self) -> bool:
        """No green slider left and every blue slider still on the board."""
        if self.count(Piece.SLIDER_GREEN):
            return False
        return self.count_blue() == self.total_blue

    def is_valid(self) -> bool:
        return self.count_blue() == self.total_blue

    # -- transitions ----------------------------------------------------------

    def tilt(self, direction: Direction) -> Board:
        """Return the board after sliding every slider toward *direction*.

        Sliders nearest the destination edge are placed first so the ones
        behind them come to rest against them.  A slider whose way is
        stopped by a hole drops into it and is removed.
        """
        n = self.dimensions
        dr, dc = direction.offset

        sliders = [
            (r, c)
            for r in range(n)
            for c in range(n)
            if self.cells[r][c].is_slider
        ]
        sliders.sort(key=direction.visit_key)

        grid = [
            [Piece.EMPTY if piece.is_slider else piece for piece in row]
            for row in self.cells
        ]

        for r, c in sliders:
            piece = self.cells[r][c]
            absorbed = False
            while True:
                nr, nc = r + dr, c + dc
                if not (0 <= nr < n and 0 <= nc < n):
                    break
                ahead = grid[nr][nc]
                if ahead is Piece.EMPTY:
                    r, c = nr, nc
                    continue
                absorbed = ahead is Piece.HOLE
                break
            if not absorbed:
                grid[r][c] = piece

        return Board(
            cells=tuple(tuple(row) for row in grid),
            total_blue=self.total_blue,
        )

    def successors(self) -> list[Configuration]:
        """One tilt per direction, dropping tilts that lose a blue slider.

        A tilt that moves nothing is still offered; the solver's
        deduplication discards it.
        """
        result: list[Configuration] = []
        for direction in Direction:
            candidate = self.tilt(direction)
            if candidate.is_valid():
                result.append(candidate)
        return result

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        return "\n".join(" ".join(piece.value for piece in row) for row in self.cells)
