"""Reads tilt boards from their text representation.

The format is a dimension line followed by that many rows of
whitespace-separated cell codes::

    3
    O G .
    . * .
    . B .
"""

from __future__ import annotations

from pathlib import Path

from tiltpuzzle.backend.models.board import Board, Piece
from tiltpuzzle.log import get_logger

logger = get_logger(__name__)


class BoardFormatError(ValueError):
    """The board text does not describe a square grid of known pieces."""


def parse_board(text: str) -> Board:
    """Build a starting board from *text*."""
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise BoardFormatError("Board text is empty.")

    try:
        size = int(lines[0])
    except ValueError:
        raise BoardFormatError(
            f"Line 1: expected the board dimension, got {lines[0]!r}."
        ) from None
    if size < 1:
        raise BoardFormatError(f"Line 1: dimension must be positive, got {size}.")

    if len(lines) - 1 < size:
        raise BoardFormatError(
            f"Expected {size} rows for a {size}×{size} board, got {len(lines) - 1}."
        )

    rows: list[list[Piece]] = []
    for lineno, line in enumerate(lines[1 : size + 1], start=2):
        codes = line.split()
        if len(codes) != size:
            raise BoardFormatError(
                f"Line {lineno}: expected {size} cells, got {len(codes)}."
            )
        row: list[Piece] = []
        for code in codes:
            try:
                row.append(Piece(code))
            except ValueError:
                raise BoardFormatError(
                    f"Line {lineno}: unknown cell code {code!r}."
                ) from None
        rows.append(row)

    return Board.from_rows(rows)


def load_board(path: Path) -> Board:
    """Read and parse the board file at *path*."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise BoardFormatError(f"{path}: not UTF-8 text.") from None
    board = parse_board(text)
    logger.debug(
        "board loaded",
        path=str(path),
        dimensions=board.dimensions,
        total_blue=board.total_blue,
    )
    return board
