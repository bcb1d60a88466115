from __future__ import annotations

from pathlib import Path

import pytest

from tiltpuzzle.backend.engine.gameloader import parse_board
from tiltpuzzle.backend.models.board import Board

DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "tilt"


def make_board(*rows: str) -> Board:
    """Build a board from rows of cell codes, e.g. ``make_board("O G", ". .")``."""
    return parse_board("\n".join([str(len(rows)), *rows]))


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def write_board(tmp_path: Path):
    """Write rows of cell codes to a board file and return its path."""

    def _write(name: str, *rows: str) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([str(len(rows)), *rows]) + "\n")
        return path

    return _write
