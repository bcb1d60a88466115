"""Rich terminal frontend: a line-command interface to a tilt game.

Commands are read one line at a time, applied to a ``TiltGame`` and the
returned status is printed together with the board.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import rich.box
from rich.console import Console
from rich.table import Table

from tiltpuzzle.backend.engine.gameplay import TiltGame
from tiltpuzzle.backend.models.board import Board, Direction, Piece

HELP = "\n".join(
    [
        "h(int)             -- hint next move",
        "l(oad) filename    -- load new puzzle file",
        "t(ilt) {N|S|E|W}   -- tilt the board in the given direction",
        "q(uit)             -- quit the game",
        "r(eset)            -- reset the current game",
    ]
)

_STYLES: dict[Piece, str] = {
    Piece.SLIDER_GREEN: "[bold green]G[/bold green]",
    Piece.SLIDER_BLUE: "[bold blue]B[/bold blue]",
    Piece.BLOCKER: "[bold white]*[/bold white]",
    Piece.HOLE: "[bold red]O[/bold red]",
    Piece.EMPTY: "[dim]·[/dim]",
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the tilt grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.dimensions):
        table.add_column(width=1, justify="center")
    for row in board.cells:
        table.add_row(*(_STYLES[piece] for piece in row))
    return table


# -- command handling ---------------------------------------------------------


def handle_command(game: TiltGame, line: str, data_dir: Path) -> str | None:
    """Apply one command line to *game*.

    Returns the status to show, or ``None`` when the user asked to quit.
    """
    parts = line.split()
    if not parts or len(parts) > 2:
        return HELP

    command, *args = parts
    match command.lower():
        case "q" | "quit":
            return None
        case "h" | "hint":
            return game.hint()
        case "r" | "reset":
            return game.reset()
        case "t" | "tilt" if args:
            try:
                direction = Direction.from_string(args[0])
            except ValueError:
                return HELP
            return game.tilt(direction)
        case "l" | "load" if args:
            return game.load(resolve_board_path(args[0], data_dir))
        case _:
            return HELP


def resolve_board_path(name: str, data_dir: Path) -> Path:
    """Use *name* as given if it exists, else look for it in *data_dir*."""
    path = Path(name)
    if path.exists() or path.is_absolute():
        return path
    return data_dir / name


# -- game loop ----------------------------------------------------------------


def _show(console: Console, game: TiltGame, status: str) -> None:
    if status:
        console.print(status, markup=False)
    console.print(render_board(game.board))


def run(
    game: TiltGame,
    data_dir: Path,
    console: Console | None = None,
    commands: Iterable[str] | None = None,
) -> None:
    """Play *game* until the user quits or input runs out.

    *commands* replaces interactive input, one command per item.
    """
    console = console or Console()
    _show(console, game, "")
    console.print(HELP, markup=False)

    lines = iter(commands) if commands is not None else None
    while True:
        try:
            line = next(lines) if lines is not None else console.input("> ")
        except (StopIteration, EOFError):
            return
        status = handle_command(game, line, data_dir)
        if status is None:
            return
        _show(console, game, status)
