"""Tilt puzzle solver.

Usage::

    tiltpuzzle tilt data/tilt/tilt-1.txt     # solve a board with BFS
    tiltpuzzle tilt board.txt --dfs -m 8     # depth-limited DFS instead
    tiltpuzzle clock 12 2 7                  # clock puzzle
    tiltpuzzle water 4 3 5                   # water buckets puzzle
    tiltpuzzle play tilt-2.txt               # interactive game
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from tiltpuzzle.backend.engine.gameloader import BoardFormatError, load_board
from tiltpuzzle.backend.engine.gameplay import TiltGame
from tiltpuzzle.backend.engine.gamesolver import SearchResult, Solver
from tiltpuzzle.backend.models import ClockConfig, Configuration, WaterConfig
from tiltpuzzle.frontend.cli.app import render_board, resolve_board_path
from tiltpuzzle.frontend.cli.app import run as run_ptui
from tiltpuzzle.log import configure_logging, get_logger

ROOT = Path(__file__).resolve().parent  # tiltpuzzle/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data" / "tilt"

logger = get_logger(__name__)
console = Console()

app = typer.Typer(add_completion=False, help="Solve tilt, clock and water puzzles.")


# -- helpers ------------------------------------------------------------------


def _print_counts(result: SearchResult) -> None:
    console.print(f"Total configs: {result.total_expansions}")
    console.print(f"Unique configs: {result.unique_configurations}")


def _print_steps(path: Sequence[Configuration], inline: bool) -> None:
    for i, config in enumerate(path):
        if inline:
            console.print(f"Step {i}: {config}", markup=False)
        else:
            console.print(f"Step {i}:")
            console.print(str(config), markup=False)


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]{message}[/red]", soft_wrap=True)
    return typer.Exit(code=1)


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        envvar="TILT_DATA_DIR",
        help="Directory searched for board files given by name.",
    ),
) -> None:
    """Solve tilt, clock and water puzzles."""
    configure_logging(verbose)
    ctx.obj = data_dir


@app.command()
def tilt(
    file: Path = typer.Argument(..., help="Board file to solve."),
    dfs: bool = typer.Option(
        False, "--dfs",
        help="Use depth-first search instead of breadth-first.",
    ),
    max_depth: int = typer.Option(
        8, "-m", "--max-depth",
        min=0,
        help="Deepest tilt sequence tried by --dfs.",
    ),
) -> None:
    """Solve a tilt board and print every step."""
    try:
        board = load_board(file)
    except (OSError, BoardFormatError) as exc:
        raise _fail(f"Could not load {file}: {exc}") from None

    console.print(f"File: {file.resolve()}")
    console.print(render_board(board))

    if dfs:
        goal = Solver.search_dfs(board, max_depth=max_depth)
        if goal is None:
            console.print("No solution!")
        else:
            console.print("Solution:")
            console.print(str(goal), markup=False)
        return

    result = Solver.search_bfs(board)
    _print_counts(result)
    if result.path is None:
        console.print("No solution!")
    elif len(result.path) == 1:
        console.print("Already solved!")
    else:
        _print_steps(result.path, inline=False)


@app.command()
def clock(
    hours: int = typer.Argument(..., help="Hours on the clock face."),
    start: int = typer.Argument(..., help="Starting hour."),
    end: int = typer.Argument(..., help="Hour to reach."),
) -> None:
    """Step a clock hand from START to END."""
    if hours < 0 or start < 0 or end < 0:
        raise _fail("Hours, start, and end must be non-negative.")

    console.print(f"Hours: {hours}, Start: {start}, End: {end}")
    result = Solver.search_bfs(ClockConfig(current=start, hours=hours, end=end))
    _print_counts(result)
    if result.path is None:
        console.print("No solution found.")
    else:
        _print_steps(result.path, inline=True)


@app.command()
def water(
    amount: int = typer.Argument(..., help="Amount to measure."),
    capacities: list[int] = typer.Argument(..., help="Bucket capacities."),
) -> None:
    """Measure AMOUNT using buckets of the given CAPACITIES."""
    if amount < 0 or any(cap < 0 for cap in capacities):
        raise _fail("Amount and capacities must be non-negative.")

    console.print(f"Amount: {amount}, Buckets: {list(capacities)}", markup=False)
    result = Solver.search_bfs(WaterConfig.empty(tuple(capacities), amount))
    _print_counts(result)
    if result.path is None:
        console.print("No solution found.")
    else:
        _print_steps(result.path, inline=True)


@app.command()
def play(
    ctx: typer.Context,
    file: Optional[str] = typer.Argument(
        None, help="Board file, as a path or a name inside the data directory.",
    ),
) -> None:
    """Play a tilt board interactively."""
    data_dir: Path = ctx.obj
    name = file or "tilt-1.txt"
    path = resolve_board_path(name, data_dir)
    try:
        game = TiltGame.from_file(path)
    except (OSError, BoardFormatError) as exc:
        raise _fail(f"Invalid board file, please load a valid file! ({exc})") from None

    logger.debug("game started", path=str(path))
    run_ptui(game, data_dir, console=console)


if __name__ == "__main__":
    app()
