"""Command line entry point: load a puzzle, solve it and show both boards."""

from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger

from .board import Board, check_board
from .errors import FormatError, PuzzleError
from .loader import load_puzzle, parse_puzzle
from .logging_setup import configure_logging
from .printer import print_board
from .solver import timed_solve

DEFAULT_PUZZLE = "puzzle0.dat"

EXIT_TOO_MANY_ARGS = 3
EXIT_LOAD_FAILED = 4
EXIT_DEFAULT_LOAD_FAILED = 5

app = typer.Typer(help="Solve a 9x9 Sudoku puzzle read from a text file.", add_completion=False)


def _read_board(source: Path) -> Board:
    board = load_puzzle(source)
    check_board(board)
    return board


def _fail(exc: PuzzleError, code: int) -> typer.Exit:
    if isinstance(exc, FormatError):
        typer.echo(f"Invalid puzzle format: {exc}", err=True)
    else:
        typer.echo(str(exc), err=True)
    return typer.Exit(code=code)


@app.command()
def main(
    files: Optional[List[Path]] = typer.Argument(
        None, help="Puzzle file: nine lines of nine digits, 0 for a blank cell."
    ),
    puzzle: Optional[str] = typer.Option(
        None, "--puzzle", "-p", help="Solve an 81-character puzzle string instead of a file."
    ),
    default_puzzle: Path = typer.Option(
        Path(DEFAULT_PUZZLE),
        "--default-puzzle",
        envvar="SUDOKU_DEFAULT_PUZZLE",
        help="Puzzle file used when no filename is given.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="SUDOKU_LOG_LEVEL", help="Log level for stderr output."
    ),
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")

    files = files or []
    if len(files) > 1 or (files and puzzle is not None):
        typer.echo("Usage: sudoku-solver [PUZZLE_FILE]  (at most one puzzle)", err=True)
        raise typer.Exit(code=EXIT_TOO_MANY_ARGS)

    if puzzle is not None:
        try:
            board = parse_puzzle(puzzle)
            check_board(board)
        except PuzzleError as exc:
            raise _fail(exc, EXIT_LOAD_FAILED)
    elif files:
        try:
            board = _read_board(files[0])
        except PuzzleError as exc:
            raise _fail(exc, EXIT_LOAD_FAILED)
    else:
        try:
            board = _read_board(default_puzzle)
        except PuzzleError as exc:
            raise _fail(exc, EXIT_DEFAULT_LOAD_FAILED)

    print_board(board, "Unsolved Puzzle")

    result = timed_solve(board)
    if not result.solved:
        logger.warning("Puzzle has no solution")

    typer.echo("\n")
    print_board(board, "Solved Puzzle" if result.solved else "No solution found")
    typer.echo(f"\nTime taken: {result.microseconds} microseconds.")


if __name__ == "__main__":
    app()
