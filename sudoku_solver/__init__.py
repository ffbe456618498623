"""9x9 Sudoku solver using backtracking and a most-constrained-cell heuristic."""

from loguru import logger

from .board import Board, check_board, is_solved_board
from .errors import FormatError, PuzzleError, PuzzleNotFoundError
from .loader import load_puzzle, parse_puzzle, parse_rows, serialize_board
from .printer import pretty_board, print_board
from .solver import (
    Move,
    Selection,
    SolveResult,
    Verdict,
    candidates,
    select_cell,
    solve,
    solve_puzzle,
    timed_solve,
)

__version__ = "0.1.0"

logger.disable(__name__)

__all__ = [
    "Board",
    "check_board",
    "is_solved_board",
    "FormatError",
    "PuzzleError",
    "PuzzleNotFoundError",
    "load_puzzle",
    "parse_puzzle",
    "parse_rows",
    "serialize_board",
    "pretty_board",
    "print_board",
    "Move",
    "Selection",
    "SolveResult",
    "Verdict",
    "candidates",
    "select_cell",
    "solve",
    "solve_puzzle",
    "timed_solve",
]
