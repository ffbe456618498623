"""Backtracking Sudoku solver with a most-constrained-cell heuristic."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .board import BOX, EMPTY, SIZE, Board, box_origin, check_board, empty_cells
from .loader import parse_puzzle


def candidates(board: Board, row: int, col: int) -> List[int]:
    """Return the values 1-9 not yet used in the row, column or box of (row, col).

    The cell is expected to be empty. The result is ascending; an empty list
    means the cell cannot be filled under the current assignments.
    """
    possible = [True] * (SIZE + 1)
    for c in range(SIZE):
        possible[board[row][c]] = False
    for r in range(SIZE):
        possible[board[r][col]] = False
    start_row, start_col = box_origin(row, col)
    for r in range(start_row, start_row + BOX):
        for c in range(start_col, start_col + BOX):
            possible[board[r][c]] = False
    return [value for value in range(1, SIZE + 1) if possible[value]]


@dataclass
class Move:
    """Branch point: a cell and the values still to try there."""

    row: int
    col: int
    candidates: List[int] = field(default_factory=list)


class Verdict(enum.Enum):
    SOLVED = "solved"
    DEAD_END = "dead_end"
    BRANCH = "branch"


@dataclass
class Selection:
    verdict: Verdict
    move: Optional[Move] = None


def select_cell(board: Board) -> Selection:
    """Pick the empty cell with the fewest candidates.

    Cells are scanned row by row; on ties the first one wins. A cell with no
    candidates ends the scan as a dead end and a cell with a single candidate
    is returned straight away.
    """
    best: Optional[Move] = None
    for row in range(SIZE):
        for col in range(SIZE):
            if board[row][col] != EMPTY:
                continue
            values = candidates(board, row, col)
            if not values:
                return Selection(Verdict.DEAD_END)
            if len(values) == 1:
                return Selection(Verdict.BRANCH, Move(row, col, values))
            if best is None or len(values) < len(best.candidates):
                best = Move(row, col, values)
    if best is None:
        return Selection(Verdict.SOLVED)
    return Selection(Verdict.BRANCH, best)


def solve(board: Board) -> bool:
    """Solve the puzzle in-place using backtracking.

    Returns True with the board filled in, or False with the board exactly as
    it was on entry.
    """
    selection = select_cell(board)
    if selection.verdict is Verdict.SOLVED:
        return True
    if selection.verdict is Verdict.DEAD_END:
        return False

    move = selection.move
    for value in move.candidates:
        board[move.row][move.col] = value
        if solve(board):
            return True
    board[move.row][move.col] = EMPTY
    return False


@dataclass
class SolveResult:
    solved: bool
    microseconds: int


def timed_solve(board: Board) -> SolveResult:
    """Run solve() on board and measure how long the search took."""
    logger.debug("Solving board with {} empty cell(s)", empty_cells(board))
    start = time.perf_counter()
    solved = solve(board)
    elapsed = int((time.perf_counter() - start) * 1_000_000)
    logger.debug("Search finished: solved={} in {} us", solved, elapsed)
    return SolveResult(solved=solved, microseconds=elapsed)


def solve_puzzle(puzzle: str) -> Optional[Board]:
    """Parse a flat puzzle string and return its solution, or None if there is none."""
    board = parse_puzzle(puzzle)
    check_board(board)
    if not timed_solve(board).solved:
        return None
    return board


__all__ = [
    "Move",
    "Verdict",
    "Selection",
    "SolveResult",
    "candidates",
    "select_cell",
    "solve",
    "timed_solve",
    "solve_puzzle",
]
