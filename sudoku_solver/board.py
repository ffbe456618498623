"""Board type and helpers shared by the loader, printer and solver."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import FormatError

Board = List[List[int]]

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = range(1, SIZE + 1)


def copy_board(board: Sequence[Sequence[int]]) -> Board:
    return [list(row) for row in board]


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left coordinate of the 3x3 box holding (row, col)."""
    return row - row % BOX, col - col % BOX


def empty_cells(board: Board) -> int:
    return sum(1 for row in board for value in row if value == EMPTY)


def _units() -> List[List[Tuple[int, int]]]:
    rows = [[(r, c) for c in range(SIZE)] for r in range(SIZE)]
    cols = [[(r, c) for r in range(SIZE)] for c in range(SIZE)]
    boxes = [
        [(br + r, bc + c) for r in range(BOX) for c in range(BOX)]
        for br in range(0, SIZE, BOX)
        for bc in range(0, SIZE, BOX)
    ]
    return rows + cols + boxes


UNITS = _units()


def check_board(board: Board) -> None:
    """Raise FormatError unless board is 9x9, in range and free of clashes."""
    if len(board) != SIZE:
        raise FormatError(f"expected {SIZE} rows, got {len(board)}")
    for idx, row in enumerate(board, start=1):
        if len(row) != SIZE:
            raise FormatError(f"expected {SIZE} cells, got {len(row)}", line=idx)
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int) or not EMPTY <= value <= SIZE:
                raise FormatError(f"cell value {value!r} out of range", line=idx)
    for unit in UNITS:
        seen: set[int] = set()
        for r, c in unit:
            value = board[r][c]
            if value == EMPTY:
                continue
            if value in seen:
                raise FormatError(f"duplicate {value} in the unit containing ({r}, {c})")
            seen.add(value)


def is_solved_board(board: Board) -> bool:
    """True when every row, column and box holds 1-9 exactly once."""
    expected = set(DIGITS)
    for unit in UNITS:
        if {board[r][c] for r, c in unit} != expected:
            return False
    return True


__all__ = [
    "Board",
    "SIZE",
    "BOX",
    "EMPTY",
    "DIGITS",
    "UNITS",
    "copy_board",
    "box_origin",
    "empty_cells",
    "check_board",
    "is_solved_board",
]
