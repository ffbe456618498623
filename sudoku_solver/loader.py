"""Read puzzles from text files and strings."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from loguru import logger

from .board import SIZE, Board
from .errors import FormatError, PuzzleNotFoundError

BLANK_MARKS = {".", "_", "-"}


def parse_rows(lines: Iterable[str]) -> Board:
    """Build a board from exactly nine lines of nine digits.

    A single trailing newline after the last row is fine; anything after it,
    blank lines included, is rejected.
    """
    rows = list(lines)
    if rows and rows[-1] == "":
        rows.pop()
    board: Board = []
    for idx, raw in enumerate(rows, start=1):
        if idx > SIZE:
            raise FormatError(f"unexpected content after row {SIZE}", line=idx)
        text = raw[:-1] if raw.endswith("\n") else raw
        text = text[:-1] if text.endswith("\r") else text
        if len(text) != SIZE:
            raise FormatError(f"expected {SIZE} characters, got {len(text)}", line=idx)
        row = []
        for ch in text:
            # ASCII digits only
            if ch not in "0123456789":
                raise FormatError(f"invalid character {ch!r}", line=idx)
            row.append(int(ch))
        board.append(row)
    if len(board) != SIZE:
        raise FormatError(f"expected {SIZE} rows, got {len(board)}")
    return board


def load_puzzle(path: Union[str, Path]) -> Board:
    """Read and parse a puzzle file."""
    path = Path(path)
    logger.debug("Loading puzzle from {}", path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PuzzleNotFoundError(f"File {path} not found.") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleNotFoundError(f"File {path} could not be read: {exc}") from exc
    return parse_rows(text.split("\n"))


def parse_puzzle(puzzle: str) -> Board:
    """Convert a flat string of 81 cells into a 9x9 board."""
    digits: List[int] = []
    for ch in puzzle:
        if ch in "0123456789":
            digits.append(int(ch))
        elif ch in BLANK_MARKS:
            digits.append(0)
    if len(digits) != SIZE * SIZE:
        raise FormatError(f"Sudoku puzzle must yield {SIZE * SIZE} cells, got {len(digits)}")
    return [digits[i : i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]


def serialize_board(board: Board) -> str:
    """Return board as a single string for easy comparison."""
    return "".join(str(cell) for row in board for cell in row)


__all__ = ["parse_rows", "load_puzzle", "parse_puzzle", "serialize_board"]
