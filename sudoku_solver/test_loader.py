"""Tests for reading puzzles from files and strings."""

import pytest

from . import loader
from .errors import FormatError, PuzzleNotFoundError

ROWS = [
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
]
PUZZLE = "".join(ROWS)


def _write(tmp_path, text):
    path = tmp_path / "puzzle.dat"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_puzzle_reads_nine_rows(tmp_path):
    board = loader.load_puzzle(_write(tmp_path, "\n".join(ROWS)))
    assert loader.serialize_board(board) == PUZZLE


def test_load_puzzle_accepts_one_trailing_newline(tmp_path):
    board = loader.load_puzzle(_write(tmp_path, "\n".join(ROWS) + "\n"))
    assert board[0] == [5, 3, 0, 0, 7, 0, 0, 0, 0]


def test_load_puzzle_accepts_crlf(tmp_path):
    path = tmp_path / "puzzle.dat"
    path.write_bytes(("\r\n".join(ROWS) + "\r\n").encode("ascii"))
    assert loader.serialize_board(loader.load_puzzle(path)) == PUZZLE


def test_short_row_is_rejected(tmp_path):
    rows = list(ROWS)
    rows[3] = rows[3][:8]
    with pytest.raises(FormatError) as excinfo:
        loader.load_puzzle(_write(tmp_path, "\n".join(rows)))
    assert excinfo.value.line == 4


def test_non_digit_is_rejected():
    rows = list(ROWS)
    rows[0] = "53..7...."
    with pytest.raises(FormatError) as excinfo:
        loader.parse_rows(rows)
    assert excinfo.value.line == 1


def test_missing_row_is_rejected():
    with pytest.raises(FormatError):
        loader.parse_rows(ROWS[:8])


def test_extra_lines_are_rejected():
    with pytest.raises(FormatError):
        loader.parse_rows(ROWS + ["000000000"])
    with pytest.raises(FormatError):
        loader.parse_rows(ROWS + ["", ""])


def test_empty_source_is_rejected():
    with pytest.raises(FormatError):
        loader.parse_rows([""])


def test_missing_file(tmp_path):
    with pytest.raises(PuzzleNotFoundError):
        loader.load_puzzle(tmp_path / "nope.dat")


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        loader.parse_puzzle("123")


def test_parse_puzzle_accepts_blank_marks():
    text = PUZZLE.replace("0", ".")
    assert loader.serialize_board(loader.parse_puzzle(text)) == PUZZLE


def test_parse_puzzle_ignores_layout_characters():
    text = "\n".join(" ".join(row) for row in ROWS)
    assert loader.parse_puzzle(text) == loader.parse_rows(ROWS)


def test_only_one_carriage_return_is_stripped():
    rows = list(ROWS)
    rows[-1] = rows[-1] + "\r\r"
    with pytest.raises(FormatError) as excinfo:
        loader.parse_rows(rows)
    assert excinfo.value.line == 9
