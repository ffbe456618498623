"""Exceptions raised while reading or checking puzzles."""

from __future__ import annotations

from typing import Optional


class PuzzleError(Exception):
    """Base class for puzzle input problems."""


class FormatError(PuzzleError, ValueError):
    """Puzzle text or board does not have the expected shape or content."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class PuzzleNotFoundError(PuzzleError, FileNotFoundError):
    """Puzzle file is missing or cannot be read."""


__all__ = ["PuzzleError", "FormatError", "PuzzleNotFoundError"]
