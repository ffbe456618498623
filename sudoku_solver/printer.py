"""Text rendering of boards for the command line."""

from __future__ import annotations

from typing import List, Optional

import typer

from .board import BOX, EMPTY, Board

ROW_RULE = "------+-------+------"


def pretty_board(board: Board) -> str:
    lines: List[str] = []
    for r, row in enumerate(board):
        if r % BOX == 0 and r:
            lines.append(ROW_RULE)
        chunks = []
        for c, value in enumerate(row):
            if c % BOX == 0 and c:
                chunks.append("|")
            chunks.append(str(value) if value != EMPTY else ".")
        lines.append(" ".join(chunks))
    return "\n".join(lines)


def print_board(board: Board, title: Optional[str] = None) -> None:
    """Echo the board, preceded by an underlined title when one is given."""
    if title:
        typer.echo(f"   {title}")
        typer.echo("-" * len(ROW_RULE))
    typer.echo(pretty_board(board))


__all__ = ["ROW_RULE", "pretty_board", "print_board"]
