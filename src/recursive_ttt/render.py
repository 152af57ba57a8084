"""Plain-text rendering of boards."""
from __future__ import annotations

from typing import List

from .board import Board, CellLike
from .notation import outcome_to_char, player_to_char
from .recursive import RecursiveBoard
from .types import Player

ROW_SEPARATOR = "—" * 11
FULL_EMPTY = "."


def cell_glyph(cell: CellLike) -> str:
    """Single display character: a leaf's owner, or a sub-board's outcome."""

    if cell is None:
        return " "
    if isinstance(cell, Player):
        return player_to_char(cell)
    return outcome_to_char(cell.outcome)


def render_grid(board: Board) -> str:
    """Render any 3x3 board in the fixed layout::

         O │ X │
        ———————————
         X │ X │ X
        ———————————
         O │   │
    """

    lines: List[str] = []
    for row in range(3):
        if row:
            lines.append(ROW_SEPARATOR)
        glyphs = [cell_glyph(board[row * 3 + col]) for col in range(3)]
        lines.append(" " + " │ ".join(glyphs) + " ")
    return "\n".join(lines)


def render_full(board: RecursiveBoard) -> str:
    """Render all 81 leaves, inner boards separated by heavy rules."""

    lines: List[str] = []
    for outer_row in range(3):
        if outer_row:
            lines.append("╋".join(["━" * 7] * 3))
        for inner_row in range(3):
            chunks = []
            for outer_col in range(3):
                cell = board[outer_row * 3 + outer_col]
                glyphs = []
                for inner_col in range(3):
                    leaf = cell[inner_row * 3 + inner_col]
                    glyphs.append(FULL_EMPTY if leaf is None else player_to_char(leaf))
                chunks.append(" " + " ".join(glyphs) + " ")
            lines.append("┃".join(chunks))
    return "\n".join(lines)
