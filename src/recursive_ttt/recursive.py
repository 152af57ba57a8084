"""The outer board: a 3x3 grid whose cells are inner boards.

Each ``RecursiveCell`` stores the outcome of its inner board and refreshes it on
every write, so the outer board can run the same win detector over cached
owners instead of re-evaluating all 81 leaves.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple, Union, overload

from .board import Board, InnerBoard, check_index
from .types import BOARD_CELLS, OutcomeKind, Outcome, Player, Position


class RecursiveCell:
    """An inner board together with its cached outcome."""

    def __init__(self, board: Optional[InnerBoard] = None) -> None:
        self._board = InnerBoard() if board is None else board.copy()
        self._outcome = self._board.outcome()

    def set_cell(self, inner_index: int, owner: Optional[Player]) -> None:
        self._board.set_cell(inner_index, owner)
        self._outcome = self._board.outcome()

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def board(self) -> InnerBoard:
        """A copy of the inner board; write through ``set_cell`` instead."""

        return self._board.copy()

    def owner(self) -> Optional[Player]:
        if self._outcome.kind is OutcomeKind.WON:
            return self._outcome.winner
        return None

    def is_available(self) -> bool:
        # Drawn and won boards stay closed even if some leaves are still empty.
        return not self._outcome.is_decided

    def available_cells(self) -> Iterator[Tuple[int, Optional[Player]]]:
        return self._board.available_cells()

    def __getitem__(self, inner_index: int) -> Optional[Player]:
        return self._board[inner_index]

    def copy(self) -> "RecursiveCell":
        return RecursiveCell(self._board)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecursiveCell):
            return NotImplemented
        return self._board == other._board

    def __repr__(self) -> str:
        return f"RecursiveCell({self._board!r}, {self._outcome})"


class RecursiveBoard(Board):
    """The Ultimate Tic-Tac-Toe board itself."""

    def __init__(self) -> None:
        self._cells: List[RecursiveCell] = [RecursiveCell() for _ in range(BOARD_CELLS)]

    @classmethod
    def from_inner_boards(cls, boards: Sequence[InnerBoard]) -> "RecursiveBoard":
        """Build a board from 9 inner boards, computing each cell's outcome."""

        if len(boards) != BOARD_CELLS:
            raise ValueError(f"recursive board needs {BOARD_CELLS} inner boards, got {len(boards)}")
        recursive = cls()
        recursive._cells = [RecursiveCell(board) for board in boards]
        return recursive

    def set_cell(self, position: Position, owner: Optional[Player]) -> None:
        self._cells[position.outer_cell].set_cell(position.inner_cell, owner)

    @overload
    def __getitem__(self, index: int) -> RecursiveCell:
        ...

    @overload
    def __getitem__(self, index: Position) -> Optional[Player]:
        ...

    def __getitem__(self, index: Union[int, Position]):
        if isinstance(index, Position):
            return self._cells[index.outer_cell][index.inner_cell]
        return self._cells[check_index(index)]

    def available_cells(self) -> Iterator[Tuple[int, RecursiveCell]]:
        return ((index, cell) for index, cell in enumerate(self._cells) if cell.is_available())

    def copy(self) -> "RecursiveBoard":
        return RecursiveBoard.from_inner_boards([cell.board for cell in self._cells])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecursiveBoard):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"RecursiveBoard({self.outcome()})"
