"""3x3 boards and the win detector shared by both board levels.

A grid slot only has to answer two questions for the detector to work on it:
who owns it (possibly nobody) and whether it is still open for play. Leaf cells
are plain ``Optional[Player]`` values; outcome cells (see ``recursive.py``)
implement the ``Cell`` protocol.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Sequence, Tuple, Union

from .types import BOARD_CELLS, DRAW, UNDECIDED, Outcome, Player


class Cell(Protocol):
    def owner(self) -> Optional[Player]:
        ...

    def is_available(self) -> bool:
        ...


CellLike = Union[Optional[Player], Cell]


def cell_owner(cell: CellLike) -> Optional[Player]:
    """Return the player owning ``cell``, or ``None`` if nobody does."""

    if cell is None or isinstance(cell, Player):
        return cell
    return cell.owner()


def cell_available(cell: CellLike) -> bool:
    """Whether ``cell`` can still be played or decided."""

    if cell is None:
        return True
    if isinstance(cell, Player):
        return False
    return cell.is_available()


def board_outcome(cells: Sequence[CellLike]) -> Outcome:
    """Reduce 9 row-major cells to an ``Outcome``.

    Rows are checked first, then columns, then the two diagonals. A grid where
    no line is complete and no cell is available is a draw.
    """

    if len(cells) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(cells)}")
    owners = [cell_owner(cell) for cell in cells]

    for row in range(0, BOARD_CELLS, 3):
        owner = owners[row]
        if owner is not None and owner == owners[row + 1] == owners[row + 2]:
            return Outcome.won(owner)

    for col in range(3):
        owner = owners[col]
        if owner is not None and owner == owners[col + 3] == owners[col + 6]:
            return Outcome.won(owner)

    # Both diagonals pass through the centre.
    center = owners[4]
    if center is not None and (
        (owners[0] == center and owners[8] == center) or (owners[2] == center and owners[6] == center)
    ):
        return Outcome.won(center)

    if not any(cell_available(cell) for cell in cells):
        return DRAW
    return UNDECIDED


def check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"cell index must be an int, got {index!r}")
    if not 0 <= index < BOARD_CELLS:
        raise IndexError(f"cell index out of range: {index}")
    return index


class Board:
    """Behaviour common to every 3x3 grid; subclasses fill ``_cells``."""

    _cells: List

    def __getitem__(self, index: int):
        return self._cells[check_index(index)]

    def __iter__(self) -> Iterator:
        return iter(self._cells)

    def __len__(self) -> int:
        return BOARD_CELLS

    def outcome(self) -> Outcome:
        return board_outcome(self._cells)

    def available_cells(self) -> Iterator[Tuple[int, CellLike]]:
        """Yield ``(index, cell)`` for every cell still open for play."""

        return ((index, cell) for index, cell in enumerate(self._cells) if cell_available(cell))


class InnerBoard(Board):
    """The leaf game: 9 cells that are empty or owned by a player."""

    def __init__(self, cells: Optional[Sequence[Optional[Player]]] = None) -> None:
        if cells is None:
            self._cells: List[Optional[Player]] = [None] * BOARD_CELLS
            return
        values = list(cells)
        if len(values) != BOARD_CELLS:
            raise ValueError(f"inner board needs {BOARD_CELLS} cells, got {len(values)}")
        for value in values:
            if value is not None and not isinstance(value, Player):
                raise ValueError(f"inner board cells must be Player or None, got {value!r}")
        self._cells = values

    def set_cell(self, index: int, owner: Optional[Player]) -> None:
        self._cells[check_index(index)] = owner

    def copy(self) -> "InnerBoard":
        return InnerBoard(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InnerBoard):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        glyphs = "".join("-" if cell is None else cell.glyph for cell in self._cells)
        return f"InnerBoard({glyphs!r})"
