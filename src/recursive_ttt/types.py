"""Core value types for recursive tic-tac-toe.

Indexing reminders:
- Every 3x3 grid is addressed 0..8 in row-major order (0,1,2 top row; 6,7,8 bottom row).
- A ``Position`` names one leaf cell: the outer cell holding the inner board, then the
  cell inside that inner board.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

BOARD_CELLS = 9


class Player(Enum):
    """Players in the game, valued by their display glyph."""

    CIRCLE = "O"
    CROSS = "X"

    def opponent(self) -> "Player":
        """Return the player who moves after this one."""

        return Player.CROSS if self is Player.CIRCLE else Player.CIRCLE

    @property
    def glyph(self) -> str:
        return self.value


class OutcomeKind(Enum):
    UNDECIDED = auto()
    DRAW = auto()
    WON = auto()


@dataclass(frozen=True)
class Outcome:
    """Result of a 3x3 grid: still undecided, drawn, or won by ``winner``."""

    kind: OutcomeKind
    winner: Optional[Player] = None

    def __post_init__(self) -> None:
        if (self.kind is OutcomeKind.WON) != (self.winner is not None):
            raise ValueError(f"winner must be set exactly for WON outcomes, got {self.kind.name}/{self.winner}")

    @classmethod
    def won(cls, player: Player) -> "Outcome":
        return cls(OutcomeKind.WON, player)

    @property
    def is_decided(self) -> bool:
        return self.kind is not OutcomeKind.UNDECIDED

    def __str__(self) -> str:
        if self.kind is OutcomeKind.WON:
            return f"WON({self.winner.glyph})"
        return self.kind.name


UNDECIDED = Outcome(OutcomeKind.UNDECIDED)
DRAW = Outcome(OutcomeKind.DRAW)


class InvalidPositionError(ValueError):
    """Raised when a position is built from out-of-range indices."""


def _check_cell_index(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPositionError(f"{name} must be an int, got {value!r}")
    if not 0 <= value < BOARD_CELLS:
        raise InvalidPositionError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class Position:
    """A validated address of one leaf cell inside the recursive board."""

    outer_cell: int
    inner_cell: int

    def __post_init__(self) -> None:
        _check_cell_index("outer_cell", self.outer_cell)
        _check_cell_index("inner_cell", self.inner_cell)

    def __str__(self) -> str:
        return f"({self.outer_cell},{self.inner_cell})"
