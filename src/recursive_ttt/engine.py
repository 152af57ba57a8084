"""Game engine for recursive (Ultimate) tic-tac-toe.

Rules:
- Players alternate placing their glyph on an empty leaf cell of an open inner board.
- Winning an inner board claims the matching outer cell; a full inner board with no
  line is drawn and closed for play.
- The inner cell index of a move names the outer cell the opponent must play in next,
  unless that inner board is already decided, in which case any open board is allowed.
- Three claimed outer cells in a line win the game.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .recursive import RecursiveBoard
from .types import BOARD_CELLS, OutcomeKind, Outcome, Player, Position

logger = logging.getLogger(__name__)

FIRST_PLAYER = Player.CIRCLE
MAX_MOVES = BOARD_CELLS * BOARD_CELLS


class IllegalMoveError(ValueError):
    """Raised when a well-formed position is not playable right now."""


@dataclass
class GameState:
    """Complete game state: the board, the side to move and the forced outer cell.

    ``forced_cell`` is ``None`` when the side to move may pick any open outer cell.
    """

    board: RecursiveBoard = field(default_factory=RecursiveBoard)
    turn: Player = FIRST_PLAYER
    forced_cell: Optional[int] = None

    def __post_init__(self) -> None:
        if self.forced_cell is None:
            return
        if not 0 <= self.forced_cell < BOARD_CELLS:
            raise ValueError(f"forced_cell out of range: {self.forced_cell}")
        if not self.board[self.forced_cell].is_available():
            raise ValueError(f"forced_cell {self.forced_cell} is already decided")

    def clone(self) -> "GameState":
        """Return a deep copy of the state."""

        return GameState(board=self.board.copy(), turn=self.turn, forced_cell=self.forced_cell)

    def available_moves(self) -> Tuple[Position, ...]:
        """Return every legal position for the side to move, in row-major order."""

        if self.forced_cell is not None:
            outer_cells = [(self.forced_cell, self.board[self.forced_cell])]
        else:
            outer_cells = list(self.board.available_cells())
        moves: List[Position] = []
        for outer, cell in outer_cells:
            for inner, _ in cell.available_cells():
                moves.append(Position(outer, inner))
        return tuple(moves)

    def is_legal(self, position: Position) -> bool:
        return position in self.available_moves()

    def make_move(self, position: Position) -> None:
        """Play ``position`` for the side to move.

        Raises:
            IllegalMoveError: if ``position`` is not one of ``available_moves()``.
                The state is left untouched.
        """

        if not self.is_legal(position):
            if self.forced_cell is not None and position.outer_cell != self.forced_cell:
                reason = f"must play in outer cell {self.forced_cell}"
            elif not self.board[position.outer_cell].is_available():
                reason = f"outer cell {position.outer_cell} is already decided"
            else:
                reason = f"cell {position} is already taken"
            raise IllegalMoveError(f"illegal move {position}: {reason}")

        player = self.turn
        self.board.set_cell(position, player)
        self.turn = player.opponent()

        target = position.inner_cell
        self.forced_cell = target if self.board[target].is_available() else None
        logger.debug(
            "%s played %s; sub-board %s, next forced cell %s",
            player.glyph,
            position,
            self.board[position.outer_cell].outcome,
            self.forced_cell,
        )

    def get_state(self) -> Outcome:
        """The authoritative result of the game so far."""

        return self.board.outcome()

    def is_over(self) -> bool:
        return self.get_state().is_decided


def new_game(first: Player = FIRST_PLAYER) -> GameState:
    """Create an empty game with ``first`` to move and free choice of board."""

    return GameState(board=RecursiveBoard(), turn=first)


def winner(state: GameState) -> Player | None:
    """Return the winner if one player has claimed a line of outer cells."""

    outcome = state.get_state()
    return outcome.winner if outcome.kind is OutcomeKind.WON else None


def is_terminal(state: GameState) -> bool:
    """Whether the game is decided (won or drawn)."""

    return state.is_over()
