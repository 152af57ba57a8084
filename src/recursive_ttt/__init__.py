"""Recursive (Ultimate) tic-tac-toe engine package."""

from .types import DRAW, UNDECIDED, InvalidPositionError, Outcome, OutcomeKind, Player, Position
from .board import Cell, InnerBoard, board_outcome
from .recursive import RecursiveBoard, RecursiveCell
from .engine import (
    FIRST_PLAYER,
    MAX_MOVES,
    GameState,
    IllegalMoveError,
    is_terminal,
    new_game,
    winner,
)
from .notation import (
    InnerBoardParseError,
    InvalidCharsError,
    InvalidLengthError,
    InvalidPlayerCharError,
    char_to_player,
    dump_inner_board,
    parse_inner_board,
    player_to_char,
)

__all__ = [
    "Cell",
    "DRAW",
    "FIRST_PLAYER",
    "GameState",
    "IllegalMoveError",
    "InnerBoard",
    "InnerBoardParseError",
    "InvalidCharsError",
    "InvalidLengthError",
    "InvalidPlayerCharError",
    "InvalidPositionError",
    "MAX_MOVES",
    "Outcome",
    "OutcomeKind",
    "Player",
    "Position",
    "RecursiveBoard",
    "RecursiveCell",
    "UNDECIDED",
    "board_outcome",
    "char_to_player",
    "dump_inner_board",
    "is_terminal",
    "new_game",
    "parse_inner_board",
    "player_to_char",
    "winner",
]
