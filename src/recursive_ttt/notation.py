"""Text notation for players, boards, moves and game records.

Formats:
- Player glyphs are ``O`` and ``X``; an empty leaf is ``-``.
- An inner board is 9 glyphs in row-major order, e.g. ``OX-XXXO--``.
- A recursive board is 9 inner-board strings joined by ``/``.
- A move is ``(<outer>,<inner>)``, optionally prefixed by the player glyph and ply,
  e.g. ``12:X;(4,0)``. A game record is ``#`` comment lines followed by one full
  move line per ply.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import InnerBoard
from .recursive import RecursiveBoard
from .types import BOARD_CELLS, OutcomeKind, Outcome, Player, Position

EMPTY_GLYPH = "-"
BOARD_SEPARATOR = "/"


class NotationError(ValueError):
    """Base class for text that cannot be decoded."""


class InvalidPlayerCharError(NotationError):
    """Raised for a character that is not a player glyph."""


class InnerBoardParseError(NotationError):
    """Raised when a board string cannot be decoded."""


class InvalidLengthError(InnerBoardParseError):
    """The board string does not have the expected number of cells."""


class InvalidCharsError(InnerBoardParseError):
    """The board string contains a character that is neither a glyph nor ``-``."""


class MoveTextError(NotationError):
    """Raised when move text does not match any accepted form."""


def player_to_char(player: Player) -> str:
    return player.value


def char_to_player(char: str) -> Player:
    """Decode ``O`` or ``X``; any other character is rejected."""

    try:
        return Player(char)
    except ValueError as exc:
        raise InvalidPlayerCharError(f"Invalid player character {char!r}") from exc


def outcome_to_char(outcome: Outcome) -> str:
    """``' '`` while undecided, ``-`` for a draw, the winner's glyph otherwise."""

    if outcome.kind is OutcomeKind.UNDECIDED:
        return " "
    if outcome.kind is OutcomeKind.DRAW:
        return EMPTY_GLYPH
    return player_to_char(outcome.winner)


def parse_inner_board(text: str) -> InnerBoard:
    """Parse a 9-character row-major board string such as ``OX-XXXO--``."""

    if len(text) != BOARD_CELLS:
        raise InvalidLengthError(f"Inner board must have {BOARD_CELLS} characters, got {len(text)}")
    cells: List[Optional[Player]] = []
    for index, char in enumerate(text):
        if char == EMPTY_GLYPH:
            cells.append(None)
            continue
        try:
            cells.append(char_to_player(char))
        except InvalidPlayerCharError as exc:
            raise InvalidCharsError(f"Invalid character {char!r} at cell {index}") from exc
    return InnerBoard(cells)


def dump_inner_board(board: InnerBoard) -> str:
    return "".join(EMPTY_GLYPH if cell is None else player_to_char(cell) for cell in board)


def parse_recursive_board(text: str) -> RecursiveBoard:
    """Parse 9 ``/``-separated inner-board strings into a recursive board."""

    segments = text.strip().split(BOARD_SEPARATOR)
    if len(segments) != BOARD_CELLS:
        raise InvalidLengthError(f"Recursive board must have {BOARD_CELLS} inner boards, got {len(segments)}")
    return RecursiveBoard.from_inner_boards([parse_inner_board(segment.strip()) for segment in segments])


def dump_recursive_board(board: RecursiveBoard) -> str:
    return BOARD_SEPARATOR.join(dump_inner_board(cell.board) for cell in board)


@dataclass
class ParsedInputMove:
    """Result of parsing a user-supplied move string."""

    position: Position
    player: Optional[Player] = None
    ply: Optional[int] = None


_MOVE_PATTERN = re.compile(
    r"^(?:(?P<ply>\d+):)?(?:(?P<player>[OX]);)?\(?\s*(?P<outer>\d+)\s*(?:,|\s)\s*(?P<inner>\d+)\s*\)?$"
)


def parse_move_text(raw: str) -> ParsedInputMove:
    """Parse a move string.

    Accepted examples (player glyph is case-insensitive):
    - "12:X;(4,0)"  # full record line with ply and player
    - "X;(4,0)"     # player, no ply
    - "(4,0)", "4,0" or "4 0"

    Raises:
        MoveTextError: if the text matches none of the forms.
        InvalidPositionError: if an index is outside 0..8.
    """

    text = raw.strip().upper()
    if not text:
        raise MoveTextError("Move text is empty")
    match = _MOVE_PATTERN.match(text)
    if not match:
        raise MoveTextError(f"Could not parse move {raw.strip()!r}; use formats like '4,0' or 'X;(4,0)'")

    player = match.group("player")
    ply = match.group("ply")
    position = Position(int(match.group("outer")), int(match.group("inner")))
    return ParsedInputMove(
        position=position,
        player=None if player is None else char_to_player(player),
        ply=None if ply is None else int(ply),
    )


def format_move(ply: int, player: Player, position: Position) -> str:
    return f"{ply}:{player_to_char(player)};{position}"


@dataclass
class GameRecord:
    comments: List[str] = field(default_factory=list)
    moves: List[Tuple[int, Player, Position]] = field(default_factory=list)


def parse_record(text: str) -> GameRecord:
    """Parse a game record; every non-comment line must be a full move line."""

    record = GameRecord()
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        stripped = raw_line.strip()
        if not stripped:
            continue
        if stripped.startswith("#"):
            record.comments.append(stripped)
            continue
        parsed = parse_move_text(stripped)
        if parsed.ply is None or parsed.player is None:
            raise MoveTextError(f"Line {line_no}: record moves need a ply and player, e.g. '1:O;(4,0)'")
        record.moves.append((parsed.ply, parsed.player, parsed.position))
    return record


def dump_record(record: GameRecord) -> str:
    """Serialize a ``GameRecord`` to text."""

    lines: List[str] = list(record.comments)
    for ply, player, position in record.moves:
        lines.append(format_move(ply, player, position))
    return "\n".join(lines) + "\n"
