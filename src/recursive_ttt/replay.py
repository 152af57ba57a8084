"""Replay game records and validate moves."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from . import engine
from .notation import GameRecord, parse_record, player_to_char
from .render import render_full

logger = logging.getLogger(__name__)


def replay_record(
    record: GameRecord,
    verbose: bool = False,
    emit: Optional[Callable[[str], None]] = None,
) -> engine.GameState:
    """Replay a parsed record and return the final state.

    The first move's player opens the game. Ply numbers must count up from 1,
    players must alternate, and every move must be legal when it is played.
    """

    out = emit or print
    first = record.moves[0][1] if record.moves else engine.FIRST_PLAYER
    state = engine.new_game(first=first)

    for idx, (ply, player, position) in enumerate(record.moves, start=1):
        if ply != idx:
            raise ValueError(f"Ply numbering mismatch at move {idx}: expected {idx}, got {ply}")
        if state.is_over():
            raise ValueError(f"Move at ply {ply} played after the game ended ({state.get_state()})")
        if player is not state.turn:
            raise ValueError(
                f"Turn {ply} player mismatch: expected {player_to_char(state.turn)}, got {player_to_char(player)}"
            )
        try:
            state.make_move(position)
        except engine.IllegalMoveError as exc:
            raise ValueError(f"Illegal move at ply {ply}: {exc}") from exc
        logger.debug("replayed ply %d: %s %s", ply, player_to_char(player), position)
        if verbose:
            out(f"Ply {ply}: {player_to_char(player)} -> {position}")
            out(render_full(state.board))
            out("")

    return state


def replay_text(text: str, verbose: bool = False, emit: Optional[Callable[[str], None]] = None) -> engine.GameState:
    return replay_record(parse_record(text), verbose=verbose, emit=emit)
