"""Command-line front end.

Usage examples:
- Interactive game: ``python -m recursive_ttt.cli play --first X``
- Replay a record: ``python -m recursive_ttt.cli replay --verbose < game.txt``
- Show a board: ``python -m recursive_ttt.cli show "XXX------/---------/..."``

The ``play`` session speaks a line protocol on stdout: the board, then
``TURN <glyph> FORCED <cell|ANY>``; bad input yields ``ERROR <reason>`` and the
game ends with ``RESULT <O|X|DRAW>``. Diagnostics go to the log on stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from . import engine
from .notation import char_to_player, parse_move_text, parse_recursive_board, player_to_char
from .render import render_full, render_grid
from .replay import replay_text
from .types import OutcomeKind, Outcome, Player

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class PlayConfig:
    first: Player = engine.FIRST_PLAYER
    board: Optional[str] = None
    log_level: str = "WARNING"


def format_result(outcome: Outcome) -> str:
    if outcome.kind is OutcomeKind.WON:
        return player_to_char(outcome.winner)
    return outcome.kind.name


class PlaySession:
    """Line-oriented two-player session over stdin/stdout."""

    def __init__(self, state: Optional[engine.GameState] = None, *, stdin=None, stdout=None) -> None:
        self.state = state or engine.new_game()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    @classmethod
    def from_config(cls, config: PlayConfig, **streams) -> "PlaySession":
        state = engine.new_game(first=config.first)
        if config.board is not None:
            state.board = parse_recursive_board(config.board)
        return cls(state, **streams)

    def _emit(self, message: str) -> None:
        print(message, file=self.stdout)
        self.stdout.flush()

    def _show(self) -> None:
        forced = "ANY" if self.state.forced_cell is None else str(self.state.forced_cell)
        self._emit(render_full(self.state.board))
        self._emit(f"TURN {player_to_char(self.state.turn)} FORCED {forced}")

    def _finish(self) -> int:
        self._emit(render_grid(self.state.board))
        self._emit(f"RESULT {format_result(self.state.get_state())}")
        return 0

    def _play(self, line: str) -> None:
        parsed = parse_move_text(line)
        if parsed.player is not None and parsed.player is not self.state.turn:
            raise ValueError(f"it is {player_to_char(self.state.turn)}'s turn")
        self.state.make_move(parsed.position)

    def run(self) -> int:
        if self.state.is_over():
            return self._finish()
        self._show()
        for raw_line in self.stdin:
            line = raw_line.strip()
            if not line:
                continue
            command = line.lower()
            if command == "quit":
                logger.info("session quit before a result")
                return 1
            if command == "moves":
                self._emit("MOVES " + " ".join(str(pos) for pos in self.state.available_moves()))
                continue
            if command == "board":
                self._show()
                continue
            try:
                self._play(line)
            except ValueError as exc:
                logger.warning("rejected input %r: %s", line, exc)
                self._emit(f"ERROR {exc}")
                continue
            if self.state.is_over():
                return self._finish()
            self._show()
        logger.info("input ended before a result")
        return 1


def run_replay(text: str, verbose: bool = False, stdout=None) -> int:
    out = stdout or sys.stdout

    def emit(message: str) -> None:
        print(message, file=out)

    try:
        state = replay_text(text, verbose=verbose, emit=emit)
    except ValueError as exc:
        emit(f"ERROR {exc}")
        return 1
    emit("Final board:")
    emit(render_full(state.board))
    emit(f"RESULT {format_result(state.get_state())}")
    return 0


def run_show(text: str, stdout=None) -> int:
    out = stdout or sys.stdout
    try:
        board = parse_recursive_board(text)
    except ValueError as exc:
        print(f"ERROR {exc}", file=out)
        return 1
    print(render_full(board), file=out)
    print(file=out)
    print(render_grid(board), file=out)
    print(f"RESULT {format_result(board.outcome())}", file=out)
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recursive (Ultimate) tic-tac-toe")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play a two-player game on stdin/stdout")
    play.add_argument("--first", choices=["O", "X"], default=player_to_char(engine.FIRST_PLAYER))
    play.add_argument("--board", type=str, default=None, help="Start from a '/'-separated board string")

    replay = sub.add_parser("replay", help="Replay a game record read from stdin")
    replay.add_argument("--verbose", action="store_true", help="Print each board during replay")

    show = sub.add_parser("show", help="Render a '/'-separated board string")
    show.add_argument("board", type=str)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        config = PlayConfig(first=char_to_player(args.first), board=args.board, log_level=args.log_level)
        try:
            session = PlaySession.from_config(config)
        except ValueError as exc:
            print(f"Invalid configuration: {exc}")
            return 1
        return session.run()
    if args.command == "replay":
        return run_replay(sys.stdin.read(), verbose=args.verbose)
    return run_show(args.board)


if __name__ == "__main__":
    sys.exit(main())
