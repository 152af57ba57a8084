import pytest

from recursive_ttt import replay
from recursive_ttt.types import Player, Position

SAMPLE = """# opening sample
1:O;(4,0)
2:X;(0,4)
3:O;(4,8)
"""


def test_replay_sample_text():
    state = replay.replay_text(SAMPLE)

    assert state.board[Position(4, 0)] is Player.CIRCLE
    assert state.board[Position(0, 4)] is Player.CROSS
    assert state.board[Position(4, 8)] is Player.CIRCLE
    assert state.turn is Player.CROSS
    assert state.forced_cell == 8


def test_first_move_sets_opening_player():
    state = replay.replay_text("1:X;(4,0)\n")
    assert state.board[Position(4, 0)] is Player.CROSS
    assert state.turn is Player.CIRCLE


def test_verbose_replay_emits_each_ply():
    lines = []
    replay.replay_text(SAMPLE, verbose=True, emit=lines.append)
    assert lines[0] == "Ply 1: O -> (4,0)"
    assert any(line.startswith("Ply 3: O") for line in lines)


@pytest.mark.parametrize(
    "text, message",
    [
        ("1:O;(4,0)\n3:X;(0,4)\n", "Ply numbering mismatch"),
        ("1:O;(4,0)\n2:O;(0,4)\n", "player mismatch"),
        ("1:O;(4,0)\n2:X;(1,4)\n", "Illegal move at ply 2"),
    ],
)
def test_invalid_records_raise(text, message):
    with pytest.raises(ValueError, match=message):
        replay.replay_text(text)
