import pytest

from recursive_ttt.board import board_outcome, cell_available, cell_owner
from recursive_ttt.types import DRAW, UNDECIDED, Outcome, Player

O = Player.CIRCLE
X = Player.CROSS

LINES = [
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
]


class _StubCell:
    def __init__(self, owner=None, available=True):
        self._owner = owner
        self._available = available

    def owner(self):
        return self._owner

    def is_available(self):
        return self._available


def test_every_single_line_wins():
    for player in (O, X):
        for line in LINES:
            cells = [None] * 9
            for index in line:
                cells[index] = player
            assert board_outcome(cells) == Outcome.won(player), line


def test_line_win_beats_full_board():
    # Full board where X completes the left column; the rest has no line.
    cells = [X, O, X, X, O, O, X, X, O]
    assert board_outcome(cells) == Outcome.won(X)


def test_full_board_without_line_is_draw():
    cells = [O, O, X, X, X, O, O, X, O]
    assert board_outcome(cells) == DRAW


def test_open_board_without_line_is_undecided():
    assert board_outcome([None] * 9) == UNDECIDED
    assert board_outcome([None, None, O, None, X, None, None, None, None]) == UNDECIDED
    assert board_outcome([O, O, X, X, X, O, O, X, None]) == UNDECIDED


def test_unowned_unavailable_cells_count_towards_draw():
    closed = _StubCell(owner=None, available=False)
    cells = [closed] * 9
    assert board_outcome(cells) == DRAW

    cells[4] = _StubCell(owner=None, available=True)
    assert board_outcome(cells) == UNDECIDED


def test_outcome_cells_win_like_leaves():
    won_o = _StubCell(owner=O, available=False)
    open_cell = _StubCell()
    cells = [open_cell, open_cell, won_o, open_cell, won_o, open_cell, won_o, open_cell, open_cell]
    assert board_outcome(cells) == Outcome.won(O)


def test_cell_capability_for_leaves():
    assert cell_owner(None) is None
    assert cell_available(None)
    assert cell_owner(X) is X
    assert not cell_available(X)


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        board_outcome([None] * 8)
