from recursive_ttt.board import InnerBoard
from recursive_ttt.notation import parse_inner_board
from recursive_ttt.recursive import RecursiveBoard, RecursiveCell
from recursive_ttt.render import render_grid
from recursive_ttt.types import DRAW, UNDECIDED, Outcome, Player, Position

O = Player.CIRCLE
X = Player.CROSS

EMPTY = "---------"


def _board(*inner: str) -> RecursiveBoard:
    boards = [parse_inner_board(text) for text in inner]
    boards += [InnerBoard() for _ in range(9 - len(boards))]
    return RecursiveBoard.from_inner_boards(boards)


def test_cache_tracks_every_write():
    cell = RecursiveCell()
    assert cell.outcome == UNDECIDED
    sequence = [(4, X), (0, O), (3, X), (8, O), (5, X)]
    for index, owner in sequence:
        cell.set_cell(index, owner)
        assert cell.outcome == cell.board.outcome()
    assert cell.outcome == Outcome.won(X)

    # Overwriting a winning cell reopens the sub-game.
    cell.set_cell(5, None)
    assert cell.outcome == UNDECIDED
    assert cell.is_available()


def test_won_cell_reports_owner_and_closes():
    cell = RecursiveCell(parse_inner_board("XXX------"))
    assert cell.owner() is X
    assert not cell.is_available()


def test_drawn_cell_has_no_owner_and_closes():
    cell = RecursiveCell(parse_inner_board("OOXXXOOXO"))
    assert cell.outcome == DRAW
    assert cell.owner() is None
    assert not cell.is_available()


def test_board_property_cannot_bypass_cache():
    cell = RecursiveCell()
    cell.board.set_cell(0, X)
    assert cell[0] is None
    assert cell.outcome == UNDECIDED


def test_set_cell_routes_by_position():
    board = RecursiveBoard()
    board.set_cell(Position(2, 7), O)
    assert board[Position(2, 7)] is O
    assert board[2][7] is O
    assert board[7][2] is None


def test_outer_win_from_cached_owners():
    board = _board("XXX------", EMPTY, EMPTY, EMPTY, "X--X--X--", EMPTY, EMPTY, EMPTY, "--X-X-X--")
    assert board.outcome() == Outcome.won(X)
    assert board.outcome() == board.outcome()


def test_outer_line_needs_same_owner():
    board = _board("XXX------", "OOO------", "XXX------")
    assert board.outcome() == UNDECIDED


def test_outer_draw_counts_drawn_boards():
    drawn = "OOXXXOOXO"
    board = _board(drawn, drawn, drawn, drawn, drawn, drawn, drawn, drawn, drawn)
    assert board.outcome() == DRAW
    assert list(board.available_cells()) == []


def test_outer_draw_mixed_results():
    # Winners O X O / X X O / O O X: every board decided, no line.
    winners = {"O": "OOO------", "X": "XXX------"}
    layout = "OXOXXOOOX"
    board = _board(*[winners[ch] for ch in layout])
    assert board.outcome() == DRAW


def test_available_cells_skips_decided_boards():
    board = _board("XXX------", "OOXXXOOXO", "O--------")
    assert [index for index, _ in board.available_cells()] == [2, 3, 4, 5, 6, 7, 8]


def test_copy_is_independent():
    board = RecursiveBoard()
    clone = board.copy()
    clone.set_cell(Position(0, 0), X)
    assert board[Position(0, 0)] is None
    assert board != clone


def test_render_outer_grid_uses_outcomes():
    board = _board("XXX------", "OOXXXOOXO", "O--------", EMPTY, "OOO------")
    assert render_grid(board).splitlines()[0] == " X │ - │   "
    assert render_grid(board).splitlines()[2] == "   │ O │   "
