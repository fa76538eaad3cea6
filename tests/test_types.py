from fiverow.game.types import Cell, Move, ScoredMove


def test_cell_other():
    assert Cell.BLACK.other is Cell.WHITE
    assert Cell.WHITE.other is Cell.BLACK
    assert Cell.EMPTY.other is Cell.EMPTY


def test_cell_is_side():
    assert Cell.BLACK.is_side
    assert Cell.WHITE.is_side
    assert not Cell.EMPTY.is_side


def test_cell_str_and_symbol():
    assert str(Cell.BLACK) == "Black"
    assert str(Cell.WHITE) == "White"
    assert Cell.BLACK.symbol == "X"
    assert Cell.WHITE.symbol == "O"
    assert Cell.EMPTY.symbol == "."


def test_move_equality_and_hash():
    assert Move(3, 5) == Move(3, 5)
    assert len({Move(3, 5), Move(3, 5), Move(5, 3)}) == 2
    m = Move(3, 5)
    assert m.row == 3
    assert m.col == 5


def test_scored_move_unpacks():
    move, score = ScoredMove(Move(1, 2), 300)
    assert move == Move(1, 2)
    assert score == 300
