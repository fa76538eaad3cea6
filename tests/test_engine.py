from fiverow import engine
from fiverow.game.types import Cell, Move

B, W = Cell.BLACK, Cell.WHITE


class TestCreateAndPlace:
    def test_create_board_is_empty(self):
        board = engine.create_board()
        assert board.size == 15
        assert board.occupied_count == 0

    def test_create_board_custom_size(self):
        assert engine.create_board(9).size == 9

    def test_place_on_empty_cell(self):
        board = engine.create_board()
        assert engine.place(board, 7, 7, B)
        assert board.get_cell(7, 7) is B

    def test_place_on_occupied_cell_fails(self):
        board = engine.create_board()
        engine.place(board, 7, 7, B)
        assert not engine.place(board, 7, 7, W)
        assert board.get_cell(7, 7) is B

    def test_place_out_of_bounds_fails(self):
        board = engine.create_board()
        assert not engine.place(board, 15, 0, B)
        assert not engine.place(board, 0, -1, W)

    def test_place_empty_clears(self):
        board = engine.create_board()
        engine.place(board, 3, 3, W)
        assert engine.place(board, 3, 3, Cell.EMPTY)
        assert board.is_empty(3, 3)


class TestCheckWin:
    def test_horizontal_five(self):
        board = engine.create_board()
        for c in range(5, 10):
            engine.place(board, 5, c, B)
        assert engine.check_win(board, 5, 9, B)

    def test_blocked_four(self):
        board = engine.create_board()
        for c in range(8, 12):
            engine.place(board, 8, c, W)
        engine.place(board, 8, 12, B)
        assert not engine.check_win(board, 8, 11, W)

    def test_custom_length(self):
        board = engine.create_board(6)
        for c in range(3):
            engine.place(board, 0, c, B)
        assert engine.check_win(board, 0, 2, B, win_length=3)
        assert not engine.check_win(board, 0, 2, B)


class TestFindBestMove:
    def test_empty_board_returns_center(self):
        board = engine.create_board()
        assert engine.find_best_move(board, B, W, 2) == Move(7, 7)

    def test_takes_immediate_win(self):
        board = engine.create_board()
        for c in range(4):
            engine.place(board, 0, c, W)
        engine.place(board, 7, 7, B)
        assert engine.find_best_move(board, W, B, 2) == Move(0, 4)

    def test_blocks_opponent_five(self):
        board = engine.create_board(9)
        for r in range(1, 5):
            engine.place(board, r, 0, B)
        engine.place(board, 0, 0, W)
        engine.place(board, 8, 8, W)
        assert engine.find_best_move(board, W, B, 2) == Move(5, 0)

    def test_depth_zero(self):
        board = engine.create_board(9)
        engine.place(board, 4, 4, B)
        move = engine.find_best_move(board, W, B, 0)
        assert board.is_empty(*move)
