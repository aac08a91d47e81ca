import random
import threading

import pytest

from tictactoe.ai_player import (
    AIPlayer,
    evaluate_board,
    find_best_move,
    find_random_move,
    has_moves_left,
    minimax,
)
from tictactoe.board import EMPTY, PLAYER_O, PLAYER_X, Board


def test_ai_should_win_when_possible():
    board = Board()
    board.make_move(0, 0, PLAYER_O)
    board.make_move(1, 0, PLAYER_X)
    board.make_move(0, 1, PLAYER_O)
    board.make_move(1, 1, PLAYER_X)
    assert find_best_move(board.state()) == (0, 2)


def test_ai_should_block_player_win():
    board = Board()
    board.make_move(0, 0, PLAYER_X)
    board.make_move(0, 1, PLAYER_O)
    board.make_move(1, 1, PLAYER_X)
    board.make_move(0, 2, PLAYER_O)
    assert find_best_move(board.state()) == (2, 2)


def test_win_preferred_over_block():
    state = [
        [PLAYER_O, PLAYER_O, EMPTY],
        [PLAYER_X, PLAYER_X, EMPTY],
        [EMPTY, EMPTY, EMPTY],
    ]
    assert find_best_move(state) == (0, 2)


def test_find_best_move_full_board_is_none():
    state = [
        [PLAYER_X, PLAYER_O, PLAYER_X],
        [PLAYER_X, PLAYER_O, PLAYER_O],
        [PLAYER_O, PLAYER_X, PLAYER_X],
    ]
    assert find_best_move(state) is None


def test_find_best_move_does_not_modify_input():
    state = [[EMPTY] * 3 for _ in range(3)]
    state[0][0] = PLAYER_X
    before = [list(row) for row in state]
    move = find_best_move(state)
    assert state == before
    assert state[move[0]][move[1]] == EMPTY


@pytest.mark.parametrize(
    "state,expected",
    [
        ([[PLAYER_O] * 3, [EMPTY] * 3, [EMPTY] * 3], 10),
        ([[PLAYER_X, EMPTY, EMPTY]] * 3, -10),
        ([[PLAYER_O, EMPTY, EMPTY], [EMPTY, PLAYER_O, EMPTY], [EMPTY, EMPTY, PLAYER_O]], 10),
        ([[EMPTY, EMPTY, PLAYER_X], [EMPTY, PLAYER_X, EMPTY], [PLAYER_X, EMPTY, EMPTY]], -10),
        ([[EMPTY] * 3 for _ in range(3)], 0),
    ],
)
def test_evaluate_board(state, expected):
    assert evaluate_board(state) == expected


def test_has_moves_left():
    assert has_moves_left([[EMPTY] * 3 for _ in range(3)]) is True
    full = [[PLAYER_X, PLAYER_O, PLAYER_X]] * 3
    assert has_moves_left(full) is False


def test_minimax_terminal_scores():
    o_wins = [[PLAYER_O] * 3, [PLAYER_X, PLAYER_X, EMPTY], [EMPTY] * 3]
    assert minimax(o_wins, 0, True, -1000, 1000) == 10
    x_wins = [[PLAYER_X] * 3, [PLAYER_O, PLAYER_O, EMPTY], [EMPTY] * 3]
    assert minimax(x_wins, 0, False, -1000, 1000) == -10
    draw = [
        [PLAYER_X, PLAYER_O, PLAYER_X],
        [PLAYER_X, PLAYER_O, PLAYER_O],
        [PLAYER_O, PLAYER_X, PLAYER_X],
    ]
    assert minimax(draw, 0, True, -1000, 1000) == 0


def test_minimax_forced_win_for_maximizer():
    state = [
        [PLAYER_O, PLAYER_O, EMPTY],
        [PLAYER_X, PLAYER_X, EMPTY],
        [PLAYER_X, EMPTY, EMPTY],
    ]
    assert minimax(state, 0, True, -1000, 1000) == 10


def test_find_random_move_picks_empty_cell():
    state = [
        [PLAYER_X, PLAYER_O, PLAYER_X],
        [PLAYER_X, EMPTY, PLAYER_O],
        [PLAYER_O, PLAYER_X, EMPTY],
    ]
    rng = random.Random(7)
    moves = {find_random_move(state, rng) for _ in range(50)}
    assert moves == {(1, 1), (2, 2)}


def test_find_random_move_full_board():
    full = [[PLAYER_X, PLAYER_O, PLAYER_X]] * 3
    assert find_random_move(full, random.Random(1)) is None


def test_choose_move_hard_uses_minimax():
    board = Board()
    board.make_move(0, 0, PLAYER_X)
    board.make_move(0, 1, PLAYER_O)
    board.make_move(1, 1, PLAYER_X)
    board.make_move(0, 2, PLAYER_O)
    assert AIPlayer().choose_move(board, "hard") == (2, 2)


def test_choose_move_easy_only_empty_cells():
    board = Board()
    board.make_move(1, 1, PLAYER_X)
    ai = AIPlayer(rng=random.Random(3))
    for _ in range(20):
        r, c = ai.choose_move(board, "easy")
        assert board.cell(r, c) == EMPTY


def test_make_move_without_delay_reports_immediately():
    received = []
    board = Board()
    board.make_move(0, 0, PLAYER_O)
    board.make_move(1, 0, PLAYER_X)
    board.make_move(0, 1, PLAYER_O)
    board.make_move(1, 1, PLAYER_X)
    ai = AIPlayer(on_move=received.append, delay=0)
    ai.make_move(board, "hard")
    assert received == [(0, 2)]


def test_make_move_with_delay_uses_snapshot():
    done = threading.Event()
    received = []

    def on_move(move):
        received.append(move)
        done.set()

    board = Board()
    board.make_move(0, 0, PLAYER_X)
    board.make_move(0, 1, PLAYER_O)
    board.make_move(1, 1, PLAYER_X)
    board.make_move(0, 2, PLAYER_O)
    ai = AIPlayer(on_move=on_move, delay=0.01)
    ai.make_move(board, "hard")
    assert board.make_move(2, 2, PLAYER_O) is True
    done.wait(5)
    assert len(received) == 1
    row, col = received[0]
    assert (row, col) == (2, 2)
    assert board.cell(row, col) == PLAYER_O


def test_cancel_drops_pending_move():
    received = threading.Event()
    ai = AIPlayer(on_move=lambda move: received.set(), delay=0.2)
    ai.make_move(Board(), "easy")
    ai.cancel()
    assert received.wait(0.5) is False