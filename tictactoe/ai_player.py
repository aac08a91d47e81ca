"""Computer opponent: an alpha-beta minimax search and a random mover."""

import random
import threading

from .board import EMPTY, LINES, PLAYER_O, PLAYER_X, SIZE

WIN_SCORE = 10
_INFINITY = 1000


def _empty_cells(state):
    for r in range(SIZE):
        for c in range(SIZE):
            if state[r][c] == EMPTY:
                yield r, c


def evaluate_board(state):
    """Return +10 if O (the AI) has a line, -10 if X has one, else 0."""
    for line in LINES:
        (r0, c0) = line[0]
        first = state[r0][c0]
        if first != EMPTY and all(state[r][c] == first for r, c in line):
            return WIN_SCORE if first == PLAYER_O else -WIN_SCORE
    return 0


def has_moves_left(state):
    """True if any cell is empty."""
    return any(value == EMPTY for row in state for value in row)


def minimax(state, depth, maximizing, alpha, beta):
    """Score ``state`` with alpha-beta minimax; O maximises, X minimises."""
    score = evaluate_board(state)
    if score in (WIN_SCORE, -WIN_SCORE):
        return score
    if not has_moves_left(state):
        return 0

    board = [list(row) for row in state]
    if maximizing:
        best = -_INFINITY
        for r, c in _empty_cells(board):
            board[r][c] = PLAYER_O
            best = max(best, minimax(board, depth + 1, False, alpha, beta))
            board[r][c] = EMPTY
            alpha = max(alpha, best)
            if beta <= alpha:
                break
        return best

    best = _INFINITY
    for r, c in _empty_cells(board):
        board[r][c] = PLAYER_X
        best = min(best, minimax(board, depth + 1, True, alpha, beta))
        board[r][c] = EMPTY
        beta = min(beta, best)
        if beta <= alpha:
            break
    return best


def _first_completing_move(board, player, target):
    for r, c in _empty_cells(board):
        board[r][c] = player
        hit = evaluate_board(board) == target
        board[r][c] = EMPTY
        if hit:
            return r, c
    return None


def find_best_move(state):
    """Return the (row, col) O should play, or None when the board is full.

    An immediate win comes first, then blocking X's immediate win,
    then the best move by minimax search.
    """
    board = [list(row) for row in state]

    move = _first_completing_move(board, PLAYER_O, WIN_SCORE)
    if move is not None:
        return move
    move = _first_completing_move(board, PLAYER_X, -WIN_SCORE)
    if move is not None:
        return move

    best_val = -_INFINITY
    best_move = None
    alpha, beta = -_INFINITY, _INFINITY
    for r, c in _empty_cells(board):
        board[r][c] = PLAYER_O
        value = minimax(board, 0, False, alpha, beta)
        board[r][c] = EMPTY
        if value > best_val:
            best_move = (r, c)
            best_val = value
        alpha = max(alpha, best_val)
    return best_move


def find_random_move(state, rng=None):
    """Return a random empty (row, col), or None when the board is full."""
    moves = list(_empty_cells(state))
    if not moves:
        return None
    return (rng or random).choice(moves)


class AIPlayer:
    """Chooses O's moves and reports them through ``on_move`` after a delay."""

    def __init__(self, on_move=None, delay=0.5, rng=None):
        self.on_move = on_move
        self.delay = delay
        self._rng = rng
        self._timer = None
        self._lock = threading.Lock()

    def _choose(self, state, difficulty):
        if difficulty == "easy":
            return find_random_move(state, self._rng)
        return find_best_move(state)

    def choose_move(self, board, difficulty):
        """Return the move for ``board``: random on "easy", minimax otherwise."""
        return self._choose(board.state(), difficulty)

    def make_move(self, board, difficulty):
        """Pick a move for a snapshot of ``board`` and pass it to ``on_move``.

        With a positive delay the choice is made on a timer thread; a new
        request replaces one still pending. With no delay it happens at once.
        """
        snapshot = board.state()
        self.cancel()

        def fire():
            move = self._choose(snapshot, difficulty)
            if self.on_move is not None:
                self.on_move(move)

        if not self.delay or self.delay <= 0:
            fire()
            return
        timer = threading.Timer(self.delay, fire)
        timer.daemon = True
        with self._lock:
            self._timer = timer
        timer.start()

    def cancel(self):
        """Drop a pending move, if any."""
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()