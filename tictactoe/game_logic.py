"""Turn handling, move history and results for one game."""

import threading

from .ai_player import AIPlayer
from .board import EMPTY, PLAYER_O, PLAYER_X, Board

IN_PROGRESS = -2


def _mark(player):
    return "X" if player == PLAYER_X else "O"


class GameLogic:
    """Runs a game between two people or a person (X) and the computer (O).

    Listeners are plain callables:
    ``on_board_changed(row, col, player)``, ``on_game_ended(result, moves)``
    and ``on_player_changed(player)``.
    """

    def __init__(
        self,
        on_board_changed=None,
        on_game_ended=None,
        on_player_changed=None,
        ai_delay=0.5,
        rng=None,
    ):
        self.on_board_changed = on_board_changed
        self.on_game_ended = on_game_ended
        self.on_player_changed = on_player_changed
        self._board = Board()
        self._lock = threading.RLock()
        self._current_player = PLAYER_X
        self._vs_ai = False
        self._ai_difficulty = ""
        self._history = []
        self.ai_player = AIPlayer(on_move=self.apply_ai_move, delay=ai_delay, rng=rng)

    @property
    def current_player(self):
        return self._current_player

    @property
    def vs_ai(self):
        return self._vs_ai

    @property
    def ai_difficulty(self):
        return self._ai_difficulty

    @property
    def move_history(self):
        """Moves so far as "row:col:X" or "row:col:O" strings."""
        return list(self._history)

    @property
    def board_state(self):
        return self._board.state()

    def start_game(self, vs_ai, ai_difficulty):
        """Choose the mode and difficulty, then start a fresh game."""
        with self._lock:
            self._vs_ai = bool(vs_ai)
            self._ai_difficulty = ai_difficulty
            self.reset_game()

    def reset_game(self):
        """Clear the board and history; X moves first."""
        with self._lock:
            self.ai_player.cancel()
            self._board.reset()
            self._current_player = PLAYER_X
            self._history.clear()
            self._notify_player()

    def handle_player_move(self, row, col):
        """Play the current player at (row, col); False if the move is not allowed."""
        with self._lock:
            if not self._place(row, col):
                return False
            if self._finish_if_over():
                return True
            self._switch_player()
            if self._vs_ai and self._current_player == PLAYER_O:
                self.ai_player.make_move(self._board, self._ai_difficulty)
            return True

    def apply_ai_move(self, move):
        """Play the computer's chosen (row, col) for the current player."""
        if move is None:
            return
        row, col = move
        with self._lock:
            if self._place(row, col) and not self._finish_if_over():
                self._switch_player()

    def winner(self):
        """The winning player, EMPTY for a draw, or IN_PROGRESS (-2)."""
        with self._lock:
            won = self._board.check_win()
            if won != EMPTY:
                return won
            if self._board.is_full():
                return EMPTY
            return IN_PROGRESS

    def _place(self, row, col):
        player = self._current_player
        if not self._board.make_move(row, col, player):
            return False
        self._history.append(f"{row}:{col}:{_mark(player)}")
        if self.on_board_changed is not None:
            self.on_board_changed(row, col, player)
        return True

    def _finish_if_over(self):
        won = self._board.check_win()
        if won != EMPTY:
            self._end_game(won)
            return True
        if self._board.is_full():
            self._end_game(EMPTY)
            return True
        return False

    def _end_game(self, winner):
        if winner == PLAYER_X:
            result = "Player X wins!"
        elif winner == PLAYER_O:
            result = "AI wins!" if self._vs_ai else "Player O wins!"
        else:
            result = "Draw"
        if self.on_game_ended is not None:
            self.on_game_ended(result, list(self._history))

    def _switch_player(self):
        self._current_player = PLAYER_O if self._current_player == PLAYER_X else PLAYER_X
        self._notify_player()

    def _notify_player(self):
        if self.on_player_changed is not None:
            self.on_player_changed(self._current_player)