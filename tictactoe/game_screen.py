"""The game board page: cells, status line, live play and replay of saved games."""

from dataclasses import dataclass

from .board import PLAYER_X, SIZE
from .game_logic import GameLogic

X_STYLE = "color: #3498db;"
O_STYLE = "color: #e74c3c;"
REPLAY_INTERVAL = 0.8

STATUS_X_TURN = "Player X's Turn"
STATUS_O_TURN = "Player O's Turn"
STATUS_AI_TURN = "AI's Turn"
STATUS_REPLAYING = "Replaying Game..."
STATUS_REPLAY_RESTARTED = "Replaying Game (Restarted)..."


@dataclass
class CellView:
    """What one board button shows: its mark, its style and whether it takes clicks."""

    text: str = ""
    style: str = ""
    enabled: bool = True

    def clear(self):
        self.text = ""
        self.style = ""
        self.enabled = True


def _style_for(mark):
    return X_STYLE if mark == "X" else O_STYLE


class GameScreen:
    """State of the game board page, independent of any widget toolkit.

    ``on_message(title, text, is_warning)`` is called where a dialog is shown;
    ``on_game_ended(result, moves)`` is called when a live game finishes.
    While ``replay_active`` is true the host calls :meth:`replay_next_move`
    every ``REPLAY_INTERVAL`` seconds.
    """

    def __init__(self, on_message=None, on_game_ended=None, ai_delay=0.5, rng=None):
        self.on_message = on_message
        self.on_game_ended = on_game_ended
        self.cells = [[CellView() for _ in range(SIZE)] for _ in range(SIZE)]
        self.status = STATUS_X_TURN
        self.replay_mode = False
        self.replay_active = False
        self.replay_moves = []
        self.replay_index = 0
        self.logic = GameLogic(
            on_board_changed=self._on_board_changed,
            on_game_ended=self._on_game_ended,
            on_player_changed=self._on_player_changed,
            ai_delay=ai_delay,
            rng=rng,
        )

    # --- live games -------------------------------------------------------

    def start_vs_ai(self, difficulty):
        """Start a game against the computer at ``difficulty`` ("easy" or "hard")."""
        self.replay_mode = False
        self.logic.start_game(True, difficulty)
        self._reset_cells()
        self.status = STATUS_X_TURN

    def start_vs_player(self):
        """Start a game between two people."""
        self.replay_mode = False
        self.logic.start_game(False, "")
        self._reset_cells()
        self.status = STATUS_X_TURN

    def click(self, row, col):
        """Handle a click on a cell; return True if a move was played."""
        view = self.cell(row, col)
        if not view.enabled or view.text:
            return False
        if self.replay_mode:
            self._message(
                "Replay Active",
                "Cannot make moves during a game replay. Please use Reset or Back.",
                True,
            )
            return False
        return self.logic.handle_player_move(row, col)

    def reset(self):
        """Restart the replay from its first move, or clear the live game."""
        if self.replay_mode:
            self.replay_active = False
            self.replay_index = 0
            self._reset_cells()
            self._disable_cells()
            self.replay_active = True
            self.status = STATUS_REPLAY_RESTARTED
        else:
            self.logic.reset_game()
            self._reset_cells()
            self.status = STATUS_X_TURN

    def back(self):
        """Leave the page, stopping any running replay."""
        if self.replay_active:
            self.replay_active = False
            self.replay_moves = []
            self.replay_index = 0
        self.replay_mode = False

    # --- replay -----------------------------------------------------------

    def start_replay(self, moves):
        """Begin replaying ``moves`` ("r:c:P" entries, as a list or comma-joined).

        Returns False and reports a warning if there is nothing to replay.
        """
        if isinstance(moves, str):
            entries = moves.split(",") if moves else []
        else:
            entries = list(moves)
        if not entries:
            self._message("Replay Game", "Failed to load game moves for replay.", True)
            return False
        self.replay_mode = True
        self.replay_moves = entries
        self._reset_cells()
        self._disable_cells()
        self.replay_index = 0
        self.replay_active = True
        self.status = STATUS_REPLAYING
        return True

    def replay_next_move(self):
        """Show the next recorded move; return False once the replay has ended."""
        if self.replay_index < len(self.replay_moves):
            parts = self.replay_moves[self.replay_index].split(":")
            if len(parts) < 3:
                raise ValueError(f"malformed move: {self.replay_moves[self.replay_index]!r}")
            row, col, mark = int(parts[0]), int(parts[1]), parts[2]
            if 0 <= row < SIZE and 0 <= col < SIZE:
                view = self.cells[row][col]
                view.text = mark
                view.style = _style_for(mark)
            self.replay_index += 1
            return True
        self.replay_active = False
        self._message("Replay Finished", "The game replay has concluded.", False)
        self._disable_cells()
        return False

    # --- access -----------------------------------------------------------

    def cell(self, row, col):
        """Return the view of the cell at (row, col)."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"no cell at ({row}, {col})")
        return self.cells[row][col]

    # --- game logic listeners ---------------------------------------------

    def _on_board_changed(self, row, col, player):
        view = self.cells[row][col]
        mark = "X" if player == PLAYER_X else "O"
        view.text = mark
        view.style = _style_for(mark)
        view.enabled = False

    def _on_game_ended(self, result, moves):
        if not self.replay_mode:
            self._message("Game Over", result, False)
            if self.on_game_ended is not None:
                self.on_game_ended(result, list(moves))
        self._disable_cells()

    def _on_player_changed(self, player):
        if self.replay_mode:
            return
        if player == PLAYER_X:
            self.status = STATUS_X_TURN
            self._enable_cells()
        elif self.logic.vs_ai:
            self.status = STATUS_AI_TURN
            self._disable_cells()
        else:
            self.status = STATUS_O_TURN
            self._enable_cells()

    # --- helpers ----------------------------------------------------------

    def _all_cells(self):
        return (view for row in self.cells for view in row)

    def _reset_cells(self):
        for view in self._all_cells():
            view.clear()

    def _disable_cells(self):
        for view in self._all_cells():
            view.enabled = False

    def _enable_cells(self):
        if self.replay_mode:
            self._disable_cells()
            return
        for view in self._all_cells():
            view.enabled = not view.text

    def _message(self, title, text, is_warning):
        if self.on_message is not None:
            self.on_message(title, text, is_warning)