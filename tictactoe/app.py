"""Terminal front end: play games, keep their history and replay them."""

import argparse
import sys
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime

from .board import PLAYER_O, SIZE
from .game_screen import REPLAY_INTERVAL, GameScreen
from .messagebox import show_styled_message

WINDOW_TITLE = "tic_tac_toe"
NO_HISTORY = "No game history available."
DIFFICULTIES = ("easy", "hard")
_AI_GRACE = 2.0
_POLL = 0.01

HELP_TEXT = """\
Commands:
  <row> <col>         play a move (rows and columns 0-2), e.g. "1 2" or "12"
  new [ai [easy|hard] | pvp]
                      start a game against the computer or another person
  reset               restart the current game or replay
  back                leave the current game or replay
  history             list finished games, newest first
  replay <n>          replay game number n from the history
  delete <n>          delete game number n from the history
  board               show the board again
  help                show this text
  quit                leave
"""


@dataclass
class _GameRecord:
    opponent: str
    result: str
    moves: list
    played_at: datetime = field(default_factory=datetime.now)

    def describe(self):
        return f"vs {self.opponent} | Result: {self.result} | On: {self.played_at:%Y-%m-%d %H:%M}"


class TicTacToeWindow:
    """The game page in a terminal, with an in-memory game history."""

    title = WINDOW_TITLE

    def __init__(self, output=None, ai_delay=0.5, replay_interval=REPLAY_INTERVAL, rng=None):
        self.output = sys.stdout if output is None else output
        self.ai_delay = ai_delay
        self.replay_interval = replay_interval
        self.history = []
        self._finished = threading.Event()
        self._write_lock = threading.Lock()
        self.screen = GameScreen(
            on_message=self._message,
            on_game_ended=self.on_game_ended,
            ai_delay=ai_delay,
            rng=rng,
        )

    # --- planned interface -------------------------------------------------

    def refresh(self):
        """Draw the board and status line; return the drawn text."""
        rows = [
            " " + " | ".join(self.screen.cell(r, c).text or " " for c in range(SIZE)) + " "
            for r in range(SIZE)
        ]
        separator = "\n" + "+".join(["---"] * SIZE) + "\n"
        text = separator.join(rows) + "\n" + self.screen.status + "\n"
        self._write(text)
        return text

    def on_cell_clicked(self, row, col):
        """Play at (row, col), wait for the computer's reply, redraw; True if played."""
        played = self.screen.click(row, col)
        if played:
            self._wait_for_ai()
        self.refresh()
        return played

    def on_game_ended(self, result, moves):
        """Store a finished game in the history."""
        opponent = "AI" if self.screen.logic.vs_ai else "Player O"
        self.history.append(_GameRecord(opponent, result, list(moves)))
        self._finished.set()

    # --- commands ----------------------------------------------------------

    def _new_game(self, vs_ai, difficulty="hard"):
        self._finished.clear()
        if vs_ai:
            self.screen.start_vs_ai(difficulty)
        else:
            self.screen.start_vs_player()
        self.refresh()

    def _execute(self, line):
        """Run one command line; return False when the user quits."""
        words = line.split()
        if not words:
            return True
        command = words[0].lower()
        if command in ("quit", "exit", "q"):
            return False
        handlers = {
            "help": lambda args: self._write(HELP_TEXT),
            "new": self._command_new,
            "reset": lambda args: self._command_reset(),
            "back": lambda args: self._command_back(),
            "history": lambda args: self._command_history(),
            "replay": self._command_replay,
            "delete": self._command_delete,
            "board": lambda args: self.refresh(),
        }
        handler = handlers.get(command)
        if handler is not None:
            handler(words[1:])
        else:
            self._command_move(words)
        return True

    def _command_move(self, words):
        if len(words) == 1 and len(words[0]) == 2:
            parts = list(words[0])
        elif len(words) == 2:
            parts = words
        else:
            self._message("Unknown Command", f"Unknown command: {' '.join(words)}. Type 'help'.", True)
            return
        try:
            row, col = (int(part) for part in parts)
        except ValueError:
            self._message("Unknown Command", f"Unknown command: {' '.join(words)}. Type 'help'.", True)
            return
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            self._message("Invalid Move", f"Rows and columns run from 0 to {SIZE - 1}.", True)
            return
        self.on_cell_clicked(row, col)

    def _command_new(self, args):
        mode = args[0].lower() if args else "ai"
        if mode == "pvp":
            self._new_game(False)
        elif mode == "ai":
            difficulty = args[1].lower() if len(args) > 1 else "hard"
            if difficulty not in DIFFICULTIES:
                self._message("New Game", f"Unknown difficulty: {difficulty}.", True)
                return
            self._new_game(True, difficulty)
        else:
            self._message("New Game", f"Unknown game mode: {mode}.", True)

    def _command_reset(self):
        if self.screen.replay_mode:
            self.screen.reset()
            self._play_replay()
        else:
            self._finished.clear()
            self.screen.reset()
            self.refresh()

    def _command_back(self):
        self.screen.back()
        self._write("Back at the main menu. Type 'new' to play or 'history' for past games.\n")

    def _command_history(self):
        if not self.history:
            self._write(NO_HISTORY + "\n")
            return
        for number, record in enumerate(reversed(self.history), start=1):
            self._write(f"{number}. {record.describe()}\n")

    def _pick_record(self, args, action):
        try:
            number = int(args[0]) if args else 0
        except ValueError:
            number = 0
        if not 1 <= number <= len(self.history):
            self._message("Error" if action == "delete" else "Replay Game",
                          f"Please select a game to {action}.", True)
            return None
        return len(self.history) - number

    def _command_replay(self, args):
        index = self._pick_record(args, "replay")
        if index is None:
            return
        if self.screen.start_replay(self.history[index].moves):
            self._play_replay()

    def _command_delete(self, args):
        index = self._pick_record(args, "delete")
        if index is None:
            return
        del self.history[index]
        self._message("Success", "Game history deleted.", False)
        self._command_history()

    # --- helpers -----------------------------------------------------------

    def _play_replay(self):
        self.refresh()
        while True:
            if self.replay_interval > 0:
                time.sleep(self.replay_interval)
            if not self.screen.replay_next_move():
                break
            self.refresh()

    def _wait_for_ai(self):
        logic = self.screen.logic
        deadline = time.monotonic() + max(self.ai_delay or 0, 0) + _AI_GRACE
        while (
            logic.vs_ai
            and logic.current_player == PLAYER_O
            and not self._finished.is_set()
            and time.monotonic() < deadline
        ):
            time.sleep(_POLL)

    def _message(self, title, text, is_warning):
        with self._write_lock:
            show_styled_message(self.output, title, text, is_warning)

    def _write(self, text):
        with self._write_lock:
            self.output.write(text)
            flush = getattr(self.output, "flush", None)
            if flush is not None:
                flush()


def _non_negative(value):
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def parse_args(argv=None):
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play tic-tac-toe in the terminal.")
    parser.add_argument("--mode", choices=("ai", "pvp"), default="ai",
                        help="play against the computer or another person")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default="hard",
                        help="computer strength")
    parser.add_argument("--ai-delay", type=_non_negative, default=0.5,
                        help="seconds the computer takes to move")
    parser.add_argument("--replay-interval", type=_non_negative, default=REPLAY_INTERVAL,
                        help="seconds between moves in a replay")
    return parser.parse_args(argv)


def main(argv=None):
    """Run the game reading commands from standard input."""
    args = parse_args(argv)
    window = TicTacToeWindow(ai_delay=args.ai_delay, replay_interval=args.replay_interval)
    window._write(f"{WINDOW_TITLE}\nType 'help' for commands.\n")
    window._new_game(args.mode == "ai", args.difficulty)
    try:
        for line in sys.stdin:
            if not window._execute(line):
                break
    finally:
        window.screen.logic.ai_player.cancel()
    return 0


if __name__ == "__main__":
    sys.exit(main())