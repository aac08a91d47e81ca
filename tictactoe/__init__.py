"""Terminal tic-tac-toe with a minimax opponent, in-memory game history and replays."""

__version__ = "1.0.0"
__all__ = ["__version__"]