# tictactoe

Tic-tac-toe in the terminal. Play against another person at the same
keyboard or against the computer, which has two levels:

- **easy** picks a random free square;
- **hard** takes an immediate win if there is one, otherwise blocks
  your immediate win, and otherwise chooses by a full minimax search
  with alpha-beta pruning.

X always moves first; against the computer you are X and the computer
is O. Every move is recorded as `row:col:player` (for example `0:2:X`),
finished games are kept in a history, and any of them can be replayed
move by move.

## Installing

```
pip install .
```

Only the Python standard library is used.

## Playing

```
tictactoe
```

A game against the hard computer starts at once. Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--mode ai\|pvp` | `ai` | play the computer or another person |
| `--difficulty easy\|hard` | `hard` | computer strength |
| `--ai-delay SECONDS` | `0.5` | how long the computer takes to move |
| `--replay-interval SECONDS` | `0.8` | pause between moves in a replay |

Commands are read one per line from standard input:

```
<row> <col>         play a move (rows and columns 0-2), e.g. "1 2" or "12"
new [ai [easy|hard] | pvp]
                    start a game against the computer or another person
reset               restart the current game or replay
back                leave the current game or replay
history             list finished games, newest first
replay <n>          replay game number n from the history
delete <n>          delete game number n from the history
board               show the board again
help                show the command list
quit                leave (also "exit" or "q")
```

After each move the board and a status line ("Player X's Turn",
"Player O's Turn" or "AI's Turn") are drawn. When a game ends a framed
notice shows the result — `Player X wins!`, `Player O wins!`,
`AI wins!` or `Draw` — and the game is added to the history as
`vs <opponent> | Result: <result> | On: <date and time>`.

A replay plays through all its moves at the replay interval. While a
replay is on the board, moves are not accepted; `reset` plays it again
from the start, and `back` or `new` leaves it.

## What it does not do

- There are no user accounts: no sign-up, log-in or password reset.
- The game history lives in memory only. It is empty when the program
  starts and is lost when it quits.
- There is no graphical window; everything happens in the terminal.

## Using the pieces in your own code

The rules, the computer opponent and the turn handling work without the
terminal front end.

`tictactoe.board.Board` is the 3x3 grid, with cells holding `EMPTY`
(0), `PLAYER_X` (1) or `PLAYER_O` (-1). It has `make_move(row, col,
player)` (False when off the board or occupied), `cell(row, col)`,
`is_full()`, `check_win()` (the winner or `EMPTY`), `reset()` and
`state()` (a copy of the grid as a list of rows).

`tictactoe.ai_player` offers `find_best_move(state)` and
`find_random_move(state, rng=None)`, which return a `(row, col)` tuple
for O, or `None` on a full board, as well as `evaluate_board`,
`has_moves_left` and `minimax`.

```python
from tictactoe.board import Board, PLAYER_O, PLAYER_X
from tictactoe.ai_player import find_best_move

board = Board()
board.make_move(0, 0, PLAYER_O)
board.make_move(1, 0, PLAYER_X)
board.make_move(0, 1, PLAYER_O)
board.make_move(1, 1, PLAYER_X)
print(find_best_move(board.state()))   # (0, 2)
```

`tictactoe.game_logic.GameLogic` runs one game. It takes optional
callables `on_board_changed(row, col, player)`, `on_game_ended(result,
moves)` and `on_player_changed(player)`. Against the computer, O's
reply is chosen on a timer thread after `ai_delay` seconds; with
`ai_delay=0` it is made at once, inside `handle_player_move`.

```python
from tictactoe.game_logic import GameLogic

game = GameLogic(ai_delay=0)
game.start_game(False, "")          # two people
game.handle_player_move(0, 0)       # X
game.handle_player_move(1, 0)       # O
game.handle_player_move(0, 1)       # X
game.handle_player_move(1, 1)       # O
game.handle_player_move(0, 2)       # X completes the top row
print(game.winner())                # 1 (PLAYER_X)
print(game.move_history)            # ['0:0:X', '1:0:O', '0:1:X', '1:1:O', '0:2:X']
```

`handle_player_move` returns `False` for a move off the board or onto
an occupied square, and the turn does not pass. `winner()` returns the
winning player, `EMPTY` for a draw, or `IN_PROGRESS` (-2).

`tictactoe.game_screen.GameScreen` holds the state of the board page
without any display: the nine `CellView`s (text, style, enabled), the
status line, live play through `click`, and replay through
`start_replay` and `replay_next_move`. `tictactoe.messagebox.
show_styled_message(parent, title, text, is_warning)` writes a framed
notice to a text stream.

## Running the tests

```
pip install .[test]
pytest
```