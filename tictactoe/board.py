"""The 3x3 tic-tac-toe board."""

EMPTY = 0
PLAYER_X = 1
PLAYER_O = -1
SIZE = 3

# Every line that wins the game, in the order they are checked:
# rows, columns, main diagonal, anti-diagonal.
LINES = (
    tuple(tuple((r, c) for c in range(SIZE)) for r in range(SIZE))
    + tuple(tuple((r, c) for r in range(SIZE)) for c in range(SIZE))
    + (
        tuple((i, i) for i in range(SIZE)),
        tuple((i, SIZE - 1 - i) for i in range(SIZE)),
    )
)


def _in_bounds(row, col):
    return 0 <= row < SIZE and 0 <= col < SIZE


class Board:
    """A 3x3 grid holding EMPTY, PLAYER_X or PLAYER_O in each cell."""

    EMPTY = EMPTY
    PLAYER_X = PLAYER_X
    PLAYER_O = PLAYER_O

    def __init__(self):
        self._cells = []
        self.reset()

    def reset(self):
        """Clear every cell."""
        self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def make_move(self, row, col, player):
        """Place ``player`` at (row, col); return False if out of bounds or occupied."""
        if _in_bounds(row, col) and self._cells[row][col] == EMPTY:
            self._cells[row][col] = player
            return True
        return False

    def cell(self, row, col):
        """Return the cell's value, or EMPTY for coordinates outside the board."""
        if _in_bounds(row, col):
            return self._cells[row][col]
        return EMPTY

    def is_full(self):
        """True when no cell is empty."""
        return all(value != EMPTY for row in self._cells for value in row)

    def check_win(self):
        """Return the winning player, or EMPTY if nobody has three in a line."""
        for line in LINES:
            first = self._cells[line[0][0]][line[0][1]]
            if first != EMPTY and all(self._cells[r][c] == first for r, c in line):
                return first
        return EMPTY

    def state(self):
        """Return a copy of the grid as a list of rows."""
        return [list(row) for row in self._cells]

    def __repr__(self):
        return f"Board({self._cells!r})"