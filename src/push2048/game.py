"""
core game logic and mechanics
"""
import logging
import random
from typing import Protocol

from push2048.lines import DIRECTION_NAMES, build_lines, resolve_direction

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 4
START_VALUES = (2, 4)


class RandomSource(Protocol):
    """anything that hands out uniform ints in [start, stop), e.g. random.Random"""

    def randrange(self, start, stop): ...


class Grid:
    """N x N board of tile values (0 = empty) plus the game over flag"""

    def __init__(self, size=DEFAULT_SIZE):
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}")
        self.size = size
        self.cells = [[0 for _ in range(size)] for _ in range(size)]
        self.game_over = False

    @classmethod
    def from_rows(cls, rows):
        """build a grid from explicit values (rows must form a square)"""
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise ValueError("Grid rows must form a non-empty square")
        grid = cls(size)
        grid.cells = [list(row) for row in rows]
        return grid

    def reset(self):
        """clear every cell and the game over flag"""
        for row in self.cells:
            for j in range(self.size):
                row[j] = 0
        self.game_over = False

    def copy(self):
        grid = Grid.from_rows(self.cells)
        grid.game_over = self.game_over
        return grid

    def empty_cells(self):
        """(row, col) of every empty cell, row-major"""
        return [
            (i, j)
            for i in range(self.size)
            for j in range(self.size)
            if self.cells[i][j] == 0
        ]

    def max_tile(self):
        return max(max(row) for row in self.cells)

    def __getitem__(self, pos):
        i, j = pos
        return self.cells[i][j]

    def __setitem__(self, pos, value):
        i, j = pos
        self.cells[i][j] = value

    def __repr__(self):
        return f"Grid(size={self.size}, cells={self.cells}, game_over={self.game_over})"


def _is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def is_terminal(grid):
    """
    check if no move can change the board any more

    the board is stuck when it is full and no cell has an equal value among
    its (up to) 8 neighbours. does not touch grid.game_over.
    """
    size = grid.size
    cells = grid.cells
    for i in range(size):
        for j in range(size):
            value = cells[i][j]
            if value == 0:
                return False

            for i2 in range(max(i - 1, 0), min(i + 2, size)):
                for j2 in range(max(j - 1, 0), min(j + 2, size)):
                    if (i2, j2) != (i, j) and cells[i2][j2] == value:
                        return False

    return True


def spawn_tile(grid, rng):
    """
    add a random tile (2 or 4, equally likely) to a random empty cell

    returns the (row, col) that was filled, or None if the board was full.
    """
    empty_cells = grid.empty_cells()

    if not empty_cells:
        # callers check for game over after every spawn, so this should not happen
        logger.warning("spawn requested on a full %dx%d board; flagging game over", grid.size, grid.size)
        grid.game_over = True
        return None

    row, col = empty_cells[rng.randrange(0, len(empty_cells))]
    grid.cells[row][col] = START_VALUES[rng.randrange(0, len(START_VALUES))]
    logger.debug("spawned %d at (%d, %d)", grid.cells[row][col], row, col)

    grid.game_over = is_terminal(grid)
    return row, col


def _push_line(cells, line):
    """
    compact and merge one line towards index 0, in place

    i is the settled position, j the next occupied cell behind it. a tile
    slides into an empty i; two tiles merge when their sum is a power of two.
    i advances after every merge attempt so each position merges at most once.
    """
    changed = False
    i, j = 0, 1
    while i < len(line):
        while j == i or (j < len(line) and cells[line[j][0]][line[j][1]] == 0):
            j += 1

        if j == len(line):
            break

        ti, tj = line[i], line[j]
        if cells[ti[0]][ti[1]] == 0:
            cells[ti[0]][ti[1]] = cells[tj[0]][tj[1]]
            cells[tj[0]][tj[1]] = 0
            changed = True
            continue

        merged = cells[ti[0]][ti[1]] + cells[tj[0]][tj[1]]
        if _is_power_of_two(merged):
            cells[ti[0]][ti[1]] = merged
            cells[tj[0]][tj[1]] = 0
            changed = True

        i += 1

    return changed


def push(grid, direction):
    """
    push every tile in `direction` and merge

    args:
        grid: board to change in place
        direction: (dx, dy) pair or direction name, diagonals included

    returns:
        True if any cell changed
    """
    moved = False
    for line in build_lines(grid.size, direction):
        if _push_line(grid.cells, line):
            moved = True
    return moved


class Game2048:
    def __init__(self, size=DEFAULT_SIZE, rng=None):
        """initialize a size x size game and place the two starting tiles"""
        self.grid = Grid(size)
        self.rng = rng if rng is not None else random.Random()
        self.new_game()

    @property
    def size(self):
        return self.grid.size

    @property
    def board(self):
        """current tile values, row by row (read only for renderers)"""
        return self.grid.cells

    @property
    def game_over(self):
        return self.grid.game_over

    def max_tile(self):
        return self.grid.max_tile()

    def new_game(self):
        """reset the board and add two starting tiles"""
        self.grid.reset()
        spawn_tile(self.grid, self.rng)
        spawn_tile(self.grid, self.rng)
        logger.debug("new %dx%d game started", self.size, self.size)

    def push(self, direction):
        """
        make a move in the specified direction

        returns True when the board changed and needs a redraw. moves are
        ignored once the game is over.
        """
        direction = resolve_direction(direction)
        if self.grid.game_over:
            return False

        if not push(self.grid, direction):
            return False

        spawn_tile(self.grid, self.rng)
        if is_terminal(self.grid):
            self.grid.game_over = True
            logger.debug("game over, max tile %d", self.max_tile())

        return True

    def can_move(self, direction):
        """check if a move would change the board, without making it"""
        return push(self.grid.copy(), direction)

    def valid_moves(self):
        if self.grid.game_over:
            return []
        return [name for name in DIRECTION_NAMES if self.can_move(name)]

    def print_board(self):
        """print the board to console (for testing)"""
        print(format_board(self.grid))


def format_board(grid):
    """board as a plain text table"""
    width = max(4, len(str(grid.max_tile())))
    border = "-" * ((width + 1) * grid.size + 1)
    lines = [border]
    for row in grid.cells:
        lines.append("|" + "".join(f"{cell if cell else '':>{width}}|" for cell in row))
    lines.append(border)
    if grid.game_over:
        lines.append("GAME OVER!")
    return "\n".join(lines)
