"""
push directions and the lines they split the board into
"""

# (dx, dy): dx steps along columns, dy along rows
DIRECTIONS = {
    'up_left': (-1, -1),
    'up': (0, -1),
    'up_right': (1, -1),
    'left': (-1, 0),
    'right': (1, 0),
    'down_left': (-1, 1),
    'down': (0, 1),
    'down_right': (1, 1),
}

# fixed order used for action indices
DIRECTION_NAMES = list(DIRECTIONS)


def resolve_direction(direction):
    """
    turn a direction name or (dx, dy) pair into a validated (dx, dy) tuple
    """
    if isinstance(direction, str):
        if direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction}. Must be one of {', '.join(DIRECTIONS)}")
        return DIRECTIONS[direction]

    dx, dy = direction
    if dx not in (-1, 0, 1) or dy not in (-1, 0, 1) or (dx == 0 and dy == 0):
        raise ValueError(f"Invalid direction vector: {(dx, dy)}")
    return dx, dy


def build_lines(size, direction):
    """
    split a size x size board into the lines a push in `direction` works on

    every cell whose forward neighbour falls off the board starts a line; the
    line then walks backwards (against the push) until it leaves the board.
    index 0 of each line is the cell the tiles pile up against.

    returns:
        list of lines, each a list of (row, col) pairs
    """
    dx, dy = resolve_direction(direction)

    def inside(x, y):
        return 0 <= x < size and 0 <= y < size

    lines = []
    for y in range(size):
        for x in range(size):
            if inside(x + dx, y + dy):
                continue

            line = []
            cur_x, cur_y = x, y
            while inside(cur_x, cur_y):
                line.append((cur_y, cur_x))
                cur_x -= dx
                cur_y -= dy
            lines.append(line)

    return lines
