"""
2048 with eight push directions
"""
from push2048.game import (
    DEFAULT_SIZE,
    Game2048,
    Grid,
    RandomSource,
    format_board,
    is_terminal,
    push,
    spawn_tile,
)
from push2048.lines import DIRECTION_NAMES, DIRECTIONS, build_lines, resolve_direction

__all__ = [
    "DEFAULT_SIZE",
    "DIRECTIONS",
    "DIRECTION_NAMES",
    "Game2048",
    "Grid",
    "RandomSource",
    "build_lines",
    "format_board",
    "is_terminal",
    "push",
    "resolve_direction",
    "spawn_tile",
]
