"""Directions to move in the maze and the door bits they map to."""
from enum import IntEnum
from typing import Tuple


class Direction(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


# Every real direction, in the canonical order used for traversal
ALL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)

INVALID_MASK = 0xFF

_DY_DX = {
    Direction.NONE: (0, 0),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_DOOR_MASKS = {
    Direction.UP: 1,
    Direction.DOWN: 2,
    Direction.LEFT: 4,
    Direction.RIGHT: 8,
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def to_dy_dx(d: Direction) -> Tuple[int, int]:
    """Convert a direction to a (row, col) offset."""
    return _DY_DX.get(d, (0, 0))


def to_door_mask(d: Direction) -> int:
    """Bit for the door in direction d. NONE gets INVALID_MASK."""
    return _DOOR_MASKS.get(d, INVALID_MASK)


def opposite(d: Direction) -> Direction:
    return _OPPOSITES.get(d, Direction.NONE)
