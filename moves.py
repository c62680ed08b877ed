from enum import Enum
from typing import List, Optional

from geometry import Coord


class Move(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    def __str__(self) -> str:
        return self.value

    @property
    def vector(self):
        return DIRECTION_VECTORS[self]

    def to_coord(self, head: Coord) -> Optional[Coord]:
        """Cell reached by moving one step from head, None if it would go below zero"""
        dx, dy = self.vector
        x, y = head.x + dx, head.y + dy
        if x < 0 or y < 0:
            return None
        return Coord(x, y)

    @classmethod
    def from_coord(cls, head: Coord, coord: Coord) -> Optional['Move']:
        """Direction whose unit step from head lands on coord.

        Staying put, diagonals and anything further than one cell away have
        no direction and give None.
        """
        offset = (coord.x - head.x, coord.y - head.y)
        for move in cls:
            if move.vector == offset:
                return move
        return None

    @classmethod
    def all(cls) -> List['Move']:
        return [cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT]


DIRECTION_VECTORS = {
    Move.UP: (0, 1),
    Move.DOWN: (0, -1),
    Move.LEFT: (-1, 0),
    Move.RIGHT: (1, 0),
}
