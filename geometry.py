from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Coord:
    """A grid cell. (0, 0) is the bottom-left corner of the board."""
    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinates are non-negative, got ({self.x}, {self.y})")

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


def in_bounds(board, coord: Coord) -> bool:
    """Check if coord lies on the board"""
    return 0 <= coord.x < board.width and 0 <= coord.y < board.height


def manhattan_distance(a: Coord, b: Coord) -> int:
    """Calculate Manhattan distance between two cells"""
    return abs(a.x - b.x) + abs(a.y - b.y)


def select_toward(coords: Sequence[Coord], target: Coord) -> Coord:
    """Pick the coord closest to target, first one wins on ties"""
    if not coords:
        raise ValueError("select_toward needs at least one coord")
    return min(coords, key=lambda c: manhattan_distance(c, target))


def select_away(coords: Sequence[Coord], target: Coord) -> Coord:
    """Pick the coord farthest from target, first one wins on ties"""
    if not coords:
        raise ValueError("select_away needs at least one coord")
    return max(coords, key=lambda c: manhattan_distance(c, target))
