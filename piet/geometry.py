"""
Direction pointer and codel chooser geometry.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple

Coord = Tuple[int, int]


class Rotation(Enum):
    """Codel chooser / turning sense."""
    COUNTERCLOCKWISE = 0
    CLOCKWISE = 1

    def flip(self) -> 'Rotation':
        if self is Rotation.CLOCKWISE:
            return Rotation.COUNTERCLOCKWISE
        return Rotation.CLOCKWISE


# Unit vectors, clockwise order starting at Up
_VECTORS = [(0, -1), (1, 0), (0, 1), (-1, 0)]


class Direction(Enum):
    """Direction pointer. Values follow the clockwise cycle."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def vector(self) -> Coord:
        return _VECTORS[self.value]

    @property
    def horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    def turn(self, rotation: Rotation, times: int = 1) -> 'Direction':
        """Return the direction after `times` quarter-turns."""
        sign = 1 if rotation is Rotation.CLOCKWISE else -1
        return Direction((self.value + sign * times) % 4)

    def step(self, xy: Coord, size: Tuple[int, int]) -> Optional[Coord]:
        """Neighbor of xy in this direction, or None if it falls off the grid."""
        dx, dy = self.vector
        x, y = xy[0] + dx, xy[1] + dy
        w, h = size
        if 0 <= x < w and 0 <= y < h:
            return x, y
        return None

    def axis(self, xy: Coord) -> int:
        """Coordinate component this direction moves along."""
        return xy[0] if self.horizontal else xy[1]

    def extremal(self, coords: Iterable[Coord]) -> list:
        """
        All coordinates lying furthest in this direction.

        Furthest means max along the axis for Right/Down and min for Left/Up.
        """
        coords = list(coords)
        if not coords:
            raise ValueError("No coordinates to choose from")
        values = [self.axis(c) for c in coords]
        if self in (Direction.RIGHT, Direction.DOWN):
            best = max(values)
        else:
            best = min(values)
        return [c for c, v in zip(coords, values) if v == best]


NESW = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
