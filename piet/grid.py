"""
Dense 2D grid with row-major storage and bounds-checked access.
"""

from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')

Coord = Tuple[int, int]


def iter_2d(width: int, height: int) -> Iterator[Coord]:
    """Yield (x, y) coordinates row by row."""
    for y in range(height):
        for x in range(width):
            yield x, y


class Grid(Generic[T]):
    """Fixed-size 2D array indexed by (x, y)."""

    def __init__(self, width: int, height: int, fill: T):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid grid size: {width}x{height}")
        self.width = width
        self.height = height
        self._buf: List[T] = [fill] * (width * height)

    @classmethod
    def from_fn(cls, width: int, height: int,
                fn: Callable[[int, int], T]) -> 'Grid[T]':
        """Build a grid by calling fn(x, y) for every cell."""
        grid = cls.__new__(cls)
        grid.width = width
        grid.height = height
        grid._buf = [fn(x, y) for x, y in iter_2d(width, height)]
        return grid

    @classmethod
    def from_rows(cls, rows: List[List[T]]) -> 'Grid[T]':
        """Build a grid from a list of equally sized rows."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("Rows must all have the same length")
        return cls.from_fn(width, height, lambda x, y: rows[y][x])

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[T]:
        """Return the cell value, or None when (x, y) is off-grid."""
        if not self.in_bounds(x, y):
            return None
        return self._buf[y * self.width + x]

    def __getitem__(self, xy: Coord) -> T:
        x, y = xy
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinate out of range: {xy}")
        return self._buf[y * self.width + x]

    def __setitem__(self, xy: Coord, value: T) -> None:
        x, y = xy
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinate out of range: {xy}")
        self._buf[y * self.width + x] = value

    def __iter__(self) -> Iterator[Tuple[Coord, T]]:
        """Iterate ((x, y), value) pairs in row-major order."""
        for xy in iter_2d(self.width, self.height):
            yield xy, self[xy]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size() == other.size() and self._buf == other._buf

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
