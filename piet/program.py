"""
Segmentation of a classified codel grid into color blocks.

The resulting Program holds the block list and a grid of codels where each
cell is WHITE, BLACK or the integer id of the block it belongs to.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set, Tuple

from PIL import Image

from .classify import BLACK, WHITE, classify_image
from .colors import Color
from .geometry import NESW, Direction, Rotation
from .grid import Coord, Grid, iter_2d

logger = logging.getLogger(__name__)

# Program grid cell: WHITE, BLACK, or the id (>= 0) of the owning block
Codel = int


@dataclass(frozen=True)
class ColorBlock:
    """Maximal 4-connected region of one color."""
    color: Color
    codels: FrozenSet[Coord]

    @property
    def area(self) -> int:
        return len(self.codels)

    def find_edge(self, dp: Direction, cc: Rotation) -> Coord:
        """
        Exit codel for the given direction pointer and codel chooser.

        First keep the codels furthest along dp, then among those take the
        one furthest along dp turned once by cc. Ties are settled by the
        coordinates alone, so the result never depends on set order.
        """
        edge = dp.extremal(self.codels)
        corner = dp.turn(cc).extremal(edge)
        return corner[0]


@dataclass(frozen=True)
class Program:
    blocks: Tuple[ColorBlock, ...]
    grid: Grid  # Grid[Codel]

    def size(self) -> Tuple[int, int]:
        return self.grid.size()

    def codel(self, xy: Coord) -> Codel:
        """Grid cell at xy; off-grid reads as BLACK."""
        value = self.grid.get(*xy)
        return BLACK if value is None else value

    def block_at(self, xy: Coord) -> Optional[ColorBlock]:
        """Block containing xy, or None for white/black/off-grid."""
        value = self.codel(xy)
        if value >= 0:
            return self.blocks[value]
        return None

    def describe(self) -> List[str]:
        """One line per block: id, color, area and top-left codel."""
        lines = []
        for block_id, block in enumerate(self.blocks):
            x, y = min(block.codels, key=lambda c: (c[1], c[0]))
            lines.append(f"#{block_id:<4} {str(block.color):<14} area={block.area:<6} at ({x}, {y})")
        return lines


# Flood fill

def flood_fill(raw: Grid, start: Coord) -> Set[Coord]:
    """
    Collect every codel 4-connected to start that holds the same value.

    Uses an explicit work list so large uniform regions do not hit the
    recursion limit.
    """
    value = raw[start]
    size = raw.size()
    to_visit = [start]
    visited = {start}

    while to_visit:
        xy = to_visit.pop()
        for direction in NESW:
            neighbor = direction.step(xy, size)
            if neighbor is None or neighbor in visited:
                continue
            if raw[neighbor] == value:
                visited.add(neighbor)
                to_visit.append(neighbor)

    return visited


# Segmentation

def segment(raw: Grid) -> Program:
    """Partition a grid of raw codels into color blocks."""
    w, h = raw.size()
    grid = Grid(w, h, WHITE)
    blocks: List[ColorBlock] = []

    for xy in iter_2d(w, h):
        if grid[xy] != WHITE:
            # Already claimed by an earlier flood fill
            continue

        value = raw[xy]
        if value == BLACK:
            grid[xy] = BLACK
            continue
        if not isinstance(value, Color):
            continue

        codels = flood_fill(raw, xy)
        block_id = len(blocks)
        for coord in codels:
            grid[coord] = block_id
        blocks.append(ColorBlock(value, frozenset(codels)))

    logger.debug("Segmented %dx%d grid into %d blocks", w, h, len(blocks))
    return Program(tuple(blocks), grid)


def compile_image(img: Image.Image, codel_size: int = 1) -> Program:
    """Classify and segment a decoded image."""
    return segment(classify_image(img, codel_size))
