"""World view of a generated cave grid."""

import math
import numpy as np
from typing import List, Optional, Tuple

from .cave import SOLID, find_start
from .vector import Vector2


class CaveMap:
    """
    Wraps a generated grid for the simulation driver.

    Coordinate convention: (x, y) for API, [y, x] for array indexing.
    World positions are continuous; cell (x, y) covers [x, x+1) x [y, y+1).
    """

    def __init__(self, grid: np.ndarray):
        self.grid = grid
        self.height, self.width = grid.shape

        # Boolean mask: True = wall (impassable)
        self.walls = (grid == SOLID)

        self.start: Optional[Tuple[int, int]] = find_start(grid)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        """Check if cell is within bounds and not a wall."""
        if not self.in_bounds(x, y):
            return False
        return not self.walls[y, x]

    def empty_cells(self) -> List[Tuple[int, int]]:
        """All walkable cells in x-major order."""
        xs_ys = np.argwhere(~self.walls.T)
        return [(int(x), int(y)) for x, y in xs_ys]

    def cell_of(self, position: Vector2) -> Tuple[int, int]:
        """Cell containing a world position."""
        return (math.floor(position.x), math.floor(position.y))

    @staticmethod
    def cell_centre(x: int, y: int) -> Vector2:
        return Vector2(x + 0.5, y + 0.5)

    def is_position_walkable(self, position: Vector2) -> bool:
        return self.is_walkable(*self.cell_of(position))
