"""
Cellular-automaton cave generation.

A cave is a 2D numpy array of small integers:
    EMPTY (0) = passable, SOLID (1) = wall, START (3) = spawn marker.

Coordinate convention: (x, y) for API, [y, x] for array indexing.

Generation seeds every cell at random and then relaxes the grid with
a birth/death automaton. Neighbours that fall outside the grid count
as solid, so the border closes up into walls without a separate pass.
"""

from typing import Optional, Tuple
import numpy as np
from scipy.ndimage import convolve

from ..errors import InvalidDimensionError, InvalidParameterError

EMPTY = 0
SOLID = 1
START = 3

# Moore neighbourhood, centre excluded
NEIGHBOUR_KERNEL = np.array([
    [1, 1, 1],
    [1, 0, 1],
    [1, 1, 1]
], dtype=np.int16)

NEIGHBOUR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1)
]


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(
            f"Grid dimensions must be positive, got {width}x{height}")


def _check_limit(name: str, value: int) -> None:
    if not 0 <= value <= 8:
        raise InvalidParameterError(f"{name} must be in [0, 8], got {value}")


def generate_random(width: int, height: int, alive_chance: float,
                    rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Seed a grid: each cell is solid with probability alive_chance."""
    _check_dimensions(width, height)
    if not 0.0 <= alive_chance <= 1.0:
        raise InvalidParameterError(
            f"alive_chance must be in [0, 1], got {alive_chance}")
    if rng is None:
        rng = np.random.default_rng()

    draws = rng.random((height, width))
    return np.where(draws < alive_chance, SOLID, EMPTY).astype(np.int8)


def count_solid_neighbours(grid: np.ndarray, x: int, y: int) -> int:
    """Count solid cells around (x, y); out-of-bounds positions count as solid."""
    height, width = grid.shape
    count = 0
    for dx, dy in NEIGHBOUR_OFFSETS:
        nx, ny = x + dx, y + dy
        if not (0 <= nx < width and 0 <= ny < height):
            count += 1
        elif grid[ny, nx] == SOLID:
            count += 1
    return count


def step(previous: np.ndarray, death_limit: int, birth_limit: int) -> np.ndarray:
    """
    Apply one automaton pass and return a new grid.

    Solid cells with fewer than death_limit solid neighbours die;
    empty cells with more than birth_limit solid neighbours are born.
    The input grid is left untouched.
    """
    _check_limit("death_limit", death_limit)
    _check_limit("birth_limit", birth_limit)

    solid = (previous == SOLID)
    # cval=1 pads the border with walls
    counts = convolve(solid.astype(np.int16), NEIGHBOUR_KERNEL,
                      mode='constant', cval=1)

    survives = solid & (counts >= death_limit)
    born = ~solid & (counts > birth_limit)
    return np.where(survives | born, SOLID, EMPTY).astype(np.int8)


def place_start(grid: np.ndarray) -> np.ndarray:
    """
    Mark the first empty cell as START, scanning x-major (all y for x=0,
    then x=1, ...). A grid with no empty cell comes back unchanged.
    """
    result = grid.copy()
    # Transposed argwhere yields (x, y) pairs in x-major order
    empties = np.argwhere(result.T == EMPTY)
    if len(empties) > 0:
        x, y = empties[0]
        result[y, x] = START
    return result


def generate_cave(width: int, height: int,
                  alive_chance: float = 0.4,
                  death_limit: int = 3,
                  birth_limit: int = 4,
                  step_count: int = 2,
                  rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Random seeding, step_count automaton passes, then start placement."""
    _check_dimensions(width, height)
    _check_limit("death_limit", death_limit)
    _check_limit("birth_limit", birth_limit)
    if step_count < 0:
        raise InvalidParameterError(
            f"step_count must be non-negative, got {step_count}")

    grid = generate_random(width, height, alive_chance, rng)
    for _ in range(step_count):
        grid = step(grid, death_limit, birth_limit)
    return place_start(grid)


def find_start(grid: np.ndarray) -> Optional[Tuple[int, int]]:
    """Return (x, y) of the START marker, or None if the grid has none."""
    marks = np.argwhere(grid.T == START)
    if len(marks) == 0:
        return None
    x, y = marks[0]
    return (int(x), int(y))


def solid_fraction(grid: np.ndarray) -> float:
    """Share of cells that are walls."""
    if grid.size == 0:
        return 0.0
    return float(np.count_nonzero(grid == SOLID)) / grid.size
