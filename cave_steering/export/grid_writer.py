"""Plain-text export of generated cave grids."""

from pathlib import Path
import numpy as np


def save_grid(grid: np.ndarray, output_path: Path) -> None:
    """Write grid rows (y = 0 first) as space-separated cell values."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    np.savetxt(output_path, grid, fmt='%d')


def load_grid(input_path: Path) -> np.ndarray:
    """Read a grid written by save_grid."""
    return np.loadtxt(input_path, dtype=np.int8, ndmin=2)
