"""I/O package for the cave steering simulation."""

from .csv_writer import CSVWriter
from .grid_writer import save_grid, load_grid
from .reporter import Reporter

__all__ = ['CSVWriter', 'save_grid', 'load_grid', 'Reporter']
