"""Common type aliases.

Tiles are identified by their declared *name* everywhere outside the atlas
builder: grids store names, and the atlas maps names to indices and display
characters.
"""

from typing import Callable, Tuple, TypeVar

TileName = str

# Grid coordinate (x, y): x is the column, y is the row.
Coord = Tuple[int, int]

RGBA = Tuple[int, int, int, int]

T = TypeVar("T")

CellFn = Callable[[int, int], T]
