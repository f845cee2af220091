"""Dense fixed-size grid of tile values.

Coordinates are ``(x, y)`` with ``x`` the column (0 at left) and ``y`` the
row (0 at top). Cells live in one flat row-major list and ``(x, y)`` maps to
offset ``y * width + x``; construction, ``get``/``set`` and ``debug_dump``
all go through :meth:`Grid._offset`.

A grid is owned by whoever builds it (usually the per-frame renderer) and is
meant to be overwritten wholesale each frame. It does no locking.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Mapping, Optional, Tuple

from tiler.errors import IndexOutOfBounds
from tiler.types import CellFn, Coord, T

DEFAULT_GRID_WIDTH = 80
DEFAULT_GRID_HEIGHT = 25


class Grid(Generic[T]):
    width: int
    height: int
    cells: List[T]

    def __init__(self, width: int, height: int, fill: Optional[T] = None) -> None:
        """Create a ``width`` x ``height`` grid with every cell set to ``fill``."""
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = [fill] * (width * height)  # type: ignore[list-item]

    @classmethod
    def from_fn(cls, width: int, height: int, fn: CellFn[T]) -> Grid[T]:
        """Create a grid whose cell at ``(x, y)`` is ``fn(x, y)``."""
        grid: Grid[T] = cls(width, height)
        for y in range(height):
            for x in range(width):
                grid.cells[grid._offset(x, y)] = fn(x, y)
        return grid

    @classmethod
    def default_size(cls, fill: Optional[T] = None) -> Grid[T]:
        """An 80x25 grid, the classic text-mode screen."""
        return cls(DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT, fill)

    # -------- Cell access --------

    def get(self, x: int, y: int) -> T:
        return self.cells[self._offset(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        self.cells[self._offset(x, y)] = value

    def __getitem__(self, pos: Coord) -> T:
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: Coord, value: T) -> None:
        x, y = pos
        self.set(x, y, value)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # -------- Bulk operations --------

    def fill(self, value: T) -> None:
        self.cells = [value] * (self.width * self.height)

    def copy_from(self, other: Grid[T]) -> None:
        """Overwrite every cell with the contents of a same-sized grid."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError(
                f"Cannot copy a {other.width}x{other.height} grid into {self.width}x{self.height}"
            )
        self.cells = list(other.cells)

    def copy(self) -> Grid[T]:
        clone: Grid[T] = Grid(self.width, self.height)
        clone.cells = list(self.cells)
        return clone

    def rows(self) -> Iterator[List[T]]:
        for y in range(self.height):
            start = self._offset(0, y) if self.width else 0
            yield self.cells[start : start + self.width]

    def __iter__(self) -> Iterator[Tuple[Coord, T]]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y), self.cells[self._offset(x, y)]

    def debug_dump(self, char_of: Mapping[T, str]) -> str:
        """
        Render the grid as text, one line per row, using ``char_of`` to map each
        cell to its display character (e.g. ``Atlas.char_of``).
        """
        return "\n".join("".join(char_of[cell] for cell in row) for row in self.rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.cells) == (
            other.width,
            other.height,
            other.cells,
        )

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    # -------- Internal helpers --------

    def _offset(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexOutOfBounds(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
        return y * self.width + x


__all__ = ["Grid", "DEFAULT_GRID_WIDTH", "DEFAULT_GRID_HEIGHT"]
