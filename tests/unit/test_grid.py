# tests/unit/test_grid.py

import pytest

from tiler.errors import IndexOutOfBounds
from tiler.grid import Grid


def test_default_fill() -> None:
    grid: Grid[str] = Grid(4, 3, fill="Grass")
    assert grid.width == 4
    assert grid.height == 3
    assert len(grid.cells) == 12
    assert all(cell == "Grass" for cell in grid.cells)


def test_set_then_get_everywhere() -> None:
    grid: Grid[int] = Grid(80, 25, fill=0)
    for y in range(25):
        for x in range(80):
            grid.set(x, y, x * 1000 + y)
    for y in range(25):
        for x in range(80):
            assert grid.get(x, y) == x * 1000 + y


@pytest.mark.parametrize(
    "x, y",
    [(80, 0), (0, 25), (80, 25), (100, 3), (-1, 0), (0, -1)],
)
def test_out_of_bounds(x: int, y: int) -> None:
    grid: Grid[int] = Grid(80, 25, fill=0)
    with pytest.raises(IndexOutOfBounds):
        grid.get(x, y)
    with pytest.raises(IndexOutOfBounds):
        grid.set(x, y, 1)
    with pytest.raises(IndexError):
        grid[x, y]
    assert all(cell == 0 for cell in grid.cells)


def test_offset_convention_is_row_major() -> None:
    grid = Grid.from_fn(3, 2, lambda x, y: (x, y))
    assert grid.cells == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    grid.set(2, 1, "last")
    assert grid.cells[-1] == "last"
    grid.set(1, 0, "second")
    assert grid.cells[1] == "second"


def test_from_fn_calls_each_coordinate_once() -> None:
    seen: list[tuple[int, int]] = []

    def fn(x: int, y: int) -> int:
        seen.append((x, y))
        return x + y

    grid = Grid.from_fn(4, 2, fn)
    assert sorted(seen) == [(x, y) for x in range(4) for y in range(2)]
    assert grid.get(3, 1) == 4


def test_index_operators() -> None:
    grid: Grid[str] = Grid(2, 2, fill=".")
    grid[1, 0] = "#"
    assert grid[1, 0] == "#"
    assert grid.get(1, 0) == "#"
    assert grid[0, 1] == "."


def test_debug_dump() -> None:
    grid: Grid[str] = Grid(3, 2, fill="Wall")
    grid.set(1, 0, "Grass")
    grid.set(2, 1, "Grass")
    char_of = {"Wall": "#", "Grass": "."}
    assert grid.debug_dump(char_of) == "#.#\n##."


def test_debug_dump_unknown_cell() -> None:
    grid: Grid[str] = Grid(1, 1, fill="Lava")
    with pytest.raises(KeyError):
        grid.debug_dump({"Wall": "#"})


def test_iteration_and_rows() -> None:
    grid = Grid.from_fn(2, 2, lambda x, y: f"{x}{y}")
    assert list(grid) == [
        ((0, 0), "00"),
        ((1, 0), "10"),
        ((0, 1), "01"),
        ((1, 1), "11"),
    ]
    assert list(grid.rows()) == [["00", "10"], ["01", "11"]]


def test_fill_and_copy_from() -> None:
    world = Grid.from_fn(3, 2, lambda x, y: x)
    frame: Grid[int] = Grid(3, 2, fill=-1)
    frame.copy_from(world)
    assert frame == world
    frame.set(0, 0, 9)
    assert world.get(0, 0) == 0
    frame.fill(5)
    assert all(cell == 5 for cell in frame.cells)


def test_copy_from_size_mismatch() -> None:
    with pytest.raises(ValueError):
        Grid(2, 2, fill=0).copy_from(Grid(3, 2, fill=0))


def test_copy_is_independent() -> None:
    grid: Grid[int] = Grid(2, 1, fill=0)
    clone = grid.copy()
    clone.set(0, 0, 1)
    assert grid.get(0, 0) == 0


def test_default_size() -> None:
    grid: Grid[str] = Grid.default_size(fill="x")
    assert (grid.width, grid.height) == (80, 25)


def test_negative_dimensions() -> None:
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_empty_grid_dump() -> None:
    assert Grid(0, 0).debug_dump({}) == ""
