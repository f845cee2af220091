import pytest

from tiler.examples.rogue import ROGUE_TILES, RogueTile, build_rogue_atlas, generate_world
from tiler.grid import Grid
from tiler.renderer.frame import FrameRenderer, render
from tests.test_utils import make_font, make_grass_wall_atlas


def test_render_places_glyphs_by_cell() -> None:
    atlas = make_grass_wall_atlas()
    grid: Grid[str] = Grid(3, 2, fill="Wall")
    grid.set(1, 0, "Grass")

    img = render(grid, atlas)
    w, h = atlas.cell.width, atlas.cell.height
    assert img.size == (3 * w, 2 * h)
    assert img.mode == "RGBA"

    for (x, y), name in grid:
        cell = img.crop((x * w, y * h, (x + 1) * w, (y + 1) * h))
        assert cell.tobytes() == atlas.glyph(name).data


def test_frame_renderer_reuses_cache() -> None:
    atlas = make_grass_wall_atlas()
    renderer = FrameRenderer(atlas)
    assert set(renderer.cache) == {"Grass", "Wall"}

    grid = atlas.new_grid(2, 2)
    first = renderer.render(grid)
    grid[0, 0] = "Wall"
    second = renderer.render(grid)
    assert first.tobytes() != second.tobytes()
    assert set(renderer.cache) == {"Grass", "Wall"}


def test_render_unknown_tile() -> None:
    atlas = make_grass_wall_atlas()
    with pytest.raises(KeyError):
        render(Grid(1, 1, fill="Lava"), atlas)


def test_rogue_tile_set_builds() -> None:
    atlas = build_rogue_atlas(make_font())
    assert len(atlas) == len(ROGUE_TILES) == len(RogueTile)
    assert atlas.default == RogueTile.GRASS
    assert atlas.idx(RogueTile.WALL_NW) == 5
    assert atlas.as_char("WallSE") == "╝"


def test_rogue_world_is_seeded() -> None:
    a = generate_world(10, 4, seed=7)
    b = generate_world(10, 4, seed=7)
    assert a == b
    assert (a.width, a.height) == (10, 4)
    assert set(a.cells) <= {RogueTile.GRASS, RogueTile.LIGHT_GRASS}


def test_rogue_world_renders() -> None:
    atlas = build_rogue_atlas(make_font())
    world = generate_world(5, 3, seed=1)
    world[2, 1] = RogueTile.CHARACTER
    assert world.debug_dump(atlas.char_of).splitlines()[1][2] == "☺"
    img = FrameRenderer(atlas).render(world)
    assert img.size == (5 * atlas.cell.width, 3 * atlas.cell.height)


def test_frame_module_exports() -> None:
    import tiler.renderer.frame as frame_module

    assert sorted(frame_module.__all__) == ["DEFAULT_CLEAR_COLOR", "FrameRenderer", "render"]
