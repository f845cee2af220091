from functools import lru_cache
from typing import List

from tiler.atlas import Atlas, build_atlas
from tiler.renderer.font import CellSize, Font
from tiler.tileset import TileSpec, tile


@lru_cache(maxsize=None)
def make_font(width: int = 20, height: int = 40) -> Font:
    """Pillow's bundled face at the given cell size (loaded once per size)."""
    return Font.load(cell=CellSize(width=width, height=height))


def make_grass_wall_tiles() -> List[TileSpec]:
    """Two-tile set: default grass '.' and a gray wall '#'."""
    return [
        tile("Grass", "char = '.', fg_color = \"green\", default"),
        tile("Wall", "char = '#', fg_color = \"gray\""),
    ]


def make_grass_wall_atlas() -> Atlas:
    return build_atlas(make_grass_wall_tiles(), make_font())
