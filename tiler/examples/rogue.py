"""Small roguelike tile set.

Tile names are a ``StrEnum`` so grid cells can hold enum members while the
atlas keys stay plain strings. Box-drawing and dot characters need a font that
covers them; point ``TILER_FONT`` at e.g. a DejaVu Sans Mono file.
"""

from __future__ import annotations

import random
from enum import StrEnum
from typing import List, Optional

from tiler.atlas import Atlas, build_atlas
from tiler.grid import DEFAULT_GRID_WIDTH, Grid
from tiler.renderer.font import Font
from tiler.tileset import TileSpec, tile


class RogueTile(StrEnum):
    GRASS = "Grass"
    LIGHT_GRASS = "LightGrass"
    CHARACTER = "Character"
    WALL_NS = "WallNS"
    WALL_EW = "WallEW"
    WALL_NW = "WallNW"
    WALL_NE = "WallNE"
    WALL_SW = "WallSW"
    WALL_SE = "WallSE"
    FLOOR = "Floor"


ROGUE_TILES: List[TileSpec] = [
    tile(RogueTile.GRASS, "char = '·', fg_color = \"green\", default"),
    tile(RogueTile.LIGHT_GRASS, "char = '·', fg_color = \"lightgreen\""),
    tile(RogueTile.CHARACTER, "char = '☺'"),
    tile(RogueTile.WALL_NS, "char = '║', fg_color = \"gray\""),
    tile(RogueTile.WALL_EW, "char = '═', fg_color = \"gray\""),
    tile(RogueTile.WALL_NW, "char = '╔', fg_color = \"gray\""),
    tile(RogueTile.WALL_NE, "char = '╗', fg_color = \"gray\""),
    tile(RogueTile.WALL_SW, "char = '╚', fg_color = \"gray\""),
    tile(RogueTile.WALL_SE, "char = '╝', fg_color = \"gray\""),
    tile(RogueTile.FLOOR, "char = '·', fg_color = \"white\""),
]

DEFAULT_WORLD_HEIGHT = 30


def build_rogue_atlas(font: Optional[Font] = None) -> Atlas:
    return build_atlas(ROGUE_TILES, font or Font.load())


def generate_world(
    width: int = DEFAULT_GRID_WIDTH,
    height: int = DEFAULT_WORLD_HEIGHT,
    seed: Optional[int] = None,
) -> Grid[RogueTile]:
    """Grass field with a random mix of dark and light grass."""
    rng = random.Random(seed)
    grass = [RogueTile.GRASS, RogueTile.LIGHT_GRASS]
    return Grid.from_fn(width, height, lambda x, y: rng.choice(grass))
