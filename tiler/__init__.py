"""tiler
=====

Character-cell tile rendering: compile a declarative tile set into an atlas of
fixed-size RGBA8 glyphs, and keep a dense grid of tile names to draw with it.

Typical use::

    from tiler import Font, build_atlas, tile

    atlas = build_atlas(
        [
            tile("Grass", "char = '.', fg_color = \"green\", default"),
            tile("Wall", "char = '#', fg_color = \"gray\""),
        ],
        Font.load(),
    )
    grid = atlas.new_grid(80, 25)
    grid[3, 4] = "Wall"
    print(grid.debug_dump(atlas.char_of))

The symbols re-exported here cover the public surface; submodules hold the
details (:mod:`tiler.color`, :mod:`tiler.tileset`, :mod:`tiler.renderer`).
"""

from .atlas import Atlas, build_atlas
from .color import Color, resolve_color
from .errors import (
    ColorResolutionError,
    DuplicateChar,
    DuplicateDefault,
    DuplicateTile,
    GrammarError,
    IndexOutOfBounds,
    InvalidRange,
    MalformedAttribute,
    MissingChar,
    MissingDefault,
    RasterizationDefect,
    TilerError,
    UnknownAttribute,
    UnrecognizedColorExpression,
    UnsupportedColorForm,
)
from .grid import Grid
from .renderer.font import CellSize, Font, Glyph
from .renderer.frame import FrameRenderer, render
from .tileset import TileDefinition, TileSpec, parse_tile, tile

__all__ = [
    "Atlas",
    "CellSize",
    "Color",
    "ColorResolutionError",
    "DuplicateChar",
    "DuplicateDefault",
    "DuplicateTile",
    "Font",
    "FrameRenderer",
    "Glyph",
    "GrammarError",
    "Grid",
    "IndexOutOfBounds",
    "InvalidRange",
    "MalformedAttribute",
    "MissingChar",
    "MissingDefault",
    "RasterizationDefect",
    "TileDefinition",
    "TileSpec",
    "TilerError",
    "UnknownAttribute",
    "UnrecognizedColorExpression",
    "UnsupportedColorForm",
    "build_atlas",
    "parse_tile",
    "render",
    "resolve_color",
    "tile",
]
