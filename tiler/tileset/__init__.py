"""Tile-set authoring: declaration records and the attribute grammar.

A tile set is an ordered list of :class:`TileSpec` records. Each one is
validated by :func:`parse_tile` into a :class:`TileDefinition` that the atlas
builder consumes::

    from tiler.tileset import tile

    TILES = [
        tile("Grass", "char = '.', fg_color = \"green\", default"),
        tile("Wall", "char = '#', fg_color = \"gray\""),
    ]
"""

from .definition import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND
from .definition import TileAttr, TileDefinition, TileSpec, tile
from .grammar import KEYWORDS, parse_attrs, parse_spec, parse_tile

__all__ = [
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "KEYWORDS",
    "TileAttr",
    "TileDefinition",
    "TileSpec",
    "parse_attrs",
    "parse_spec",
    "parse_tile",
    "tile",
]
