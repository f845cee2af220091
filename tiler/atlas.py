"""Atlas assembly.

:func:`build_atlas` is the tile-set compiler: it takes the ordered tile
declarations, validates them, resolves their colors, rasterizes one glyph per
tile and freezes the result into an :class:`Atlas`. The atlas is the only
artifact handed to renderers; font and color parsing internals stay behind
this boundary.

Ordering and uniqueness rules:

* A tile's atlas index is its declaration position.
* Tile names are unique.
* Exactly one tile carries ``default``.

The build is fail-fast. The first problem raises, with the tile name, field and
raw input attached, and no partial atlas is produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from PIL import Image
from pyrsistent import PMap, PVector, pmap, pvector

from tiler.color import Color, resolve_color
from tiler.errors import (
    ColorResolutionError,
    DuplicateDefault,
    DuplicateTile,
    MissingDefault,
)
from tiler.grid import Grid
from tiler.renderer.font import CellSize, Font, Glyph
from tiler.tileset.definition import TileDefinition, TileSpec
from tiler.tileset.grammar import BG_COLOR, FG_COLOR, parse_spec
from tiler.types import TileName
from tiler.utils.image import hstack_images

logger = logging.getLogger(__name__)

TileInput = Union[TileSpec, TileDefinition]


@dataclass(frozen=True)
class ResolvedTile:
    definition: TileDefinition
    fg: Color
    bg: Color


@dataclass(frozen=True, eq=False)
class Atlas:
    """Immutable lookup table of rasterized tiles.

    Attributes:
        glyphs (PVector[Glyph]): One bitmap per tile, in declaration order.
        default_index (int): Position of the ``default`` tile in ``glyphs``.
        char_of (PMap[TileName, str]): Display character per tile (debug output).
        index_of (PMap[TileName, int]): Atlas position per tile.
        names (PVector[TileName]): Tile names in declaration order.
        cell (CellSize): Pixel size shared by every glyph.
    """

    glyphs: PVector[Glyph]
    default_index: int
    char_of: PMap[TileName, str]
    index_of: PMap[TileName, int]
    names: PVector[TileName]
    cell: CellSize

    def __len__(self) -> int:
        return len(self.glyphs)

    @property
    def default(self) -> TileName:
        return self.names[self.default_index]

    def idx(self, name: TileName) -> int:
        return self.index_of[name]

    def as_char(self, name: TileName) -> str:
        return self.char_of[name]

    def glyph(self, name: TileName) -> Glyph:
        return self.glyphs[self.index_of[name]]

    def new_grid(self, width: int, height: int) -> Grid[TileName]:
        """Grid of the given size with every cell set to the default tile."""
        return Grid(width, height, fill=self.default)

    def to_image(self) -> Image.Image:
        """All glyphs side by side, in atlas order."""
        return hstack_images([glyph.pixels for glyph in self.glyphs])


def _as_definition(item: TileInput) -> TileDefinition:
    if isinstance(item, TileDefinition):
        return item
    return parse_spec(item)


def _resolve_field(definition: TileDefinition, field: str, expr: str) -> Color:
    try:
        return resolve_color(expr)
    except ColorResolutionError as e:
        raise e.attach(tile=definition.name, field=field, raw=expr)


def resolve_tiles(items: Sequence[TileInput]) -> List[ResolvedTile]:
    """
    Parse and validate a whole tile set and resolve every color expression.

    Raises the first :class:`~tiler.errors.GrammarError` or
    :class:`~tiler.errors.ColorResolutionError` encountered, in declaration order.
    """
    resolved: List[ResolvedTile] = []
    seen: Dict[TileName, int] = {}
    default: Optional[TileName] = None

    for position, item in enumerate(items):
        definition = _as_definition(item)
        if definition.name in seen:
            raise DuplicateTile(
                f"Tile name already declared at position {seen[definition.name]}",
                tile=definition.name,
            )
        seen[definition.name] = position

        if definition.is_default:
            if default is not None:
                raise DuplicateDefault(
                    f"Multiple tiles marked as `default` (first was {default!r})",
                    tile=definition.name,
                    field="default",
                )
            default = definition.name

        fg = _resolve_field(definition, FG_COLOR, definition.fg_color_expr)
        bg = _resolve_field(definition, BG_COLOR, definition.bg_color_expr)
        resolved.append(ResolvedTile(definition=definition, fg=fg, bg=bg))

    if default is None:
        raise MissingDefault("No tile was declared `default`")
    return resolved


def build_atlas(items: Sequence[TileInput], font: Font) -> Atlas:
    """Compile a tile set into an :class:`Atlas`.

    Arguments:
        items: Tile declarations (:class:`TileSpec` or already validated
            :class:`TileDefinition`) in the order that fixes atlas indices.
        font: Loaded font; its cell size becomes the atlas cell size.
    """
    tiles = resolve_tiles(items)

    glyphs: List[Glyph] = []
    for resolved in tiles:
        definition = resolved.definition
        logger.debug(
            "Rasterizing tile %s %r (fg=%s, bg=%s)",
            definition.name,
            definition.character,
            resolved.fg.as_tuple(),
            resolved.bg.as_tuple(),
        )
        glyphs.append(font.glyph(definition.character, resolved.fg, resolved.bg))

    names = [resolved.definition.name for resolved in tiles]
    default_index = next(
        idx for idx, resolved in enumerate(tiles) if resolved.definition.is_default
    )
    atlas = Atlas(
        glyphs=pvector(glyphs),
        default_index=default_index,
        char_of=pmap({r.definition.name: r.definition.character for r in tiles}),
        index_of=pmap({name: idx for idx, name in enumerate(names)}),
        names=pvector(names),
        cell=font.cell,
    )
    logger.debug(
        "Built atlas of %d tiles (default=%s, cell %dx%d)",
        len(atlas),
        atlas.default,
        font.cell.width,
        font.cell.height,
    )
    return atlas


__all__ = ["Atlas", "ResolvedTile", "build_atlas", "resolve_tiles"]
