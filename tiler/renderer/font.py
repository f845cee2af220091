"""Font loading and glyph rasterization.

The font is an explicit, immutable handle: load it once with
:meth:`Font.load` and pass it to whoever needs glyphs (normally
:func:`tiler.atlas.build_atlas`). Nothing in this module keeps a global font.

Each glyph is a fixed ``CellSize`` RGBA8 bitmap: the cell is filled with the
background color, the character outline is rasterized at a size whose line height fits the
cell, with its baseline at the font ascent, and the foreground is composited onto the
covered pixels with :func:`tiler.utils.image.blend_sqrt`. Ink falling outside
the cell is clipped.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from tiler.color import Color
from tiler.errors import RasterizationDefect
from tiler.utils.image import UInt8Array, composite_mask, solid_cell

logger = logging.getLogger(__name__)

DEFAULT_CELL_HEIGHT = 40
DEFAULT_CELL_WIDTH = DEFAULT_CELL_HEIGHT // 2
FONT_PATH_ENV = "TILER_FONT"


@dataclass(frozen=True)
class CellSize:
    """Pixel size of every glyph in an atlas.

    The default is twice as tall as it is wide so that cells look roughly square
    in a monospace layout.
    """

    width: int = DEFAULT_CELL_WIDTH
    height: int = DEFAULT_CELL_HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Cell size must be positive, got {self}")


@dataclass(frozen=True, eq=False)
class Glyph:
    """Rasterized RGBA8 bitmap for one tile.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
        pixels: ``uint8`` array of shape ``(height, width, 4)``, row-major.
    """

    width: int
    height: int
    pixels: UInt8Array = field(repr=False)

    def is_valid(self) -> bool:
        return self.pixels.size == self.width * self.height * 4

    @property
    def data(self) -> bytes:
        """Raw RGBA bytes, row by row."""
        return self.pixels.tobytes()

    def pixel(self, x: int, y: int) -> Color:
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return Color(r, g, b, a)

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.data)


@dataclass(frozen=True, eq=False)
class Font:
    """Loaded font face sized for one cell height.

    Use :meth:`Font.load` rather than constructing directly.
    """

    face: ImageFont.FreeTypeFont
    cell: CellSize
    ascent: int
    source: str

    @classmethod
    def load(cls, path: Optional[str] = None, cell: Optional[CellSize] = None) -> Font:
        """
        Load a TrueType/OpenType font scaled so one line fits ``cell.height``.

        The pixel size is chosen so that ascent plus descent does not exceed the
        cell height; descenders and full-height box-drawing characters then stay
        inside the cell.

        With no ``path`` the ``TILER_FONT`` environment variable is used, then
        Pillow's bundled default face. That face is proportional, so narrow and
        wide characters will not line up on the cell grid; point ``TILER_FONT``
        at a monospace font (e.g. DejaVu Sans Mono) for real use.
        """
        cell = cell or CellSize()
        path = path or os.environ.get(FONT_PATH_ENV)
        source = path or "<pillow default>"

        def open_face(size: int) -> ImageFont.FreeTypeFont:
            if path:
                face = ImageFont.truetype(path, size=size)
            else:
                face = ImageFont.load_default(size=size)
            if not isinstance(face, ImageFont.FreeTypeFont):
                raise ValueError(
                    f"Font {source} is not a scalable FreeType font; install Pillow with FreeType"
                )
            return face

        size = cell.height
        face = open_face(size)
        ascent, descent = face.getmetrics()
        if ascent + descent > cell.height:
            size = max(1, cell.height * size // (ascent + descent))
            face = open_face(size)
            ascent, descent = face.getmetrics()
        # Rounded metrics can still overshoot by a pixel.
        while ascent + descent > cell.height and size > 1:
            size -= 1
            face = open_face(size)
            ascent, descent = face.getmetrics()

        logger.debug(
            "Loaded font %s at %dpx (ascent=%d, descent=%d), cell %dx%d",
            source,
            size,
            ascent,
            descent,
            cell.width,
            cell.height,
        )
        return cls(face=face, cell=cell, ascent=ascent, source=source)

    def coverage(self, character: str) -> UInt8Array:
        """Return the 8-bit coverage mask of ``character`` clipped to the cell."""
        mask = Image.new("L", (self.cell.width, self.cell.height), 0)
        draw = ImageDraw.Draw(mask)
        draw.text((0, self.ascent), character, fill=255, font=self.face, anchor="ls")
        return np.asarray(mask, dtype=np.uint8)

    def glyph(self, character: str, fg: Color, bg: Color) -> Glyph:
        """Rasterize ``character`` in ``fg`` over an opaque ``bg`` cell."""
        width, height = self.cell.width, self.cell.height
        background = Color.rgb(bg.r, bg.g, bg.b)
        cell = solid_cell(width, height, background.as_tuple())
        mask = self.coverage(character)
        pixels = composite_mask(cell, mask, fg.as_tuple(), background.as_tuple())

        output = Glyph(width=width, height=height, pixels=pixels)
        if not output.is_valid():
            raise RasterizationDefect(
                f"Glyph buffer holds {pixels.size} bytes, expected {width * height * 4}",
                raw=character,
            )
        return output


__all__ = [
    "DEFAULT_CELL_HEIGHT",
    "DEFAULT_CELL_WIDTH",
    "FONT_PATH_ENV",
    "CellSize",
    "Font",
    "Glyph",
]
