from typing import Dict, Optional

from PIL import Image

from tiler.atlas import Atlas
from tiler.grid import Grid
from tiler.types import TileName

DEFAULT_CLEAR_COLOR = (0, 0, 0, 255)


def render(
    grid: Grid[TileName],
    atlas: Atlas,
    cache: Optional[Dict[TileName, Image.Image]] = None,
) -> Image.Image:
    """
    Renders a grid of tile names as a Pillow image, one atlas glyph per cell.
    Cell ``(x, y)`` lands at pixel ``(x * cell.width, y * cell.height)``.
    Unknown tile names raise ``KeyError``.
    """
    cell = atlas.cell
    img = Image.new(
        "RGBA", (grid.width * cell.width, grid.height * cell.height), DEFAULT_CLEAR_COLOR
    )
    if cache is None:
        cache = {}

    for (x, y), name in grid:
        tex = cache.get(name)
        if tex is None:
            tex = atlas.glyph(name).to_image()
            cache[name] = tex
        # Glyphs are opaque, so a plain paste replaces the cell.
        img.paste(tex, (x * cell.width, y * cell.height))

    return img


class FrameRenderer:
    atlas: Atlas
    cache: Dict[TileName, Image.Image]

    def __init__(self, atlas: Atlas):
        self.atlas = atlas
        self.cache = {name: atlas.glyph(name).to_image() for name in atlas.names}

    def render(self, grid: Grid[TileName]) -> Image.Image:
        return render(grid, self.atlas, cache=self.cache)


__all__ = ["render", "FrameRenderer", "DEFAULT_CLEAR_COLOR"]
