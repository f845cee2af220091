"""Rendering subpackage.

Turns tile declarations and grids into pixels:

* :mod:`tiler.renderer.font` loads the font and rasterizes fixed-size glyphs
  with the square-root color blend.
* :mod:`tiler.renderer.frame` composites a grid of tile names against an atlas
  into a Pillow image (offline; no window or event loop).
"""
