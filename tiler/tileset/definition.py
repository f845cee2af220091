from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from tiler.types import TileName

DEFAULT_FOREGROUND = "white"
DEFAULT_BACKGROUND = "black"


@dataclass(frozen=True)
class TileAttr:
    """One parsed attribute of a tile declaration.

    Attributes:
        keyword: Attribute keyword (``char``, ``default``, ``fg_color``, ``bg_color``).
        value: Unquoted literal value, or None for a bare marker.
        quote: Quote character the literal used (``'`` or ``"``), None for markers.
    """

    keyword: str
    value: Optional[str] = None
    quote: Optional[str] = None


@dataclass(frozen=True)
class TileSpec:
    """
    Authoring-time tile declaration: a name plus one or more attribute-list
    sources, e.g. ``TileSpec("Wall", ("char = '#', fg_color = \"gray\"",))``.
    Several sources behave like several attribute blocks on one declaration and
    are concatenated before validation.
    """

    name: TileName
    attrs: Tuple[str, ...] = field(default_factory=tuple)


def tile(name: TileName, *attrs: str) -> TileSpec:
    """Shorthand for ``TileSpec(name, attrs)``."""
    return TileSpec(name=name, attrs=tuple(attrs))


@dataclass(frozen=True)
class TileDefinition:
    """Validated tile declaration; colors are still unresolved expressions."""

    name: TileName
    character: str
    is_default: bool = False
    fg_color_expr: str = DEFAULT_FOREGROUND
    bg_color_expr: str = DEFAULT_BACKGROUND


__all__ = [
    "DEFAULT_FOREGROUND",
    "DEFAULT_BACKGROUND",
    "TileAttr",
    "TileSpec",
    "TileDefinition",
    "tile",
]
