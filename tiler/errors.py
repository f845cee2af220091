"""Exception taxonomy.

Every error raised by the tile-set compiler derives from :class:`TilerError`
and may carry the offending tile name, field and raw input. Context is
attached where it becomes known (the atlas builder knows the tile, the color
resolver only knows the expression) and is rendered by ``str(err)``.

Families:

* :class:`GrammarError` for malformed or inconsistent tile declarations.
* :class:`ColorResolutionError` for color expressions that cannot be resolved.
* :class:`RasterizationDefect` for broken internal invariants (never user input).
* :class:`IndexOutOfBounds` for grid access outside the declared dimensions.

Each family also subclasses the matching builtin (``ValueError``,
``RuntimeError``, ``IndexError``) so generic handlers keep working.
"""

from typing import Optional


class TilerError(Exception):
    """Base class carrying optional tile/field/raw context."""

    def __init__(
        self,
        message: str,
        *,
        tile: Optional[str] = None,
        field: Optional[str] = None,
        raw: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.tile = tile
        self.field = field
        self.raw = raw

    def attach(
        self,
        *,
        tile: Optional[str] = None,
        field: Optional[str] = None,
        raw: Optional[str] = None,
    ) -> "TilerError":
        """Fill in context that is still missing and return ``self`` for re-raising."""
        if self.tile is None:
            self.tile = tile
        if self.field is None:
            self.field = field
        if self.raw is None:
            self.raw = raw
        return self

    def __str__(self) -> str:
        context = []
        if self.tile is not None:
            context.append(f"tile={self.tile!r}")
        if self.field is not None:
            context.append(f"field={self.field!r}")
        if self.raw is not None:
            context.append(f"raw={self.raw!r}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


# --- Grammar ---


class GrammarError(TilerError, ValueError):
    pass


class UnknownAttribute(GrammarError):
    pass


class MalformedAttribute(GrammarError):
    pass


class DuplicateChar(GrammarError):
    pass


class MissingChar(GrammarError):
    pass


class MissingDefault(GrammarError):
    pass


class DuplicateDefault(GrammarError):
    pass


class DuplicateTile(GrammarError):
    pass


# --- Colors ---


class ColorResolutionError(TilerError, ValueError):
    pass


class InvalidRange(ColorResolutionError):
    pass


class UnsupportedColorForm(ColorResolutionError):
    pass


class UnrecognizedColorExpression(ColorResolutionError):
    pass


# --- Internal / runtime ---


class RasterizationDefect(TilerError, RuntimeError):
    """Glyph buffer does not match its declared dimensions."""


class IndexOutOfBounds(TilerError, IndexError):
    """Grid coordinate outside ``[0, width) x [0, height)``."""


__all__ = [
    "TilerError",
    "GrammarError",
    "UnknownAttribute",
    "MalformedAttribute",
    "DuplicateChar",
    "MissingChar",
    "MissingDefault",
    "DuplicateDefault",
    "DuplicateTile",
    "ColorResolutionError",
    "InvalidRange",
    "UnsupportedColorForm",
    "UnrecognizedColorExpression",
    "RasterizationDefect",
    "IndexOutOfBounds",
]
