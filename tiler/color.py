"""Color expression resolution.

A color expression is resolved to an opaque RGBA8 :class:`Color` through a
fixed fallback chain, first match wins:

1. a case-insensitive CSS color keyword (``"cadetblue"``),
2. ``hsl(h, s, l)``, which parses but is not convertible,
3. ``#rrggbb``,
4. ``rgb(r, g, b)``.

Resolution is pure; results are memoised per expression string.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import ClassVar, Dict, Optional, Tuple

from tiler.errors import (
    InvalidRange,
    UnrecognizedColorExpression,
    UnsupportedColorForm,
)
from tiler.types import RGBA


@dataclass(frozen=True)
class Color:
    """Immutable 8-bit RGBA color.

    Attributes:
        r: Red channel, 0-255.
        g: Green channel, 0-255.
        b: Blue channel, 0-255.
        a: Alpha channel, 0-255 (255 is opaque).
    """

    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel out of range: {self}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(r, g, b, 255)

    @classmethod
    def mono(cls, level: int) -> "Color":
        return cls.rgb(level, level, level)

    def as_tuple(self) -> RGBA:
        return (self.r, self.g, self.b, self.a)


Color.WHITE = Color.mono(255)
Color.BLACK = Color.mono(0)


# CSS color keywords.
NAMED_COLORS: Dict[str, Tuple[int, int, int]] = {
    "indianred": (205, 92, 92),
    "lightcoral": (240, 128, 128),
    "salmon": (250, 128, 114),
    "darksalmon": (233, 150, 122),
    "lightsalmon": (255, 160, 122),
    "crimson": (220, 20, 60),
    "red": (255, 0, 0),
    "firebrick": (178, 34, 34),
    "darkred": (139, 0, 0),
    "pink": (255, 192, 203),
    "lightpink": (255, 182, 193),
    "hotpink": (255, 105, 180),
    "deeppink": (255, 20, 147),
    "mediumvioletred": (199, 21, 133),
    "palevioletred": (219, 112, 147),
    "coral": (255, 127, 80),
    "tomato": (255, 99, 71),
    "orangered": (255, 69, 0),
    "darkorange": (255, 140, 0),
    "orange": (255, 165, 0),
    "gold": (255, 215, 0),
    "yellow": (255, 255, 0),
    "lightyellow": (255, 255, 224),
    "lemonchiffon": (255, 250, 205),
    "lightgoldenrodyellow": (250, 250, 210),
    "papayawhip": (255, 239, 213),
    "moccasin": (255, 228, 181),
    "peachpuff": (255, 218, 185),
    "palegoldenrod": (238, 232, 170),
    "khaki": (240, 230, 140),
    "darkkhaki": (189, 183, 107),
    "lavender": (230, 230, 250),
    "thistle": (216, 191, 216),
    "plum": (221, 160, 221),
    "violet": (238, 130, 238),
    "orchid": (218, 112, 214),
    "fuchsia": (255, 0, 255),
    "magenta": (255, 0, 255),
    "mediumorchid": (186, 85, 211),
    "mediumpurple": (147, 112, 219),
    "rebeccapurple": (102, 51, 153),
    "blueviolet": (138, 43, 226),
    "darkviolet": (148, 0, 211),
    "darkorchid": (153, 50, 204),
    "darkmagenta": (139, 0, 139),
    "purple": (128, 0, 128),
    "indigo": (75, 0, 130),
    "slateblue": (106, 90, 205),
    "darkslateblue": (72, 61, 139),
    "mediumslateblue": (123, 104, 238),
    "greenyellow": (173, 255, 47),
    "chartreuse": (127, 255, 0),
    "lawngreen": (124, 252, 0),
    "lime": (0, 255, 0),
    "limegreen": (50, 205, 50),
    "palegreen": (152, 251, 152),
    "lightgreen": (144, 238, 144),
    "mediumspringgreen": (0, 250, 154),
    "springgreen": (0, 255, 127),
    "mediumseagreen": (60, 179, 113),
    "seagreen": (46, 139, 87),
    "forestgreen": (34, 139, 34),
    "green": (0, 128, 0),
    "darkgreen": (0, 100, 0),
    "yellowgreen": (154, 205, 50),
    "olivedrab": (107, 142, 35),
    "olive": (128, 128, 0),
    "darkolivegreen": (85, 107, 47),
    "mediumaquamarine": (102, 205, 170),
    "darkseagreen": (143, 188, 139),
    "lightseagreen": (32, 178, 170),
    "darkcyan": (0, 139, 139),
    "teal": (0, 128, 128),
    "aqua": (0, 255, 255),
    "cyan": (0, 255, 255),
    "lightcyan": (224, 255, 255),
    "paleturquoise": (175, 238, 238),
    "aquamarine": (127, 255, 212),
    "turquoise": (64, 224, 208),
    "mediumturquoise": (72, 209, 204),
    "darkturquoise": (0, 206, 209),
    "cadetblue": (95, 158, 160),
    "steelblue": (70, 130, 180),
    "lightsteelblue": (176, 196, 222),
    "powderblue": (176, 224, 230),
    "lightblue": (173, 216, 230),
    "skyblue": (135, 206, 235),
    "lightskyblue": (135, 206, 250),
    "deepskyblue": (0, 191, 255),
    "dodgerblue": (30, 144, 255),
    "cornflowerblue": (100, 149, 237),
    "royalblue": (65, 105, 225),
    "blue": (0, 0, 255),
    "mediumblue": (0, 0, 205),
    "darkblue": (0, 0, 139),
    "navy": (0, 0, 128),
    "midnightblue": (25, 25, 112),
    "cornsilk": (255, 248, 220),
    "blanchedalmond": (255, 235, 205),
    "bisque": (255, 228, 196),
    "navajowhite": (255, 222, 173),
    "wheat": (245, 222, 179),
    "burlywood": (222, 184, 135),
    "tan": (210, 180, 140),
    "rosybrown": (188, 143, 143),
    "sandybrown": (244, 164, 96),
    "goldenrod": (218, 165, 32),
    "darkgoldenrod": (184, 134, 11),
    "peru": (205, 133, 63),
    "chocolate": (210, 105, 30),
    "saddlebrown": (139, 69, 19),
    "sienna": (160, 82, 45),
    "brown": (165, 42, 42),
    "maroon": (128, 0, 0),
    "white": (255, 255, 255),
    "snow": (255, 250, 250),
    "honeydew": (240, 255, 240),
    "mintcream": (245, 255, 250),
    "azure": (240, 255, 255),
    "aliceblue": (240, 248, 255),
    "ghostwhite": (248, 248, 255),
    "whitesmoke": (245, 245, 245),
    "seashell": (255, 245, 238),
    "beige": (245, 245, 220),
    "oldlace": (253, 245, 230),
    "floralwhite": (255, 250, 240),
    "ivory": (255, 255, 240),
    "antiquewhite": (250, 235, 215),
    "linen": (250, 240, 230),
    "lavenderblush": (255, 240, 245),
    "mistyrose": (255, 228, 225),
    "gainsboro": (220, 220, 220),
    "lightgray": (211, 211, 211),
    "silver": (192, 192, 192),
    "darkgray": (169, 169, 169),
    "gray": (128, 128, 128),
    "dimgray": (105, 105, 105),
    "lightslategray": (119, 136, 153),
    "slategray": (112, 128, 144),
    "darkslategray": (47, 79, 79),
    "black": (0, 0, 0),
    "darkgrey": (169, 169, 169),
    "darkslategrey": (47, 79, 79),
    "dimgrey": (105, 105, 105),
    "grey": (128, 128, 128),
    "lightgrey": (211, 211, 211),
    "lightslategrey": (119, 136, 153),
    "slategrey": (112, 128, 144),
}

_U8 = r"([0-9]{1,3})"
_WS = r"\s*"


def _functional(name: str) -> "re.Pattern[str]":
    args = f"{_WS},{_WS}".join([_U8] * 3)
    return re.compile(rf"{name}{_WS}\({_WS}{args}{_WS}\)")


_HSL_RE = _functional("hsl")
_RGB_RE = _functional("rgb")
_HEX_RE = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def _u8_triple(match: "re.Match[str]") -> Optional[Tuple[int, int, int]]:
    values = tuple(int(group) for group in match.groups())
    if any(value > 255 for value in values):
        return None
    r, g, b = values
    return r, g, b


def from_named(expr: str) -> Optional[Color]:
    rgb = NAMED_COLORS.get(expr.lower())
    if rgb is None:
        return None
    return Color.rgb(*rgb)


def parse_hsl(expr: str) -> Optional[Tuple[int, int, int]]:
    """Parse ``hsl(h, s, l)``.

    Returns the raw ``(h, s, l)`` triple, or None if the expression is not
    HSL-shaped. Raises :class:`InvalidRange` when saturation or lightness is
    above 100.
    """
    match = _HSL_RE.fullmatch(expr)
    if match is None:
        return None
    hsl = _u8_triple(match)
    if hsl is None:
        return None
    _, saturation, lightness = hsl
    if saturation > 100 or lightness > 100:
        raise InvalidRange(
            f"HSL saturation and lightness must be within [0, 100], got {hsl}",
            raw=expr,
        )
    return hsl


def parse_hex(expr: str) -> Optional[Color]:
    match = _HEX_RE.fullmatch(expr)
    if match is None:
        return None
    r, g, b = (int(group, 16) for group in match.groups())
    return Color.rgb(r, g, b)


def parse_rgb(expr: str) -> Optional[Color]:
    match = _RGB_RE.fullmatch(expr)
    if match is None:
        return None
    rgb = _u8_triple(match)
    if rgb is None:
        return None
    return Color.rgb(*rgb)


@lru_cache(maxsize=512)
def resolve_color(expr: str) -> Color:
    """Resolve a color expression to an opaque :class:`Color`.

    Raises:
        InvalidRange: HSL saturation or lightness outside [0, 100].
        UnsupportedColorForm: Well-formed HSL; conversion is not provided.
        UnrecognizedColorExpression: No form matched.
    """
    text = expr.strip()

    named = from_named(text)
    if named is not None:
        return named

    hsl = parse_hsl(text)
    if hsl is not None:
        raise UnsupportedColorForm(
            "HSL color expressions are not supported, use a name, #rrggbb or rgb()",
            raw=expr,
        )

    color = parse_hex(text)
    if color is not None:
        return color

    color = parse_rgb(text)
    if color is not None:
        return color

    raise UnrecognizedColorExpression("Could not parse color", raw=expr)


__all__ = [
    "Color",
    "NAMED_COLORS",
    "resolve_color",
    "from_named",
    "parse_hsl",
    "parse_hex",
    "parse_rgb",
]
