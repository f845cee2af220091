"""Tile attribute grammar.

An attribute list is a comma separated sequence of items, each either a bare
keyword or ``keyword = literal``::

    char = '#', fg_color = "gray", default

Character literals use single quotes, strings use double quotes and both
accept backslash escapes. :func:`parse_attrs` only tokenizes;
:func:`parse_tile` applies the per-tile rules (exactly one ``char``, at most
one ``default``, known keywords only).
"""

import re
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from tiler.errors import (
    DuplicateChar,
    DuplicateDefault,
    MalformedAttribute,
    MissingChar,
    UnknownAttribute,
)
from tiler.tileset.definition import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    TileAttr,
    TileDefinition,
    TileSpec,
)
from tiler.types import TileName

CHAR = "char"
DEFAULT = "default"
FG_COLOR = "fg_color"
BG_COLOR = "bg_color"

KEYWORDS = (CHAR, DEFAULT, FG_COLOR, BG_COLOR)

AttrSource = Union[str, Sequence[str], Sequence[TileAttr]]

_TOKEN_RE = re.compile(
    r"""
    \s*(?:
        (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
      | (?P<literal>'(?:\\.|[^'\\])*'|"(?:\\.|[^"\\])*")
      | (?P<punct>[=,])
      | (?P<end>$)
    )
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}

Token = Tuple[str, str, int]


def _unescape(body: str) -> str:
    out: List[str] = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars)
            out.append(_ESCAPES.get(nxt, nxt))
        else:
            out.append(ch)
    return "".join(out)


def _tokenize(source: str) -> Iterator[Token]:
    pos = 0
    while True:
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise MalformedAttribute(
                f"Unexpected input at offset {pos}", raw=source
            )
        kind = match.lastgroup or "end"
        if kind == "end":
            yield ("end", "", match.end())
            return
        yield (kind, match.group(kind), match.start(kind))
        pos = match.end()


def parse_attrs(source: str) -> List[TileAttr]:
    """Tokenize one attribute list into :class:`TileAttr` records.

    Keywords are not validated here, so unknown keywords survive until
    :func:`parse_tile` reports them with the tile name attached.
    """
    attrs: List[TileAttr] = []
    tokens = _tokenize(source)
    token = next(tokens)
    while token[0] != "end":
        kind, text, offset = token
        if kind != "ident":
            raise MalformedAttribute(
                f"Expected an attribute keyword at offset {offset}, found {text!r}",
                raw=source,
            )
        keyword = text
        token = next(tokens)
        value: Optional[str] = None
        quote: Optional[str] = None
        if token[:2] == ("punct", "="):
            kind, text, offset = next(tokens)
            if kind != "literal":
                raise MalformedAttribute(
                    f"Expected a quoted literal after `{keyword} =` at offset {offset}",
                    raw=source,
                )
            quote = text[0]
            value = _unescape(text[1:-1])
            token = next(tokens)
        attrs.append(TileAttr(keyword=keyword, value=value, quote=quote))

        if token[:2] == ("punct", ","):
            token = next(tokens)
        elif token[0] != "end":
            raise MalformedAttribute(
                f"Expected `,` between attributes at offset {token[2]}", raw=source
            )
    return attrs


def _collect_attrs(attrs: AttrSource) -> List[TileAttr]:
    if isinstance(attrs, str):
        return parse_attrs(attrs)
    collected: List[TileAttr] = []
    for item in attrs:
        if isinstance(item, TileAttr):
            collected.append(item)
        else:
            collected.extend(parse_attrs(item))
    return collected


def _require_literal(name: TileName, attr: TileAttr, quote: str) -> str:
    if attr.value is None or attr.quote != quote:
        expected = "a 'c' character literal" if quote == "'" else 'a "..." string'
        raise MalformedAttribute(
            f"`{attr.keyword}` expects {expected}", tile=name, field=attr.keyword
        )
    return attr.value


def parse_tile(name: TileName, attrs: AttrSource) -> TileDefinition:
    """Validate the attributes of one tile and build its :class:`TileDefinition`.

    Arguments:
        name: Tile name, used for diagnostics and as the tile identity.
        attrs: An attribute-list string, several such strings, or pre-parsed
            :class:`TileAttr` records. Order is irrelevant.

    Raises:
        UnknownAttribute: Keyword other than char/default/fg_color/bg_color.
        DuplicateChar: ``char`` given more than once.
        DuplicateDefault: ``default`` given more than once on this tile.
        MissingChar: No ``char`` attribute.
        MalformedAttribute: Wrong literal kind, or a char literal that is not
            exactly one character.
    """
    try:
        parsed = _collect_attrs(attrs)
    except MalformedAttribute as e:
        raise e.attach(tile=name)

    character: Optional[str] = None
    is_default = False
    fg_color = DEFAULT_FOREGROUND
    bg_color = DEFAULT_BACKGROUND

    for attr in parsed:
        if attr.keyword == CHAR:
            if character is not None:
                raise DuplicateChar(
                    "There must only be a single `char` attribute",
                    tile=name,
                    field=CHAR,
                    raw=attr.value,
                )
            value = _require_literal(name, attr, "'")
            if len(value) != 1:
                raise MalformedAttribute(
                    "`char` must be exactly one character",
                    tile=name,
                    field=CHAR,
                    raw=value,
                )
            character = value
        elif attr.keyword == DEFAULT:
            if attr.value is not None:
                raise MalformedAttribute(
                    "`default` is a bare marker and takes no value",
                    tile=name,
                    field=DEFAULT,
                    raw=attr.value,
                )
            if is_default:
                raise DuplicateDefault(
                    "Multiple `default` markers", tile=name, field=DEFAULT
                )
            is_default = True
        elif attr.keyword == FG_COLOR:
            fg_color = _require_literal(name, attr, '"')
        elif attr.keyword == BG_COLOR:
            bg_color = _require_literal(name, attr, '"')
        else:
            raise UnknownAttribute(
                f"Unknown attribute `{attr.keyword}`, expected one of {', '.join(KEYWORDS)}",
                tile=name,
                field=attr.keyword,
            )

    if character is None:
        raise MissingChar("No `char` set", tile=name)

    return TileDefinition(
        name=name,
        character=character,
        is_default=is_default,
        fg_color_expr=fg_color,
        bg_color_expr=bg_color,
    )


def parse_spec(spec: TileSpec) -> TileDefinition:
    return parse_tile(spec.name, spec.attrs)


__all__ = [
    "KEYWORDS",
    "parse_attrs",
    "parse_tile",
    "parse_spec",
]
