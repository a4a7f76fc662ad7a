"""Argument classification rules.

Given the inner content of one top-level brace (sanitized, outer braces
removed), decide what it contributes:

    name                         simple, PlainText
    name,format[,style]          simple, kind from format (style is opaque)
    name,keyword,rest            complex, keyword in {plural, selectordinal, select}

Complex arguments are split into branches here; recursing into branch bodies
is the caller's job (see MessageParser) because it needs the depth guard.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from icuschema.constants import (
    COMPLEX_FORMATS,
    DATETIME_FORMATS,
    NUMBER_FORMATS,
    OFFSET_PREFIX,
    OTHER_KEY,
    PLURAL_PLACEHOLDER,
)
from icuschema.enums import ComplexFormat
from icuschema.schema import (
    DATE_OR_TIME,
    NUMBER,
    PLAIN_TEXT,
    PLURAL_LIKE,
    Argument,
    SelectEnum,
    ValueKind,
    literal_key,
)
from icuschema.syntax.cursor import Cursor, ParseResult
from icuschema.syntax.parser.primitives import (
    consume_balanced,
    parse_offset,
    parse_plural_key,
    parse_select_key,
)

__all__ = [
    "Branch",
    "ComplexArgument",
    "classify_simple_argument",
    "is_complex_argument",
    "is_valid_argument_name",
    "parse_complex_argument",
    "split_argument",
]

logger = logging.getLogger(__name__)

_SEGMENT_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class Branch:
    """One `key {submessage}` pair of a complex argument."""

    key: str
    """Branch key exactly as written ("one", "=0", "male")."""

    body: str
    """Sub-message text between the branch braces."""


@dataclass(frozen=True, slots=True)
class ComplexArgument:
    """Parsed plural, selectordinal or select argument.

    Attributes:
        name: Argument name (may be invalid; see argument)
        format: Which complex keyword introduced the argument
        branches: Branches in source order
        offset: Plural offset, or None when absent
        truncated: True when branch parsing stopped at a malformed head or
            unbalanced body; branches before that point are kept
    """

    name: str
    format: ComplexFormat
    branches: tuple[Branch, ...] = ()
    offset: int | None = None
    truncated: bool = False

    @property
    def keys(self) -> tuple[str, ...]:
        """Branch keys in source order (duplicates preserved)."""
        return tuple(branch.key for branch in self.branches)

    @property
    def has_other(self) -> bool:
        """Whether an 'other' branch exists."""
        return OTHER_KEY in self.keys

    @property
    def value_kind(self) -> ValueKind:
        """Kind registered for the argument name.

        The select enum depends only on branch keys, never on what the
        branch bodies contain.
        """
        if self.format is not ComplexFormat.SELECT:
            return PLURAL_LIKE
        return SelectEnum(
            literals=frozenset(literal_key(key) for key in self.keys if key != OTHER_KEY),
            includes_other=self.has_other,
        )

    @property
    def argument(self) -> Argument | None:
        """Argument for the name, or None when the name is not usable."""
        if not is_valid_argument_name(self.name):
            return None
        return Argument(self.name, self.value_kind)


def split_argument(inner: str) -> tuple[str, str | None, str | None]:
    """Split inner brace content into (name, format, rest).

    Only the first two commas separate segments; the rest (style payload or
    branch list) may contain further commas.

    Example:
        >>> split_argument("n,number,::currency/EUR")
        ('n', 'number', '::currency/EUR')
        >>> split_argument("name")
        ('name', None, None)
        >>> split_argument("name,")
        ('name', '', None)
    """
    name, separator, tail = inner.partition(_SEGMENT_SEPARATOR)
    if not separator:
        return name, None, None
    fmt, separator, rest = tail.partition(_SEGMENT_SEPARATOR)
    return name, fmt, rest if separator else None


def is_valid_argument_name(name: str) -> bool:
    """Check that a name can be registered as an argument."""
    return bool(name) and name != PLURAL_PLACEHOLDER and "{" not in name and "}" not in name


def is_complex_argument(inner: str) -> bool:
    """Check whether inner content has the name,keyword,rest shape."""
    _name, fmt, rest = split_argument(inner)
    return rest is not None and fmt in COMPLEX_FORMATS


def classify_simple_argument(inner: str) -> Argument | None:
    """Classify the inner content of a simple argument.

    Returns:
        Argument with the inferred kind, or None when the content is
        malformed (empty name, trailing empty segment) or uses a format this
        extractor does not recognize.

    Example:
        >>> classify_simple_argument("a")
        Argument(name='a', value_kind=PlainText())
        >>> classify_simple_argument("a,date,medium")
        Argument(name='a', value_kind=DateOrTime())
        >>> classify_simple_argument("name,") is None
        True
    """
    name, fmt, _style = split_argument(inner)
    if not is_valid_argument_name(name):
        logger.debug("Ignoring argument with invalid name: {%s}", inner)
        return None

    if fmt is None:
        return Argument(name, PLAIN_TEXT)
    if fmt in NUMBER_FORMATS:
        return Argument(name, NUMBER)
    if fmt in DATETIME_FORMATS:
        return Argument(name, DATE_OR_TIME)

    # Covers the empty trailing segment as well as {x, select} without branches.
    logger.debug("Dropping argument '%s' with unrecognized format '%s'", name, fmt)
    return None


def _parse_branches(
    cursor: Cursor, fmt: ComplexFormat
) -> ParseResult[tuple[tuple[Branch, ...], bool]]:
    """Parse `key {body}` pairs until the input ends or a branch is malformed.

    Returns:
        ParseResult with (branches, truncated) and the cursor where parsing
        stopped.
    """
    key_parser = parse_select_key if fmt is ComplexFormat.SELECT else parse_plural_key
    branches: list[Branch] = []

    while not cursor.is_eof:
        key = key_parser(cursor)
        if key is None:
            return ParseResult((tuple(branches), True), cursor)

        opening = key.cursor.expect("{")
        if opening is None:
            return ParseResult((tuple(branches), True), cursor)

        body = consume_balanced(opening)
        if body is None:
            return ParseResult((tuple(branches), True), cursor)

        branches.append(Branch(key=key.value, body=body.value))
        cursor = body.cursor

    return ParseResult((tuple(branches), False), cursor)


def parse_complex_argument(inner: str) -> ComplexArgument | None:
    """Parse the inner content of a plural, selectordinal or select argument.

    Returns:
        ComplexArgument, or None when the content is not complex (the caller
        then falls back to classify_simple_argument()).

    Example:
        >>> parsed = parse_complex_argument("n,plural,offset:1=0{none}other{#}")
        >>> parsed.offset, parsed.keys
        (1, ('=0', 'other'))
        >>> parse_complex_argument("g,select,x{X}y").truncated
        True
    """
    name, fmt, rest = split_argument(inner)
    if rest is None or fmt not in COMPLEX_FORMATS:
        return None

    complex_format = ComplexFormat(fmt)
    cursor = Cursor(rest, 0)
    offset: int | None = None

    if complex_format is not ComplexFormat.SELECT and cursor.starts_with(OFFSET_PREFIX):
        parsed_offset = parse_offset(cursor)
        if parsed_offset is None:
            logger.debug("Malformed offset in '%s'; no branches parsed", name)
            return ComplexArgument(name=name, format=complex_format, truncated=True)
        offset = parsed_offset.value
        cursor = parsed_offset.cursor

    parsed = _parse_branches(cursor, complex_format)
    branches, truncated = parsed.value
    if truncated:
        logger.debug(
            "Branch parsing of '%s' stopped at position %d: %r",
            name,
            parsed.cursor.pos,
            parsed.cursor.remaining[:20],
        )

    return ComplexArgument(
        name=name,
        format=complex_format,
        branches=branches,
        offset=offset,
        truncated=truncated,
    )
