"""Primitive parsing utilities for the ICU argument parser.

This module provides low-level parsers over sanitized text (whitespace and
escaped spans already removed): the balanced-brace scanner, digit runs,
plural/select branch keys and the plural offset.

Every parser takes a Cursor and returns ParseResult[T] | None; None means
"no match here" and the caller decides how to recover.
"""

from icuschema.constants import OFFSET_PREFIX
from icuschema.syntax.cursor import Cursor, ParseResult

__all__ = [
    "consume_balanced",
    "parse_digits",
    "parse_offset",
    "parse_plural_key",
    "parse_select_key",
]

# ASCII digits only - str.isdigit() returns True for Unicode digits like ² or ³
# which int() rejects.
_ASCII_DIGITS: str = "0123456789"

# Plural keywords are CLDR category names (zero, one, two, few, many, other),
# but any identifier-shaped word is accepted; locale validation flags the rest.
_PLURAL_KEY_START: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
_PLURAL_KEY_CHARS: frozenset[str] = _PLURAL_KEY_START | frozenset(_ASCII_DIGITS + "-")

_EXPLICIT_VALUE_MARKER: str = "="


def consume_balanced(cursor: Cursor) -> ParseResult[str] | None:
    """Consume up to the brace matching an already consumed '{'.

    The nesting counter starts at 1 because the caller consumed the opening
    brace; '{' increments it and '}' decrements it.

    Args:
        cursor: Position immediately after the opening '{'

    Returns:
        ParseResult with the inner content (nested braces preserved) and the
        cursor just past the matching '}', or None if the input ends first.

    Example:
        >>> result = consume_balanced(Cursor("{a,plural,one{#}}}rest", 1))
        >>> result.value
        'a,plural,one{#}}'
        >>> result.cursor.remaining
        'rest'
        >>> consume_balanced(Cursor("{name", 1)) is None
        True
    """
    source = cursor.source
    depth = 1
    pos = cursor.pos
    length = len(source)
    while pos < length:
        char = source[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return ParseResult(cursor.slice_to(pos), Cursor(source, pos + 1))
        pos += 1
    return None


def parse_digits(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a non-empty run of ASCII digits."""
    start_pos = cursor.pos
    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        cursor = cursor.advance()
    if cursor.pos == start_pos:
        return None
    return ParseResult(Cursor(cursor.source, start_pos).slice_to(cursor.pos), cursor)


def parse_offset(cursor: Cursor) -> ParseResult[int] | None:
    """Parse a plural offset: offset:<digits>.

    Returns:
        ParseResult with the offset value, or None if the input does not
        start with a complete offset token.

    Example:
        >>> parse_offset(Cursor("offset:1=0{none}", 0)).value
        1
        >>> parse_offset(Cursor("one{#}", 0)) is None
        True
    """
    if not cursor.starts_with(OFFSET_PREFIX):
        return None
    digits = parse_digits(cursor.advance(len(OFFSET_PREFIX)))
    if digits is None:
        return None
    return ParseResult(int(digits.value), digits.cursor)


def parse_plural_key(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a plural/selectordinal branch key.

    Grammar:
        plural_key ::= "=" digits | identifier
        identifier ::= [a-zA-Z_] [a-zA-Z0-9_-]*

    Returns:
        ParseResult with the key exactly as written ("=0", "one"), or None.

    Example:
        >>> parse_plural_key(Cursor("=0{none}", 0)).value
        '=0'
        >>> parse_plural_key(Cursor("few{#}", 0)).value
        'few'
        >>> parse_plural_key(Cursor("={x}", 0)) is None
        True
    """
    if cursor.is_eof:
        return None

    if cursor.current == _EXPLICIT_VALUE_MARKER:
        digits = parse_digits(cursor.advance())
        if digits is None:
            return None
        return ParseResult(_EXPLICIT_VALUE_MARKER + digits.value, digits.cursor)

    if cursor.current not in _PLURAL_KEY_START:
        return None
    start_pos = cursor.pos
    cursor = cursor.advance()
    while not cursor.is_eof and cursor.current in _PLURAL_KEY_CHARS:
        cursor = cursor.advance()
    return ParseResult(Cursor(cursor.source, start_pos).slice_to(cursor.pos), cursor)


def parse_select_key(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a select branch key: every character up to the next '{'.

    Select keys are bare tokens such as "male", "key-with-dashes", "123" or
    "true". A key may not contain braces and may not be empty.

    Returns:
        ParseResult with the key (cursor left on the '{'), or None.

    Example:
        >>> result = parse_select_key(Cursor("key_with_underscores{U}", 0))
        >>> result.value, result.cursor.current
        ('key_with_underscores', '{')
        >>> parse_select_key(Cursor("{X}", 0)) is None
        True
        >>> parse_select_key(Cursor("}x{X}", 0)) is None
        True
    """
    brace = cursor.seek("{")
    if brace is None:
        return None
    key = cursor.slice_to(brace.pos)
    if not key or "}" in key:
        return None
    return ParseResult(key, brace)
