"""Rich-text tag extraction.

Scans quote-resolved template text for `<name ...>...</name>` pairs:

- Self-closing tags (`<br/>`, `<img src="x"/>`) are ignored.
- Unmatched opening tags are ignored, but tags after them are still found.
- Attributes after the tag name are discarded; they may not contain '<'.
- A closing tag pairs with the nearest still-open tag of the same name, so
  `<a>x<a>y</a>z</a>` pairs the outer `<a>` with the last `</a>`. Opening
  tags skipped over by that pairing are unmatched.

Pairing is a single left-to-right pass over the '<' characters, so the work
stays linear in the text length however many tags are left open.

Runs on sanitize(template, strip_whitespace=False) output: whitespace is
what separates a tag name from its attributes, and escaped spans must not
produce tags.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from operator import attrgetter

from icuschema.constants import MAX_DEPTH, WHITESPACE_CHARS
from icuschema.syntax.cursor import Cursor, ParseResult

__all__ = ["extract_tags", "parse_close_tag", "parse_open_tag"]

logger = logging.getLogger(__name__)

_TAG_NAME_START: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
_TAG_NAME_CHARS: frozenset[str] = _TAG_NAME_START | frozenset("0123456789-.:")


@dataclass(frozen=True, slots=True)
class _TagPair:
    """Matched opening and closing tag, as [start, end) offsets."""

    name: str
    start: int
    end: int


def _skip_name(cursor: Cursor) -> Cursor:
    while not cursor.is_eof and cursor.current in _TAG_NAME_CHARS:
        cursor = cursor.advance()
    return cursor


def _attributes_end(cursor: Cursor) -> Cursor | None:
    """Cursor on the '>' closing an attribute list, searched up to the next '<'."""
    source = cursor.source
    next_lt = source.find("<", cursor.pos)
    index = source.find(">", cursor.pos, len(source) if next_lt < 0 else next_lt)
    return None if index < 0 else Cursor(source, index)


def parse_open_tag(cursor: Cursor) -> ParseResult[str] | None:
    """Parse an opening tag at a '<'.

    Returns:
        ParseResult with the tag name and the cursor just past '>', or None
        for anything else (closing tags, self-closing tags, stray '<').

    Example:
        >>> parse_open_tag(Cursor('<a href="x">text</a>', 0)).value
        'a'
        >>> parse_open_tag(Cursor("<br/>", 0)) is None
        True
        >>> parse_open_tag(Cursor("< b>", 0)) is None
        True
    """
    after_lt = cursor.expect("<")
    if after_lt is None or after_lt.is_eof or after_lt.current not in _TAG_NAME_START:
        return None

    end = _skip_name(after_lt)
    if end.is_eof:
        return None
    name = after_lt.slice_to(end.pos)

    match end.current:
        case ">":
            return ParseResult(name, end.advance())
        case char if char in WHITESPACE_CHARS:
            closing = _attributes_end(end)
            if closing is None or closing.peek(-1) == "/":
                return None
            return ParseResult(name, closing.advance())
        case _:
            return None


def parse_close_tag(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a `</name>` closing tag at a '<'.

    Example:
        >>> parse_close_tag(Cursor("</b> rest", 0)).value
        'b'
        >>> parse_close_tag(Cursor("</b rest", 0)) is None
        True
    """
    after_slash = cursor.expect("</")
    if after_slash is None or after_slash.is_eof or after_slash.current not in _TAG_NAME_START:
        return None

    end = _skip_name(after_slash)
    closing = end.expect(">")
    if closing is None:
        return None
    return ParseResult(after_slash.slice_to(end.pos), closing)


def _pair_tags(text: str) -> list[_TagPair]:
    """Match opening and closing tags in one pass."""
    pairs: list[_TagPair] = []
    open_tags: list[tuple[str, int]] = []
    open_names: Counter[str] = Counter()
    unmatched = 0
    cursor = Cursor(text, 0)

    while True:
        lt = cursor.seek("<")
        if lt is None:
            break

        closed = parse_close_tag(lt)
        if closed is not None:
            cursor = closed.cursor
            if not open_names[closed.value]:
                continue
            while True:
                name, start = open_tags.pop()
                open_names[name] -= 1
                if name == closed.value:
                    break
                unmatched += 1
            pairs.append(_TagPair(name, start, cursor.pos))
            continue

        opened = parse_open_tag(lt)
        if opened is None:
            cursor = lt.advance()
            continue
        open_tags.append((opened.value, lt.pos))
        open_names[opened.value] += 1
        cursor = opened.cursor

    unmatched += len(open_tags)
    if unmatched:
        logger.debug("Ignoring %d unmatched opening tags", unmatched)
    return pairs


def extract_tags(text: str, *, max_depth: int = MAX_DEPTH) -> frozenset[str]:
    """Collect the names of all matched tag pairs.

    Args:
        text: Quote-resolved template text (whitespace preserved)
        max_depth: Tags enclosed by more than this many pairs are skipped
            (default: 100)

    Returns:
        Set of tag names. Never raises.

    Example:
        >>> sorted(extract_tags("<b>Hi <i>there</i></b> <br/>"))
        ['b', 'i']
        >>> extract_tags("hello <link>world</boldThis>")
        frozenset()
    """
    tags: set[str] = set()
    truncated: dict[int, str] = {}
    # Pairs never partially overlap, so the ones still open form a chain.
    enclosing: list[_TagPair] = []

    for pair in sorted(_pair_tags(text), key=attrgetter("start")):
        while enclosing and enclosing[-1].end <= pair.start:
            enclosing.pop()
        if len(enclosing) > max_depth:
            outer = enclosing[max_depth]
            truncated[outer.start] = outer.name
        else:
            tags.add(pair.name)
        enclosing.append(pair)

    for name in truncated.values():
        logger.warning(
            "Tags nested deeper than %d levels inside <%s> were not scanned",
            max_depth,
            name,
        )
    return frozenset(tags)
