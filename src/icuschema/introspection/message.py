"""Template introspection and the cached public extraction API.

This module turns template strings into Schema objects using a shared
MessageParser and exposes the complex arguments (plural, selectordinal,
select) found along the way.

Key features:
- Bounded LRU cache keyed by template text (templates are immutable strings)
- Frozen dataclasses with slots for results
- Batch extraction with schema merging

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from dataclasses import dataclass

from icuschema.constants import SCHEMA_CACHE_SIZE
from icuschema.enums import ComplexFormat
from icuschema.schema import Schema, merge_schemas
from icuschema.syntax.parser import ComplexArgument, MessageParser, ParsedMessage

__all__ = [
    "MessageIntrospection",
    "clear_schema_cache",
    "extract_argument_names",
    "extract_schema",
    "extract_schemas",
    "introspect_message",
]

# Default limits; callers needing other limits use MessageParser directly.
_parser = MessageParser()


# functools.lru_cache is thread-safe: concurrent misses may parse the same
# template twice, but the cache itself never corrupts.
@functools.lru_cache(maxsize=SCHEMA_CACHE_SIZE)
def _parse_cached(template: str) -> ParsedMessage:
    return _parser.parse_message(template)


def _parse(template: str, *, use_cache: bool) -> ParsedMessage:
    # Validate before hashing: lru_cache would raise its own TypeError for
    # unhashable input and happily cache hashable non-strings.
    if not isinstance(template, str):
        msg = f"Template must be a str, not {type(template).__name__}"  # type: ignore[unreachable]
        raise TypeError(msg)
    if use_cache:
        return _parse_cached(template)
    return _parser.parse_message(template)


def clear_schema_cache() -> None:
    """Clear the extraction cache.

    Useful for long-running processes that extract many one-off templates,
    and for tests that inspect log output of a fresh parse.
    """
    _parse_cached.cache_clear()


@dataclass(frozen=True, slots=True)
class MessageIntrospection:
    """Complete introspection result for a template.

    All fields are immutable and use slots for optimal memory usage.
    """

    schema: Schema
    """Extracted arguments, tags and in-template conflicts."""

    selectors: tuple[ComplexArgument, ...]
    """Every plural, selectordinal and select in discovery order."""

    @property
    def has_selectors(self) -> bool:
        """Whether the template uses plural, selectordinal or select."""
        return bool(self.selectors)

    def get_argument_names(self) -> frozenset[str]:
        """Get set of argument names."""
        return self.schema.get_argument_names()

    def requires_argument(self, name: str) -> bool:
        """Check if the template interpolates a specific argument."""
        return self.schema.requires_argument(name)

    def get_selectors(self, fmt: ComplexFormat) -> tuple[ComplexArgument, ...]:
        """Get the complex arguments of one format.

        Args:
            fmt: Complex format to filter by

        Returns:
            Matching complex arguments in discovery order
        """
        return tuple(selector for selector in self.selectors if selector.format is fmt)


def introspect_message(template: str, *, use_cache: bool = True) -> MessageIntrospection:
    """Introspect a template: schema plus every complex argument.

    Args:
        template: ICU MessageFormat template
        use_cache: If True (default), reuse the result for identical templates.

    Returns:
        MessageIntrospection

    Raises:
        TypeError: If template is not a str
        ValueError: If template exceeds MAX_SOURCE_SIZE

    Example:
        >>> info = introspect_message("{n, plural, offset:1 =0 {none} other {# more}}")
        >>> info.selectors[0].offset
        1
        >>> info.selectors[0].keys
        ('=0', 'other')
    """
    parsed = _parse(template, use_cache=use_cache)
    return MessageIntrospection(schema=parsed.schema, selectors=parsed.selectors)


def extract_schema(template: str, *, use_cache: bool = True) -> Schema:
    """Extract the argument/tag schema of one template.

    Total over malformed syntax: anything that does not parse contributes
    nothing, and conflicting kinds for one name are listed in
    Schema.conflicts instead of raising.

    Args:
        template: ICU MessageFormat template
        use_cache: If True (default), reuse the result for identical templates.

    Returns:
        Schema

    Raises:
        TypeError: If template is not a str
        ValueError: If template exceeds MAX_SOURCE_SIZE

    Example:
        >>> schema = extract_schema("{g, select, x {X} y {Y} other {O}}")
        >>> schema.get_value_kind("g").describe()
        'select[x|y|other]'
    """
    return _parse(template, use_cache=use_cache).schema


def extract_schemas(templates: Iterable[str], *, strict: bool = True) -> Schema:
    """Extract every template and merge the results.

    Args:
        templates: Templates analyzed together (e.g., all translations of
            one message)
        strict: Passed to merge_schemas()

    Returns:
        Merged schema

    Raises:
        SchemaConflictError: In strict mode, on any kind conflict
    """
    return merge_schemas((extract_schema(template) for template in templates), strict=strict)


def extract_argument_names(template: str) -> frozenset[str]:
    """Extract argument names from a template (simplified API).

    Example:
        >>> sorted(extract_argument_names("{a} and {b, number}"))
        ['a', 'b']
    """
    return extract_schema(template).get_argument_names()
