"""Core ICU MessageFormat schema parser.

This module provides the MessageParser class that turns one template into a
Schema: the argument names with their inferred value kinds plus the names of
rich-text tags.

Architecture:
    1. sanitize() removes whitespace and escaped spans
    2. The extract loop finds each top-level `{...}` with consume_balanced()
       and hands its inner content to the rules in
       :mod:`~icuschema.syntax.parser.rules`
    3. Complex arguments are recursed into, one DepthGuard level per
       sub-message
    4. extract_tags() scans the quote-resolved text (whitespace kept) for tags

    An opening brace without a matching close ends extraction of the
    enclosing scope; arguments found before it are kept.

Security:
    Includes a configurable input size limit and nesting depth limit. Bodies
    nested deeper than the limit are treated as literal text, so parsing
    never raises RecursionError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from icuschema.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from icuschema.core.depth_guard import DepthGuard, DepthLimitExceededError
from icuschema.enums import ConflictOrigin
from icuschema.schema import Schema, SchemaBuilder
from icuschema.syntax.cursor import Cursor
from icuschema.syntax.parser.primitives import consume_balanced
from icuschema.syntax.parser.rules import (
    ComplexArgument,
    classify_simple_argument,
    parse_complex_argument,
)
from icuschema.syntax.sanitize import sanitize
from icuschema.syntax.tags import extract_tags

__all__ = ["MessageParser", "ParsedMessage"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedMessage:
    """Parse output: the schema plus every complex argument encountered.

    Attributes:
        schema: Extracted schema
        selectors: Complex arguments in discovery order (outer before nested)
    """

    schema: Schema
    selectors: tuple[ComplexArgument, ...] = ()


@dataclass(slots=True)
class _ExtractionState:
    """Mutable accumulators threaded through one parse."""

    builder: SchemaBuilder
    guard: DepthGuard
    selectors: list[ComplexArgument] = field(default_factory=list)


class MessageParser:
    """ICU MessageFormat schema parser.

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 1 MB (far beyond any real UI message)
    - Configurable max_depth bounds sub-message and tag nesting

    Thread Safety:
        Stateless between calls; one instance may be shared across threads.

    Attributes:
        max_source_size: Maximum allowed template size in characters
        max_depth: Maximum sub-message nesting depth (clamped against the
            interpreter recursion limit)
    """

    __slots__ = ("_max_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and depth limits.

        Args:
            max_source_size: Maximum template size in characters (default: 1 MB).
                            Set to 0 to disable the size limit (not recommended).
            max_depth: Maximum sub-message nesting depth (default: 100).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_depth = max_depth if max_depth is not None else MAX_DEPTH

    @property
    def max_source_size(self) -> int:
        """Maximum allowed template size in characters."""
        return self._max_source_size

    @property
    def max_depth(self) -> int:
        """Maximum sub-message nesting depth."""
        return self._max_depth

    def parse(self, template: str) -> Schema:
        """Extract the schema of one template.

        Args:
            template: ICU MessageFormat template

        Returns:
            Schema. Malformed fragments contribute nothing; same-name kind
            conflicts are listed in Schema.conflicts.

        Raises:
            TypeError: If template is not a str
            ValueError: If template exceeds max_source_size (DoS prevention)

        Example:
            >>> parser = MessageParser()
            >>> parser.parse("Hi {name}, you have {n, number} <b>new</b> items").argument_map()
            {'name': PlainText(), 'n': Number()}
        """
        return self.parse_message(template).schema

    def parse_message(self, template: str) -> ParsedMessage:
        """Extract the schema and the complex arguments of one template.

        Same contract as parse(); the extra selector list feeds introspection
        and validation.
        """
        if not isinstance(template, str):
            msg = f"Template must be a str, not {type(template).__name__}"
            raise TypeError(msg)

        # Validate input size (DoS prevention)
        if self._max_source_size > 0 and len(template) > self._max_source_size:
            msg = (
                f"Template size ({len(template):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in MessageParser constructor to increase limit."
            )
            raise ValueError(msg)

        state = _ExtractionState(
            builder=SchemaBuilder(ConflictOrigin.NESTED),
            guard=DepthGuard(max_depth=self._max_depth),
        )
        self._extract(Cursor(sanitize(template), 0), state)
        state.builder.add_tags(
            extract_tags(sanitize(template, strip_whitespace=False), max_depth=self._max_depth)
        )

        schema = state.builder.build()
        logger.debug(
            "Extracted %d arguments, %d tags, %d conflicts",
            len(schema.arguments),
            len(schema.tags),
            len(schema.conflicts),
        )
        return ParsedMessage(schema=schema, selectors=tuple(state.selectors))

    def _extract(self, cursor: Cursor, state: _ExtractionState) -> None:
        """Walk one scope (template or branch body), classifying each brace."""
        while True:
            opening = cursor.seek("{")
            if opening is None:
                return

            inner = consume_balanced(opening.advance())
            if inner is None:
                logger.debug("Unbalanced '{' at position %d; rest of scope ignored", opening.pos)
                return

            self._classify(inner.value, state)
            cursor = inner.cursor

    def _classify(self, inner: str, state: _ExtractionState) -> None:
        complex_argument = parse_complex_argument(inner)
        if complex_argument is None:
            argument = classify_simple_argument(inner)
            if argument is not None:
                state.builder.add_argument(argument)
            return

        state.selectors.append(complex_argument)
        argument = complex_argument.argument
        if argument is not None:
            state.builder.add_argument(argument)

        for branch in complex_argument.branches:
            try:
                with state.guard:
                    self._extract(Cursor(branch.body, 0), state)
            except DepthLimitExceededError:
                logger.warning(
                    "Sub-message '%s' of '%s' exceeds nesting depth %d; treated as text",
                    branch.key,
                    complex_argument.name,
                    state.guard.max_depth,
                )
