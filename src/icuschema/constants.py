"""Shared constants for icuschema.

This module provides centralized configuration constants used across the
syntax, schema and validation packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested sub-messages and tags
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for the schema cache
- Grammar: ICU MessageFormat keywords and reserved characters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Cache limits
    "SCHEMA_CACHE_SIZE",
    # Grammar
    "WHITESPACE_CHARS",
    "QUOTE_CHAR",
    "PLURAL_PLACEHOLDER",
    "OTHER_KEY",
    "OFFSET_PREFIX",
    "NUMBER_FORMATS",
    "DATETIME_FORMATS",
    "COMPLEX_FORMATS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth for sub-messages ({n, plural, one {{x, select, ...}}})
# and for tags nested inside tag bodies. Each level costs a handful of Python
# frames, so 100 levels stays well below the default recursion limit of 1000.
# Real-world ICU messages rarely nest deeper than 3-4 levels.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum template size in characters (1 MB).
# A single ICU message is a UI string; anything this large is not a message.
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of cached extract_schema() results.
# Typical catalogs hold a few hundred to a few thousand messages.
SCHEMA_CACHE_SIZE: int = 2048

# ============================================================================
# GRAMMAR
# ============================================================================

# Whitespace removed by the sanitizer (space, tab, LF, CR).
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\r")

# ICU apostrophe quoting character.
QUOTE_CHAR: str = "'"

# Inside plural/selectordinal branches, '#' stands for the (offset) number.
PLURAL_PLACEHOLDER: str = "#"

# Catch-all branch key for plural, selectordinal and select.
OTHER_KEY: str = "other"

# Optional plural offset prefix: {n, plural, offset:1 ...}
OFFSET_PREFIX: str = "offset:"

# Simple formats classified as numeric values.
NUMBER_FORMATS: frozenset[str] = frozenset({"number", "plural", "selectordinal"})

# Simple formats classified as date/time values.
DATETIME_FORMATS: frozenset[str] = frozenset({"date", "time"})

# Formats that carry keyed sub-message branches.
COMPLEX_FORMATS: frozenset[str] = frozenset({"plural", "select", "selectordinal"})
