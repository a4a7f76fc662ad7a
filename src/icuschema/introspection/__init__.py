"""Introspection of ICU MessageFormat templates.

Provides the cached extraction entry points (extract_schema and friends)
and the richer introspect_message() result exposing complex arguments.

Python 3.13+.
"""

from .message import (
    MessageIntrospection,
    clear_schema_cache,
    extract_argument_names,
    extract_schema,
    extract_schemas,
    introspect_message,
)

__all__ = [
    "MessageIntrospection",
    "clear_schema_cache",
    "extract_argument_names",
    "extract_schema",
    "extract_schemas",
    "introspect_message",
]
