"""icuschema - argument and tag schema extraction for ICU MessageFormat.

Reads an ICU MessageFormat template and reports which named arguments it
interpolates, what kind of value each one expects, and which rich-text tags
it uses. Several templates (for example every translation of one message)
can be merged into one schema, with conflicting kinds surfaced.

Public API:
    extract_schema - Schema of one template (cached)
    extract_schemas - Extract several templates and merge the results
    merge_schemas - Merge Schema objects with type widening
    clear_schema_cache - Drop cached extraction results
    MessageParser - Parser with custom size/depth limits
    Schema - Arguments, tags and in-template conflicts

Exceptions:
    ICUSchemaError - Base exception class
    SchemaConflictError - Incompatible kinds for one argument name

Submodules:
    icuschema.schema - Value kinds, literal keys and merging
    icuschema.syntax - Sanitizer, parser and tag extractor
    icuschema.introspection - Complex-argument introspection
    icuschema.validation - Message validation (CLDR checks need Babel)
    icuschema.diagnostics - Diagnostics, error types and validation results
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import ICUSchemaError, SchemaConflictError
from .introspection import (
    clear_schema_cache,
    extract_schema,
    extract_schemas,
    introspect_message,
)
from .schema import Argument, Schema, TypeConflict, merge_schemas
from .syntax import MessageParser
from .validation import validate_message

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # This should never happen on Python 3.13+ (importlib.metadata is stdlib since 3.8)
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("icuschema")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Argument",
    "ICUSchemaError",
    "MessageParser",
    "Schema",
    "SchemaConflictError",
    "TypeConflict",
    "__version__",
    "clear_schema_cache",
    "extract_schema",
    "extract_schemas",
    "introspect_message",
    "merge_schemas",
    "validate_message",
]
