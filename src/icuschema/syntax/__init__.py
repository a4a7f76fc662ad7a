"""ICU MessageFormat syntax package.

Provides the sanitizer, the argument parser and the tag extractor.
Everything here works on plain strings; the Schema model lives in
icuschema.schema.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import Branch, ComplexArgument, MessageParser, ParsedMessage
from .sanitize import sanitize
from .tags import extract_tags

__all__ = [
    "Branch",
    "ComplexArgument",
    "Cursor",
    "MessageParser",
    "ParseResult",
    "ParsedMessage",
    "extract_tags",
    "sanitize",
]
