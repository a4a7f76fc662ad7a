"""ICU MessageFormat argument parser.

Module Organization:
- core.py: MessageParser class, the extract loop and sub-message recursion
- primitives.py: Balanced-brace scanner, digits, offset and branch keys
- rules.py: Simple-argument classifier and complex-argument parser

Public API:
    MessageParser: Main parser class
    ParsedMessage: Schema plus complex arguments (introspection input)
    ComplexArgument: Parsed plural, selectordinal or select argument
"""

from icuschema.syntax.parser.core import MessageParser, ParsedMessage
from icuschema.syntax.parser.rules import Branch, ComplexArgument

__all__ = ["Branch", "ComplexArgument", "MessageParser", "ParsedMessage"]
