"""Validation of ICU message templates.

Checks what the schema alone does not: mandatory 'other' branches, repeated
branch keys and, with Babel installed, plural keys against CLDR categories.

Python 3.13+.
"""

from .message import validate_message

__all__ = ["validate_message"]
