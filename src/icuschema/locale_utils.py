"""Locale code handling for CLDR lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from icuschema.core.babel_compat import require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Rewrite a BCP-47 tag with the underscores Babel expects.

    Example:
        >>> normalize_locale("sr-Latn-RS")
        'sr_Latn_RS'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Babel Locale for locale_code, parsed once per distinct code.

    Both "pt-BR" and "pt_BR" are accepted.

    Raises:
        BabelImportError: Babel is not installed
        babel.core.UnknownLocaleError: CLDR has no data for the code
        ValueError: The code is not a locale identifier at all
    """
    require_babel("get_babel_locale")
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
