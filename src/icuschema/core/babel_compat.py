"""Optional Babel support.

Schema extraction is pure Python. Only validate_message(locale=...) needs
CLDR plural rules, which come from Babel; installing the `babel` extra
enables it:

    pip install icuschema[babel]

Code that needs Babel calls require_babel() first and imports babel inside
the function body afterwards, so importing icuschema never imports babel.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A Babel-backed feature was used without Babel installed.

    Attributes:
        feature: What the caller tried to use
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} needs CLDR plural rules from Babel. "
            "Install with: pip install icuschema[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """Whether `import babel` succeeds (checked once per process)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming feature unless Babel is importable."""
    if not _check_babel_available():
        raise BabelImportError(feature)
