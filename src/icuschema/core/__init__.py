"""Core utilities shared across syntax, schema and validation layers.

Keeps the dependency graph one-directional:

    core <- syntax <- schema/introspection/validation

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    BabelImportError: Exception raised when Babel is required but missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = [
    "BabelImportError",
    "DepthGuard",
    "DepthLimitExceededError",
    "is_babel_available",
    "require_babel",
]
