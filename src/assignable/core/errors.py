"""
Core exception types raised while building descriptors.

Provides typed exceptions for core-domain failures:
- SchemaError for descriptor construction constraints (empty unions, unsupported
  literal values, non-descriptor children).
- GrammarError for unknown or non-lower_snake type kind strings.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Validators in assignable.core.schema raise SchemaError; pydantic surfaces
      these as pydantic.ValidationError when raised during model validation.
    - The assignability engine never raises either; malformed descriptors yield False.

Examples:
    Catch a construction failure.

    >>> from pydantic import ValidationError
    >>> from assignable.core.schema import union
    >>> try:
    ...     union([])
    ... except ValidationError as e:
    ...     msg = str(e)
    >>> "at least one option" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "GrammarError",
]


class SchemaError(ValueError):
    """Descriptor construction failure (shape, arity, unsupported values)."""


class GrammarError(ValueError):
    """Type kind naming/normalization failure (e.g., not lower_snake or unknown kind)."""
