"""
Lightweight typing aliases used across the descriptor model and the engine.

This module contains no runtime logic and is zero-IO.

Notes:
    - Intended for use in annotations across schema, introspect, and engine.
    - Keep the surface small and stable to avoid churn in dependents.

Examples:
    Use aliases in annotations.

    >>> from assignable.core.typing import LiteralValue, EnumValue
    >>> def first(values: tuple[LiteralValue, ...]) -> LiteralValue:
    ...     return values[0]
    >>> first(("a", 1))
    'a'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Union

from .constants import UndefinedType

__all__ = [
    "LiteralValue",
    "EnumValue",
    "Predicate",
]

# Values a literal descriptor may match exactly. UndefinedType models `undefined`.
LiteralValue = Union[str, int, float, bool, None, UndefinedType]

EnumValue = Union[str, int, float]

# Opaque runtime check carried by custom descriptors.
Predicate = Callable[[Any], bool]
