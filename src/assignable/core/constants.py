"""
Core constants shared by the descriptor model and the engine.

Defines the ``UNDEFINED`` sentinel (the runtime value of the ``undefined`` kind,
distinct from ``None`` which models ``null``) and the default recursion depth
limit consumed by assignable.io.config. This module is zero-IO and uses only the
Python standard library.

Notes:
    - ``UNDEFINED`` is a falsy singleton; compare with ``is``.
    - Each descriptor level costs up to five Python frames, so MAX_DEPTH is
      kept well under a fifth of the default interpreter recursion limit.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "UNDEFINED",
    "UndefinedType",
    "MAX_DEPTH",
]


class UndefinedType:
    """Type of the UNDEFINED sentinel. Only one instance exists."""

    _instance: UndefinedType | None = None
    __slots__ = ()

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


# Runtime value of the `undefined` kind; an `optional` field may be absent or UNDEFINED.
UNDEFINED: Final[UndefinedType] = UndefinedType()

# Nesting depth past which a comparison is abandoned and reported as not assignable.
MAX_DEPTH: Final[int] = 128
