"""
Canonical descriptor vocabulary and helpers.

Defines the closed set of type kinds a descriptor may carry, the kind groupings
the engine reasons about (base primitives and the primitive fallback targets), and
zero-IO normalization helpers for kind strings.

Responsibilities
- Define the TypeKind enum (lower_snake serialized values).
- Group kinds into the sets used by the assignability rules.
- Provide normalization and validation helpers for kind strings.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values: lower_snake

2) Closed vocabulary:
   - Every descriptor carries exactly one TypeKind.
   - Adding a kind means adding a rule arm in assignable.core.engine; kinds
     with no arm fall through to "not assignable".

Kind-to-Python mapping
----------------------
| Kind       | Python runtime values                                  |
|------------|--------------------------------------------------------|
| string     | str                                                    |
| number     | int, float (never bool)                                |
| boolean    | bool                                                   |
| bigint     | int (never bool)                                       |
| symbol     | none (no Python runtime value matches)                 |
| null       | None                                                   |
| undefined  | assignable.core.constants.UNDEFINED                    |

Examples
--------
>>> from assignable.core.grammar import TypeKind, kind_from_value, is_primitive_kind
>>> kind_from_value("string") == TypeKind.STRING
True
>>> is_primitive_kind(TypeKind.BIGINT)
True
>>> is_primitive_kind(TypeKind.LITERAL)
False
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final

__all__ = [
    "TypeKind",
    "PRIMITIVE_KINDS",
    "WIDENING_FALLBACK_KINDS",
    # helpers/validators
    "is_lower_snake",
    "assert_lower_snake",
    "kind_value",
    "kind_from_value",
    "is_primitive_kind",
    "ensure_all_enum_values_lower_snake",
]


class TypeKind(Enum):
    """
    Discriminant carried by every type descriptor.

    Serialized values are used in:
      - TypeDescriptor.kind (assignable.core.schema)
      - Trace log records emitted by assignable.core.engine
      - Matrix rows produced by assignable.io.matrix
    """

    # base primitives
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BIGINT = "bigint"
    SYMBOL = "symbol"

    # unit types
    UNDEFINED = "undefined"
    NULL = "null"

    # top / bottom
    ANY = "any"
    UNKNOWN = "unknown"
    NEVER = "never"

    # value sets
    LITERAL = "literal"
    ENUM = "enum"

    # wrappers
    OPTIONAL = "optional"
    NULLABLE = "nullable"

    # containers
    ARRAY = "array"
    TUPLE = "tuple"
    OBJECT = "object"
    RECORD = "record"

    # combinators
    UNION = "union"
    INTERSECTION = "intersection"

    # opaque predicates
    CUSTOM = "custom"


# Kinds compared by kind equality alone (no cross-primitive widening).
PRIMITIVE_KINDS: Final[frozenset[TypeKind]] = frozenset(
    {
        TypeKind.STRING,
        TypeKind.NUMBER,
        TypeKind.BOOLEAN,
        TypeKind.BIGINT,
        TypeKind.SYMBOL,
    }
)

# Targets for the last-resort kind-equality check.
WIDENING_FALLBACK_KINDS: Final[frozenset[TypeKind]] = frozenset(
    {TypeKind.STRING, TypeKind.NUMBER, TypeKind.BOOLEAN}
)


# ============================================================================
# Helpers & Validators (zero I/O)
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Args:
      value (str): Candidate string to validate.

    Returns:
      bool: True if value matches lower_snake (e.g., "intersection"), False otherwise.

    Examples:
      >>> is_lower_snake("intersection")
      True
      >>> is_lower_snake("Intersection")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Args:
      value (str): Candidate string to validate.
      what (str): Human-friendly label used in the error message.

    Raises:
      ValueError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise ValueError(f"{what} must be lower_snake (got: {value!r})")


def kind_value(kind: TypeKind) -> str:
    """
    Get the serialized (lower_snake) value for a TypeKind.

    Args:
      kind (TypeKind): Kind enum.

    Returns:
      str: Lower_snake serialized value (e.g., "record").
    """
    return kind.value


def kind_from_value(s: str) -> TypeKind:
    """
    Parse a lower_snake kind string into a TypeKind.

    Args:
      s (str): Lower_snake kind string.

    Returns:
      TypeKind: Parsed kind.

    Raises:
      ValueError: If s is not lower_snake or is not a known kind.
    """
    assert_lower_snake(s, "type kind")
    return TypeKind(s)


def is_primitive_kind(kind: TypeKind | None) -> bool:
    """Return True for the base primitive kinds (string, number, boolean, bigint, symbol)."""
    return kind in PRIMITIVE_KINDS


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Args:
      enums (Iterable[type[Enum]]): Iterable of Enum classes to inspect.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.

    Examples:
      >>> ensure_all_enum_values_lower_snake([TypeKind])
    """
    for E in enums:
        for m in E:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{E.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
