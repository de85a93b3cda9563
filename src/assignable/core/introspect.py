"""
Descriptor introspection: classification predicates and structural accessors.

The engine reads descriptors only through this module, so it stays agnostic of
how assignable.core.schema stores structure. Every operation is total: a wrong
kind, a non-descriptor, or a descriptor missing its structural part (possible
only via ``Model.model_construct()``) yields an absent result (None, an empty
tuple, or an empty mapping) and never raises.

Notes:
    - Predicates are pure functions of ``discriminant``.
    - ``unwrap_optional``/``unwrap_nullable`` unwrap exactly one level.
    - ``has_kind`` is the only operation that raises, and only for an unknown
      kind string (GrammarError); it never raises for odd descriptors.

Examples:
    >>> from assignable.core import introspect as ti
    >>> from assignable.core.schema import string, union, literal
    >>> u = union([string(), literal("a")])
    >>> ti.is_union(u), ti.is_string(u)
    (True, False)
    >>> [ti.discriminant(o).value for o in ti.union_options(u)]
    ['string', 'literal']
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .errors import GrammarError
from .grammar import TypeKind, kind_from_value

__all__ = [
    "discriminant",
    "has_kind",
    # predicates
    "is_string",
    "is_number",
    "is_boolean",
    "is_bigint",
    "is_symbol",
    "is_undefined",
    "is_null",
    "is_any",
    "is_unknown",
    "is_never",
    "is_literal",
    "is_enum",
    "is_optional",
    "is_nullable",
    "is_array",
    "is_tuple",
    "is_object",
    "is_record",
    "is_union",
    "is_intersection",
    "is_custom",
    # accessors
    "unwrap_optional",
    "unwrap_nullable",
    "literal_values",
    "enum_values",
    "array_element",
    "tuple_items",
    "object_shape",
    "record_key_value",
    "union_options",
    "intersection_sides",
]

_EMPTY_SHAPE: Mapping[str, Any] = MappingProxyType({})


def discriminant(node: Any) -> TypeKind | None:
    """
    Return the node's kind.

    Args:
        node (Any): Candidate descriptor.

    Returns:
        TypeKind | None: The kind, or None if ``node`` carries no TypeKind.
    """
    kind = getattr(node, "kind", None)
    return kind if isinstance(kind, TypeKind) else None


def has_kind(node: Any, kind: TypeKind | str) -> bool:
    """
    Check a node against a kind given as an enum or its lower_snake value.

    Raises:
        GrammarError: If ``kind`` is a string that names no TypeKind.
    """
    if not isinstance(kind, TypeKind):
        try:
            kind = kind_from_value(str(kind))
        except ValueError as e:
            raise GrammarError(str(e)) from e
    return discriminant(node) is kind


# ============================================================================
# Predicates
# ============================================================================


def is_string(node: Any) -> bool:
    return discriminant(node) is TypeKind.STRING


def is_number(node: Any) -> bool:
    return discriminant(node) is TypeKind.NUMBER


def is_boolean(node: Any) -> bool:
    return discriminant(node) is TypeKind.BOOLEAN


def is_bigint(node: Any) -> bool:
    return discriminant(node) is TypeKind.BIGINT


def is_symbol(node: Any) -> bool:
    return discriminant(node) is TypeKind.SYMBOL


def is_undefined(node: Any) -> bool:
    return discriminant(node) is TypeKind.UNDEFINED


def is_null(node: Any) -> bool:
    return discriminant(node) is TypeKind.NULL


def is_any(node: Any) -> bool:
    return discriminant(node) is TypeKind.ANY


def is_unknown(node: Any) -> bool:
    return discriminant(node) is TypeKind.UNKNOWN


def is_never(node: Any) -> bool:
    return discriminant(node) is TypeKind.NEVER


def is_literal(node: Any) -> bool:
    return discriminant(node) is TypeKind.LITERAL


def is_enum(node: Any) -> bool:
    return discriminant(node) is TypeKind.ENUM


def is_optional(node: Any) -> bool:
    return discriminant(node) is TypeKind.OPTIONAL


def is_nullable(node: Any) -> bool:
    return discriminant(node) is TypeKind.NULLABLE


def is_array(node: Any) -> bool:
    return discriminant(node) is TypeKind.ARRAY


def is_tuple(node: Any) -> bool:
    return discriminant(node) is TypeKind.TUPLE


def is_object(node: Any) -> bool:
    return discriminant(node) is TypeKind.OBJECT


def is_record(node: Any) -> bool:
    return discriminant(node) is TypeKind.RECORD


def is_union(node: Any) -> bool:
    return discriminant(node) is TypeKind.UNION


def is_intersection(node: Any) -> bool:
    return discriminant(node) is TypeKind.INTERSECTION


def is_custom(node: Any) -> bool:
    return discriminant(node) is TypeKind.CUSTOM


# ============================================================================
# Accessors
# ============================================================================


def unwrap_optional(node: Any) -> Any:
    """
    Return the descriptor wrapped by an optional node.

    Args:
        node (Any): Candidate descriptor.

    Returns:
        Any: The inner descriptor, or ``node`` itself if it is not optional or
        has no inner descriptor.
    """
    if is_optional(node):
        inner = getattr(node, "inner", None)
        return node if inner is None else inner
    return node


def unwrap_nullable(node: Any) -> Any:
    """Nullable counterpart of ``unwrap_optional``."""
    if is_nullable(node):
        inner = getattr(node, "inner", None)
        return node if inner is None else inner
    return node


def literal_values(node: Any) -> tuple[Any, ...]:
    if not is_literal(node):
        return ()
    return tuple(getattr(node, "values", None) or ())


def enum_values(node: Any) -> tuple[Any, ...]:
    if not is_enum(node):
        return ()
    return tuple(getattr(node, "values", None) or ())


def array_element(node: Any) -> Any | None:
    return getattr(node, "element", None) if is_array(node) else None


def tuple_items(node: Any) -> tuple[Any, ...] | None:
    """
    Return a tuple node's items.

    Returns:
        tuple[Any, ...] | None: Items in position order, or None when absent. An
        empty tuple is a valid (zero-length) item list, distinct from None.
    """
    if not is_tuple(node):
        return None
    items = getattr(node, "items", None)
    return None if items is None else tuple(items)


def object_shape(node: Any) -> Mapping[str, Any]:
    if not is_object(node):
        return _EMPTY_SHAPE
    shape = getattr(node, "shape", None)
    return shape if isinstance(shape, Mapping) else _EMPTY_SHAPE


def record_key_value(node: Any) -> tuple[Any | None, Any | None]:
    if not is_record(node):
        return None, None
    return getattr(node, "key_type", None), getattr(node, "value_type", None)


def union_options(node: Any) -> tuple[Any, ...]:
    if not is_union(node):
        return ()
    return tuple(getattr(node, "options", None) or ())


def intersection_sides(node: Any) -> tuple[Any | None, Any | None]:
    if not is_intersection(node):
        return None, None
    return getattr(node, "left", None), getattr(node, "right", None)
