"""
Structural assignability: can every value described by A be used where B is expected?

The decision procedure is an ordered table of named rules. Each rule inspects the
pair through assignable.core.introspect and either decides (returns True/False) or
defers (returns None) to the next rule. Order matters: several rules overlap, and
the first rule that decides wins.

Rule order
----------
| #   | Rule                         | Applies when                                  |
|-----|------------------------------|-----------------------------------------------|
| 1   | identity                     | A is B                                        |
| 2   | top_bottom                   | B unknown/any, A never/any/unknown            |
| 3   | optional_target              | B optional                                    |
| 4   | nullable_target              | B nullable                                    |
| 5   | literal_source               | A literal                                     |
| 6   | enum_source                  | A enum                                        |
| 7   | primitive_pair               | A and B both base primitives                  |
| 8a  | undefined_source             | A undefined (B undefined / union w/ undefined)|
| 8b  | undefined_source_null_union  | A undefined (B undefined / union w/ null)     |
| 9   | optional_source              | A optional                                    |
| 10  | nullable_source              | A nullable                                    |
| 11  | array_pair                   | A array, B array                              |
| 12  | array_to_union               | A array, B union                              |
| 13  | union_to_array               | A union, B array (always False)               |
| 14  | tuple_pair                   | A tuple, B tuple                              |
| 15  | object_pair                  | A object, B object                            |
| 16  | record_pair                  | A record, B record                            |
| 17  | union_source                 | A union                                       |
| 18  | union_target                 | B union                                       |
| 19  | intersection_source          | A intersection                                |
| 20  | intersection_target          | B intersection                                |
| 21  | custom_pair                  | A custom, B custom                            |
| 22  | primitive_fallback           | B string/number/boolean                       |
| 23  | otherwise                    | always (False)                                |

Rule 8b shares its guard with 8a and so never decides; it is kept as its own
arm so the two undefined rules are never merged by accident.

Rule 13 is not the dual of rule 12: a union source against an array target is
reported as not assignable.

Notes:
    - The engine never raises. Descriptors missing structural parts, and pairs
      nested deeper than ``max_depth``, are reported as not assignable.
    - No cycle detection: descriptors are frozen, so the builders cannot create
      cycles. The depth limit bounds anything built around them.
    - With ``trace=True`` each decided pair is logged at DEBUG with its rule name.

Examples:
    >>> from assignable.core.engine import is_assignable
    >>> from assignable.core.schema import literal, string, object_, number
    >>> is_assignable(literal("hello"), string())
    True
    >>> is_assignable(string(), literal("hello"))
    False
    >>> is_assignable(object_({"a": string(), "b": number()}), object_({"a": string()}))
    True
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

from .constants import MAX_DEPTH, UNDEFINED
from .grammar import PRIMITIVE_KINDS, WIDENING_FALLBACK_KINDS, TypeKind
from .introspect import (
    array_element,
    discriminant,
    enum_values,
    intersection_sides,
    is_any,
    is_array,
    is_boolean,
    is_custom,
    is_enum,
    is_intersection,
    is_literal,
    is_never,
    is_null,
    is_nullable,
    is_number,
    is_object,
    is_optional,
    is_record,
    is_string,
    is_tuple,
    is_undefined,
    is_union,
    is_unknown,
    literal_values,
    object_shape,
    record_key_value,
    tuple_items,
    union_options,
    unwrap_nullable,
    unwrap_optional,
)
from .schema import NullType, ObjectType, UndefinedKindType

__all__ = [
    "Checker",
    "is_assignable",
    "same_value",
    "RULE_NAMES",
]

logger = logging.getLogger(__name__)

# Probes standing in for a bare `undefined` / `null` source when a wrapper is split.
_UNDEFINED_PROBE: Final[UndefinedKindType] = UndefinedKindType()
_NULL_PROBE: Final[NullType] = NullType()


# ============================================================================
# Value helpers
# ============================================================================


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_finite_number(v: Any) -> bool:
    if not _is_number(v):
        return False
    # ints are always finite; math.isfinite overflows on very large ints
    return isinstance(v, int) or math.isfinite(v)


def same_value(x: Any, y: Any, *, signed_zero: bool = True) -> bool:
    """
    Strict value identity used to compare literal and enum values.

    Args:
        x (Any): Left value.
        y (Any): Right value.
        signed_zero (bool): When True, ``0.0`` and ``-0.0`` differ.

    Returns:
        bool: True if the values are the same value.

    Notes:
        - Booleans only equal booleans (``True`` is not ``1``).
        - Numbers compare numerically across int/float; NaN equals NaN.
        - None and UNDEFINED compare by identity; other values by type and ``==``.

    Examples:
        >>> same_value(1, 1.0)
        True
        >>> same_value(True, 1)
        False
        >>> same_value(float("nan"), float("nan"))
        True
        >>> same_value(0.0, -0.0)
        False
    """
    if isinstance(x, bool) or isinstance(y, bool):
        return type(x) is type(y) and x == y
    if _is_number(x) and _is_number(y):
        if x != x and y != y:
            return True
        if x == 0 and y == 0 and signed_zero:
            return math.copysign(1.0, x) == math.copysign(1.0, y)
        return x == y
    if x is None or y is None or x is UNDEFINED or y is UNDEFINED:
        return x is y
    return type(x) is type(y) and x == y


def _value_has_kind(value: Any, kind: TypeKind | None) -> bool:
    """Runtime-type check of a literal value against a base primitive kind."""
    if kind is TypeKind.STRING:
        return isinstance(value, str)
    if kind is TypeKind.NUMBER:
        return _is_finite_number(value)
    if kind is TypeKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is TypeKind.BIGINT:
        return isinstance(value, int) and not isinstance(value, bool)
    # No Python value is a symbol.
    return False


def _option_accepts(option: Any, value: Any) -> bool:
    """Whether a union option matches a single literal/enum value."""
    if is_literal(option):
        return any(same_value(v, value) for v in literal_values(option))
    if is_string(option):
        return isinstance(value, str)
    if is_number(option):
        return _is_finite_number(value)
    if is_boolean(option):
        return isinstance(value, bool)
    return False


def _field_is_optional(node: Any) -> bool:
    """Optional wrapper, or a union admitting `undefined` (directly or as a literal value)."""
    if is_optional(node):
        return True
    if is_union(node):
        return any(
            is_undefined(opt)
            or (is_literal(opt) and any(v is UNDEFINED for v in literal_values(opt)))
            for opt in union_options(node)
        )
    return False


def _label(node: Any) -> str:
    kind = discriminant(node)
    return kind.value if kind is not None else type(node).__name__


# ============================================================================
# Checker
# ============================================================================


@dataclass(slots=True, frozen=True)
class Checker:
    """
    Assignability checker bound to a depth limit and trace flag.

    Attributes:
        max_depth (int): Nesting depth past which a pair is reported as not assignable.
        trace (bool): Log every decided pair at DEBUG.

    Notes:
        Immutable and stateless between calls; one instance may be shared
        across threads. Build one from configuration with
        ``assignable.io.config.CheckSettings.checker()``.

    Examples:
        >>> from assignable.core.schema import string, optional
        >>> Checker().is_assignable(string(), optional(string()))
        True
    """

    max_depth: int = MAX_DEPTH
    trace: bool = False

    def is_assignable(self, a: Any, b: Any) -> bool:
        """
        Return True if every value described by ``a`` also satisfies ``b``.

        A ``max_depth`` set above what the interpreter stack can hold is
        reported the same way as exceeding the limit: a WARNING and False.
        """
        try:
            return self._check(a, b, 0)
        except RecursionError:
            logger.warning(
                "assignability depth limit %d exceeded the interpreter recursion limit "
                "at %s -> %s; reporting not assignable",
                self.max_depth,
                _label(a),
                _label(b),
            )
            return False

    def _check(self, a: Any, b: Any, depth: int) -> bool:
        if depth > self.max_depth:
            logger.warning(
                "assignability depth limit %d exceeded at %s -> %s; reporting not assignable",
                self.max_depth,
                _label(a),
                _label(b),
            )
            return False
        for name, rule in _RULES:
            decided = rule(self, a, b, depth)
            if decided is None:
                continue
            if self.trace:
                logger.debug(
                    "%s%s -> %s: %s [%s]", "  " * depth, _label(a), _label(b), decided, name
                )
            return decided
        return False  # pragma: no cover - `otherwise` always decides

    def _sub(self, a: Any, b: Any, depth: int) -> bool:
        return self._check(a, b, depth + 1)


Rule = Callable[[Checker, Any, Any, int], "bool | None"]


# ============================================================================
# Rules (precedence order)
# ============================================================================


def _identity(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    return True if a is b else None


def _top_bottom(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if is_unknown(b) or is_any(b):
        return True
    if is_never(a) or is_any(a):
        return True
    if is_unknown(a):
        return False
    return None


def _optional_target(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_optional(b):
        return None
    if is_undefined(a):
        return True
    inner = unwrap_optional(b)
    if inner is b:
        return False
    return chk._sub(a, inner, depth)


def _nullable_target(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_nullable(b):
        return None
    if is_null(a):
        return True
    inner = unwrap_nullable(b)
    if inner is b:
        return False
    return chk._sub(a, inner, depth)


def _literal_source(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_literal(a):
        return None
    vals_a = literal_values(a)
    if not vals_a:
        return False
    if is_literal(b):
        vals_b = literal_values(b)
        return all(any(same_value(va, vb) for vb in vals_b) for va in vals_a)
    if is_enum(b):
        members = enum_values(b)
        return all(any(same_value(va, m) for m in members) for va in vals_a)
    # single literal widens to its base primitive
    if len(vals_a) == 1 and _value_has_kind(vals_a[0], discriminant(b)):
        return True
    if is_union(b):
        opts = union_options(b)
        return all(any(_option_accepts(opt, va) for opt in opts) for va in vals_a)
    return False


def _enum_source(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_enum(a):
        return None
    vals_a = enum_values(a)
    if not vals_a:
        return False
    if is_enum(b):
        members = enum_values(b)
        return all(any(same_value(va, m, signed_zero=False) for m in members) for va in vals_a)
    if is_string(b):
        return all(isinstance(va, str) for va in vals_a)
    if is_number(b):
        return all(_is_number(va) for va in vals_a)
    if is_union(b):
        opts = union_options(b)
        return all(any(_option_accepts(opt, va) for opt in opts) for va in vals_a)
    return False


def _primitive_pair(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    ka, kb = discriminant(a), discriminant(b)
    if ka in PRIMITIVE_KINDS and kb in PRIMITIVE_KINDS:
        return ka is kb
    return None


def _undefined_source(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if discriminant(a) is not TypeKind.UNDEFINED:
        return None
    return is_undefined(b) or (
        is_union(b) and any(discriminant(opt) is TypeKind.UNDEFINED for opt in union_options(b))
    )


def _undefined_source_null_union(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    # Same guard as _undefined_source, which decides first.
    if not is_undefined(a):
        return None
    return is_undefined(b) or (
        is_union(b) and any(discriminant(opt) is TypeKind.NULL for opt in union_options(b))
    )


def _optional_source(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_optional(a):
        return None
    inner_a = unwrap_optional(a)
    if inner_a is a:
        return False
    if is_optional(b):
        inner_b = unwrap_optional(b)
        if inner_b is b:
            return False
        return chk._sub(inner_a, inner_b, depth)
    return chk._sub(inner_a, b, depth) and chk._sub(_UNDEFINED_PROBE, b, depth)


def _nullable_source(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_nullable(a):
        return None
    inner_a = unwrap_nullable(a)
    if inner_a is a:
        return False
    if is_nullable(b):
        inner_b = unwrap_nullable(b)
        if inner_b is b:
            return False
        return chk._sub(inner_a, inner_b, depth)
    return chk._sub(inner_a, b, depth) and chk._sub(_NULL_PROBE, b, depth)


def _array_pair(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not (is_array(a) and is_array(b)):
        return None
    el_a, el_b = array_element(a), array_element(b)
    if el_a is None or el_b is None:
        return False
    return chk._sub(el_a, el_b, depth)


def _array_to_union(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not (is_array(a) and is_union(b)):
        return None
    return any(is_array(opt) and chk._sub(a, opt, depth) for opt in union_options(b))


def _union_to_array(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not (is_union(a) and is_array(b)):
        return None
    # Unsupported direction.
    return False


def _tuple_pair(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not (is_tuple(a) and is_tuple(b)):
        return None
    items_a, items_b = tuple_items(a), tuple_items(b)
    if items_a is None or items_b is None:
        return False
    if len(items_a) != len(items_b):
        return False
    return all(chk._sub(ia, ib, depth) for ia, ib in zip(items_a, items_b))


def _object_pair(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not (is_object(a) and is_object(b)):
        return None
    shape_a, shape_b = object_shape(a), object_shape(b)
    for key, prop_b in shape_b.items():
        b_optional = _field_is_optional(prop_b)
        prop_a = shape_a.get(key)
        if prop_a is None:
            if b_optional:
                continue
            return False
        b_inner = unwrap_optional(prop_b) if b_optional else prop_b
        a_optional = _field_is_optional(prop_a)
        a_inner = unwrap_optional(prop_a) if a_optional else prop_a
        # required in B, omittable in A
        if not b_optional and a_optional:
            return False
        if not chk._sub(a_inner, b_inner, depth):
            return False
    # Extra fields in A are allowed.
    return True


def _record_pair(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not (is_record(a) and is_record(b)):
        return None
    key_a, val_a = record_key_value(a)
    key_b, val_b = record_key_value(b)
    if key_a is None or key_b is None or val_a is None or val_b is None:
        return False
    return chk._sub(key_a, key_b, depth) and chk._sub(val_a, val_b, depth)


def _union_source(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_union(a):
        return None
    opts = union_options(a)
    if not opts:
        return False
    return all(chk._sub(opt, b, depth) for opt in opts)


def _union_target(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_union(b):
        return None
    return any(chk._sub(a, opt, depth) for opt in union_options(b))


def _intersection_source(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_intersection(a):
        return None
    left, right = intersection_sides(a)
    if left is None or right is None:
        return False
    if is_object(left) and is_object(right):
        # right-hand fields win on name collision; fields are not revalidated
        merged = ObjectType.model_construct(
            shape={**object_shape(left), **object_shape(right)}
        )
        if chk._sub(merged, b, depth):
            return True
    return chk._sub(left, b, depth) or chk._sub(right, b, depth)


def _intersection_target(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not is_intersection(b):
        return None
    left, right = intersection_sides(b)
    if left is None or right is None:
        return False
    return chk._sub(a, left, depth) and chk._sub(a, right, depth)


def _custom_pair(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    if not (is_custom(a) and is_custom(b)):
        return None
    return a is b


def _primitive_fallback(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    kb = discriminant(b)
    if kb in WIDENING_FALLBACK_KINDS:
        return discriminant(a) is kb
    return None


def _otherwise(chk: Checker, a: Any, b: Any, depth: int) -> bool | None:
    return False


_RULES: Final[tuple[tuple[str, Rule], ...]] = (
    ("identity", _identity),
    ("top_bottom", _top_bottom),
    ("optional_target", _optional_target),
    ("nullable_target", _nullable_target),
    ("literal_source", _literal_source),
    ("enum_source", _enum_source),
    ("primitive_pair", _primitive_pair),
    ("undefined_source", _undefined_source),
    ("undefined_source_null_union", _undefined_source_null_union),
    ("optional_source", _optional_source),
    ("nullable_source", _nullable_source),
    ("array_pair", _array_pair),
    ("array_to_union", _array_to_union),
    ("union_to_array", _union_to_array),
    ("tuple_pair", _tuple_pair),
    ("object_pair", _object_pair),
    ("record_pair", _record_pair),
    ("union_source", _union_source),
    ("union_target", _union_target),
    ("intersection_source", _intersection_source),
    ("intersection_target", _intersection_target),
    ("custom_pair", _custom_pair),
    ("primitive_fallback", _primitive_fallback),
    ("otherwise", _otherwise),
)

RULE_NAMES: Final[tuple[str, ...]] = tuple(name for name, _ in _RULES)

_DEFAULT_CHECKER: Final[Checker] = Checker()


def is_assignable(a: Any, b: Any) -> bool:
    """
    Decide whether every value described by ``a`` also satisfies ``b``.

    Args:
        a (Any): Source descriptor.
        b (Any): Target descriptor.

    Returns:
        bool: True if ``a`` is assignable to ``b``. Never raises; malformed
        descriptors yield False.

    Notes:
        Uses default settings (``MAX_DEPTH``, no trace). For configured
        behavior use ``Checker`` or ``CheckSettings.load().checker()``.
    """
    return _DEFAULT_CHECKER.is_assignable(a, b)
