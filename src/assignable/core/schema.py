"""
Pydantic v2 models for type descriptors, plus builder functions.

Every descriptor is an immutable node carrying exactly one TypeKind (class-level
``kind``) and the structural parts for that kind. Child descriptors are stored by
reference, so identity (``is``) of a child survives construction; the engine's
identity shortcut relies on this.

Responsibilities
- Define one frozen model per TypeKind.
- Validate construction inputs (non-empty unions/literals/enums, supported
  literal and enum values) and raise SchemaError on violations.
- Provide builder functions (``string()``, ``object_({...})``, ``union([...])``)
  and fluent helpers (``.optional()``, ``.nullable()``, ``.array()``,
  ``ObjectType.extend``).

Style
- Zero-IO (stdlib + pydantic only).
- Builders always return fresh instances; two ``string()`` calls give two
  distinct descriptors that compare equal by value.
- Descriptors missing structural parts can only be created with
  ``Model.model_construct()``; assignable.core.introspect tolerates them.

References
- grammar: src/assignable/core/grammar.py (TypeKind)
- errors: src/assignable/core/errors.py (SchemaError)
- tests: tests/core/test_schema_*.py
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import UndefinedType
from .errors import SchemaError
from .grammar import TypeKind
from .typing import EnumValue, LiteralValue, Predicate

__all__ = [
    # Models
    "TypeDescriptor",
    "StringType",
    "NumberType",
    "BooleanType",
    "BigIntType",
    "SymbolType",
    "UndefinedKindType",
    "NullType",
    "AnyType",
    "UnknownType",
    "NeverType",
    "LiteralType",
    "EnumType",
    "OptionalType",
    "NullableType",
    "ArrayType",
    "TupleType",
    "ObjectType",
    "RecordType",
    "UnionType",
    "IntersectionType",
    "CustomType",
    # Builders
    "string",
    "number",
    "boolean",
    "bigint",
    "symbol",
    "undefined",
    "null",
    "any_",
    "unknown",
    "never",
    "literal",
    "enum_",
    "optional",
    "nullable",
    "array",
    "tuple_",
    "object_",
    "record",
    "union",
    "intersection",
    "custom",
    "instanceof",
    # Values
    "is_literal_value",
    "is_enum_value",
]


def is_literal_value(v: Any) -> bool:
    """Return True for values a literal descriptor may hold (str, int, float, bool, None, UNDEFINED)."""
    return v is None or isinstance(v, (str, int, float, bool, UndefinedType))


def is_enum_value(v: Any) -> bool:
    """Return True for values an enum descriptor may hold (str, int, float; never bool)."""
    return isinstance(v, (str, int, float)) and not isinstance(v, bool)


# ============================================================================
# Base
# ============================================================================


class TypeDescriptor(BaseModel):
    """
    Base class for all type descriptors.

    Attributes:
        kind (ClassVar[TypeKind]): Discriminant shared by every instance of the subclass.

    Notes:
        Instances are frozen. Children are held by reference and never copied.

    Examples:
        >>> from assignable.core.schema import string
        >>> s = string()
        >>> s.kind.value
        'string'
        >>> s.optional().inner is s
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    kind: ClassVar[TypeKind]

    def optional(self) -> OptionalType:
        """Wrap this descriptor: value or UNDEFINED."""
        return OptionalType(inner=self)

    def nullable(self) -> NullableType:
        """Wrap this descriptor: value or None."""
        return NullableType(inner=self)

    def array(self) -> ArrayType:
        """Array whose elements are described by this descriptor."""
        return ArrayType(element=self)


# ============================================================================
# Primitives, unit types, top/bottom
# ============================================================================


class StringType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.STRING


class NumberType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.NUMBER


class BooleanType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.BOOLEAN


class BigIntType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.BIGINT


class SymbolType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.SYMBOL


class UndefinedKindType(TypeDescriptor):
    """Descriptor for the ``undefined`` kind (runtime value UNDEFINED)."""

    kind: ClassVar[TypeKind] = TypeKind.UNDEFINED


class NullType(TypeDescriptor):
    """Descriptor for the ``null`` kind (runtime value None)."""

    kind: ClassVar[TypeKind] = TypeKind.NULL


class AnyType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.ANY


class UnknownType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.UNKNOWN


class NeverType(TypeDescriptor):
    kind: ClassVar[TypeKind] = TypeKind.NEVER


# ============================================================================
# Value sets
# ============================================================================


class LiteralType(TypeDescriptor):
    """
    Exact-value descriptor matching one or more concrete primitive values.

    Attributes:
        values (tuple[LiteralValue, ...]): Ordered, non-empty value set.

    Raises:
        pydantic.ValidationError: If values is empty or holds an unsupported value (wrapping SchemaError).

    Examples:
        >>> from assignable.core.schema import literal
        >>> literal("a", "b").values
        ('a', 'b')
    """

    kind: ClassVar[TypeKind] = TypeKind.LITERAL

    values: tuple[Any, ...]

    @field_validator("values", mode="before")
    @classmethod
    def _check_values(cls, v: Any) -> tuple[LiteralValue, ...]:
        """
        Validate literal values.

        Args:
            v (Any): Proposed values (any iterable; a bare str counts as one value).

        Returns:
            tuple[LiteralValue, ...]: Values in the given order.

        Raises:
            SchemaError: If empty or any value is not a supported primitive.
        """
        vals = (v,) if isinstance(v, str) else tuple(v)
        if not vals:
            raise SchemaError("literal requires at least one value")
        for x in vals:
            if not is_literal_value(x):
                raise SchemaError(f"unsupported literal value {x!r}")
        return vals


class EnumType(TypeDescriptor):
    """
    Closed set of string/number members (the runtime analogue of a literal union).

    Attributes:
        values (tuple[EnumValue, ...]): Ordered, non-empty member values.

    Notes:
        A Python ``Enum`` subclass is accepted in place of the values and
        contributes its member values in definition order.

    Examples:
        >>> import enum
        >>> from assignable.core.schema import enum_
        >>> class Color(enum.Enum):
        ...     RED = "red"
        ...     GREEN = "green"
        >>> enum_(Color).values
        ('red', 'green')
    """

    kind: ClassVar[TypeKind] = TypeKind.ENUM

    values: tuple[Any, ...]

    @field_validator("values", mode="before")
    @classmethod
    def _check_values(cls, v: Any) -> tuple[EnumValue, ...]:
        if isinstance(v, type) and issubclass(v, Enum):
            vals = tuple(m.value for m in v)
        elif isinstance(v, str):
            vals = (v,)
        else:
            vals = tuple(v)
        if not vals:
            raise SchemaError("enum requires at least one member")
        for x in vals:
            if not is_enum_value(x):
                raise SchemaError(f"enum members must be str or number, got {x!r}")
            if isinstance(x, float) and math.isnan(x):
                raise SchemaError("enum members must not be NaN")
        return vals


# ============================================================================
# Wrappers
# ============================================================================


class OptionalType(TypeDescriptor):
    """
    Inner descriptor or the absent value.

    Attributes:
        inner (TypeDescriptor): Wrapped descriptor.

    Notes:
        As an object field, optional marks the field as omittable.
    """

    kind: ClassVar[TypeKind] = TypeKind.OPTIONAL

    inner: TypeDescriptor


class NullableType(TypeDescriptor):
    """
    Inner descriptor or None.

    Attributes:
        inner (TypeDescriptor): Wrapped descriptor.
    """

    kind: ClassVar[TypeKind] = TypeKind.NULLABLE

    inner: TypeDescriptor


# ============================================================================
# Containers
# ============================================================================


class ArrayType(TypeDescriptor):
    """Homogeneous array; ``element`` describes every item."""

    kind: ClassVar[TypeKind] = TypeKind.ARRAY

    element: TypeDescriptor


class TupleType(TypeDescriptor):
    """
    Fixed-length positional sequence.

    Attributes:
        items (tuple[TypeDescriptor, ...]): Item descriptors by position; the length
            is part of the tuple's identity. May be empty.
    """

    kind: ClassVar[TypeKind] = TypeKind.TUPLE

    items: tuple[TypeDescriptor, ...] = ()


class ObjectType(TypeDescriptor):
    """
    Structural object with named fields.

    Attributes:
        shape (Mapping[str, TypeDescriptor]): Read-only field name -> field
            descriptor mapping. A field wrapped in OptionalType may be omitted.

    Notes:
        Field order is kept for display but has no effect on assignability.

    Examples:
        >>> from assignable.core.schema import object_, string, number
        >>> base = object_({"name": string()})
        >>> sorted(base.extend({"age": number()}).shape)
        ['age', 'name']
    """

    kind: ClassVar[TypeKind] = TypeKind.OBJECT

    shape: Mapping[str, TypeDescriptor] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("shape", mode="after")
    @classmethod
    def _freeze_shape(cls, v: Mapping[str, TypeDescriptor]) -> Mapping[str, TypeDescriptor]:
        return MappingProxyType(dict(v))

    def extend(self, shape: Mapping[str, TypeDescriptor]) -> ObjectType:
        """Return a new object with ``shape`` added; colliding names take the new descriptor."""
        return ObjectType(shape={**self.shape, **dict(shape)})


class RecordType(TypeDescriptor):
    """
    Homogeneous keyed map.

    Attributes:
        key_type (TypeDescriptor): Descriptor every key satisfies.
        value_type (TypeDescriptor): Descriptor every value satisfies.
    """

    kind: ClassVar[TypeKind] = TypeKind.RECORD

    key_type: TypeDescriptor
    value_type: TypeDescriptor


# ============================================================================
# Combinators
# ============================================================================


class UnionType(TypeDescriptor):
    """
    Exactly one of several options.

    Attributes:
        options (tuple[TypeDescriptor, ...]): Ordered, non-empty options.

    Raises:
        pydantic.ValidationError: If options is empty.
    """

    kind: ClassVar[TypeKind] = TypeKind.UNION

    options: tuple[TypeDescriptor, ...]

    @field_validator("options", mode="before")
    @classmethod
    def _check_options(cls, v: Any) -> tuple[Any, ...]:
        opts = tuple(v)
        if not opts:
            raise SchemaError("union requires at least one option")
        return opts


class IntersectionType(TypeDescriptor):
    """Both ``left`` and ``right`` hold."""

    kind: ClassVar[TypeKind] = TypeKind.INTERSECTION

    left: TypeDescriptor
    right: TypeDescriptor


# ============================================================================
# Opaque predicates
# ============================================================================


class CustomType(TypeDescriptor):
    """
    Opaque predicate type with no introspectable structure.

    Attributes:
        label (str): Display name.
        predicate (Predicate | None): Runtime check owned by the caller.
        target (type | None): Class checked by ``instanceof`` descriptors.

    Notes:
        Two custom descriptors are assignable only when they are the same
        instance. ``target`` is informational; class hierarchies are not consulted.
    """

    kind: ClassVar[TypeKind] = TypeKind.CUSTOM

    label: str = "custom"
    predicate: Predicate | None = None
    target: type | None = None


# ============================================================================
# Builders
# ============================================================================


def string() -> StringType:
    return StringType()


def number() -> NumberType:
    return NumberType()


def boolean() -> BooleanType:
    return BooleanType()


def bigint() -> BigIntType:
    return BigIntType()


def symbol() -> SymbolType:
    return SymbolType()


def undefined() -> UndefinedKindType:
    return UndefinedKindType()


def null() -> NullType:
    return NullType()


def any_() -> AnyType:
    return AnyType()


def unknown() -> UnknownType:
    return UnknownType()


def never() -> NeverType:
    return NeverType()


def literal(*values: LiteralValue) -> LiteralType:
    """
    Build a literal descriptor.

    Args:
        *values (LiteralValue): One or more exact values. Use UNDEFINED for the
            absent value and None for null.

    Returns:
        LiteralType: Descriptor matching exactly these values.

    Examples:
        >>> literal("hello").values
        ('hello',)
    """
    return LiteralType(values=values)


def enum_(values: Iterable[EnumValue] | type[Enum]) -> EnumType:
    """Build an enum descriptor from member values or a Python Enum class."""
    return EnumType(values=values)


def optional(inner: TypeDescriptor) -> OptionalType:
    return OptionalType(inner=inner)


def nullable(inner: TypeDescriptor) -> NullableType:
    return NullableType(inner=inner)


def array(element: TypeDescriptor) -> ArrayType:
    return ArrayType(element=element)


def tuple_(items: Iterable[TypeDescriptor]) -> TupleType:
    return TupleType(items=tuple(items))


def object_(shape: Mapping[str, TypeDescriptor] | None = None) -> ObjectType:
    """Build an object descriptor from a field-name -> descriptor mapping."""
    return ObjectType(shape=dict(shape or {}))


def record(key_type: TypeDescriptor, value_type: TypeDescriptor) -> RecordType:
    return RecordType(key_type=key_type, value_type=value_type)


def union(options: Iterable[TypeDescriptor]) -> UnionType:
    """
    Build a union descriptor.

    Args:
        options (Iterable[TypeDescriptor]): One or more options.

    Returns:
        UnionType: Descriptor accepting any option.

    Raises:
        pydantic.ValidationError: If options is empty.
    """
    return UnionType(options=tuple(options))


def intersection(left: TypeDescriptor, right: TypeDescriptor) -> IntersectionType:
    return IntersectionType(left=left, right=right)


def custom(predicate: Predicate | None = None, label: str = "custom") -> CustomType:
    """Build an opaque descriptor around a caller-owned predicate."""
    return CustomType(label=label, predicate=predicate)


def instanceof(cls: type) -> CustomType:
    """
    Build an opaque descriptor for instances of ``cls``.

    Notes:
        Subclass relationships are not tracked: ``instanceof(Dog)`` is not
        assignable to ``instanceof(Animal)``.
    """
    if not isinstance(cls, type):
        raise SchemaError(f"instanceof requires a class, got {cls!r}")
    return CustomType(label=cls.__name__, predicate=lambda v: isinstance(v, cls), target=cls)

