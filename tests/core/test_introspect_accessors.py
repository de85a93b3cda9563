from collections.abc import Callable
from typing import Any

import pytest

from assignable.core import introspect as ix
from assignable.core.errors import GrammarError
from assignable.core.grammar import TypeKind
from assignable.core.schema import (
    ArrayType,
    IntersectionType,
    OptionalType,
    RecordType,
    TupleType,
    UnionType,
    any_,
    array,
    bigint,
    boolean,
    custom,
    enum_,
    intersection,
    literal,
    never,
    null,
    nullable,
    number,
    object_,
    optional,
    record,
    string,
    symbol,
    tuple_,
    undefined,
    union,
    unknown,
)

SAMPLES: list[tuple[TypeKind, Callable[[], Any]]] = [
    (TypeKind.STRING, string),
    (TypeKind.NUMBER, number),
    (TypeKind.BOOLEAN, boolean),
    (TypeKind.BIGINT, bigint),
    (TypeKind.SYMBOL, symbol),
    (TypeKind.UNDEFINED, undefined),
    (TypeKind.NULL, null),
    (TypeKind.ANY, any_),
    (TypeKind.UNKNOWN, unknown),
    (TypeKind.NEVER, never),
    (TypeKind.LITERAL, lambda: literal("a")),
    (TypeKind.ENUM, lambda: enum_(["a"])),
    (TypeKind.OPTIONAL, lambda: optional(string())),
    (TypeKind.NULLABLE, lambda: nullable(string())),
    (TypeKind.ARRAY, lambda: array(string())),
    (TypeKind.TUPLE, lambda: tuple_([string()])),
    (TypeKind.OBJECT, lambda: object_({"a": string()})),
    (TypeKind.RECORD, lambda: record(string(), number())),
    (TypeKind.UNION, lambda: union([string()])),
    (TypeKind.INTERSECTION, lambda: intersection(string(), number())),
    (TypeKind.CUSTOM, custom),
]


@pytest.mark.parametrize("kind,build", SAMPLES)
def test_exactly_one_predicate_matches(kind: TypeKind, build: Callable[[], Any]) -> None:
    node = build()
    assert ix.discriminant(node) is kind
    matches = [k for k in TypeKind if getattr(ix, f"is_{k.value}")(node)]
    assert matches == [kind]


@pytest.mark.parametrize("value", [None, 1, "string", object(), {"kind": "string"}])
def test_non_descriptors_have_no_kind(value: Any) -> None:
    assert ix.discriminant(value) is None
    assert not ix.is_string(value)
    assert ix.union_options(value) == ()


def test_has_kind_accepts_enum_or_value() -> None:
    s = string()
    assert ix.has_kind(s, TypeKind.STRING)
    assert ix.has_kind(s, "string")
    assert not ix.has_kind(s, "number")


@pytest.mark.parametrize("bad", ["String", "no_such_kind"])
def test_has_kind_rejects_unknown_kind_names(bad: str) -> None:
    with pytest.raises(GrammarError):
        ix.has_kind(string(), bad)


def test_unwrap_returns_inner_or_node_itself() -> None:
    s = string()
    assert ix.unwrap_optional(optional(s)) is s
    assert ix.unwrap_nullable(nullable(s)) is s
    assert ix.unwrap_optional(s) is s
    assert ix.unwrap_nullable(s) is s
    # different wrapper is not unwrapped
    opt = optional(s)
    assert ix.unwrap_nullable(opt) is opt


def test_value_accessors() -> None:
    assert ix.literal_values(literal("a", 1)) == ("a", 1)
    assert ix.enum_values(enum_(["x", "y"])) == ("x", "y")
    assert ix.literal_values(string()) == ()
    assert ix.enum_values(literal("a")) == ()


def test_structural_accessors() -> None:
    s, n = string(), number()
    assert ix.array_element(array(s)) is s
    assert ix.array_element(s) is None
    assert ix.tuple_items(tuple_([s, n])) == (s, n)
    assert ix.tuple_items(tuple_([])) == ()
    assert ix.tuple_items(s) is None
    assert ix.object_shape(object_({"a": s}))["a"] is s
    assert dict(ix.object_shape(s)) == {}
    assert ix.record_key_value(record(s, n)) == (s, n)
    assert ix.record_key_value(s) == (None, None)
    assert ix.union_options(union([s, n])) == (s, n)
    assert ix.intersection_sides(intersection(s, n)) == (s, n)
    assert ix.intersection_sides(s) == (None, None)


def test_accessors_tolerate_missing_parts() -> None:
    assert ix.array_element(ArrayType.model_construct()) is None
    assert ix.tuple_items(TupleType.model_construct(items=None)) is None
    assert ix.record_key_value(RecordType.model_construct(key_type=string()))[1] is None
    assert ix.union_options(UnionType.model_construct()) == ()
    assert ix.intersection_sides(IntersectionType.model_construct()) == (None, None)
    bare = OptionalType.model_construct()
    assert ix.unwrap_optional(bare) is bare
