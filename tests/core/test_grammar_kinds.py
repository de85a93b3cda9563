import pytest

from assignable.core.grammar import (
    PRIMITIVE_KINDS,
    WIDENING_FALLBACK_KINDS,
    TypeKind,
    ensure_all_enum_values_lower_snake,
    is_primitive_kind,
    kind_from_value,
    kind_value,
)


def test_all_kind_values_are_lower_snake() -> None:
    ensure_all_enum_values_lower_snake([TypeKind])


def test_kind_vocabulary_is_closed() -> None:
    assert {k.value for k in TypeKind} == {
        "string",
        "number",
        "boolean",
        "bigint",
        "symbol",
        "undefined",
        "null",
        "any",
        "unknown",
        "never",
        "literal",
        "enum",
        "optional",
        "nullable",
        "array",
        "tuple",
        "object",
        "record",
        "union",
        "intersection",
        "custom",
    }


def test_kind_roundtrip() -> None:
    for kind in TypeKind:
        assert kind_from_value(kind_value(kind)) is kind


@pytest.mark.parametrize("bad", ["Record", "not_a_kind", "", "union-type"])
def test_kind_from_value_rejects_unknown_or_non_lower_snake(bad: str) -> None:
    with pytest.raises(ValueError):
        kind_from_value(bad)


def test_primitive_groupings() -> None:
    assert PRIMITIVE_KINDS == {
        TypeKind.STRING,
        TypeKind.NUMBER,
        TypeKind.BOOLEAN,
        TypeKind.BIGINT,
        TypeKind.SYMBOL,
    }
    # fallback targets are a strict subset of the base primitives
    assert WIDENING_FALLBACK_KINDS < PRIMITIVE_KINDS
    assert is_primitive_kind(TypeKind.SYMBOL)
    assert not is_primitive_kind(TypeKind.NULL)
    assert not is_primitive_kind(None)
