"""
assignable — runtime structural assignability for schema type descriptors.

Answers "is A safely usable wherever B is expected?" for descriptor trees built
from primitives, literals, enums, optional/nullable wrappers, arrays, tuples,
objects, records, unions, intersections, and opaque custom predicates.

## Public API
- is_assignable(a, b) — the decision procedure with default settings.
- Checker — the same procedure bound to a depth limit and trace flag.
- CheckSettings — configuration (env > TOML > defaults) that builds a Checker.
- Builders re-exported from assignable.core.schema.

## Import DAG discipline
- assignable.core: stdlib + pydantic; never imports assignable.io.
- assignable.io: stdlib, polars, and assignable.core.
"""

from __future__ import annotations

from .core.constants import UNDEFINED
from .core.engine import Checker, is_assignable
from .core.schema import (
    TypeDescriptor,
    any_,
    array,
    bigint,
    boolean,
    custom,
    enum_,
    instanceof,
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
from .io.config import CheckSettings

__all__ = [
    "is_assignable",
    "Checker",
    "CheckSettings",
    "TypeDescriptor",
    "UNDEFINED",
    "any_",
    "array",
    "bigint",
    "boolean",
    "custom",
    "enum_",
    "instanceof",
    "intersection",
    "literal",
    "never",
    "null",
    "nullable",
    "number",
    "object_",
    "optional",
    "record",
    "string",
    "symbol",
    "tuple_",
    "undefined",
    "union",
    "unknown",
]
