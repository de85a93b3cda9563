"""
Core package aggregator for assignable (grammar, descriptor schema, introspection, engine).

## Contracts (single source of truth)
- Grammar — TypeKind enum and kind groupings.
- Schema — frozen pydantic descriptor models and builder functions.
- Introspect — total predicates/accessors over descriptors.
- Engine — the ordered assignability rules, `Checker`, and `is_assignable`.
- Constants/Errors/Typing — UNDEFINED sentinel, depth default, SchemaError/GrammarError, aliases.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Naming policy: enum `.value` strings are lower_snake.
- The engine never raises; construction errors surface from `schema`.

## Downstream usage
- assignable.io — loads CheckSettings from env/TOML and builds a `Checker`; tabulates
  pairwise results over descriptor catalogs with polars.

## Examples
```python
from assignable.core.schema import object_, string, number, optional
from assignable.core.engine import is_assignable

user = object_({"name": string(), "age": number()})
partial = object_({"name": string(), "age": optional(number())})
is_assignable(user, partial)  # True
is_assignable(partial, user)  # False (age may be missing)
```
"""
