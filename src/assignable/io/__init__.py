"""
assignable.io — configuration and tabulation around the core engine.

## Responsibilities
- Load CheckSettings (env > TOML > defaults) and build configured Checkers.
- Tabulate pairwise assignability over named descriptor catalogs as polars DataFrames.

## Public API
- CheckSettings — configuration for checks (defaults sourced from assignable.core.constants).
- assignability_matrix / assignable_pairs / equivalent_pairs — polars views over a catalog.

## Import DAG discipline
- Depends only on stdlib, polars, and assignable.core.*.
- assignable.core MUST NOT import this package.

## Examples
```python
from assignable.io import CheckSettings, assignability_matrix
from assignable.core.schema import literal, string, union

checker = CheckSettings.load().checker()
df = assignability_matrix(
    {"a": literal("a"), "ab": union([literal("a"), literal("b")]), "str": string()},
    checker=checker,
)
```
"""

from __future__ import annotations

from .config import CheckSettings
from .matrix import assignability_matrix, assignable_pairs, equivalent_pairs

__all__ = [
    "CheckSettings",
    "assignability_matrix",
    "assignable_pairs",
    "equivalent_pairs",
]
