"""
Pairwise assignability tables for named descriptor catalogs.

Purpose
- Evaluate every ordered (source, target) pair of a catalog with a Checker and
  materialize the results as a polars DataFrame.
- Derive common views: assignable pairs and mutually assignable (equivalent) pairs.

Frame layout
- columns: source str, target str, source_kind str, target_kind str, assignable bool
- one row per ordered pair, diagonal included, in catalog order (source-major)

Notes
- Kind columns hold TypeKind lower_snake values.
- The diagonal is always True (identity rule).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import polars as pl

from assignable.core.engine import Checker
from assignable.core.introspect import discriminant

from .errors import IoConfigError

__all__ = [
    "MATRIX_SCHEMA",
    "assignability_matrix",
    "assignable_pairs",
    "equivalent_pairs",
]

logger = logging.getLogger(__name__)

MATRIX_SCHEMA: dict[str, Any] = {
    "source": pl.Utf8,
    "target": pl.Utf8,
    "source_kind": pl.Utf8,
    "target_kind": pl.Utf8,
    "assignable": pl.Boolean,
}


def _ensure_catalog(catalog: Mapping[str, Any]) -> None:
    if not catalog:
        raise IoConfigError("descriptor catalog is empty")
    bad = [name for name, node in catalog.items() if discriminant(node) is None]
    if bad:
        raise IoConfigError(f"catalog entries are not descriptors: {bad!r}")


def assignability_matrix(
    catalog: Mapping[str, Any],
    *,
    checker: Checker | None = None,
) -> pl.DataFrame:
    """
    Evaluate assignability for every ordered pair of a named catalog.

    Args:
        catalog (Mapping[str, TypeDescriptor]): Name -> descriptor.
        checker (Checker | None): Checker to use; defaults to ``Checker()``.

    Returns:
        pl.DataFrame: One row per ordered pair (see MATRIX_SCHEMA).

    Raises:
        IoConfigError: If the catalog is empty or holds non-descriptors.

    Examples:
        >>> from assignable.core.schema import literal, string
        >>> df = assignability_matrix({"lit": literal("a"), "str": string()})
        >>> df.filter(pl.col("source") == "lit")["assignable"].to_list()
        [True, True]
    """
    _ensure_catalog(catalog)
    chk = checker or Checker()

    cols: dict[str, list[Any]] = {name: [] for name in MATRIX_SCHEMA}
    for src_name, src in catalog.items():
        for dst_name, dst in catalog.items():
            cols["source"].append(src_name)
            cols["target"].append(dst_name)
            cols["source_kind"].append(discriminant(src).value)  # type: ignore[union-attr]
            cols["target_kind"].append(discriminant(dst).value)  # type: ignore[union-attr]
            cols["assignable"].append(chk.is_assignable(src, dst))

    df = pl.DataFrame(cols, schema=MATRIX_SCHEMA)
    logger.debug("tabulated %d pairs over %d descriptors", df.height, len(catalog))
    return df


def assignable_pairs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Off-diagonal pairs where the source is assignable to the target.

    Args:
        df (pl.DataFrame): Frame produced by ``assignability_matrix``.

    Returns:
        pl.DataFrame: Columns (source, target), sorted.
    """
    return (
        df.filter(pl.col("assignable") & (pl.col("source") != pl.col("target")))
        .select("source", "target")
        .sort(["source", "target"])
    )


def equivalent_pairs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Unordered pairs assignable in both directions.

    Args:
        df (pl.DataFrame): Frame produced by ``assignability_matrix``.

    Returns:
        pl.DataFrame: Columns (source, target) with source < target, sorted.
    """
    forward = assignable_pairs(df)
    backward = forward.select(
        pl.col("target").alias("source"),
        pl.col("source").alias("target"),
    )
    mutual = forward.join(backward, on=["source", "target"], how="inner")
    return mutual.filter(pl.col("source") < pl.col("target")).sort(["source", "target"])
