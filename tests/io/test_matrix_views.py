from __future__ import annotations

import polars as pl
import pytest

from assignable.core.engine import Checker
from assignable.core.schema import array, enum_, literal, number, string, union
from assignable.io.errors import IoConfigError
from assignable.io.matrix import (
    MATRIX_SCHEMA,
    assignability_matrix,
    assignable_pairs,
    equivalent_pairs,
)


@pytest.fixture
def catalog():
    return {
        "lit_a": literal("a"),
        "ab": union([literal("a"), literal("b")]),
        "enum_ab": enum_(["a", "b"]),
        "str": string(),
        "str2": string(),
        "num": number(),
    }


def test_matrix_covers_every_ordered_pair(catalog) -> None:
    df = assignability_matrix(catalog)

    assert df.height == len(catalog) ** 2
    assert df.columns == list(MATRIX_SCHEMA)
    assert df.schema["assignable"] == pl.Boolean
    # source-major, catalog order
    assert df["source"].head(len(catalog)).to_list() == ["lit_a"] * len(catalog)
    assert df["target"].head(len(catalog)).to_list() == list(catalog)


def test_matrix_diagonal_is_assignable(catalog) -> None:
    df = assignability_matrix(catalog)
    diag = df.filter(pl.col("source") == pl.col("target"))
    assert diag.height == len(catalog)
    assert diag["assignable"].all()


def test_matrix_records_kinds(catalog) -> None:
    df = assignability_matrix(catalog)
    row = df.filter((pl.col("source") == "lit_a") & (pl.col("target") == "enum_ab"))
    assert row["source_kind"].item() == "literal"
    assert row["target_kind"].item() == "enum"
    assert row["assignable"].item() is True


def test_assignable_pairs(catalog) -> None:
    pairs = assignable_pairs(assignability_matrix(catalog))
    rows = set(pairs.iter_rows())

    assert {("lit_a", "ab"), ("lit_a", "str"), ("ab", "str"), ("enum_ab", "str")} <= rows
    assert ("str", "lit_a") not in rows
    assert ("num", "str") not in rows
    assert all(src != dst for src, dst in rows)
    assert pairs.columns == ["source", "target"]


def test_equivalent_pairs(catalog) -> None:
    eq = equivalent_pairs(assignability_matrix(catalog))
    assert eq.rows() == [("ab", "enum_ab"), ("str", "str2")]


def test_matrix_uses_given_checker() -> None:
    deep = {"a": array(array(string())), "b": array(array(string()))}
    shallow = assignability_matrix(deep, checker=Checker(max_depth=1))
    full = assignability_matrix(deep)

    off = (pl.col("source") == "a") & (pl.col("target") == "b")
    assert shallow.filter(off)["assignable"].item() is False
    assert full.filter(off)["assignable"].item() is True


def test_matrix_rejects_empty_catalog() -> None:
    with pytest.raises(IoConfigError):
        assignability_matrix({})


def test_matrix_rejects_non_descriptors() -> None:
    with pytest.raises(IoConfigError):
        assignability_matrix({"ok": string(), "bad": "string"})
