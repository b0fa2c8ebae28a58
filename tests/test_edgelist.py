"""Validation and deduplication of adjacency rows."""

from __future__ import annotations

import math
import warnings

import pandas as pd
import polars as pl
import pytest

from bordergraph import DataQualityWarning, MalformedInputError
from bordergraph.analysis.edgelist import EdgeList

from conftest import EUROPE


def _pairs(edges: EdgeList) -> list:
    return [frozenset((a, b)) for a, b in edges.edgelist.select(["from", "to"]).iter_rows()]


def test_symmetric_duplicate_kept_once() -> None:
    edges = EdgeList().create_edgelist([("X", "Y", 12.0), ("Y", "X", 12.0)])
    assert edges.edgelist.rows() == [("X", "Y", 12.0, 0)]
    assert edges.duplicates == 1
    assert edges.conflicts is False


def test_no_two_edges_share_a_pair() -> None:
    edges = EdgeList().create_edgelist(EUROPE)
    pairs = _pairs(edges)
    assert len(pairs) == len(set(pairs))
    assert edges.duplicates == 2


def test_canonical_orientation_and_columns() -> None:
    edges = EdgeList().create_edgelist([("Spain", "France", 1053.0), ("Italy", "Austria", 765.0)])
    assert edges.edgelist.columns == ["from", "to", "distance", "order"]
    assert edges.edgelist.schema["distance"] == pl.Float64
    assert edges.edgelist.rows() == [
        ("France", "Spain", 1053.0, 0),
        ("Austria", "Italy", 765.0, 1),
    ]
    assert edges.nodes == ("Austria", "France", "Italy", "Spain")


def test_canonical_row_retained_over_earlier_reversed_row() -> None:
    with pytest.warns(DataQualityWarning):
        edges = EdgeList().create_edgelist([("Y", "X", 13.0), ("X", "Y", 12.0)])
    assert edges.edgelist.rows() == [("X", "Y", 12.0, 1)]


def test_conflicting_distances_warn() -> None:
    rows = [("Serbia", "Hungary", 316.0), ("Hungary", "Serbia", 320.0), ("Serbia", "Croatia", 368.0)]
    with pytest.warns(DataQualityWarning, match="Hungary - Serbia"):
        edges = EdgeList().create_edgelist(rows)

    assert edges.conflicts.height == 1
    conflict = edges.conflicts.row(0, named=True)
    assert conflict["from"] == "Hungary"
    assert conflict["to"] == "Serbia"
    assert conflict["distances"] == [316.0, 320.0]
    assert conflict["rows"] == 2
    # The canonical row (Hungary < Serbia) is retained
    assert conflict["retained"] == 320.0
    assert edges.edgelist.height == 2


def test_conflicting_distances_raise() -> None:
    rows = [("X", "Y", 12.0), ("Y", "X", 14.0)]
    with pytest.raises(MalformedInputError, match="different distances"):
        EdgeList({"on_conflict": "raise"}).create_edgelist(rows)


def test_identical_duplicates_do_not_warn() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", DataQualityWarning)
        EdgeList().create_edgelist([("X", "Y", 12), ("X", "Y", 12.0), ("Y", "X", 12.0)])


def test_identifiers_are_stripped() -> None:
    edges = EdgeList().create_edgelist([(" France ", "Spain", 1.0), ("Spain", "France", 1.0)])
    assert edges.edgelist.height == 1
    assert edges.nodes == ("France", "Spain")


def test_numeric_text_distance_is_accepted() -> None:
    edges = EdgeList().create_edgelist([("A", "B", "7.5")])
    assert edges.edgelist["distance"].to_list() == [7.5]


@pytest.mark.parametrize(
    "row, message",
    [
        (("A", "B", 0), "Non-positive"),
        (("A", "B", -3.0), "Non-positive"),
        (("A", "B", math.inf), "Non-positive or infinite"),
        (("A", "B", math.nan), "non-numeric"),
        (("A", "B", "far"), "non-numeric"),
        (("A", "B", None), "non-numeric"),
        (("A", "B", True), "non-numeric"),
        (("", "B", 1.0), "'from'"),
        (("A", "   ", 1.0), "'to'"),
        ((None, "B", 1.0), "'from'"),
        (("A", "A", 1.0), "Self-loop"),
    ],
)
def test_malformed_rows(row, message) -> None:
    with pytest.raises(MalformedInputError, match=message):
        EdgeList().create_edgelist([("C", "D", 1.0), row])


def test_error_lists_row_positions() -> None:
    rows = [("A", "B", 1.0), ("B", "C", -1.0), ("C", "D", 2.0), ("D", "E", 0.0)]
    with pytest.raises(MalformedInputError, match="rows: 1, 3"):
        EdgeList().create_edgelist(rows)


def test_empty_input() -> None:
    with pytest.raises(MalformedInputError, match="no rows"):
        EdgeList().create_edgelist([])


def test_dataframe_input() -> None:
    frame = pd.DataFrame({
        "country1": ["A", "B"],
        "country2": ["B", "A"],
        "distance": [2.0, 2.0],
    })
    edges = EdgeList().create_edgelist(frame)
    assert edges.edgelist.rows() == [("A", "B", 2.0, 0)]


def test_boolean_column_is_rejected() -> None:
    frame = pl.DataFrame({"country1": ["A"], "country2": ["B"], "distance": [True]})
    with pytest.raises(MalformedInputError, match="non-numeric"):
        EdgeList().create_edgelist(frame)


def test_numpy_boolean_is_rejected() -> None:
    flag = pd.Series([True]).iloc[0]  # numpy.bool_
    with pytest.raises(MalformedInputError, match="non-numeric"):
        EdgeList().create_edgelist([("C", "D", 1.0), ("A", "B", flag)])


def test_overflowing_total_distance_is_rejected() -> None:
    with pytest.raises(MalformedInputError, match="overflows"):
        EdgeList().create_edgelist([("A", "B", 1e308), ("B", "C", 1e308)])


def test_edgelist_is_built_once() -> None:
    edges = EdgeList().create_edgelist([("A", "B", 1.0)])
    with pytest.raises(RuntimeError, match="already been created"):
        edges.create_edgelist([("C", "D", 1.0)])


def test_table_attribute_hint() -> None:
    with pytest.raises(AttributeError, match="edgelist"):
        EdgeList().table


def test_progress_messages(capsys) -> None:
    EdgeList({"main_print": True}).create_edgelist(EUROPE)
    out = capsys.readouterr().out
    assert "2 duplicated row(s) removed." in out
    assert "7 nodes and 10 edges" in out
