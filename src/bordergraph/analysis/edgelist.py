# -*- coding: utf-8 -*-
"""
Edge list construction for country-adjacency analysis (bordergraph).

This module defines the class `EdgeList`, which validates raw adjacency rows and
builds the deduplicated list of undirected edges the graph is made of.

Notes
-----
- Every edge is stored once, in canonical orientation (``from < to``).
- When the same pair appears several times, the retained row is the first one
  (in input order) written in canonical orientation; if the pair only appears
  reversed, the first reversed row is retained.
- Rows of the same pair that disagree on distance are a data-quality defect:
  they are reported (warning or error, see ``ParamConfig.on_conflict``), never
  silently averaged.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Union

import pandas as pd
import polars as pl

from bordergraph.pre.borders import Borders
from bordergraph.utils.config import ParamConfig, resolve_config
from bordergraph.utils.constant import EDGE_COLUMNS
from bordergraph.utils.exceptions import MalformedInputError, DataQualityWarning
from bordergraph.utils.utils import bullet_message

__all__ = ["EdgeList"]

# Maximum number of row positions quoted in an error message
_MAX_REPORTED_ROWS = 10


def _positions(mask: pd.Series) -> str:
    rows = mask[mask].index.tolist()
    shown = ", ".join(map(str, rows[:_MAX_REPORTED_ROWS]))
    if len(rows) > _MAX_REPORTED_ROWS:
        shown += f", ... ({len(rows)} rows)"
    return shown


# -----------------------------------------------------------------------------
# Class: EdgeList
# -----------------------------------------------------------------------------
class EdgeList:
    """
    EdgeList validates adjacency rows and keeps one weighted edge per pair of countries.

    Constants
    ----------
    WEIGHT : str

        The edge attribute used as cost, always set to 'distance'.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    edgelist : polars.DataFrame or None
        Deduplicated edges, set by ``create_edgelist()``. Columns:

        - 'from', 'to': str (node identifiers, ``from < to``)
        - 'distance': float64 (positive)
        - 'order': int64 (input position of the retained row)

        Sorted by 'order'.
    nodes : tuple of str or None
        Sorted node identifiers (union of the edge endpoints).
    conflicts : bool or polars.DataFrame or None
        - False if no pair was given with different distances.
        - A polars DataFrame with columns 'from', 'to', 'distances' (list),
          'rows' and 'retained' otherwise.
    duplicates : int or None
        Number of input rows dropped by deduplication.
    main_print : bool
        Indicates whether to display progress and status messages during execution.
    """

    WEIGHT = "distance"  # Edge attribute used as cost

    def __init__(self, param: Union[dict, ParamConfig, None] = None, *, required_fields: Optional[list] = None) -> None:
        """
        Initializes the EdgeList instance with specified and validated parameters.

        Parameters
        ----------
        param : dict, ParamConfig or None
            A dictionary of configuration parameters, an already validated ParamConfig
            object, or None for the defaults.

            Keys used by this class:

            - `"on_conflict"` : str
                'warn' (default) or 'raise' for pairs given with different distances.
            - `"main_print"` : bool
                Enables console output for execution status. Default is False.
            - column names and separator, when raw input has to be read (see `Borders`).

        required_fields : list, optional
            A custom list of fields required for this specific instance.
            Defaults to ``["on_conflict"]``.

        Raises
        ------
        TypeError
            If `param` has an unsupported type, or a parameter has an incorrect type.
        ValueError
            If a parameter has an invalid value.
        """
        required_fields = required_fields or ["on_conflict"]
        self.config = resolve_config(param, required_fields=required_fields)

        self.main_print = self.config.main_print or (__name__ == "__main__")

        # Initialize placeholders for tables
        self.edgelist = None
        self.nodes = None
        self.conflicts = None
        self.duplicates = None


    def __getattr__(self, name: str) -> Any:
        if name == "table":
            raise AttributeError(
                "EdgeList has no attribute 'table'.\n"
                "• Use 'edgelist' to access the edge list table."
            )
        raise AttributeError(f"{type(self).__name__} object has no attribute {name!r}")


    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)


    def _warn(self, summary: str, details: list[str], *, stacklevel: int = 3) -> None:
        import warnings
        warnings.warn(bullet_message("Edge list", summary, details), DataQualityWarning, stacklevel=stacklevel)


    def _validate_rows(self, table: pd.DataFrame) -> pl.DataFrame:
        """
        Validate raw rows and return them typed, with their input position.

        Parameters
        ----------
        table : pandas.DataFrame
            Raw rows with columns 'from', 'to', 'distance' (see `Borders.table`).

        Returns
        -------
        polars.DataFrame
            Columns 'from', 'to' (str, stripped), 'distance' (float64), 'order' (int64).

        Raises
        ------
        MalformedInputError
            If the table is empty or any row is invalid. All problems are reported at once.
        """
        if table is None or table.empty:
            raise MalformedInputError("The input contains no rows. At least one edge is required.")

        table = table.reset_index(drop=True)
        problems = []

        # Step 1: Endpoints, non-null and non-empty once stripped
        endpoints = {}
        for column in ("from", "to"):
            raw = table[column]
            missing = raw.isna()
            text = raw.where(~missing, "").astype(str).str.strip()
            empty = missing | text.eq("")
            if empty.any():
                problems.append(f"Empty or missing '{column}' identifier at rows: {_positions(empty)}")
            endpoints[column] = text

        # Step 2: Distances, numeric, finite and strictly positive
        raw = table["distance"]
        if pd.api.types.is_bool_dtype(raw):
            raw = pd.Series(None, index=raw.index, dtype=object)
        else:
            # Booleans (Python or NumPy) are not distances
            raw = raw.map(lambda value: None if pd.api.types.is_bool(value) else value)
        distance = pd.to_numeric(raw, errors="coerce").astype("float64")

        non_numeric = distance.isna()
        if non_numeric.any():
            problems.append(f"Missing or non-numeric distance at rows: {_positions(non_numeric)}")
        non_positive = ~non_numeric & ((distance <= 0) | (distance == float("inf")))
        if non_positive.any():
            problems.append(f"Non-positive or infinite distance at rows: {_positions(non_positive)}")

        # Step 3: Self-loops
        self_loop = endpoints["from"].ne("") & endpoints["from"].eq(endpoints["to"])
        if self_loop.any():
            problems.append(f"Self-loop (both endpoints identical) at rows: {_positions(self_loop)}")

        if problems:
            raise MalformedInputError("Invalid adjacency rows:\n" + "\n".join(f"• {p}" for p in problems))

        return pl.DataFrame(
            {
                "from": endpoints["from"].tolist(),
                "to": endpoints["to"].tolist(),
                "distance": distance.tolist(),
                "order": list(range(len(table))),
            },
            schema={"from": pl.Utf8, "to": pl.Utf8, "distance": pl.Float64, "order": pl.Int64},
        )


    def create_edgelist(self, edges: Any) -> EdgeList:
        """
        Validate the adjacency rows and build the deduplicated edge list.

        Parameters
        ----------
        edges : Borders, pandas.DataFrame, polars.DataFrame, str, pathlib.Path or iterable
            - `Borders`: already loaded rows.
            - DataFrame: must carry the configured column names.
            - str or Path: CSV file read with `Borders.read_csv`.
            - iterable of ``(nodeA, nodeB, distance)`` tuples.

        Returns
        -------
        self : EdgeList
            The updated EdgeList instance with `edgelist`, `nodes`, `conflicts`
            and `duplicates` set.

        Raises
        ------
        RuntimeError
            If the edge list of this instance was already created.
        MalformedInputError
            If a row is invalid (empty identifier, non-numeric or non-positive
            distance, self-loop), if the input is empty, if the sum of distances
            overflows to infinity, or if a pair is given with different distances
            while ``on_conflict='raise'``.

        Warns
        -----
        DataQualityWarning
            If a pair is given with different distances while ``on_conflict='warn'``.

        Examples
        --------
        >>> edges = EdgeList().create_edgelist([("A", "B", 10), ("B", "A", 10)])
        >>> edges.edgelist.height
        1
        """
        if self.edgelist is not None:
            raise RuntimeError(
                "The edge list has already been created for this instance. "
                "Create a new instance to load other edges."
            )

        self._log("\nThe creation of the edgelist start.")

        # Step 1: Normalise the input into a Borders table
        borders = edges if isinstance(edges, Borders) else Borders(self.config).load(edges)

        # Step 2: Validate rows
        rows = self._validate_rows(borders.table)

        # Step 3: Canonical orientation of every row
        in_order = pl.col("from") <= pl.col("to")
        canonical = rows.with_columns([
            pl.when(in_order).then(pl.col("from")).otherwise(pl.col("to")).alias("node_a"),
            pl.when(in_order).then(pl.col("to")).otherwise(pl.col("from")).alias("node_b"),
            (~in_order).alias("reversed"),
        ])

        # Step 4: Elimination of double pairs, canonical rows first, then input order
        edgelist = (
            canonical.sort(["reversed", "order"])
            .unique(subset=["node_a", "node_b"], keep="first", maintain_order=True)
            .sort("order")
            .select([
                pl.col("node_a").alias("from"),
                pl.col("node_b").alias("to"),
                pl.col("distance"),
                pl.col("order"),
            ])
        )

        # Step 5: Every route or tree cost is bounded by the total distance
        total = edgelist["distance"].sum()
        if not math.isfinite(total):
            raise MalformedInputError(
                f"The sum of all distances overflows (got {total}). Rescale the distances."
            )

        # Step 6: Pairs given with different distances
        conflicts = (
            canonical.sort("order")
            .group_by(["node_a", "node_b"], maintain_order=True)
            .agg([
                pl.col("distance").unique(maintain_order=True).alias("distances"),
                pl.len().alias("rows"),
            ])
            .filter(pl.col("distances").list.len() > 1)
            .rename({"node_a": "from", "node_b": "to"})
            .join(
                edgelist.select(["from", "to", pl.col("distance").alias("retained")]),
                on=["from", "to"],
                how="left",
            )
        )

        if conflicts.height > 0:
            details = [
                f"{row['from']} - {row['to']}: distances {row['distances']}, retained {row['retained']}"
                for row in conflicts.iter_rows(named=True)
            ]
            if self.config.on_conflict == "raise":
                raise MalformedInputError(
                    f"{conflicts.height} pair(s) given with different distances:\n"
                    + "\n".join(f"• {line}" for line in details)
                )
            self._warn(
                f"{conflicts.height} pair(s) given with different distances.",
                details + ["Fix the input, or set on_conflict='raise' to reject it."],
            )
            self.conflicts = conflicts
        else:
            self.conflicts = False

        # Step 7: Definition of the attributes
        self.edgelist = edgelist.select(EDGE_COLUMNS)
        self.nodes = tuple(sorted(set(edgelist["from"].to_list()) | set(edgelist["to"].to_list())))
        self.duplicates = rows.height - edgelist.height

        if self.duplicates:
            self._log(f"{self.duplicates} duplicated row(s) removed.")
        self._log(
            f"The edgelist has been successfully created: "
            f"{len(self.nodes)} nodes and {self.edgelist.height} edges.\n"
        )

        return self
