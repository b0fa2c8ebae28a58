# -*- coding: utf-8 -*-
"""
Adjacency rows for bordergraph: class `Borders`.

This module turns raw country-adjacency rows ``(country1, country2, distance)``
into a uniform pandas table with columns ``from``, ``to``, ``distance``.
Sources are:
- a delimited text file (`Borders.read_csv`),
- an iterable of 3-tuples (`Borders.from_records`),
- a pandas or polars DataFrame (`Borders.from_frame`).

Only the shape of the input is checked here (columns, row arity). Row values
(positive distances, non-empty identifiers) are validated by
`bordergraph.analysis.edgelist.EdgeList`.
"""

from __future__ import annotations

from typing import Any, Iterable, Union, TYPE_CHECKING

import pandas as pd
import polars as pl

from bordergraph.utils.config import ParamConfig, resolve_config
from bordergraph.utils.exceptions import MalformedInputError

if TYPE_CHECKING:  # noqa: F401
    from pathlib import Path

__all__ = ["Borders"]


# -----------------------------------------------------------------------------
# Class: Borders
# -----------------------------------------------------------------------------
class Borders:
    """
    Raw adjacency table between countries.

    Constants
    ---------
    _columns : list of str
        Column names of `table`, always ``['from', 'to', 'distance']``.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    table : pandas.DataFrame or None
        Raw rows with columns ``from``, ``to``, ``distance`` (None at initialisation).
        Values are kept as read; nothing is validated beyond the table shape.
    main_print : bool
        Indicates whether execution information should be printed to the console.

    Examples
    --------
    >>> borders = Borders({"csv_separator": ";"}).read_csv("inputs/borders.csv")
    >>> borders = Borders().from_records([("France", "Spain", 1053.0)])
    """

    _columns = ["from", "to", "distance"]

    def __init__(self, param: Union[dict, ParamConfig, None] = None) -> None:
        """
        Initializes the Borders instance.

        Parameters
        ----------
        param : dict, ParamConfig or None
            Configuration parameters. The column names (`source_column`,
            `target_column`, `distance_column`) and `csv_separator` are used here.
        """
        self.config = resolve_config(
            param, required_fields=["source_column", "target_column", "distance_column"]
        )
        self.main_print = self.config.main_print or (__name__ == "__main__")

        # Initialize placeholder for table
        self.table = None


    def __len__(self) -> int:
        return 0 if self.table is None else len(self.table)


    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)


    def _set_table(self, data: pd.DataFrame, origin: str) -> Borders:
        """
        Check the configured columns and store them under the internal names.
        """
        required_columns = self.config.input_columns
        missing_columns = [col for col in required_columns if col not in data.columns]
        if missing_columns:
            raise MalformedInputError(
                f"Missing required columns in {origin}: {', '.join(missing_columns)}\n"
                f"Expected columns: {', '.join(required_columns)}"
            )

        self.table = (
            data[required_columns]
            .set_axis(self._columns, axis=1)
            .reset_index(drop=True)
        )
        self._log(f"{len(self.table)} adjacency rows loaded from {origin}.")
        return self


    def read_csv(self, file: Union[str, Path]) -> Borders:
        """
        Reads a delimited text file of adjacency rows.

        Expected format
        ---------------
        Columns (names configurable in ParamConfig):

            ['country1', 'country2', 'distance']

           - Column separator: ``ParamConfig.csv_separator`` (default ',')
           - Decimal separator: '.'
           - Extra columns are ignored.

        Parameters
        ----------
        file : str or pathlib.Path
            Path to the file.

        Returns
        -------
        self : Borders
            The updated instance with `self.table` set.

        Raises
        ------
        MalformedInputError
            If the file cannot be parsed or required columns are missing.
        """
        source, target = self.config.source_column, self.config.target_column

        try:
            data = pd.read_csv(
                file,
                sep=self.config.csv_separator,
                decimal=".",
                header=0,
                dtype={source: "str", target: "str"},
                skipinitialspace=True,
            )
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise MalformedInputError(f"Error reading CSV file: {e}") from e

        return self._set_table(data, f"file '{file}'")


    def from_records(self, rows: Iterable[Any]) -> Borders:
        """
        Loads adjacency rows given as ``(nodeA, nodeB, distance)`` tuples.

        Parameters
        ----------
        rows : iterable
            Each element must be a tuple or list of exactly three values.

        Returns
        -------
        self : Borders

        Raises
        ------
        MalformedInputError
            If a row is not a 3-tuple.
        """
        rows = list(rows)
        bad_rows = [
            i for i, row in enumerate(rows)
            if not isinstance(row, (tuple, list)) or len(row) != 3
        ]
        if bad_rows:
            raise MalformedInputError(
                f"Rows must be (nodeA, nodeB, distance) tuples. Invalid row positions: {bad_rows}"
            )

        # dtype=object keeps the raw values (e.g. booleans) for later validation
        data = pd.DataFrame(
            [list(row) for row in rows], columns=self.config.input_columns, dtype=object
        )
        return self._set_table(data, "records")


    def from_frame(self, frame: Union[pd.DataFrame, pl.DataFrame]) -> Borders:
        """
        Loads adjacency rows from a pandas or polars DataFrame.

        The DataFrame must carry the configured column names.

        Parameters
        ----------
        frame : pandas.DataFrame or polars.DataFrame

        Returns
        -------
        self : Borders

        Raises
        ------
        TypeError
            If `frame` is neither a pandas nor a polars DataFrame.
        MalformedInputError
            If required columns are missing.
        """
        if isinstance(frame, pl.DataFrame):
            frame = frame.to_pandas()
        elif not isinstance(frame, pd.DataFrame):
            raise TypeError("The 'frame' must be a pandas or polars DataFrame.")

        return self._set_table(frame, "DataFrame")


    def load(self, edges: Any) -> Borders:
        """
        Dispatch on the input type: DataFrame, path to a file, or iterable of rows.
        """
        from pathlib import Path

        if isinstance(edges, (pd.DataFrame, pl.DataFrame)):
            return self.from_frame(edges)
        if isinstance(edges, (str, Path)):
            return self.read_csv(edges)
        if edges is None:
            raise MalformedInputError("No edges given.")
        return self.from_records(edges)


    def describe(self) -> None:
        """
        Display a short summary of the loaded rows.
        """
        if self.table is None:
            print("\nBorders: no rows loaded.")
            return

        endpoints = pd.concat([self.table["from"], self.table["to"]]).dropna().unique()
        print("\nBorders:")
        print(f" - Rows                     : {len(self.table)}")
        print(f" - Distinct endpoints       : {len(endpoints)}")


# -----------------------------------------------------------------------------
# Example usage (no side effects at import time)
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    borders = Borders().from_records([
        ("Austria", "Germany", 523.0),
        ("Germany", "Austria", 523.0),
        ("Austria", "Italy", 765.0),
    ])
    borders.describe()
