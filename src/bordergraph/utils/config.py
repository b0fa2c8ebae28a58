# -*- coding: utf-8 -*-
"""
Configuration container for the bordergraph package.

This module defines the dataclass `ParamConfig`, which centralizes the
user-facing parameters shared by `Borders`, `EdgeList` and `Graph`.

**Use ``ParamConfig.describe()`` to display a clean summary of current settings.**

Notes
-----
* It is intended to be imported and the configuration object injected into the
  corresponding classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from bordergraph.utils.constant import DEFAULT_INPUT_COLUMNS, CONFLICT_POLICIES

__all__ = ["ParamConfig", "resolve_config"]


# -----------------------------------------------------------------------------
# ParamConfig
# -----------------------------------------------------------------------------
@dataclass
class ParamConfig:
    """
    Configuration class for handling parameters across all bordergraph classes.

    **Use ``ParamConfig.describe()`` to display a clean summary of current settings.**

    Notes
    -----
    When initializing ``ParamConfig`` **directly** with a dictionary, you must unpack it
    with ``**param`` so that keys map to dataclass fields. In contrast, bordergraph
    classes accept either a ``dict``, an existing ``ParamConfig`` or nothing, and will
    handle conversion/validation internally.

    Examples
    --------
        >>> config = ParamConfig(**{"on_conflict": "raise", "main_print": True})
        >>> graph = Graph(config)
        >>> graph = Graph({"csv_separator": ";"})  # no unpack needed

    Attributes
    ----------
    source_column : str
        Name of the first endpoint column in raw adjacency tables.
    target_column : str
        Name of the second endpoint column in raw adjacency tables.
    distance_column : str
        Name of the weight column in raw adjacency tables.
    csv_separator : str
        Column separator used by ``Borders.read_csv``.
    on_conflict : str
        What to do when the same unordered pair appears with different distances:
            - 'warn'  : emit a ``DataQualityWarning`` and keep the canonical row.
            - 'raise' : raise ``MalformedInputError``.
    main_print : bool
        Controls whether execution information should be printed to the console.
    required_fields : List[str]
        List of field names that are required for validation. This is set
        dynamically in the context of each class that uses ParamConfig.
    """

    source_column: Optional[str] = DEFAULT_INPUT_COLUMNS["source"]
    target_column: Optional[str] = DEFAULT_INPUT_COLUMNS["target"]
    distance_column: Optional[str] = DEFAULT_INPUT_COLUMNS["distance"]
    csv_separator: Optional[str] = ","
    on_conflict: Optional[str] = "warn"
    main_print: bool = False  # Toggles general execution information in the console.

    # Custom field validation (e.g., required fields)
    required_fields: List[str] = field(default_factory=list)  # Dynamically set in each class.

    def validate(self) -> ParamConfig:
        """
        Validate that all required fields are provided and check value formats.
        """
        for field_name in self.required_fields:
            if getattr(self, field_name, None) is None:
                raise ValueError(f"Required parameter '{field_name}' is missing.")

        self._validate_types()
        self._validate_columns()
        self._validate_on_conflict()

        return self

    def _validate_types(self) -> None:
        """
        Explicitly validate types for each field.
        """
        type_map = {
            "source_column": (str,),
            "target_column": (str,),
            "distance_column": (str,),
            "csv_separator": (str,),
            "on_conflict": (str,),
            "main_print": (bool,),
        }

        for field_name, expected_types in type_map.items():
            value = getattr(self, field_name)
            if not isinstance(value, expected_types):
                raise TypeError(
                    f"Parameter '{field_name}' must be of type {expected_types}, got {type(value).__name__}."
                )

        unknown = [name for name in self.required_fields if name not in type_map]
        if unknown:
            raise KeyError(f"Field(s) not recognized in type_map: {', '.join(unknown)}")

    def _validate_columns(self) -> None:
        """
        Column names must be non-empty and distinct.
        """
        columns = [self.source_column, self.target_column, self.distance_column]
        if any(not column.strip() for column in columns):
            raise ValueError("Column names must be non-empty strings.")
        if len(set(columns)) != len(columns):
            raise ValueError(
                f"Column names must be distinct, got: {', '.join(repr(c) for c in columns)}."
            )
        if not self.csv_separator:
            raise ValueError("The 'csv_separator' must be a non-empty string.")

    def _validate_on_conflict(self) -> None:
        if self.on_conflict not in CONFLICT_POLICIES:
            raise ValueError(
                f"Invalid 'on_conflict': {self.on_conflict}\n"
                f"It must be one of: {', '.join(repr(p) for p in CONFLICT_POLICIES)}."
            )

    def validate_for_class(self, required_fields: List[str]) -> None:
        """
        Validate that the specified required fields are present in the ParamConfig object.

        Parameters
        ----------
        required_fields : list of str
            List of field names that must be validated.

        Raises
        ------
        ValueError
            If any required field is missing.
        """
        missing_fields = [field for field in required_fields if getattr(self, field, None) is None]
        if missing_fields:
            raise ValueError(f"Missing required parameters: {', '.join(missing_fields)}")

    @property
    def input_columns(self) -> List[str]:
        """Input column names, in (source, target, distance) order."""
        return [self.source_column, self.target_column, self.distance_column]

    def describe(self) -> None:
        """
        Display a summary of the current configuration.
        """
        print("\nParamConfig (graph settings):")
        print(f" - Source column            : {self.source_column}")
        print(f" - Target column            : {self.target_column}")
        print(f" - Distance column          : {self.distance_column}")
        print(f" - CSV separator            : {self.csv_separator!r}")
        print(f" - Conflicting duplicates   : {self.on_conflict}")
        print(f" - Print summary            : {self.main_print}")


# -----------------------------------------------------------------------------
# Helper
# -----------------------------------------------------------------------------
def resolve_config(
    param: Union[dict, ParamConfig, None],
    required_fields: Optional[List[str]] = None,
) -> ParamConfig:
    """
    Turn the ``param`` argument of a bordergraph class into a validated ParamConfig.

    Parameters
    ----------
    param : dict, ParamConfig or None
        - ``None``: default configuration.
        - ``dict``: unpacked into a new ParamConfig and fully validated.
        - ``ParamConfig``: used as is, after the same validation.
    required_fields : list of str, optional
        Fields the calling class needs.

    Returns
    -------
    ParamConfig

    Raises
    ------
    TypeError
        If ``param`` has another type.
    """
    required_fields = required_fields or []

    # Case 1: nothing given
    if param is None:
        return ParamConfig(required_fields=required_fields).validate()

    # Case 2: param is a dictionary
    if isinstance(param, dict):
        return ParamConfig(**param, required_fields=required_fields).validate()

    # Case 3: param is already a ParamConfig
    if isinstance(param, ParamConfig):
        param.validate_for_class(required_fields)
        return param.validate()

    raise TypeError("Parameter 'param' must be a dictionary, a ParamConfig object or None.")


# -----------------------------------------------------------------------------
# Example usage (no side effects at import time)
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    config = ParamConfig(**{"on_conflict": "raise", "csv_separator": ";", "main_print": True})
    config.validate()
    config.describe()
