# -*- coding: utf-8 -*-
"""
Pre-processing subpackage: ingestion of adjacency rows.

This subpackage re-exports the user-facing class so it can be imported directly:

- class `Borders` – read ``(country1, country2, distance)`` rows from a CSV file,
  a list of tuples or a DataFrame.
"""

from __future__ import annotations

from .borders import Borders

__all__ = ["Borders"]
