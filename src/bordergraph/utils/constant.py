# -*- coding: utf-8 -*-
"""
Core constants for bordergraph.

This module centralizes:

- the internal column names of the edge list (``EDGE_COLUMNS``).
- the default input column names (``DEFAULT_INPUT_COLUMNS``).
- the accepted conflict policies (``CONFLICT_POLICIES``).

Notes
-----
* The internal names are part of the public contract: they are the columns of
  ``EdgeList.edgelist`` and of the tables returned by ``Graph``.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

__all__ = [
    "EDGE_COLUMNS",
    "DEFAULT_INPUT_COLUMNS",
    "CONFLICT_POLICIES",
    "SHORTEST_PATHS_COLUMNS",
]


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

# Columns of the edge list, in order. 'order' is the input row position.
EDGE_COLUMNS: List[str] = [
    "from",
    "to",
    "distance",
    "order",
]
""" Columns of ``EdgeList.edgelist``.
'order' is the input position of the retained row, used to break ties. """

# Default names of the columns expected in raw adjacency tables.
DEFAULT_INPUT_COLUMNS: Dict[str, str] = {
    "source": "country1",
    "target": "country2",
    "distance": "distance",
}
""" Default input column names (source, target, distance). """

CONFLICT_POLICIES: Tuple[str, ...] = ("warn", "raise")
""" Accepted values of ``ParamConfig.on_conflict``. """

SHORTEST_PATHS_COLUMNS: List[str] = [
    "from",
    "to",
    "cost",
    "nb_edges",
    "path",
]
""" Columns of the table produced by ``Graph.process_shortest_paths()``. """
