# -*- coding: utf-8 -*-
"""
Result containers returned by `bordergraph.analysis.graph.Graph`.

- `Path` – a route between two nodes (shortest-path queries).
- `SpanningTree` – a minimum-weight edge subset connecting a component.

Both are immutable and can be exported as a plain dictionary or a polars table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

import polars as pl

__all__ = ["Path", "SpanningTree"]

WeightedEdge = Tuple[str, str, float]


def _edges_table(edges: Tuple[WeightedEdge, ...]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "from": [edge[0] for edge in edges],
            "to": [edge[1] for edge in edges],
            "distance": [edge[2] for edge in edges],
        },
        schema={"from": pl.Utf8, "to": pl.Utf8, "distance": pl.Float64},
    )


# -----------------------------------------------------------------------------
# Class: Path
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Path:
    """
    Route between two nodes.

    Attributes
    ----------
    nodes : tuple of str
        Visited nodes, from the source to the target (both included).
    edges : tuple of (str, str, float)
        Traversed edges ``(from, to, distance)`` in travel direction.
    total_cost : float or int
        Sum of the distances when `weighted`, number of edges otherwise.
    weighted : bool
        Whether the route minimises distance (True) or hop count (False).
    """

    nodes: Tuple[str, ...]
    edges: Tuple[WeightedEdge, ...]
    total_cost: Union[float, int]
    weighted: bool = True

    @property
    def source(self) -> str:
        return self.nodes[0]

    @property
    def target(self) -> str:
        return self.nodes[-1]

    @property
    def nb_edges(self) -> int:
        return len(self.edges)

    def reversed(self) -> Path:
        """Same route travelled from the target to the source."""
        return Path(
            nodes=tuple(reversed(self.nodes)),
            edges=tuple((b, a, d) for a, b, d in reversed(self.edges)),
            total_cost=self.total_cost,
            weighted=self.weighted,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": list(self.nodes),
            "edges": [tuple(edge) for edge in self.edges],
            "total_cost": self.total_cost,
        }

    def to_polars(self) -> pl.DataFrame:
        """Traversed edges as a table with columns ``from``, ``to``, ``distance``."""
        return _edges_table(self.edges)


# -----------------------------------------------------------------------------
# Class: SpanningTree
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SpanningTree:
    """
    Minimum spanning tree of a connected component.

    Attributes
    ----------
    nodes : tuple of str
        Nodes covered by the tree, sorted.
    edges : tuple of (str, str, float)
        Selected edges ``(from, to, distance)`` in selection order
        (ascending distance, then input order).
    total_weight : float
        Sum of the selected distances.
    """

    nodes: Tuple[str, ...]
    edges: Tuple[WeightedEdge, ...]
    total_weight: float

    @property
    def nb_edges(self) -> int:
        return len(self.edges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges": [tuple(edge) for edge in self.edges],
            "total_weight": self.total_weight,
        }

    def to_polars(self) -> pl.DataFrame:
        """Selected edges as a table with columns ``from``, ``to``, ``distance``."""
        return _edges_table(self.edges)
