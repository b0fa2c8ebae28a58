# -*- coding: utf-8 -*-
"""
Error taxonomy for bordergraph.

All errors raised while loading or querying a graph derive from
`GraphAnalysisError`, and each one also derives from the closest builtin
(``ValueError``, ``LookupError``, ``RuntimeError``) so that callers can catch
either family.
"""

from __future__ import annotations

__all__ = [
    "GraphAnalysisError",
    "MalformedInputError",
    "NodeNotFoundError",
    "NoPathError",
    "DisconnectedGraphError",
    "DataQualityWarning",
]


class GraphAnalysisError(Exception):
    """Base class for bordergraph errors."""
    pass


class MalformedInputError(GraphAnalysisError, ValueError):
    """An input row (or the input as a whole) cannot be turned into an edge."""
    pass


class NodeNotFoundError(GraphAnalysisError, LookupError):
    """A query references a node that is not in the graph."""

    def __init__(self, node: str) -> None:
        super().__init__(f"Node {node!r} is not in the graph.")
        self.node = node


class NoPathError(GraphAnalysisError, RuntimeError):
    """Source and target lie in different connected components."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"No path exists between {source!r} and {target!r}.")
        self.source = source
        self.target = target


class DisconnectedGraphError(GraphAnalysisError, RuntimeError):
    """The graph has more than one connected component."""

    def __init__(self, components: int) -> None:
        super().__init__(
            f"The graph has {components} connected components; no spanning tree exists.\n"
            "Use 'minimum_spanning_forest()' to get one tree per component."
        )
        self.components = components


class DataQualityWarning(UserWarning):
    """Non-fatal data-quality issues detected while loading edges."""
    pass
