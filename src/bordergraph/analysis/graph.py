# -*- coding: utf-8 -*-
"""
Shortest paths and minimum spanning trees over the country-adjacency graph.

This module defines the class `Graph`, a thin layer on top of class
`bordergraph.analysis.edgelist.EdgeList` that builds an undirected graph
(NetworkX Graph) from the edge list and answers route and spanning-tree queries.

Tie-breaking
------------
Results are reproducible regardless of input order or query direction:

- The graph is built from the edge list sorted by ('from', 'to'), so the
  neighbours of every node are stored in lexicographic order.
- Equal-cost routes are decided by the NetworkX traversal order over this
  sorted adjacency: Dijkstra and breadth-first search both keep the first
  route found to each node.
- A route search always starts from the lexicographically smaller endpoint; the
  result is reversed when the other direction was asked for. ``(a, b)`` and
  ``(b, a)`` therefore return the same route and the same cost.
- Kruskal sorts edges by ``(distance, order)``; the input order breaks ties.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

import polars as pl
import networkx as nx
from networkx.utils import UnionFind

from bordergraph.analysis.edgelist import EdgeList
from bordergraph.analysis.results import Path, SpanningTree
from bordergraph.utils.config import ParamConfig
from bordergraph.utils.constant import SHORTEST_PATHS_COLUMNS
from bordergraph.utils.exceptions import NodeNotFoundError, NoPathError, DisconnectedGraphError
from bordergraph.utils.utils import format_path, to_engineering_notation

__all__ = ["Graph"]


# -----------------------------------------------------------------------------
# Class: Graph
# -----------------------------------------------------------------------------
class Graph(EdgeList):
    """
    Graph class for route and spanning-tree analysis over country adjacency.

    Inherits parameters and methods from EdgeList: load edges with
    ``create_edgelist()`` first, then query.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    graph : networkx.Graph or None
        Undirected graph built by ``create_edgelist()``, with sorted adjacency.
        Edge attributes: 'distance' and 'order'.
    shortest_paths : polars.DataFrame or None
        Table produced by ``process_shortest_paths()``.

    Methods
    -------
    shortest_path(source, target, weighted=True):
        Minimum-distance (or minimum-hop) route between two nodes.
    minimum_spanning_tree():
        Minimum spanning tree of a connected graph.
    minimum_spanning_forest():
        One minimum spanning tree per connected component.
    process_shortest_paths(weighted=True):
        Shortest routes between all pairs of nodes, as a table.
    summary():
        Counts describing the loaded graph.

    Examples
    --------
    >>> graph = Graph().create_edgelist([("A", "B", 10), ("B", "C", 5), ("A", "C", 8)])
    >>> graph.shortest_path("A", "C").nodes
    ('A', 'C')
    >>> graph.minimum_spanning_tree().total_weight
    13.0
    """

    def __init__(self, param: Union[dict, ParamConfig, None] = None) -> None:
        """
        Initializes the Graph class by inheriting EdgeList parameters and attributes.

        Parameters
        ----------
        param : dict, ParamConfig or None
            Configuration parameters for EdgeList and Graph.
        """
        super().__init__(param)
        self.graph = None  # Placeholder for the NetworkX graph
        self.shortest_paths = None  # Placeholder for the all-pairs table


    def __getattr__(self, name: str) -> Any:
        if name == "table":
            raise AttributeError(
                "Graph has no attribute 'table'.\n"
                "• Use 'shortest_paths' to access the all-pairs results table.\n"
                "• Use 'edgelist' to access the edge list table."
            )
        raise AttributeError(f"{type(self).__name__} object has no attribute {name!r}")


    def create_edgelist(self, edges: Any) -> Graph:
        """
        Build the edge list (see ``EdgeList.create_edgelist``), then the undirected graph.

        Returns
        -------
        self : Graph
            The updated instance with `edgelist`, `nodes`, `conflicts`, `duplicates`
            and `graph` set.
        """
        super().create_edgelist(edges)
        self._create_graph()
        return self


    def _create_graph(self) -> nx.Graph:
        """
        Creates the undirected graph from the `edgelist` attribute.

        Returns
        -------
        networkx.Graph
            Also stored in `self.graph`.
        """
        # Rows sorted by ('from', 'to') insert every neighbour list in lexicographic order
        graph = nx.from_pandas_edgelist(
            self.edgelist.sort(["from", "to"]).to_pandas(),
            source="from",
            target="to",
            edge_attr=[EdgeList.WEIGHT, "order"],
            create_using=nx.Graph,
        )
        self.graph = graph

        self._log(
            f"\nUndirected graph created successfully with {graph.number_of_nodes()} nodes "
            f"and {graph.number_of_edges()} edges."
        )
        return graph


    def _require_graph(self) -> nx.Graph:
        if self.graph is None:
            raise RuntimeError("No edge list loaded. Run 'create_edgelist' first.")
        return self.graph


    def _check_node(self, node: str) -> None:
        if node not in self.graph:
            raise NodeNotFoundError(node)


    def shortest_path(self, source: str, target: str, *, weighted: bool = True) -> Path:
        """
        Shortest route between two nodes.

        Parameters
        ----------
        source, target : str
            Node identifiers.
        weighted : bool, optional
            - True (default): minimise the sum of distances (Dijkstra).
            - False: minimise the number of edges (breadth-first search).

        Returns
        -------
        Path
            Nodes from `source` to `target`, traversed edges ``(from, to, distance)``
            and total cost (sum of distances, or hop count when unweighted).
            ``source == target`` gives a single-node path with cost 0.

        Raises
        ------
        RuntimeError
            If no edge list is loaded.
        NodeNotFoundError
            If `source` or `target` is not in the graph.
        NoPathError
            If `source` and `target` are in different connected components.
        """
        graph = self._require_graph()
        self._check_node(source)
        self._check_node(target)

        if source == target:
            return Path(nodes=(source,), edges=(), total_cost=0.0 if weighted else 0, weighted=weighted)

        # Always search from the smaller endpoint, then orient the result
        start, end = sorted((source, target))
        if weighted:
            try:
                cost, nodes = nx.single_source_dijkstra(graph, start, end, weight=EdgeList.WEIGHT)
            except nx.NetworkXNoPath:
                raise NoPathError(source, target) from None
        else:
            routes = nx.single_source_shortest_path(graph, start)
            if end not in routes:
                raise NoPathError(source, target)
            nodes = routes[end]
            cost = len(nodes) - 1

        adjacency = graph.adj
        path = Path(
            nodes=tuple(nodes),
            edges=tuple((a, b, adjacency[a][b][EdgeList.WEIGHT]) for a, b in zip(nodes, nodes[1:])),
            total_cost=cost,
            weighted=weighted,
        )
        if start != source:
            path = path.reversed()

        self._log(f"Shortest path ({'distance' if weighted else 'hops'}): {format_path(path.nodes)} [{cost}]")
        return path


    def _kruskal(self) -> Tuple[List[Tuple[str, str, float]], UnionFind]:
        """
        Kruskal's algorithm over the whole edge list; edges sorted by (distance, order).
        """
        self._require_graph()
        forest = UnionFind(self.nodes)
        selected = []

        for source, target, distance, _ in self.edgelist.sort([EdgeList.WEIGHT, "order"]).iter_rows():
            if forest[source] != forest[target]:
                forest.union(source, target)
                selected.append((source, target, distance))
                if len(selected) == len(self.nodes) - 1:
                    break  # tree complete

        return selected, forest


    def minimum_spanning_tree(self) -> SpanningTree:
        """
        Minimum spanning tree of the graph (Kruskal).

        Returns
        -------
        SpanningTree
            ``len(nodes) - 1`` edges of minimum total distance.

        Raises
        ------
        RuntimeError
            If no edge list is loaded.
        DisconnectedGraphError
            If the graph has more than one connected component.
        """
        components = nx.number_connected_components(self._require_graph())
        if components > 1:
            raise DisconnectedGraphError(components)

        selected, _ = self._kruskal()
        tree = SpanningTree(
            nodes=tuple(self.nodes),
            edges=tuple(selected),
            total_weight=sum(edge[2] for edge in selected),
        )

        self._log(f"Minimum spanning tree: {tree.nb_edges} edges, total distance {tree.total_weight}.")
        return tree


    def minimum_spanning_forest(self) -> List[SpanningTree]:
        """
        One minimum spanning tree per connected component.

        Returns
        -------
        list of SpanningTree
            Sorted by the smallest node of each component. A connected graph gives
            a single tree, equal to ``minimum_spanning_tree()``.
        """
        selected, forest = self._kruskal()

        members: Dict[str, List[str]] = {}
        for node in self.nodes:
            members.setdefault(forest[node], []).append(node)
        edges: Dict[str, List[Tuple[str, str, float]]] = {root: [] for root in members}
        for edge in selected:
            edges[forest[edge[0]]].append(edge)

        trees = [
            SpanningTree(
                nodes=tuple(members[root]),
                edges=tuple(edges[root]),
                total_weight=sum(edge[2] for edge in edges[root]),
            )
            for root in members
        ]
        trees.sort(key=lambda tree: tree.nodes[0])

        self._log(f"Minimum spanning forest: {len(trees)} tree(s).")
        return trees


    def process_shortest_paths(self, *, weighted: bool = True) -> pl.DataFrame:
        """
        Shortest routes between all pairs of distinct nodes.

        Parameters
        ----------
        weighted : bool, optional
            See ``shortest_path()``. The default is True.

        Returns
        -------
        polars.DataFrame
            Also stored in `self.shortest_paths`. One row per reachable unordered pair,
            sorted by 'from', 'to'. Columns:

            - 'from', 'to': str (``from < to``)
            - 'cost': float64 (distance, or hop count when unweighted)
            - 'nb_edges': int64
            - 'path': list(str)

        Notes
        -----
        - Pairs in different components are omitted.
        """
        self._require_graph()

        rows = {column: [] for column in SHORTEST_PATHS_COLUMNS}
        for i, source in enumerate(self.nodes):
            component = nx.node_connected_component(self.graph, source)
            for target in self.nodes[i + 1:]:
                if target not in component:
                    continue
                path = self.shortest_path(source, target, weighted=weighted)
                rows["from"].append(source)
                rows["to"].append(target)
                rows["cost"].append(float(path.total_cost))
                rows["nb_edges"].append(path.nb_edges)
                rows["path"].append(list(path.nodes))

        self.shortest_paths = pl.DataFrame(
            rows,
            schema={
                "from": pl.Utf8,
                "to": pl.Utf8,
                "cost": pl.Float64,
                "nb_edges": pl.Int64,
                "path": pl.List(pl.Utf8),
            },
        )

        self._log(f"Shortest paths computed for {to_engineering_notation(self.shortest_paths.height)} pairs.")
        return self.shortest_paths


    def summary(self) -> Dict[str, Any]:
        """
        Counts describing the loaded graph.

        Returns
        -------
        dict
            'nodes', 'edges', 'components', 'total_distance', 'duplicates', 'conflicts'.
        """
        self._require_graph()
        return {
            "nodes": self.graph.number_of_nodes(),
            "edges": self.graph.number_of_edges(),
            "components": nx.number_connected_components(self.graph),
            "total_distance": float(self.edgelist[EdgeList.WEIGHT].sum()),
            "duplicates": self.duplicates,
            "conflicts": 0 if self.conflicts is False else self.conflicts.height,
        }


# -----------------------------------------------------------------------------
# Example usage (no side effects at import time)
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    graph = Graph({"main_print": True}).create_edgelist([
        ("A", "B", 10.0),
        ("B", "C", 5.0),
        ("A", "C", 8.0),
    ])
    graph.shortest_path("A", "C")
    graph.minimum_spanning_tree()
