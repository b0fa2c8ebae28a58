# -*- coding: utf-8 -*-
"""
`bordergraph`: shortest paths and spanning trees over country-adjacency graphs.

This top-level package exposes three subpackages:

- `bordergraph.pre`       – ingestion of (country1, country2, distance) rows
- `bordergraph.analysis`  – edge list validation, shortest paths, spanning trees
- `bordergraph.utils`     – configuration, constants and error taxonomy
"""

from __future__ import annotations

from bordergraph.analysis import Graph, Path, SpanningTree
from bordergraph.pre import Borders
from bordergraph.utils import (
    ParamConfig,
    GraphAnalysisError,
    MalformedInputError,
    NodeNotFoundError,
    NoPathError,
    DisconnectedGraphError,
    DataQualityWarning,
)

__all__ = [
    "pre",
    "analysis",
    "utils",
    "Graph",
    "Path",
    "SpanningTree",
    "Borders",
    "ParamConfig",
    "GraphAnalysisError",
    "MalformedInputError",
    "NodeNotFoundError",
    "NoPathError",
    "DisconnectedGraphError",
    "DataQualityWarning",
    "__version__",
]

__version__ = "1.0.0"
