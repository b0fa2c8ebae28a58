# -*- coding: utf-8 -*-
"""
Analysis subpackage : edge list construction, shortest paths and spanning trees.

For most users, the class `Graph` is the entry point: load rows with
``create_edgelist()``, then query. The lower-level class `EdgeList` remains
available in `bordergraph.analysis.edgelist` for validation-only workflows,
but is intentionally not re-exported here.
"""

from __future__ import annotations

from .graph import Graph
from .results import Path, SpanningTree
# Advanced (not re-exported): from .edgelist import EdgeList  # import explicitly if needed

__all__ = ["Graph", "Path", "SpanningTree"]
