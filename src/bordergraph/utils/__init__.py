# -*- coding: utf-8 -*-
"""
Internal utilities (constants, config, exceptions, misc).

This subpackage is intentionally a small API surface.
Import what you need from concrete modules, for example:

    from bordergraph.utils.constant import EDGE_COLUMNS
"""

from __future__ import annotations

from bordergraph.utils.config import ParamConfig
from bordergraph.utils.exceptions import (
    GraphAnalysisError,
    MalformedInputError,
    NodeNotFoundError,
    NoPathError,
    DisconnectedGraphError,
    DataQualityWarning,
)

__all__: list[str] = [
    "ParamConfig",
    "GraphAnalysisError",
    "MalformedInputError",
    "NodeNotFoundError",
    "NoPathError",
    "DisconnectedGraphError",
    "DataQualityWarning",
]
