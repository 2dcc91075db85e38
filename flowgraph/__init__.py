"""flowgraph: Edmonds-Karp maximum flow for hashable-node graphs.

Primary API:
    ResidualGraph - Directed capacitated graph with residual edges
    MaxFlowSolver - Shortest-augmenting-path max-flow solver
    calc_max_flow() - One-call max flow with optional summary
    count_assignments() - Ant world assignment count via max flow

Example:
    from flowgraph import ResidualGraph, calc_max_flow

    g = ResidualGraph()
    g.add_edge("s", "a", 1)
    g.add_edge("a", "t", 1)
    assert calc_max_flow(g, "s", "t") == 1
"""

from __future__ import annotations

from flowgraph import logging
from flowgraph.config import DEFAULT_CONFIG, WorldConfig, load_config
from flowgraph.lib.algorithms.base import SolverState
from flowgraph.lib.algorithms.max_flow import (
    MaxFlowSolver,
    calc_max_flow,
    saturated_edges,
)
from flowgraph.lib.algorithms.types import AugmentingPath, FlowSummary
from flowgraph.lib.errors import (
    FlowGraphError,
    InvalidEdgeError,
    MissingEdgeStateError,
)
from flowgraph.lib.graph import FlowEdge, ResidualGraph
from flowgraph.world.grid import World, WorldFormatError, load_world, parse_world
from flowgraph.world.reduction import (
    Assignment,
    build_assignment_network,
    count_assignments,
    extract_assignments,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph
    "ResidualGraph",
    "FlowEdge",
    # Solver
    "MaxFlowSolver",
    "SolverState",
    "AugmentingPath",
    "FlowSummary",
    "calc_max_flow",
    "saturated_edges",
    # Errors
    "FlowGraphError",
    "InvalidEdgeError",
    "MissingEdgeStateError",
    "WorldFormatError",
    # World reduction
    "World",
    "Assignment",
    "parse_world",
    "load_world",
    "build_assignment_network",
    "count_assignments",
    "extract_assignments",
    # Config and utilities
    "WorldConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "logging",
]
