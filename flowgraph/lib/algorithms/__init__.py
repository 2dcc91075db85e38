"""Max-flow algorithms over `ResidualGraph`."""

from flowgraph.lib.algorithms.augmenting_path import (
    find_augmenting_path,
    residual_reachable,
)
from flowgraph.lib.algorithms.base import SolverState
from flowgraph.lib.algorithms.max_flow import (
    MaxFlowSolver,
    calc_max_flow,
    saturated_edges,
)
from flowgraph.lib.algorithms.types import AugmentingPath, FlowSummary

__all__ = [
    "AugmentingPath",
    "FlowSummary",
    "MaxFlowSolver",
    "SolverState",
    "calc_max_flow",
    "find_augmenting_path",
    "residual_reachable",
    "saturated_edges",
]
