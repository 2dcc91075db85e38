"""Core flow-network library: residual graph, I/O and NetworkX bridge."""

from flowgraph.lib.errors import (
    FlowGraphError,
    InvalidEdgeError,
    MissingEdgeStateError,
)
from flowgraph.lib.graph import FlowEdge, NodeID, ResidualGraph

__all__ = [
    "FlowEdge",
    "NodeID",
    "ResidualGraph",
    "FlowGraphError",
    "InvalidEdgeError",
    "MissingEdgeStateError",
]
