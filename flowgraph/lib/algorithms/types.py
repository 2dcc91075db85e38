"""Types and data structures returned by the flow algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from flowgraph.lib.graph import FlowEdge, NodeID


@dataclass(frozen=True)
class AugmentingPath:
    """A source-to-sink path in the residual graph.

    Attributes:
        edges: Edges in order from source to sink.
        bottleneck: Smallest residual capacity among ``edges``.
    """

    edges: Tuple[FlowEdge, ...]
    bottleneck: int

    @property
    def nodes(self) -> List[NodeID]:
        """Nodes visited by the path, source first."""
        if not self.edges:
            return []
        return [self.edges[0].source] + [e.sink for e in self.edges]

    def __len__(self) -> int:
        return len(self.edges)


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: The maximum flow value achieved.
        augmentations: Number of augmenting paths pushed by the last run.
        edge_flow: Flow on each forward edge.
        residual_cap: Remaining capacity on each forward edge.
        reachable: Nodes reachable from the source in the residual graph.
        min_cut: Forward edges leaving ``reachable``; their capacities sum to
            ``total_flow``.
    """

    total_flow: int
    augmentations: int
    edge_flow: Dict[FlowEdge, int] = field(default_factory=dict)
    residual_cap: Dict[FlowEdge, int] = field(default_factory=dict)
    reachable: Set[NodeID] = field(default_factory=set)
    min_cut: List[FlowEdge] = field(default_factory=list)

    @property
    def cut_capacity(self) -> int:
        return sum(e.capacity for e in self.min_cut)
