from __future__ import annotations

from typing import List, Literal, Tuple, Union, overload

from flowgraph.lib.algorithms.augmenting_path import (
    find_augmenting_path,
    residual_reachable,
)
from flowgraph.lib.algorithms.base import SolverState
from flowgraph.lib.algorithms.types import FlowSummary
from flowgraph.lib.graph import FlowEdge, NodeID, ResidualGraph
from flowgraph.logging import get_logger

logger = get_logger(__name__)


class MaxFlowSolver:
    """Edmonds-Karp maximum flow over a `ResidualGraph`.

    Augmenting paths are always shortest by edge count (found with BFS),
    which bounds the number of augmentations by O(V * E) independent of the
    capacities and gives O(V * E^2) overall.

    The solver mutates the flow state of the graph it was given. One solver
    run owns the graph until it returns; the graph must not be modified or
    solved concurrently.

    Attributes:
        graph: The graph being solved.
        state: Current `SolverState`.
        augmentations: Augmenting paths pushed by the most recent run.
        total_flow: Result of the most recent run.
    """

    def __init__(self, graph: ResidualGraph) -> None:
        self.graph = graph
        self.state = SolverState.IDLE
        self.augmentations = 0
        self.total_flow = 0

    def max_flow(self, src_node: NodeID, dst_node: NodeID) -> int:
        """Push flow from ``src_node`` to ``dst_node`` until no path remains.

        Calling this again on an already converged graph finds no augmenting
        path and returns the same total. Call ``graph.reset_flow()`` first to
        recompute from zero.

        Args:
            src_node: Flow source.
            dst_node: Flow sink.

        Returns:
            int: Net flow leaving ``src_node``. 0 when the nodes are equal,
                unknown or disconnected.
        """
        self.augmentations = 0
        if src_node == dst_node:
            self.state = SolverState.DONE
            self.total_flow = 0
            return 0

        self.state = SolverState.SEARCHING
        path = find_augmenting_path(self.graph, src_node, dst_node)
        while path is not None:
            self.state = SolverState.AUGMENTING
            for edge in path.edges:
                self.graph.push_flow(edge, path.bottleneck)
            self.augmentations += 1
            logger.debug(
                "Augmentation %d: pushed %d along %d edges",
                self.augmentations,
                path.bottleneck,
                len(path),
            )
            self.state = SolverState.SEARCHING
            path = find_augmenting_path(self.graph, src_node, dst_node)
        self.state = SolverState.DONE

        self.total_flow = self.source_flow(src_node)
        logger.debug(
            "Max flow %s -> %s = %d after %d augmentations",
            src_node,
            dst_node,
            self.total_flow,
            self.augmentations,
        )
        return self.total_flow

    def source_flow(self, src_node: NodeID) -> int:
        """Sum the flow on every edge leaving ``src_node``.

        Residual twins of edges entering ``src_node`` carry negative flow, so
        this is the net outflow.
        """
        return sum(self.graph.flow(e) for e in self.graph.edges_from(src_node))

    def summary(self, src_node: NodeID) -> FlowSummary:
        """Build a `FlowSummary` of the current graph state.

        Args:
            src_node: Source used for the last run; the residual reachable set
                and min-cut are computed from it.
        """
        edge_flow = {}
        residual_cap = {}
        for edge in self.graph.edges():
            edge_flow[edge] = self.graph.flow(edge)
            residual_cap[edge] = self.graph.residual_capacity(edge)

        reachable = residual_reachable(self.graph, src_node)
        min_cut = [
            edge
            for edge in self.graph.edges()
            if edge.source in reachable and edge.sink not in reachable
        ]
        return FlowSummary(
            total_flow=self.total_flow,
            augmentations=self.augmentations,
            edge_flow=edge_flow,
            residual_cap=residual_cap,
            reachable=reachable,
            min_cut=min_cut,
        )


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    reset_flow_graph: bool = False,
) -> int: ...


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    reset_flow_graph: bool = False,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    reset_flow_graph: bool = False,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow between two nodes of a residual graph.

    The graph is solved in place: flow values stay on its edges afterwards.

    Args:
        graph: Graph built with ``ResidualGraph.add_edge``.
        src_node: Flow source.
        dst_node: Flow sink.
        return_summary: If True, also return a `FlowSummary` with per-edge
            flows, residual capacities and the min-cut.
        reset_flow_graph: If True, zero all flows before solving.

    Returns:
        Union[int, Tuple[int, FlowSummary]]: The flow value, or
            ``(flow, summary)`` when ``return_summary`` is set.

    Examples:
        >>> g = ResidualGraph()
        >>> _ = g.add_edge("s", "a", 3)
        >>> _ = g.add_edge("a", "t", 1)
        >>> calc_max_flow(g, "s", "t")
        1
    """
    if reset_flow_graph:
        graph.reset_flow()

    solver = MaxFlowSolver(graph)
    total = solver.max_flow(src_node, dst_node)
    if return_summary:
        return total, solver.summary(src_node)
    return total


def saturated_edges(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    **kwargs,
) -> List[FlowEdge]:
    """Identify saturated (bottleneck) edges in the max flow solution.

    Args:
        graph: The graph to analyze.
        src_node: Source node.
        dst_node: Destination node.
        **kwargs: Additional arguments passed to calc_max_flow.

    Returns:
        Forward edges with positive capacity and no residual capacity left.
    """
    _, summary = calc_max_flow(
        graph, src_node, dst_node, return_summary=True, **kwargs
    )
    return [
        edge
        for edge, residual in summary.residual_cap.items()
        if residual == 0 and edge.capacity > 0
    ]
