from __future__ import annotations

from collections import deque
from typing import Dict, Optional, Set

from flowgraph.lib.algorithms.types import AugmentingPath
from flowgraph.lib.graph import FlowEdge, NodeID, ResidualGraph


def find_augmenting_path(
    graph: ResidualGraph, src_node: NodeID, dst_node: NodeID
) -> Optional[AugmentingPath]:
    """
    Breadth-first search for a shortest augmenting path.

    Only edges with strictly positive residual capacity are followed. Edges
    are explored in insertion order, so the result is deterministic for a
    given construction order. The search stops as soon as ``dst_node`` is
    discovered.

    Args:
        graph: Residual graph to search.
        src_node: Start of the path.
        dst_node: End of the path.

    Returns:
        The path with the fewest edges, or None if ``src_node == dst_node``
        or no augmenting path exists.
    """
    if src_node == dst_node or not graph.has_node(src_node):
        return None

    # node -> edge used to discover it
    pred: Dict[NodeID, FlowEdge] = {}
    visited = {src_node}
    queue = deque([src_node])

    while queue:
        node = queue.popleft()
        for edge in graph.edges_from(node):
            if edge.sink in visited or graph.residual_capacity(edge) <= 0:
                continue
            pred[edge.sink] = edge
            if edge.sink == dst_node:
                return _to_path(graph, pred, src_node, dst_node)
            visited.add(edge.sink)
            queue.append(edge.sink)
    return None


def _to_path(
    graph: ResidualGraph,
    pred: Dict[NodeID, FlowEdge],
    src_node: NodeID,
    dst_node: NodeID,
) -> AugmentingPath:
    """Walk ``pred`` back from ``dst_node`` and compute the bottleneck."""
    edges = []
    node = dst_node
    while node != src_node:
        edge = pred[node]
        edges.append(edge)
        node = edge.source
    edges.reverse()
    bottleneck = min(graph.residual_capacity(e) for e in edges)
    return AugmentingPath(edges=tuple(edges), bottleneck=bottleneck)


def residual_reachable(graph: ResidualGraph, src_node: NodeID) -> Set[NodeID]:
    """Return the nodes reachable from ``src_node`` over positive residuals.

    After a max-flow run this is the source side of a minimum cut.
    """
    if not graph.has_node(src_node):
        return {src_node}
    reachable = {src_node}
    stack = [src_node]
    while stack:
        node = stack.pop()
        for edge in graph.edges_from(node):
            if edge.sink not in reachable and graph.residual_capacity(edge) > 0:
                reachable.add(edge.sink)
                stack.append(edge.sink)
    return reachable
