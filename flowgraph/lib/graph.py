"""Residual graph used by the max-flow solver.

`ResidualGraph` stores a directed capacitated graph together with the
per-edge flow state an augmenting-path algorithm needs. Storage is
index-based: nodes map to dense integer indices, and edges live in parallel
lists indexed by edge index. Every call to `add_edge` appends a forward edge
at an even index ``i`` and its residual twin at ``i + 1``, so the twin of any
edge is ``i ^ 1``.

Nodes may be any hashable value. They are registered the first time an edge
touches them and are never removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Tuple, Union

from flowgraph.lib.errors import InvalidEdgeError, MissingEdgeStateError

NodeID = Hashable


@dataclass(frozen=True)
class FlowEdge:
    """Immutable handle for one directed edge of a `ResidualGraph`.

    Attributes:
        index: Position of the edge in the graph's edge arena.
        source: Tail node.
        sink: Head node.
        capacity: Capacity fixed at creation. Residual twins have capacity 0.
    """

    index: int
    source: NodeID
    sink: NodeID
    capacity: int

    @property
    def residual_index(self) -> int:
        """Arena index of the paired edge running the opposite way."""
        return self.index ^ 1

    @property
    def is_residual(self) -> bool:
        """True for the reverse edge created implicitly by ``add_edge``."""
        return bool(self.index & 1)

    def __str__(self) -> str:
        return f"[{self.source} {self.sink} {self.capacity}]"


EdgeRef = Union[FlowEdge, int]


class ResidualGraph:
    """Directed capacitated graph with paired residual edges.

    The graph only grows: edges are appended by `add_edge` and nothing is
    ever removed. Flow values change through `push_flow` (used by the
    solver) and `reset_flow`.

    Invariants kept for every edge ``e``:
      - ``flow(e) == -flow(residual(e))``
      - ``residual_capacity(e) >= 0``
      - ``0 <= flow(e) <= capacity(e)`` for forward edges
    """

    def __init__(self) -> None:
        self._node_index: Dict[NodeID, int] = {}
        self._nodes: List[NodeID] = []
        # node index -> edge indices leaving that node, in insertion order
        self._out: List[List[int]] = []
        self._edges: List[FlowEdge] = []
        self._flow: List[int] = []

    #
    # Construction
    #
    def add_edge(self, source: NodeID, sink: NodeID, capacity: int) -> FlowEdge:
        """Add a directed edge and its zero-capacity residual twin.

        Each call creates a new edge pair, even when an edge with the same
        endpoints and capacity already exists.

        Args:
            source: Tail node. Registered if not yet known.
            sink: Head node. Registered if not yet known.
            capacity: Non-negative integer capacity.

        Returns:
            FlowEdge: The forward edge.

        Raises:
            InvalidEdgeError: If ``source == sink`` or the capacity is not a
                non-negative integer. No state is changed in that case.
            TypeError: If either endpoint is unhashable. No state is changed.
        """
        if source == sink:
            raise InvalidEdgeError(f"Edge source and sink must differ, got '{source}'.")
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidEdgeError(
                f"Edge capacity must be an integer, got {capacity!r} for "
                f"'{source}' -> '{sink}'."
            )
        if capacity < 0:
            raise InvalidEdgeError(
                f"Edge capacity must be non-negative, got {capacity} for "
                f"'{source}' -> '{sink}'."
            )

        # Unhashable endpoints must fail before either node is registered.
        hash(source)
        hash(sink)
        src_idx = self._register(source)
        dst_idx = self._register(sink)

        forward = FlowEdge(len(self._edges), source, sink, capacity)
        residual = FlowEdge(forward.index + 1, sink, source, 0)
        self._edges.extend((forward, residual))
        self._flow.extend((0, 0))
        self._out[src_idx].append(forward.index)
        self._out[dst_idx].append(residual.index)
        return forward

    def _register(self, node: NodeID) -> int:
        idx = self._node_index.get(node)
        if idx is None:
            idx = len(self._nodes)
            self._node_index[node] = idx
            self._nodes.append(node)
            self._out.append([])
        return idx

    #
    # Introspection
    #
    def edges_from(self, node: NodeID) -> Tuple[FlowEdge, ...]:
        """Return every edge leaving ``node``, residual twins included.

        Args:
            node: Any node value.

        Returns:
            Tuple[FlowEdge, ...]: Edges in insertion order, or an empty tuple
                for a node the graph has never seen.
        """
        idx = self._node_index.get(node)
        if idx is None:
            return ()
        return tuple(self._edges[e] for e in self._out[idx])

    def edges(self, include_residual: bool = False) -> Iterator[FlowEdge]:
        """Iterate edges in creation order.

        Args:
            include_residual: Also yield the implicit reverse edges.
        """
        step = 1 if include_residual else 2
        for i in range(0, len(self._edges), step):
            yield self._edges[i]

    def nodes(self) -> List[NodeID]:
        """Return all registered nodes in first-seen order."""
        return list(self._nodes)

    def has_node(self, node: NodeID) -> bool:
        """Return True if ``node`` is registered; unhashable values never are."""
        try:
            return node in self._node_index
        except TypeError:
            return False

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of edges added by callers (residual twins not counted)."""
        return len(self._edges) // 2

    #
    # Flow state
    #
    def residual(self, edge: EdgeRef) -> FlowEdge:
        """Return the twin of ``edge``."""
        return self._edges[self._index_of(edge) ^ 1]

    def flow(self, edge: EdgeRef) -> int:
        """Return the current flow on ``edge``.

        Raises:
            MissingEdgeStateError: If the graph holds no such edge.
        """
        return self._flow[self._index_of(edge)]

    def residual_capacity(self, edge: EdgeRef) -> int:
        """Return ``capacity - flow`` for ``edge``.

        Raises:
            MissingEdgeStateError: If the graph holds no such edge.
        """
        idx = self._index_of(edge)
        return self._edges[idx].capacity - self._flow[idx]

    def push_flow(self, edge: EdgeRef, amount: int) -> None:
        """Move ``amount`` units of flow along ``edge``.

        The twin edge receives the opposite change, which is what lets later
        augmentations cancel or reroute this flow.

        Args:
            edge: Edge to push along.
            amount: Units to push. Must not exceed the residual capacity.

        Raises:
            MissingEdgeStateError: If the graph holds no such edge.
            ValueError: If ``amount`` is negative or larger than the residual
                capacity of ``edge``.
        """
        idx = self._index_of(edge)
        available = self._edges[idx].capacity - self._flow[idx]
        if amount < 0 or amount > available:
            raise ValueError(
                f"Cannot push {amount} along {self._edges[idx]}: residual capacity "
                f"is {available}."
            )
        self._flow[idx] += amount
        self._flow[idx ^ 1] -= amount

    def reset_flow(self) -> None:
        """Set the flow on every edge back to zero."""
        self._flow = [0] * len(self._edges)

    def _index_of(self, edge: EdgeRef) -> int:
        if isinstance(edge, FlowEdge):
            idx = edge.index
            if 0 <= idx < len(self._edges) and self._edges[idx] == edge:
                return idx
            raise MissingEdgeStateError(f"Edge {edge} is not part of this graph.")
        if isinstance(edge, int) and not isinstance(edge, bool):
            if 0 <= edge < len(self._edges):
                return edge
        raise MissingEdgeStateError(f"No flow state for edge index {edge!r}.")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count}, edges={self.edge_count})"
        )
