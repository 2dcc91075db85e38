"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from flowgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=100)
    >>> G.add_edge("B", "C", capacity=50)
    >>>
    >>> graph = from_networkx(G)
    >>> # solve, then inspect flows in NetworkX form
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from flowgraph.lib.graph import ResidualGraph


def from_networkx(nx_graph: Any, capacity_attr: str = "capacity") -> ResidualGraph:
    """Build a ResidualGraph from a directed NetworkX graph.

    Parallel edges of a MultiDiGraph become separate edges. Isolated nodes are
    dropped since a ResidualGraph only knows nodes that touch an edge.

    Args:
        nx_graph: ``nx.DiGraph`` or ``nx.MultiDiGraph``.
        capacity_attr: Edge attribute holding the integer capacity.

    Returns:
        ResidualGraph: Graph with zero flow.

    Raises:
        TypeError: If the graph is undirected.
        KeyError: If an edge has no ``capacity_attr``.
        InvalidEdgeError: On self-loops or invalid capacities.
    """
    if not nx_graph.is_directed():
        raise TypeError("from_networkx requires a directed graph.")

    graph = ResidualGraph()
    for u, v, data in nx_graph.edges(data=True):
        if capacity_attr not in data:
            raise KeyError(f"Edge {u!r} -> {v!r} has no '{capacity_attr}' attribute.")
        graph.add_edge(u, v, data[capacity_attr])
    return graph


def to_networkx(graph: ResidualGraph) -> nx.DiGraph:
    """Export forward edges to a NetworkX DiGraph.

    Parallel edges are merged: their capacities and flows are summed into the
    ``capacity`` and ``flow`` attributes.
    """
    out = nx.DiGraph()
    out.add_nodes_from(graph.nodes())
    for edge in graph.edges():
        if out.has_edge(edge.source, edge.sink):
            data = out[edge.source][edge.sink]
            data["capacity"] += edge.capacity
            data["flow"] += graph.flow(edge)
        else:
            out.add_edge(
                edge.source, edge.sink, capacity=edge.capacity, flow=graph.flow(edge)
            )
    return out
