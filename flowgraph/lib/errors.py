"""Exception types raised by flowgraph.

All package errors derive from `FlowGraphError` so callers (and the CLI) can
catch them in one place. Each concrete error also derives from the matching
builtin so ``except ValueError`` style handling keeps working.
"""

from __future__ import annotations


class FlowGraphError(Exception):
    """Base class for all flowgraph errors."""


class InvalidEdgeError(FlowGraphError, ValueError):
    """Raised by ``ResidualGraph.add_edge`` for a malformed edge request.

    The graph is left untouched when this is raised.
    """


class MissingEdgeStateError(FlowGraphError, LookupError):
    """Raised when flow state for an edge cannot be found.

    This indicates corrupted internal bookkeeping (or an edge handle that
    belongs to another graph) and is not recoverable.
    """
