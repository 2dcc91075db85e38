"""Enums shared by the flow algorithms."""

from __future__ import annotations

from enum import IntEnum


class SolverState(IntEnum):
    """Phases of a `MaxFlowSolver` run.

    A run starts in SEARCHING, alternates with AUGMENTING while augmenting
    paths exist, and ends in DONE once the search comes back empty.
    """

    IDLE = 0
    SEARCHING = 1
    AUGMENTING = 2
    DONE = 3
