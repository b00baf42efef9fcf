"""Exceptions raised by the layout engine."""

from __future__ import annotations

from typing import Any


class LayoutError(Exception):
    """Base class for layout failures."""


class PlacementError(LayoutError):
    """
    Overlap resolution did not converge.

    Raised when every scan up to the configured maximum still found a pair
    of nodes closer than the minimum separation, which happens when the
    viewport cannot hold the nodes without overlap.
    """

    def __init__(self, passes: int, node_count: int):
        super().__init__(
            f"could not place {node_count} nodes without overlap "
            f"after {passes} passes"
        )
        self.passes = passes
        self.node_count = node_count


class NodeNotFoundError(LayoutError, LookupError):
    """An edge references a node id that is not part of the graph."""

    def __init__(self, node_id: Any):
        super().__init__(f"edge references unknown node id {node_id!r}")
        self.node_id = node_id
