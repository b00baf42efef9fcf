"""
Force-based refinement of node positions.

Every node is pushed or pulled by every other node according to
force(d) = (edge_length - d) / edge_length, then clamped into the
viewport. Nodes are updated one at a time, so within a step node i sees
the new coordinates of nodes before it and the old coordinates of nodes
after it.
"""

from __future__ import annotations

from typing import Optional, Sequence
import logging
import numpy as np

from .config import DEFAULT_CONFIG, LayoutConfig
from .geom import clamp, force
from .graph import Position

logger = logging.getLogger(__name__)


class ForceRefiner:
    """
    Runs a fixed number of pairwise force steps with boundary clamping.

    The edge list plays no part: the force acts between all node pairs.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config if config is not None else DEFAULT_CONFIG

    def forces(self, xs: np.ndarray, ys: np.ndarray, i: int) -> tuple[float, float]:
        """
        Net displacement on node i from all other nodes.

        Args:
            xs: x coordinates of all nodes
            ys: y coordinates of all nodes
            i: Index of the node

        Returns:
            (fx, fy) displacement
        """
        dx = np.delete(xs, i) - xs[i]
        dy = np.delete(ys, i) - ys[i]
        if dx.size == 0:
            return 0.0, 0.0

        d = np.sqrt(dx * dx + dy * dy)
        angle = np.arctan2(dy, dx)
        f = force(d, self.config.edge_length)

        # angle points from i to j; positive force pushes i away from j
        fx = -float(np.sum(f * np.cos(angle)))
        fy = -float(np.sum(f * np.sin(angle)))
        return fx, fy

    def step(self, xs: np.ndarray, ys: np.ndarray, width: float, height: float) -> None:
        """Move every node once, in index order, updating xs and ys in place."""
        r = self.config.radius
        for i in range(xs.shape[0]):
            fx, fy = self.forces(xs, ys, i)
            xs[i] = clamp(xs[i] + fx, r, width - r)
            ys[i] = clamp(ys[i] + fy, r, height - r)

    def refine(self, positions: Sequence[Position], width: float, height: float) -> list[Position]:
        """
        Refine positions inside a width x height viewport.

        Args:
            positions: Starting positions (left unchanged)
            width: Viewport width
            height: Viewport height

        Returns:
            New positions, index-aligned with the input
        """
        xs = np.array([p.x for p in positions], dtype=float)
        ys = np.array([p.y for p in positions], dtype=float)

        for _ in range(self.config.iterations):
            self.step(xs, ys, width, height)
        logger.debug(
            "refined %d positions over %d iterations",
            len(positions), self.config.iterations
        )

        return [p.moved_to(xs[i], ys[i]) for i, p in enumerate(positions)]


def refine(
    positions: Sequence[Position],
    width: float,
    height: float,
    config: Optional[LayoutConfig] = None
) -> list[Position]:
    """Run the force refinement over a copy of positions."""
    return ForceRefiner(config).refine(positions, width, height)
