"""
Initial placement with overlap resolution.

Nodes are scattered uniformly over the viewport, then overlapping pairs
are pushed apart along the line joining their centres until a full scan
finds no pair closer than twice the node radius.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional
import logging
import math

from .config import DEFAULT_CONFIG, LayoutConfig
from .errors import PlacementError
from .geom import Point, angle_between, distance
from .graph import Position, Shape, as_nodes
from .pseudorandom import RandomSource, default_source

logger = logging.getLogger(__name__)


class PlacementResolver:
    """
    Produces non-overlapping initial positions.

    Attributes:
        config: Layout parameters (radius and max_passes are used)
        rng: Source of the initial coordinates
        passes: Number of full pairwise scans made by the last resolve()
    """

    # relative slack on min_distance; pairs short by a few ulps count as placed
    OVERLAP_TOLERANCE = 1e-9

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        rng: Optional[RandomSource] = None
    ):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.rng = rng if rng is not None else default_source()
        self.passes = 0

    def resolve(self, nodes: Iterable[Any], width: float, height: float) -> list[Position]:
        """
        Place nodes inside a width x height viewport.

        Args:
            nodes: Node descriptions
            width: Viewport width
            height: Viewport height

        Returns:
            One position per node, in input order

        Raises:
            PlacementError: if no overlap-free placement is reached
                within config.max_passes scans
        """
        nodes = as_nodes(nodes)
        n = len(nodes)
        self.passes = 0

        points = []
        for _ in range(n):
            x = self.rng.uniform(0, width)
            y = self.rng.uniform(0, height)
            points.append(Point(x, y))
        logger.debug("sampled %d nodes in %sx%s viewport", n, width, height)

        if n > 1:
            self._separate(points)

        cfg = self.config
        return [
            Position(
                id=v.id,
                x=points[i].x,
                y=points[i].y,
                label=v.label,
                color=v.color or cfg.default_color,
                shape=cfg.default_shape if v.shape is None else Shape.parse(v.shape),
            )
            for i, v in enumerate(nodes)
        ]

    def _separate(self, points: list[Point]) -> None:
        """
        Scan all pairs repeatedly until none is closer than min_distance.

        Moves apply immediately, so a later pair in the same scan sees
        the result of an earlier one.
        """
        n = len(points)
        min_d = self.config.min_distance
        limit = min_d * (1 - self.OVERLAP_TOLERANCE)

        while self.passes < self.config.max_passes:
            self.passes += 1
            overlaps = 0
            for i in range(n):
                p = points[i]
                for j in range(i + 1, n):
                    q = points[j]
                    d = distance(q, p)
                    if d < limit:
                        overlaps += 1
                        # direction from q to p; p moves along it, q against it
                        angle = angle_between(q, p)
                        shift = (min_d - d) / 2
                        ox = math.cos(angle) * shift
                        oy = math.sin(angle) * shift
                        p.x += ox
                        p.y += oy
                        q.x -= ox
                        q.y -= oy
            if overlaps == 0:
                logger.debug("placement converged after %d passes", self.passes)
                return
            logger.debug("pass %d moved %d overlapping pairs", self.passes, overlaps)

        logger.warning(
            "placement of %d nodes did not converge in %d passes",
            n, self.passes
        )
        raise PlacementError(self.passes, n)


def resolve_placement(
    nodes: Iterable[Any],
    width: float,
    height: float,
    config: Optional[LayoutConfig] = None,
    rng: Optional[RandomSource] = None
) -> list[Position]:
    """Scatter nodes over the viewport and resolve overlaps."""
    return PlacementResolver(config, rng).resolve(nodes, width, height)
