"""
Layout configuration.

The defaults reproduce the classic behaviour: 50 unit node radius,
a 10 unit target distance for the force law and 100 refinement steps.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .geom import min_distance
from .graph import DEFAULT_COLOR, Shape


NODE_RADIUS = 50.0
EDGE_LENGTH = 10.0
ITERATIONS = 100
MAX_PASSES = 10000


@dataclass(frozen=True)
class LayoutConfig:
    """
    Parameters for a layout computation.

    Attributes:
        radius: Node collision and clamp radius
        edge_length: Target inter-node distance used by the force law
        iterations: Number of refinement steps
        max_passes: Maximum overlap-resolution scans before giving up
        default_color: Color given to nodes without one
        default_shape: Shape given to nodes without one
    """
    radius: float = NODE_RADIUS
    edge_length: float = EDGE_LENGTH
    iterations: int = ITERATIONS
    max_passes: int = MAX_PASSES
    default_color: str = DEFAULT_COLOR
    default_shape: Any = Shape.circle

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")
        if self.edge_length <= 0:
            raise ValueError(f"edge_length must be positive, got {self.edge_length}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")
        if self.max_passes < 1:
            raise ValueError(f"max_passes must be at least 1, got {self.max_passes}")

        # frozen: normalise through object.__setattr__
        object.__setattr__(self, 'radius', float(self.radius))
        object.__setattr__(self, 'edge_length', float(self.edge_length))
        object.__setattr__(self, 'iterations', int(self.iterations))
        object.__setattr__(self, 'max_passes', int(self.max_passes))
        object.__setattr__(self, 'default_shape', Shape.parse(self.default_shape))

    @property
    def min_distance(self) -> float:
        """Minimum separation enforced during placement."""
        return min_distance(self.radius)

    def replace(self, **changes: Any) -> LayoutConfig:
        """Return a copy with some fields changed. Unknown fields raise TypeError."""
        return replace(self, **changes)


DEFAULT_CONFIG = LayoutConfig()
