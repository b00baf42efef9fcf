"""
PyForceLayout: force-based 2D graph layout

Random placement with overlap resolution followed by fixed-step
pairwise force refinement inside a bounded viewport.
"""

from .config import EDGE_LENGTH, ITERATIONS, MAX_PASSES, NODE_RADIUS, LayoutConfig
from .errors import LayoutError, NodeNotFoundError, PlacementError
from .graph import Edge, Node, Position, Shape, check_edges
from .layout import Layout, compute_layout
from .placement import PlacementResolver, resolve_placement
from .pseudorandom import NumpyRandom, PseudoRandom, RandomSource
from .refine import ForceRefiner, refine
from .scene import Scene, build_scene

__version__ = "0.1.0"

__all__ = [
    "EDGE_LENGTH", "ITERATIONS", "MAX_PASSES", "NODE_RADIUS",
    "LayoutConfig",
    "LayoutError", "NodeNotFoundError", "PlacementError",
    "Edge", "Node", "Position", "Shape", "check_edges",
    "Layout", "compute_layout",
    "PlacementResolver", "resolve_placement",
    "NumpyRandom", "PseudoRandom", "RandomSource",
    "ForceRefiner", "refine",
    "Scene", "build_scene",
]
