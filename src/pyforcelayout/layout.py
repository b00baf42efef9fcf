"""
Graph layout entry points.

compute_layout() runs placement followed by refinement. Layout wraps the
same pipeline in a chainable getter/setter interface that remembers its
inputs and recomputes from scratch on every start().
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union
import logging

from .config import DEFAULT_CONFIG, LayoutConfig
from .graph import Edge, Node, Position, as_edges, as_nodes
from .placement import PlacementResolver
from .pseudorandom import PseudoRandom, RandomSource, default_source
from .refine import ForceRefiner
from .scene import Scene, build_scene

logger = logging.getLogger(__name__)


def compute_layout(
    nodes: Iterable[Any],
    edges: Optional[Iterable[Any]],
    width: float,
    height: float,
    config: Optional[LayoutConfig] = None,
    rng: Optional[RandomSource] = None
) -> list[Position]:
    """
    Compute a position for every node.

    Args:
        nodes: Node descriptions
        edges: Edge descriptions; accepted for symmetry with the renderer,
            the force law does not read them
        width: Viewport width
        height: Viewport height
        config: Layout parameters, defaults when omitted
        rng: Random source for the initial scatter, entropy-backed when omitted

    Returns:
        Positions index-aligned with nodes

    Raises:
        PlacementError: if overlap resolution does not converge
    """
    config = config if config is not None else DEFAULT_CONFIG
    initial = PlacementResolver(config, rng).resolve(nodes, width, height)
    return ForceRefiner(config).refine(initial, width, height)


class Layout:
    """
    Chainable interface to the layout pipeline.

    Setters return self; calling a setter without arguments returns the
    current value.

        positions = (Layout()
                     .nodes([{'id': 1}, {'id': 2}])
                     .size(400, 400)
                     .seed(7)
                     .start())
    """

    def __init__(self):
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._canvasSize: list[float] = [0.0, 0.0]
        self._config: LayoutConfig = DEFAULT_CONFIG
        self._rng: Optional[RandomSource] = None
        self._positions: list[Position] = []
        self._lastPasses: int = 0

    def nodes(self, v: Optional[Iterable[Any]] = None) -> Union[list[Node], Layout]:
        """Get or set the nodes. Dicts and objects with node attributes are accepted."""
        if v is None:
            return self._nodes
        self._nodes = as_nodes(v)
        return self

    def edges(self, v: Optional[Iterable[Any]] = None) -> Union[list[Edge], Layout]:
        """Get or set the edges."""
        if v is None:
            return self._edges
        self._edges = as_edges(v)
        return self

    def size(self, width: Optional[float] = None, height: Optional[float] = None) -> Union[list[float], Layout]:
        """Get or set the viewport size as [width, height]."""
        if width is None:
            return self._canvasSize
        self._canvasSize = [width, width if height is None else height]
        return self

    def config(self, c: Optional[LayoutConfig] = None) -> Union[LayoutConfig, Layout]:
        """Get or set the whole configuration."""
        if c is None:
            return self._config
        self._config = c
        return self

    def node_radius(self, r: Optional[float] = None) -> Union[float, Layout]:
        """Get or set the node radius used for separation and clamping."""
        if r is None:
            return self._config.radius
        self._config = self._config.replace(radius=r)
        return self

    def edge_length(self, length: Optional[float] = None) -> Union[float, Layout]:
        """Get or set the target distance of the force law."""
        if length is None:
            return self._config.edge_length
        self._config = self._config.replace(edge_length=length)
        return self

    def iterations(self, n: Optional[int] = None) -> Union[int, Layout]:
        """Get or set the number of refinement steps."""
        if n is None:
            return self._config.iterations
        self._config = self._config.replace(iterations=n)
        return self

    def max_passes(self, n: Optional[int] = None) -> Union[int, Layout]:
        """Get or set the cap on overlap-resolution scans."""
        if n is None:
            return self._config.max_passes
        self._config = self._config.replace(max_passes=n)
        return self

    def random_source(self, rng: Optional[RandomSource] = None) -> Union[Optional[RandomSource], Layout]:
        """Get or set the random source for the initial scatter."""
        if rng is None:
            return self._rng
        self._rng = rng
        return self

    def seed(self, s: int) -> Layout:
        """Use a deterministic generator seeded with s."""
        self._rng = PseudoRandom(s)
        return self

    def start(self) -> list[Position]:
        """
        Compute the layout from the current inputs.

        A fresh position set is produced every time; nothing from an
        earlier run carries over. A seeded generator set with seed() is
        consumed by each run, so repeated runs give different layouts
        unless seed() is called again.

        Returns:
            Positions index-aligned with the nodes
        """
        width, height = self._canvasSize
        rng = self._rng if self._rng is not None else default_source()

        resolver = PlacementResolver(self._config, rng)
        initial = resolver.resolve(self._nodes, width, height)
        self._lastPasses = resolver.passes
        self._positions = ForceRefiner(self._config).refine(initial, width, height)
        logger.debug(
            "layout of %d nodes, %d edges finished (%d placement passes)",
            len(self._nodes), len(self._edges), self._lastPasses
        )
        return self._positions

    def positions(self) -> list[Position]:
        """Positions from the last start()."""
        return self._positions

    def placement_passes(self) -> int:
        """Overlap-resolution scans made by the last start()."""
        return self._lastPasses

    def scene(self) -> Scene:
        """Draw list for the last computed positions and the current edges."""
        return build_scene(self._positions, self._edges, self._config)
