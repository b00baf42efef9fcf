"""
Renderer-agnostic drawing of a computed layout.

build_scene() turns positions and edges into an ordered list of drawing
primitives: edge lines first, then each node outline followed by its
label. Scene can serialise itself to SVG; other backends can walk the
primitives.
"""

from __future__ import annotations

from typing import Any, Iterable, NamedTuple, Optional, Sequence, Union
from xml.sax.saxutils import escape, quoteattr
import logging

from .config import DEFAULT_CONFIG, LayoutConfig
from .graph import Position, Shape, as_edges, resolve_edge

logger = logging.getLogger(__name__)


NODE_FILL = '#ffffff'
LABEL_COLOR = '#000000'
EDGE_COLOR = '#000000'


class Line(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = EDGE_COLOR


class Circle(NamedTuple):
    cx: float
    cy: float
    r: float
    fill: str = NODE_FILL
    stroke: str = '#000000'


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    fill: str = NODE_FILL
    stroke: str = '#000000'


class Text(NamedTuple):
    """Label centred on (x, y)."""
    x: float
    y: float
    text: str
    fill: str = LABEL_COLOR


Primitive = Union[Line, Circle, Rect, Text]


class Scene:
    """Ordered drawing primitives for one layout."""

    def __init__(self, items: Optional[list[Primitive]] = None):
        self.items: list[Primitive] = items if items is not None else []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def of_type(self, kind: type) -> list[Primitive]:
        """Primitives of one kind, in paint order."""
        return [p for p in self.items if isinstance(p, kind)]

    def to_svg(self, width: float, height: float) -> str:
        """Serialise to an SVG document."""
        out = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(width)}" '
            f'height="{_num(height)}" viewBox="0 0 {_num(width)} {_num(height)}">'
        ]
        for p in self.items:
            out.append(_svg_element(p))
        out.append('</svg>')
        return '\n'.join(out)


def _num(v: float) -> str:
    return f"{float(v):g}"


def _svg_element(p: Primitive) -> str:
    if isinstance(p, Line):
        return (
            f'<line x1="{_num(p.x1)}" y1="{_num(p.y1)}" x2="{_num(p.x2)}" '
            f'y2="{_num(p.y2)}" stroke={quoteattr(p.stroke)} />'
        )
    if isinstance(p, Circle):
        return (
            f'<circle cx="{_num(p.cx)}" cy="{_num(p.cy)}" r="{_num(p.r)}" '
            f'fill={quoteattr(p.fill)} stroke={quoteattr(p.stroke)} />'
        )
    if isinstance(p, Rect):
        return (
            f'<rect x="{_num(p.x)}" y="{_num(p.y)}" width="{_num(p.width)}" '
            f'height="{_num(p.height)}" fill={quoteattr(p.fill)} '
            f'stroke={quoteattr(p.stroke)} />'
        )
    return (
        f'<text x="{_num(p.x)}" y="{_num(p.y)}" fill={quoteattr(p.fill)} '
        f'text-anchor="middle" dominant-baseline="middle">{escape(p.text)}</text>'
    )


def build_scene(
    positions: Sequence[Position],
    edges: Optional[Iterable[Any]] = None,
    config: Optional[LayoutConfig] = None
) -> Scene:
    """
    Build the draw list for a layout.

    Args:
        positions: Computed positions
        edges: Edge descriptions, resolved against positions by node id
        config: Supplies the node radius

    Returns:
        Scene with lines, then an outline and label per node

    Raises:
        NodeNotFoundError: if an edge references an id with no position
    """
    r = (config if config is not None else DEFAULT_CONFIG).radius
    index = {p.id: p for p in positions}
    scene = Scene()

    for e in as_edges(edges):
        start, end = resolve_edge(e, index)
        scene.items.append(Line(start.x, start.y, end.x, end.y))

    for p in positions:
        if Shape.parse(p.shape) is Shape.rectangle:
            scene.items.append(Rect(p.x - r, p.y - r, r * 2, r * 2, stroke=p.color))
        else:
            scene.items.append(Circle(p.x, p.y, r, stroke=p.color))
        # a later node covers the label of an earlier one it overlaps
        scene.items.append(Text(p.x, p.y, p.label))

    logger.debug("built scene with %d primitives", len(scene))
    return scene
