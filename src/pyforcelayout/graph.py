"""
Graph input records and layout output records.

Nodes and edges are immutable descriptions supplied by the caller.
Positions are produced by the layout and carry the node's display
attributes through to the renderer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Hashable, Iterable, Mapping, NamedTuple, Optional
import logging

from .errors import NodeNotFoundError

logger = logging.getLogger(__name__)


DEFAULT_COLOR = '#000000'


class Shape(str, Enum):
    """Outline drawn for a node."""
    circle = 'circle'
    rectangle = 'rectangle'

    @classmethod
    def parse(cls, value: Any) -> Shape:
        """
        Convert a shape name to a Shape.

        Names match exactly and case-sensitively; None and unrecognised
        names (including "Rectangle") fall back to circle.
        """
        if isinstance(value, Shape):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        if value is not None:
            logger.debug("unknown shape %r, using circle", value)
        return cls.circle


class Node(NamedTuple):
    """
    Input node.

    Attributes:
        id: Unique identity, referenced by edges
        label: Display text
        color: Stroke color, None for the layout default
        shape: Shape name or Shape, None for the layout default
    """
    id: Hashable
    label: str = ''
    color: Optional[str] = None
    shape: Optional[Any] = None


class Edge(NamedTuple):
    """Directed reference pair between two node ids."""
    start_node_id: Hashable
    end_node_id: Hashable


class Position(NamedTuple):
    """Computed placement of a node plus its display attributes."""
    id: Hashable
    x: float
    y: float
    label: str = ''
    color: str = DEFAULT_COLOR
    shape: Shape = Shape.circle

    def moved_to(self, x: float, y: float) -> Position:
        """Copy of this position at new coordinates."""
        return self._replace(x=float(x), y=float(y))


def _lookup(obj: Any, *names: str, default: Any = None) -> Any:
    """Read the first present key (mappings) or attribute (objects)."""
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return default


_MISSING = object()


def as_node(obj: Any) -> Node:
    """
    Convert a node description to a Node.

    Accepts a Node, a mapping with 'id', 'label', 'color' and 'shape'
    keys, or any object carrying those attributes.
    """
    if isinstance(obj, Node):
        return obj

    node_id = _lookup(obj, 'id', default=_MISSING)
    if node_id is _MISSING:
        raise ValueError(f"node description has no id: {obj!r}")

    label = _lookup(obj, 'label', default='')
    return Node(
        id=node_id,
        label='' if label is None else str(label),
        color=_lookup(obj, 'color'),
        shape=_lookup(obj, 'shape'),
    )


def as_edge(obj: Any) -> Edge:
    """
    Convert an edge description to an Edge.

    Accepts an Edge, a (start, end) pair, a mapping with
    'startNodeId'/'endNodeId' (or 'start_node_id'/'end_node_id', or
    'source'/'target') keys, or an object with those attributes.
    """
    if isinstance(obj, Edge):
        return obj
    if isinstance(obj, tuple) and len(obj) == 2:
        return Edge(obj[0], obj[1])

    start = _lookup(obj, 'startNodeId', 'start_node_id', 'source', default=_MISSING)
    end = _lookup(obj, 'endNodeId', 'end_node_id', 'target', default=_MISSING)
    if start is _MISSING or end is _MISSING:
        raise ValueError(f"edge description needs a start and end node id: {obj!r}")
    return Edge(start, end)


def as_nodes(nodes: Optional[Iterable[Any]]) -> list[Node]:
    """Convert a sequence of node descriptions."""
    if nodes is None:
        return []
    return [as_node(v) for v in nodes]


def as_edges(edges: Optional[Iterable[Any]]) -> list[Edge]:
    """Convert a sequence of edge descriptions."""
    if edges is None:
        return []
    return [as_edge(e) for e in edges]


def resolve_edge(edge: Edge, index: Mapping[Hashable, Position]) -> tuple[Position, Position]:
    """
    Look up both endpoints of an edge.

    Args:
        edge: Edge to resolve
        index: Positions keyed by node id

    Returns:
        (start, end) positions

    Raises:
        NodeNotFoundError: if either id is unknown
    """
    try:
        start = index[edge.start_node_id]
    except KeyError:
        raise NodeNotFoundError(edge.start_node_id) from None
    try:
        end = index[edge.end_node_id]
    except KeyError:
        raise NodeNotFoundError(edge.end_node_id) from None
    return start, end


def check_edges(nodes: Iterable[Any], edges: Iterable[Any]) -> None:
    """
    Verify that every edge references existing nodes.

    Raises:
        NodeNotFoundError: for the first dangling reference found
    """
    ids = {as_node(v).id for v in nodes}
    for e in as_edges(edges):
        for node_id in (e.start_node_id, e.end_node_id):
            if node_id not in ids:
                raise NodeNotFoundError(node_id)
