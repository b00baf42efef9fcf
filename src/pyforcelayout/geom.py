"""
Geometric utilities for graph layout.

This module provides the point primitive, distance and angle helpers,
boundary clamping and the pairwise force law shared by the placement
and refinement stages.
"""

from __future__ import annotations

import math


class Point:
    """2D point."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = b.x - a.x
    dy = b.y - a.y
    return math.sqrt(dx * dx + dy * dy)


def angle_between(a: Point, b: Point) -> float:
    """
    Angle of the direction from a to b, in radians.

    Coincident points give atan2(0, 0) == 0.
    """
    return math.atan2(b.y - a.y, b.x - a.x)


def clamp(value: float, lo: float, hi: float) -> float:
    """
    Clamp value into [lo, hi].

    When the interval is empty (hi < lo) the lower bound wins, so a
    viewport narrower than two radii pins coordinates to the radius.
    """
    return max(lo, min(hi, value))


def force(d: float, edge_length: float) -> float:
    """
    Pairwise force magnitude at distance d.

    Zero at edge_length, positive (repulsive) below it and negative
    (attractive) above it.
    """
    return (edge_length - d) / edge_length


def min_distance(radius: float) -> float:
    """Minimum centre-to-centre separation for two nodes of the given radius."""
    return radius * 2
