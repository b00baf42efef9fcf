"""Tests for force refinement."""

import pytest
import math
import numpy as np
from pyforcelayout.config import LayoutConfig
from pyforcelayout.graph import Position, Shape
from pyforcelayout.refine import ForceRefiner, refine


def reference_step(xs, ys, width, height, radius, edge_length):
    """Plain loop version of one sequential refinement step."""
    xs = list(xs)
    ys = list(ys)
    for i in range(len(xs)):
        fx = fy = 0.0
        for j in range(len(xs)):
            if i == j:
                continue
            dx = xs[j] - xs[i]
            dy = ys[j] - ys[i]
            d = math.sqrt(dx * dx + dy * dy)
            angle = math.atan2(dy, dx)
            f = (edge_length - d) / edge_length
            fx -= f * math.cos(angle)
            fy -= f * math.sin(angle)
        xs[i] = max(radius, min(width - radius, xs[i] + fx))
        ys[i] = max(radius, min(height - radius, ys[i] + fy))
    return xs, ys


class TestForces:
    """Test per-node force accumulation."""

    def test_single_node_no_force(self):
        refiner = ForceRefiner()
        assert refiner.forces(np.array([10.0]), np.array([20.0]), 0) == (0.0, 0.0)

    def test_far_node_attracts(self):
        """Test a node beyond edge_length pulls towards the other."""
        refiner = ForceRefiner()
        fx, fy = refiner.forces(np.array([0.0, 100.0]), np.array([0.0, 0.0]), 0)
        assert fx == pytest.approx(9.0)
        assert fy == pytest.approx(0.0)

    def test_near_node_repels(self):
        """Test a node within edge_length pushes away."""
        refiner = ForceRefiner()
        fx, fy = refiner.forces(np.array([0.0, 5.0]), np.array([0.0, 0.0]), 0)
        assert fx == pytest.approx(-0.5)
        assert fy == pytest.approx(0.0)

    def test_at_edge_length_balanced(self):
        refiner = ForceRefiner()
        fx, fy = refiner.forces(np.array([0.0, 0.0]), np.array([0.0, 10.0]), 0)
        assert fx == pytest.approx(0.0)
        assert fy == pytest.approx(0.0)

    def test_coincident_nodes(self):
        """Test coincident nodes use a zero angle."""
        refiner = ForceRefiner()
        fx, fy = refiner.forces(np.array([5.0, 5.0]), np.array([5.0, 5.0]), 0)
        assert fx == pytest.approx(-1.0)
        assert fy == pytest.approx(0.0)


class TestStep:
    """Test a single refinement step."""

    def test_sequential_updates(self):
        """Test later nodes see already-moved earlier nodes."""
        xs = [100.0, 160.0, 100.0]
        ys = [100.0, 100.0, 180.0]
        cfg = LayoutConfig(radius=0)
        refiner = ForceRefiner(cfg)

        ax = np.array(xs)
        ay = np.array(ys)
        refiner.step(ax, ay, 10000, 10000)

        ex, ey = reference_step(xs, ys, 10000, 10000, 0, 10)
        assert ax.tolist() == pytest.approx(ex)
        assert ay.tolist() == pytest.approx(ey)

    def test_not_batched(self):
        """Test the result differs from a synchronous update."""
        xs = np.array([100.0, 160.0, 100.0])
        ys = np.array([100.0, 100.0, 180.0])
        refiner = ForceRefiner(LayoutConfig(radius=0))

        batched = [refiner.forces(xs, ys, i) for i in range(3)]
        bx = xs + np.array([f[0] for f in batched])

        refiner.step(xs, ys, 10000, 10000)
        assert not np.allclose(xs, bx)

    def test_clamp_applied(self):
        refiner = ForceRefiner()
        xs = np.array([0.0])
        ys = np.array([1000.0])
        refiner.step(xs, ys, 400, 400)
        assert xs[0] == 50.0
        assert ys[0] == 350.0


class TestRefine:
    """Test the full refinement run."""

    def test_empty(self):
        assert refine([], 400, 400) == []

    def test_single_node_clamped(self):
        """Test a lone node only moves by clamping."""
        p = Position(1, 10.0, 390.0, 'one', '#000000', Shape.rectangle)
        out = refine([p], 400, 400)
        assert (out[0].x, out[0].y) == (50.0, 350.0)
        assert out[0].shape is Shape.rectangle
        assert out[0].label == 'one'

    def test_single_node_inside_unchanged(self):
        p = Position(1, 123.0, 234.0)
        out = refine([p], 400, 400)
        assert (out[0].x, out[0].y) == (123.0, 234.0)

    def test_bounds(self):
        """Test all positions stay within the clamped viewport."""
        positions = [
            Position(i, x, y) for i, (x, y) in enumerate(
                [(-500.0, 20.0), (900.0, 900.0), (200.0, 200.0), (210.0, 200.0), (0.0, 0.0)]
            )
        ]
        out = refine(positions, 400, 300)
        for p in out:
            assert 50 <= p.x <= 350
            assert 50 <= p.y <= 250

    def test_input_not_mutated(self):
        positions = [Position(1, 100.0, 200.0), Position(2, 300.0, 200.0)]
        before = list(positions)
        refine(positions, 1000, 1000)
        assert positions == before

    def test_two_nodes_approach_edge_length(self):
        """Test two nodes settle near the target distance."""
        positions = [Position(1, 100.0, 200.0), Position(2, 300.0, 200.0)]
        a, b = refine(positions, 1000, 1000)
        assert math.hypot(a.x - b.x, a.y - b.y) == pytest.approx(10.0, abs=1e-3)
        assert a.y == pytest.approx(200.0)
        assert b.y == pytest.approx(200.0)

    def test_zero_iterations(self):
        positions = [Position(1, 0.0, 0.0), Position(2, 1.0, 1.0)]
        out = refine(positions, 400, 400, LayoutConfig(iterations=0))
        assert [(p.x, p.y) for p in out] == [(0.0, 0.0), (1.0, 1.0)]

    def test_degenerate_viewport_pins_to_radius(self):
        positions = [Position(1, 0.0, 0.0), Position(2, 30.0, 40.0)]
        out = refine(positions, 0, 0)
        for p in out:
            assert (p.x, p.y) == (50.0, 50.0)

    def test_returns_floats(self):
        out = refine([Position(1, 100.0, 100.0), Position(2, 200.0, 100.0)], 400, 400)
        assert all(type(p.x) is float and type(p.y) is float for p in out)
