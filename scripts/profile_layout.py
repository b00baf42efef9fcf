"""
Profiling script for PyForceLayout.

Profiles placement, refinement and scene building on graphs of
increasing size. Placement and refinement are O(n^2) per pass or step.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time

import numpy as np
from pyforcelayout import LayoutConfig, PseudoRandom, build_scene, resolve_placement, refine


def create_graph(n_nodes, n_edges):
    """Create n labelled nodes and approximately n_edges random edges."""
    nodes = [{'id': i, 'label': f"n{i}"} for i in range(n_nodes)]

    edges = []
    rng = np.random.default_rng(42)
    for _ in range(n_edges):
        source = int(rng.integers(0, n_nodes))
        target = int(rng.integers(0, n_nodes))
        if source != target:
            edges.append({'startNodeId': source, 'endNodeId': target})

    return nodes, edges


def viewport_for(n_nodes, radius=50.0):
    """Square viewport with room for every node, about a quarter filled."""
    side = 2 * radius * np.sqrt(4 * n_nodes)
    return float(side), float(side)


def profile_graph(n_nodes, n_edges):
    """Place, refine and draw one random graph."""
    nodes, edges = create_graph(n_nodes, n_edges)
    width, height = viewport_for(n_nodes)
    config = LayoutConfig()

    initial = resolve_placement(nodes, width, height, config, PseudoRandom(42))
    positions = refine(initial, width, height, config)
    scene = build_scene(positions, edges, config)
    scene.to_svg(width, height)


def benchmark_scenario(name, func):
    """Benchmark a scenario and print timing."""
    print(f"\n{'='*60}")
    print(f"Profiling: {name}")
    print('='*60)

    profiler = cProfile.Profile()

    start_time = time.time()
    profiler.enable()
    func()
    profiler.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f}s")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(15)

    print("\nTop 15 functions by cumulative time:")
    print(s.getvalue())

    return profiler


def main():
    """Run all profiling scenarios."""
    print("PyForceLayout Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Small Graph (20 nodes, 30 edges)", lambda: profile_graph(20, 30)),
        ("Medium Graph (100 nodes, 200 edges)", lambda: profile_graph(100, 200)),
        ("Large Graph (300 nodes, 600 edges)", lambda: profile_graph(300, 600)),
    ]

    for name, func in scenarios:
        benchmark_scenario(name, func)


if __name__ == "__main__":
    main()
