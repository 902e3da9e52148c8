"""
Utilities to build graphs from edge lists or at random.
"""

from typing import Iterable, Optional, Sequence, Tuple, Union
import random

from adjacency_list_graph import AdjacencyListGraph


EdgeSpec = Union[Tuple[int, int], Tuple[int, int, float]]

# Edges of the seven-vertex graph used throughout the tests and the demo config.
EXAMPLE_EDGES: Sequence[Tuple[int, int, float]] = (
    (1, 2, 5.0),
    (1, 3, 3.0),
    (2, 3, 2.0),
    (2, 5, 3.0),
    (2, 7, 1.0),
    (3, 4, 7.0),
    (3, 5, 7.0),
    (4, 1, 2.0),
    (4, 6, 6.0),
    (5, 4, 2.0),
    (5, 6, 1.0),
    (7, 5, 1.0),
)


def build_graph(vertices: Iterable[int], edges: Iterable[EdgeSpec]) -> AdjacencyListGraph:
    """
    Build a graph from vertex ids and (src, dest[, weight]) tuples.

    Endpoints named only in edges are added as vertices. A repeated edge keeps
    its first weight.
    """
    graph = AdjacencyListGraph()
    for v in vertices:
        graph.add_vertex(v)

    for edge in edges:
        if len(edge) == 2:
            src, dest = edge
            weight = 1.0
        else:
            src, dest, weight = edge
        graph.add_vertex(src)
        graph.add_vertex(dest)
        graph.add_edge(src, dest, float(weight))
    return graph


def example_graph() -> AdjacencyListGraph:
    return build_graph(range(1, 8), EXAMPLE_EDGES)


def build_random_graph(
    vertex_count: int,
    out_degree: int,
    seed: Optional[int] = None,
    max_weight: float = 10.0,
) -> AdjacencyListGraph:
    """
    Generate a reproducible random digraph.

    Args:
        vertex_count: number of vertices, numbered 1..vertex_count.
        out_degree: out-edges per vertex (capped at vertex_count - 1, no self-loops).
        seed: RNG seed for reproducibility.
        max_weight: weights are drawn uniformly from [0, max_weight].
    """
    rng = random.Random(seed)
    ids = list(range(1, vertex_count + 1))
    graph = build_graph(ids, ())

    degree = max(0, min(out_degree, vertex_count - 1))
    for v in ids:
        others = [u for u in ids if u != v]
        for u in rng.sample(others, degree):
            graph.add_edge(v, u, rng.uniform(0.0, max_weight))
    return graph
