"""
CLI to build a graph from a YAML description and print its MST and shortest paths.

Reads experiments/example_graph.yml by default. For each configured source it
runs Prim and prints the spanning-tree path to every vertex, then runs
Dijkstra and prints the shortest path to every vertex.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple
import argparse
import logging
import math
import sys

import yaml

from adjacency_list_graph import AdjacencyListGraph
from topology_builder import build_graph

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "experiments" / "example_graph.yml"


@dataclass(frozen=True)
class GraphConfig:
    vertices: Sequence[int]
    edges: Sequence[Tuple[int, int, float]]
    sources: Sequence[int]


def _is_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_weight(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value >= 0
    )


def load_config(path: Path) -> GraphConfig:
    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    vertices = data.get("vertices", [])
    if not isinstance(vertices, list) or not all(_is_id(v) for v in vertices):
        raise ValueError(f"{path}: 'vertices' must be a list of non-negative integers")

    raw_edges = data.get("edges", []) or []
    if not isinstance(raw_edges, list):
        raise ValueError(f"{path}: 'edges' must be a list")

    edges: List[Tuple[int, int, float]] = []
    for raw in raw_edges:
        if not isinstance(raw, list) or len(raw) not in (2, 3):
            raise ValueError(f"{path}: each entry of 'edges' must be [src, dest] or [src, dest, weight]")
        if not (_is_id(raw[0]) and _is_id(raw[1])):
            raise ValueError(f"{path}: 'edges' endpoints must be non-negative integers, got {raw}")
        weight = raw[2] if len(raw) == 3 else 1.0
        if not _is_weight(weight):
            raise ValueError(f"{path}: 'edges' weights must be finite non-negative numbers, got {raw}")
        edges.append((raw[0], raw[1], float(weight)))

    sources = data.get("sources")
    if not isinstance(sources, list) or not sources or not all(_is_id(s) for s in sources):
        raise ValueError(f"{path}: 'sources' must be a non-empty list of non-negative integers")

    return GraphConfig(vertices=list(vertices), edges=edges, sources=list(sources))


def run(config: GraphConfig, out: Optional[TextIO] = None) -> AdjacencyListGraph:
    """
    Build the configured graph and print spanning-tree and shortest paths.

    Returns the graph with the results of the last source still cached.
    """
    out = out if out is not None else sys.stdout
    graph = build_graph(config.vertices, config.edges)
    targets = sorted(graph.vertices())

    out.write(f"G has {graph.vertex_count()} vertices\n")
    out.write(f"G has {graph.edge_count()} edges\n")
    out.write("\n")

    for source in config.sources:
        if not graph.contains_vertex(source):
            logger.warning("source %s is not a vertex of the graph, skipping", source)
            continue

        out.write(f"compute mst path from {source}\n")
        graph.prim(source)
        out.write("print minimum spanning paths\n")
        for n in targets:
            out.write(f"minimum spanning path from {source} to {n}\n")
            out.write("  ")
            graph.print_path(n, out)
        out.write("\n")

        out.write(f"compute shortest path from {source}\n")
        graph.dijkstra(source)
        out.write("print shortest paths\n")
        for n in targets:
            out.write(f"shortest path from {source} to {n}\n")
            out.write("  ")
            graph.print_shortest_path(n, out)
        out.write("\n")

        logger.info(
            "source=%s tree_weight=%g reachable=%d",
            source,
            graph.tree_weight(),
            sum(1 for n in targets if graph.is_path(n)),
        )

    return graph


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG, help="YAML graph description")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    run(load_config(args.config))


if __name__ == "__main__":
    main()
