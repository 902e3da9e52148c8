"""
Concrete directed, weighted graph with cached Prim and Dijkstra results.

Implements the Graph interface using a vertex -> (neighbour -> weight) mapping
and keeps the result table of the last run of each algorithm.
"""

from typing import Dict, Iterable, List, Mapping, Optional, TextIO
import copy
import logging
import math
import sys

from algorithms import ResultTable, ShortestPathEngine, SpanningTreeEngine
from dijkstra_engine import LazyDijkstraEngine
from graph import Graph
from paths import reconstruct_path, write_path, write_shortest_path
from prim_engine import LazyPrimEngine

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a vertex -> (neighbour -> weight) mapping.

    Structural operations report failure by returning False and leave the graph
    unchanged; lookups of missing vertices or edges return neutral values
    (False, or inf for costs and distances). Nothing here raises for an
    expected failure.

    prim() and dijkstra() each keep their own result table until the next run
    of the same algorithm. Mutating the graph does NOT invalidate or recompute
    those tables: after add/remove calls they may describe vertices and edges
    that no longer exist until the algorithm is run again.

    Not thread-safe; callers sharing an instance must serialise all access.
    """

    def __init__(
        self,
        prim_engine: Optional[SpanningTreeEngine] = None,
        dijkstra_engine: Optional[ShortestPathEngine] = None,
    ) -> None:
        self._adj: Dict[int, Dict[int, float]] = {}
        self._prim_result: ResultTable = {}
        self._dijkstra_result: ResultTable = {}
        self._prim_engine = prim_engine if prim_engine is not None else LazyPrimEngine()
        self._dijkstra_engine = (
            dijkstra_engine if dijkstra_engine is not None else LazyDijkstraEngine()
        )

    # --- Copying -------------------------------------------------------------

    def copy(self) -> "AdjacencyListGraph":
        """Independent copy: adjacency and both result tables are duplicated."""
        return copy.deepcopy(self)

    def __copy__(self) -> "AdjacencyListGraph":
        # A shallow copy would share adjacency dicts with the original.
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "AdjacencyListGraph":
        other = AdjacencyListGraph(
            prim_engine=copy.deepcopy(self._prim_engine, memo),
            dijkstra_engine=copy.deepcopy(self._dijkstra_engine, memo),
        )
        memo[id(self)] = other
        other._adj = copy.deepcopy(self._adj, memo)
        other._prim_result = copy.deepcopy(self._prim_result, memo)
        other._dijkstra_result = copy.deepcopy(self._dijkstra_result, memo)
        return other

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> Iterable[int]:
        return self._adj.keys()

    def outgoing(self, vertex: int) -> Mapping[int, float]:
        return dict(self._adj.get(vertex, {}))  # defensive copy

    # --- Queries -------------------------------------------------------------

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values())

    def contains_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._adj

    def contains_edge(self, src: int, dest: int) -> bool:
        # Both endpoints must exist as vertices, not just as a key in src's map.
        if src not in self._adj or dest not in self._adj:
            return False
        return dest in self._adj[src]

    def cost(self, src: int, dest: int) -> float:
        """Weight of edge src -> dest, or inf if there is no such edge."""
        if not self.contains_edge(src, dest):
            return math.inf
        return self._adj[src][dest]

    # --- Mutation ------------------------------------------------------------

    def add_vertex(self, vertex_id: int) -> bool:
        if vertex_id in self._adj:
            logger.debug("add_vertex rejected: %s already present", vertex_id)
            return False
        self._adj[vertex_id] = {}
        return True

    def add_edge(self, src: int, dest: int, weight: float = 1) -> bool:
        """
        Add directed edge src -> dest.

        Fails if either endpoint is absent or the edge already exists; the
        existing weight is never overwritten. src == dest is allowed.
        """
        if src not in self._adj or dest not in self._adj:
            logger.debug("add_edge rejected: %s -> %s has a missing endpoint", src, dest)
            return False
        if dest in self._adj[src]:
            logger.debug("add_edge rejected: %s -> %s already present", src, dest)
            return False
        self._adj[src][dest] = weight
        return True

    def remove_vertex(self, vertex_id: int) -> bool:
        """
        Remove a vertex with its outgoing edges and every edge pointing at it.

        Cached algorithm results are left as they are.
        """
        if vertex_id not in self._adj:
            logger.debug("remove_vertex rejected: %s not present", vertex_id)
            return False
        del self._adj[vertex_id]
        for nbrs in self._adj.values():
            nbrs.pop(vertex_id, None)
        return True

    def remove_edge(self, src: int, dest: int) -> bool:
        if not self.contains_edge(src, dest):
            logger.debug("remove_edge rejected: %s -> %s not present", src, dest)
            return False
        del self._adj[src][dest]
        return True

    # --- Prim ----------------------------------------------------------------

    def prim(self, source_id: int) -> None:
        """
        Rebuild the minimum spanning tree from source_id.

        Does nothing (and keeps the previous result) if source_id is absent.
        Only the component reachable from source_id is spanned.
        """
        if source_id not in self._adj:
            logger.debug("prim ignored: source %s not present", source_id)
            return
        self._prim_result = self._prim_engine.spanning_tree(self, source_id)
        logger.debug(
            "prim from %s reached %d of %d vertices",
            source_id,
            sum(1 for rec in self._prim_result.values() if rec.reached),
            len(self._prim_result),
        )

    def is_path(self, vertex_id: int) -> bool:
        record = self._prim_result.get(vertex_id)
        return record is not None and record.reached

    def path(self, dest_id: int) -> Optional[List[int]]:
        """Spanning-tree path from the last Prim source to dest_id, if any."""
        return reconstruct_path(self._prim_result, dest_id)

    def print_path(self, dest_id: int, out: Optional[TextIO] = None) -> None:
        write_path(self._prim_result, dest_id, out if out is not None else sys.stdout)

    def tree_weight(self) -> float:
        """Total edge weight of the last spanning tree (0.0 before any run)."""
        return LazyPrimEngine.tree_weight(self._prim_result)

    def prim_result(self) -> ResultTable:
        """Copy of the last Prim table, possibly stale."""
        return dict(self._prim_result)

    # --- Dijkstra ------------------------------------------------------------

    def dijkstra(self, source_id: int) -> None:
        """
        Rebuild shortest paths from source_id.

        Does nothing (and keeps the previous result) if source_id is absent.
        Assumes non-negative weights.
        """
        if source_id not in self._adj:
            logger.debug("dijkstra ignored: source %s not present", source_id)
            return
        self._dijkstra_result = self._dijkstra_engine.shortest_paths(self, source_id)
        logger.debug(
            "dijkstra from %s reached %d of %d vertices",
            source_id,
            sum(1 for rec in self._dijkstra_result.values() if rec.reached),
            len(self._dijkstra_result),
        )

    def distance(self, vertex_id: int) -> float:
        """Distance from the last Dijkstra source, inf if unknown or unreached."""
        record = self._dijkstra_result.get(vertex_id)
        if record is None:
            return math.inf
        return record.metric

    def shortest_path(self, dest_id: int) -> Optional[List[int]]:
        if self.distance(dest_id) == math.inf:
            return None
        return reconstruct_path(self._dijkstra_result, dest_id)

    def print_shortest_path(self, dest_id: int, out: Optional[TextIO] = None) -> None:
        write_shortest_path(
            self._dijkstra_result, dest_id, out if out is not None else sys.stdout
        )

    def dijkstra_result(self) -> ResultTable:
        """Copy of the last Dijkstra table, possibly stale."""
        return dict(self._dijkstra_result)
