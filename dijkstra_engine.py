"""
Heap-based ShortestPathEngine implementation.

Uses a binary-heap priority queue to compute single-source shortest paths over
any Graph implementation that satisfies the Graph interface.
"""

from typing import Set, Tuple

from algorithms import PathRecord, ResultTable, ShortestPathEngine
from graph import Graph
from priority_queue import MinPriorityQueue


class LazyDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra with lazy deletion.

    Edge weights must be non-negative. This is not checked; negative weights
    give wrong distances rather than an error.

    Complexity:
        O(E log E) over the edges reachable from the source.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_discards = 0

    def shortest_paths(self, graph: Graph, source: int) -> ResultTable:
        """
        Dijkstra that records predecessors for path reconstruction.

        Every vertex of the graph gets an entry. The source is recorded as its
        own parent at distance 0; vertices the search never reaches keep
        parent None and distance inf. Walking parents back from any reached
        vertex ends at the source.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_discards = 0

        table: ResultTable = {v: PathRecord() for v in graph.vertices()}
        table[source] = PathRecord(parent=source, metric=0.0)

        # (distance from source, vertex)
        pq: MinPriorityQueue[Tuple[float, int]] = MinPriorityQueue()
        pq.push((0.0, source))
        self.last_heap_pushes += 1
        visited: Set[int] = set()

        while pq:
            _, u = pq.pop()
            self.last_heap_pops += 1

            # Skip outdated entries
            if u in visited:
                self.last_stale_discards += 1
                continue
            visited.add(u)

            d_u = table[u].metric
            for v, w in graph.outgoing(u).items():
                self.last_edges_examined += 1
                if v in visited:
                    continue
                alt = d_u + w
                if alt < table.get(v, PathRecord()).metric:
                    table[v] = PathRecord(parent=u, metric=alt)
                    pq.push((alt, v))
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        return table
