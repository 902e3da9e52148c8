"""
Heap-based Prim implementation.

Grows a minimum spanning tree from a source over any Graph implementation,
using a priority queue with lazy deletion instead of decrease-key.
"""

from typing import Set, Tuple
import math

from algorithms import PathRecord, ResultTable, SpanningTreeEngine
from graph import Graph
from priority_queue import MinPriorityQueue


class LazyPrimEngine(SpanningTreeEngine):
    """
    Prim's algorithm restricted to the component reachable from the source.

    Vertices outside that component stay unreached (parent None, metric inf);
    on a graph that is not connected this is a spanning tree of the source's
    component only.

    Complexity:
        O(E log E) over the edges reachable from the source.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_discards = 0

    def spanning_tree(self, graph: Graph, source: int) -> ResultTable:
        self.last_edges_examined = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_discards = 0

        table: ResultTable = {v: PathRecord() for v in graph.vertices()}
        table[source] = PathRecord(parent=source, metric=0.0)

        # (candidate edge weight, vertex)
        pq: MinPriorityQueue[Tuple[float, int]] = MinPriorityQueue()
        pq.push((0.0, source))
        self.last_heap_pushes += 1
        visited: Set[int] = set()

        while pq:
            _, u = pq.pop()
            self.last_heap_pops += 1

            # A vertex may sit in the queue several times; only the first
            # (cheapest) pop counts.
            if u in visited:
                self.last_stale_discards += 1
                continue
            visited.add(u)

            for v, w in graph.outgoing(u).items():
                self.last_edges_examined += 1
                if v in visited:
                    continue
                if w < table.get(v, PathRecord()).metric:
                    table[v] = PathRecord(parent=u, metric=w)
                    pq.push((w, v))
                    self.last_heap_pushes += 1

        return table

    @staticmethod
    def tree_weight(table: ResultTable) -> float:
        """Total weight of the tree recorded in a Prim result table."""
        return math.fsum(rec.metric for rec in table.values() if rec.reached)
