"""
Algorithm interfaces for single-source traversals.

Keeps graph algorithms separate from graph storage and rendering.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional
import math

from graph import Graph


@dataclass(frozen=True)
class PathRecord:
    """
    One row of an algorithm result table.

    parent is None for vertices the run never reached; the source is its own
    parent. metric is the connecting edge weight for Prim and the cumulative
    distance from the source for Dijkstra.
    """
    parent: Optional[int] = None
    metric: float = math.inf

    @property
    def reached(self) -> bool:
        return self.parent is not None


# vertex id -> PathRecord, one entry per vertex present at run time
ResultTable = Dict[int, PathRecord]


class SpanningTreeEngine(ABC):
    """
    Interface for minimum-spanning-tree construction from a source.
    """

    @abstractmethod
    def spanning_tree(self, graph: Graph, source: int) -> ResultTable:
        """
        Grow a minimum spanning tree over the component reachable from source.

        Returns:
            Mapping vertex -> PathRecord(parent, connecting edge weight) with an
            entry for every vertex of the graph.
        """
        raise NotImplementedError


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> ResultTable:
        """
        Compute shortest-path distances plus the predecessor of each vertex.

        Returns:
            Mapping vertex -> PathRecord(parent, distance from source) with an
            entry for every vertex of the graph.
        """
        raise NotImplementedError
