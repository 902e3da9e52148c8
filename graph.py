"""
Directed, weighted graph abstraction.

Vertices are caller-chosen integer ids.
Edges are directed: u -> v with a non-negative float weight.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping


class Graph(ABC):
    """Read-only view of a directed, weighted graph over integer vertex ids."""

    @abstractmethod
    def vertices(self) -> Iterable[int]:
        """Return all vertex ids present in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: int) -> Mapping[int, float]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[int, float], empty if the vertex is absent.
        """
        raise NotImplementedError
