"""
Core graph data structure for directed, weighted graphs.

This module provides the fundamental graph structure without the traversal,
path finding or spanning tree algorithms.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..classes.vertex import pyvertex

logger = logging.getLogger(__name__)

# Edge count reported for a vertex that is not in the graph
NOT_FOUND = -1


class WeightedGraph:
    """
    Core graph data structure.

    This class manages the fundamental graph representation. It provides:
    - Vertex management (labels are unique, vertices are never removed singly)
    - Edge management (directed, weighted, no self-loops, no parallel edges)
    - Basic graph queries (counts, edge rendering, weight sum)

    Vertices are always iterated in ascending label order, which keeps every
    algorithm built on top of the graph deterministic.
    """

    def __init__(self, aEdge: Optional[Iterable[Tuple[str, str, int]]] = None):
        """
        Initialize the graph, optionally from a list of edges.

        Args:
            aEdge: Optional iterable of (source, target, weight) records
        """
        self.adjacency: Dict[str, pyvertex] = {}
        self.nEdge_total = 0

        if aEdge is not None:
            self._build_graph(aEdge)

    def _build_graph(self, aEdge: Iterable[Tuple[str, str, int]]):
        """
        Connect every edge record, dropping self-loops and duplicates.

        Args:
            aEdge: Iterable of (source, target, weight) records
        """
        nRecord = 0
        for sLabel_source, sLabel_target, iWeight in aEdge:
            nRecord += 1
            self.connect(sLabel_source, sLabel_target, iWeight)

        logger.debug(f"Built graph with {len(self.adjacency)} vertices and {self.nEdge_total} edges "
                     f"from {nRecord} records")

    # ========================================================================
    # VERTEX OPERATIONS
    # ========================================================================

    def add_vertex(self, sLabel: str) -> bool:
        """
        Add a vertex if it is not already in the graph.

        Args:
            sLabel: Label of the vertex

        Returns:
            True if the vertex was added, False if it already existed
        """
        if sLabel in self.adjacency:
            return False
        self.adjacency[sLabel] = pyvertex(sLabel)
        return True

    def has_vertex(self, sLabel: str) -> bool:
        return sLabel in self.adjacency

    def get_vertex(self, sLabel: str) -> Optional[pyvertex]:
        """Get the head node of a vertex, or None if not found."""
        return self.adjacency.get(sLabel)

    def get_vertices(self) -> List[str]:
        """Get all vertex labels in ascending order."""
        return sorted(self.adjacency)

    def iter_vertices(self) -> Iterator[pyvertex]:
        """Iterate over head nodes in ascending label order."""
        for sLabel in sorted(self.adjacency):
            yield self.adjacency[sLabel]

    def get_vertex_count(self) -> int:
        return len(self.adjacency)

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def get_edge_count(self, sLabel: Optional[str] = None) -> int:
        """
        Get the number of edges in the graph or leaving one vertex.

        Args:
            sLabel: Optional vertex label. If not provided, the graph total is returned.

        Returns:
            Edge count, or NOT_FOUND (-1) if the vertex is not in the graph
        """
        if sLabel is None:
            return self.nEdge_total

        pVertex = self.adjacency.get(sLabel)
        if pVertex is None:
            return NOT_FOUND
        return pVertex.nEdge

    def connect(self, sLabel_source: str, sLabel_target: str, iWeight: int = 0) -> bool:
        """
        Add a directed edge, creating missing endpoints.

        Args:
            sLabel_source: Label of the start vertex
            sLabel_target: Label of the end vertex
            iWeight: Edge cost, defaults to 0

        Returns:
            True if the edge was added, False for a self-loop or an existing edge
        """
        if sLabel_source == sLabel_target:
            logger.debug(f"Rejected self-loop on {sLabel_source}")
            return False

        self.add_vertex(sLabel_source)
        self.add_vertex(sLabel_target)

        if not self.adjacency[sLabel_source].connect(sLabel_target, iWeight):
            logger.debug(f"Rejected duplicate edge {sLabel_source} -> {sLabel_target}")
            return False

        self.nEdge_total += 1
        return True

    def disconnect(self, sLabel_source: str, sLabel_target: str) -> bool:
        """
        Remove a directed edge.

        Args:
            sLabel_source: Label of the start vertex
            sLabel_target: Label of the end vertex

        Returns:
            True if the edge was removed, False if there was no such edge
        """
        if sLabel_source == sLabel_target:
            return False

        if sLabel_source not in self.adjacency or sLabel_target not in self.adjacency:
            logger.debug(f"Cannot disconnect {sLabel_source} -> {sLabel_target}: vertex not found")
            return False

        if not self.adjacency[sLabel_source].disconnect(sLabel_target):
            return False

        self.nEdge_total -= 1
        return True

    def edges_as_text(self, sLabel: str) -> str:
        """
        Render the outgoing edges of a vertex.

        An absent vertex and a vertex without edges both render as "".

        Args:
            sLabel: Label of the vertex

        Returns:
            Edges as "target(weight)" pairs joined by commas, sorted by target label
        """
        pVertex = self.adjacency.get(sLabel)
        if pVertex is None:
            return ''
        return pVertex.edges_as_text()

    def sum_of_edge_weights(self) -> int:
        """Get the sum of the weights of every edge in the graph."""
        iSum = 0
        for pVertex in self.adjacency.values():
            for pEdge in pVertex.aEdge:
                iSum += pEdge.iWeight
        return iSum

    # ========================================================================
    # WHOLE GRAPH OPERATIONS
    # ========================================================================

    def clear(self):
        """Remove every vertex and edge."""
        for pVertex in self.adjacency.values():
            pVertex.clear()
        self.adjacency.clear()
        self.nEdge_total = 0

    def update_graph_edges(self, aEdge: Iterable[Tuple[str, str, int]]):
        """
        Replace the whole graph content with a new set of edges.

        Args:
            aEdge: Iterable of (source, target, weight) records
        """
        self.clear()
        self._build_graph(aEdge)

    def copy(self) -> 'WeightedGraph':
        """Create an independent copy of the graph."""
        pGraph = WeightedGraph()
        for sLabel, pVertex in self.adjacency.items():
            pGraph.adjacency[sLabel] = pVertex.copy()
        pGraph.nEdge_total = self.nEdge_total
        return pGraph

    def dump(self) -> str:
        """
        Render the whole graph, one "label: edges" line per vertex.

        Returns:
            Text with vertices in ascending label order, each line newline terminated
        """
        return ''.join(f"{pVertex.sLabel}: {pVertex.edges_as_text()}\n" for pVertex in self.iter_vertices())

    def __len__(self):
        return len(self.adjacency)

    def __contains__(self, sLabel):
        return sLabel in self.adjacency

    def __eq__(self, other):
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return self.dump() == other.dump()

    def __str__(self):
        return self.dump()
