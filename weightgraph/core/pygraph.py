"""
Main facade class for weighted graph analysis.

This module provides the pygraph class, the public entry point that delegates
to the core graph and the specialized algorithm modules.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .graph import WeightedGraph
from ..analysis.traversal import GraphTraverser
from ..analysis.pathfinding import PathFinder
from ..operations.spanning_tree import SpanningTreeBuilder
from ..formats.read_edge_list import read_edge_list

logger = logging.getLogger(__name__)


class pygraph:
    """
    Directed, weighted graph with labelled vertices.

    - Vertex labels are unique strings
    - Edges are directed and carry an integer weight
    - A vertex cannot connect to itself or have two edges to the same vertex

    Failures are reported through return values: False for rejected
    operations, -1 for the edge count of an unknown vertex, "" for the edges
    of an unknown vertex.

    Example:
        >>> graph = pygraph([('A', 'B', 1), ('A', 'C', 8), ('B', 'C', 3)])
        >>> graph.get_edges('A')
        'B(1),C(8)'
        >>> graph.dijkstra('A')
        ({'B': 1, 'C': 4}, {'B': 'A', 'C': 'B'})
    """

    def __init__(self, aEdge: Optional[Iterable[Tuple[str, str, int]]] = None):
        """
        Initialize the graph, optionally from a list of edges.

        Args:
            aEdge: Optional iterable of (source, target, weight) records
        """
        self._attach(WeightedGraph(aEdge))

    def _attach(self, graph: WeightedGraph):
        """Bind the core graph and the algorithm components that read it."""
        self._graph = graph
        self._traverser = GraphTraverser(self._graph)
        self._pathfinder = PathFinder(self._graph)
        self._spanning_tree = SpanningTreeBuilder(self._graph)

    @classmethod
    def _from_graph(cls, graph: WeightedGraph) -> 'pygraph':
        pGraph = cls.__new__(cls)
        pGraph._attach(graph)
        return pGraph

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_vertex(self, sLabel: str) -> bool:
        """Add a vertex; True if added, False if it already exists."""
        return self._graph.add_vertex(sLabel)

    def has_vertex(self, sLabel: str) -> bool:
        """Check if a vertex is in the graph."""
        return self._graph.has_vertex(sLabel)

    def get_vertices(self) -> List[str]:
        """Get all vertex labels in ascending order."""
        return self._graph.get_vertices()

    def get_vertex_count(self) -> int:
        """Get the number of vertices."""
        return self._graph.get_vertex_count()

    def get_edge_count(self, sLabel: Optional[str] = None) -> int:
        """Get the total edge count, or the out-degree of a vertex (-1 if not found)."""
        return self._graph.get_edge_count(sLabel)

    def get_edges(self, sLabel: str) -> str:
        """Get the edges of a vertex as "target(weight)" pairs, "" if none or not found."""
        return self._graph.edges_as_text(sLabel)

    def connect(self, sLabel_source: str, sLabel_target: str, iWeight: int = 0) -> bool:
        """Add a directed edge, creating missing vertices."""
        return self._graph.connect(sLabel_source, sLabel_target, iWeight)

    def disconnect(self, sLabel_source: str, sLabel_target: str) -> bool:
        """Remove a directed edge."""
        return self._graph.disconnect(sLabel_source, sLabel_target)

    def sum_of_edge_weights(self) -> int:
        """Get the sum of all edge weights."""
        return self._graph.sum_of_edge_weights()

    def clear(self):
        """Remove every vertex and edge."""
        self._graph.clear()

    # ========================================================================
    # FILE INPUT
    # ========================================================================

    def read_file(self, sFilename_in: str) -> bool:
        """
        Replace the graph content with the edges listed in a file.

        Records are applied with connect, so self-loops and duplicate edges
        in the file are dropped silently.

        Args:
            sFilename_in: Path of the edge list file

        Returns:
            True if the file was read, False if it could not be read (the graph is then unchanged)
        """
        aEdge = read_edge_list(sFilename_in)
        if aEdge is None:
            return False

        self._graph.update_graph_edges(aEdge)
        logger.info(f"Loaded {self._graph.get_vertex_count()} vertices and "
                    f"{self._graph.get_edge_count()} edges from {sFilename_in}")
        return True

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def dfs(self, sLabel_origin: str, visitor: Optional[Callable[[str], None]] = None) -> List[str]:
        """Depth-first traversal; returns labels in visit order."""
        return self._traverser.dfs(sLabel_origin, visitor)

    def bfs(self, sLabel_origin: str, visitor: Optional[Callable[[str], None]] = None) -> List[str]:
        """Breadth-first traversal; returns labels in visit order."""
        return self._traverser.bfs(sLabel_origin, visitor)

    # ========================================================================
    # PATH FINDING & SPANNING TREE
    # ========================================================================

    def dijkstra(self, sLabel_origin: str) -> Tuple[Dict[str, int], Dict[str, str]]:
        """Get shortest distances and predecessors from the origin."""
        return self._pathfinder.dijkstra(sLabel_origin)

    def get_path(self, sLabel_origin: str, sLabel_target: str) -> List[str]:
        """Get the shortest path from origin to target, empty if unreachable."""
        _, aPrevious = self._pathfinder.dijkstra(sLabel_origin)
        return self._pathfinder.get_path(aPrevious, sLabel_origin, sLabel_target)

    def build_minimum_spanning_tree(self, sLabel_origin: str) -> 'pygraph':
        """Build the minimum spanning tree reachable from the origin as a new graph."""
        return pygraph._from_graph(self._spanning_tree.build_minimum_spanning_tree(sLabel_origin))

    # ========================================================================
    # COPY, COMPARISON & RENDERING
    # ========================================================================

    def copy(self) -> 'pygraph':
        """Create an independent copy of the graph."""
        return pygraph._from_graph(self._graph.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __len__(self):
        return len(self._graph)

    def __contains__(self, sLabel):
        return sLabel in self._graph

    def __eq__(self, other):
        if not isinstance(other, pygraph):
            return NotImplemented
        return self._graph == other._graph

    def __str__(self):
        return self._graph.dump()

    def __repr__(self):
        return f"pygraph(vertices={self.get_vertex_count()}, edges={self.get_edge_count()})"
