"""
Minimum spanning tree extraction for weighted graphs.

This module grows a spanning tree from an origin vertex with Prim's greedy
frontier expansion, following edge direction.
"""

import logging
from typing import Optional, Tuple

from ..classes.edge import pyedge
from ..classes.traversal import TraversalState
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class SpanningTreeBuilder:
    """
    Builds minimum spanning trees.

    The source graph is only read; the tree is returned as a new graph that
    the caller owns.
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the spanning tree builder.

        Args:
            graph: WeightedGraph instance to build trees from
        """
        self.graph = graph

    def build_minimum_spanning_tree(self, sLabel_origin: str) -> WeightedGraph:
        """
        Build the minimum spanning tree reachable from the origin.

        Each step adds the cheapest edge leading from a tree vertex to a vertex
        outside the tree. Vertices not reachable from the origin are left out.

        Args:
            sLabel_origin: Label of the origin vertex

        Returns:
            A new graph holding the tree edges; empty if the origin is not found,
            the origin alone if it has no outgoing edges
        """
        pTree = WeightedGraph()
        if not self.graph.has_vertex(sLabel_origin):
            logger.warning(f"Spanning tree origin {sLabel_origin} not found in graph")
            return pTree

        pTree.add_vertex(sLabel_origin)

        state = TraversalState()
        state.set_visited(sLabel_origin)
        while True:
            sLabel_source, pEdge = self._find_min_frontier_edge(state)
            if pEdge is None:
                break
            state.set_visited(pEdge.sLabel_target)
            pTree.connect(sLabel_source, pEdge.sLabel_target, pEdge.iWeight)

        logger.debug(f"Spanning tree from {sLabel_origin} has {pTree.get_vertex_count()} vertices "
                     f"and total weight {pTree.sum_of_edge_weights()}")
        return pTree

    def _find_min_frontier_edge(self, state: TraversalState) -> Tuple[Optional[str], Optional[pyedge]]:
        """
        Find the cheapest edge from a visited vertex to an unvisited one.

        Vertices are scanned in ascending label order and edges in chain order;
        the first edge with the smallest weight wins.

        Returns:
            Tuple of (source label, edge), or (None, None) when the frontier is exhausted
        """
        sLabel_best = None
        pEdge_best = None

        for pVertex in self.graph.iter_vertices():
            if not state.is_visited(pVertex.sLabel):
                continue
            for pEdge in pVertex.aEdge:
                if state.is_visited(pEdge.sLabel_target):
                    continue
                if pEdge_best is None or pEdge.iWeight < pEdge_best.iWeight:
                    sLabel_best = pVertex.sLabel
                    pEdge_best = pEdge

        return sLabel_best, pEdge_best
