"""
Shortest path analysis for weighted graphs.

This module provides single source shortest paths (Dijkstra) and path
reconstruction from the resulting predecessor map.
"""

import logging
from typing import Dict, List, Tuple

import numpy as np

from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for weighted graphs.

    This class provides methods for:
    - Shortest distances and predecessors from one origin (Dijkstra)
    - Rebuilding a path from a predecessor map
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the path finder.

        Args:
            graph: WeightedGraph instance to analyze
        """
        self.graph = graph

    def dijkstra(self, sLabel_origin: str) -> Tuple[Dict[str, int], Dict[str, str]]:
        """
        Find the shortest distance and predecessor of every vertex reachable from the origin.

        Selection is a linear scan over the unsettled vertices, so ties go to the
        lowest label. Negative weights are accepted but the result is then not
        guaranteed to be shortest.

        Args:
            sLabel_origin: Label of the origin vertex

        Returns:
            Tuple of (distances, predecessors). Neither includes the origin or
            any unreachable vertex. Both are empty if the origin is not found.
        """
        aDistance_out: Dict[str, int] = {}
        aPrevious_out: Dict[str, str] = {}

        if not self.graph.has_vertex(sLabel_origin):
            logger.warning(f"Dijkstra origin {sLabel_origin} not found in graph")
            return aDistance_out, aPrevious_out

        aLabel = self.graph.get_vertices()
        label_to_index = {sLabel: i for i, sLabel in enumerate(aLabel)}
        nVertex = len(aLabel)

        # Object dtype keeps distances as unbounded Python ints
        aDistance = np.zeros(nVertex, dtype=object)
        aReached = np.zeros(nVertex, dtype=bool)
        aSettled = np.zeros(nVertex, dtype=bool)
        aPrevious: Dict[str, str] = {}

        lIndex_origin = label_to_index[sLabel_origin]
        aReached[lIndex_origin] = True
        aSettled[lIndex_origin] = True
        for pEdge in self.graph.adjacency[sLabel_origin].aEdge:
            lIndex_target = label_to_index[pEdge.sLabel_target]
            aDistance[lIndex_target] = pEdge.iWeight
            aReached[lIndex_target] = True
            aPrevious[pEdge.sLabel_target] = sLabel_origin

        while True:
            aCandidate = np.flatnonzero(aReached & ~aSettled)
            if aCandidate.size == 0:
                break

            lIndex = int(aCandidate[np.argmin(aDistance[aCandidate])])
            aSettled[lIndex] = True
            sLabel_settled = aLabel[lIndex]
            iDistance_settled = aDistance[lIndex]

            for pEdge in self.graph.adjacency[sLabel_settled].aEdge:
                lIndex_target = label_to_index[pEdge.sLabel_target]
                if aSettled[lIndex_target]:
                    continue
                iDistance_new = iDistance_settled + pEdge.iWeight
                if not aReached[lIndex_target] or iDistance_new < aDistance[lIndex_target]:
                    aDistance[lIndex_target] = iDistance_new
                    aReached[lIndex_target] = True
                    aPrevious[pEdge.sLabel_target] = sLabel_settled

        for i, sLabel in enumerate(aLabel):
            if i == lIndex_origin or not aReached[i]:
                continue
            aDistance_out[sLabel] = int(aDistance[i])
            aPrevious_out[sLabel] = aPrevious[sLabel]

        logger.debug(f"Dijkstra from {sLabel_origin} reached {len(aDistance_out)} of {nVertex - 1} vertices")
        return aDistance_out, aPrevious_out

    def get_path(self, aPrevious: Dict[str, str], sLabel_origin: str, sLabel_target: str) -> List[str]:
        """
        Rebuild the path from the origin to a target using a predecessor map.

        Args:
            aPrevious: Predecessor map returned by dijkstra for the same origin
            sLabel_origin: Label of the origin vertex
            sLabel_target: Label of the target vertex

        Returns:
            Labels from origin to target inclusive, [origin] when target is the
            origin, or an empty list if the target was not reached
        """
        if sLabel_target == sLabel_origin:
            return [sLabel_origin] if self.graph.has_vertex(sLabel_origin) else []

        if sLabel_target not in aPrevious:
            return []

        aPath = [sLabel_target]
        sLabel = sLabel_target
        while sLabel != sLabel_origin:
            sLabel = aPrevious.get(sLabel)
            if sLabel is None or len(aPath) > len(aPrevious):
                logger.warning(f"Predecessor map does not lead from {sLabel_target} back to {sLabel_origin}")
                return []
            aPath.append(sLabel)

        aPath.reverse()
        return aPath
