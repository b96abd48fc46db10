"""
Depth-first and breadth-first traversal of weighted graphs.

Both traversals follow outgoing edges in ascending target label order, so the
visit order is fully determined by the graph content.
"""

import logging
from collections import deque
from typing import Callable, List, Optional

from ..classes.traversal import TraversalState
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)

Visitor = Callable[[str], None]


class GraphTraverser:
    """
    Traversal algorithms for weighted graphs.

    This class provides methods for:
    - Iterative depth-first traversal (pre-order)
    - Iterative breadth-first traversal (level order)
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the traverser.

        Args:
            graph: WeightedGraph instance to traverse
        """
        self.graph = graph

    def dfs(self, sLabel_origin: str, visitor: Optional[Visitor] = None) -> List[str]:
        """
        Depth-first traversal from the origin vertex.

        The origin is visited first. From the vertex on top of the stack the
        lowest labelled unvisited target is visited and pushed; when none is
        left the vertex is popped.

        Args:
            sLabel_origin: Label of the origin vertex
            visitor: Optional callable invoked with each label as it is visited

        Returns:
            Labels in visit order, empty if the origin is not in the graph
        """
        aLabel_order: List[str] = []
        if not self.graph.has_vertex(sLabel_origin):
            logger.debug(f"DFS origin {sLabel_origin} not found")
            return aLabel_order

        state = TraversalState()
        aStack = [sLabel_origin]
        while aStack:
            sLabel_next = self._next_unvisited(aStack[-1], state)
            if sLabel_next is None:
                aStack.pop()
                continue

            state.set_visited(sLabel_next)
            aLabel_order.append(sLabel_next)
            if visitor is not None:
                visitor(sLabel_next)
            if sLabel_next != aStack[-1]:
                aStack.append(sLabel_next)

        logger.debug(f"DFS from {sLabel_origin} visited {len(aLabel_order)} vertices")
        return aLabel_order

    def _next_unvisited(self, sLabel: str, state: TraversalState) -> Optional[str]:
        """
        Get the next vertex to visit from the vertex on top of the stack.

        Returns:
            The vertex itself if it is not yet visited, else its first unvisited
            target, or None if every target is visited
        """
        if not state.is_visited(sLabel):
            return sLabel

        for pEdge in self.graph.adjacency[sLabel].aEdge:
            if not state.is_visited(pEdge.sLabel_target):
                return pEdge.sLabel_target
        return None

    def bfs(self, sLabel_origin: str, visitor: Optional[Visitor] = None) -> List[str]:
        """
        Breadth-first traversal from the origin vertex.

        Args:
            sLabel_origin: Label of the origin vertex
            visitor: Optional callable invoked with each label as it is dequeued

        Returns:
            Labels in visit order, empty if the origin is not in the graph
        """
        aLabel_order: List[str] = []
        if not self.graph.has_vertex(sLabel_origin):
            logger.debug(f"BFS origin {sLabel_origin} not found")
            return aLabel_order

        state = TraversalState()
        queue = deque([sLabel_origin])
        state.set_visited(sLabel_origin)

        while queue:
            sLabel = queue.popleft()
            aLabel_order.append(sLabel)
            if visitor is not None:
                visitor(sLabel)

            # Mark on enqueue so each vertex enters the queue once
            for pEdge in self.graph.adjacency[sLabel].aEdge:
                if not state.is_visited(pEdge.sLabel_target):
                    state.set_visited(pEdge.sLabel_target)
                    queue.append(pEdge.sLabel_target)

        logger.debug(f"BFS from {sLabel_origin} visited {len(aLabel_order)} vertices")
        return aLabel_order
