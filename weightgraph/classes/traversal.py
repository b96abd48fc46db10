"""
Transient traversal state shared by the graph algorithms.

A fresh TraversalState is created for every DFS, BFS or spanning tree call, so
no visited marks ever live on the long-lived vertex objects.
"""

from typing import Set


class TraversalState:
    """
    Visited marks for one traversal, keyed by vertex label.

    Example:
        >>> state = TraversalState()
        >>> state.set_visited('A')
        >>> state.is_visited('A')
        True
    """

    def __init__(self):
        self.aLabel_visited: Set[str] = set()

    def is_visited(self, sLabel: str) -> bool:
        return sLabel in self.aLabel_visited

    def set_visited(self, sLabel: str, bVisited: bool = True):
        """Mark or unmark a vertex as visited."""
        if bVisited:
            self.aLabel_visited.add(sLabel)
        else:
            self.aLabel_visited.discard(sLabel)

    def get_visited_count(self) -> int:
        return len(self.aLabel_visited)

    def reset(self):
        """Mark every vertex as unvisited."""
        self.aLabel_visited.clear()
