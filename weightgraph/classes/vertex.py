"""
Vertex head node and its outgoing edge chain.

Each vertex owns an ordered list of outgoing edges. The list is kept sorted by
ascending target label and never holds two edges to the same target.
"""

from typing import List, Optional

from .edge import pyedge


class pyvertex:
    """
    Head node of one graph vertex.

    Owns the outgoing edges of the vertex. Self-loops are not checked here;
    the graph rejects them before delegating to the vertex.
    """

    def __init__(self, sLabel: str):
        """
        Initialize a vertex with no outgoing edges.

        Args:
            sLabel: Unique label of the vertex
        """
        self.sLabel = sLabel
        self.aEdge: List[pyedge] = []
        self.nEdge = 0

    def connect(self, sLabel_target: str, iWeight: int) -> bool:
        """
        Insert an edge to the target, keeping the chain sorted by target label.

        Args:
            sLabel_target: Label of the target vertex
            iWeight: Edge cost

        Returns:
            True if the edge was inserted, False if the target is already adjacent
        """
        iIndex = 0
        for pEdge in self.aEdge:
            if pEdge.sLabel_target >= sLabel_target:
                break
            iIndex += 1

        if iIndex < self.nEdge and self.aEdge[iIndex].sLabel_target == sLabel_target:
            return False

        self.aEdge.insert(iIndex, pyedge(sLabel_target, iWeight))
        self.nEdge += 1
        return True

    def disconnect(self, sLabel_target: str) -> bool:
        """
        Remove the edge to the target if present.

        Args:
            sLabel_target: Label of the target vertex

        Returns:
            True if an edge was removed, False otherwise
        """
        for iIndex, pEdge in enumerate(self.aEdge):
            if pEdge.sLabel_target == sLabel_target:
                del self.aEdge[iIndex]
                self.nEdge -= 1
                return True
        return False

    def get_adjacent(self, sLabel_target: str) -> Optional[pyedge]:
        """Get the edge leading to the target, or None if not adjacent."""
        for pEdge in self.aEdge:
            if pEdge.sLabel_target == sLabel_target:
                return pEdge
        return None

    def edges_as_text(self) -> str:
        """
        Render the chain as comma separated target(weight) pairs.

        Returns:
            For example "B(1),C(8)", or "" when the vertex has no edges
        """
        return ','.join(str(pEdge) for pEdge in self.aEdge)

    def clear(self):
        """Drop every outgoing edge."""
        self.aEdge.clear()
        self.nEdge = 0

    def copy(self) -> 'pyvertex':
        """Create an independent copy of the vertex and its edge chain."""
        pVertex = pyvertex(self.sLabel)
        pVertex.aEdge = [pyedge(pEdge.sLabel_target, pEdge.iWeight) for pEdge in self.aEdge]
        pVertex.nEdge = self.nEdge
        return pVertex

    def __iter__(self):
        return iter(self.aEdge)

    def __repr__(self):
        return f"pyvertex({self.sLabel!r}, nEdge={self.nEdge})"
