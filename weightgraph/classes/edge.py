"""
Edge representation for the adjacency chain of a vertex.
"""


class pyedge:
    """
    One outgoing edge of a vertex.

    The source vertex is implied by the chain the edge lives in, so an edge
    only records where it goes and what it costs.
    """

    def __init__(self, sLabel_target: str, iWeight: int = 0):
        """
        Initialize the edge.

        Args:
            sLabel_target: Label of the target vertex
            iWeight: Edge cost, may be zero or negative
        """
        self.sLabel_target = sLabel_target
        self.iWeight = iWeight

    def __eq__(self, other):
        if not isinstance(other, pyedge):
            return NotImplemented
        return self.sLabel_target == other.sLabel_target and self.iWeight == other.iWeight

    def __repr__(self):
        return f"pyedge({self.sLabel_target!r}, {self.iWeight})"

    def __str__(self):
        return f"{self.sLabel_target}({self.iWeight})"
