"""Tests for the vertex edge chain and traversal state."""

from weightgraph.classes import TraversalState, pyedge, pyvertex


class TestVertexConnect:
    """Tests for inserting edges into the chain."""

    def test_connect_keeps_label_order(self):
        """Edges are kept sorted by target label, not by weight."""
        vertex = pyvertex("A")
        assert vertex.connect("D", 1)
        assert vertex.connect("B", 40)
        assert vertex.connect("C", 20)
        assert [edge.sLabel_target for edge in vertex] == ["B", "C", "D"]
        assert vertex.edges_as_text() == "B(40),C(20),D(1)"

    def test_connect_duplicate_target(self):
        """A second edge to the same target is rejected and the first kept."""
        vertex = pyvertex("A")
        assert vertex.connect("B", 10)
        assert not vertex.connect("B", 50)
        assert vertex.nEdge == 1
        assert vertex.get_adjacent("B").iWeight == 10

    def test_connect_counts_edges(self):
        """Each successful connect increments the edge count."""
        vertex = pyvertex("A")
        for count, label in enumerate("EDCB", start=1):
            vertex.connect(label, count)
            assert vertex.nEdge == count

    def test_connect_negative_and_zero_weights(self):
        """Weights are not validated."""
        vertex = pyvertex("A")
        assert vertex.connect("B", -5)
        assert vertex.connect("C", 0)
        assert vertex.edges_as_text() == "B(-5),C(0)"


class TestVertexDisconnect:
    """Tests for removing edges from the chain."""

    def test_disconnect_middle(self):
        """Removing a middle edge keeps the rest in order."""
        vertex = pyvertex("a")
        vertex.connect("b", 10)
        vertex.connect("c", 20)
        vertex.connect("d", 40)
        assert vertex.disconnect("c")
        assert vertex.edges_as_text() == "b(10),d(40)"
        assert vertex.nEdge == 2

    def test_disconnect_missing(self):
        """Removing an absent edge changes nothing."""
        vertex = pyvertex("a")
        vertex.connect("b", 10)
        assert not vertex.disconnect("z")
        assert vertex.nEdge == 1

    def test_disconnect_last_edge(self):
        """An emptied chain renders as the empty string."""
        vertex = pyvertex("a")
        vertex.connect("b", 10)
        assert vertex.disconnect("b")
        assert vertex.edges_as_text() == ""
        assert vertex.nEdge == 0


class TestVertexQueries:
    """Tests for adjacency lookup, clear and copy."""

    def test_get_adjacent(self):
        vertex = pyvertex("A")
        vertex.connect("B", 3)
        assert vertex.get_adjacent("B") == pyedge("B", 3)
        assert vertex.get_adjacent("C") is None

    def test_empty_vertex_text(self):
        assert pyvertex("A").edges_as_text() == ""

    def test_clear(self):
        vertex = pyvertex("A")
        vertex.connect("B", 1)
        vertex.connect("C", 2)
        vertex.clear()
        assert vertex.nEdge == 0
        assert list(vertex) == []

    def test_copy_is_independent(self):
        """Changing a copy leaves the original chain untouched."""
        vertex = pyvertex("A")
        vertex.connect("B", 1)
        duplicate = vertex.copy()
        duplicate.connect("C", 2)
        duplicate.aEdge[0].iWeight = 99
        assert vertex.edges_as_text() == "B(1)"
        assert duplicate.edges_as_text() == "B(99),C(2)"


class TestTraversalState:
    """Tests for the per-call visited marks."""

    def test_mark_and_unmark(self):
        state = TraversalState()
        assert not state.is_visited("A")
        state.set_visited("A")
        assert state.is_visited("A")
        state.set_visited("A", False)
        assert not state.is_visited("A")

    def test_reset(self):
        """Reset clears every mark."""
        state = TraversalState()
        state.set_visited("A")
        state.set_visited("B")
        assert state.get_visited_count() == 2
        state.reset()
        assert state.get_visited_count() == 0
        assert not state.is_visited("A")

    def test_states_are_independent(self):
        first = TraversalState()
        second = TraversalState()
        first.set_visited("A")
        assert not second.is_visited("A")
