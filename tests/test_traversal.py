"""Tests for depth-first and breadth-first traversal."""
import pytest

from weightgraph import pygraph


def collect(traversal, label):
    """Run a traversal and record what the visitor receives."""
    visited = []
    traversal(label, visited.append)
    return "".join(visited)


class TestDFS:
    """Tests for depth-first traversal."""

    @pytest.mark.parametrize("origin, expected", [("A", "ABC"), ("B", "BC"), ("C", "C")])
    def test_graph0(self, graph0, origin, expected):
        assert collect(graph0.dfs, origin) == expected

    @pytest.mark.parametrize("origin, expected", [
        ("A", "ABCDEFGH"), ("B", "BCDEFG"), ("C", "CDEFG"), ("H", "HG"), ("X", "XY"),
    ])
    def test_graph1(self, graph1, origin, expected):
        assert collect(graph1.dfs, origin) == expected

    @pytest.mark.parametrize("origin, expected", [
        ("A", "ABEFJCGKLDHMIN"), ("O", "OPRSTUQ"), ("T", "TOPRSUQ"),
        ("R", "ROPQSTU"), ("S", "SROPQTU"), ("D", "DHMIN"),
    ])
    def test_graph2(self, graph2, origin, expected):
        assert collect(graph2.dfs, origin) == expected

    def test_unknown_origin(self, graph0):
        """An unknown origin never calls the visitor."""
        assert collect(graph0.dfs, "X") == ""
        assert graph0.dfs("X") == []

    def test_returns_order(self, graph1):
        assert graph1.dfs("A") == list("ABCDEFGH")

    def test_repeatable(self, graph2):
        """Running twice gives the same result, so no visited marks leak."""
        first = graph2.dfs("O")
        assert graph2.dfs("O") == first
        assert graph2.bfs("O") == list("OPQRSTU")

    def test_isolated_vertex(self):
        graph = pygraph()
        graph.add_vertex("solo")
        assert graph.dfs("solo") == ["solo"]

    def test_visitor_error_propagates(self, graph1):
        """A failing visitor stops the traversal but the graph stays usable."""
        def visitor(label):
            if label == "C":
                raise ValueError(label)

        with pytest.raises(ValueError):
            graph1.dfs("A", visitor)
        assert graph1.dfs("A") == list("ABCDEFGH")


class TestBFS:
    """Tests for breadth-first traversal."""

    @pytest.mark.parametrize("origin, expected", [("A", "ABC"), ("B", "BC"), ("C", "C")])
    def test_graph0(self, graph0, origin, expected):
        assert collect(graph0.bfs, origin) == expected

    @pytest.mark.parametrize("origin, expected", [
        ("A", "ABHCGDEF"), ("B", "BCDEFG"), ("H", "HG"), ("X", "XY"),
    ])
    def test_graph1(self, graph1, origin, expected):
        assert collect(graph1.bfs, origin) == expected

    @pytest.mark.parametrize("origin, expected", [
        ("A", "ABCDEFGHIJKLMN"), ("O", "OPQRSTU"), ("T", "TOPQRSU"),
        ("R", "ROSPQTU"), ("S", "SRTUOPQ"),
    ])
    def test_graph2(self, graph2, origin, expected):
        assert collect(graph2.bfs, origin) == expected

    def test_unknown_origin(self, graph0):
        assert collect(graph0.bfs, "X") == ""
        assert graph0.bfs("X") == []

    def test_repeatable(self, graph1):
        first = graph1.bfs("A")
        assert graph1.bfs("A") == first
        assert graph1.dfs("A") == list("ABCDEFGH")

    def test_shared_target_visited_once(self):
        """A vertex reachable along two edges appears once."""
        graph = pygraph([("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)])
        assert graph.bfs("A") == ["A", "B", "C", "D"]
        assert graph.dfs("A") == ["A", "B", "D", "C"]
