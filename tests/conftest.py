"""
Pytest configuration for weightgraph tests.

Provides graphs loaded from the edge list fixtures in tests/data.
"""
import os

import pytest

from weightgraph import pygraph

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


def data_file(name):
    """Absolute path of a file in tests/data."""
    return os.path.join(DATA_DIR, name)


def load_graph(name):
    graph = pygraph()
    assert graph.read_file(data_file(name))
    return graph


@pytest.fixture
def graph0():
    """A->B:1, A->C:8, B->C:3."""
    return load_graph("graph0.txt")


@pytest.fixture
def graph1():
    """Chain A..G with a shortcut A->H->G, plus an isolated pair X->Y."""
    return load_graph("graph1.txt")


@pytest.fixture
def graph2():
    """Zero weight tree rooted at A, plus a weighted cyclic component O..U."""
    return load_graph("graph2.txt")


@pytest.fixture
def letters_graph():
    """Ten vertices A..J with nine edges added through connect."""
    graph = pygraph()
    for label in "ABCDEFGHIJ":
        graph.add_vertex(label)
    for source, target, weight in [
        ("A", "C", 14), ("C", "F", 4), ("H", "I", 8), ("A", "G", 0),
        ("A", "J", 6), ("C", "B", 7), ("B", "F", 10), ("D", "A", 3),
        ("I", "E", 1),
    ]:
        assert graph.connect(source, target, weight)
    return graph


@pytest.fixture
def data_dir():
    return DATA_DIR
