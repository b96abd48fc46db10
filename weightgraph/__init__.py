"""
Weightgraph - Directed Weighted Graph Library

A Python library for building directed graphs with labelled vertices and
integer edge weights, and for running the classic algorithms over them.

Main Classes:
    pygraph: Main class for graph operations (facade)
    WeightedGraph: Core adjacency structure
    pyvertex: Vertex head node owning its outgoing edges
    pyedge: Outgoing edge (target label and weight)

Example:
    >>> from weightgraph import pygraph
    >>> graph = pygraph()
    >>> graph.read_file('graph0.txt')
    True
    >>> graph.dfs('A')
    ['A', 'B', 'C']
"""

__version__ = "0.1.0"

from weightgraph.classes.vertex import pyvertex
from weightgraph.classes.edge import pyedge
from weightgraph.core.graph import WeightedGraph, NOT_FOUND
from weightgraph.core.pygraph import pygraph

__all__ = [
    'pygraph',
    'WeightedGraph',
    'pyvertex',
    'pyedge',
    'NOT_FOUND',
]
