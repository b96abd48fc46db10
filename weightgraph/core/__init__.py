"""
Core graph data structures and management.

This module contains the fundamental graph representation and the public
facade class.
"""

from .graph import WeightedGraph
from .pygraph import pygraph

__all__ = ['WeightedGraph', 'pygraph']
