"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the weightgraph library.
"""

from .edge import pyedge
from .vertex import pyvertex
from .traversal import TraversalState

__all__ = [
    'pyedge',
    'pyvertex',
    'TraversalState',
]
