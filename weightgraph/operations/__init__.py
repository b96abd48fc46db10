"""
Graph operation modules that derive new graphs from existing ones.
"""

from .spanning_tree import SpanningTreeBuilder

__all__ = ['SpanningTreeBuilder']
