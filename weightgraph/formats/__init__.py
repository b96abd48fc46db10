"""
Readers for graph file formats.
"""

from .read_edge_list import read_edge_list

__all__ = ['read_edge_list']
