"""Linked binary tree nodes with traversals, measurements and a text renderer."""

__version__ = "0.1.0"
__all__ = ["render", "tree"]