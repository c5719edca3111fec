"""Planar geometry types, coordinate rounding, a point quadtree and line simplifiers."""

__version__ = "0.1.0"
__all__ = ["geometry", "rounding", "maxheap", "quadtree", "simplify", "visvalingam"]