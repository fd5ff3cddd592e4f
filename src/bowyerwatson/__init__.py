"""Bowyer-Watson - Delaunay Triangulation of point sets (pure Python)
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'author1_fullname'

from bowyerwatson.delaunay import triangulate, Point, Edge, Triangle, \
    DegenerateTriangleError

__all__ = ["triangulate", "Point", "Edge", "Triangle",
           "DegenerateTriangleError"]
