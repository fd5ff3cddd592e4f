"""Bowyer-Watson - Delaunay Triangulation of point sets
"""

import logging

from bowyerwatson.delaunay.insert_bw import triangulate, finalize, \
    BowyerWatsonInserter
from bowyerwatson.delaunay.tds import Point, Edge, Triangle, Triangulation
from bowyerwatson.delaunay.preds import circumcircle, circumcircle_contains, \
    orient2d, DegenerateTriangleError
from bowyerwatson.delaunay.iter import TriangleIterator, \
    FiniteTriangleIterator, EdgeIterator


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'author1_fullname'
__all__ = ("triangulate", "finalize", "BowyerWatsonInserter",
           "Point", "Edge", "Triangle", "Triangulation",
           "circumcircle", "circumcircle_contains", "orient2d",
           "DegenerateTriangleError",
           "TriangleIterator", "FiniteTriangleIterator", "EdgeIterator")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    from bowyerwatson.delaunay.helpers import random_circle_vertices
    pts = random_circle_vertices(1500)
    triangulate(pts, [(-50., -40.), (50., -40.), (0., 60.)])
