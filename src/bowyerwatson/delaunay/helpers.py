'''
Created on Oct 19, 2026

'''
from math import sqrt, pi, cos, sin
from random import Random

import numpy as np

from bowyerwatson.delaunay.tds import as_point
# ------------------------------------------------------------------------------
# Generate randomized point sets (for testing purposes)
#


def random_sorted_vertices(n=10, seed=None):
    """Returns a list with (at most) n random vertices on a grid
    """
    rnd = Random(seed)
    W = float(n)
    vertices = []
    for _ in range(n):
        x = rnd.randint(0, n)
        y = rnd.randint(0, n)
        x /= W
        y /= W
        vertices.append((x, y))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


def random_circle_vertices(n=10, cx=0, cy=0, seed=None):
    """Returns a list with n random vertices in a unit circle around (cx, cy)

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    rnd = Random(seed)
    vertices = []
    for _ in range(n):
        r = sqrt(rnd.random())
        t = 2 * pi * rnd.random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x + cx, y + cy))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


# ------------------------------------------------------------------------------
# Conversion
#

def as_points(pts):
    """Converts (x, y) pairs (tuples, lists, rows of a numpy array)
    to a list of Points
    """
    return [as_point(pt) for pt in pts]


def triangles_as_array(triangles):
    """Returns an array with shape (m, 3, 2), holding the coordinates of the
    corners of the m triangles"""
    coords = [[(v.x, v.y) for v in t.vertices] for t in triangles]
    return np.array(coords, dtype=np.float64).reshape((len(coords), 3, 2))
