'''
Created on Oct 19, 2026

Incremental construction of a Delaunay triangulation
with the Bowyer-Watson algorithm.
'''

import logging
import time
from datetime import datetime

from bowyerwatson.delaunay.tds import Triangle, Triangulation, as_point
from bowyerwatson.delaunay.iter import FiniteTriangleIterator


class BowyerWatsonInserter(object):
    """Class to insert points into a Triangulation.

    For every point, all triangles whose circumcircle contains the point
    are removed, and the polygonal hole that this leaves is filled again
    by connecting its boundary edges to the new point.
    """

    __slots__ = ('triangulation', 'epsilon', 'visits', 'removed', 'created',
                 '_inserted')

    def __init__(self, triangulation, epsilon=None):
        self.triangulation = triangulation
        self.epsilon = epsilon
        self.visits = 0
        self.removed = 0
        self.created = 0
        self._inserted = set(triangulation.vertices)

    def insert(self, points):
        """Insert a list of points into the triangulation.
        """
        for j, pt in enumerate(points):
            logging.debug(" - inserting {}".format(pt))
            self.append(pt)
            if (j % 1000) == 0:
                logging.debug(" " + str(datetime.now()) + " " + str(j))

    def append(self, pt):
        """Appends one point to the triangulation.

        This method assumes that the point lies inside the super triangle.
        Returns False if the point was already present (and thus skipped).
        """
        p = as_point(pt)
        if p in self._inserted:
            logging.warning("Equal points found while inserting,"
                            " skipping {}".format(p))
            return False
        self._inserted.add(p)
        self.triangulation.vertices.append(p)
        # -- find the bad triangles, their edges form the cavity
        good, edges = [], []
        for triangle in self.triangulation.triangles:
            self.visits += 1
            if triangle.circumcircle_contains(p, self.epsilon):
                edges.extend(triangle.edges)
                self.removed += 1
            else:
                good.append(triangle)
        # -- re-triangulate the cavity from its boundary to the new point
        for a, b in boundary_edges(edges):
            good.append(Triangle(a, b, p))
            self.created += 1
        self.triangulation.triangles = good
        return True


def boundary_edges(edges):
    """Returns the (a, b) pairs of the edges that occur exactly once
    in *edges*, keeping the order in which they were given.

    An edge shared by two bad triangles is inside the cavity,
    an edge that is not shared forms part of its boundary.
    """
    multiplicity = {}
    for edge in edges:
        multiplicity[edge] = multiplicity.get(edge, 0) + 1
    return [edge.segment for edge in edges if multiplicity[edge] == 1]


def finalize(triangulation):
    """Returns list with the triangles that do not share a corner
    with the super triangle
    """
    return list(FiniteTriangleIterator(triangulation))


def as_triangle(corners):
    """Returns *corners* as Triangle (a Triangle or 3 (x, y) pairs)"""
    if isinstance(corners, Triangle):
        return corners
    a, b, c = corners
    return Triangle(as_point(a), as_point(b), as_point(c))


def triangulate(points, super_triangle, epsilon=None):
    """Triangulate a set of points

    The super_triangle should enclose all points and should not be
    degenerate, this is not checked. When epsilon is given,
    a DegenerateTriangleError is raised for triangles of which the
    circumcircle cannot be determined reliably.

    Returns a list with the triangles of the Delaunay triangulation.
    """
    start = time.perf_counter()
    dt = Triangulation(as_triangle(super_triangle))
    incremental = BowyerWatsonInserter(dt, epsilon)
    incremental.insert(points)
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(dt.triangles)))
    logging.debug("{} vertices".format(len(dt.vertices)))
    logging.debug("{} visits".format(incremental.visits))
    logging.debug("{} removed".format(incremental.removed))
    if len(dt.vertices) > 0:
        logging.debug(str(float(incremental.visits) /
                          len(dt.vertices)) + " visits per insert")

    result = finalize(dt)
    logging.debug("{} triangles after removing super triangle".format(
        len(result)))
    return result
