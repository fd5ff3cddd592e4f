'''
Created on Oct 19, 2026

Value types of the triangulation and its working state.
'''
from math import hypot

from bowyerwatson.delaunay.preds import orient2d, circumcircle_contains


class Point(object):
    """A point in the plane.

    Points are immutable; two points are the same vertex when both of
    their coordinates are exactly equal (no tolerance is used).
    """
    __slots__ = ('x', 'y')

    def __init__(self, x, y):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    def __reduce__(self):
        return (Point, (self.x, self.y))

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "Point({0!r}, {1!r})".format(self.x, self.y)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __len__(self):
        return 2

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def distance(self, other):
        """Cartesian distance to other point """
        return hypot(self.x - other[0], self.y - other[1])


def as_point(pt):
    """Returns *pt* as Point (pt can be a Point or an (x, y) pair)"""
    if isinstance(pt, Point):
        return pt
    x, y = pt
    return Point(x, y)


class Edge(object):
    """An undirected edge between two points.

    Edges are equal when they connect the same two points,
    regardless of the order in which they were given.
    """
    __slots__ = ('a', 'b')

    def __init__(self, a, b):
        object.__setattr__(self, 'a', a)
        object.__setattr__(self, 'b', b)

    def __setattr__(self, name, value):
        raise AttributeError("Edge is immutable")

    def __reduce__(self):
        return (Edge, (self.a, self.b))

    def __str__(self):
        return "LINESTRING({0}, {1})".format(self.a, self.b)

    def __repr__(self):
        return "Edge({0!r}, {1!r})".format(self.a, self.b)

    def is_equal(self, other):
        return (self.a == other.a and self.b == other.b) or \
            (self.a == other.b and self.b == other.a)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.is_equal(other)

    @property
    def key(self):
        """Canonical, order independent, key for this edge"""
        a = (self.a.x, self.a.y)
        b = (self.b.x, self.b.y)
        return (a, b) if a <= b else (b, a)

    def __hash__(self):
        return hash(self.key)

    @property
    def segment(self):
        return (self.a, self.b)


class Triangle(object):
    """Triangle with 3 distinct corners (a, b, c).

    The corners are stored in the order given; equality and hashing do not
    depend on this order. Triangles are never modified after creation.
    """

    __slots__ = ('vertices',)

    def __init__(self, a, b, c):
        object.__setattr__(self, 'vertices', (a, b, c))

    def __setattr__(self, name, value):
        raise AttributeError("Triangle is immutable")

    def __reduce__(self):
        return (Triangle, self.vertices)

    def __str__(self):
        """Conversion to WKT string"""
        vertices = [str(v) for v in self.vertices]
        vertices.append(vertices[0])
        return "POLYGON(({0}))".format(", ".join(vertices))

    def __repr__(self):
        return "Triangle({0!r}, {1!r}, {2!r})".format(*self.vertices)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return frozenset(self.vertices) == frozenset(other.vertices)

    def __hash__(self):
        return hash(frozenset(self.vertices))

    @property
    def a(self):
        return self.vertices[0]

    @property
    def b(self):
        return self.vertices[1]

    @property
    def c(self):
        return self.vertices[2]

    @property
    def edges(self):
        """The 3 sides of the triangle: A-B, A-C and B-C"""
        a, b, c = self.vertices
        return (Edge(a, b), Edge(a, c), Edge(b, c))

    def circumcircle_contains(self, point, epsilon=None):
        """Whether point lies inside or on the circumscribed circle"""
        return circumcircle_contains(self, point, epsilon)

    def contains_point(self, point):
        """Whether point is one of the corners of this triangle"""
        return any(v == point for v in self.vertices)

    @property
    def area(self):
        """Unsigned area"""
        return abs(orient2d(*self.vertices)) * 0.5

    @property
    def is_ccw(self):
        return orient2d(*self.vertices) > 0.


class Triangulation(object):
    """Triangulation data structure

    Holds the working collection of triangles of the Bowyer-Watson algorithm,
    seeded with the super triangle that encloses all points to be inserted.
    """

    __slots__ = ('super_triangle', 'vertices', 'triangles')

    def __init__(self, super_triangle):
        self.super_triangle = super_triangle
        self.vertices = []
        self.triangles = [super_triangle]

    def is_finite(self, triangle):
        """A triangle is finite if it does not use any of the corners
        of the super triangle"""
        return not any(triangle.contains_point(v)
                       for v in self.super_triangle.vertices)
