'''
Created on Oct 19, 2026

Geometric predicates used by the Bowyer-Watson inserter.
'''
import numpy as np


class DegenerateTriangleError(ValueError):
    """Raised when a circumcircle is requested for a (nearly) collinear
    triangle and an epsilon to check against was given"""


def orient2d(pa, pb, pc):
    """Direction from pa to pc, via pb, where returned value is as follows:

    left:     + [ = ccw ]
    straight: 0.
    right:    - [ = cw ]

    returns twice signed area under triangle pa, pb, pc
    """
    detleft = (pa[0] - pc[0]) * (pb[1] - pc[1])
    detright = (pa[1] - pc[1]) * (pb[0] - pc[0])
    det = detleft - detright
    return det


def circumcircle(triangle, epsilon=None):
    """Center and radius of the circle through the 3 corners of *triangle*

    Returns ((cx, cy), radius).

    The division is done in IEEE-754 double precision, so for a collinear
    triangle the center ends up as inf or nan (and the radius with it)
    instead of raising ZeroDivisionError. If *epsilon* is given,
    a DegenerateTriangleError is raised when the magnitude of either
    denominator is smaller than epsilon.
    """
    a, b, c = triangle.vertices
    sq_a = a.x * a.x + a.y * a.y
    sq_b = b.x * b.x + b.y * b.y
    sq_c = c.x * c.x + c.y * c.y
    denominator_x = a.x * (c.y - b.y) + b.x * (a.y - c.y) + c.x * (b.y - a.y)
    denominator_y = a.y * (c.x - b.x) + b.y * (a.x - c.x) + c.y * (b.x - a.x)
    if epsilon is not None:
        denominator = min(abs(denominator_x), abs(denominator_y))
        if denominator < epsilon:
            raise DegenerateTriangleError(
                "Degenerate triangle {} (denominator {})".format(
                    triangle, denominator))
    numerator_x = sq_a * (c.y - b.y) + sq_b * (a.y - c.y) + sq_c * (b.y - a.y)
    numerator_y = sq_a * (c.x - b.x) + sq_b * (a.x - c.x) + sq_c * (b.x - a.x)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        cx = np.float64(numerator_x) / np.float64(denominator_x) / 2.
        cy = np.float64(numerator_y) / np.float64(denominator_y) / 2.
        radius = np.hypot(a.x - cx, a.y - cy)
    return (float(cx), float(cy)), float(radius)


def circumcircle_contains(triangle, point, epsilon=None):
    """Tests whether point lies in (or on) the circumcircle of triangle
    """
    (cx, cy), radius = circumcircle(triangle, epsilon)
    with np.errstate(invalid='ignore', over='ignore'):
        dist = np.hypot(point[0] - cx, point[1] - cy)
    return bool(dist <= radius)
