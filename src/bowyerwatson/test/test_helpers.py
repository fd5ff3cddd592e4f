import unittest

import numpy as np

from bowyerwatson.delaunay.tds import Point, Triangle
from bowyerwatson.delaunay.helpers import random_circle_vertices, \
    random_sorted_vertices, as_points, triangles_as_array


class TestRandomVertices(unittest.TestCase):
    def test_circle(self):
        pts = random_circle_vertices(100, 3, 4, seed=42)
        self.assertEqual(len(pts), 100)
        self.assertEqual(pts, sorted(pts))
        for x, y in pts:
            self.assertLessEqual(Point(x, y).distance((3, 4)), 1.0)

    def test_seed(self):
        self.assertEqual(random_circle_vertices(10, seed=3),
                         random_circle_vertices(10, seed=3))
        self.assertEqual(random_sorted_vertices(10, seed=3),
                         random_sorted_vertices(10, seed=3))

    def test_sorted_unique(self):
        pts = random_sorted_vertices(50, seed=5)
        self.assertEqual(len(pts), len(set(pts)))
        self.assertEqual(pts, sorted(pts))
        for x, y in pts:
            self.assertTrue(0. <= x <= 1. and 0. <= y <= 1.)


class TestConversion(unittest.TestCase):
    def test_as_points(self):
        pts = as_points(np.array([[0, 1], [2, 3]]))
        self.assertEqual(pts, [Point(0, 1), Point(2, 3)])
        self.assertIsInstance(pts[0].x, float)

    def test_triangles_as_array(self):
        t = Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
        arr = triangles_as_array([t, t])
        self.assertEqual(arr.shape, (2, 3, 2))
        self.assertTrue(np.array_equal(arr[0], [[0, 0], [1, 0], [0, 1]]))

    def test_no_triangles_as_array(self):
        self.assertEqual(triangles_as_array([]).shape, (0, 3, 2))


if __name__ == "__main__":
    unittest.main()
