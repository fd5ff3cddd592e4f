'''
Created on Oct 19, 2026

'''

# ------------------------------------------------------------------------------
# Iterators
#


class TriangleIterator(object):
    """Iterator over all triangles that are in the triangle data structure.
    The finite_only parameter determines whether only the triangles that
    do not use a corner of the super triangle are iterated over,
    or whether all triangles are considered.

    """

    def __init__(self, triangulation, finite_only=False):
        self.triangulation = triangulation
        self.finite_only = finite_only
        self.current_idx = 0

    def __iter__(self):
        return self

    def __next__(self):
        triangles = self.triangulation.triangles
        while self.current_idx < len(triangles):
            triangle = triangles[self.current_idx]
            self.current_idx += 1
            if self.finite_only and not self.triangulation.is_finite(triangle):
                continue
            return triangle
        raise StopIteration()


class FiniteTriangleIterator(TriangleIterator):
    """Iterator over all triangles that do not share a corner with the
    super triangle.

    """

    def __init__(self, triangulation):
        # Actually, we are an alias for TriangleIterator
        # with finite_only set to True
        super(FiniteTriangleIterator, self).__init__(triangulation, True)


class EdgeIterator(object):
    """Iterator over the edges of a collection of triangles,
    every (undirected) edge is output only once
    """

    def __init__(self, triangles):
        self.triangles = iter(triangles)
        self.pending = []
        self.seen = set()

    def __iter__(self):
        return self

    def __next__(self):
        while True:
            while self.pending:
                edge = self.pending.pop(0)
                if edge not in self.seen:
                    self.seen.add(edge)
                    return edge
            # raises StopIteration when all triangles are consumed
            triangle = next(self.triangles)
            self.pending.extend(triangle.edges)
