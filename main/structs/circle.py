import math

from main.geoms.geoms import getDistance

# Circles live in 2D only
NDIM = 2


class GeometryError(ValueError):
    pass


class InvalidDimension(GeometryError):
    pass


class DegenerateSegment(GeometryError):
    pass


def _checkDim(p, name):
    if len(p) != NDIM:
        raise InvalidDimension(
            "{} must have {} coordinates, got {}".format(name, NDIM, len(p))
        )


class Circle:
    """
    Circle in 2D with circle/line intersection.

    Center and radius are fixed at construction. Queries keep their scratch
    values in locals, so one Circle can be shared between threads.
    """

    def __init__(self, center, radius):
        _checkDim(center, "center")
        if radius < 0:
            raise ValueError("radius must be non-negative, got {}".format(radius))
        # Copy so later changes to the caller's point don't move the circle
        self._center = (float(center[0]), float(center[1]))
        self._radius = float(radius)

        # If values are within this threshold, call them equal
        self.equality_threshold = 1e-6

    @property
    def center(self):
        return self._center

    @property
    def radius(self):
        return self._radius

    def _project(self, pa, pb):
        # Split v = center - pa into parts parallel (p) and orthogonal (q) to the line
        _checkDim(pa, "pa")
        _checkDim(pb, "pb")
        ex = pb[0] - pa[0]
        ey = pb[1] - pa[1]
        # Nonzero for any two distinct endpoints, however close
        e_norm = math.hypot(ex, ey)
        if e_norm == 0.0:
            raise DegenerateSegment(
                "segment endpoints coincide: {} == {}".format(list(pa), list(pb))
            )
        e0 = [ex / e_norm, ey / e_norm]

        v = [self._center[0] - pa[0], self._center[1] - pa[1]]
        e0_dot_v = e0[0] * v[0] + e0[1] * v[1]

        p = [e0_dot_v * e0[0], e0_dot_v * e0[1]]
        q = [v[0] - p[0], v[1] - p[1]]
        q_norm = math.sqrt(q[0] * q[0] + q[1] * q[1])
        return e0, p, q_norm

    def lineDistance(self, pa, pb):
        """Perpendicular distance from the center to the line through pa and pb."""
        _, _, q_norm = self._project(pa, pb)
        return q_norm

    def segmentIntersect(self, pa, pb, tangent_tol=0.0):
        """
        Intersect the circle with the line through pa and pb.

                                 pb o
                                   /
                         _-----_  /
                       .'       `o xb
                      /         / \\
                      |     +  /  |
                      \\   xc  /   /
                       '.    /  .'
                         `--o--'
                           / xa
                          /
                      pa o

        Points are on the infinite line, they are not clipped to [pa, pb].
        With tangent_tol == 0 the tangent case needs the distance to equal the
        radius exactly; a positive tangent_tol treats
        abs(distance - radius) <= tangent_tol as tangent.

        Returns:
            (intersects, nint): nint in {0, 1, 2} and a list of nint [x, y] points
            ordered along pa -> pb.
        """
        if tangent_tol < 0:
            raise ValueError(
                "tangent_tol must be non-negative, got {}".format(tangent_tol)
            )
        e0, p, q_norm = self._project(pa, pb)
        r = self._radius

        if abs(q_norm - r) <= tangent_tol:
            # Tangent
            return [[pa[0] + p[0], pa[1] + p[1]]], 1
        elif q_norm > r:
            return [], 0
        else:
            m = math.sqrt(r * r - q_norm * q_norm)
            xa = [pa[0] + p[0] - m * e0[0], pa[1] + p[1] - m * e0[1]]
            xb = [pa[0] + p[0] + m * e0[0], pa[1] + p[1] + m * e0[1]]
            return [xa, xb], 2

    def contains(self, p):
        _checkDim(p, "p")
        return getDistance(p, self._center) <= self._radius

    def __str__(self):
        return "['circle', {}, {}]".format(list(self._center), self._radius)

    def __repr__(self):
        return "Circle({}, {})".format(list(self._center), self._radius)

    def __eq__(self, other_circle):
        if (
            isinstance(other_circle, self.__class__)
            and getDistance(other_circle.center, self._center) < self.equality_threshold
            and abs(other_circle.radius - self._radius) < self.equality_threshold
        ):
            return True
        return False
