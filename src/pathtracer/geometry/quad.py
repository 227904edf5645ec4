# geometry/quad.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Rays this close to parallel with the plane are treated as misses.
PARALLEL_EPSILON = 1e-8


class Quad(Hittable):
    """
    A parallelogram spanned by the edges u and v from its origin corner.
    """
    def __init__(self, origin: Vector3, u: Vector3, v: Vector3, material):
        self.origin = origin
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.d = self.normal.dot(origin)
        # Projects a point on the plane onto the (u, v) basis
        self.w = n / n.dot(n)

        diagonal = AABB.from_extrema(origin, origin + u + v)
        other_diagonal = AABB.from_extrema(origin + u, origin + v)
        self.box = AABB.surrounding_box(diagonal, other_diagonal).pad()

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denominator = self.normal.dot(ray.direction)
        if abs(denominator) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denominator
        if not ray_t.contains(t):
            return None

        p = ray.at(t)
        local = p - self.origin
        alpha = self.w.dot(local.cross(self.v))
        beta = self.w.dot(self.u.cross(local))
        if not (0.0 <= alpha <= 1.0 and 0.0 <= beta <= 1.0):
            return None

        return HitRecord.from_ray(ray, t, alpha, beta, p, self.normal, self.material)

    def bounding_box(self) -> AABB:
        return self.box
