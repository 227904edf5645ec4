# geometry/box.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.quad import Quad


class Box(Hittable):
    """
    Axis-aligned box between two opposite corners, made of six quads whose
    normals point outwards.
    """
    def __init__(self, a: Vector3, b: Vector3, material):
        self.material = material
        lo = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
        hi = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

        dx = Vector3(hi.x - lo.x, 0, 0)
        dy = Vector3(0, hi.y - lo.y, 0)
        dz = Vector3(0, 0, hi.z - lo.z)

        self.faces = [
            Quad(Vector3(lo.x, lo.y, hi.z), dx, dy, material),   # front
            Quad(Vector3(hi.x, lo.y, hi.z), -dz, dy, material),  # right
            Quad(Vector3(hi.x, lo.y, lo.z), -dx, dy, material),  # back
            Quad(Vector3(lo.x, lo.y, lo.z), dz, dy, material),   # left
            Quad(Vector3(lo.x, hi.y, hi.z), dx, -dz, material),  # top
            Quad(Vector3(lo.x, lo.y, lo.z), dx, dz, material),   # bottom
        ]
        self.sides = BVHNode(self.faces)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        return self.sides.hit(ray, ray_t)

    def bounding_box(self) -> AABB:
        return self.sides.bounding_box()
