# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Sphere of the given center and radius. With a displacement it moves
    linearly from center at time 0 to center + displacement at time 1.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 displacement: Optional[Vector3] = None):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material
        self.displacement = displacement

        offset = Vector3(self.radius, self.radius, self.radius)
        box = AABB.from_extrema(center - offset, center + offset)
        if displacement is not None:
            end = center + displacement
            box = AABB.surrounding_box(box, AABB.from_extrema(end - offset, end + offset))
        self.box = box

    def center_at(self, time: float) -> Vector3:
        if self.displacement is None:
            return self.center
        return self.center + self.displacement * time

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearer root first, then the far one for rays starting inside
        root = (-half_b - sqrt_disc) / a
        if not ray_t.contains(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.contains(root):
                return None

        p = ray.at(root)
        outward_normal = (p - center) / self.radius
        u, v = self.get_uv(outward_normal)
        return HitRecord.from_ray(ray, root, u, v, p, outward_normal, self.material)

    @staticmethod
    def get_uv(p: Vector3):
        """
        Maps a point on the unit sphere to (u, v) in [0, 1]^2. u follows the
        angle around the y axis starting at x = -1, v runs from y = -1 to y = 1.
        """
        theta = math.acos(max(-1.0, min(1.0, -p.y)))
        phi = math.atan2(-p.z, p.x) + math.pi
        return phi / (2 * math.pi), theta / math.pi

    def bounding_box(self) -> AABB:
        return self.box
