# geometry/transform.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Translation(Hittable):
    """
    Moves the wrapped object by offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.box = obj.bounding_box() + offset

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Ray into object space
        object_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(object_ray, ray_t)
        if rec is None:
            return None

        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.box


class RotationY(Hittable):
    """
    Rotates the wrapped object by angle degrees around the y axis.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        corners = [self._to_world(c) for c in obj.bounding_box().corners()]
        box = AABB.from_extrema(corners[0], corners[0])
        for corner in corners[1:]:
            box = AABB.surrounding_box(box, AABB.from_extrema(corner, corner))
        self.box = box

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        object_ray = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(object_ray, ray_t)
        if rec is None:
            return None

        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.box
