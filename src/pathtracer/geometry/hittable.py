# geometry/hittable.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class HitRecord:
    """
    Where and how a ray met a surface. The normal is stored facing the
    incoming ray; front_face tells whether that is the outward side.
    """
    __slots__ = ("p", "normal", "t", "u", "v", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, u: float = 0, v: float = 0,
                 front_face: bool = True, material=None):
        self.p = p
        self.normal = normal
        self.t = t
        self.u = u  # surface coordinates
        self.v = v
        self.front_face = front_face
        self.material = material

    @classmethod
    def from_ray(cls, ray: Ray, t: float, u: float, v: float, p: Vector3,
                 outward_normal: Vector3, material) -> "HitRecord":
        rec = cls(p=p, t=t, u=u, v=v, material=material)
        rec.set_face_normal(ray, outward_normal)
        return rec

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """Flips outward_normal to face the ray and records which side was hit."""
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p}, normal={self.normal}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Anything a ray can intersect.

    Hittables are built once and never mutated afterwards; render threads
    share them without locking.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """
        Returns the closest intersection with ray_t.start <= t < ray_t.end,
        or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
