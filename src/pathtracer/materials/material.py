# materials/material.py
from typing import Optional, Tuple
from pathtracer.core.color import BLACK
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class Material:
    """
    Surface response at a hit point. A material only holds its parameters,
    so one instance can be shared by many primitives and render threads.
    """
    def scatter(self, ray_in: Ray, rec) -> Optional[Tuple[Ray, Vector3]]:
        """
        Returns (scattered_ray, attenuation), or None when the path ends here.
        The scattered ray starts at rec.p and keeps the time of ray_in.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return BLACK
