# materials/dielectric.py
import math
from typing import Optional, Tuple
from pathtracer.core.color import WHITE
from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, rng
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material such as glass or water. Never absorbs.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec) -> Optional[Tuple[Ray, Vector3]]:
        # Entering from outside divides by the index, leaving multiplies by it
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, refraction_ratio) > rng().random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Ray(rec.p, direction, ray_in.time), WHITE


def schlick(cos_theta: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
