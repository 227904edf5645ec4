# materials/metal.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector, reflect
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

# Perturbed directions tried before falling back to the mirror direction
MAX_FUZZ_ATTEMPTS = 16


class Metal(Material):
    """
    Specular reflector tinted by its albedo texture.

    With fuzz > 0 the mirror direction is perturbed by a random vector of
    length fuzz. Perturbations that point into the surface are redrawn; after
    MAX_FUZZ_ATTEMPTS the exact mirror direction is used, which always leaves
    the surface.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)

        if self.fuzz > 0:
            for _ in range(MAX_FUZZ_ATTEMPTS):
                direction = reflected + random_unit_vector() * self.fuzz
                if direction.dot(rec.normal) > 0:
                    return Ray(rec.p, direction, ray_in.time), attenuation

        return Ray(rec.p, reflected, ray_in.time), attenuation
