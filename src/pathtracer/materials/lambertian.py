# materials/lambertian.py
from typing import Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Ideal diffuse surface. Bounces follow a cosine distribution around the
    normal and are tinted by the texture at the hit point; nothing is absorbed.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec) -> Tuple[Ray, Vector3]:
        direction = rec.normal + random_unit_vector()
        # The random vector can cancel the normal out
        if direction.near_zero():
            direction = rec.normal
        return Ray(rec.p, direction, ray_in.time), self.texture.value(rec.u, rec.v, rec.p)
