# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Area light. Emits the value of its texture from both faces and absorbs
    every ray that reaches it, so a path ends at the first light it hits.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec) -> Optional[Tuple[Ray, Vector3]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.texture.value(u, v, p)
