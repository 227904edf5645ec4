# materials/textures.py
import math
from typing import Optional, Union
from pathtracer.core.color import WHITE
from pathtracer.core.image import Image
from pathtracer.core.perlin import Perlin
from pathtracer.core.vector import Vector3


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color at surface coordinates (u, v) and world position p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


def as_texture(color_or_texture: Union[Vector3, Texture]) -> Texture:
    if isinstance(color_or_texture, Vector3):
        return SolidColor(color_or_texture)
    return color_or_texture


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: alternates between two textures on a lattice of
    cubes with side length scale.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 1.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.inv_scale = 1.0 / scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        parity = (math.floor(p.x * self.inv_scale) +
                  math.floor(p.y * self.inv_scale) +
                  math.floor(p.z * self.inv_scale)) % 2
        if parity == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)


class ImageTexture(Texture):
    """A texture sampled from an image by (u, v)."""
    def __init__(self, image: Image):
        self.image = image

    @classmethod
    def load(cls, image_path: str) -> "ImageTexture":
        return cls(Image.load(image_path))

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.image.get_pixel_by_uv(u, v)


class NoiseTexture(Texture):
    """Smooth gray Perlin noise."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.scale = scale
        self.noise = Perlin(seed)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return WHITE * (0.5 * (1.0 + self.noise.noise(p * self.scale)))


class TurbulenceTexture(Texture):
    """Gray turbulence: the absolute sum of several octaves of noise."""
    def __init__(self, scale: float = 1.0, depth: int = 7, seed: Optional[int] = None):
        self.scale = scale
        self.depth = depth
        self.noise = Perlin(seed)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return WHITE * self.noise.turbulence(p * self.scale, self.depth)


class MarbleTexture(Texture):
    """A marble-like procedural texture."""
    def __init__(self, scale: float = 5.0, turbulence: float = 10.0, depth: int = 7,
                 seed: Optional[int] = None):
        self.scale = scale
        self.turbulence = turbulence
        self.depth = depth
        self.noise = Perlin(seed)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Turbulence shifts the phase of sine stripes along z
        t = self.noise.turbulence(p, self.depth)
        return WHITE * (0.5 * (1.0 + math.sin(self.scale * p.z + self.turbulence * t)))
