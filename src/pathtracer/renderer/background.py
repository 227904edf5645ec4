# renderer/background.py
import math
from pathtracer.core.image import Image
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class Background:
    """Radiance arriving along rays that escape the scene."""
    def background(self, ray: Ray) -> Vector3:
        raise NotImplementedError("background() must be implemented by subclasses.")


class BackgroundColor(Background):
    """A uniform background."""
    def __init__(self, color: Vector3 = None):
        self.color = color if color is not None else Vector3(0.0, 0.0, 0.0)

    def background(self, ray: Ray) -> Vector3:
        return self.color


class GradientBackground(Background):
    """
    Interpolates vertically between a horizon color (looking down) and a
    zenith color (looking up).
    """
    def __init__(self, zenith: Vector3 = None, horizon: Vector3 = None):
        self.zenith = zenith if zenith is not None else Vector3(0.5, 0.7, 1.0)
        self.horizon = horizon if horizon is not None else Vector3(1.0, 1.0, 1.0)

    def background(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.horizon * (1.0 - t) + self.zenith * t


class EnvironmentMap(Background):
    """
    Samples an equirectangular panorama by ray direction.
    """
    def __init__(self, image: Image, strength: float = 1.0, rotation: float = 0.0):
        self.image = image
        self.strength = strength
        self.rotation = math.radians(rotation)

    @classmethod
    def load(cls, path: str, strength: float = 1.0, rotation: float = 0.0) -> "EnvironmentMap":
        return cls(Image.load(path), strength, rotation)

    def uv(self, direction: Vector3):
        theta = math.acos(max(-1.0, min(1.0, -direction.y)))
        phi = math.atan2(-direction.z, direction.x) + math.pi
        return (phi + self.rotation) / (2 * math.pi), theta / math.pi

    def background(self, ray: Ray) -> Vector3:
        u, v = self.uv(ray.direction.normalize())
        return self.image.get_pixel_by_uv(u, v) * self.strength
