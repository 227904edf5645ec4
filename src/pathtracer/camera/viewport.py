# camera/viewport.py
from typing import Tuple
from pathtracer.core.utils import rng
from pathtracer.core.vector import Vector3


class Viewport:
    """
    Rectangle on the focal plane that the image is projected onto.

    origin is the upper left corner; edges run along the image rows and
    columns; pixel_size holds the step from a pixel to its right and lower
    neighbour.
    """
    def __init__(self, origin: Vector3, size: Tuple[float, float],
                 resolution: Tuple[int, int], right: Vector3, down: Vector3):
        self.width, self.height = size
        self.origin = origin
        self.edges = (right * self.width, down * self.height)
        self.pixel_size = (right * (self.width / resolution[0]),
                           down * (self.height / resolution[1]))

    @classmethod
    def with_origin(cls, origin: Vector3, size: Tuple[float, float],
                    resolution: Tuple[int, int], right: Vector3, down: Vector3) -> "Viewport":
        return cls(origin, size, resolution, right, down)

    @classmethod
    def with_center(cls, center: Vector3, size: Tuple[float, float],
                    resolution: Tuple[int, int], right: Vector3, down: Vector3) -> "Viewport":
        origin = center - (right * size[0] + down * size[1]) * 0.5
        return cls(origin, size, resolution, right, down)

    def pixel_sample(self, x: int, y: int, sample_x: int, sample_y: int,
                     subpixel_scale: float) -> Vector3:
        """
        Jittered point inside stratum (sample_x, sample_y) of pixel (x, y),
        where each stratum is subpixel_scale pixels wide.
        """
        r = rng()
        return (self.origin
                + self.pixel_size[0] * (x + (sample_x + r.random()) * subpixel_scale)
                + self.pixel_size[1] * (y + (sample_y + r.random()) * subpixel_scale))
