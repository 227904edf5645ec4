# core/image.py
import os
from typing import List, Sequence, Tuple
import numpy as np
from PIL import Image as PILImage
from pathtracer.core.color import BLACK
from pathtracer.core.utils import clamp_repeating
from pathtracer.core.vector import Vector3


class ImageError(Exception):
    """Base class for pixel buffer errors."""


class AveragingZeroImagesError(ImageError, ValueError):
    """Raised when averaging an empty collection of images."""


class DimensionsMismatchError(ImageError, ValueError):
    """Raised when images of different sizes are averaged."""


class Image:
    """
    A linear RGB pixel buffer backed by a (height, width, 3) float64 array.

    Used both as a render target and as the source of image textures and
    environment maps.
    """
    def __init__(self, data: np.ndarray):
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected a (height, width, 3) array, got {data.shape}")
        self.data = data

    @classmethod
    def with_dimensions(cls, width: int, height: int, color: Vector3 = BLACK) -> "Image":
        width = max(1, int(width))
        height = max(1, int(height))
        data = np.empty((height, width, 3), dtype=np.float64)
        data[:, :] = (color.x, color.y, color.z)
        return cls(data)

    @classmethod
    def with_aspect_ratio(cls, width: int, aspect_ratio: float, color: Vector3 = BLACK) -> "Image":
        return cls.with_dimensions(width, int(width / aspect_ratio), color)

    @classmethod
    def from_array(cls, array) -> "Image":
        return cls(np.array(array, dtype=np.float64))

    @classmethod
    def load(cls, path: str) -> "Image":
        """
        Loads an image file into linear [0, 1] values. Raises FileNotFoundError
        for a missing file and lets PIL errors propagate for unreadable ones.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Image file not found: {path}")
        with PILImage.open(path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0
        return cls(data)

    @staticmethod
    def average(images: Sequence["Image"]) -> "Image":
        """
        Averages images pixel by pixel. All images must have the same number
        of pixels and at least one image must be given.
        """
        if len(images) == 0:
            raise AveragingZeroImagesError("Cannot average zero images")
        pixel_count = images[0].pixel_count
        if any(image.pixel_count != pixel_count for image in images):
            raise DimensionsMismatchError("Cannot average images with different pixel counts")

        total = np.zeros_like(images[0].data)
        for image in images:
            total += image.data.reshape(total.shape)
        return Image(total / len(images))

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def resolution(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def aspect(self) -> float:
        return self.width / self.height

    def get_pixel(self, x: int, y: int) -> Vector3:
        r, g, b = self.data[y, x]
        return Vector3(float(r), float(g), float(b))

    def set_pixel(self, x: int, y: int, color: Vector3) -> None:
        self.data[y, x] = (color.x, color.y, color.z)

    def get_pixel_by_uv(self, u: float, v: float) -> Vector3:
        """
        Looks a pixel up by texture coordinates. Both coordinates repeat and
        v runs from the bottom of the image to the top.
        """
        x = min(int(clamp_repeating(u) * self.width), self.width - 1)
        y = min(int((1.0 - clamp_repeating(v)) * self.height), self.height - 1)
        return self.get_pixel(x, y)

    def copy(self) -> "Image":
        return Image(self.data.copy())

    def __copy__(self) -> "Image":
        return self.copy()

    def to_array(self, gamma: bool = True) -> np.ndarray:
        """
        Returns the image as 8-bit RGB, optionally converted to gamma 2 space.
        """
        data = np.clip(self.data, 0.0, 1.0)
        if gamma:
            data = np.sqrt(data)
        return np.minimum(data * 256, 255).astype(np.uint8)

    def save(self, path: str, gamma: bool = True) -> None:
        """Writes the image through PIL; the format follows the file extension."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        PILImage.fromarray(self.to_array(gamma), 'RGB').save(path)

    def write_ppm(self, path: str, gamma: bool = True) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        pixels = self.to_array(gamma)
        lines: List[str] = [f"P3\n{self.width} {self.height}\n255\n"]
        for row in pixels:
            for r, g, b in row:
                lines.append(f"{r} {g} {b}\n")
        with open(path, "w") as f:
            f.writelines(lines)

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"
