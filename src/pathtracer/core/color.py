# core/color.py
import math
from typing import Tuple
from pathtracer.core.vector import Vector3

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)


def _clamp01(c: float) -> float:
    if c < 0.0:
        return 0.0
    if c > 1.0:
        return 1.0
    return c


def clamp(color: Vector3) -> Vector3:
    """
    Clamps every channel of a color to [0, 1].
    """
    return Vector3(_clamp01(color.x), _clamp01(color.y), _clamp01(color.z))


def to_gamma_space(color: Vector3) -> Vector3:
    """
    Converts a linear color to gamma 2 space.
    """
    return Vector3(math.sqrt(max(color.x, 0.0)),
                   math.sqrt(max(color.y, 0.0)),
                   math.sqrt(max(color.z, 0.0)))


def to_bytes(color: Vector3) -> Tuple[int, int, int]:
    c = clamp(color)
    return (min(255, int(c.x * 256)), min(255, int(c.y * 256)), min(255, int(c.z * 256)))
