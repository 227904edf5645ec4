# core/ray.py
from pathtracer.core.vector import Vector3


class Ray:
    """
    Half-line origin + t * direction. The direction is not normalized and
    time in [0, 1) places the ray within the exposure for motion blur.
    """
    __slots__ = ("origin", "direction", "time")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    @staticmethod
    def look_at(origin: Vector3, target: Vector3, time: float = 0.0) -> "Ray":
        """Ray from origin that reaches target at t = 1."""
        return Ray(origin, target - origin, time)

    def at(self, t: float) -> Vector3:
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction}, time={self.time})"
