# core/aabb.py
import math
from typing import List, Optional
from pathtracer.core.interval import Interval
from pathtracer.core.vector import Vector3

# Minimum thickness of a box along any axis; planar primitives would
# otherwise produce zero-volume boxes.
PADDING = 0.0001


class AABB:
    """
    Axis-aligned bounding box stored as one interval per axis.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval = None, y: Interval = None, z: Interval = None):
        self.x = x if x is not None else Interval()
        self.y = y if y is not None else Interval()
        self.z = z if z is not None else Interval()

    @staticmethod
    def from_extrema(a: Vector3, b: Vector3) -> "AABB":
        return AABB(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z))
        )

    @staticmethod
    def empty() -> "AABB":
        return AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.start, self.y.start, self.z.start)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.end, self.y.end, self.z.end)

    def axis(self, n: int) -> Interval:
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"Invalid axis: {n}")

    def hit(self, ray, ray_t: Interval) -> Optional[Interval]:
        """
        Slab test. Returns the part of ray_t during which the ray is inside
        the box, or None if the ray misses it within ray_t. The box is
        closed, so a ray that only touches an edge or corner still hits.
        """
        t_min = ray_t.start
        t_max = ray_t.end
        for a in range(3):
            d = ray.direction.axis(a)
            inv_d = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            origin = ray.origin.axis(a)
            slab = self.axis(a)
            t0 = (slab.start - origin) * inv_d
            t1 = (slab.end - origin) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max < t_min:
                return None
        return Interval(t_min, t_max)

    def pad(self, delta: float = PADDING) -> "AABB":
        return AABB(self.x.pad(delta), self.y.pad(delta), self.z.pad(delta))

    def contains(self, other: "AABB") -> bool:
        """True when other lies entirely inside this box."""
        for a in range(3):
            mine = self.axis(a)
            theirs = other.axis(a)
            if theirs.start < mine.start or theirs.end > mine.end:
                return False
        return True

    def corners(self) -> List[Vector3]:
        return [
            Vector3(x, y, z)
            for x in (self.x.start, self.x.end)
            for y in (self.y.start, self.y.end)
            for z in (self.z.start, self.z.end)
        ]

    def __add__(self, offset: Vector3) -> "AABB":
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def combine(self, other: "AABB") -> "AABB":
        return AABB(self.x.combine(other.x), self.y.combine(other.y), self.z.combine(other.z))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return box0.combine(box1)

    def __repr__(self) -> str:
        return f"AABB({self.x}, {self.y}, {self.z})"
