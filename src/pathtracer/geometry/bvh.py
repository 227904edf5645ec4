# geometry/bvh.py
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import rng
from pathtracer.geometry.hittable import Hittable, HitRecord


class EmptySceneError(ValueError):
    """Raised when a BVH is built over zero objects."""


def _axis_key(axis: int):
    return lambda obj: obj.bounding_box().axis(axis).start


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a list of hittables.

    Each level sorts its objects along a randomly chosen axis by the start of
    their bounding boxes and splits them in two halves by count. A node with a
    single object holds it in both children.
    """
    def __init__(self, objects: List[Hittable], start: int = 0, end: Optional[int] = None):
        if end is None:
            # Sorting below works on slices; keep the caller's list untouched
            objects = list(objects)
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise EmptySceneError("Cannot build a BVH from zero objects")

        axis = rng().randrange(3)
        key = _axis_key(axis)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if key(first) < key(second):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid)
            self.right = BVHNode(objects, mid, end)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Children search all of ray_t: a hit on the box's exit face lies at
        # the end of the clipped interval, which is excluded
        if self.box.hit(ray, ray_t) is None:
            return None

        hit_left = self.left.hit(ray, ray_t)
        # Only a hit closer than the left one can replace it
        right_t = Interval(ray_t.start, hit_left.t if hit_left is not None else ray_t.end)
        hit_right = self.right.hit(ray, right_t)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)
