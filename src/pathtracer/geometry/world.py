# geometry/world.py
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A flat list of Hittable objects, intersected by linear scan until
    build_bvh() is called, after which hits go through the BVH.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = []
        self.box = AABB.empty()
        self.bvh_root: Optional[BVHNode] = None
        for obj in objects:
            self.add(obj)

    def add(self, obj: Hittable) -> "HittableList":
        self.objects.append(obj)
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())
        self.bvh_root = None
        return self

    def clear(self):
        self.objects.clear()
        self.box = AABB.empty()
        self.bvh_root = None

    def build_bvh(self) -> BVHNode:
        self.bvh_root = BVHNode(self.objects)
        return self.bvh_root

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, ray_t)

        hit_record = None
        closest_so_far = ray_t.end
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.start, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box

    def __len__(self) -> int:
        return len(self.objects)
