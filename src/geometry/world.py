# src/geometry/world.py
from typing import Optional, List
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode

class HittableList(Hittable):
    """
    A list of Hittable objects. Until build_bvh() is called, hits are found by
    a linear scan; afterwards the BVH root answers them.
    """
    def __init__(self, objects: List[Hittable] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root = None  # top-level BVH node

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float, time1: float, rng, sample_all_axes: bool = False) -> BVHNode:
        # BVHNode sorts in place, so hand it a copy to keep insertion order here.
        self.bvh_root = BVHNode(list(self.objects), time0, time1, rng,
                                sample_all_axes=sample_all_axes)
        return self.bvh_root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box
