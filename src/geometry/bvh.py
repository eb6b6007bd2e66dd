# src/geometry/bvh.py
from core.aabb import AABB

def box_minimum(obj, axis: int, time0: float, time1: float) -> float:
    """Sort key: the minimum corner of an object's box along one axis."""
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError("No bounding box in BVHNode constructor")
    return box.minimum[axis]

class BVHNode:
    """
    Binary bounding volume hierarchy over a list of hittables.

    Each node picks a random split axis, orders its objects by the minimum
    corner of their boxes along that axis and splits them at the midpoint.
    Only the x and y axes are sampled unless sample_all_axes is set. A single
    object ends up as both children of its node.
    """
    def __init__(self, objects: list, time0: float, time1: float, rng,
                 start: int = 0, end: int = None, sample_all_axes: bool = False):
        if end is None:
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise ValueError("Cannot build a BVH from zero objects")

        axis = int(rng.integers(0, 3 if sample_all_axes else 2))
        self.axis = axis

        def key(obj):
            return box_minimum(obj, axis, time0, time1)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start + 1]) < key(objects[start]):
                self.left, self.right = objects[start + 1], objects[start]
            else:
                self.left, self.right = objects[start], objects[start + 1]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, time0, time1, rng, start, mid, sample_all_axes)
            self.right = BVHNode(objects, time0, time1, rng, mid, end, sample_all_axes)

        box_left = self.left.bounding_box(time0, time1)
        box_right = self.right.bounding_box(time0, time1)
        if box_left is None and box_right is None:
            raise ValueError("No bounding box in BVHNode constructor")
        if box_left is None:
            self.box = box_right
        elif box_right is None:
            self.box = box_left
        else:
            self.box = AABB.surrounding_box(box_left, box_right)

    def hit(self, ray, t_min: float, t_max: float):
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # The right branch may only report something closer than the left hit.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max)

        return hit_right or hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box
