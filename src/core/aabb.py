# src/core/aabb.py
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: intersect the running interval with each axis' crossings.
        for axis in range(3):
            d = ray.direction[axis]
            o = ray.origin[axis]
            if d == 0.0:
                # Parallel to the slab: both crossings are infinite.
                if o < self.minimum[axis] or o > self.maximum[axis]:
                    return False
                continue
            c0 = (self.minimum[axis] - o) / d
            c1 = (self.maximum[axis] - o) / d
            t_min = max(min(c0, c1), t_min)
            t_max = min(max(c0, c1), t_max)
            if t_max < t_min:
                return False
        return True

    def hit_optimized(self, ray, t_min: float, t_max: float) -> bool:
        # Same test with one division per axis and a swap on negative directions.
        for axis in range(3):
            d = ray.direction[axis]
            o = ray.origin[axis]
            if d == 0.0:
                if o < self.minimum[axis] or o > self.maximum[axis]:
                    return False
                continue
            inv_d = 1.0 / d
            t0 = (self.minimum[axis] - o) * inv_d
            t1 = (self.maximum[axis] - o) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
                   for a in range(3))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
