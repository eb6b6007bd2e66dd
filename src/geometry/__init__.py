# geometry/__init__.py
from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere, MovingSphere, get_sphere_uv
from geometry.bvh import BVHNode
from geometry.world import HittableList
