# scenes.py
import sys
from core.vector import Point3, Vector3
from core.utils import random_vector
from camera.camera import Camera
from geometry.sphere import Sphere, MovingSphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import MetalPresets, DielectricPresets, ColorPresets, TexturePresets

class Scene:
    """
    A camera and the world it looks at. The world's BVH is built once and
    only read afterwards, so a scene can be shipped to render workers as is.
    """
    def __init__(self, camera: Camera, world: HittableList):
        self.camera = camera
        self.world = world

def _default_camera(aspect_ratio: float, aperture: float) -> Camera:
    return Camera(
        look_from=Point3(13, 2, 3),
        look_at=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=aperture,
        focus_dist=10.0,
        time0=0.0,
        time1=1.0,
    )

def random_world(rng) -> HittableList:
    """
    Checkered ground, a grid of small spheres with random materials (about
    half of them bouncing upward during the shutter) and three large spheres.
    """
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                material = Lambertian(random_vector(rng) * random_vector(rng))
            elif choose_mat < 0.95:
                # metal
                material = Metal(random_vector(rng, 0.5, 1.0), rng.uniform(0.0, 0.5))
            else:
                material = DielectricPresets.glass()

            if rng.random() > 0.5:
                target = center + Vector3(0, rng.uniform(0.0, 0.5), 0)
                world.add(MovingSphere(center, target, 0.2, material, 0.0, 1.0))
            else:
                world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.polished_bronze()))
    return world

def two_spheres_world() -> HittableList:
    """Two large checkered spheres touching at the origin."""
    checker = Lambertian(TexturePresets.checkerboard())
    world = HittableList()
    world.add(Sphere(Point3(0, -10, 0), 10, checker))
    world.add(Sphere(Point3(0, 10, 0), 10, checker))
    return world

def random_scene(aspect_ratio: float, rng, sample_all_axes: bool = False) -> Scene:
    world = random_world(rng)
    print(f"Random scene: {len(world)} spheres", file=sys.stderr)
    world.build_bvh(0.0, 1.0, rng, sample_all_axes=sample_all_axes)
    return Scene(_default_camera(aspect_ratio, aperture=0.1), world)

def two_spheres(aspect_ratio: float, rng, sample_all_axes: bool = False) -> Scene:
    world = two_spheres_world()
    world.build_bvh(0.0, 1.0, rng, sample_all_axes=sample_all_axes)
    return Scene(_default_camera(aspect_ratio, aperture=0.0), world)

SCENES = {
    "random": random_scene,
    "two_spheres": two_spheres,
}
