# src/renderer/raytracer.py
import math
import sys
from concurrent.futures import ProcessPoolExecutor
from typing import Tuple
import numpy as np
from core.ray import Ray
from core.vector import Color
from renderer.tone_mapping import gamma_correct

MAX_DEPTH = 50
T_MIN = 0.001  # Ignore hits very close to the origin (shadow acne)

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def background(ray: Ray) -> Color:
    """Vertical white to sky-blue gradient seen by rays that escape the scene."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world, depth: int, rng) -> Color:
    """
    Radiance carried back along `ray`. Recursion stops when the depth budget
    runs out, when a material absorbs the ray, or when the ray escapes.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK
    attenuation, ray_out = scattered
    return attenuation * ray_color(ray_out, world, depth - 1, rng)

def pixel_position(index: int, width: int, height: int) -> Tuple[int, int]:
    """(row, column) of a flat pixel index; index 0 is the top-left pixel."""
    return height - 1 - index // width, index % width

def render_pixel(camera, world, index: int, width: int, height: int,
                 samples_per_pixel: int, max_depth: int, seed: int) -> Tuple[float, float, float]:
    """
    Sum of `samples_per_pixel` radiance samples for one pixel.

    The pixel draws from its own random stream keyed on (seed, index), so the
    result does not depend on which worker renders it.
    """
    rng = np.random.default_rng([seed, index])
    row, column = pixel_position(index, width, height)
    pixel_color = BLACK
    for _ in range(samples_per_pixel):
        u = (column + rng.random()) / max(width - 1, 1)
        v = (row + rng.random()) / max(height - 1, 1)
        ray = camera.get_ray(u, v, rng)
        pixel_color = pixel_color + ray_color(ray, world, max_depth, rng)
    return pixel_color.x, pixel_color.y, pixel_color.z

# Per-process scene installed by the pool initializer.
_worker_state = {}

def _init_worker(camera, world, settings):
    _worker_state["camera"] = camera
    _worker_state["world"] = world
    _worker_state["settings"] = settings

def _render_pixel_task(index: int) -> Tuple[float, float, float]:
    return render_pixel(_worker_state["camera"], _worker_state["world"], index,
                        **_worker_state["settings"])

class Renderer:
    """
    CPU path tracer driving ray_color over every pixel of the image.

    With workers == 1 pixels are rendered in-process; otherwise a process pool
    receives the scene once per worker and consumes the flat pixel index
    space one image row per chunk. Results are collected in index order.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = MAX_DEPTH, workers: int = None, seed: int = None,
                 verbose: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.seed = seed if seed is not None else np.random.SeedSequence().entropy
        self.verbose = verbose

    def _settings(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "samples_per_pixel": self.samples_per_pixel,
            "max_depth": self.max_depth,
            "seed": self.seed,
        }

    def _report(self, message: str, end: str = "\n"):
        if self.verbose:
            print(message, end=end, file=sys.stderr, flush=True)

    def _collect(self, results) -> np.ndarray:
        accumulated = np.zeros((self.width * self.height, 3), dtype=np.float64)
        remaining_scanlines = self.height
        for index, color in enumerate(results):
            if index % self.width == 0:
                self._report(f"\rScanlines remaining: {remaining_scanlines:04d}", end="")
                remaining_scanlines -= 1
            accumulated[index] = color
        self._report("\nDone!")
        return accumulated.reshape(self.height, self.width, 3)

    def accumulate(self, camera, world) -> np.ndarray:
        """
        Summed samples for every pixel as a (height, width, 3) float array,
        rows ordered top to bottom.
        """
        settings = self._settings()
        total = self.width * self.height
        if self.workers == 1:
            return self._collect(render_pixel(camera, world, index, **settings)
                                 for index in range(total))

        with ProcessPoolExecutor(max_workers=self.workers, initializer=_init_worker,
                                 initargs=(camera, world, settings)) as executor:
            return self._collect(executor.map(_render_pixel_task, range(total),
                                              chunksize=self.width))

    def render(self, camera, world) -> np.ndarray:
        """Render the scene to a (height, width, 3) uint8 image."""
        return gamma_correct(self.accumulate(camera, world), self.samples_per_pixel)
