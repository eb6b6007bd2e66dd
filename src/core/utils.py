# core/utils.py
import math
from core.vector import Vector3

# Every sampling routine takes an explicit numpy Generator so that each
# worker (and each pixel) owns its random stream.

def random_vector(rng, min_value: float = 0.0, max_value: float = 1.0) -> Vector3:
    """
    Returns a vector whose components are drawn independently from
    [min_value, max_value).
    """
    return Vector3(rng.uniform(min_value, max_value),
                   rng.uniform(min_value, max_value),
                   rng.uniform(min_value, max_value))

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk on the xy-plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.length_squared() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, eta_ratio: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n, where
    eta_ratio is the ratio of indices of refraction (incident over transmitted).
    """
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * eta_ratio
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
