# core/utils.py
import math
import random
import threading
from pathtracer.core.vector import Vector3

_local = threading.local()


def rng() -> random.Random:
    """
    Returns the random source of the calling thread. Every render thread
    draws from its own generator, so no state is shared between threads.
    """
    generator = getattr(_local, "generator", None)
    if generator is None:
        generator = random.Random()
        _local.generator = generator
    return generator


def seed(value) -> None:
    """
    Seeds the calling thread's random source.
    """
    rng().seed(value)


def random_in_unit_sphere() -> Vector3:
    """Rejection-samples a point strictly inside the unit sphere."""
    r = rng()
    while True:
        p = Vector3(r.uniform(-1, 1),
                    r.uniform(-1, 1),
                    r.uniform(-1, 1))
        if 1e-160 < p.dot(p) < 1.0:
            return p


def random_unit_vector() -> Vector3:
    """Uniform direction on the unit sphere."""
    return random_in_unit_sphere().normalize()


def random_in_unit_disk() -> Vector3:
    """
    Returns a random point inside the unit disk on the z = 0 plane.
    """
    r = rng()
    while True:
        p = Vector3(r.uniform(-1, 1), r.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """Mirror image of v about the plane with unit normal n."""
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n using Snell's
    law, split into the parts perpendicular and parallel to the normal.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def clamp_repeating(x: float) -> float:
    """Wraps x into [0, 1)."""
    rem = math.fmod(x, 1.0)
    if rem < 0.0:
        rem += 1.0
    if rem >= 1.0:
        rem = 0.0
    return rem
