# core/perlin.py
import math
import numpy as np
from numba import njit
from pathtracer.core.vector import Vector3

POINT_COUNT = 256


@njit(cache=True)
def _noise(points, perm_x, perm_y, perm_z, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    ix = int(fx)
    iy = int(fy)
    iz = int(fz)

    # Hermite smoothing of the cell offsets
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for i in range(2):
        for j in range(2):
            for k in range(2):
                idx = (perm_x[(ix + i) & 255] ^
                       perm_y[(iy + j) & 255] ^
                       perm_z[(iz + k) & 255])
                gx = points[idx, 0]
                gy = points[idx, 1]
                gz = points[idx, 2]
                weight = ((i * uu + (1 - i) * (1.0 - uu)) *
                          (j * vv + (1 - j) * (1.0 - vv)) *
                          (k * ww + (1 - k) * (1.0 - ww)))
                accum += weight * (gx * (u - i) + gy * (v - j) + gz * (w - k))
    return accum


@njit(cache=True)
def _turbulence(points, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(points, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    """
    Gradient noise over 3D points.

    The gradient table and the three permutation tables are generated once at
    construction and are read-only afterwards, so one instance can be sampled
    from any number of render threads.
    """
    def __init__(self, seed=None):
        generator = np.random.default_rng(seed)
        points = generator.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        points[np.linalg.norm(points, axis=1) < 1e-8] = (1.0, 0.0, 0.0)
        norms = np.linalg.norm(points, axis=1)
        self.points = points / norms[:, None]
        self.perm_x = generator.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = generator.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = generator.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Vector3) -> float:
        """Returns a smooth value in roughly [-1, 1]."""
        return _noise(self.points, self.perm_x, self.perm_y, self.perm_z,
                      float(p.x), float(p.y), float(p.z))

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Absolute sum of depth octaves of noise, each half the weight of the last."""
        return _turbulence(self.points, self.perm_x, self.perm_y, self.perm_z,
                           float(p.x), float(p.y), float(p.z), int(depth))
