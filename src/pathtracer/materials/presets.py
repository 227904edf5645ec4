# materials/presets.py
"""
Named materials and textures shared by the built-in scenes.
"""
from typing import Dict
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import (CheckerTexture, MarbleTexture, NoiseTexture,
                                           TurbulenceTexture)

# name -> (albedo, fuzz)
METALS = {
    "gold": (Vector3(1.0, 0.78, 0.34), 0.1),
    "silver": (Vector3(0.95, 0.93, 0.88), 0.05),
    "copper": (Vector3(0.95, 0.64, 0.54), 0.1),
    "mirror": (Vector3(0.95, 0.95, 0.95), 0.0),
    "brushed": (Vector3(0.8, 0.8, 0.8), 0.3),
}

# name -> index of refraction
DIELECTRICS = {
    "glass": 1.5,
    "water": 1.33,
    "diamond": 2.42,
    # A bubble of air inside glass
    "air_in_glass": 1.0 / 1.5,
}

# name -> emitted color at intensity 1
LIGHTS = {
    "warm": Vector3(1.0, 0.95, 0.9),
    "cool": Vector3(0.9, 0.95, 1.0),
    "daylight": Vector3(1.0, 1.0, 1.0),
}


class Palette:
    """Diffuse albedos used by the scenes. The first three are the Cornell box walls."""
    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    WHITE = Vector3(0.73, 0.73, 0.73)
    BLUE = Vector3(0.1, 0.2, 0.5)
    ORANGE = Vector3(1.0, 0.5, 0.0)
    TEAL = Vector3(0.2, 0.8, 0.8)
    GRAY = Vector3(0.5, 0.5, 0.5)


def _lookup(table: Dict, kind: str, name: str):
    if name not in table:
        raise ValueError(f"Unknown {kind} preset '{name}', expected one of: {', '.join(sorted(table))}")
    return table[name]


def metal(name: str) -> Metal:
    albedo, fuzz = _lookup(METALS, "metal", name)
    return Metal(albedo, fuzz)


def dielectric(name: str) -> Dielectric:
    return Dielectric(_lookup(DIELECTRICS, "dielectric", name))


def light(name: str, intensity: float = 1.0) -> DiffuseLight:
    return DiffuseLight(_lookup(LIGHTS, "light", name) * intensity)


def matte(color: Vector3) -> Lambertian:
    return Lambertian(color)


def checkerboard(even: Vector3 = None, odd: Vector3 = None, scale: float = 0.32) -> CheckerTexture:
    """Dark green and off-white cubes unless other colors are given."""
    if even is None:
        even = Vector3(0.2, 0.3, 0.1)
    if odd is None:
        odd = Vector3(0.9, 0.9, 0.9)
    return CheckerTexture(even, odd, scale)


def marble(scale: float = 4.0, turbulence: float = 10.0) -> MarbleTexture:
    return MarbleTexture(scale=scale, turbulence=turbulence)


def noise(scale: float = 4.0) -> NoiseTexture:
    return NoiseTexture(scale)


def turbulence(scale: float = 1.0, depth: int = 10) -> TurbulenceTexture:
    return TurbulenceTexture(scale, depth)
