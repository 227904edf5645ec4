# scenes.py
"""
Scene factories. Each returns (CameraSettings, root hittable); the root is
built once and only read while rendering.
"""
from pathtracer.camera.camera import CameraSettings
from pathtracer.core.utils import rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.quad import Quad
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import RotationY, Translation
from pathtracer.geometry.world import HittableList
from pathtracer.materials import presets
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import Palette
from pathtracer.renderer.background import BackgroundColor, GradientBackground


def checker_balls():
    """Ground sphere with a checker texture and three balls: glass, diffuse and metal."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(presets.checkerboard())))
    world.add(Sphere(Vector3(0, 1, 0), 1.0, presets.dielectric("glass")))
    world.add(Sphere(Vector3(0, 1, 0), 0.8, presets.dielectric("air_in_glass")))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    settings = CameraSettings(position=Vector3(13, 2, 3), focus_distance=10.0,
                              defocus_angle=0.6, fov=20.0, samples=100,
                              background=GradientBackground())
    settings.look_at(Vector3(0, 0, 0))
    return settings, BVHNode(world.objects)


def motion_blur_balls():
    """Random small balls, the diffuse ones bouncing during the exposure."""
    r = rng()
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(presets.checkerboard())))

    for a in range(-6, 6):
        for b in range(-6, 6):
            choose_mat = r.random()
            center = Vector3(a + 0.9 * r.random(), 0.2, b + 0.9 * r.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Vector3(r.random() * r.random(), r.random() * r.random(),
                                 r.random() * r.random())
                world.add(Sphere(center, 0.2, Lambertian(albedo),
                                 displacement=Vector3(0, r.uniform(0, 0.5), 0)))
            elif choose_mat < 0.95:
                albedo = Vector3(r.uniform(0.5, 1), r.uniform(0.5, 1), r.uniform(0.5, 1))
                world.add(Sphere(center, 0.2, Metal(albedo, r.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, presets.dielectric("glass")))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, presets.dielectric("glass")))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, presets.metal("mirror")))

    settings = CameraSettings(position=Vector3(13, 2, 3), focus_distance=10.0,
                              defocus_angle=0.6, fov=20.0, samples=100,
                              background=GradientBackground())
    settings.look_at(Vector3(0, 0, 0))
    return settings, BVHNode(world.objects)


def noise_spheres():
    """Turbulent ground with a marble ball."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(presets.turbulence())))
    world.add(Sphere(Vector3(0, 2, 0), 2, Lambertian(presets.marble())))

    settings = CameraSettings(position=Vector3(13, 2, 3), focus_distance=3.0, fov=20.0,
                              background=BackgroundColor(Vector3(0.7, 0.8, 1.0)))
    settings.look_at(Vector3(0, 0, 0))
    return settings, BVHNode(world.objects)


def quads():
    """Five colored quads facing the camera like the inside of a box."""
    world = HittableList()
    world.add(Quad(Vector3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0),
                   Lambertian(Vector3(1.0, 0.2, 0.2))))
    world.add(Quad(Vector3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0),
                   Lambertian(Vector3(0.2, 1.0, 0.2))))
    world.add(Quad(Vector3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0),
                   Lambertian(Vector3(0.2, 0.2, 1.0))))
    world.add(Quad(Vector3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4),
                   Lambertian(Palette.ORANGE)))
    world.add(Quad(Vector3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4),
                   Lambertian(Palette.TEAL)))

    settings = CameraSettings(position=Vector3(0, 0, 9), focus_distance=9.0, fov=80.0,
                              background=BackgroundColor(Vector3(0.7, 0.8, 1.0)))
    settings.look_at(Vector3(0, 0, 0))
    return settings, BVHNode(world.objects)


def simple_light():
    """Marble spheres lit only by an area light and a glowing sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(presets.marble())))
    world.add(Sphere(Vector3(0, 2, 0), 2, Lambertian(presets.marble())))
    world.add(Sphere(Vector3(0, 7, 0), 2, presets.light("daylight", 4.0)))
    world.add(Quad(Vector3(3, 1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0),
                   presets.light("warm", 4.0)))

    settings = CameraSettings(position=Vector3(26, 3, 6), focus_distance=26.0, fov=20.0,
                              samples=100, background=BackgroundColor())
    settings.look_at(Vector3(0, 2, 0))
    return settings, BVHNode(world.objects)


def cornell_box():
    """The Cornell box with two rotated boxes."""
    red = Lambertian(Palette.RED)
    white = Lambertian(Palette.WHITE)
    green = Lambertian(Palette.GREEN)
    light = DiffuseLight(Vector3(15, 15, 15))
    a = 555.0

    world = HittableList()
    world.add(Quad(Vector3(a, 0, 0), Vector3(0, a, 0), Vector3(0, 0, a), green))
    world.add(Quad(Vector3(0, 0, 0), Vector3(0, a, 0), Vector3(0, 0, a), red))
    world.add(Quad(Vector3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105), light))
    world.add(Quad(Vector3(0, 0, 0), Vector3(a, 0, 0), Vector3(0, 0, a), white))
    world.add(Quad(Vector3(a, a, a), Vector3(-a, 0, 0), Vector3(0, 0, -a), white))
    world.add(Quad(Vector3(0, 0, a), Vector3(a, 0, 0), Vector3(0, a, 0), white))

    tall = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white)
    world.add(Translation(RotationY(tall, 15), Vector3(265, 0, 295)))
    short = Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    world.add(Translation(RotationY(short, -18), Vector3(130, 0, 65)))

    settings = CameraSettings(position=Vector3(278, 278, -800), forward=Vector3(0, 0, 1),
                              focus_distance=800.0, fov=40.0, samples=200, max_bounces=50,
                              background=BackgroundColor())
    return settings, BVHNode(world.objects)


SCENES = {
    "checker_balls": checker_balls,
    "motion_blur_balls": motion_blur_balls,
    "noise_spheres": noise_spheres,
    "quads": quads,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
}
