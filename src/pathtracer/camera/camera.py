# camera/camera.py
import math
from pathtracer.core.color import BLACK, WHITE, clamp
from pathtracer.core.image import Image
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk, rng
from pathtracer.core.vector import Vector3
from pathtracer.camera.viewport import Viewport
from pathtracer.renderer.background import Background, BackgroundColor

# Hits closer than this to a ray's origin are ignored to avoid shadow acne
BIAS = 0.001


class CameraSettings:
    """
    User-facing camera parameters. Angles are in degrees.

    build() turns the settings into a Camera for a given render target.
    """
    def __init__(self,
                 position: Vector3 = None,
                 forward: Vector3 = None,
                 up: Vector3 = None,
                 focus_distance: float = 1.0,
                 defocus_angle: float = 0.0,
                 fov: float = 80.0,
                 samples: int = 9,
                 max_bounces: int = 50,
                 background: Background = None):
        self.position = position if position is not None else Vector3(0.0, 0.0, 0.0)
        self.forward = forward if forward is not None else Vector3(0.0, 0.0, -1.0)
        self.up = up if up is not None else Vector3(0.0, 1.0, 0.0)
        self.focus_distance = focus_distance
        self.defocus_angle = defocus_angle
        self.fov = fov
        self.samples = samples
        self.max_bounces = max_bounces
        self.background = background if background is not None else BackgroundColor()

    def look_at(self, target: Vector3) -> "CameraSettings":
        self.forward = target - self.position
        return self

    def build(self, target: Image) -> "Camera":
        forward = self.forward.normalize()
        right = forward.cross(self.up.normalize()).normalize()
        up = right.cross(forward)

        h = math.tan(math.radians(self.fov) / 2.0)
        viewport_height = 2.0 * h * self.focus_distance
        viewport = Viewport.with_center(
            self.position + forward * self.focus_distance,
            (viewport_height * target.aspect(), viewport_height),
            target.resolution,
            right,
            -up
        )

        defocus_radius = self.focus_distance * math.tan(math.radians(self.defocus_angle / 2.0))

        return Camera(
            position=self.position,
            viewport=viewport,
            defocus_disk=(right * defocus_radius, up * defocus_radius),
            resolution=target.resolution,
            samples=self.samples,
            max_bounces=self.max_bounces,
            background=self.background
        )


class Camera:
    """
    Generates primary rays and integrates radiance along them.

    A Camera only reads its fields while rendering, so render threads work on
    shallow copies of one instance.
    """
    def __init__(self, position: Vector3, viewport: Viewport, defocus_disk,
                 resolution, samples: int = 9, max_bounces: int = 50,
                 background: Background = None):
        self.position = position
        self.viewport = viewport
        self.defocus_disk = defocus_disk
        self.resolution = tuple(resolution)
        self.samples = samples
        self.max_bounces = max_bounces
        self.background = background if background is not None else BackgroundColor()

    def get_ray(self, x: int, y: int, sample_x: int, sample_y: int,
                subpixel_scale: float) -> Ray:
        """
        Primary ray through stratum (sample_x, sample_y) of pixel (x, y),
        starting on the defocus disk at a random time.
        """
        target = self.viewport.pixel_sample(x, y, sample_x, sample_y, subpixel_scale)
        lens = random_in_unit_disk()
        origin = (self.position
                  + self.defocus_disk[0] * lens.x
                  + self.defocus_disk[1] * lens.y)
        return Ray.look_at(origin, target, rng().random())

    def ray_color(self, world, ray: Ray) -> Vector3:
        """
        Radiance along ray. Paths longer than max_bounces contribute nothing.
        """
        color = BLACK
        throughput = WHITE
        for _ in range(self.max_bounces):
            rec = world.hit(ray, Interval(BIAS, math.inf))
            if rec is None:
                return color + throughput * self.background.background(ray)

            emitted = rec.material.emitted(rec.u, rec.v, rec.p)
            color = color + throughput * emitted

            scattered = rec.material.scatter(ray, rec)
            if scattered is None:
                return color
            ray, attenuation = scattered
            throughput = throughput * attenuation
        return color

    def render(self, world, samples: float, target: Image, log: bool = False) -> Image:
        """
        Renders every pixel of target with about `samples` samples per pixel,
        taken on a stratified N x N grid with N = floor(sqrt(samples)).
        """
        if target.resolution != self.resolution:
            raise ValueError(
                f"Target resolution {target.resolution} does not match camera "
                f"resolution {self.resolution}")

        grid = max(1, int(math.sqrt(samples)))
        subpixel_scale = 1.0 / grid
        sample_count = grid * grid
        width, height = target.resolution

        for y in range(height):
            for x in range(width):
                color = BLACK
                for sample_y in range(grid):
                    for sample_x in range(grid):
                        ray = self.get_ray(x, y, sample_x, sample_y, subpixel_scale)
                        color = color + self.ray_color(world, ray)
                target.set_pixel(x, y, clamp(color / sample_count))

            if log:
                print(f"\rprogress: {(y + 1) * 100.0 / height:.2f}%", end="", flush=True)
        if log:
            print()

        return target
