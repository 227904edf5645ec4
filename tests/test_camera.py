import math

import pytest

from pathtracer.camera.camera import BIAS, Camera, CameraSettings
from pathtracer.camera.viewport import Viewport
from pathtracer.core.color import BLACK, WHITE
from pathtracer.core.image import Image
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.renderer.background import BackgroundColor, EnvironmentMap, GradientBackground


def build_camera(width=1, height=1, **settings):
    return CameraSettings(**settings).build(Image.with_dimensions(width, height))


def test_viewport_with_center():
    viewport = Viewport.with_center(Vector3(0, 0, -1), (2.0, 2.0), (2, 2),
                                    Vector3(1, 0, 0), Vector3(0, -1, 0))
    assert viewport.origin.is_close(Vector3(-1, 1, -1))
    assert viewport.edges[0].is_close(Vector3(2, 0, 0))
    assert viewport.edges[1].is_close(Vector3(0, -2, 0))
    assert viewport.pixel_size[0].is_close(Vector3(1, 0, 0))
    assert viewport.pixel_size[1].is_close(Vector3(0, -1, 0))


def test_camera_viewport_geometry():
    camera = build_camera(focus_distance=1.0, defocus_angle=10.0, fov=90.0)
    viewport = camera.viewport
    assert viewport.origin.is_close(Vector3(-1, 1, -1), 1e-9)
    assert viewport.width == pytest.approx(2.0)
    assert viewport.height == pytest.approx(2.0)
    assert viewport.edges[0].normalize().is_close(Vector3(1, 0, 0))
    assert viewport.edges[1].normalize().is_close(Vector3(0, -1, 0))
    assert camera.resolution == (1, 1)


def test_camera_look_at():
    settings = CameraSettings(position=Vector3(0, 0, 5)).look_at(Vector3(0, 0, 0))
    assert settings.forward == Vector3(0, 0, -5)
    camera = settings.build(Image.with_dimensions(3, 3))
    center = camera.viewport.origin + (camera.viewport.edges[0] + camera.viewport.edges[1]) * 0.5
    assert center.is_close(Vector3(0, 0, 4))


def test_camera_defaults():
    settings = CameraSettings()
    assert settings.fov == 80.0
    assert settings.samples == 9
    assert settings.max_bounces == 50
    assert settings.focus_distance == 1.0
    assert settings.defocus_angle == 0.0
    assert settings.background.background(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))) == BLACK
    assert settings.position == Vector3(0, 0, 0)
    assert settings.forward == Vector3(0, 0, -1)
    assert settings.up == Vector3(0, 1, 0)


def test_default_vectors_are_not_shared():
    first, second = CameraSettings(), CameraSettings()
    assert first.position is not second.position
    assert first.forward is not second.forward
    assert first.up is not second.up
    # Mutating one instance's default leaves the next one untouched
    first.position.x = 5.0
    assert CameraSettings().position == Vector3(0, 0, 0)

    sky, other_sky = GradientBackground(), GradientBackground()
    assert sky.zenith is not other_sky.zenith
    assert sky.horizon is not other_sky.horizon
    assert sky.zenith == Vector3(0.5, 0.7, 1.0)
    assert sky.horizon == Vector3(1, 1, 1)
    assert BackgroundColor().color is not BackgroundColor().color


def test_stratified_samples_stay_in_their_strata():
    viewport = Viewport.with_origin(Vector3(0, 0, 0), (4.0, 2.0), (4, 2),
                                    Vector3(1, 0, 0), Vector3(0, -1, 0))
    grid = 3
    scale = 1.0 / grid
    for sample_y in range(grid):
        for sample_x in range(grid):
            for _ in range(10):
                p = viewport.pixel_sample(1, 1, sample_x, sample_y, scale)
                assert 1 + sample_x * scale <= p.x <= 1 + (sample_x + 1) * scale
                assert 1 + sample_y * scale <= -p.y <= 1 + (sample_y + 1) * scale
                assert p.z == 0


def test_pinhole_rays_start_at_camera():
    camera = build_camera(4, 4, position=Vector3(1, 2, 3))
    for _ in range(20):
        ray = camera.get_ray(2, 1, 0, 0, 1.0)
        assert ray.origin == Vector3(1, 2, 3)
        assert 0.0 <= ray.time < 1.0


def test_defocus_rays_start_on_lens():
    camera = build_camera(4, 4, focus_distance=2.0, defocus_angle=20.0)
    radius = 2.0 * math.tan(math.radians(10.0))
    for _ in range(50):
        ray = camera.get_ray(0, 0, 0, 0, 1.0)
        assert ray.origin.length() <= radius + 1e-9
        assert ray.origin.z == pytest.approx(0.0)


def test_zero_bounces_is_black():
    world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, DiffuseLight(WHITE))])
    camera = build_camera(max_bounces=0, background=BackgroundColor(WHITE))
    assert camera.ray_color(world, Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))) == BLACK
    assert camera.ray_color(world, Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))) == BLACK


def test_missed_rays_see_background():
    sky = Vector3(0.2, 0.4, 0.6)
    camera = build_camera(background=BackgroundColor(sky))
    assert camera.ray_color(HittableList(), Ray(Vector3(0, 0, 0), Vector3(1, 1, 0))) == sky


def test_light_hit_returns_its_emission():
    world = HittableList([Sphere(Vector3(0, 0, -2), 1.0, DiffuseLight(Vector3(2, 3, 4)))])
    camera = build_camera()
    assert camera.ray_color(world, Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))) == Vector3(2, 3, 4)


def test_diffuse_surface_is_lit_by_background():
    # Only the ground plane below the camera; every bounce leaves towards the sky
    world = HittableList([Sphere(Vector3(0, -1000, 0), 999, Lambertian(Vector3(0.5, 0.5, 0.5)))])
    camera = build_camera(background=BackgroundColor(WHITE))
    color = camera.ray_color(world, Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)))
    assert color.is_close(Vector3(0.5, 0.5, 0.5), 1e-12)


def test_hits_closer_than_bias_are_ignored():
    world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, DiffuseLight(WHITE))])
    camera = build_camera(background=BackgroundColor(BLACK))
    # Starting on the surface and leaving it, the only root is the one at t = 0
    ray = Ray(Vector3(0, 0, 1), Vector3(0, 0, 1))
    assert world.hit(ray, Interval(BIAS, math.inf)) is None
    assert camera.ray_color(world, ray) == BLACK


def test_render_fills_every_pixel_clamped():
    # Camera inside a bright emissive sphere
    world = HittableList([Sphere(Vector3(0, 0, 0), 10.0, DiffuseLight(Vector3(5, 5, 5)))])
    target = Image.with_dimensions(4, 3)
    camera = CameraSettings(samples=4).build(target)
    result = camera.render(world, 4, target)
    assert result is target
    for y in range(3):
        for x in range(4):
            assert result.get_pixel(x, y) == WHITE


def test_render_uses_at_least_one_sample():
    sky = Vector3(0.25, 0.5, 0.75)
    target = Image.with_dimensions(2, 2)
    camera = CameraSettings(background=BackgroundColor(sky)).build(target)
    camera.render(HittableList(), 0.3, target)
    assert target.get_pixel(1, 1) == sky


def test_render_rejects_mismatched_target():
    camera = build_camera(4, 4)
    with pytest.raises(ValueError):
        camera.render(HittableList(), 1, Image.with_dimensions(2, 2))


def test_render_logs_progress(capsys):
    target = Image.with_dimensions(2, 2)
    camera = CameraSettings().build(target)
    camera.render(HittableList(), 1, target, log=True)
    assert "progress: 100.00%" in capsys.readouterr().out


def test_gradient_background():
    background = GradientBackground(zenith=Vector3(0, 0, 1), horizon=Vector3(1, 1, 1))
    assert background.background(Ray(Vector3(0, 0, 0), Vector3(0, 5, 0))) == Vector3(0, 0, 1)
    assert background.background(Ray(Vector3(0, 0, 0), Vector3(0, -5, 0))) == Vector3(1, 1, 1)


def test_environment_map_lookup():
    # Top row red, bottom row blue
    image = Image.from_array([[[1, 0, 0], [1, 0, 0]], [[0, 0, 1], [0, 0, 1]]])
    environment = EnvironmentMap(image, strength=2.0)
    up = environment.background(Ray(Vector3(0, 0, 0), Vector3(0.1, 1, 0)))
    down = environment.background(Ray(Vector3(0, 0, 0), Vector3(0.1, -1, 0)))
    assert up == Vector3(2.0, 0.0, 0.0)
    assert down == Vector3(0.0, 0.0, 2.0)


def test_camera_is_shared_safely_by_copy():
    import copy

    camera = build_camera(2, 2)
    clone = copy.copy(camera)
    assert isinstance(clone, Camera)
    assert clone.viewport is camera.viewport
    assert clone.resolution == camera.resolution
