import math

import pytest

from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.quad import Quad
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import RotationY, Translation
from pathtracer.materials.lambertian import Lambertian

FORWARD = Interval(0.001, math.inf)


@pytest.fixture
def material():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


def test_sphere_hit_is_exact(material):
    sphere = Sphere(Vector3(0, 0, -1), 0.5, material)
    rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
    assert rec is not None
    assert rec.t == pytest.approx(0.5)
    assert rec.p.is_close(Vector3(0, 0, -0.5))
    assert rec.normal.is_close(Vector3(0, 0, 1))
    assert rec.front_face
    assert rec.material is material


def test_sphere_miss_and_interval(material):
    sphere = Sphere(Vector3(0, 0, -1), 0.5, material)
    assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), FORWARD) is None
    assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), Interval(0.001, 0.4)) is None


def test_sphere_from_inside_uses_far_root(material):
    sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
    rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), FORWARD)
    assert rec.t == pytest.approx(1.0)
    assert not rec.front_face
    # The stored normal always points against the ray
    assert rec.normal.is_close(Vector3(-1, 0, 0))


@pytest.mark.parametrize("radius", [0.0, -1.0])
def test_sphere_rejects_non_positive_radius(material, radius):
    with pytest.raises(ValueError):
        Sphere(Vector3(0, 0, 0), radius, material)


def test_sphere_uv():
    assert Sphere.get_uv(Vector3(1, 0, 0)) == pytest.approx((0.5, 0.5))
    assert Sphere.get_uv(Vector3(0, 1, 0))[1] == pytest.approx(1.0)
    assert Sphere.get_uv(Vector3(0, -1, 0))[1] == pytest.approx(0.0)
    assert Sphere.get_uv(Vector3(0.0, 0.0, 1.0))[0] == pytest.approx(0.25)


def test_moving_sphere_follows_time(material):
    sphere = Sphere(Vector3(0, 0, -2), 0.5, material, displacement=Vector3(0, 2, 0))
    hit_at_start = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1), 0.0), FORWARD)
    assert hit_at_start is not None
    assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1), 1.0), FORWARD) is None
    assert sphere.hit(Ray(Vector3(0, 2, 0), Vector3(0, 0, -1), 1.0), FORWARD) is not None

    box = sphere.bounding_box()
    assert box.y.start == pytest.approx(-0.5)
    assert box.y.end == pytest.approx(2.5)


def test_quad_hit_and_uv(material):
    quad = Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), material)
    rec = quad.hit(Ray(Vector3(0.5, 0, 0), Vector3(0, 0, -1)), FORWARD)
    assert rec is not None
    assert rec.t == pytest.approx(2.0)
    assert rec.u == pytest.approx(0.75)
    assert rec.v == pytest.approx(0.5)
    assert rec.normal.is_close(Vector3(0, 0, 1))
    assert rec.front_face


def test_quad_rejects_hits_outside_its_edges(material):
    quad = Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), material)
    # Crosses the plane z = -2 at (3, 0), outside the quad
    assert quad.hit(Ray(Vector3(3, 0, 0), Vector3(0, 0, -1)), FORWARD) is None
    assert quad.hit(Ray(Vector3(0, -1.5, 0), Vector3(0, 0, -1)), FORWARD) is None


def test_quad_rejects_parallel_rays(material):
    quad = Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), material)
    assert quad.hit(Ray(Vector3(0, 0, -2), Vector3(1, 0, 0)), FORWARD) is None


def test_quad_bounding_box_is_padded(material):
    quad = Quad(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 0, 1), material)
    box = quad.bounding_box()
    assert box.y.size() > 0
    assert box.x.start <= 0 and box.x.end >= 1


def test_skewed_quad_box_covers_all_corners(material):
    quad = Quad(Vector3(0, 0, 0), Vector3(1, 1, 0), Vector3(1, -1, 0), material)
    box = quad.bounding_box()
    assert box.y.start <= -1 and box.y.end >= 1


def test_box_faces_point_outwards(material):
    box = Box(Vector3(-1, -1, -1), Vector3(1, 1, 1), material)
    directions = [Vector3(1, 0, 0), Vector3(-1, 0, 0), Vector3(0, 1, 0),
                  Vector3(0, -1, 0), Vector3(0, 0, 1), Vector3(0, 0, -1)]
    for d in directions:
        rec = box.hit(Ray(d * 5, -d), FORWARD)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.front_face
        assert rec.normal.is_close(d)


def test_box_bounding_box(material):
    box = Box(Vector3(0, 0, 0), Vector3(1, 2, 3), material)
    bbox = box.bounding_box()
    assert bbox.x.start <= 0 and bbox.x.end >= 1
    assert bbox.y.start <= 0 and bbox.y.end >= 2
    assert bbox.z.start <= 0 and bbox.z.end >= 3


def test_translation_moves_hits(material):
    moved = Translation(Sphere(Vector3(0, 0, 0), 0.5, material), Vector3(0, 0, -1))
    rec = moved.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
    assert rec.t == pytest.approx(0.5)
    assert rec.p.is_close(Vector3(0, 0, -0.5))
    assert rec.normal.is_close(Vector3(0, 0, 1))

    box = moved.bounding_box()
    assert box.z.start == pytest.approx(-1.5)
    assert box.z.end == pytest.approx(-0.5)


def test_rotation_y_rotates_hits(material):
    # Turned 90 degrees, a quad in the plane x = 2 facing +x ends up in the
    # plane z = -2 facing -z
    quad = Quad(Vector3(2, -1, 1), Vector3(0, 0, -2), Vector3(0, 2, 0), material)
    rotated = RotationY(quad, 90)

    box = rotated.bounding_box()
    assert box.z.start == pytest.approx(-2.0, abs=1e-3)
    assert box.x.start == pytest.approx(-1.0, abs=1e-3)
    assert box.x.end == pytest.approx(1.0, abs=1e-3)

    rec = rotated.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), FORWARD)
    assert rec is not None
    assert rec.t == pytest.approx(3.0)
    assert rec.p.is_close(Vector3(0, 0, -2), 1e-9)
    assert rec.normal.is_close(Vector3(0, 0, -1), 1e-9)


def test_rotated_box_contains_rotated_child(material):
    box = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), material)
    rotated = RotationY(box, 15)
    bbox = rotated.bounding_box()
    for corner in box.bounding_box().corners():
        world = rotated._to_world(corner)
        assert bbox.x.start - 1e-9 <= world.x <= bbox.x.end + 1e-9
        assert bbox.z.start - 1e-9 <= world.z <= bbox.z.end + 1e-9
