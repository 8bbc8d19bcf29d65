import pytest

from pathtrace.hittable import HitRecord, SceneObject, Sphere
from pathtrace.ray import Ray
from pathtrace.vec3 import Vec3


def _approx_vec(a, b, tol=1e-9):
    return all(abs(p - q) <= tol for p, q in zip(a, b))


def test_scene_object_is_abstract():
    with pytest.raises(TypeError):
        SceneObject()


def test_head_on_hit_lies_on_sphere():
    center = Vec3(0, 0, -1)
    sphere = Sphere(center, 0.5, None)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    rec = sphere.hit(ray, 0.001, float("inf"))
    assert rec.t == pytest.approx(0.5)
    assert (rec.p - center).length() == pytest.approx(0.5)
    assert rec.front_face is True
    assert rec.normal.length() == pytest.approx(1.0)
    assert rec.normal.dot(ray.direction) < 0
    assert (rec.p - ray.origin).length() == pytest.approx(rec.t)


def test_miss_returns_none():
    sphere = Sphere(Vec3(0, 0, -1), 0.5, None)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 1, 0))
    assert sphere.hit(ray, 0.001, float("inf")) is None


def test_hit_beyond_t_max_is_rejected():
    sphere = Sphere(Vec3(0, 0, -10), 1.0, None)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    assert sphere.hit(ray, 0.001, 5.0) is None


def test_t_min_past_near_root_gives_far_root():
    center = Vec3(0, 0, -1)
    sphere = Sphere(center, 0.5, None)
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    near = sphere.hit(ray, 0.001, float("inf"))
    far = sphere.hit(ray, near.t + 0.01, float("inf"))
    assert far.t > near.t
    assert (far.p - center).length() == pytest.approx(0.5)
    assert far.front_face is False
    assert far.normal.dot(ray.direction) < 0


def test_ray_from_inside_flips_normal():
    center = Vec3(2, 3, 4)
    radius = 2.0
    sphere = Sphere(center, radius, None)
    ray = Ray(center, Vec3(1, 0, 0))
    rec = sphere.hit(ray, 0.001, float("inf"))
    assert rec.front_face is False
    outward = (rec.p - center) / radius
    assert _approx_vec(rec.normal, -outward)


def test_material_is_carried_into_record():
    marker = object()
    sphere = Sphere(Vec3(0, 0, -3), 1.0, marker)
    rec = sphere.hit(Ray(Vec3(), Vec3(0, 0, -1)), 0.001, float("inf"))
    assert rec.material is marker


def test_zero_direction_ray_raises():
    sphere = Sphere(Vec3(0, 0, -3), 1.0, None)
    with pytest.raises(ValueError):
        sphere.hit(Ray(Vec3(), Vec3()), 0.001, float("inf"))


@pytest.mark.parametrize(
    "direction, expect_front",
    [(Vec3(0, -1, 0), True), (Vec3(0, 1, 0), False)],
)
def test_set_face_normal(direction, expect_front):
    outward = Vec3(0, 1, 0)
    rec = HitRecord()
    rec.set_face_normal(Ray(Vec3(), direction), outward)
    assert rec.front_face is expect_front
    assert rec.normal == (outward if expect_front else -outward)
    assert rec.normal.dot(direction) < 0