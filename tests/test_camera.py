import random

import pytest

from gentracer.camera import Camera
from gentracer.image import Image
from gentracer.ray import Vec3
from gentracer.scene import Scene, Sphere


def make_camera(samples=2, threads=1, seed=5):
    return Camera(
        Vec3(),
        Vec3(0.0, 0.0, -1.0),
        Vec3(0.0, 1.0, 0.0),
        samples_per_pixel=samples,
        threads=threads,
        rng=random.Random(seed),
    )


def test_every_scanline_reported_once():
    image = Image(4, 3)
    rows = []
    make_camera().render(Scene(), image, rows.append)
    assert sorted(rows) == [0, 1, 2]


def test_more_threads_than_rows_still_covers_image():
    image = Image(3, 2)
    rows = []
    make_camera(threads=4).render(Scene(), image, rows.append)
    assert sorted(rows) == [0, 1]
    assert all(image.read(x, y).b == pytest.approx(1.0) for x in range(3) for y in range(2))


def test_sky_gradient_top_is_bluer_than_bottom():
    image = Image(4, 4)
    make_camera().render(Scene(), image, None)
    for x in range(4):
        top, bottom = image.read(x, 0), image.read(x, 3)
        assert top.r < bottom.r
        assert top.b == pytest.approx(1.0)
        assert 0.2 <= top.r <= 1.0


def test_seeded_render_is_repeatable():
    def run():
        scene = Scene(rng=random.Random(9))
        scene.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5, Vec3(1.0, 1.0, 1.0)))
        image = Image(3, 2)
        make_camera(seed=9).render(scene, image, None)
        return list(image.data())

    first, second = run(), run()
    assert len(first) == 3 * 2 * 3
    assert first == second


def test_sphere_darkens_center():
    scene = Scene(rng=random.Random(2))
    scene.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5, Vec3(1.0, 1.0, 1.0)))
    image = Image(5, 5)
    make_camera(samples=4).render(scene, image, None)
    center, corner = image.read(2, 2), image.read(0, 0)
    assert all(c <= 0.5 + 1e-9 for c in center)
    assert corner.b == pytest.approx(1.0)


def test_invalid_samples_raise():
    with pytest.raises(ValueError):
        make_camera(samples=0).render(Scene(), Image(2, 2), None)


def test_get_ray_passes_through_pixel():
    camera = make_camera()
    pixel00 = Vec3(0.0, 0.0, -1.0)
    delta_u = Vec3(1.0, 0.0, 0.0)
    delta_v = Vec3(0.0, -1.0, 0.0)
    for _ in range(20):
        ray = camera.get_ray(0, 0, pixel00, delta_u, delta_v)
        assert ray.origin == camera.origin
        assert ray.direction.length() == pytest.approx(1.0)
        assert ray.direction.x >= 0.0
        assert ray.direction.y <= 0.0
        assert ray.direction.z < 0.0