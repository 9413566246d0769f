"""A pinhole camera that renders scenes into images."""

from __future__ import annotations

import os
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from gentracer.image import Image
from gentracer.log import TRACE, format_vec3, get_logger
from gentracer.ray import Ray, Vec3
from gentracer.sampling import random_float
from gentracer.scene import Scene

MAX_DEPTH = 10
DEFAULT_SAMPLES_PER_PIXEL = 10
_FOCAL_LENGTH = 1.0
_VIEWPORT_HEIGHT = 2.0

ScanlineCallback = Callable[[int], None]


class Camera:
    """Renders a scene by averaging jittered samples per pixel."""

    def __init__(
        self,
        origin: Vec3,
        look_at: Vec3,
        up: Vec3,
        samples_per_pixel: int = DEFAULT_SAMPLES_PER_PIXEL,
        threads: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.origin = origin
        self.look_at = look_at
        self.up = up
        self.samples_per_pixel = samples_per_pixel
        self.threads = threads
        self.rng = rng

    def render(
        self,
        scene: Scene,
        image: Image,
        on_scanline_rendered: Optional[ScanlineCallback] = None,
    ) -> None:
        """Fill ``image`` with the view of ``scene``, reporting each finished row."""
        samples = self.samples_per_pixel
        if samples < 1:
            raise ValueError(f"samples per pixel must be positive, got {samples}")
        logger = get_logger()
        begin = time.perf_counter()

        width, height = image.width, image.height
        viewport_width = _VIEWPORT_HEIGHT * (width / height)

        w = (self.origin - self.look_at).normalized()
        viewport_u = Vec3(viewport_width, 0.0, 0.0)
        viewport_v = Vec3(0.0, -_VIEWPORT_HEIGHT, 0.0)
        logger.log(TRACE, "vpu: %s", format_vec3(viewport_u))
        logger.log(TRACE, "vpv: %s", format_vec3(viewport_v))

        delta_u = viewport_u / width
        delta_v = viewport_v / height
        upper_left = self.origin - w * _FOCAL_LENGTH - viewport_u / 2.0 - viewport_v / 2.0
        pixel00 = upper_left + (delta_u + delta_v) * 0.5

        def work(rows: range) -> None:
            for j in rows:
                for i in range(width):
                    total = sum(
                        (
                            scene.cast(self.get_ray(i, j, pixel00, delta_u, delta_v), MAX_DEPTH)
                            for _ in range(samples)
                        ),
                        Vec3(),
                    )
                    image.write(i, j, total / samples)
                if on_scanline_rendered is not None:
                    on_scanline_rendered(j)

        count = self.threads or os.cpu_count() or 1
        step = height // count
        slices = [
            range(t * step, height if t == count - 1 else (t + 1) * step)
            for t in range(count)
        ]
        with ThreadPoolExecutor(max_workers=count) as pool:
            list(pool.map(work, slices))

        elapsed = time.perf_counter() - begin
        logger.info(
            "Rendered %dx%d with %d samples in %.3f seconds",
            width,
            height,
            samples,
            elapsed,
        )

    def get_ray(
        self, i: int, j: int, pixel00: Vec3, delta_u: Vec3, delta_v: Vec3
    ) -> Ray:
        """A ray through a random point inside pixel ``(i, j)``."""
        px = random_float(0.0, 1.0, self.rng)
        py = random_float(0.0, 1.0, self.rng)
        offset = delta_u * px + delta_v * py
        center = pixel00 + delta_u * float(i) + delta_v * float(j)
        direction = (center + offset - self.origin).normalized()
        return Ray(self.origin, direction)