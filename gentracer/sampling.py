"""Random numbers and random directions."""

from __future__ import annotations

import random
import threading

from gentracer.ray import Vec3

_local = threading.local()


def _generator(rng: random.Random | None) -> random.Random:
    if rng is not None:
        return rng
    gen = getattr(_local, "rng", None)
    if gen is None:
        gen = random.Random()
        _local.rng = gen
    return gen


def random_float(
    low: float = 0.0, high: float = 1.0, rng: random.Random | None = None
) -> float:
    """A random float in ``[low, high)``."""
    return low + (high - low) * _generator(rng).random()


def random_vector(
    low: float = 0.0, high: float = 1.0, rng: random.Random | None = None
) -> Vec3:
    """A vector whose components are each random in ``[low, high)``."""
    gen = _generator(rng)
    return Vec3(
        random_float(low, high, gen),
        random_float(low, high, gen),
        random_float(low, high, gen),
    )


def random_unit_vector(rng: random.Random | None = None) -> Vec3:
    """A random direction of unit length."""
    gen = _generator(rng)
    while True:
        candidate = random_vector(-1.0, 1.0, gen)
        if candidate.dot(candidate) >= 1e-5:
            return candidate.normalized()


def random_on_hemisphere(normal: Vec3, rng: random.Random | None = None) -> Vec3:
    """A random unit direction on the side of the surface that ``normal`` faces."""
    direction = random_unit_vector(rng)
    if direction.dot(normal) > 0.0:
        return direction
    return -direction