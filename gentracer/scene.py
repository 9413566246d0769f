"""Scene objects, ray hits and the path-traced scene."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from gentracer.interval import Interval
from gentracer.ray import Ray, Vec3
from gentracer.sampling import random_on_hemisphere

_SELF_INTERSECTION_EPSILON = 0.001
_SKY_ZENITH = Vec3(0.2, 0.4, 1.0)
_SKY_HORIZON = Vec3(1.0, 1.0, 1.0)
_BOUNCE_ATTENUATION = 0.5


@dataclass
class HitInfo:
    """Where and how a ray met a surface."""

    hit: bool = False
    point: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    normal: Vec3 = field(default_factory=Vec3)
    front_face: bool = False


class SceneObject(ABC):
    """A surface that rays can hit."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> HitInfo:
        """Intersect ``ray`` with the surface within ``ray_t``."""

    @abstractmethod
    def color(self, ray: Ray, hit_info: HitInfo) -> Vec3:
        """Shading colour at a hit."""

    @abstractmethod
    def info(self) -> str:
        """A one-line description."""


class Sphere(SceneObject):
    """A sphere with a centre, a radius and a surface colour."""

    def __init__(self, position: Vec3, radius: float, color: Vec3) -> None:
        self.position = position
        self.radius = radius
        self.albedo = color

    def hit(self, ray: Ray, ray_t: Interval) -> HitInfo:
        """Intersect with the nearer root; a hit only if it lies strictly inside ``ray_t``."""
        oc = self.position - ray.origin
        a = ray.direction.dot(ray.direction)
        b = -2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return HitInfo()

        t = (-b - math.sqrt(discriminant)) / (2.0 * a)
        point = ray.at(t)
        outward = (point - self.position).normalized()
        front_face = ray.direction.dot(outward) < 0.0
        return HitInfo(
            hit=ray_t.surrounds(t),
            point=point,
            t=t,
            normal=outward if front_face else -outward,
            front_face=front_face,
        )

    def color(self, ray: Ray, hit_info: HitInfo) -> Vec3:
        """The surface normal mapped into ``[0, 1]``, or black without a hit."""
        if not hit_info.hit:
            return Vec3()
        n = hit_info.normal
        return Vec3(n.x + 1.0, n.y + 1.0, n.z + 1.0) * 0.5

    def info(self) -> str:
        p, c = self.position, self.albedo
        return (
            f"Sphere(position=({p.x:.2f}, {p.y:.2f}, {p.z:.2f}), "
            f"radius={self.radius:.2f}, "
            f"color=({c.r:.2f}, {c.g:.2f}, {c.b:.2f}))"
        )

    def __repr__(self) -> str:
        return self.info()


class Scene:
    """A collection of objects lit by a sky gradient."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._objects: list[SceneObject] = []
        self.rng = rng

    def add(self, obj: SceneObject) -> None:
        """Add an object to the scene."""
        self._objects.append(obj)

    def objects(self) -> tuple[SceneObject, ...]:
        """The objects in the order they were added."""
        return tuple(self._objects)

    def cast(self, ray: Ray, depth: int = 1) -> Vec3:
        """Colour seen along ``ray``, following at most ``depth`` diffuse bounces."""
        if depth <= 0:
            return Vec3()

        interval = Interval(_SELF_INTERSECTION_EPSILON, math.inf)
        closest = HitInfo()
        for obj in self._objects:
            info = obj.hit(ray, interval)
            if info.hit:
                interval.max = info.t
                closest = info

        if closest.hit:
            direction = closest.normal + random_on_hemisphere(closest.normal, self.rng)
            bounced = Ray(closest.point, direction)
            return self.cast(bounced, depth - 1) * _BOUNCE_ATTENUATION

        unit = ray.direction.normalized()
        a = 0.5 * (unit.y + 1.0)
        return _SKY_HORIZON * (1.0 - a) + _SKY_ZENITH * a