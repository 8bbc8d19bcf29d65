"""Hit records and objects that rays can intersect."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from pathtrace.ray import Ray
from pathtrace.vec3 import Vec3

if TYPE_CHECKING:
    from pathtrace.material import Material


@dataclass(slots=True)
class HitRecord:
    """Where and how a ray met a surface."""

    t: float = 0.0
    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    front_face: bool = False
    material: Optional["Material"] = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store a normal that faces against the ray; ``outward_normal`` must be unit length."""
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class SceneObject(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the nearest hit with ``t_min <= t <= t_max``, or None."""


class Sphere(SceneObject):
    """A sphere with a centre, a radius and a surface material."""

    __slots__ = ("center", "radius", "material")

    def __init__(self, center: Vec3, radius: float, material: Optional["Material"]) -> None:
        self.center = center
        self.radius = float(radius)
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction.normalize())
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (-half_b - sqrtd) / a
        if root < t_min or t_max < root:
            root = (-half_b + sqrtd) / a
            if root < t_min or t_max < root:
                return None

        point = ray.at(root)
        record = HitRecord(t=root, p=point, material=self.material)
        record.set_face_normal(ray, (point - self.center) / self.radius)
        return record

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius}, material={self.material!r})"