"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from pathtrace.hittable import HitRecord
from pathtrace.ray import Ray
from pathtrace.rng import Random
from pathtrace.vec3 import Vec3

Scatter = Tuple[Vec3, Ray]

_unit_rng = Random(0.0, 1.0)


class Material(ABC):
    """A surface response: returns ``(attenuation, scattered_ray)`` or None when absorbed."""

    @abstractmethod
    def scatter(self, ray_in: Ray, hit: HitRecord) -> Optional[Scatter]:
        """Scatter ``ray_in`` at ``hit``."""


class Lambertian(Material):
    """Ideal diffuse surface."""

    __slots__ = ("albedo",)

    def __init__(self, albedo: Vec3) -> None:
        self.albedo = albedo

    def scatter(self, ray_in: Ray, hit: HitRecord) -> Optional[Scatter]:
        direction = hit.normal + Vec3.random_unit_vector()
        if direction.near_zero():
            direction = hit.normal
        return self.albedo, Ray(hit.p, direction)

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo})"


class Metal(Material):
    """Reflective surface; ``fuzz`` (capped at 1) blurs the reflection."""

    __slots__ = ("albedo", "fuzz")

    def __init__(self, albedo: Vec3, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, ray_in: Ray, hit: HitRecord) -> Optional[Scatter]:
        reflected = ray_in.direction.normalize().reflect(hit.normal)
        scattered = Ray(hit.p, reflected + self.fuzz * Vec3.random_unit_vector())
        if scattered.direction.dot(hit.normal) > 0:
            return self.albedo, scattered
        return None

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo}, fuzz={self.fuzz})"


class Dielectric(Material):
    """Clear refracting surface such as glass."""

    __slots__ = ("ir",)

    def __init__(self, index_of_refraction: float) -> None:
        self.ir = float(index_of_refraction)

    @staticmethod
    def reflectance(cosine: float, ref_idx: float) -> float:
        """Schlick's approximation of the reflected fraction."""
        r0 = (1 - ref_idx) / (1 + ref_idx)
        r0 = r0 * r0
        return r0 + (1 - r0) * (1 - cosine) ** 5

    def scatter(self, ray_in: Ray, hit: HitRecord) -> Optional[Scatter]:
        attenuation = Vec3(1.0, 1.0, 1.0)
        refraction_ratio = 1.0 / self.ir if hit.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min((-unit_direction).dot(hit.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, refraction_ratio) > _unit_rng.sample():
            direction = unit_direction.reflect(hit.normal).normalize()
        else:
            direction = unit_direction.refract(hit.normal, refraction_ratio).normalize()

        return attenuation, Ray(hit.p, direction)

    def __repr__(self) -> str:
        return f"Dielectric(index_of_refraction={self.ir})"