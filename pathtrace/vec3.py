"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from pathtrace.rng import Random

_NEAR_ZERO = 1e-8
_shared_rng = Random()


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def splat(value: float) -> "Vec3":
        """Return a vector with all three components set to ``value``."""
        return Vec3(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def __add__(self, other: Union["Vec3", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union["Vec3", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vec3":
        if isinstance(scalar, (int, float)):
            return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def near_zero(self) -> bool:
        """True if every component is smaller in magnitude than 1e-8."""
        return abs(self.x) < _NEAR_ZERO and abs(self.y) < _NEAR_ZERO and abs(self.z) < _NEAR_ZERO

    def reflect(self, normal: "Vec3") -> "Vec3":
        """Mirror this direction about ``normal``."""
        return self - 2 * self.dot(normal) * normal

    def refract(self, normal: "Vec3", etai_over_etat: float) -> "Vec3":
        """Bend this unit direction through a surface with the given index ratio."""
        cos_theta = min((-self).dot(normal), 1.0)
        r_out_perp = etai_over_etat * (self + cos_theta * normal)
        r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * normal
        return r_out_perp + r_out_parallel

    def normalize(self) -> "Vec3":
        """Return the unit vector in this direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec3(self.x / length, self.y / length, self.z / length)

    def clamp(self, low: float, high: float) -> "Vec3":
        return Vec3(*(min(max(c, low), high) for c in self))

    def sqrt(self) -> "Vec3":
        return Vec3(math.sqrt(self.x), math.sqrt(self.y), math.sqrt(self.z))

    @staticmethod
    def random(low: float = 0.0, high: float = 1.0) -> "Vec3":
        """Return a vector whose components are uniform in [low, high)."""
        span = high - low
        return Vec3(
            low + span * _shared_rng.sample(),
            low + span * _shared_rng.sample(),
            low + span * _shared_rng.sample(),
        )

    @staticmethod
    def random_in_unit_sphere() -> "Vec3":
        while True:
            p = Vec3.random(-1.0, 1.0)
            if p.length_squared() < 1.0:
                return p

    @staticmethod
    def random_unit_vector() -> "Vec3":
        return Vec3.random_in_unit_sphere().normalize()

    @staticmethod
    def random_on_hemisphere(normal: "Vec3") -> "Vec3":
        """Return a random unit vector in the hemisphere around ``normal``."""
        on_unit_sphere = Vec3.random_unit_vector()
        if on_unit_sphere.dot(normal) > 0.0:
            return on_unit_sphere
        return -on_unit_sphere