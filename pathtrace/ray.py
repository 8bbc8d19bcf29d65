"""A ray with an origin and a unit direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from pathtrace.vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line; a non-zero direction is normalized on construction."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def __post_init__(self) -> None:
        if self.direction.length_squared() != 0.0:
            object.__setattr__(self, "direction", self.direction.normalize())

    def at(self, t: float) -> Vec3:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + t * self.direction