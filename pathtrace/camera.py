"""A pinhole camera that maps pixels to primary rays."""

from __future__ import annotations

from pathtrace.display import Display
from pathtrace.ray import Ray
from pathtrace.rng import Random
from pathtrace.vec3 import Vec3


class Camera:
    """Camera at the origin looking down -z onto an image plane at distance 1."""

    def __init__(self, display: Display) -> None:
        self.aspect_ratio = display.aspect_ratio
        self.left = -1.0 * self.aspect_ratio
        self.right = 1.0 * self.aspect_ratio
        self.bottom = -1.0
        self.top = 1.0
        self.distance = 1.0
        self.width = display.width
        self.height = display.height
        self.position = Vec3(0, 0, 0)
        self._rng = Random()

    def _ray_through(self, px: float, py: float) -> Ray:
        u = self.left + (self.right - self.left) * px / self.width
        v = self.top + (self.bottom - self.top) * py / self.height
        direction = (Vec3(u, v, -self.distance) - self.position).normalize()
        return Ray(self.position, direction)

    def get_ray_with_offset(self, x: int, y: int) -> Ray:
        """Ray through a random point inside pixel (x, y)."""
        return self._ray_through(x + self._rng.sample(), y + self._rng.sample())

    def get_ray(self, x: int, y: int) -> Ray:
        """Ray through the top-left corner of pixel (x, y)."""
        return self._ray_through(x, y)