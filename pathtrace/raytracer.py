"""Path tracing of the demo scene into an RGBA framebuffer."""

from __future__ import annotations

import sys
from typing import MutableSequence, Optional, Protocol

from pathtrace.camera import Camera
from pathtrace.display import Display
from pathtrace.ray import Ray
from pathtrace.scene import Scene
from pathtrace.vec3 import Vec3

_T_MIN = 0.001
_T_MAX = sys.float_info.max
_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)


class AbortFlag(Protocol):
    def is_set(self) -> bool: ...


class RayTracer:
    """Traces rays through a scene, averaging several jittered samples per pixel."""

    def __init__(self, max_depth: int = 1000, samples_per_pixel: int = 50) -> None:
        if samples_per_pixel < 1:
            raise ValueError("samples_per_pixel must be at least 1")
        self.max_depth = int(max_depth)
        self.samples_per_pixel = int(samples_per_pixel)

    def ray_color(self, ray: Ray, depth: int, scene: Scene) -> Vec3:
        """Colour seen along ``ray``; bounces past ``max_depth`` contribute black."""
        throughput = Vec3(1.0, 1.0, 1.0)
        while depth <= self.max_depth:
            hit = scene.hit(ray, _T_MIN, _T_MAX)
            if hit is None:
                t = 0.5 * (ray.direction.y + 1.0)
                return throughput * ((1.0 - t) * _WHITE + t * _SKY_BLUE)
            scattered = hit.material.scatter(ray, hit) if hit.material is not None else None
            if scattered is None:
                return Vec3(0.0, 0.0, 0.0)
            attenuation, ray = scattered
            throughput = throughput * attenuation
            depth += 1
        return Vec3(0.0, 0.0, 0.0)

    def render(
        self,
        framebuffer: MutableSequence[int],
        display: Display,
        y_min: int,
        y_max: int,
        should_abort: Optional[AbortFlag] = None,
    ) -> bool:
        """Render rows ``y_min`` to ``y_max - 1`` into ``framebuffer``.

        Returns False if ``should_abort`` was set before the rows were finished.
        """
        width = display.width
        if y_min < 0:
            raise ValueError("y_min must not be negative")
        if len(framebuffer) < y_max * width * 4:
            raise ValueError("framebuffer is too small for the requested rows")

        camera = Camera(display)
        scene = Scene()
        scene.create_scene_objects()
        scale = 1.0 / self.samples_per_pixel

        for y in range(y_min, y_max):
            for x in range(width):
                total = sum(
                    (
                        self.ray_color(camera.get_ray_with_offset(x, y), 0, scene)
                        for _ in range(self.samples_per_pixel)
                    ),
                    Vec3(),
                )
                color = (scale * total).clamp(0.0, 1.0)
                pos = (y * width + x) * 4
                framebuffer[pos:pos + 4] = bytes(
                    (int(color.x * 255), int(color.y * 255), int(color.z * 255), 255)
                )
                if should_abort is not None and should_abort.is_set():
                    return False
        return True