"""A collection of objects with the default demo layout."""

from __future__ import annotations

from typing import List, Optional

from pathtrace.hittable import HitRecord, SceneObject, Sphere
from pathtrace.material import Dielectric, Lambertian, Metal
from pathtrace.ray import Ray
from pathtrace.vec3 import Vec3


class Scene:
    """Objects to render and the materials of the default layout."""

    def __init__(self) -> None:
        self.objects: List[SceneObject] = []
        self.material_ground = Lambertian(Vec3(0.8, 0.8, 0.0))
        self.material_center = Lambertian(Vec3(0.7, 0.3, 0.3))
        self.material_left = Dielectric(1.5)
        self.material_right = Metal(Vec3(0.8, 0.6, 0.2), 0.0)

    def add_object(self, obj: SceneObject) -> None:
        self.objects.append(obj)

    def create_scene_objects(self) -> List[SceneObject]:
        """Add the ground and three spheres; return all objects."""
        self.objects.extend(
            [
                Sphere(Vec3(0, -100.5, -1), 100, self.material_ground),
                Sphere(Vec3(0, 0, -1), 0.5, self.material_center),
                Sphere(Vec3(-1, 0, -1), 0.4, self.material_left),
                Sphere(Vec3(1, 0, -1), 0.5, self.material_right),
            ]
        )
        return list(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the closest hit among all objects, or None."""
        closest: Optional[HitRecord] = None
        closest_so_far = t_max
        for obj in self.objects:
            record = obj.hit(ray, t_min, closest_so_far)
            if record is not None:
                closest = record
                closest_so_far = record.t
        return closest

    def clear_objects(self) -> None:
        self.objects.clear()