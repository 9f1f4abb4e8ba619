"""Geometry module for the sphere primitive.

Components:
    sphere: Sphere primitive with analytic ray-sphere intersection

Intersection is available both on Python values (``Sphere.intersect``) and
as a Taichi function (``hit_sphere``) for use inside kernels.
"""

from .sphere import HitRecord, Intersection, Sphere, hit_sphere, intersect

__all__ = [
    "Sphere",
    "Intersection",
    "intersect",
    "HitRecord",
    "hit_sphere",
]
