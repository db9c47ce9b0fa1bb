# hull3d/query.py
from __future__ import annotations
from math import inf
from typing import TYPE_CHECKING, Optional

from .geom import Pt, PointLike, as_pt, dot
from .primitives import Ray

if TYPE_CHECKING:
    from .hull import ConvexHull3D


def contains_point(hull: "ConvexHull3D", p: PointLike) -> bool:
    """Точка всередині або на поверхні (з точністю до tolerance)."""
    p = as_pt(p)
    for face in hull.faces:
        if face.distance_to_point(p) > hull.tolerance:
            return False
    return True


def intersect_ray(hull: "ConvexHull3D", ray: Ray) -> Optional[Pt]:
    """
    Перетин променя з опуклим многогранником («Fast Ray-Convex Polyhedron
    Intersection», E. Haines, Graphics Gems II): кожна грань - півпростір,
    звужуємо інтервал [t_near, t_far].
    Повертає найближчу точку входу (або виходу, якщо початок усередині), інакше None.
    """
    t_near = -inf
    t_far = inf
    for face in hull.faces:
        vn = face.distance_to_point(ray.origin)
        vd = dot(face.normal, ray.direction)

        # початок над площиною, а промінь паралельний їй або віддаляється - промаху не уникнути
        if vn > 0 and vd >= 0:
            return None

        t = -vn / vd if vd != 0 else 0.0
        # перетин «позаду» початку променя
        if t <= 0:
            continue

        if vd > 0:
            t_far = min(t, t_far)    # задня грань
        else:
            t_near = max(t, t_near)  # передня грань

        if t_near > t_far:
            return None

    if t_near != -inf:
        return ray.at(t_near)
    if t_far != inf:
        return ray.at(t_far)
    return None


def intersects_ray(hull: "ConvexHull3D", ray: Ray) -> bool:
    return intersect_ray(hull, ray) is not None
