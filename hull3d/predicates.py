# hull3d/predicates.py
from __future__ import annotations
from .geom import Pt, sub, cross, dot, norm

def orient3d(a: Pt, b: Pt, c: Pt, d: Pt) -> float:
    """
    Шестикратний орієнтований об'єм тетраедра (a, b, c, d).
    > 0 - d з боку нормалі трикутника (a, b, c) (обхід проти годинникової стрілки).
    """
    ab = sub(b, a)
    ac = sub(c, a)
    ad = sub(d, a)
    return dot(cross(ab, ac), ad)

def signed_distance_to_plane(a: Pt, b: Pt, c: Pt, p: Pt) -> float:
    n = cross(sub(b, a), sub(c, a))
    area2 = norm(n)
    if area2 == 0.0:
        return 0.0
    return orient3d(a, b, c, p) / area2

def visible_from_point(a: Pt, b: Pt, c: Pt, p: Pt, eps: float = 0.0) -> bool:
    return signed_distance_to_plane(a, b, c, p) > eps
