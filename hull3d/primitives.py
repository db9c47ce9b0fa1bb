# hull3d/primitives.py
from __future__ import annotations
from dataclasses import dataclass

from .geom import Pt, add, sub, scale, dot, cross, norm, normalize, centroid


@dataclass(frozen=True)
class Plane:
    """
    Площина у формі normal·p + constant = 0.
    distance_to_point > 0 - точка з боку нормалі.
    """
    normal: Pt
    constant: float

    @classmethod
    def from_coplanar_points(cls, a: Pt, b: Pt, c: Pt) -> "Plane":
        # нормаль за правилом правої руки для обходу (a, b, c)
        n = normalize(cross(sub(c, b), sub(a, b)))
        return cls(n, -dot(n, a))

    def distance_to_point(self, p: Pt) -> float:
        return dot(self.normal, p) + self.constant


@dataclass(frozen=True)
class Segment:
    start: Pt
    end: Pt

    def delta(self) -> Pt:
        return sub(self.end, self.start)

    def closest_point_parameter(self, p: Pt, clamp: bool = True) -> float:
        d = self.delta()
        dd = dot(d, d)
        if dd == 0.0:
            return 0.0  # відрізок стягнутий у точку
        t = dot(sub(p, self.start), d) / dd
        if clamp:
            t = min(max(t, 0.0), 1.0)
        return t

    def closest_point(self, p: Pt, clamp: bool = True) -> Pt:
        t = self.closest_point_parameter(p, clamp)
        return add(self.start, scale(self.delta(), t))


@dataclass(frozen=True)
class Triangle:
    a: Pt
    b: Pt
    c: Pt

    def _cross(self) -> Pt:
        return cross(sub(self.c, self.b), sub(self.a, self.b))

    def normal(self) -> Pt:
        """Одинична нормаль; для виродженого трикутника - нульовий вектор."""
        return normalize(self._cross())

    def midpoint(self) -> Pt:
        return centroid((self.a, self.b, self.c))

    def area(self) -> float:
        return 0.5 * norm(self._cross())


@dataclass(frozen=True)
class Ray:
    """
    Промінь origin + t*direction, t >= 0.
    direction не нормалізується; нульовий напрямок - помилка виклику.
    """
    origin: Pt
    direction: Pt

    def at(self, t: float) -> Pt:
        return add(self.origin, scale(self.direction, t))
