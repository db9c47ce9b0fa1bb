from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable, Sequence, Tuple, Union

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def component(self, i: int) -> float:
        """Координата за номером осі (0:x, 1:y, 2:z)."""
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError(f"axis out of range: {i}")

PointLike = Union[Pt, Sequence[float]]

ORIGIN = Pt(0.0, 0.0, 0.0)

def as_pt(p: PointLike) -> Pt:
    """Pt або будь-яка трійка чисел -> Pt."""
    if isinstance(p, Pt):
        return p
    x, y, z = p
    return Pt(float(x), float(y), float(z))

def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y, a.z + b.z)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def scale(a: Pt, s: float) -> Pt:
    return Pt(a.x*s, a.y*s, a.z*s)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt, b: Pt) -> Pt:
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def norm_sq(a: Pt) -> float:
    return dot(a, a)

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def normalize(a: Pt) -> Pt:
    n = norm(a)
    if n == 0.0:
        return ORIGIN  # вироджений вектор лишаємо нульовим
    return scale(a, 1.0 / n)

def distance_sq(a: Pt, b: Pt) -> float:
    return norm_sq(sub(a, b))

def distance(a: Pt, b: Pt) -> float:
    return sqrt(distance_sq(a, b))

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv, zs*inv)

def unique_points(points: Iterable[PointLike], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    Порядок першої появи зберігається.
    """
    seen: dict[Tuple[int, int, int], Pt] = {}
    for p in points:
        x, y, z = as_pt(p)
        key = (int(round(x*scale)), int(round(y*scale)), int(round(z*scale)))
        if key not in seen:
            seen[key] = Pt(x, y, z)
    return list(seen.values())
