from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

from .constants import MACHINE_EPS, TOLERANCE_SCALE, MIN_POINTS
from .errors import InvalidInput
from .geom import Pt


@dataclass(frozen=True)
class Extremes:
    """
    min_indices[i] / max_indices[i]: індекс першої точки з мінімальною /
    максимальною координатою по осі i.
    """
    min_indices: Tuple[int, int, int]
    max_indices: Tuple[int, int, int]
    tolerance: float

    def separation(self, points: Sequence[Pt], axis: int) -> float:
        return points[self.max_indices[axis]].component(axis) - points[self.min_indices[axis]].component(axis)


def compute_extremes(points: Sequence[Pt], tolerance_scale: float = TOLERANCE_SCALE) -> Extremes:
    """
    Шість екстремальних точок (min/max по кожній осі) і оцінка епсилону:
        tolerance = scale * eps * Σ_axis max(|min_axis|, |max_axis|)
    """
    if len(points) < MIN_POINTS:
        raise InvalidInput(f"Need at least {MIN_POINTS} points, got {len(points)}")

    first = points[0]
    lo = [first.x, first.y, first.z]
    hi = lo[:]
    min_idx = [0, 0, 0]
    max_idx = [0, 0, 0]
    for i, p in enumerate(points):
        for axis, c in enumerate(p):
            # строгі порівняння: при рівності перемагає перша точка
            if c < lo[axis]:
                lo[axis] = c
                min_idx[axis] = i
            if c > hi[axis]:
                hi[axis] = c
                max_idx[axis] = i

    tolerance = tolerance_scale * MACHINE_EPS * sum(max(abs(lo[a]), abs(hi[a])) for a in range(3))
    return Extremes(tuple(min_idx), tuple(max_idx), tolerance)
