"""Числові константи побудови оболонки."""
from __future__ import annotations

import sys

MACHINE_EPS: float = sys.float_info.epsilon   # 2**-52 для double
TOLERANCE_SCALE: float = 3.0                  # tolerance = 3 * eps * Σ max|coord|
EARLY_EXIT_FACTOR: float = 1000.0             # зупинка перебору нових граней при d > 1000*tol
MIN_POINTS: int = 4

NIL: int = -1  # «немає дескриптора» в арені вершин/ребер/граней

__all__ = [
    "MACHINE_EPS",
    "TOLERANCE_SCALE",
    "EARLY_EXIT_FACTOR",
    "MIN_POINTS",
    "NIL",
]
