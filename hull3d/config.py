"""Налаштування побудови оболонки."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from .constants import TOLERANCE_SCALE, EARLY_EXIT_FACTOR


@dataclass(frozen=True)
class HullConfig:
    """
    tolerance_scale    : множник у формулі tolerance (за замовчуванням 3).
    early_exit_factor  : перебір нових граней для «сироти» зупиняється,
                         щойно відстань перевищить early_exit_factor * tolerance.
    tolerance          : явне значення tolerance замість оцінки за екстремумами.
    validate           : після фіналізації перевірити сітку (validate()) і
                         кинути HullValidationError, якщо вона зламана.
    """
    tolerance_scale: float = TOLERANCE_SCALE
    early_exit_factor: float = EARLY_EXIT_FACTOR
    tolerance: Optional[float] = None
    validate: bool = False

    def __post_init__(self):
        if self.tolerance_scale <= 0:
            raise ValueError("tolerance_scale must be positive")
        if self.early_exit_factor <= 0:
            raise ValueError("early_exit_factor must be positive")
        if self.tolerance is not None and self.tolerance < 0:
            raise ValueError("tolerance must be non-negative")

    def with_overrides(self, **kwargs: Any) -> "HullConfig":
        return replace(self, **kwargs)


__all__ = ["HullConfig"]
