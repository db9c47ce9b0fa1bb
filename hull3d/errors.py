# hull3d/errors.py
from __future__ import annotations


class HullError(ValueError):
    """Базова помилка побудови оболонки (структурно некоректний вхід)."""


class InvalidInput(HullError):
    """Замало точок (потрібно щонайменше 4)."""


class DegenerateGeometry(HullError):
    """Усі точки збігаються, колінеарні або копланарні - 3D симплекс неможливий."""


class HullValidationError(HullError):
    """Побудована сітка не пройшла validate(); report - словник діагностики."""

    def __init__(self, message: str, report: dict):
        super().__init__(message)
        self.report = report


__all__ = ["HullError", "InvalidInput", "DegenerateGeometry", "HullValidationError"]
