"""Логування для hull3d.

Усі модулі беруть логери через get_logger(); кореневий логер процесу не
змінюється, обробник вішається лише на логер 'hull3d'.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT = 'hull3d'


def _ensure_root() -> logging.Logger:
    """Гарантує рівно один StreamHandler на логері 'hull3d' (замість NullHandler з __init__)."""
    root = logging.getLogger(_ROOT)
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Увімкнути вивід логів hull3d у stdout із заданим рівнем."""
    root = _ensure_root()
    root.setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Логер у просторі імен 'hull3d'. Без level - NOTSET, тобто рівень
    успадковується від 'hull3d' (див. configure_logging).
    """
    if name != _ROOT and not name.startswith(_ROOT + '.'):
        name = f'{_ROOT}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
