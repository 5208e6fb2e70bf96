# noise_engine/core/utils/checks.py
from __future__ import annotations
import math
import numbers
from typing import Tuple

from ..constants import INT32_MAX
from ..errors import InputConstraintViolation


def check_dimensions(width: int, height: int) -> Tuple[int, int]:
    """Ширина и высота: целые в [1, INT32_MAX] (поля BMP знаковые 32-битные)."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InputConstraintViolation(f"{name} must be an integer, got {value!r}")
        if not 1 <= int(value) <= INT32_MAX:
            raise InputConstraintViolation(f"{name} must be in [1, {INT32_MAX}], got {value}")
    return int(width), int(height)


def check_finite(**values: float) -> None:
    """Координаты и множители шума должны быть конечными (inf/nan ломают floor -> int)."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise InputConstraintViolation(f"{name} must be finite, got {value!r}")
