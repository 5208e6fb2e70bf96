# noise_engine/numerics/fbm.py
from __future__ import annotations
import numbers

import numpy as np
from numba import njit, prange

from ..core.constants import DEFAULT_GAIN, DEFAULT_LACUNARITY
from ..core.errors import InputConstraintViolation
from ..core.utils.checks import check_finite
from .permutation import ensure_table
from .perlin_noise_3d import perlin_noise_3d


@njit(cache=True)
def fbm_3d(
        p: np.ndarray,
        x: float,
        y: float,
        z: float,
        octaves: int,
        lacunarity: float,
        gain: float,
        legacy_z: bool,
) -> float:
    total, max_amp = 0.0, 0.0
    freq, amp = 1.0, 1.0
    for _ in range(octaves):
        total += amp * perlin_noise_3d(p, x * freq, y * freq, z * freq, legacy_z)
        max_amp += amp
        freq *= lacunarity
        amp *= gain
    return total / max_amp


@njit(cache=True, parallel=True)
def fbm_grid_3d(
        p: np.ndarray,
        output: np.ndarray,
        z: float,
        octaves: int,
        lacunarity: float,
        gain: float,
        legacy_z: bool,
) -> None:
    """
    Заполняет output (H, W) значениями fBm в нормированных координатах
    nx = i / W, ny = j / H. Таблица p только читается, строки независимы.
    """
    H, W = output.shape
    for j in prange(H):
        ny = j / H
        for i in range(W):
            output[j, i] = fbm_3d(p, i / W, ny, z, octaves, lacunarity, gain, legacy_z)


def check_octave_params(octaves: int, lacunarity: float, gain: float) -> int:
    """Проверяет параметры октав до запуска вычислений."""
    if isinstance(octaves, bool) or not isinstance(octaves, numbers.Integral):
        raise InputConstraintViolation(f"octaves must be an integer, got {octaves!r}")
    octaves = int(octaves)
    if octaves < 1:
        # при 0 октав сумма амплитуд равна нулю
        raise InputConstraintViolation(f"octaves must be >= 1, got {octaves}")
    check_finite(lacunarity=lacunarity, gain=gain)
    if not lacunarity > 0.0:
        raise InputConstraintViolation(f"lacunarity must be > 0, got {lacunarity}")
    if not gain > 0.0:
        raise InputConstraintViolation(f"gain must be > 0, got {gain}")
    return octaves


def fbm(
        table,
        x: float,
        y: float,
        z: float,
        octaves: int,
        lacunarity: float = DEFAULT_LACUNARITY,
        gain: float = DEFAULT_GAIN,
        legacy_z: bool = False,
) -> float:
    """
    Фрактальное броуновское движение: сумма октав шума Перлина,
    нормированная на сумму амплитуд, чтобы результат оставался в ~[-1, 1].
    """
    octaves = check_octave_params(octaves, lacunarity, gain)
    x, y, z = float(x), float(y), float(z)
    check_finite(x=x, y=y, z=z)
    return float(
        fbm_3d(
            ensure_table(table),
            x,
            y,
            z,
            octaves,
            float(lacunarity),
            float(gain),
            bool(legacy_z),
        )
    )
