# noise_engine/numerics/perlin_noise_3d.py
from __future__ import annotations
import numpy as np
from numba import njit

from ..core.utils.checks import check_finite
from .permutation import ensure_table


@njit(inline='always', cache=True)
def fade(t: float) -> float:
    # 6t^5 - 15t^4 + 10t^3
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit(inline='always', cache=True)
def lerp(t: float, a: float, b: float) -> float:
    return (1.0 - t) * a + t * b


@njit(inline='always', cache=True)
def grad(hash_val: int, x: float, y: float, z: float) -> float:
    h = hash_val & 15
    u = x if h < 8 else y
    v = y if h < 4 else (x if (h == 12 or h == 14) else z)
    res = u if (h & 1) == 0 else -u
    if (h & 2) == 0:
        res += v
    else:
        res -= v
    return res


@njit(cache=True)
def perlin_noise_3d(p: np.ndarray, x: float, y: float, z: float, legacy_z: bool) -> float:
    """
    Классический 3D-шум Перлина по таблице перестановок p (512 значений).

    legacy_z=True берет ячейку Z из floor(y), как в исходной C-версии генератора.
    Результат примерно в [-1, 1].
    """
    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)

    X = int(fx) & 255
    Y = int(fy) & 255
    if legacy_z:
        Z = int(fy) & 255
    else:
        Z = int(fz) & 255

    x -= fx
    y -= fy
    z -= fz

    u = fade(x)
    v = fade(y)
    w = fade(z)

    A = p[X] + Y
    AA = p[A] + Z
    AB = p[A + 1] + Z
    B = p[X + 1] + Y
    BA = p[B] + Z
    BB = p[B + 1] + Z

    near = lerp(
        v,
        lerp(u, grad(p[AA], x, y, z), grad(p[BA], x - 1.0, y, z)),
        lerp(u, grad(p[AB], x, y - 1.0, z), grad(p[BB], x - 1.0, y - 1.0, z)),
    )
    far = lerp(
        v,
        lerp(u, grad(p[AA + 1], x, y, z - 1.0), grad(p[BA + 1], x - 1.0, y, z - 1.0)),
        lerp(u, grad(p[AB + 1], x, y - 1.0, z - 1.0), grad(p[BB + 1], x - 1.0, y - 1.0, z - 1.0)),
    )
    return lerp(w, near, far)


def evaluate(table, x: float, y: float, z: float, legacy_z: bool = False) -> float:
    """Значение шума Перлина в точке (x, y, z) для данной таблицы."""
    x, y, z = float(x), float(y), float(z)
    check_finite(x=x, y=y, z=z)
    return float(perlin_noise_3d(ensure_table(table), x, y, z, bool(legacy_z)))
