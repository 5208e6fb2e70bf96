# ==============================================================================
# Файл: noise_engine/world/field_sampler.py
# Назначение: Обход сетки W x H, вычисление fBm и перевод в 8-битные пиксели.
# ==============================================================================
from __future__ import annotations
import logging
import time

import numpy as np

from ..core.constants import (
    BYTES_PER_PIXEL,
    DEFAULT_GAIN,
    DEFAULT_LACUNARITY,
    INTENSITY_SCALE,
)
from ..core.errors import ResourceExhaustion
from ..core.types import PixelBuffer
from ..core.utils.checks import check_dimensions, check_finite
from ..numerics.fbm import check_octave_params, fbm_grid_3d
from ..numerics.permutation import build_permutation_table, ensure_table

logger = logging.getLogger(__name__)


def _allocate(shape: tuple, dtype) -> np.ndarray:
    try:
        return np.empty(shape, dtype=dtype)
    except (MemoryError, ValueError) as e:
        # numpy бросает ValueError, если размер не помещается в адресное пространство
        raise ResourceExhaustion(f"cannot allocate {dtype.__name__} array of shape {shape}: {e}") from e


def to_intensity(values) -> np.ndarray:
    """
    Переводит значения шума ~[-1, 1] в uint8 с насыщением:
    clamp(round((v + 1) * 128), 0, 255). Округление: половина вверх.
    """
    scaled = np.floor((np.asarray(values, dtype=np.float64) + 1.0) * INTENSITY_SCALE + 0.5)
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8)


def sample_noise_grid(
        width: int,
        height: int,
        octaves: int,
        table=None,
        seed: int | None = None,
        z: float = 0.0,
        lacunarity: float = DEFAULT_LACUNARITY,
        gain: float = DEFAULT_GAIN,
        legacy_z: bool = False,
) -> np.ndarray:
    """Сырое поле fBm (float64, форма (height, width)), без квантования."""
    width, height = check_dimensions(width, height)
    octaves = check_octave_params(octaves, lacunarity, gain)
    check_finite(z=float(z))

    # Таблица строится один раз на изображение, не на каждый пиксель.
    p = build_permutation_table(seed) if table is None else ensure_table(table)

    field = _allocate((height, width), np.float64)
    fbm_grid_3d(p, field, float(z), octaves, float(lacunarity), float(gain), bool(legacy_z))
    return field


def sample_field(
        width: int,
        height: int,
        octaves: int,
        table=None,
        seed: int | None = None,
        lacunarity: float = DEFAULT_LACUNARITY,
        gain: float = DEFAULT_GAIN,
        legacy_z: bool = False,
) -> PixelBuffer:
    """
    Строит пиксельный буфер (height, width, 3) в оттенках серого.

    Строка 0 буфера соответствует ny = 0 и записывается в файл первой.
    Все три канала (B, G, R) получают одну и ту же интенсивность.
    """
    t0 = time.perf_counter()
    field = sample_noise_grid(
        width,
        height,
        octaves,
        table=table,
        seed=seed,
        z=0.0,
        lacunarity=lacunarity,
        gain=gain,
        legacy_z=legacy_z,
    )

    pixels = _allocate((field.shape[0], field.shape[1], BYTES_PER_PIXEL), np.uint8)
    pixels[...] = to_intensity(field)[:, :, np.newaxis]

    logger.debug(
        "Field sampled: %dx%d, octaves=%d, min=%.4f max=%.4f (%.3fs)",
        field.shape[1], field.shape[0], int(octaves),
        float(field.min()), float(field.max()), time.perf_counter() - t0,
    )
    return pixels
