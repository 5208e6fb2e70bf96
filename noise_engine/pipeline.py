# ==============================================================================
# Файл: noise_engine/pipeline.py
# Назначение: Полный цикл: таблица -> поле fBm -> пиксели -> BMP.
# ==============================================================================
from __future__ import annotations
import logging
import time
from typing import Sequence, TextIO

from .core.config import NoiseConfig
from .core.export import (
    format_noise_grid,
    format_permutation_table,
    write,
    write_lines,
)
from .numerics.permutation import build_permutation_table, ensure_table
from .world.field_sampler import sample_field, sample_noise_grid

logger = logging.getLogger(__name__)


def _table_for(config: NoiseConfig, table=None):
    if table is not None:
        return ensure_table(table)
    return build_permutation_table(config.seed)


def generate_bitmap(config: NoiseConfig, table=None, sink=None) -> int:
    """
    Генерирует изображение шума и сохраняет его в BMP.

    sink по умолчанию config.output_path. Возвращает число записанных байт.
    """
    t0 = time.perf_counter()
    p = _table_for(config, table)
    pixels = sample_field(
        config.width,
        config.height,
        config.octaves,
        table=p,
        lacunarity=config.lacunarity,
        gain=config.gain,
        legacy_z=config.legacy_z,
    )
    target = config.output_path if sink is None else sink
    size = write(target, pixels, config.width, config.height, strict_format=config.strict_format)
    logger.info(
        "Noise bitmap %dx%d (octaves=%d, seed=%r) written: %d bytes in %.3fs",
        config.width, config.height, config.octaves, config.seed, size, time.perf_counter() - t0,
    )
    return size


def preview_noise(config: NoiseConfig, stream: TextIO, table=None) -> None:
    """Печатает значения fBm по сетке width x height (отладочный режим)."""
    field = sample_noise_grid(
        config.width,
        config.height,
        config.octaves,
        table=_table_for(config, table),
        lacunarity=config.lacunarity,
        gain=config.gain,
        legacy_z=config.legacy_z,
    )
    write_lines(format_noise_grid(field), stream)


def dump_permutation(config: NoiseConfig, stream: TextIO, table=None) -> Sequence[int]:
    p = _table_for(config, table)
    write_lines(format_permutation_table(p), stream)
    return p
