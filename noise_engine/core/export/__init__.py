# ==============================================================================
# Файл: noise_engine/core/export/__init__.py
# Назначение: Точка входа в пакет для экспорта данных.
# ==============================================================================
from __future__ import annotations

from .bitmap_exporters import build_headers, encode, make_bitmap, write
from .text_exporters import format_noise_grid, format_permutation_table, write_lines

__all__ = [
    "build_headers",
    "encode",
    "make_bitmap",
    "write",
    "format_noise_grid",
    "format_permutation_table",
    "write_lines",
]
