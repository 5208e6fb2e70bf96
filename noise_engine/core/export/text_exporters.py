# ==============================================================================
# Файл: noise_engine/core/export/text_exporters.py
# Назначение: Отладочный вывод в консоль: сетка значений шума и таблица перестановок.
# ==============================================================================
from __future__ import annotations
from typing import Iterator, TextIO

import numpy as np


def format_noise_grid(field: np.ndarray, fmt: str = "{:+.3f}") -> Iterator[str]:
    """Строки текстового превью: по одной на строку поля."""
    for row in field:
        yield " ".join(fmt.format(float(v)) for v in row)


def format_permutation_table(table: np.ndarray, per_line: int = 16) -> Iterator[str]:
    for start in range(0, len(table), per_line):
        yield " ".join(f"{int(v):3d}" for v in table[start:start + per_line])


def write_lines(lines, stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")
