# noise_engine/numerics/permutation.py
from __future__ import annotations
import logging
import weakref
from typing import Iterable, Union

import numpy as np

from ..core.constants import PERMUTATION_SIZE, TABLE_SIZE
from ..core.errors import InputConstraintViolation
from ..core.types import PermutationTable

logger = logging.getLogger(__name__)

RngState = Union[np.random.Generator, int, None]

# Таблицы, прошедшие проверку и заморозку. id -> массив; запись исчезает вместе с массивом.
_CHECKED_TABLES: "weakref.WeakValueDictionary[int, np.ndarray]" = weakref.WeakValueDictionary()


def _freeze(table: np.ndarray) -> PermutationTable:
    table = np.array(table, dtype=np.int32, copy=True)
    table.flags.writeable = False
    _CHECKED_TABLES[id(table)] = table
    return table


def build_permutation_table(rng_state: RngState = None) -> PermutationTable:
    """
    Строит таблицу перестановок из 512 элементов.

    Первые 256 значений: перемешанные по Фишеру–Йетсу 0..255,
    вторые 256: их точная копия (чтобы p[X + 1] и p[A + 1] не выходили за край).

    rng_state: numpy Generator, целочисленный сид или None (энтропия ОС).
    """
    rng = rng_state if isinstance(rng_state, np.random.Generator) else np.random.default_rng(rng_state)

    perm = np.arange(PERMUTATION_SIZE, dtype=np.int32)
    for i in range(PERMUTATION_SIZE - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        perm[i], perm[j] = perm[j], perm[i]

    if not isinstance(rng_state, np.random.Generator):
        logger.debug("Permutation table built (seed=%r)", rng_state)
    return _freeze(np.concatenate((perm, perm)))


def as_permutation_table(values: Iterable[int]) -> PermutationTable:
    """Проверяет и приводит заданную вручную таблицу (256 или 512 значений)."""
    arr = np.asarray(list(values) if not isinstance(values, np.ndarray) else values)
    if arr.ndim != 1 or arr.size not in (PERMUTATION_SIZE, TABLE_SIZE):
        raise InputConstraintViolation(
            f"permutation table must have {PERMUTATION_SIZE} or {TABLE_SIZE} entries, got shape {arr.shape}"
        )
    if not np.issubdtype(arr.dtype, np.integer):
        raise InputConstraintViolation(f"permutation table must hold integers, got {arr.dtype}")

    head = arr[:PERMUTATION_SIZE]
    if not np.array_equal(np.sort(head), np.arange(PERMUTATION_SIZE)):
        raise InputConstraintViolation("first 256 entries must be a permutation of 0..255")
    if arr.size == TABLE_SIZE:
        if not np.array_equal(arr[PERMUTATION_SIZE:], head):
            raise InputConstraintViolation("entries 256..511 must duplicate entries 0..255")
        return _freeze(arr)
    return _freeze(np.concatenate((head, head)))


def ensure_table(table) -> PermutationTable:
    """
    Возвращает таблицу как есть, только если она построена здесь же и заморожена.

    Любой другой массив проверяется и копируется: ядра индексируют p[X], p[A], p[AA]
    без проверки границ, поэтому значения вне 0..255 недопустимы.
    """
    if (
            isinstance(table, np.ndarray)
            and not table.flags.writeable
            and _CHECKED_TABLES.get(id(table)) is table
    ):
        return table
    return as_permutation_table(table)
