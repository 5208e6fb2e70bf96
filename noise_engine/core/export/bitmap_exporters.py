# ==============================================================================
# Файл: noise_engine/core/export/bitmap_exporters.py
# Назначение: Сборка и запись несжатого 24-битного BMP (BGR, bottom-up).
# ==============================================================================
from __future__ import annotations
import contextlib
import logging
import os
from pathlib import Path
from typing import BinaryIO, Tuple, Union

import numpy as np

from ..constants import (
    BYTES_PER_PIXEL,
    PIXEL_DATA_OFFSET,
    ROW_ALIGNMENT,
    UINT32_MAX,
)
from ..errors import InputConstraintViolation, IOFailure
from ..types import Bitmap, BitmapFileHeader, BitmapInfoHeader, PixelBuffer
from ..utils.checks import check_dimensions

logger = logging.getLogger(__name__)

Sink = Union[str, os.PathLike, BinaryIO]


def _ensure_path_exists(path: str) -> None:
    """Убеждается, что директория для файла существует."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def row_padding(width: int, strict_format: bool) -> int:
    """Сколько нулевых байт дописывается к строке (только в strict-режиме)."""
    if not strict_format:
        return 0
    return (-width * BYTES_PER_PIXEL) % ROW_ALIGNMENT


def build_headers(
        width: int, height: int, strict_format: bool = False
) -> Tuple[BitmapFileHeader, BitmapInfoHeader]:
    """
    Заполняет BITMAPFILEHEADER и BITMAPINFOHEADER.

    strict_format=False повторяет исходную раскладку: строки без выравнивания,
    file_size = 54 + w*h*3, raw_data_size = 0.
    strict_format=True выравнивает строки до 4 байт и пересчитывает оба размера.
    """
    width, height = check_dimensions(width, height)

    if strict_format:
        stride = width * BYTES_PER_PIXEL + row_padding(width, True)
        raw_data_size = stride * height
        file_size = PIXEL_DATA_OFFSET + raw_data_size
    else:
        raw_data_size = 0
        file_size = PIXEL_DATA_OFFSET + width * height * BYTES_PER_PIXEL

    if file_size > UINT32_MAX:
        raise InputConstraintViolation(
            f"bitmap of {width}x{height} does not fit the 32-bit file_size field ({file_size} bytes)"
        )

    return (
        BitmapFileHeader(file_size=file_size),
        BitmapInfoHeader(width=width, height=height, raw_data_size=raw_data_size),
    )


def _as_pixel_array(pixel_buffer, width: int, height: int) -> np.ndarray:
    """
    Приводит буфер к (height, width, 3) uint8.

    Принимает numpy-массив (h, w, 3) или плоскую последовательность из w*h троек (b, g, r).
    """
    arr = np.asarray(pixel_buffer)
    if arr.ndim == 2 and arr.shape == (width * height, BYTES_PER_PIXEL):
        arr = arr.reshape(height, width, BYTES_PER_PIXEL)
    if arr.shape != (height, width, BYTES_PER_PIXEL):
        raise InputConstraintViolation(
            f"pixel buffer shape {arr.shape} does not match {width}x{height}x{BYTES_PER_PIXEL}"
        )

    if arr.dtype != np.uint8:
        if not np.issubdtype(arr.dtype, np.integer):
            raise InputConstraintViolation(f"pixel buffer must hold integers, got {arr.dtype}")
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise InputConstraintViolation("pixel channel values must be in [0, 255]")
        arr = arr.astype(np.uint8)

    return np.ascontiguousarray(arr)


def make_bitmap(
        pixel_buffer: PixelBuffer, width: int, height: int, strict_format: bool = False
) -> Bitmap:
    file_header, info_header = build_headers(width, height, strict_format)
    pixels = _as_pixel_array(pixel_buffer, info_header.width, info_header.height)
    return Bitmap(
        file_header=file_header,
        info_header=info_header,
        pixels=pixels,
        row_padding=row_padding(info_header.width, strict_format),
    )


def _pixel_bytes(bitmap: Bitmap) -> bytes:
    """Строки пишутся в порядке буфера: строка 0 становится нижней строкой картинки."""
    if bitmap.row_padding == 0:
        return bitmap.pixels.tobytes()

    h, w = bitmap.height, bitmap.width
    row_len = w * BYTES_PER_PIXEL
    rows = np.zeros((h, row_len + bitmap.row_padding), dtype=np.uint8)
    rows[:, :row_len] = bitmap.pixels.reshape(h, row_len)
    return rows.tobytes()


def encode_bitmap(bitmap: Bitmap) -> bytes:
    return b"".join((bitmap.file_header.pack(), bitmap.info_header.pack(), _pixel_bytes(bitmap)))


def encode(
        pixel_buffer: PixelBuffer, width: int, height: int, strict_format: bool = False
) -> bytes:
    """Точная байтовая последовательность BMP-файла для буфера."""
    return encode_bitmap(make_bitmap(pixel_buffer, width, height, strict_format))


def write(
        sink: Sink,
        pixel_buffer: PixelBuffer,
        width: int,
        height: int,
        strict_format: bool = False,
        verbose: bool = False,
) -> int:
    """
    Сохраняет BMP в файл (путь) или в открытый бинарный поток.

    Путь пишется через временный файл <path>.tmp и os.replace, так что
    при ошибке на месте результата не остается полузаписанного файла.
    Возвращает количество записанных байт.
    """
    data = encode(pixel_buffer, width, height, strict_format)

    if hasattr(sink, "write"):
        try:
            sink.write(data)
        except (OSError, TypeError) as e:
            # TypeError: поток открыт в текстовом режиме
            raise IOFailure(f"failed to write bitmap to stream: {e}") from e
        if verbose:
            logger.info("EXPORT: bitmap (%d bytes) written to stream", len(data))
        return len(data)

    path = os.fspath(sink)
    tmp_path = path + ".tmp"
    try:
        _ensure_path_exists(path)
        with open(tmp_path, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        raise IOFailure(f"failed to create bitmap '{path}': {e}") from e

    if verbose:
        logger.info("EXPORT: bitmap %dx%d saved: %s", width, height, path)
    return len(data)
