# noise_engine/core/types.py
from __future__ import annotations
import struct
from dataclasses import dataclass

import numpy as np

from .constants import (
    BITS_PER_PIXEL,
    BMP_SIGNATURE,
    COLOR_PLANES,
    COMPRESSION_NONE,
    FILE_HEADER_FORMAT,
    INFO_HEADER_FORMAT,
    INFO_HEADER_SIZE,
    PIXEL_DATA_OFFSET,
    RESOLUTION_PPM,
)

# Пиксельный буфер: (height, width, 3), uint8, порядок каналов B, G, R.
PixelBuffer = np.ndarray
# Таблица перестановок: (512,), int32, только для чтения.
PermutationTable = np.ndarray


@dataclass(frozen=True)
class BitmapFileHeader:
    """14-байтовый заголовок файла BMP."""

    file_size: int
    signature: bytes = BMP_SIGNATURE
    reserved1: int = 0
    reserved2: int = 0
    offset: int = PIXEL_DATA_OFFSET

    def pack(self) -> bytes:
        return struct.pack(
            FILE_HEADER_FORMAT,
            self.signature,
            self.file_size,
            self.reserved1,
            self.reserved2,
            self.offset,
        )


@dataclass(frozen=True)
class BitmapInfoHeader:
    """40-байтовый DIB-заголовок (BITMAPINFOHEADER)."""

    width: int
    height: int
    raw_data_size: int = 0
    header_size: int = INFO_HEADER_SIZE
    color_planes: int = COLOR_PLANES
    bits_per_pixel: int = BITS_PER_PIXEL
    compression: int = COMPRESSION_NONE
    horizontal_resolution: int = RESOLUTION_PPM
    vertical_resolution: int = RESOLUTION_PPM
    color_table_entries: int = 0
    important_colors: int = 0

    def pack(self) -> bytes:
        return struct.pack(
            INFO_HEADER_FORMAT,
            self.header_size,
            self.width,
            self.height,
            self.color_planes,
            self.bits_per_pixel,
            self.compression,
            self.raw_data_size,
            self.horizontal_resolution,
            self.vertical_resolution,
            self.color_table_entries,
            self.important_colors,
        )


@dataclass
class Bitmap:
    """Один BMP-артефакт: пара заголовков и пиксельный буфер."""

    file_header: BitmapFileHeader
    info_header: BitmapInfoHeader
    pixels: PixelBuffer
    row_padding: int = 0

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def height(self) -> int:
        return self.info_header.height
