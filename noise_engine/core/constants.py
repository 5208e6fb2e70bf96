# ==============================================================================
# Файл: noise_engine/core/constants.py
# Назначение: Константы формата BMP и параметры шума по умолчанию.
# ==============================================================================
from __future__ import annotations

# =======================================================================
# ФОРМАТ BMP (BITMAPFILEHEADER + BITMAPINFOHEADER)
# =======================================================================

BMP_SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE  # 54

# Все многобайтовые поля: little-endian.
FILE_HEADER_FORMAT = "<2sIHHI"
INFO_HEADER_FORMAT = "<IiiHHIIiiII"

COLOR_PLANES = 1
BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
COMPRESSION_NONE = 0  # BI_RGB
RESOLUTION_PPM = 3780  # ~96 DPI
ROW_ALIGNMENT = 4

INT32_MAX = 2 ** 31 - 1
UINT32_MAX = 2 ** 32 - 1

# =======================================================================
# ШУМ
# =======================================================================

PERMUTATION_SIZE = 256
TABLE_SIZE = PERMUTATION_SIZE * 2  # 512, вторая половина: копия первой

DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 100
DEFAULT_OCTAVES = 12
DEFAULT_LACUNARITY = 2.0
DEFAULT_GAIN = 0.5
DEFAULT_OUTPUT_PATH = "bin/noise.bmp"

# (v + 1) * 128 переводит [-1, 1] в [0, 256]; 256 срезается до 255.
INTENSITY_SCALE = 128.0
