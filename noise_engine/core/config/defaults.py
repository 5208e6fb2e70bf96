# ========================
# file: noise_engine/core/config/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..constants import (
    DEFAULT_GAIN,
    DEFAULT_HEIGHT,
    DEFAULT_LACUNARITY,
    DEFAULT_OCTAVES,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_WIDTH,
)

DEFAULT_CONFIG: Dict[str, Any] = {
    "image": {
        "width": DEFAULT_WIDTH,
        "height": DEFAULT_HEIGHT,
        "output_path": DEFAULT_OUTPUT_PATH,
        "strict_format": False,
    },
    "noise": {
        "octaves": DEFAULT_OCTAVES,
        "lacunarity": DEFAULT_LACUNARITY,
        "gain": DEFAULT_GAIN,
        # None: сид берется из энтропии ОС при каждом запуске
        "seed": None,
        "legacy_z": False,
    },
}
