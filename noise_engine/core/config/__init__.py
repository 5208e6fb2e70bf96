# ========================
# file: noise_engine/core/config/__init__.py
# ========================
from .model import NoiseConfig
from .loader import load_config, deep_merge
from .defaults import DEFAULT_CONFIG

__all__ = [
    "NoiseConfig",
    "load_config",
    "deep_merge",
    "DEFAULT_CONFIG",
]
