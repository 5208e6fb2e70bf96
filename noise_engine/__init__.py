"""Perlin fBm noise generator with a 24-bit BMP writer."""
from .core.config import NoiseConfig, load_config
from .core.errors import (
    ConfigError,
    InputConstraintViolation,
    IOFailure,
    NoiseError,
    ResourceExhaustion,
)
from .core.export import encode, write
from .numerics.fbm import fbm
from .numerics.permutation import as_permutation_table, build_permutation_table
from .numerics.perlin_noise_3d import evaluate
from .pipeline import dump_permutation, generate_bitmap, preview_noise
from .world.field_sampler import sample_field, sample_noise_grid

__all__ = [
    "NoiseConfig",
    "load_config",
    "ConfigError",
    "InputConstraintViolation",
    "IOFailure",
    "NoiseError",
    "ResourceExhaustion",
    "encode",
    "write",
    "fbm",
    "as_permutation_table",
    "build_permutation_table",
    "evaluate",
    "dump_permutation",
    "generate_bitmap",
    "preview_noise",
    "sample_field",
    "sample_noise_grid",
]
