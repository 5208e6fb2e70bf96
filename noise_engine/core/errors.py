# ========================
# file: noise_engine/core/errors.py
# ========================
class NoiseError(Exception):
    """Base error for the noise generator."""


class InputConstraintViolation(NoiseError, ValueError):
    """Raised when an input (octaves, size, table, buffer, config) is out of range."""


class IOFailure(NoiseError, OSError):
    """Raised when the bitmap sink cannot be created or written."""


class ResourceExhaustion(NoiseError, MemoryError):
    """Raised when the pixel buffer cannot be allocated."""


class ConfigError(NoiseError):
    """Raised when a config source cannot be resolved or parsed."""
