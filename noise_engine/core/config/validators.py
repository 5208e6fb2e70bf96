# ========================
# file: noise_engine/core/config/validators.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..constants import INT32_MAX
from ..errors import InputConstraintViolation


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise InputConstraintViolation(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validates a merged config dict.

    Raises InputConstraintViolation on the first failing check.
    """
    img = dict(cfg.get("image", {}))
    for key in ("width", "height"):
        v = img.get(key)
        _require(_is_int(v) and 1 <= v <= INT32_MAX, f"image.{key} must be an integer in [1, {INT32_MAX}]")
    _require(
        isinstance(img.get("output_path"), str) and img["output_path"],
        "image.output_path must be non-empty string",
    )
    _require(isinstance(img.get("strict_format"), bool), "image.strict_format must be bool")

    nz = dict(cfg.get("noise", {}))
    _require(_is_int(nz.get("octaves")) and nz["octaves"] >= 1, "noise.octaves must be an integer >= 1")
    for key in ("lacunarity", "gain"):
        v = nz.get(key)
        _require(
            isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0.0,
            f"noise.{key} must be > 0",
        )
    seed = nz.get("seed")
    _require(seed is None or (_is_int(seed) and seed >= 0), "noise.seed must be null or a non-negative integer")
    _require(isinstance(nz.get("legacy_z"), bool), "noise.legacy_z must be bool")
