# ========================
# file: noise_engine/core/config/loader.py
# ========================
from __future__ import annotations
import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Union

from ..errors import ConfigError
from .defaults import DEFAULT_CONFIG
from .model import NoiseConfig
from .validators import validate_dict

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"config '{path}' is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config '{path}' must contain a JSON object")
    return data


def load_config(
    source: Union[str, os.PathLike, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> NoiseConfig:
    """Load a config from a JSON path or dict, merge with defaults and apply overrides.

    Args:
        source: path to a JSON file, raw dict, or None for defaults only
        overrides: mapping of ad-hoc overrides (last layer), e.g. from CLI flags
    Returns:
        NoiseConfig (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, (str, os.PathLike)):
        path = os.fspath(source)
        if not os.path.isfile(path):
            raise ConfigError(f"config file not found: {path}")
        data = _load_json_file(path)
        logger.debug("Config loaded from %s", path)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path, dict or None")

    merged = deep_merge(DEFAULT_CONFIG, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    img, nz = merged["image"], merged["noise"]
    return NoiseConfig(
        width=int(img["width"]),
        height=int(img["height"]),
        octaves=int(nz["octaves"]),
        output_path=str(img["output_path"]),
        lacunarity=float(nz["lacunarity"]),
        gain=float(nz["gain"]),
        seed=nz["seed"],
        legacy_z=bool(nz["legacy_z"]),
        strict_format=bool(img["strict_format"]),
    )
