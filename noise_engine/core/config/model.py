# ========================
# file: noise_engine/core/config/model.py
# ========================
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class NoiseConfig:
    width: int
    height: int
    octaves: int
    output_path: str
    lacunarity: float = 2.0
    gain: float = 0.5
    seed: Optional[int] = None
    legacy_z: bool = False
    strict_format: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "image": {
                "width": self.width,
                "height": self.height,
                "output_path": self.output_path,
                "strict_format": bool(self.strict_format),
            },
            "noise": {
                "octaves": self.octaves,
                "lacunarity": self.lacunarity,
                "gain": self.gain,
                "seed": self.seed,
                "legacy_z": bool(self.legacy_z),
            },
        }
