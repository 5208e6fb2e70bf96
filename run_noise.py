# run_noise.py
import argparse
import logging
import sys

from noise_engine.core.config import load_config
from noise_engine.core.errors import NoiseError
from noise_engine.pipeline import dump_permutation, generate_bitmap, preview_noise
from noise_engine.setup_logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generates a Perlin fBm noise bitmap")
    parser.add_argument("--mode", choices=["bitmap", "preview", "permutation"], default="bitmap",
                        help="bitmap: write BMP; preview: print noise values; permutation: print the table")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Image height in pixels")
    parser.add_argument("--octaves", "-o", type=int, default=None, help="Number of layers of noise to apply")
    parser.add_argument("--lacunarity", "-l", type=float, default=None, help="Frequency multiplier per octave")
    parser.add_argument("--gain", "-g", type=float, default=None, help="Amplitude multiplier per octave")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the permutation shuffle (default: random)")
    parser.add_argument("--out", type=str, default=None, help="File path for the bitmap")
    parser.add_argument("--strict-format", action="store_true", default=None,
                        help="Pad rows to 4 bytes as required by most BMP readers")
    parser.add_argument("--legacy-z", action="store_true", default=None,
                        help="Hash the Z lattice cell from y (bit-compatible with the old generator)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    image = {
        "width": args.width,
        "height": args.height,
        "output_path": args.out,
        "strict_format": args.strict_format,
    }
    noise = {
        "octaves": args.octaves,
        "lacunarity": args.lacunarity,
        "gain": args.gain,
        "seed": args.seed,
        "legacy_z": args.legacy_z,
    }
    return {
        "image": {k: v for k, v in image.items() if v is not None},
        "noise": {k: v for k, v in noise.items() if v is not None},
    }


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        config = load_config(args.config, _overrides(args))
        if args.mode == "preview":
            preview_noise(config, sys.stdout)
        elif args.mode == "permutation":
            dump_permutation(config, sys.stdout)
        else:
            generate_bitmap(config)
    except NoiseError as e:
        logger.error("Failed to create bitmap: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
