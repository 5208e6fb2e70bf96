# ==============================================================================
# Файл: tests/test_pipeline.py
# Назначение: Сквозные тесты: конфиг -> шум -> BMP, и точка входа run_noise.
# ==============================================================================
import unittest
import io
import os
import struct
import tempfile

import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from noise_engine.core.config import load_config
from noise_engine.pipeline import dump_permutation, generate_bitmap, preview_noise
import run_noise


class TestPipeline(unittest.TestCase):

    def test_fixed_table_is_byte_identical(self):
        table = np.tile(np.arange(256, dtype=np.int32), 2)
        with tempfile.TemporaryDirectory() as tmp_dir:
            outputs = []
            for name in ("a.bmp", "b.bmp"):
                cfg = load_config({"image": {"width": 24, "height": 16, "output_path": os.path.join(tmp_dir, name)},
                                   "noise": {"octaves": 5}})
                generate_bitmap(cfg, table=table)
                with open(cfg.output_path, "rb") as f:
                    outputs.append(f.read())
        self.assertEqual(outputs[0], outputs[1])
        self.assertEqual(len(outputs[0]), 54 + 24 * 16 * 3)

    def test_generate_bitmap_to_stream(self):
        cfg = load_config({"image": {"width": 5, "height": 3, "strict_format": True}, "noise": {"seed": 2, "octaves": 3}})
        buf = io.BytesIO()
        size = generate_bitmap(cfg, sink=buf)
        raw = buf.getvalue()
        self.assertEqual(size, len(raw))
        # 5 px * 3 = 15 байт, выравнивание до 16
        self.assertEqual(struct.unpack("<I", raw[2:6])[0], 54 + 16 * 3)

    def test_preview_prints_grid(self):
        cfg = load_config({"image": {"width": 4, "height": 3}, "noise": {"seed": 1, "octaves": 2}})
        out = io.StringIO()
        preview_noise(cfg, out)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(all(len(line.split()) == 4 for line in lines))
        self.assertEqual(lines[0].split()[0], "+0.000")

    def test_dump_permutation(self):
        cfg = load_config({"noise": {"seed": 12}})
        out = io.StringIO()
        p = dump_permutation(cfg, out)
        values = [int(v) for v in out.getvalue().split()]
        self.assertEqual(values, [int(v) for v in p])
        self.assertEqual(len(values), 512)


class TestRunNoise(unittest.TestCase):

    def test_main_writes_bitmap(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "out", "noise.bmp")
            code = run_noise.main(["--width", "10", "--height", "6", "--octaves", "3",
                                   "--seed", "1", "--out", path, "--log-level", "WARNING"])
            self.assertEqual(code, 0)
            with open(path, "rb") as f:
                raw = f.read()
        self.assertEqual(raw[:2], b"BM")
        self.assertEqual(len(raw), 54 + 10 * 6 * 3)

    def test_main_reports_failure(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            blocker = os.path.join(tmp_dir, "file")
            with open(blocker, "wb") as f:
                f.write(b"x")
            code = run_noise.main(["--width", "2", "--height", "2", "--octaves", "1",
                                   "--out", os.path.join(blocker, "noise.bmp"), "--log-level", "ERROR"])
        self.assertEqual(code, 1)

    def test_main_rejects_zero_octaves(self):
        code = run_noise.main(["--octaves", "0", "--log-level", "ERROR"])
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
