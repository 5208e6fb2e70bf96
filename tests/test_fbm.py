# ==============================================================================
# Файл: tests/test_fbm.py
# Назначение: Суммирование октав (fBm) и проверка входных параметров.
# ==============================================================================
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from noise_engine.core.errors import InputConstraintViolation
from noise_engine.numerics.fbm import fbm
from noise_engine.numerics.permutation import build_permutation_table
from noise_engine.numerics.perlin_noise_3d import evaluate


class TestFbm(unittest.TestCase):

    def setUp(self):
        self.table = build_permutation_table(77)

    def test_single_octave_equals_evaluate(self):
        for x, y, z in [(0.31, 0.72, 0.0), (5.5, -2.25, 1.125), (12.9, 3.3, 7.7)]:
            self.assertEqual(fbm(self.table, x, y, z, 1), evaluate(self.table, x, y, z))

    def test_zero_octaves_rejected(self):
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, 0.5, 0.5, 0.0, 0)
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, 0.5, 0.5, 0.0, -3)

    def test_invalid_octave_params(self):
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, 0.5, 0.5, 0.0, 2.5)
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, 0.5, 0.5, 0.0, 4, lacunarity=0.0)
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, 0.5, 0.5, 0.0, 4, gain=-0.5)

    def test_non_finite_inputs_rejected(self):
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, float("nan"), 0.5, 0.0, 4)
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, 0.5, 0.5, float("inf"), 4)
        with self.assertRaises(InputConstraintViolation):
            fbm(self.table, 0.5, 0.5, 0.0, 4, lacunarity=float("inf"))

    def test_input_constraint_is_value_error(self):
        self.assertTrue(issubclass(InputConstraintViolation, ValueError))

    def test_two_octaves_weighted_sum(self):
        x, y, z = 0.37, 0.81, 0.13
        expected = (evaluate(self.table, x, y, z) + 0.5 * evaluate(self.table, 2 * x, 2 * y, 2 * z)) / 1.5
        self.assertAlmostEqual(fbm(self.table, x, y, z, 2), expected, places=12)

    def test_normalized_range(self):
        rng = np.random.default_rng(4)
        for x, y in rng.uniform(0.0, 1.0, size=(300, 2)):
            v = fbm(self.table, x, y, 0.0, 12)
            self.assertGreaterEqual(v, -1.0001)
            self.assertLessEqual(v, 1.0001)

    def test_deterministic(self):
        self.assertEqual(fbm(self.table, 0.2, 0.9, 0.0, 8), fbm(self.table, 0.2, 0.9, 0.0, 8))


if __name__ == '__main__':
    unittest.main()
