# ==============================================================================
# Файл: tests/test_perlin_noise.py
# Назначение: Свойства 3D-шума Перлина и вспомогательных функций.
# ==============================================================================
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from noise_engine.core.errors import InputConstraintViolation
from noise_engine.numerics.permutation import build_permutation_table
from noise_engine.numerics.perlin_noise_3d import evaluate, fade, grad, lerp


class TestHelpers(unittest.TestCase):

    def test_fade(self):
        self.assertEqual(fade(0.0), 0.0)
        self.assertEqual(fade(1.0), 1.0)
        self.assertAlmostEqual(fade(0.5), 0.5)
        t = 0.3
        self.assertAlmostEqual(fade(t), 6 * t ** 5 - 15 * t ** 4 + 10 * t ** 3)

    def test_lerp(self):
        self.assertEqual(lerp(0.0, 2.0, 8.0), 2.0)
        self.assertEqual(lerp(1.0, 2.0, 8.0), 8.0)
        self.assertAlmostEqual(lerp(0.25, 2.0, 8.0), 3.5)

    def test_grad_selector(self):
        x, y, z = 0.1, 0.2, 0.4
        self.assertAlmostEqual(grad(0, x, y, z), x + y)
        self.assertAlmostEqual(grad(1, x, y, z), -x + y)
        self.assertAlmostEqual(grad(2, x, y, z), x - y)
        self.assertAlmostEqual(grad(3, x, y, z), -x - y)
        self.assertAlmostEqual(grad(4, x, y, z), x + z)
        self.assertAlmostEqual(grad(8, x, y, z), y + z)
        self.assertAlmostEqual(grad(12, x, y, z), y + x)
        self.assertAlmostEqual(grad(14, x, y, z), y - x)
        self.assertAlmostEqual(grad(15, x, y, z), -y - z)
        # берутся только младшие 4 бита
        self.assertAlmostEqual(grad(16 + 5, x, y, z), grad(5, x, y, z))


class TestEvaluate(unittest.TestCase):

    def setUp(self):
        self.table = build_permutation_table(2024)

    def test_deterministic(self):
        a = evaluate(self.table, 1.37, 4.21, 0.5)
        b = evaluate(self.table, 1.37, 4.21, 0.5)
        self.assertEqual(a, b)

    def test_zero_on_lattice_points(self):
        for point in [(0, 0, 0), (3, 7, 1), (-2, 5, 9)]:
            self.assertEqual(evaluate(self.table, *point), 0.0)

    def test_range(self):
        rng = np.random.default_rng(11)
        for k in range(5):
            table = build_permutation_table(k)
            for x, y, z in rng.uniform(-300.0, 300.0, size=(400, 3)):
                v = evaluate(table, x, y, z)
                self.assertGreaterEqual(v, -1.0001)
                self.assertLessEqual(v, 1.0001)

    def test_not_constant(self):
        values = {evaluate(self.table, 0.1 * i + 0.05, 0.37, 0.0) for i in range(50)}
        self.assertGreater(len(values), 10)

    def test_wraps_every_256_cells(self):
        a = evaluate(self.table, 0.3, 0.6, 0.2)
        b = evaluate(self.table, 256.3, 0.6, 0.2)
        self.assertAlmostEqual(a, b, places=9)

    def test_legacy_z_uses_floor_of_y(self):
        # в legacy-режиме ячейка Z берется из floor(y) = 1,
        # то есть совпадает с обычным режимом при z, сдвинутом на 1
        legacy = evaluate(self.table, 0.3, 1.7, 0.25, legacy_z=True)
        shifted = evaluate(self.table, 0.3, 1.7, 1.25)
        self.assertEqual(legacy, shifted)

    def test_legacy_z_matches_default_in_first_cell(self):
        for y in (0.0, 0.4, 0.99):
            self.assertEqual(
                evaluate(self.table, 0.3, y, 0.25, legacy_z=True),
                evaluate(self.table, 0.3, y, 0.25),
            )

    def test_accepts_plain_list_table(self):
        table = list(range(256)) * 2
        self.assertEqual(evaluate(table, 0.5, 0.5, 0.5), evaluate(np.array(table), 0.5, 0.5, 0.5))

    def test_non_finite_coordinates_rejected(self):
        for point in [(float("inf"), 0.5, 0.5), (0.5, float("nan"), 0.5), (0.5, 0.5, float("-inf"))]:
            with self.assertRaises(InputConstraintViolation):
                evaluate(self.table, *point)


if __name__ == '__main__':
    unittest.main()
