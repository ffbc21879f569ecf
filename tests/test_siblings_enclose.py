import math
import unittest

import numpy as np

from clusterpack.enclose import enclose
from clusterpack.siblings import pack_siblings


class TestEnclose(unittest.TestCase):
    def test_enclose_empty(self):
        self.assertIsNone(enclose([]))

    def test_enclose_single_circle(self):
        np.testing.assert_array_almost_equal(enclose([(1.0, 2.0, 3.0)]), (1.0, 2.0, 3.0))

    def test_enclose_two_circles(self):
        np.testing.assert_array_almost_equal(
            enclose([(-1.0, 0.0, 1.0), (2.0, 0.0, 2.0)]), (1.0, 0.0, 3.0)
        )

    def test_enclose_nested_circle_returns_outer(self):
        np.testing.assert_array_almost_equal(
            enclose([(0.5, 0.0, 1.0), (0.0, 0.0, 5.0)]), (0.0, 0.0, 5.0)
        )

    def test_enclose_points_on_equilateral_triangle(self):
        x, y, r = enclose([(0.0, 0.0, 0.0), (2.0, 0.0, 0.0), (1.0, math.sqrt(3), 0.0)])

        np.testing.assert_array_almost_equal((x, y, r), (1.0, 1 / math.sqrt(3), 2 / math.sqrt(3)))

    def test_enclose_contains_all_random_circles(self):
        rng = np.random.default_rng(42)
        circles = [tuple(c) for c in np.column_stack([rng.normal(size=(50, 2)), rng.uniform(0, 1, 50)])]

        x, y, r = enclose(circles)

        for cx, cy, cr in circles:
            self.assertLessEqual(math.hypot(cx - x, cy - y) + cr, r + 1e-6)

    def test_enclose_coincident_zero_circles(self):
        np.testing.assert_array_equal(enclose([(0.0, 0.0, 0.0)] * 4), (0.0, 0.0, 0.0))


class TestPackSiblings(unittest.TestCase):
    def test_pack_siblings_empty(self):
        centers, radius = pack_siblings([])

        self.assertEqual(centers.shape, (0, 2))
        self.assertEqual(radius, 0.0)

    def test_pack_siblings_single(self):
        centers, radius = pack_siblings([2.0])

        np.testing.assert_array_equal(centers, [[0.0, 0.0]])
        self.assertEqual(radius, 2.0)

    def test_pack_siblings_two_circles_touch(self):
        centers, radius = pack_siblings([1.0, 3.0])

        np.testing.assert_array_almost_equal(centers, [[-3.0, 0.0], [1.0, 0.0]])
        self.assertAlmostEqual(radius, 4.0)

    def test_pack_siblings_three_equal_circles(self):
        centers, radius = pack_siblings([1.0, 1.0, 1.0])

        self.assertAlmostEqual(radius, 1 + 2 / math.sqrt(3))
        distances = np.linalg.norm(centers[:, None] - centers[None, :], axis=-1)
        np.testing.assert_array_almost_equal(distances[np.triu_indices(3, k=1)], [2.0, 2.0, 2.0])

    def test_pack_siblings_no_overlaps_and_enclosed(self):
        rng = np.random.default_rng(7)
        radii = np.sqrt(rng.uniform(1, 100, 60))

        centers, radius = pack_siblings(radii)

        distances = np.linalg.norm(centers[:, None] - centers[None, :], axis=-1)
        iu, ju = np.triu_indices(len(radii), k=1)
        self.assertTrue(np.all(distances[iu, ju] - radii[iu] - radii[ju] >= -1e-5))
        self.assertTrue(np.all(np.linalg.norm(centers, axis=1) + radii <= radius + 1e-5))

    def test_pack_siblings_zero_radii(self):
        centers, radius = pack_siblings([0.0] * 5)

        np.testing.assert_array_equal(centers, np.zeros((5, 2)))
        self.assertEqual(radius, 0.0)

    def test_pack_siblings_is_deterministic(self):
        radii = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0]

        first = pack_siblings(radii)
        second = pack_siblings(radii)

        np.testing.assert_array_equal(first[0], second[0])
        self.assertEqual(first[1], second[1])
