#!/usr/bin/env python3

"""Tests for the p(k, t) estimates.

Tests cover:
- Exact single-round values for small k
- The universal 4^-t bound
- Monotonicity in the number of rounds
- Burthe's c(s) sequence and alternative estimate
"""

import mrbound.estimators
import mrbound.monier
import mrbound.report
import numpy as np
import unittest


SAMPLE_K = list(range(2, 40)) + [50, 64, 100, 127, 256, 512, 1000, 3000,
                                 10000]


class TestExactValues(unittest.TestCase):
    """Small bit-lengths take p(k, 1) from the Monier table."""

    def test_single_round_is_exact(self):
        for k in range(2, 25):
            self.assertEqual(mrbound.estimators.estimate(k, 1),
                             mrbound.monier.MONIER_P_K1[k],
                             "k = %d" % k)

    def test_no_odd_composites_below_four_bits(self):
        for t in range(1, 5):
            self.assertEqual(mrbound.estimators.dlp_estimate(2, t), 0.0)
            self.assertEqual(mrbound.estimators.dlp_estimate(3, t), 0.0)

    def test_monier_rabin_bound(self):
        """For k < 8 only the Monier-Rabin bound is available."""
        for k in range(4, 8):
            p1 = mrbound.monier.MONIER_P_K1[k]
            for t in range(2, 6):
                expected = 4.0 ** (1 - t) * p1 / (1.0 - p1)
                self.assertAlmostEqual(
                    mrbound.estimators.dlp_estimate(k, t) / expected, 1.0,
                    places=14)

    def test_monier_table_boundary(self):
        """The exact table covers k <= 24; k = 25 falls back to 1/4."""
        kmax = mrbound.monier.MONIER_KMAX
        self.assertEqual(mrbound.estimators.dlp_estimate(kmax, 1),
                         mrbound.monier.MONIER_P_K1[kmax])
        self.assertLessEqual(mrbound.estimators.dlp_estimate(kmax + 1, 1),
                             0.25)
        self.assertNotEqual(mrbound.estimators.dlp_estimate(kmax + 1, 1),
                            mrbound.monier.MONIER_P_K1[kmax])

    def test_degenerate_arguments(self):
        self.assertEqual(mrbound.estimators.dlp_estimate(1, 3), 1.0)
        self.assertEqual(mrbound.estimators.dlp_estimate(0, 1), 1.0)
        self.assertEqual(mrbound.estimators.dlp_estimate(100, 0), 1.0)
        self.assertEqual(mrbound.estimators.rbj_estimate(1, 3), 1.0)


class TestBounds(unittest.TestCase):

    def test_universal_bound(self):
        for k in SAMPLE_K:
            for t in range(1, 21):
                p = mrbound.estimators.dlp_estimate(k, t)
                self.assertGreaterEqual(p, 0.0)
                self.assertLessEqual(p, 4.0 ** -t, "k = %d, t = %d" % (k, t))

    def test_non_increasing_in_rounds(self):
        for k in SAMPLE_K:
            previous = mrbound.estimators.dlp_estimate(k, 1)
            for t in range(2, 31):
                p = mrbound.estimators.dlp_estimate(k, t)
                self.assertLessEqual(p, previous, "k = %d, t = %d" % (k, t))
                previous = p

    def test_refined_estimate_beats_baseline(self):
        """For large k the DLP bound is far below 4^-t."""
        p = mrbound.estimators.dlp_estimate(1000, 1)
        self.assertLess(p, 2.0 ** -20)

    def test_decreasing_in_bits(self):
        values = [mrbound.estimators.dlp_estimate(k, 2)
                  for k in range(100, 1001, 100)]
        self.assertEqual(values, sorted(values, reverse=True))


class TestComparisonTable(unittest.TestCase):

    def test_shape_and_bounds(self):
        bits = mrbound.report.comparison_table()
        self.assertEqual(bits.shape, (11, 10))
        t = np.arange(1, 11)
        self.assertTrue(np.all(bits >= 2 * t[None, :]))
        self.assertTrue(np.all(np.diff(bits, axis=1) >= 0))

    def test_format(self):
        bits = mrbound.report.comparison_table()
        text = mrbound.report.format_comparison_table(bits)
        lines = text.split('\n')
        self.assertEqual(lines[0], 'lower bounds for -lb(p(k, t))')
        self.assertTrue(lines[2].startswith('k\\t |'))
        self.assertEqual(len(lines), 4 + 11)
        self.assertTrue(lines[4].startswith('100 |'))
        self.assertTrue(lines[-1].startswith('600 |'))


class TestBurthe(unittest.TestCase):

    def test_c_sequence_matches_table(self):
        c = mrbound.estimators.c_sequence()
        self.assertEqual(len(c), len(mrbound.estimators.RBJ_C))
        np.testing.assert_allclose(c, mrbound.estimators.RBJ_C, rtol=1e-12)

    def test_c_sequence_limit(self):
        """c(s) = (s + 1) * sum_{n > s} 1/n^2 decreases towards 1."""
        c = mrbound.estimators.c_sequence(100)
        self.assertTrue(np.all(np.diff(c) < 0))
        self.assertTrue(np.all(c > 1.0))
        self.assertAlmostEqual(c[0], np.pi ** 2 / 6, places=14)

    def test_universal_bound(self):
        for k in [10, 16, 24, 25, 50, 100, 300, 600]:
            for t in range(1, 11):
                p = mrbound.estimators.rbj_estimate(k, t)
                self.assertLessEqual(p, 4.0 ** -t, "k = %d, t = %d" % (k, t))

    def test_non_increasing_in_rounds(self):
        for k in [30, 100, 250, 600]:
            values = [mrbound.estimators.rbj_estimate(k, t)
                      for t in range(1, 11)]
            self.assertEqual(values, sorted(values, reverse=True))

    def test_single_round_is_exact(self):
        for k in range(2, 25):
            self.assertEqual(mrbound.estimators.rbj_estimate(k, 1),
                             mrbound.monier.MONIER_P_K1[k])

    def test_package_exports(self):
        """The package-level function and the module stay distinct."""
        self.assertTrue(callable(mrbound.estimate))
        self.assertIs(mrbound.estimate, mrbound.estimators.dlp_estimate)
        self.assertIs(mrbound.estimate, mrbound.estimators.estimate)
        self.assertIs(mrbound.rbj_estimate, mrbound.estimators.rbj_estimate)
        self.assertIs(mrbound.ESTIMATORS, mrbound.estimators.ESTIMATORS)
        self.assertTrue(callable(mrbound.estimators.c_sequence))

    def test_registered(self):
        self.assertIs(mrbound.estimators.ESTIMATORS['dlp'],
                      mrbound.estimators.dlp_estimate)
        self.assertIs(mrbound.estimators.ESTIMATORS['rbj'],
                      mrbound.estimators.rbj_estimate)


if __name__ == '__main__':
    unittest.main()
