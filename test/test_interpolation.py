import itertools
import random
import unittest
from unittest import mock
from sharerecon import interpolation
from sharerecon.bigint import BigInt
from sharerecon.errors import (
    ArithmeticInconsistency,
    DegenerateShareSet,
    InconsistentShares,
    InsufficientShares,
    InvalidArgument,
)
from sharerecon.interpolation import Point, interpolate_at, lagrange_terms, reconstruct


def evaluate(coefficients, x):
    y = 0
    for coefficient in reversed(coefficients):
        y = y * x + coefficient
    return y


def points_from(coefficients, xs):
    return [Point(x, evaluate(coefficients, x)) for x in xs]


class ReconstructionTests(unittest.TestCase):
    def test_quadratic_secret(self):
        """p(x) = 2 + x + 2x^2 sampled at 1, 2, 3 gives back 2"""
        points = [Point(1, 5), Point(2, 12), Point(3, 23)]
        self.assertEqual(reconstruct(points, 3), 2)

    def test_points_on_x_squared_plus_four(self):
        points = [Point(1, 5), Point(2, 8), Point(3, 13)]
        self.assertEqual(reconstruct(points, 3), 4)

    def test_single_share_returns_its_value(self):
        """With k=1 the secret is the selected share's y, untouched"""
        for x in (1, 5, -3, 10 ** 6):
            for y in (0, -7, 10 ** 30, -(10 ** 27) - 1):
                self.assertEqual(reconstruct([Point(x, y)], 1), y)

    def test_random_polynomials(self):
        """Constant term is recovered exactly for integer polynomials"""
        rng = random.Random(2024)
        for k in range(1, 8):
            for _ in range(5):
                coefficients = [rng.randrange(-10 ** 30, 10 ** 30) for _ in range(k)]
                xs = rng.sample(range(1, 60), k)
                secret = reconstruct(points_from(coefficients, xs), k)
                self.assertEqual(int(secret), coefficients[0])

    def test_any_subset_gives_same_secret(self):
        coefficients = [987654321987654321, -12345, 678, 9]
        points = points_from(coefficients, range(1, 8))
        for subset in itertools.combinations(points, 4):
            self.assertEqual(int(reconstruct(list(subset), 4)), coefficients[0])

    def test_lowest_indices_are_selected(self):
        coefficients = [11, 3]
        good = points_from(coefficients, [4, 2])
        bad = Point(9, 1000)
        self.assertEqual(reconstruct([bad] + good, 2), 11)

    def test_fractional_terms_cancel(self):
        """Individual Lagrange terms may be fractions; only the sum is integral"""
        self.assertEqual(reconstruct([Point(1, 1), Point(3, 3)], 2), 0)
        coefficients = [-5, 7, 0, 3]
        points = points_from(coefficients, [1, 3, 4, 8])
        self.assertEqual(reconstruct(points, 4), -5)

    def test_negative_indices(self):
        coefficients = [42, -1, 6]
        points = points_from(coefficients, [-2, -1, 1])
        self.assertEqual(reconstruct(points, 3), 42)

    def test_negative_and_multi_limb_secret(self):
        secret = -(10 ** 40) - 123456789
        coefficients = [secret, 10 ** 25, -77]
        points = points_from(coefficients, [1, 2, 3])
        self.assertEqual(str(reconstruct(points, 3)), str(secret))

    def test_insufficient_shares(self):
        with mock.patch.object(interpolation, "interpolate_at") as interpolate:
            with self.assertRaises(InsufficientShares) as ctx:
                reconstruct([Point(1, 5), Point(2, 8)], 3)
            interpolate.assert_not_called()
        self.assertEqual(ctx.exception.required, 3)
        self.assertEqual(ctx.exception.supplied, 2)
        with self.assertRaises(ValueError):
            reconstruct([], 1)

    def test_invalid_threshold(self):
        for k in (0, -1, "3", True):
            with self.assertRaises(InvalidArgument):
                reconstruct([Point(1, 5)], k)

    def test_duplicate_index_is_degenerate(self):
        points = [Point(1, 5), Point(1, 6), Point(2, 7)]
        with self.assertRaises(DegenerateShareSet) as ctx:
            reconstruct(points, 3)
        self.assertEqual(ctx.exception.x, 1)

    def test_duplicate_outside_selection_is_ignored(self):
        points = points_from([8, 1], [1, 2]) + [Point(5, 0), Point(5, 1)]
        self.assertEqual(reconstruct(points, 2), 8)

    def test_non_integral_result_is_reported(self):
        """Points on a line through (0, 1/2) cannot give an integer secret"""
        with self.assertRaises(ArithmeticInconsistency):
            reconstruct([Point(1, 1), Point(3, 2)], 2)

    def test_cross_check_accepts_consistent_shares(self):
        points = points_from([2, 1, 2], range(1, 6))
        self.assertEqual(reconstruct(points, 3, cross_check=True), 2)

    def test_cross_check_reports_tampered_shares(self):
        points = points_from([2, 1, 2], range(1, 6))
        points[3] = Point(4, 0)
        points.append(Point(7, 1))
        with self.assertRaises(InconsistentShares) as ctx:
            reconstruct(points, 3, cross_check=True)
        self.assertEqual(ctx.exception.xs, [4, 7])
        self.assertEqual(reconstruct(points, 3), 2)

    def test_cross_check_with_non_integral_polynomial(self):
        """p(x) = (x - 2) / 2 is integral at 0 but not at 5"""
        points = [Point(2, 0), Point(4, 1), Point(5, 2)]
        self.assertEqual(reconstruct(points, 2), -1)
        with self.assertRaises(InconsistentShares) as ctx:
            reconstruct(points, 2, cross_check=True)
        self.assertEqual(ctx.exception.xs, [5])


class LagrangeTermTests(unittest.TestCase):
    def test_interpolate_at_other_points(self):
        coefficients = [2, 1, 2]
        points = points_from(coefficients, [1, 2, 3])
        self.assertEqual(interpolate_at(points, 4), evaluate(coefficients, 4))
        self.assertEqual(interpolate_at(points, 2), 12)

    def test_terms_for_single_point(self):
        terms = lagrange_terms([Point(7, 99)])
        self.assertEqual(len(terms), 1)
        self.assertEqual(terms[0].numerator, 99)
        self.assertEqual(terms[0].denominator, 1)

    def test_terms_hold_signed_denominators(self):
        terms = lagrange_terms([Point(1, 1), Point(3, 3)])
        self.assertEqual([t.denominator for t in terms], [-2, 2])
        self.assertEqual([int(t.numerator) for t in terms], [-3, -3])

    def test_large_coefficients_do_not_overflow(self):
        """Share indices whose coefficient products exceed 64 bits"""
        coefficients = [31337, 5, -2, 9, 1, 4, 8, 3, 6, 2, 7, 1]
        xs = [10 ** 6 + i * 99991 for i in range(len(coefficients))]
        points = points_from(coefficients, xs)
        self.assertEqual(reconstruct(points, len(coefficients)), 31337)

    def test_point_accepts_native_values(self):
        point = Point(3, 10 ** 20)
        self.assertIsInstance(point.y, BigInt)
        self.assertEqual(point.y, 10 ** 20)
        with self.assertRaises(InvalidArgument):
            Point("3", 1)


if __name__ == '__main__':
    unittest.main()
