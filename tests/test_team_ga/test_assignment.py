"""
Tests for the optimal assignment seed.
"""

import unittest
import numpy as np

from team_ga.data_models import Participant, Wishlist
from team_ga.preferences import build_preference_map
from team_ga.assignment import (
    SizeMismatchError,
    AssignmentError,
    build_cost_matrix,
    solve_assignment,
    hungarian_seed,
)
from team_ga.repair import is_valid_permutation


class TestSolveAssignment(unittest.TestCase):
    """Test the assignment solver wrapper."""

    def test_unique_optimum(self):
        """3x3 matrix with a unique minimum-cost assignment."""
        cost = np.array([
            [4, 1, 3],
            [2, 0, 5],
            [3, 2, 2],
        ])

        permutation = solve_assignment(cost)

        np.testing.assert_array_equal(permutation, [1, 0, 2])

    def test_result_is_permutation(self):
        rng = np.random.default_rng(42)
        cost = rng.integers(-20, 0, size=(12, 12))

        permutation = solve_assignment(cost)

        self.assertTrue(is_valid_permutation(permutation))

    def test_non_square_rejected(self):
        with self.assertRaises(AssignmentError):
            solve_assignment(np.zeros((2, 3)))

    def test_invalid_entries_rejected(self):
        cost = np.array([[1.0, np.nan], [2.0, 3.0]])
        with self.assertRaises(AssignmentError):
            solve_assignment(cost)

    def test_empty_matrix(self):
        self.assertEqual(len(solve_assignment(np.zeros((0, 0)))), 0)


class TestHungarianSeed(unittest.TestCase):
    """Test seed construction from wishlists."""

    def setUp(self):
        """Three mutual first choices: L1-J2, L2-J3, L3-J1."""
        self.leads = [Participant(1, "L1"), Participant(2, "L2"), Participant(3, "L3")]
        self.juniors = [Participant(11, "J1"), Participant(12, "J2"), Participant(13, "J3")]
        self.lead_prefs = build_preference_map([
            Wishlist(1, [12, 11, 13]),
            Wishlist(2, [13, 12, 11]),
            Wishlist(3, [11, 13, 12]),
        ])
        self.junior_prefs = build_preference_map([
            Wishlist(11, [3, 1, 2]),
            Wishlist(12, [1, 2, 3]),
            Wishlist(13, [2, 3, 1]),
        ])

    def test_cost_matrix_is_negated_satisfaction(self):
        cost = build_cost_matrix(self.leads, self.juniors, self.lead_prefs, self.junior_prefs)

        self.assertEqual(cost.shape, (3, 3))
        # L1-J2: 3 + 3
        self.assertEqual(cost[0, 1], -6)
        # L1-J1: 2 + 2
        self.assertEqual(cost[0, 0], -4)

    def test_seed_finds_mutual_first_choices(self):
        seed = hungarian_seed(self.leads, self.juniors, self.lead_prefs, self.junior_prefs)
        np.testing.assert_array_equal(seed, [1, 2, 0])

    def test_size_mismatch(self):
        with self.assertRaises(SizeMismatchError):
            hungarian_seed(self.leads, self.juniors[:2], self.lead_prefs, self.junior_prefs)

    def test_size_mismatch_is_value_error(self):
        with self.assertRaises(ValueError):
            build_cost_matrix(self.leads[:1], self.juniors, self.lead_prefs, self.junior_prefs)

    def test_missing_wishlists_score_zero(self):
        """No wishlists at all still yields a valid seed."""
        seed = hungarian_seed(self.leads, self.juniors, {}, {})
        self.assertTrue(is_valid_permutation(seed))


if __name__ == '__main__':
    unittest.main()
