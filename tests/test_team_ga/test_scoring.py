"""
Tests for wishlist scoring and harmonic-mean fitness.
"""

import math
import unittest
import numpy as np

from team_ga.data_models import Participant, Wishlist, Team
from team_ga.preferences import (
    preference_score,
    build_preference_map,
    team_satisfaction,
    satisfaction_matrix,
)
from team_ga.fitness import (
    CLAMP,
    STRICT,
    create_teams,
    harmonic_mean,
    score_candidate,
    score_population,
    evaluate_teams,
)
from team_ga.engine import build_problem


class TestPreferenceScore(unittest.TestCase):
    """Test wishlist scoring."""

    def test_ranked_partners(self):
        """Most preferred partner gets the highest score."""
        wishlist = Wishlist(owner_id=7, desired_ids=[5, 3, 1])

        self.assertEqual(preference_score(wishlist, 5), 3)
        self.assertEqual(preference_score(wishlist, 3), 2)
        self.assertEqual(preference_score(wishlist, 1), 1)

    def test_unranked_partner(self):
        """Partners missing from the wishlist score 0."""
        wishlist = Wishlist(owner_id=7, desired_ids=[5, 3, 1])
        self.assertEqual(preference_score(wishlist, 99), 0)

    def test_missing_wishlist(self):
        """No wishlist at all scores 0."""
        self.assertEqual(preference_score(None, 5), 0)
        self.assertEqual(preference_score(Wishlist(1, ()), 5), 0)

    def test_repeated_id_uses_first_rank(self):
        """A repeated ID keeps its best rank."""
        wishlist = Wishlist(owner_id=1, desired_ids=[4, 2, 4])
        self.assertEqual(wishlist.rank_of(4), 0)
        self.assertEqual(preference_score(wishlist, 4), 3)

    def test_duplicate_wishlists_rejected(self):
        """An owner may have only one wishlist."""
        with self.assertRaises(ValueError):
            build_preference_map([Wishlist(1, [2]), Wishlist(1, [3])])

    def test_team_satisfaction(self):
        """Team satisfaction adds both sides."""
        lead = Participant(1, "Lead")
        junior = Participant(10, "Junior")
        lead_prefs = build_preference_map([Wishlist(1, [11, 10])])
        junior_prefs = build_preference_map([Wishlist(10, [1])])

        self.assertEqual(team_satisfaction(Team(lead, junior), lead_prefs, junior_prefs), 1 + 1)


class TestSatisfactionMatrix(unittest.TestCase):
    """Test combined satisfaction matrix."""

    def test_matrix_entries(self):
        leads = [Participant(1, "L1"), Participant(2, "L2")]
        juniors = [Participant(3, "J1"), Participant(4, "J2")]
        lead_prefs = build_preference_map([Wishlist(1, [3, 4]), Wishlist(2, [4, 3])])
        junior_prefs = build_preference_map([Wishlist(3, [2, 1]), Wishlist(4, [1, 2])])

        matrix = satisfaction_matrix(leads, juniors, lead_prefs, junior_prefs)

        # L1-J1: 2 + 1, L1-J2: 1 + 2, L2-J1: 1 + 2, L2-J2: 2 + 1
        np.testing.assert_array_equal(matrix, [[3, 3], [3, 3]])


class TestHarmonicMean(unittest.TestCase):
    """Test harmonic mean policies."""

    def test_known_value(self):
        """[2, 4, 4] -> 3 / (1/2 + 1/4 + 1/4) = 3."""
        self.assertAlmostEqual(harmonic_mean([2, 4, 4]), 3.0)
        self.assertAlmostEqual(harmonic_mean([2, 4, 4], policy=STRICT), 3.0)

    def test_empty(self):
        self.assertEqual(harmonic_mean([]), 0.0)
        self.assertEqual(harmonic_mean([], policy=STRICT), 0.0)

    def test_strict_collapses_to_zero(self):
        """Any unsatisfied team zeroes the strict mean."""
        self.assertEqual(harmonic_mean([5, 0, 5], policy=STRICT), 0.0)

    def test_clamp_stays_finite(self):
        """Unsatisfied teams are clamped to epsilon."""
        value = harmonic_mean([5, 0, 5], policy=CLAMP, epsilon=1e-4)
        expected = 3 / (1 / 5 + 1 / 1e-4 + 1 / 5)

        self.assertTrue(math.isfinite(value))
        self.assertAlmostEqual(value, expected)
        self.assertGreater(value, 0.0)

    def test_penalizes_imbalance(self):
        """Balanced satisfactions beat a higher arithmetic mean with one unhappy team."""
        self.assertGreater(harmonic_mean([4, 4, 4]), harmonic_mean([1, 10, 10]))

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            harmonic_mean([1, 2], policy="geometric")


class TestCandidateScoring(unittest.TestCase):
    """Test candidate decoding and scoring."""

    def setUp(self):
        """Set up a 3x3 problem with mixed preferences."""
        self.leads = [Participant(1, "L1"), Participant(2, "L2"), Participant(3, "L3")]
        self.juniors = [Participant(11, "J1"), Participant(12, "J2"), Participant(13, "J3")]
        self.lead_wishlists = [
            Wishlist(1, [11, 12, 13]),
            Wishlist(2, [13, 11]),
            Wishlist(3, [12]),
        ]
        self.junior_wishlists = [
            Wishlist(11, [2, 1, 3]),
            Wishlist(12, [3, 2, 1]),
            Wishlist(13, [1]),
        ]
        self.problem = build_problem(self.leads, self.juniors, self.lead_wishlists, self.junior_wishlists)

    def test_create_teams(self):
        teams = create_teams([2, 0, 1], self.leads, self.juniors)

        self.assertEqual(len(teams), 3)
        self.assertEqual(teams[0], Team(self.leads[0], self.juniors[2]))
        self.assertEqual(teams[1], Team(self.leads[1], self.juniors[0]))
        self.assertEqual(teams[2], Team(self.leads[2], self.juniors[1]))

    def test_create_teams_skips_out_of_range(self):
        teams = create_teams([0, 5, -1], self.leads, self.juniors)
        self.assertEqual(len(teams), 1)

    def test_score_candidate_matches_teams(self):
        """Scoring a candidate equals scoring its decoded teams."""
        candidate = np.array([0, 2, 1])
        teams = create_teams(candidate, self.leads, self.juniors)

        expected = evaluate_teams(
            teams, self.problem.lead_prefs, self.problem.junior_prefs, policy=CLAMP
        )
        self.assertAlmostEqual(score_candidate(candidate, self.problem), expected)

    def test_population_scores_match_single_scores(self):
        """Vectorized scoring agrees with per-candidate scoring."""
        population = np.array([
            [0, 1, 2],
            [0, 2, 1],
            [1, 0, 2],
            [1, 2, 0],
            [2, 0, 1],
            [2, 1, 0],
            [0, 0, 0],
        ])

        for policy in (CLAMP, STRICT):
            scores = score_population(population, self.problem, policy)
            for row, score in zip(population, scores):
                self.assertAlmostEqual(score, score_candidate(row, self.problem, policy))

    def test_degenerate_empty_wishlists(self):
        """Empty wishlists on both sides keep the clamped mean finite but tiny."""
        leads = [Participant(1, "L1"), Participant(2, "L2")]
        juniors = [Participant(3, "J1"), Participant(4, "J2")]
        # L1 and J1 rank nobody
        problem = build_problem(
            leads,
            juniors,
            [Wishlist(2, [3, 4])],
            [Wishlist(4, [1, 2])],
        )

        # L1-J1 has satisfaction 0
        clamped = score_candidate([0, 1], problem, CLAMP)
        self.assertTrue(math.isfinite(clamped))
        self.assertGreater(clamped, 0.0)
        # Any all-positive pairing of two teams scores at least harmonic_mean([1, 1])
        self.assertLess(clamped, harmonic_mean([1, 1]))
        self.assertEqual(score_candidate([0, 1], problem, STRICT), 0.0)

        # L1-J2 (0 + 2) and L2-J1 (2 + 0) are both satisfied
        self.assertGreater(score_candidate([1, 0], problem, STRICT), clamped)


if __name__ == '__main__':
    unittest.main()
