"""
Fitness evaluation.

A candidate is scored by the harmonic mean of its teams' combined
satisfaction. Two policies handle unsatisfied teams (satisfaction <= 0):

- "clamp": replace with a small epsilon. Used while searching, so scores
  stay finite and comparable while still punishing such candidates hard.
- "strict": the whole mean collapses to 0. Used when reporting results.
"""

from typing import Dict, Iterable, List, Sequence
import numpy as np

from .data_models import Participant, Team, Wishlist, MatchingProblem
from .preferences import team_satisfaction

CLAMP = "clamp"
STRICT = "strict"
DEFAULT_EPSILON = 1e-4


def create_teams(
    candidate: Sequence[int],
    leads: Sequence[Participant],
    juniors: Sequence[Participant]
) -> List[Team]:
    """
    Decode a candidate into teams.

    Args:
        candidate: Junior index for each lead index
        leads: Team leads
        juniors: Juniors

    Returns:
        One team per lead whose junior index is in range
    """
    teams = []
    for i, j in enumerate(candidate):
        j = int(j)
        if 0 <= j < len(juniors):
            teams.append(Team(leads[i], juniors[j]))
    return teams


def harmonic_mean(
    values: Iterable[float],
    policy: str = CLAMP,
    epsilon: float = DEFAULT_EPSILON
) -> float:
    """
    Harmonic mean of satisfactions.

    Args:
        values: Per-team satisfactions
        policy: "clamp" or "strict" handling of values <= 0
        epsilon: Replacement value under the clamp policy

    Returns:
        count / sum(1 / value); 0.0 for no values

    Example:
        harmonic_mean([2, 4, 4]) == 3.0
    """
    values = np.asarray(list(values), dtype=float)
    if values.size == 0:
        return 0.0

    if policy == STRICT:
        if np.any(values <= 0):
            return 0.0
    elif policy == CLAMP:
        values = np.where(values > 0, values, epsilon)
    else:
        raise ValueError(f"Unknown scoring policy: {policy}")

    return float(values.size / np.sum(1.0 / values))


def pair_satisfactions(candidate: Sequence[int], problem: MatchingProblem) -> np.ndarray:
    """Satisfaction of each team in a candidate, skipping out-of-range indices."""
    candidate = np.asarray(candidate, dtype=np.int64)
    rows = np.arange(candidate.size)
    in_range = (candidate >= 0) & (candidate < problem.size)
    return problem.satisfaction[rows[in_range], candidate[in_range]]


def score_candidate(
    candidate: Sequence[int],
    problem: MatchingProblem,
    policy: str = CLAMP,
    epsilon: float = DEFAULT_EPSILON
) -> float:
    """
    Score one candidate.

    Args:
        candidate: Junior index for each lead index
        problem: Matching problem with precomputed satisfaction matrix
        policy: "clamp" or "strict"
        epsilon: Replacement value under the clamp policy

    Returns:
        Harmonic mean of the candidate's team satisfactions
    """
    return harmonic_mean(pair_satisfactions(candidate, problem), policy, epsilon)


def score_population(
    population: np.ndarray,
    problem: MatchingProblem,
    policy: str = CLAMP,
    epsilon: float = DEFAULT_EPSILON
) -> np.ndarray:
    """
    Score every row of a population at once.

    Args:
        population: Integer array of shape (P, n), all indices in range
        problem: Matching problem with precomputed satisfaction matrix
        policy: "clamp" or "strict"
        epsilon: Replacement value under the clamp policy

    Returns:
        Float array of P scores, equal to score_candidate() row by row
    """
    population = np.asarray(population, dtype=np.int64)
    num_candidates, n = population.shape

    if n == 0:
        return np.zeros(num_candidates)

    rows = np.arange(n)
    values = problem.satisfaction[rows, population].astype(float)

    if policy == STRICT:
        unsatisfied = np.any(values <= 0, axis=1)
        values = np.where(values > 0, values, 1.0)
        scores = n / np.sum(1.0 / values, axis=1)
        scores[unsatisfied] = 0.0
        return scores
    elif policy == CLAMP:
        values = np.where(values > 0, values, epsilon)
        return n / np.sum(1.0 / values, axis=1)
    else:
        raise ValueError(f"Unknown scoring policy: {policy}")


def evaluate_teams(
    teams: Sequence[Team],
    lead_prefs: Dict[int, Wishlist],
    junior_prefs: Dict[int, Wishlist],
    policy: str = STRICT,
    epsilon: float = DEFAULT_EPSILON
) -> float:
    """
    Score an already-built set of teams.

    Defaults to the strict policy, matching how finished pairings are
    reported.
    """
    satisfactions = [team_satisfaction(t, lead_prefs, junior_prefs) for t in teams]
    return harmonic_mean(satisfactions, policy, epsilon)
